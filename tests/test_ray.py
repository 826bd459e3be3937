import math

import pytest

from raytracer.ray import FactorRange, Ray
from raytracer.vector import Vec3


ORIGIN = Vec3(1.0, 2.0, 3.0)
DIRECTION = Vec3(0.5, -1.0, 2.0)


def test_point_at_zero_is_origin():
    assert Ray(ORIGIN, DIRECTION).point_at_parameter(0.0) == ORIGIN


def test_point_at_one_is_origin_plus_direction():
    ray = Ray(ORIGIN, DIRECTION)
    assert tuple(ray.point_at_parameter(1.0)) == pytest.approx(tuple(ORIGIN + DIRECTION))


def test_point_at_parameter_is_linear():
    ray = Ray(ORIGIN, DIRECTION)
    expected = ORIGIN + DIRECTION + DIRECTION
    assert tuple(ray.point_at_parameter(2.0)) == pytest.approx(tuple(expected))


def test_surrounds_is_open_interval():
    r = FactorRange(0.0, 1.0)
    assert r.surrounds(0.5)
    assert not r.surrounds(0.0)
    assert not r.surrounds(1.0)
    assert not r.surrounds(-0.1)


def test_surrounds_with_infinite_upper_bound():
    r = FactorRange(0.001, math.inf)
    assert r.surrounds(1e300)
    assert not r.surrounds(math.inf)


@pytest.mark.parametrize(
    "value, expected",
    [(-5.0, -1.0), (5.0, 2.0), (0.25, 0.25)],
)
def test_clamp(value, expected):
    assert FactorRange(-1.0, 2.0).clamp(value) == expected


def test_constructor_order_is_min_then_max():
    r = FactorRange(1.0, 3.0)
    assert (r.min, r.max) == (1.0, 3.0)