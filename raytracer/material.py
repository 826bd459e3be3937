"""Surface materials and how they scatter incoming rays."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple, Union

from raytracer.ray import Ray
from raytracer.vector import Vec3

if TYPE_CHECKING:
    from raytracer.hitable import HitRecord

Scatter = Optional[Tuple[Ray, Vec3]]

_TINY = 0.0001


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """Mirror ``v`` about the surface with normal ``n``."""
    return v - n * (2.0 * v.dot(n))


def refract(uv: Vec3, n: Vec3, etai_over_etat: float) -> Vec3:
    """Bend unit vector ``uv`` through a surface with normal ``n`` (Snell's law)."""
    cos_theta = min((-uv).dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel


def reflectance(cosine: float, refraction_index: float) -> float:
    """Schlick's approximation of reflectance."""
    r0 = (1.0 - refraction_index) / (1.0 + refraction_index)
    r0 *= r0
    return r0 + (1.0 - r0) * (1.0 - cosine) ** 5


def _random_unit_vector(rng: random.Random) -> Optional[Vec3]:
    sample = Vec3.random_in_unit_sphere(rng)
    if sample.length() < _TINY:
        return None
    return sample.normalize()


@dataclass(frozen=True)
class Lambertian:
    """Diffuse surface."""

    albedo: Vec3

    def scatter(self, ray: Ray, record: HitRecord, rng: random.Random) -> Scatter:
        direction = _random_unit_vector(rng)
        if direction is None:
            direction = record.normal
        return Ray(record.source_point, record.normal + direction), self.albedo


@dataclass(frozen=True)
class Metal:
    """Reflective surface with optional fuzz."""

    albedo: Vec3
    fuzz: float

    def scatter(self, ray: Ray, record: HitRecord, rng: random.Random) -> Scatter:
        reflected = reflect(ray.direction, record.normal).normalize()
        fuzz_direction = Vec3.random_in_unit_sphere(rng)
        if fuzz_direction.length() >= _TINY:
            fuzz_direction = fuzz_direction.normalize()
        reflected = reflected + fuzz_direction * self.fuzz
        return Ray(record.source_point, reflected), self.albedo


@dataclass(frozen=True)
class Dielectric:
    """Transparent surface such as glass or water."""

    refraction_index: float

    def scatter(self, ray: Ray, record: HitRecord, rng: random.Random) -> Scatter:
        ratio = 1.0 / self.refraction_index if record.front_face else self.refraction_index
        unit_direction = ray.direction.normalize()
        cos_theta = min((-unit_direction).dot(record.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)
        cannot_refract = ratio * sin_theta > 1.0

        if cannot_refract or reflectance(cos_theta, ratio) > rng.random():
            direction = reflect(unit_direction, record.normal)
        else:
            direction = refract(unit_direction, record.normal, ratio)
        return Ray(record.source_point, direction), Vec3(1.0, 1.0, 1.0)


Material = Union[Lambertian, Metal, Dielectric]