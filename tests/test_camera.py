import random

import pytest
from PIL import Image

from raytracer.camera import Camera, CameraParams
from raytracer.hitable import HitableList, Sphere
from raytracer.material import Lambertian
from raytracer.ray import Ray
from raytracer.vector import Vec3


def _params(**overrides):
    values = dict(
        aspect_ratio=2.0,
        image_width=6,
        samples_per_pixel=2,
        max_depth=3,
        vertical_fov=20.0,
        look_from=Vec3(0.0, 0.0, 0.0),
        look_at=Vec3(0.0, 0.0, -1.0),
        view_up=Vec3(0.0, 1.0, 0.0),
        defocus_angle=0.0,
        focus_distance=5.0,
    )
    values.update(overrides)
    return CameraParams(**values)


def test_image_height_is_at_least_one():
    camera = Camera(_params(image_width=1, aspect_ratio=16.0 / 9.0), random.Random(0))
    assert camera.image_height == 1


def test_zero_samples_rejected():
    with pytest.raises(ValueError):
        Camera(_params(samples_per_pixel=0))


def test_pinhole_rays_start_at_look_from():
    look_from = Vec3(1.0, 2.0, 3.0)
    camera = Camera(_params(look_from=look_from, look_at=Vec3(0, 0, 0)), random.Random(1))
    for i in range(camera.image_width):
        assert camera.get_ray(i, 0).origin == look_from


def test_defocus_origins_lie_in_lens_plane():
    look_from = Vec3(1.0, 2.0, 3.0)
    look_at = Vec3(0.0, 0.0, 0.0)
    camera = Camera(
        _params(look_from=look_from, look_at=look_at, defocus_angle=10.0),
        random.Random(2),
    )
    forward = (look_at - look_from).normalize()
    origins = [camera.get_ray(1, 1).origin for _ in range(30)]
    assert all((o - look_from).dot(forward) == pytest.approx(0.0, abs=1e-9) for o in origins)
    assert any(o != look_from for o in origins)


def test_center_pixel_looks_forward():
    camera = Camera(_params(image_width=3, aspect_ratio=1.0), random.Random(3))
    ray = camera.get_ray(1, 1)
    assert ray.direction.normalize().dot(Vec3(0.0, 0.0, -1.0)) > 0.99


def test_zero_depth_is_black():
    camera = Camera(_params(), random.Random(4))
    ray = Ray(Vec3(), Vec3(0.0, 1.0, 0.0))
    assert camera.ray_color(ray, 0, HitableList()) == Vec3(0.0, 0.0, 0.0)


def test_sky_gradient_endpoints():
    camera = Camera(_params(), random.Random(4))
    up = camera.ray_color(Ray(Vec3(), Vec3(0.0, 1.0, 0.0)), 5, HitableList())
    down = camera.ray_color(Ray(Vec3(), Vec3(0.0, -1.0, 0.0)), 5, HitableList())
    assert tuple(up) == pytest.approx((0.5, 0.7, 1.0))
    assert tuple(down) == pytest.approx((1.0, 1.0, 1.0))


def test_empty_world_pixels_have_full_blue():
    camera = Camera(_params(), random.Random(5))
    data = camera.render_pixels(HitableList())
    assert len(data) == camera.image_width * camera.image_height * 3
    assert set(data[2::3]) == {255}


def test_black_sphere_renders_black():
    world = HitableList()
    world.push(Sphere(Vec3(0.0, 0.0, -10.0), 9.0, Lambertian(Vec3(0.0, 0.0, 0.0))))
    camera = Camera(_params(vertical_fov=10.0), random.Random(6))
    data = camera.render_pixels(world)
    assert data == bytes(len(data))
    assert len(data) == camera.image_width * camera.image_height * 3


def test_render_is_reproducible_with_seed():
    world = HitableList()
    world.push(Sphere(Vec3(0.0, 0.0, -5.0), 1.0, Lambertian(Vec3(0.5, 0.2, 0.1))))
    first = Camera(_params(), random.Random(9)).render_pixels(world)
    second = Camera(_params(), random.Random(9)).render_pixels(world)
    assert first == second


def test_render_writes_png(tmp_path):
    world = HitableList()
    world.push(Sphere(Vec3(0.0, 0.0, -5.0), 1.0, Lambertian(Vec3(0.5, 0.2, 0.1))))
    path = tmp_path / "out.png"
    camera = Camera(_params(), random.Random(10))
    camera.render(world, str(path))
    expected = Camera(_params(), random.Random(10)).render_pixels(world)
    with Image.open(path) as image:
        assert image.size == (camera.image_width, camera.image_height)
        assert image.mode == "RGB"
        assert image.tobytes() == expected