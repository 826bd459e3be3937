"""The demo scene and the command that renders it."""

from __future__ import annotations

import argparse
import random
from dataclasses import replace
from typing import Optional, Sequence

from raytracer.camera import Camera, CameraParams
from raytracer.hitable import HitableList, Sphere
from raytracer.material import Dielectric, Lambertian, Material, Metal
from raytracer.vector import Vec3


def _random_color(rng: random.Random, low: float, high: float) -> Vec3:
    span = high - low
    return Vec3(
        low + span * rng.random(),
        low + span * rng.random(),
        low + span * rng.random(),
    )


def random_scene(rng: random.Random) -> HitableList:
    """A ground plane, four large spheres and a field of small random spheres."""
    world = HitableList()
    world.push(Sphere(Vec3(0.0, -100000.0, -1.0), 100000.0, Lambertian(Vec3(1.0, 0.4, 0.4))))

    main_spheres = [
        (Vec3(0.0, 1.0, 0.0), 1.0, Dielectric(1.5)),
        (Vec3(0.0, 1.0, 0.0), 0.95, Dielectric(1.0 / 1.5)),
        (Vec3(-4.0, 1.0, 0.0), 1.0, Lambertian(Vec3(0.1, 0.2, 0.5))),
        (Vec3(4.0, 1.0, 0.0), 1.0, Metal(Vec3(0.8, 0.6, 0.2), 0.1)),
    ]
    for center, radius, material in main_spheres:
        world.push(Sphere(center, radius, material))

    keep_clear = Vec3(4.0, 0.2, 0.0)
    for a in range(-12, 6):
        for b in range(-10, 6):
            choose_mat = rng.random()
            size = 0.17 + 0.08 * rng.random()
            center = Vec3(1.8 * a + 1.5 * rng.random(), size, 1.8 * b + 1.5 * rng.random())
            if (center - keep_clear).length() <= 0.9:
                continue

            material: Material
            if choose_mat < 0.8:
                material = Lambertian(_random_color(rng, 0.3, 1.0))
            elif choose_mat < 0.95:
                material = Metal(_random_color(rng, 0.3, 1.0), rng.random() * 0.5)
            else:
                material = Dielectric(1.5)
            world.push(Sphere(center, size, material))
    return world


def default_camera_params() -> CameraParams:
    """Camera settings for the demo scene."""
    return CameraParams(
        aspect_ratio=16.0 / 9.0,
        image_width=1024,
        samples_per_pixel=200,
        max_depth=30,
        vertical_fov=25.0,
        look_from=Vec3(13.0, 5.0, 4.0),
        look_at=Vec3(0.0, 0.0, 0.0),
        view_up=Vec3(0.0, 1.0, 0.0),
        defocus_angle=0.6,
        focus_distance=14.5,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the demo scene to an image file."""
    defaults = default_camera_params()
    parser = argparse.ArgumentParser(description="Render the demo sphere scene.")
    parser.add_argument("--output", default="output.png", help="image file to write")
    parser.add_argument("--width", type=int, default=defaults.image_width)
    parser.add_argument("--samples", type=int, default=defaults.samples_per_pixel)
    parser.add_argument("--max-depth", type=int, default=defaults.max_depth)
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    world = random_scene(rng)
    params = replace(
        defaults,
        image_width=args.width,
        samples_per_pixel=args.samples,
        max_depth=args.max_depth,
    )
    Camera(params, rng).render(world, args.output)
    return 0