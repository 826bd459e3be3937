"""Camera model and renderer."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional

from PIL import Image

from raytracer.hitable import Hitable
from raytracer.ray import FactorRange, Ray
from raytracer.vector import Vec3

_WHITE = Vec3(1.0, 1.0, 1.0)
_SKY_BLUE = Vec3(0.5, 0.7, 1.0)
_BLACK = Vec3(0.0, 0.0, 0.0)
_HIT_RANGE = FactorRange(0.001, math.inf)


@dataclass(frozen=True)
class CameraParams:
    """Settings describing the image and the view."""

    aspect_ratio: float
    image_width: int
    samples_per_pixel: int
    max_depth: int
    vertical_fov: float
    look_from: Vec3
    look_at: Vec3
    view_up: Vec3
    defocus_angle: float
    focus_distance: float


def _to_byte(component: float) -> int:
    gamma = min(max(math.sqrt(max(component, 0.0)), 0.0), 0.999)
    return int(256.0 * gamma)


def _sky(ray: Ray) -> Vec3:
    unit_direction = ray.direction.normalize()
    ratio_y = 0.5 * (unit_direction.y + 1.0)
    return _WHITE * (1.0 - ratio_y) + _SKY_BLUE * ratio_y


class Camera:
    """A thin-lens camera producing RGB images of a world."""

    def __init__(self, params: CameraParams, rng: Optional[random.Random] = None) -> None:
        if params.samples_per_pixel < 1:
            raise ValueError("samples_per_pixel must be at least 1")
        self.rng = rng if rng is not None else random.Random()

        self.image_width = params.image_width
        self.image_height = max(1, math.floor(params.image_width / params.aspect_ratio))
        self.samples_per_pixel = params.samples_per_pixel
        self.max_depth = params.max_depth
        self.defocus_angle = params.defocus_angle
        self.center = params.look_from

        theta = math.radians(params.vertical_fov)
        viewport_height = 2.0 * math.tan(theta / 2.0) * params.focus_distance
        viewport_width = viewport_height * (self.image_width / self.image_height)

        w = (params.look_from - params.look_at).normalize()
        u = params.view_up.cross(w).normalize()
        v = w.cross(u)

        viewport_u = u * viewport_width
        viewport_v = -v * viewport_height
        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        upper_left = self.center - w * params.focus_distance - (viewport_u + viewport_v) * 0.5
        self.pixel00_loc = upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5
        self.pixel_samples_scale = 1.0 / self.samples_per_pixel

        defocus_radius = params.focus_distance * math.tan(math.radians(params.defocus_angle / 2.0))
        self.defocus_disk_u = u * defocus_radius
        self.defocus_disk_v = v * defocus_radius

    def get_ray(self, i: float, j: float) -> Ray:
        """A jittered ray through pixel column ``i``, row ``j``."""
        pixel_sample = (
            self.pixel00_loc
            + self.pixel_delta_u * (i + self.rng.random() - 0.5)
            + self.pixel_delta_v * (j + self.rng.random() - 0.5)
        )
        if self.defocus_angle <= 0.0:
            origin = self.center
        else:
            disk = Vec3.random_in_unit_disk(self.rng)
            origin = self.center + self.defocus_disk_u * disk.x + self.defocus_disk_v * disk.y
        return Ray(origin, pixel_sample - origin)

    def ray_color(self, ray: Ray, depth: int, world: Hitable) -> Vec3:
        """Colour seen along ``ray`` after at most ``depth`` bounces."""
        throughput = _WHITE
        for _ in range(depth):
            record = world.hit(ray, _HIT_RANGE)
            if record is None:
                return throughput.mul(_sky(ray))
            scattered = record.material.scatter(ray, record, self.rng)
            if scattered is None:
                return _BLACK
            ray, attenuation = scattered
            throughput = throughput.mul(attenuation)
        return _BLACK

    def _pixel(self, i: int, j: int, world: Hitable) -> bytes:
        total = _BLACK
        for _ in range(self.samples_per_pixel):
            total = total + self.ray_color(self.get_ray(i, j), self.max_depth, world)
        color = total * self.pixel_samples_scale
        return bytes(_to_byte(c) for c in color)

    def render_pixels(self, world: Hitable) -> bytes:
        """Render the world to row-major 8-bit RGB bytes."""
        return b"".join(
            self._pixel(i, j, world)
            for j in range(self.image_height)
            for i in range(self.image_width)
        )

    def render(self, world: Hitable, path: str = "output.png") -> None:
        """Render the world and save it as an image at ``path``."""
        data = self.render_pixels(world)
        image = Image.frombytes("RGB", (self.image_width, self.image_height), data)
        image.save(path)