"""Objects that rays can hit."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from raytracer.material import Lambertian, Material
from raytracer.ray import FactorRange, Ray
from raytracer.vector import Vec3


@dataclass
class HitRecord:
    """Where and how a ray met a surface."""

    source_point: Vec3 = field(default_factory=Vec3)
    ray_factor: float = 0.0
    normal: Vec3 = field(default_factory=Vec3)
    material: Material = field(default_factory=lambda: Lambertian(Vec3()))
    front_face: bool = False


class Hitable(ABC):
    """Anything that can be intersected with a ray."""

    @abstractmethod
    def hit(self, ray: Ray, factor_range: FactorRange) -> Optional[HitRecord]:
        """Return the nearest hit within ``factor_range``, or None."""


class HitableList(Hitable):
    """A collection of hitables answering with the closest hit."""

    def __init__(self) -> None:
        self._items: List[Hitable] = []

    def push(self, hitable: Hitable) -> None:
        self._items.append(hitable)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Hitable]:
        return iter(self._items)

    def hit(self, ray: Ray, factor_range: FactorRange) -> Optional[HitRecord]:
        closest_so_far = factor_range.max
        record = None
        for hitable in self._items:
            found = hitable.hit(ray, FactorRange(factor_range.min, closest_so_far))
            if found is not None:
                closest_so_far = found.ray_factor
                record = found
        return record


@dataclass(frozen=True)
class Sphere(Hitable):
    """A sphere with a single material."""

    center: Vec3
    radius: float
    material: Material

    def hit(self, ray: Ray, factor_range: FactorRange) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c
        if discriminant < 0.0:
            return None

        sqrtd = math.sqrt(discriminant)
        root = (-half_b - sqrtd) / a
        if not factor_range.surrounds(root):
            root = (-half_b + sqrtd) / a
            if not factor_range.surrounds(root):
                return None

        point = ray.point_at_parameter(root)
        normal = (point - self.center) / self.radius
        front_face = ray.direction.dot(normal) <= 0.0
        return HitRecord(
            source_point=point,
            ray_factor=root,
            normal=normal if front_face else -normal,
            material=self.material,
            front_face=front_face,
        )