"""Rays and the parameter intervals along them."""

from __future__ import annotations

from dataclasses import dataclass

from raytracer.vector import Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    """A half-line starting at ``origin`` heading along ``direction``."""

    origin: Vec3
    direction: Vec3

    def point_at_parameter(self, t: float) -> Vec3:
        return self.origin + self.direction * t


@dataclass(frozen=True, slots=True)
class FactorRange:
    """An open interval of ray parameters."""

    min: float
    max: float

    def clamp(self, value: float) -> float:
        return min(max(value, self.min), self.max)

    def surrounds(self, value: float) -> bool:
        return self.min < value < self.max