"""Three-component vector used for points, directions and colours."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vec3:
        if isinstance(scalar, Vec3):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        if isinstance(scalar, Vec3):
            return NotImplemented
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vec3) -> float:
        """Scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Vector product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> Vec3:
        """Return the unit vector pointing the same way."""
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return self / length

    def mul(self, other: Vec3) -> Vec3:
        """Component-wise product."""
        return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)

    @staticmethod
    def random_in_unit_sphere(rng: random.Random) -> Vec3:
        """Uniform sample strictly inside the unit sphere."""
        while True:
            sample = Vec3(
                rng.random() * 2.0 - 1.0,
                rng.random() * 2.0 - 1.0,
                rng.random() * 2.0 - 1.0,
            )
            if sample.length_squared() < 1.0:
                return sample

    @staticmethod
    def random_in_unit_disk(rng: random.Random) -> Vec3:
        """Uniform sample strictly inside the unit disk in the z = 0 plane."""
        while True:
            sample = Vec3(rng.random() * 2.0 - 1.0, rng.random() * 2.0 - 1.0, 0.0)
            if sample.length_squared() < 1.0:
                return sample