"""Three-dimensional vectors used for points, directions and normals."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vector:
    """An immutable 3D vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vector) -> float:
        """Scalar product of two vectors."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        """Euclidean magnitude."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vector:
        """Unit vector in the same direction.

        A zero vector has no direction and yields NaN components.
        """
        size = self.length()
        if size == 0:
            return Vector(math.nan, math.nan, math.nan)
        return Vector(self.x / size, self.y / size, self.z / size)

    def projection(self, axis: Vector) -> Vector:
        """Component of this vector along ``axis`` (assumed unit length)."""
        return axis * self.dot(axis)

    def perpendicular(self, axis: Vector) -> Vector:
        """Component of this vector orthogonal to ``axis`` (assumed unit length)."""
        return self - self.projection(axis)

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vector:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vector(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)