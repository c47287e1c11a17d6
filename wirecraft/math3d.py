"""Small 3D vector type and the default camera description."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float
    y: float
    z: float

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vec3:
        return self.__mul__(scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z


def dot(a: Vec3, b: Vec3) -> float:
    """Return the dot product of two vectors."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Return the cross product ``a x b``."""
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def normalize(v: Vec3) -> Vec3:
    """Return ``v`` scaled to unit length.

    Raises ValueError for a zero-length vector.
    """
    length = math.sqrt(dot(v, v))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return Vec3(v.x / length, v.y / length, v.z / length)


@dataclass
class Camera:
    """A simple perspective camera description."""

    position: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, -5.0))
    fov: float = 90.0
    near_plane: float = 0.1
    far_plane: float = 100.0