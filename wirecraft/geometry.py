"""Projection, rotation and clipping helpers for the wireframe renderer."""

from __future__ import annotations

import math
from typing import Optional

from wirecraft.math3d import Vec3

NEAR_PLANE = 1.0


def project(p: Vec3, width: float, height: float, fov: float) -> tuple[float, float]:
    """Project a view-space point onto the screen, centred in a width x height area."""
    z = max(p.z, NEAR_PLANE)
    factor = fov / z
    return (p.x * factor + width * 0.5, -p.y * factor + height * 0.5)


def rotate_x(v: Vec3, angle: float) -> Vec3:
    """Rotate ``v`` about the X axis by ``angle`` radians."""
    c, s = math.cos(angle), math.sin(angle)
    return Vec3(v.x, v.y * c - v.z * s, v.y * s + v.z * c)


def rotate_y(v: Vec3, angle: float) -> Vec3:
    """Rotate ``v`` about the Y axis by ``angle`` radians."""
    c, s = math.cos(angle), math.sin(angle)
    return Vec3(v.x * c - v.z * s, v.y, v.x * s + v.z * c)


def clip_to_near_plane(a: Vec3, b: Vec3) -> Optional[tuple[Vec3, Vec3]]:
    """Clip segment ``a``-``b`` against the near plane.

    Returns the (possibly shortened) segment, or None when it lies wholly
    behind the plane.
    """
    a_visible = a.z > NEAR_PLANE
    b_visible = b.z > NEAR_PLANE
    if not a_visible and not b_visible:
        return None
    if a_visible and b_visible:
        return a, b

    behind, in_front = (b, a) if a_visible else (a, b)
    t = (NEAR_PLANE - behind.z) / (in_front.z - behind.z)
    clipped = Vec3(
        behind.x + (in_front.x - behind.x) * t,
        behind.y + (in_front.y - behind.y) * t,
        NEAR_PLANE,
    )
    return (a, clipped) if a_visible else (clipped, b)


def yaw_forward(yaw: float) -> Vec3:
    """Horizontal forward direction for a yaw angle."""
    return Vec3(-math.sin(yaw), 0.0, math.cos(yaw))


def yaw_right(yaw: float) -> Vec3:
    """Horizontal right direction for a yaw angle."""
    return Vec3(math.cos(yaw), 0.0, math.sin(yaw))