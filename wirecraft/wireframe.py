"""World-space wireframe shapes and their projection onto the screen."""

from __future__ import annotations

import math
from typing import Optional

from wirecraft.geometry import clip_to_near_plane, project, rotate_y
from wirecraft.math3d import Vec3, cross, normalize
from wirecraft.scene import Scene

Segment = tuple[Vec3, Vec3]
ScreenSegment = tuple[tuple[float, float], tuple[float, float]]

FOCAL_LENGTH = 400.0
SPHERE_SECTORS = 36
SPHERE_STACKS = 18

_EPSILON = 0.0001
_UP = Vec3(0.0, 1.0, 0.0)

_CUBE_EDGES = (
    (0, 1), (1, 2), (2, 3), (3, 0),
    (4, 5), (5, 6), (6, 7), (7, 4),
    (0, 4), (1, 5), (2, 6), (3, 7),
)


def cube_segments(cx: float, cy: float, cz: float, size: float, angle_y: float) -> list[Segment]:
    """The 12 edges of a cube of half-size ``size``, rotated about the world Y axis."""
    corners = [
        Vec3(cx - size, cy - size, cz - size),
        Vec3(cx + size, cy - size, cz - size),
        Vec3(cx + size, cy + size, cz - size),
        Vec3(cx - size, cy + size, cz - size),
        Vec3(cx - size, cy - size, cz + size),
        Vec3(cx + size, cy - size, cz + size),
        Vec3(cx + size, cy + size, cz + size),
        Vec3(cx - size, cy + size, cz + size),
    ]
    rotated = [rotate_y(p, angle_y) for p in corners]
    return [(rotated[a], rotated[b]) for a, b in _CUBE_EDGES]


def sphere_segments(
    x: float, y: float, z: float, nx: float, ny: float, nz: float, radius: float
) -> list[Segment]:
    """Latitude rings and meridians of a sphere whose pole points along the normal.

    A zero normal means world up; a non-positive radius yields no segments.
    """
    if radius <= 0.0:
        return []

    center = Vec3(x, y, z)
    if abs(nx) < _EPSILON and abs(ny) < _EPSILON and abs(nz) < _EPSILON:
        normal = _UP
    else:
        normal = normalize(Vec3(nx, ny, nz))
    helper = Vec3(1.0, 0.0, 0.0) if abs(normal.y) > 0.99 else _UP
    tangent = normalize(cross(helper, normal))
    bitangent = cross(normal, tangent)

    def point(phi: float, theta: float) -> Vec3:
        sin_phi = math.sin(phi)
        return (
            center
            + tangent * (radius * sin_phi * math.cos(theta))
            + bitangent * (radius * sin_phi * math.sin(theta))
            + normal * (radius * math.cos(phi))
        )

    segments: list[Segment] = []
    previous: list[Vec3] = []
    for stack in range(SPHERE_STACKS + 1):
        phi = math.pi * stack / SPHERE_STACKS
        ring = [
            point(phi, 2.0 * math.pi * sector / SPHERE_SECTORS)
            for sector in range(SPHERE_SECTORS + 1)
        ]
        for sector, current in enumerate(ring):
            if sector > 0:
                segments.append((ring[sector - 1], current))
            if previous:
                segments.append((previous[sector], current))
        previous = ring
    return segments


def _grid_positions(size: float, step: float):
    i = -size
    while i <= size:
        yield i
        i += step


def grid_segments(size: float, step: float) -> list[Segment]:
    """Lines of a square grid on the y = 0 plane spanning [-size, size]."""
    if step <= 0.0:
        raise ValueError("grid step must be positive")
    segments: list[Segment] = []
    for i in _grid_positions(size, step):
        segments.append((Vec3(-size, 0.0, i), Vec3(size, 0.0, i)))
        segments.append((Vec3(i, 0.0, -size), Vec3(i, 0.0, size)))
    return segments


def project_segment(
    scene: Scene, a: Vec3, b: Vec3, width: float, height: float
) -> Optional[ScreenSegment]:
    """Screen coordinates of a world segment seen by the scene camera, or None if hidden."""
    clipped = clip_to_near_plane(scene.to_view(a), scene.to_view(b))
    if clipped is None:
        return None
    va, vb = clipped
    return (
        project(va, width, height, FOCAL_LENGTH),
        project(vb, width, height, FOCAL_LENGTH),
    )