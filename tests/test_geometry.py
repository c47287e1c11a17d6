import math

import pytest

from wirecraft.geometry import (
    NEAR_PLANE,
    clip_to_near_plane,
    project,
    rotate_x,
    rotate_y,
    yaw_forward,
    yaw_right,
)
from wirecraft.math3d import Vec3, dot

CUBE = [
    Vec3(-1, -1, -1),
    Vec3(1, -1, -1),
    Vec3(1, 1, -1),
    Vec3(-1, 1, -1),
    Vec3(-1, -1, 1),
    Vec3(1, -1, 1),
    Vec3(1, 1, 1),
    Vec3(-1, 1, 1),
]


def _approx_vec(v):
    return pytest.approx((v.x, v.y, v.z), abs=1e-9)


def _pushed_back(v):
    # The reference scene sits five units in front of the viewer.
    return Vec3(v.x, v.y, v.z + 5.0)


def test_rotate_y_zero_angle_is_identity_on_cube():
    for v in CUBE:
        assert tuple(rotate_y(v, 0.0)) == _approx_vec(v)


def test_rotate_y_quarter_turn():
    r = rotate_y(Vec3(1.0, 0.0, 0.0), math.pi / 2)
    assert tuple(r) == _approx_vec(Vec3(0.0, 0.0, 1.0))


def test_rotate_y_keeps_y_and_length():
    for v in CUBE:
        r = rotate_y(v, 0.01)
        assert r.y == v.y
        assert dot(r, r) == pytest.approx(dot(v, v))


def test_rotate_x_keeps_x_and_length():
    for v in CUBE:
        r = rotate_x(v, 0.7)
        assert r.x == v.x
        assert dot(r, r) == pytest.approx(dot(v, v))


def test_rotate_x_quarter_turn():
    r = rotate_x(Vec3(0.0, 1.0, 0.0), math.pi / 2)
    assert tuple(r) == _approx_vec(Vec3(0.0, 0.0, 1.0))


def test_rotation_round_trip():
    v = Vec3(0.3, -1.2, 2.5)
    assert tuple(rotate_y(rotate_y(v, 0.9), -0.9)) == _approx_vec(v)
    assert tuple(rotate_x(rotate_x(v, 0.4), -0.4)) == _approx_vec(v)


def test_project_reference_cube_corners():
    near = project(_pushed_back(CUBE[0]), 800, 600, 400)
    far = project(_pushed_back(CUBE[6]), 800, 600, 400)
    assert near == pytest.approx((300.0, 400.0))
    assert far == pytest.approx((400.0 + 400.0 / 6.0, 300.0 - 400.0 / 6.0))


def test_project_origin_axis_hits_centre():
    assert project(Vec3(0.0, 0.0, 10.0), 800, 600, 400) == pytest.approx((400.0, 300.0))


def test_project_clamps_depth_to_near_plane():
    p = Vec3(1.0, 1.0, 0.25)
    assert project(p, 800, 600, 400) == project(Vec3(1.0, 1.0, NEAR_PLANE), 800, 600, 400)


def test_clip_both_visible_unchanged():
    a, b = Vec3(0, 0, 2), Vec3(1, 1, 3)
    assert clip_to_near_plane(a, b) == (a, b)


def test_clip_both_behind_rejected():
    assert clip_to_near_plane(Vec3(0, 0, 0), Vec3(1, 1, -3)) is None


def test_clip_on_plane_counts_as_behind():
    assert clip_to_near_plane(Vec3(0, 0, NEAR_PLANE), Vec3(1, 0, NEAR_PLANE)) is None


def test_clip_first_point_behind():
    a, b = Vec3(0.0, 0.0, 0.0), Vec3(2.0, 4.0, 2.0)
    ca, cb = clip_to_near_plane(a, b)
    assert cb == b
    assert tuple(ca) == _approx_vec(Vec3(1.0, 2.0, NEAR_PLANE))


def test_clip_second_point_behind():
    a, b = Vec3(2.0, 4.0, 2.0), Vec3(0.0, 0.0, 0.0)
    ca, cb = clip_to_near_plane(a, b)
    assert ca == a
    assert tuple(cb) == _approx_vec(Vec3(1.0, 2.0, NEAR_PLANE))


def test_yaw_vectors_at_zero():
    assert tuple(yaw_forward(0.0)) == _approx_vec(Vec3(0.0, 0.0, 1.0))
    assert tuple(yaw_right(0.0)) == _approx_vec(Vec3(1.0, 0.0, 0.0))


@pytest.mark.parametrize("yaw", [-2.0, -0.35, 0.0, 0.35, 1.8, 3.0])
def test_yaw_vectors_are_orthonormal_and_horizontal(yaw):
    f, r = yaw_forward(yaw), yaw_right(yaw)
    assert f.y == 0.0 and r.y == 0.0
    assert dot(f, f) == pytest.approx(1.0)
    assert dot(r, r) == pytest.approx(1.0)
    assert dot(f, r) == pytest.approx(0.0, abs=1e-12)