import math

import pytest

from wirecraft.math3d import Camera, Vec3, cross, dot, normalize


def test_add_then_sub_round_trip():
    a = Vec3(1.5, -2.0, 3.25)
    b = Vec3(-0.5, 4.0, 7.0)
    assert (a + b) - b == a


def test_add_is_componentwise():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(4.0, 5.0, 6.0)
    s = a + b
    assert (s.x, s.y, s.z) == (a.x + b.x, a.y + b.y, a.z + b.z)


def test_mul_by_one_and_zero():
    v = Vec3(3.0, -4.0, 5.0)
    assert v * 1.0 == v
    assert v * 0.0 == v - v


def test_rmul_matches_mul():
    v = Vec3(3.0, -4.0, 5.0)
    assert 2.5 * v == v * 2.5


def test_mul_rejects_vector():
    with pytest.raises(TypeError):
        Vec3(1.0, 1.0, 1.0) * Vec3(1.0, 1.0, 1.0)


def test_dot_with_self_is_squared_length():
    v = Vec3(2.0, 3.0, 6.0)
    assert dot(v, v) == v.x * v.x + v.y * v.y + v.z * v.z


def test_cross_is_orthogonal_to_inputs():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-2.0, 0.5, 4.0)
    c = cross(a, b)
    assert dot(c, a) == pytest.approx(0.0, abs=1e-9)
    assert dot(c, b) == pytest.approx(0.0, abs=1e-9)


def test_cross_is_anticommutative():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-2.0, 0.5, 4.0)
    assert cross(a, b) == -cross(b, a)


def test_cross_of_unit_axes():
    x = Vec3(1.0, 0.0, 0.0)
    y = Vec3(0.0, 1.0, 0.0)
    assert cross(x, y) == Vec3(0.0, 0.0, 1.0)


def test_normalize_has_unit_length_and_same_direction():
    v = Vec3(3.0, -4.0, 12.0)
    n = normalize(v)
    assert math.sqrt(dot(n, n)) == pytest.approx(1.0)
    assert cross(n, v).x == pytest.approx(0.0, abs=1e-9)
    assert dot(n, v) > 0


def test_normalize_zero_vector_raises():
    with pytest.raises(ValueError):
        normalize(Vec3(0.0, 0.0, 0.0))


def test_vec3_unpacks():
    x, y, z = Vec3(7.0, 8.0, 9.0)
    assert (x, y, z) == (7.0, 8.0, 9.0)


def test_camera_instances_are_independent():
    first = Camera()
    second = Camera(position=Vec3(1.0, 1.0, 1.0))
    assert first.position == Camera().position
    assert second.position == Vec3(1.0, 1.0, 1.0)
    assert second.fov == first.fov