import math

import pytest

from tetris3d.transform import (
    look_at,
    min_axis,
    orthonormal_basis,
    ortho,
    perspective,
    radians,
    reflection,
    rotate,
    scale,
    shear,
    translate,
)
from tetris3d.vecmath import Mat4, Vec3, dot

IDENTITY_FLAT = [
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
]

P = Vec3(1.0, 2.0, -3.0)


def test_radians_half_turn():
    assert radians(180) == math.pi


def test_min_axis_prefers_earlier_on_ties():
    assert min_axis(Vec3(3, 1, 2)) == 1
    assert min_axis(Vec3(0, 1, 0)) == 0
    assert min_axis(Vec3(5, 4, -1)) == 2


@pytest.mark.parametrize("u", [Vec3(0, 1, 0), Vec3(1, 2, 3), Vec3(-2, 0.5, 1)])
def test_orthonormal_basis_rows_are_perpendicular(u):
    rows = [Vec3(*row[:3]) for row in orthonormal_basis(u)][:3]
    assert rows[0] == u
    assert math.isclose(dot(rows[0], rows[1]), 0.0, abs_tol=1e-9)
    assert math.isclose(dot(rows[0], rows[2]), 0.0, abs_tol=1e-9)
    assert math.isclose(dot(rows[1], rows[2]), 0.0, abs_tol=1e-9)


def test_translate_moves_point_and_inverts():
    t = Vec3(4, -1, 0.5)
    assert P.transformed(translate(t)) == P + t
    assert translate(t) @ translate(-t) == Mat4.identity()


def test_rotate_full_turn_is_identity():
    result = rotate(Vec3(1, 1, 0), 360)
    flat = [x for row in result for x in row]
    assert flat == pytest.approx(IDENTITY_FLAT, abs=1e-9)


def test_rotate_inverse_angle_cancels():
    axis = Vec3(0.3, 1.0, -0.2)
    result = rotate(axis, 37) @ rotate(axis, -37)
    flat = [x for row in result for x in row]
    assert flat == pytest.approx(IDENTITY_FLAT, abs=1e-9)


def test_rotate_keeps_axis_component_and_length():
    moved = P.transformed(rotate(Vec3(0, 1, 0), 90))
    assert math.isclose(moved.y, P.y)
    assert math.isclose(dot(moved, moved), dot(P, P))


def test_rotate_with_pivot_fixes_negated_pivot():
    pivot = Vec3(2, 0, -1)
    fixed = (-pivot).transformed(rotate(Vec3(0, 1, 0), 45, pivot))
    assert tuple(fixed) == pytest.approx((-2.0, 0.0, 1.0), abs=1e-9)


def test_scale_uniform_and_vector_agree():
    assert scale(2.0) == scale(Vec3(2.0, 2.0, 2.0))
    assert P.transformed(scale(2.0)) == P * 2


def test_scale_keeps_pivot_fixed():
    pivot = Vec3(1, 1, 1)
    moved = pivot.transformed(scale(Vec3(3, 0.5, 2), pivot))
    assert tuple(moved) == pytest.approx((1.0, 1.0, 1.0), abs=1e-9)


def test_reflection_is_involution_and_fixes_plane():
    plane = (0.0, 0.0, 1.0, -2.0)
    m = reflection(plane)
    twice = m @ m
    flat = [x for row in twice for x in row]
    assert flat == pytest.approx(IDENTITY_FLAT, abs=1e-9)
    on_plane = Vec3(5.0, -1.0, 2.0)
    assert tuple(on_plane.transformed(m)) == pytest.approx((5.0, -1.0, 2.0), abs=1e-9)


def test_reflection_needs_z_crossing():
    with pytest.raises(ValueError):
        reflection((1.0, 0.0, 0.0, 1.0))


def test_shear_zero_is_identity_and_x_shear():
    assert shear("y", 0.0) == Mat4.identity()
    k = 0.75
    assert Vec3(1, 0, 0).transformed(shear("x", k)) == Vec3(1, k, k)


def test_shear_unknown_axis_raises():
    with pytest.raises(ValueError):
        shear("w", 1.0)


def test_perspective_structure():
    m = perspective(45.0, 1600, 900, 0.1, 100.0)
    assert m[3, 2] == -1.0
    assert m[3, 3] == 0.0
    assert math.isclose(m[0, 0] * 1600 / 900, m[1, 1])


def test_ortho_maps_corners():
    m = ortho(800, 600, 0, 1)
    low = Vec3(0, 0, 0).transformed(m)
    high = Vec3(800, 600, 0).transformed(m)
    assert (low.x, low.y) == pytest.approx((-1.0, -1.0), abs=1e-9)
    assert (high.x, high.y) == pytest.approx((1.0, 1.0), abs=1e-9)


def test_look_at_places_eye_at_origin_and_target_ahead():
    eye, target = Vec3(0, 7, 24), Vec3(0, 7, 0)
    view = look_at(eye, target, Vec3(0, 1, 0))
    assert tuple(eye.transformed(view)) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)
    seen = target.transformed(view)
    assert (seen.x, seen.y) == pytest.approx((0.0, 0.0), abs=1e-9)
    assert seen.z < 0
    rows = [Vec3(*row[:3]) for row in view][:3]
    for i, a in enumerate(rows):
        assert math.isclose(dot(a, a), 1.0)
        for b in rows[i + 1:]:
            assert math.isclose(dot(a, b), 0.0, abs_tol=1e-9)