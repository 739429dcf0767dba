"""Affine and projection matrices built on top of :mod:`tetris3d.vecmath`."""

from __future__ import annotations

import math
from typing import Optional, Sequence, Union

from .vecmath import Mat4, Vec3, as_vec3, cross, dot, normalize


def radians(degrees: float) -> float:
    return degrees * (math.pi / 180.0)


def min_axis(v: Vec3) -> int:
    """Index of the smallest component; ties go to the earlier axis."""
    index, smallest = 0, v.x
    if smallest > v.y:
        index, smallest = 1, v.y
    if smallest > v.z:
        index = 2
    return index


def orthonormal_basis(u: Vec3) -> Mat4:
    """Rows ``u``, a vector perpendicular to it, and their cross product."""
    axis = min_axis(u)
    if axis == 0:
        v = Vec3(0.0, u.z, -u.y)
    elif axis == 1:
        v = Vec3(u.z, 0.0, -u.x)
    else:
        v = Vec3(u.y, -u.x, 0.0)
    w = cross(u, v)
    return Mat4(
        (
            (u.x, u.y, u.z, 0.0),
            (v.x, v.y, v.z, 0.0),
            (w.x, w.y, w.z, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def translate(offset: Vec3) -> Mat4:
    return Mat4(
        (
            (1.0, 0.0, 0.0, offset.x),
            (0.0, 1.0, 0.0, offset.y),
            (0.0, 0.0, 1.0, offset.z),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def _rotation_x(rad: float) -> Mat4:
    c, s = math.cos(rad), math.sin(rad)
    return Mat4(
        (
            (1.0, 0.0, 0.0, 0.0),
            (0.0, c, -s, 0.0),
            (0.0, s, c, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def rotate(axis: Vec3, degrees: float, pivot: Optional[Vec3] = None) -> Mat4:
    """Rotation by ``degrees`` about ``axis``.

    The pivot is applied as ``translate(pivot)`` first and undone by
    ``translate(-pivot)`` last, so the fixed point is ``-pivot``.
    """
    pivot = pivot if pivot is not None else Vec3()
    basis = orthonormal_basis(normalize(axis))
    return (
        translate(-pivot)
        @ basis.transpose()
        @ _rotation_x(radians(degrees))
        @ basis
        @ translate(pivot)
    )


def scale(factor: Union[Vec3, float], pivot: Optional[Vec3] = None) -> Mat4:
    """Scale by ``factor`` (uniform or per axis) about ``pivot``."""
    s = factor if isinstance(factor, Vec3) else Vec3(factor, factor, factor)
    pivot = pivot if pivot is not None else Vec3()
    diagonal = Mat4(
        (
            (s.x, 0.0, 0.0, 0.0),
            (0.0, s.y, 0.0, 0.0),
            (0.0, 0.0, s.z, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )
    return translate(pivot) @ diagonal @ translate(-pivot)


def reflection(plane: Sequence[float]) -> Mat4:
    """Reflection through the plane ``a*x + b*y + c*z + d = 0``."""
    a, b, c, d = plane
    if c == 0:
        raise ValueError("plane must cross the z axis (c != 0)")
    normal = normalize(as_vec3((a, b, c)))
    point = Vec3(0.0, 0.0, -d / c)
    basis = orthonormal_basis(normal)
    mirror = scale(Vec3(-1.0, 1.0, 1.0), Vec3())
    return (
        translate(point) @ basis.transpose() @ mirror @ basis @ translate(-point)
    )


def shear(axis: str, amount: float) -> Mat4:
    """Shear along ``axis`` ('x', 'y' or 'z') by ``amount``."""
    k = amount
    if axis == "x":
        rows = ((1, 0, 0, 0), (k, 1, 0, 0), (k, 0, 1, 0), (0, 0, 0, 1))
    elif axis == "y":
        rows = ((1, k, 0, 0), (0, 1, 0, 0), (0, k, 1, 0), (0, 0, 0, 1))
    elif axis == "z":
        rows = ((1, 0, k, 0), (0, 1, k, 0), (0, 0, 1, 0), (0, 0, 0, 1))
    else:
        raise ValueError(f"unknown shear axis: {axis!r}")
    return Mat4(rows)


def perspective(fov: float, width: int, height: int, near: float, far: float) -> Mat4:
    """Perspective projection with a vertical field of view in degrees."""
    tangent = math.tan(radians(fov / 2))
    aspect_ratio = width / height
    top = near * tangent
    right = top * aspect_ratio
    return Mat4(
        (
            (near / right, 0.0, 0.0, 0.0),
            (0.0, near / top, 0.0, 0.0),
            (0.0, 0.0, -(far + near) / (far - near), (-2 * far * near) / (far - near)),
            (0.0, 0.0, -1.0, 0.0),
        )
    )


def ortho(width: float, height: float, near: float, far: float) -> Mat4:
    """Orthographic projection mapping (0, 0)-(width, height) to (-1, -1)-(1, 1)."""
    return Mat4(
        (
            (2.0 / width, 0.0, 0.0, -1.0),
            (0.0, 2.0 / height, 0.0, -1.0),
            (0.0, 0.0, -2.0 / (far - near), -(far + near) / (far - near)),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def look_at(eye: Vec3, target: Vec3, up: Vec3) -> Mat4:
    """View matrix for a camera at ``eye`` looking at ``target``."""
    forward = normalize(eye - target)
    left = normalize(cross(up, forward))
    true_up = cross(forward, left)
    return Mat4(
        (
            (left.x, left.y, left.z, dot(-left, eye)),
            (true_up.x, true_up.y, true_up.z, dot(-true_up, eye)),
            (forward.x, forward.y, forward.z, dot(-forward, eye)),
            (0.0, 0.0, 0.0, 1.0),
        )
    )