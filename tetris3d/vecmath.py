"""Small 3D vector and 4x4 matrix types used by the game and the renderer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Sequence, Tuple, Union

Row = Tuple[float, float, float, float]


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable three-component vector, also used for RGB colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Union["Vec3", float]) -> "Vec3":
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, Real):
            return Vec3(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __sub__(self, other: "Vec3") -> "Vec3":
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, other: Union["Vec3", "Mat4", float]) -> "Vec3":
        if isinstance(other, Vec3):
            return hadamard(self, other)
        if isinstance(other, Mat4):
            return self.transformed(other)
        if isinstance(other, Real):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> "Vec3":
        if isinstance(other, Real):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, value: float) -> "Vec3":
        if isinstance(value, Real):
            return Vec3(self.x / value, self.y / value, self.z / value)
        return NotImplemented

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def transformed(self, matrix: "Mat4") -> "Vec3":
        """Apply ``matrix`` to this vector as a point (w = 1), without a w divide."""
        point = (self.x, self.y, self.z, 1.0)
        x, y, z = (
            sum(a * b for a, b in zip(row, point)) for row in matrix.rows[:3]
        )
        return Vec3(x, y, z)


@dataclass(frozen=True, slots=True)
class Mat4:
    """An immutable row-major 4x4 matrix."""

    rows: Tuple[Row, Row, Row, Row]

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a Mat4 needs exactly four rows of four values")
        object.__setattr__(self, "rows", rows)

    @staticmethod
    def identity() -> "Mat4":
        return Mat4(
            tuple(
                tuple(1.0 if r == c else 0.0 for c in range(4)) for r in range(4)
            )
        )

    @staticmethod
    def zeros() -> "Mat4":
        return Mat4(((0.0,) * 4,) * 4)

    def transpose(self) -> "Mat4":
        return Mat4(tuple(zip(*self.rows)))

    def __matmul__(self, other: Union["Mat4", Vec3]) -> Union["Mat4", Vec3]:
        if isinstance(other, Vec3):
            return other.transformed(self)
        if isinstance(other, Mat4):
            columns = list(zip(*other.rows))
            return Mat4(
                tuple(
                    tuple(sum(a * b for a, b in zip(row, col)) for col in columns)
                    for row in self.rows
                )
            )
        return NotImplemented

    def __getitem__(self, index: Union[int, Tuple[int, int]]):
        if isinstance(index, tuple):
            row, col = index
            return self.rows[row][col]
        return self.rows[index]

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)


def cross(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def dot(a: Vec3, b: Vec3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def hadamard(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(a.x * b.x, a.y * b.y, a.z * b.z)


def normalize(v: Vec3) -> Vec3:
    """Return ``v`` scaled to unit length."""
    length = math.sqrt(dot(v, v))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return v * (1.0 / length)


def as_vec3(values: Sequence[float]) -> Vec3:
    """Build a Vec3 from any three-element sequence."""
    x, y, z = values
    return Vec3(float(x), float(y), float(z))