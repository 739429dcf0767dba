"""Static mesh data for the renderer: a unit cube, its outlines and glyph quads."""

from __future__ import annotations

from typing import Tuple

MAJOR = 3
MINOR = 3
TITLE = "Tetris3D"

CUBE_VERTICES: Tuple[float, ...] = (
    -0.5, -0.5, 0.5,
    0.5, -0.5, 0.5,
    0.5, 0.5, 0.5,
    -0.5, 0.5, 0.5,
    -0.5, -0.5, -0.5,
    0.5, -0.5, -0.5,
    0.5, 0.5, -0.5,
    -0.5, 0.5, -0.5,
)

# With flat shading the last vertex of each triangle supplies the face normal,
# so these are arranged per provoking vertex rather than per corner.
CUBE_NORMALS: Tuple[float, ...] = (
    1.0, 1.0, 1.0,
    0.0, -1.0, 0.0,
    0.0, 0.0, 1.0,
    1.0, 1.0, 1.0,
    -1.0, 0.0, 0.0,
    1.0, 0.0, 0.0,
    0.0, 0.0, -1.0,
    0.0, 1.0, 0.0,
)

CUBE_INDICES: Tuple[int, ...] = (
    0, 1, 2,
    3, 0, 2,
    4, 7, 6,
    5, 4, 6,
    0, 3, 4,
    3, 7, 4,
    2, 1, 5,
    6, 2, 5,
    3, 2, 7,
    2, 6, 7,
    0, 4, 1,
    4, 5, 1,
)

LINE_LOOPS: Tuple[Tuple[int, int, int, int], ...] = (
    (7, 3, 2, 6),
    (4, 5, 1, 0),
    (2, 1, 5, 6),
    (5, 4, 7, 6),
    (0, 1, 2, 3),
    (0, 3, 7, 4),
)

CHAR_INDICES: Tuple[int, ...] = (0, 1, 2, 3, 4, 5)

# Texture coordinates of the six glyph-quad vertices (two triangles).
_GLYPH_TEX_COORDS: Tuple[Tuple[float, float], ...] = (
    (0.0, 0.0),
    (0.0, 1.0),
    (1.0, 1.0),
    (0.0, 0.0),
    (1.0, 1.0),
    (1.0, 0.0),
)


def glyph_quad(xpos: float, ypos: float, width: float, height: float) -> Tuple[float, ...]:
    """Interleaved ``x, y, u, v`` data for the two triangles covering one glyph."""
    left, right = float(xpos), float(xpos + width)
    bottom, top = float(ypos), float(ypos + height)
    corners = (
        (left, top),
        (left, bottom),
        (right, bottom),
        (left, top),
        (right, bottom),
        (right, top),
    )
    return tuple(
        value
        for (x, y), (u, v) in zip(corners, _GLYPH_TEX_COORDS)
        for value in (x, y, u, v)
    )