"""Glyph metrics and on-screen text layout."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Tuple

from .game import Text
from .geometry import glyph_quad


@dataclass(frozen=True)
class Glyph:
    """Metrics of one rendered character; ``advance`` is in 1/64 pixel units."""

    width: int = 0
    height: int = 0
    bearing_x: int = 0
    bearing_y: int = 0
    advance: int = 0
    texture: Any = field(default=None, compare=False)

    @property
    def advance_pixels(self) -> int:
        return self.advance >> 6


@dataclass(frozen=True)
class PlacedGlyph:
    char: str
    glyph: Glyph
    quad: Tuple[float, ...]


_MISSING = Glyph()


def _visible(content: str) -> str:
    return content.split("\0", 1)[0]


def text_extent(text: Text, glyphs: Mapping[str, Glyph]) -> Tuple[float, float]:
    """Width (sum of advances) and height (tallest glyph) of ``text`` once scaled."""
    width = 0.0
    height = 0.0
    for char in _visible(text.content):
        glyph = glyphs.get(char, _MISSING)
        width += glyph.advance_pixels * text.scale
        height = max(height, glyph.height * text.scale)
    return width, height


def layout_text(
    text: Text, glyphs: Mapping[str, Glyph], width: float, height: float
) -> List[PlacedGlyph]:
    """Place each glyph, pulling the text back inside a ``width`` x ``height`` area."""
    extent_w, extent_h = text_extent(text, glyphs)
    x, y = text.position
    if x + extent_w > width:
        x = width - extent_w
    if y + extent_h > height:
        y = height - extent_h

    s = text.scale
    placed: List[PlacedGlyph] = []
    for char in _visible(text.content):
        glyph = glyphs.get(char, _MISSING)
        xpos = x + glyph.bearing_x * s
        ypos = y - (glyph.height - glyph.bearing_y) * s
        quad = glyph_quad(xpos, ypos, glyph.width * s, glyph.height * s)
        placed.append(PlacedGlyph(char, glyph, quad))
        x += glyph.advance_pixels * s
    return placed