import pytest

from tetris3d.game import Text
from tetris3d.text import Glyph, layout_text, text_extent
from tetris3d.vecmath import Vec3

COLOR = Vec3(1.0, 1.0, 0.0)
GLYPHS = {
    "A": Glyph(width=10, height=20, bearing_x=1, bearing_y=18, advance=12 * 64),
    "g": Glyph(width=8, height=22, bearing_x=0, bearing_y=14, advance=9 * 64),
}


def _text(content, position=(0.0, 0.0), scale=1.0):
    return Text(content, COLOR, position, scale)


def test_advance_pixels_drops_fraction():
    assert Glyph(advance=7 * 64 + 63).advance_pixels == 7


def test_empty_text_has_no_extent():
    assert text_extent(_text(""), GLYPHS) == (0.0, 0.0)


def test_extent_width_adds_up():
    one = text_extent(_text("A"), GLYPHS)
    two = text_extent(_text("AA"), GLYPHS)
    assert two[0] == 2 * one[0]
    assert two[1] == one[1]


def test_extent_height_is_tallest_glyph():
    _, height = text_extent(_text("Ag"), GLYPHS)
    assert height == max(GLYPHS["A"].height, GLYPHS["g"].height)


def test_extent_scales():
    base = text_extent(_text("Ag"), GLYPHS)
    doubled = text_extent(_text("Ag", scale=2.0), GLYPHS)
    assert doubled == (base[0] * 2, base[1] * 2)


def test_unknown_characters_take_no_space():
    assert text_extent(_text("A?"), GLYPHS) == text_extent(_text("A"), GLYPHS)


def test_text_stops_at_nul():
    assert text_extent(_text("A\0gg"), GLYPHS) == text_extent(_text("A"), GLYPHS)
    assert len(layout_text(_text("A\0gg"), GLYPHS, 500, 500)) == 1


def test_layout_places_one_glyph_per_character():
    placed = layout_text(_text("AgA"), GLYPHS, 500, 500)
    assert [p.char for p in placed] == ["A", "g", "A"]


def test_layout_starts_at_position_plus_bearing_when_it_fits():
    x, y = 30.0, 40.0
    placed = layout_text(_text("A", (x, y)), GLYPHS, 500, 500)
    xs = placed[0].quad[0::4]
    assert min(xs) == x + GLYPHS["A"].bearing_x


def test_layout_advances_between_glyphs():
    scale = 1.5
    placed = layout_text(_text("AA", scale=scale), GLYPHS, 500, 500)
    first, second = (min(p.quad[0::4]) for p in placed)
    assert second - first == GLYPHS["A"].advance_pixels * scale


def test_layout_pulls_text_back_inside_area():
    width, height = 100.0, 50.0
    placed = layout_text(_text("AgA", (1000.0, 1000.0)), GLYPHS, width, height)
    for p in placed:
        assert max(p.quad[0::4]) <= width
        assert max(p.quad[1::4]) <= height


@pytest.mark.parametrize("content", ["A", "Ag", "gA"])
def test_glyph_quads_have_glyph_size(content):
    for p in layout_text(_text(content, scale=2.0), GLYPHS, 500, 500):
        xs, ys = p.quad[0::4], p.quad[1::4]
        assert max(xs) - min(xs) == p.glyph.width * 2.0
        assert max(ys) - min(ys) == p.glyph.height * 2.0