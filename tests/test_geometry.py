from tetris3d.geometry import CHAR_INDICES, glyph_quad


def test_glyph_quad_corners():
    x, y, w, h = 10.0, 20.0, 3.0, 4.0
    quad = glyph_quad(x, y, w, h)
    assert len(quad) == 4 * len(CHAR_INDICES)
    positions = {(quad[i], quad[i + 1]) for i in range(0, len(quad), 4)}
    assert positions == {(x, y), (x + w, y), (x, y + h), (x + w, y + h)}


def test_glyph_quad_first_vertex_is_top_left_with_origin_texcoord():
    x, y, w, h = 5.0, 7.0, 2.0, 9.0
    quad = glyph_quad(x, y, w, h)
    assert quad[0:4] == (x, y + h, 0.0, 0.0)
    assert quad[4:8] == (x, y, 0.0, 1.0)


def test_glyph_quad_texcoords_span_unit_square():
    quad = glyph_quad(0.0, 0.0, 1.0, 1.0)
    uvs = {(quad[i + 2], quad[i + 3]) for i in range(0, len(quad), 4)}
    assert uvs == {(0.0, 0.0), (0.0, 1.0), (1.0, 0.0), (1.0, 1.0)}


def test_glyph_quad_zero_size_collapses_to_point():
    quad = glyph_quad(3.0, 4.0, 0.0, 0.0)
    positions = {(quad[i], quad[i + 1]) for i in range(0, len(quad), 4)}
    assert positions == {(3.0, 4.0)}