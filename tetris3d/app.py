"""Game window: key polling, the frame clock and OpenGL rendering."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import pyglet

from .game import Controls, Frame, Game, Text, Window
from .geometry import (
    CUBE_INDICES,
    CUBE_NORMALS,
    CUBE_VERTICES,
    LINE_LOOPS,
    MAJOR,
    MINOR,
    TITLE,
)
from .shaders import CUBE_SHADER, ShaderSource, read_shader_file
from .text import Glyph, text_extent
from .vecmath import Mat4

logger = logging.getLogger(__name__)

FONT_NAME = "Liberation Sans"
FONT_SIZE = 48
OUTLINE_COLOR = (1.0, 1.0, 1.0)


def uniform_matrix(matrix: Mat4) -> Tuple[float, ...]:
    """The 16 values of ``matrix`` in column-major order, as OpenGL expects."""
    return tuple(value for column in zip(*matrix) for value in column)


def _poll_buttons(controls: Controls, pressed: Iterable[bool]) -> None:
    for button, down in zip(controls.buttons(), pressed, strict=True):
        button.update(bool(down))


def _text_origin(
    text: Text, glyphs: Mapping[str, Glyph], width: float, height: float
) -> Tuple[float, float]:
    extent_w, extent_h = text_extent(text, glyphs)
    x, y = text.position
    if x + extent_w > width:
        x = width - extent_w
    if y + extent_h > height:
        y = height - extent_h
    return x, y


def _font_glyphs(font_name: str, size: int) -> Dict[str, Glyph]:
    font = pyglet.font.load(font_name, size, dpi=72)
    glyphs: Dict[str, Glyph] = {}
    for code in range(32, 127):
        char = chr(code)
        rendered = font.get_glyphs(char)
        if not rendered:
            continue
        glyph = rendered[0]
        left, _bottom, _right, top = glyph.vertices
        glyphs[char] = Glyph(
            width=int(glyph.width),
            height=int(glyph.height),
            bearing_x=int(left),
            bearing_y=int(top),
            advance=int(glyph.advance) * 64,
            texture=glyph,
        )
    return glyphs


class GameWindow:
    """Owns the pyglet window, feeds key states to the game and draws its frames."""

    def __init__(
        self,
        game: Optional[Game] = None,
        cube_shader: ShaderSource = CUBE_SHADER,
        font_name: str = FONT_NAME,
    ) -> None:
        from pyglet import gl
        from pyglet.graphics.shader import Shader, ShaderProgram
        from pyglet.window import key

        self._gl = gl
        self.game = game if game is not None else Game()
        self.controls = Controls()
        self.frame: Optional[Frame] = None
        self._font_name = font_name

        config = gl.Config(
            major_version=MAJOR, minor_version=MINOR, double_buffer=True, depth_size=24
        )
        self.window = pyglet.window.Window(
            caption=TITLE, resizable=True, visible=False, config=config
        )
        screen = self.window.screen
        mode = screen.get_mode()
        rate = mode.rate if mode is not None and mode.rate else 60
        width, height = int(screen.width / 1.5), int(screen.height / 1.5)
        self.window.set_size(width, height)
        self.window.set_location(
            screen.x + (screen.width - width) // 2,
            screen.y + (screen.height - height) // 2,
        )
        self.state = Window(width=width, height=height, tlimit=1.0 / rate)

        self._keys = key.KeyStateHandler()
        self._key_codes = (key.W, key.A, key.S, key.D, key.H, key.K, key.F11)
        self.window.push_handlers(self._keys)
        self.window.push_handlers(on_draw=self.on_draw)

        self._setup_gl()
        self._program = ShaderProgram(
            Shader(cube_shader.vertex, "vertex"),
            Shader(cube_shader.fragment, "fragment"),
        )
        self._faces = self._program.vertex_list_indexed(
            8, gl.GL_TRIANGLES, CUBE_INDICES,
            pos=("f", CUBE_VERTICES), normal=("f", CUBE_NORMALS),
        )
        self._outlines: List = [
            self._program.vertex_list_indexed(
                8, gl.GL_LINE_LOOP, loop,
                pos=("f", CUBE_VERTICES), normal=("f", CUBE_NORMALS),
            )
            for loop in LINE_LOOPS
        ]
        self._glyphs = _font_glyphs(font_name, FONT_SIZE)

        self.window.set_visible(True)
        pyglet.clock.schedule_interval(self.tick, self.state.tlimit)

    def _setup_gl(self) -> None:
        gl = self._gl
        gl.glEnable(gl.GL_BLEND)
        gl.glEnable(gl.GL_CULL_FACE)
        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glEnable(gl.GL_POLYGON_OFFSET_FILL)
        gl.glPolygonOffset(0.5, 0.5)
        gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)
        try:
            gl.glLineWidth(3)
        except gl.GLException:
            # Core profiles may only allow a line width of one.
            logger.debug("wide lines are not supported")

    def _toggle_fullscreen(self) -> None:
        state = self.state
        if not state.is_fullscreen:
            state.wx, state.wy = self.window.get_location()
            state.ww, state.wh = self.window.get_size()
            self.window.set_fullscreen(True)
            state.is_fullscreen = True
        else:
            self.window.set_fullscreen(False)
            self.window.set_size(state.ww, state.wh)
            self.window.set_location(state.wx, state.wy)
            state.is_fullscreen = False

    def tick(self, dt: float) -> None:
        """Advance the game by one frame."""
        _poll_buttons(self.controls, (self._keys[code] for code in self._key_codes))
        if self.controls.f11.first:
            self._toggle_fullscreen()
        self.state.width, self.state.height = self.window.width, self.window.height
        self.frame = self.game.update(self.controls, self.state)
        logger.debug("MS per frame %.2fms", dt * 1000)

    def on_draw(self) -> None:
        gl = self._gl
        self.window.clear()
        frame = self.frame
        if frame is None:
            return

        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glEnable(gl.GL_CULL_FACE)
        program = self._program
        program.use()
        program["view"] = uniform_matrix(frame.view)
        program["projection"] = uniform_matrix(frame.projection)
        program["eye_position"] = tuple(frame.eye)
        program["light_position"] = tuple(frame.light)

        for color, model in zip(frame.colors, frame.models):
            program["kd"] = tuple(color)
            program["model"] = uniform_matrix(model)
            self._faces.draw(gl.GL_TRIANGLES)

        program["kd"] = OUTLINE_COLOR
        for model in frame.models:
            program["model"] = uniform_matrix(model)
            for outline in self._outlines:
                outline.draw(gl.GL_LINE_LOOP)
        program.stop()

        gl.glDisable(gl.GL_DEPTH_TEST)
        gl.glDisable(gl.GL_CULL_FACE)
        for text in frame.texts:
            self._draw_text(text)

    def _draw_text(self, text: Text) -> None:
        content = text.content.split("\0", 1)[0]
        if not content:
            return
        x, y = _text_origin(text, self._glyphs, self.window.width, self.window.height)
        r, g, b = (max(0, min(255, round(c * 255))) for c in text.color)
        pyglet.text.Label(
            content,
            font_name=self._font_name,
            font_size=FONT_SIZE * text.scale,
            x=x,
            y=y,
            color=(r, g, b, 255),
            dpi=72,
        ).draw()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tetris3d",
        description="Stack falling 3x3x3 cubes on a 9x9 plane and clear full layers.",
    )
    parser.add_argument(
        "--shader-dir",
        type=Path,
        help="load cube.glsl from this directory instead of the built-in shader",
    )
    args = parser.parse_args(argv)
    shader = (
        read_shader_file(args.shader_dir / "cube.glsl")
        if args.shader_dir is not None
        else CUBE_SHADER
    )
    GameWindow(cube_shader=shader)
    pyglet.app.run()
    return 0