# tetris3d

A three-dimensional falling-block puzzle. A 3×3×3 cube drops onto a 9×9
plane; steer it, stack cubes, and fill complete layers to clear them and
score points. The game ends when a resting cube reaches the height at which
new cubes appear.

## Installing

```
pip install .
```

The game window uses OpenGL 3.3 through pyglet, so it needs a display and
a graphics driver that supports that version.

## Playing

```
tetris3d
```

The window opens at two thirds of the screen size, centred, and the game
advances one frame per refresh of the screen.

Controls:

| Key | Action |
|-----|--------|
| `S` | Start the game, or make the cube fall faster (after *Game Over*, restarts) |
| `W` | Make the cube fall slower |
| `A` / `D` | Move the cube left / right relative to the current view |
| `H` / `K` | Rotate the view by 90 degrees one way or the other |
| `F11` | Toggle fullscreen |

The current view (Front, Left, Back, Right) is shown in the top-left corner,
the last key used below it, and the score in the top-right. Each cleared
layer of nine cubes is worth 243 points.

### Options

```
tetris3d --shader-dir DIR
```

`--shader-dir` loads the cube shader from `DIR/cube.glsl` instead of the
built-in one. The file holds both stages, each starting with a line
`// VERTEX_SHADER` or `// FRAGMENT_SHADER`; a file missing either stage is
rejected with a `ShaderError`.

## Using the library

The game logic does not depend on a window and can be driven directly:

```python
from tetris3d.game import Controls, Game, Window

game = Game()
controls = Controls()
window = Window(width=1280, height=720, tlimit=1 / 60)

controls.s.update(True)          # press S to start
frame = game.update(controls, window)
print(game.score, len(frame.models))
```

Each call to `Game.update` returns a `Frame` with the per-cube `colors` and
`models` matrices, the `texts` to show, and the `view`, `projection`, `eye`
and `light` for the frame.

Other modules:

- `tetris3d.vecmath` – the immutable `Vec3` and `Mat4` types and `cross`,
  `dot`, `hadamard`, `normalize`.
- `tetris3d.transform` – `translate`, `rotate`, `scale`, `reflection`,
  `shear`, `perspective`, `ortho` and `look_at` matrices.
- `tetris3d.shaders` – the built-in GLSL programs and
  `split_shader_source` / `read_shader_file` for combined shader files.
- `tetris3d.text` – `Glyph` metrics, `text_extent` and `layout_text`.
- `tetris3d.geometry` – the cube mesh, its outline loops and `glyph_quad`.
- `tetris3d.app` – `GameWindow`, `uniform_matrix` and the `main` command.

## Running the tests

```
pip install .[test]
pytest
```