# lumicube

An orange cube lit by a small white emitter cube, viewed through a camera you
can fly around. The scene is drawn with OpenGL 3.3 (core, forward-compatible)
through pyglet; vectors and matrices are numpy `float32` arrays.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Run

```
lumicube
```

Options:

- `--shader-dir DIR` — directory holding `vertex.glsl`, `fragment.glsl` and
  `emitter_fragment.glsl`. Defaults to `src/shaders`, relative to the working
  directory.

The command opens an 800x600 window titled "HELLO COLORS!", prints the
controls below, and runs until the window is closed. A file that cannot be
read, a shader that fails to compile or a program that fails to link raises
`lumicube.shader.ShaderError`.

## Controls

| Input          | Action                                 |
|----------------|----------------------------------------|
| Escape         | Close the window                       |
| P              | Toggle between fill and wireframe mode |
| W, A, S, D     | Move around                            |
| Space          | Fly up                                 |
| Left Ctrl      | Fly down                               |
| Left Shift     | Sprint (hold; speed times 4)           |
| Mouse movement | Look around                            |
| Scroll         | Zoom in/out (field of view 1–45°)      |

## Library use

- `lumicube.color`
  - `Color(hex)` is a frozen colour stored as `0xRRGGBBAA`.
    `Color.from_rgba(r, g, b, a)`, `Color.from_rgb(r, g, b)` (alpha 1),
    `Color.from_hex(0xRRGGBB)` (alpha set to `0x11`) and
    `Color.from_hex_alpha(0xRRGGBBAA)` build one; `red()`, `green()`,
    `blue()` and `alpha()` read the channels; `to_vec3()` gives normalised RGB
    as a numpy vector and `normalized()` all four channels as a tuple.
  - `normalize(value)` maps a channel value 0..255 onto 0.0..1.0. Out-of-range
    values raise `ValueError`.
- `lumicube.transforms` — `vec3`, `normalize`, `identity`, `look_at`,
  `perspective(aspect, fovy, near, far)` (fovy in radians), `translate` and
  `scale`. Matrices are row-major, so a point is transformed with
  `matrix @ point`.
- `lumicube.camera`
  - `Camera` holds position, orientation (yaw and pitch in degrees), speed and
    field of view: `move(movement, delta_time)` with a `Movement` direction,
    `look(x_offset, y_offset)`, `zoom(y_offset)`, `toggle_sprint()`, `right()`
    and `view_matrix()`.
  - `MouseState.update(x, y, sensitivity)` records a cursor position and
    returns the scaled offset since the previous one (the first call returns
    `(0.0, 0.0)`).
- `lumicube.layout` — describe vertex attributes on dataclass fields with
  `layout_field(location, elements)`; `vertex_layout(cls)` returns the
  `VertexAttribute` list with packed byte offsets and `vertex_stride(cls)` the
  size of one vertex. Problems raise `LayoutError`.
- `lumicube.shader` — `Shader([(path, ShaderType.VERTEX), ...])` compiles and
  links a program; `use_program()`, `set_uniform_1f` … `set_uniform_4f`,
  `set_uniform_1i` … `set_uniform_4i`, `set_uniform_mat4` and `delete()`. It is
  also a context manager. An unknown uniform raises `ShaderError`.
- `lumicube.model` — `Vertex`, `cube_vertices(color)` (36 vertices),
  `pack_vertices(vertices)`, `setup_layout(vertex_type)`, the abstract `Model`
  and `Cube(color)` with `draw()`, `with_color(color)` and `delete()`; a cube
  is white when no colour is given.
- `lumicube.window` — `create_window(width, height, title, mode, on_resize)`
  opens a window with a current GL context; `mode` is a `WindowMode`, and
  `on_resize(window, width, height)` replaces the default viewport update.

`Shader`, `Cube`, `setup_layout` and `create_window` need a display and an
OpenGL 3.3 capable driver; the colour, transform, camera and layout helpers do
not.

## What it does not do

The package ships no GLSL files. The three shader sources must be supplied in
the directory given by `--shader-dir` (or `src/shaders` in the working
directory); without them the command stops with a `ShaderError`.