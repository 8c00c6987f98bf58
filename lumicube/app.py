"""Interactive scene: an orange cube lit by a small white emitter cube."""

from __future__ import annotations

import argparse
import math
from pathlib import Path

from lumicube.camera import Camera, MouseState, Movement, SENSITIVITY
from lumicube.color import Color
from lumicube.model import Cube
from lumicube.shader import Shader, ShaderType
from lumicube.transforms import identity, perspective, scale, translate, vec3
from lumicube.window import WindowMode, create_window

WIDTH = 800
HEIGHT = 600
TITLE = "HELLO COLORS!"

_KEYBINDS = (
    "----------------------- KEYBINDS ------------------------",
    "          ESCAPE - Close the window",
    "               P - Toggle between fill and wireframe mode",
    "      W, A, S, D - Move around",
    "           SPACE - Fly up",
    "        LeftCtrl - Fly down",
    "      Left Shift - Sprint",
    "  Mouse movement - Look around",
    "          Scroll - Zoom in/out",
)


def print_keybinds() -> None:
    """Print the keyboard and mouse controls."""
    for line in _KEYBINDS:
        print(line)


class _Scene:
    def __init__(self, window, shader_dir: Path) -> None:
        from pyglet.window import key

        self._key = key
        self.window = window
        window.set_exclusive_mouse(True)
        self.keys = key.KeyStateHandler()
        window.push_handlers(self.keys)
        window.push_handlers(
            on_draw=self.on_draw,
            on_key_press=self.on_key_press,
            on_mouse_motion=self.on_mouse_motion,
            on_mouse_drag=self.on_mouse_drag,
            on_mouse_scroll=self.on_mouse_scroll,
        )

        self.camera = Camera()
        self.mouse = MouseState()
        self._cursor = (0.0, 0.0)
        self.wireframe = False

        self.cube = Cube(Color.from_hex(0xED5700))
        self.light_color = Color.from_hex(0xFFFFFF)
        self.light_position = vec3(1.2, 1.0, 2.0)
        self.light_scale = vec3(0.2, 0.2, 0.2)
        self.light = Cube(self.light_color)

        vertex = (shader_dir / "vertex.glsl", ShaderType.VERTEX)
        self.scene_shader = Shader([vertex, (shader_dir / "fragment.glsl", ShaderType.FRAGMENT)])
        self.emitter_shader = Shader(
            [vertex, (shader_dir / "emitter_fragment.glsl", ShaderType.FRAGMENT)]
        )
        self._movement_keys = {
            key.W: Movement.FORWARD,
            key.S: Movement.BACKWARD,
            key.A: Movement.LEFT,
            key.D: Movement.RIGHT,
            key.SPACE: Movement.UP,
            key.LCTRL: Movement.DOWN,
        }

    def update(self, delta_time: float) -> None:
        sprint_held = bool(self.keys[self._key.LSHIFT])
        if sprint_held != self.camera.is_sprinting:
            self.camera.toggle_sprint()
        for symbol, movement in self._movement_keys.items():
            if self.keys[symbol]:
                self.camera.move(movement, delta_time)

    def on_key_press(self, symbol, modifiers):
        from pyglet import gl
        from pyglet.event import EVENT_HANDLED

        if symbol == self._key.ESCAPE:
            self.window.close()
            return EVENT_HANDLED
        if symbol == self._key.P:
            self.wireframe = not self.wireframe
            gl.glPolygonMode(gl.GL_FRONT_AND_BACK, gl.GL_LINE if self.wireframe else gl.GL_FILL)
            return EVENT_HANDLED
        return None

    def on_mouse_motion(self, x, y, dx, dy) -> None:
        # Cursor positions are tracked with y growing downwards.
        cursor_x, cursor_y = self._cursor
        self._cursor = (cursor_x + dx, cursor_y - dy)
        x_offset, y_offset = self.mouse.update(*self._cursor, SENSITIVITY)
        self.camera.look(x_offset, y_offset)

    def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers) -> None:
        self.on_mouse_motion(x, y, dx, dy)

    def on_mouse_scroll(self, x, y, scroll_x, scroll_y) -> None:
        self.camera.zoom(scroll_y)

    def _draw_model(self, shader: Shader, model, model_mat, view, projection) -> None:
        shader.use_program()
        shader.set_uniform_3f("light_color", *self.light_color.to_vec3())
        shader.set_uniform_mat4("model", model_mat)
        shader.set_uniform_mat4("view", view)
        shader.set_uniform_mat4("projection", projection)
        model.draw()

    def on_draw(self) -> None:
        from pyglet import gl

        gl.glClearColor(*Color.from_hex(0x191919).normalized())
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)

        model_mat = identity()
        view = self.camera.view_matrix()
        projection = perspective(WIDTH / HEIGHT, math.radians(self.camera.fov), 0.1, 100.0)

        self._draw_model(self.scene_shader, self.cube, model_mat, view, projection)

        light_mat = scale(translate(model_mat, self.light_position), self.light_scale)
        self._draw_model(self.emitter_shader, self.light, light_mat, view, projection)

    def delete(self) -> None:
        for resource in (self.cube, self.light, self.scene_shader, self.emitter_shader):
            resource.delete()


def main(argv=None) -> int:
    """Open the window and run the scene until it is closed."""
    parser = argparse.ArgumentParser(
        prog="lumicube", description="A lit cube scene with a free-flying camera."
    )
    parser.add_argument(
        "--shader-dir",
        type=Path,
        default=Path("src/shaders"),
        help="directory holding vertex.glsl, fragment.glsl and emitter_fragment.glsl",
    )
    args = parser.parse_args(argv)

    window = create_window(WIDTH, HEIGHT, TITLE, WindowMode.WINDOWED, None)
    print_keybinds()
    scene = _Scene(window, args.shader_dir)

    import pyglet.app
    import pyglet.clock

    pyglet.clock.schedule(scene.update)
    try:
        pyglet.app.run()
    finally:
        pyglet.clock.unschedule(scene.update)
        scene.delete()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())