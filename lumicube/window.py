"""Creation of an OpenGL 3.3 core-profile window."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable, Optional

ResizeCallback = Callable[[object, int, int], None]

_FULLSCREEN_SIZE = (800, 600)


class WindowMode(Enum):
    WINDOWED = auto()
    FULLSCREEN = auto()


def _default_resize(window, width: int, height: int) -> None:
    from pyglet import gl

    gl.glViewport(0, 0, width, height)


def create_window(
    width: int,
    height: int,
    title: str,
    mode: WindowMode = WindowMode.WINDOWED,
    on_resize: Optional[ResizeCallback] = None,
):
    """Open a window with a current GL context and a viewport covering it.

    ``on_resize(window, width, height)`` is called when the window is resized;
    by default the viewport is set to the new size.
    """
    if not isinstance(mode, WindowMode):
        raise ValueError(f"mode must be a WindowMode, got {mode!r}")
    if on_resize is not None and not callable(on_resize):
        raise TypeError("on_resize must be callable")
    if mode is WindowMode.WINDOWED and (width <= 0 or height <= 0):
        raise ValueError("Window dimensions must be greater than zero in windowed mode")

    import pyglet.event
    import pyglet.window
    from pyglet import gl

    config = gl.Config(
        major_version=3,
        minor_version=3,
        forward_compatible=True,
        double_buffer=True,
        depth_size=24,
    )
    if mode is WindowMode.WINDOWED:
        window = pyglet.window.Window(width, height, title, resizable=True, config=config)
    else:
        window = pyglet.window.Window(*_FULLSCREEN_SIZE, title, fullscreen=True, config=config)

    callback = on_resize or _default_resize

    def handle_resize(new_width: int, new_height: int):
        callback(window, new_width, new_height)
        return pyglet.event.EVENT_HANDLED

    window.push_handlers(on_resize=handle_resize)
    window.switch_to()

    fb_width, fb_height = window.get_framebuffer_size()
    gl.glViewport(0, 0, fb_width, fb_height)
    return window