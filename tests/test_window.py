import pytest

from lumicube.window import WindowMode, create_window


@pytest.mark.parametrize("width,height", [(0, 600), (800, 0), (-1, 600), (0, 0)])
def test_windowed_requires_positive_size(width, height):
    with pytest.raises(ValueError, match="greater than zero in windowed mode"):
        create_window(width, height, "title", WindowMode.WINDOWED, None)


def test_mode_must_be_window_mode():
    with pytest.raises(ValueError, match="WindowMode"):
        create_window(800, 600, "title", "windowed", None)


def test_resize_callback_must_be_callable():
    with pytest.raises(TypeError, match="callable"):
        create_window(800, 600, "title", WindowMode.WINDOWED, 42)


def test_invalid_callback_checked_before_size():
    with pytest.raises(TypeError):
        create_window(0, 0, "title", WindowMode.WINDOWED, "not a function")