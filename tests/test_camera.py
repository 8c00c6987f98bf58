import math

import numpy as np
import pytest

from lumicube.camera import Camera, MouseState, Movement


def _apply(matrix, point):
    out = matrix @ np.append(np.asarray(point, dtype=np.float32), 1.0)
    return out[:3] / out[3]


def test_defaults():
    camera = Camera()
    assert camera.speed == 2.5
    assert camera.fov == 45.0
    assert camera.yaw == -90.0
    assert camera.pos.tolist() == [0.0, 0.0, 3.0]
    assert camera.front.tolist() == [0.0, 0.0, -1.0]


def test_toggle_sprint_round_trip():
    camera = Camera()
    camera.toggle_sprint()
    assert camera.is_sprinting
    assert camera.speed == 2.5 * camera.speed_mul
    camera.toggle_sprint()
    assert not camera.is_sprinting
    assert camera.speed == 2.5


def test_move_forward_then_backward_returns():
    camera = Camera()
    start = camera.pos.copy()
    camera.move(Movement.FORWARD, 0.5)
    assert camera.pos[2] < start[2]
    assert math.isclose(float(np.linalg.norm(camera.pos - start)), camera.speed * 0.5, rel_tol=1e-6)
    camera.move(Movement.BACKWARD, 0.5)
    assert np.allclose(camera.pos, start)


@pytest.mark.parametrize(
    "first,second", [(Movement.LEFT, Movement.RIGHT), (Movement.UP, Movement.DOWN)]
)
def test_opposite_moves_cancel(first, second):
    camera = Camera()
    start = camera.pos.copy()
    camera.move(first, 0.25)
    assert not np.allclose(camera.pos, start)
    camera.move(second, 0.25)
    assert np.allclose(camera.pos, start)


def test_right_is_perpendicular_unit():
    camera = Camera()
    right = camera.right()
    assert math.isclose(float(np.linalg.norm(right)), 1.0, rel_tol=1e-6)
    assert abs(float(np.dot(right, camera.front))) < 1e-6
    assert abs(float(np.dot(right, camera.up))) < 1e-6


def test_look_without_offset_keeps_front():
    camera = Camera()
    camera.look(0.0, 0.0)
    assert np.allclose(camera.front, [0.0, 0.0, -1.0], atol=1e-6)


def test_look_clamps_pitch_offset():
    camera = Camera()
    camera.look(0.0, 200.0)
    assert camera.pitch == 89.0
    assert math.isclose(float(np.linalg.norm(camera.front)), 1.0, rel_tol=1e-6)


def test_look_yaw_accumulates():
    camera = Camera()
    camera.look(90.0, 0.0)
    assert camera.yaw == 0.0
    assert np.allclose(camera.front, [1.0, 0.0, 0.0], atol=1e-6)


@pytest.mark.parametrize("offset,expected", [(100.0, 1.0), (-100.0, 45.0)])
def test_zoom_clamps(offset, expected):
    camera = Camera()
    camera.zoom(offset)
    assert camera.fov == expected


def test_zoom_within_range():
    camera = Camera()
    camera.zoom(5.0)
    assert camera.fov == 40.0


def test_view_matrix_maps_position_to_origin():
    camera = Camera()
    camera.move(Movement.RIGHT, 1.0)
    view = camera.view_matrix()
    assert np.allclose(_apply(view, camera.pos), 0.0, atol=1e-5)
    ahead = _apply(view, camera.pos + camera.front)
    assert np.allclose(ahead, [0.0, 0.0, -1.0], atol=1e-5)


def test_mouse_first_update_has_no_offset():
    mouse = MouseState()
    assert mouse.update(400.0, 300.0) == (0.0, 0.0)
    assert not mouse.is_first_mouse
    assert mouse.last_pos == (400.0, 300.0)


def test_mouse_offsets_are_scaled_and_y_inverted():
    mouse = MouseState()
    mouse.update(10.0, 10.0, 1.0)
    assert mouse.update(20.0, 0.0, 1.0) == (10.0, 10.0)
    assert mouse.last_pos == (20.0, 0.0)


def test_mouse_sensitivity_scales_linearly():
    slow, fast = MouseState(), MouseState()
    slow.update(0.0, 0.0, 0.5)
    fast.update(0.0, 0.0, 1.0)
    dx_slow, dy_slow = slow.update(8.0, -4.0, 0.5)
    dx_fast, dy_fast = fast.update(8.0, -4.0, 1.0)
    assert dx_slow * 2 == dx_fast
    assert dy_slow * 2 == dy_fast