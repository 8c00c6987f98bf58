"""A free-flying first-person camera and mouse tracking."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np

from lumicube.transforms import look_at, normalize, vec3

SENSITIVITY = 0.1
PITCH_LIMIT = 89.0
FOV_MIN = 1.0
FOV_MAX = 45.0


class Movement(Enum):
    """Directions the camera can be moved in."""

    FORWARD = auto()
    BACKWARD = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()


@dataclass
class Camera:
    """Camera position and orientation; angles are in degrees."""

    speed: float = 2.5
    speed_mul: float = 4.0
    is_sprinting: bool = False
    fov: float = 45.0
    pos: np.ndarray = field(default_factory=lambda: vec3(0.0, 0.0, 3.0))
    front: np.ndarray = field(default_factory=lambda: vec3(0.0, 0.0, -1.0))
    up: np.ndarray = field(default_factory=lambda: vec3(0.0, 1.0, 0.0))
    pitch: float = 0.0
    yaw: float = -90.0

    def toggle_sprint(self) -> None:
        """Switch between normal and sprinting speed."""
        if self.is_sprinting:
            self.speed /= self.speed_mul
            self.is_sprinting = False
        else:
            self.speed *= self.speed_mul
            self.is_sprinting = True

    def right(self) -> np.ndarray:
        """The unit vector pointing to the camera's right."""
        return normalize(np.cross(self.front, self.up))

    def move(self, movement: Movement, delta_time: float) -> None:
        """Move in ``movement``'s direction for ``delta_time`` seconds."""
        velocity = self.speed * delta_time
        directions = {
            Movement.FORWARD: self.front,
            Movement.BACKWARD: -self.front,
            Movement.LEFT: -self.right(),
            Movement.RIGHT: self.right(),
            Movement.UP: self.up,
            Movement.DOWN: -self.up,
        }
        self.pos = (self.pos + directions[movement] * velocity).astype(np.float32)

    def look(self, x_offset: float, y_offset: float) -> None:
        """Turn by the given yaw and pitch offsets and recompute the front vector.

        The pitch offset is clamped to the pitch limit before it is added.
        """
        self.yaw += x_offset
        self.pitch += min(max(y_offset, -PITCH_LIMIT), PITCH_LIMIT)

        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        direction = vec3(
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        )
        self.front = normalize(direction)

    def zoom(self, y_offset: float) -> None:
        """Narrow or widen the field of view, kept within 1..45 degrees."""
        self.fov = min(max(self.fov - y_offset, FOV_MIN), FOV_MAX)

    def view_matrix(self) -> np.ndarray:
        """The view matrix for the camera's current position and orientation."""
        return look_at(self.pos, self.pos + self.front, self.up)


@dataclass
class MouseState:
    """Last known cursor position, used to turn cursor moves into offsets."""

    last_pos: tuple[float, float] = (0.0, 0.0)
    is_first_mouse: bool = True

    def update(self, x: float, y: float, sensitivity: float = SENSITIVITY) -> tuple[float, float]:
        """Record a cursor position and return the scaled (x, y) offset since the last one.

        The y offset grows as the cursor moves up the screen.
        """
        if self.is_first_mouse:
            self.last_pos = (x, y)
            self.is_first_mouse = False
        last_x, last_y = self.last_pos
        offset = ((x - last_x) * sensitivity, (last_y - y) * sensitivity)
        self.last_pos = (x, y)
        return offset