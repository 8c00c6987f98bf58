"""Vector and 4x4 matrix helpers for a right-handed OpenGL camera.

Matrices are row-major numpy arrays in the usual mathematical layout, so a
point is transformed with ``matrix @ point``.
"""

from __future__ import annotations

import math

import numpy as np


def vec3(x: float, y: float, z: float) -> np.ndarray:
    """A float32 three-component vector."""
    return np.array([x, y, z], dtype=np.float32)


def normalize(vector) -> np.ndarray:
    """The vector scaled to unit length."""
    v = np.asarray(vector, dtype=np.float32)
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return (v / length).astype(np.float32)


def identity() -> np.ndarray:
    """The 4x4 identity matrix."""
    return np.identity(4, dtype=np.float32)


def look_at(eye, center, up) -> np.ndarray:
    """A right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = np.asarray(eye, dtype=np.float32)
    center = np.asarray(center, dtype=np.float32)
    up = np.asarray(up, dtype=np.float32)

    forward = normalize(center - eye)
    side = normalize(np.cross(forward, up))
    true_up = np.cross(side, forward)

    view = identity()
    view[0, :3] = side
    view[1, :3] = true_up
    view[2, :3] = -forward
    view[0, 3] = -np.dot(side, eye)
    view[1, 3] = -np.dot(true_up, eye)
    view[2, 3] = np.dot(forward, eye)
    return view


def perspective(aspect: float, fovy: float, near: float, far: float) -> np.ndarray:
    """A right-handed projection matrix mapping depth onto -1..1; ``fovy`` is in radians."""
    if abs(aspect) < 1e-12:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    if tan_half == 0.0:
        raise ValueError("field of view must not be zero")

    proj = np.zeros((4, 4), dtype=np.float32)
    proj[0, 0] = 1.0 / (aspect * tan_half)
    proj[1, 1] = 1.0 / tan_half
    proj[2, 2] = -(far + near) / (far - near)
    proj[2, 3] = -(2.0 * far * near) / (far - near)
    proj[3, 2] = -1.0
    return proj


def translate(matrix, offset) -> np.ndarray:
    """``matrix`` followed by a translation by ``offset``."""
    translation = identity()
    translation[:3, 3] = np.asarray(offset, dtype=np.float32)
    return (np.asarray(matrix, dtype=np.float32) @ translation).astype(np.float32)


def scale(matrix, factors) -> np.ndarray:
    """``matrix`` followed by a per-axis scaling by ``factors``."""
    x, y, z = (float(f) for f in factors)
    scaling = np.diag(np.array([x, y, z, 1.0], dtype=np.float32))
    return (np.asarray(matrix, dtype=np.float32) @ scaling).astype(np.float32)