"""RGBA colours packed into a single 32-bit integer (0xRRGGBBAA)."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

_CHANNEL_MAX = 255
_MASK = 0xFFFFFFFF
_DEFAULT_ALPHA = 0x11


def _check_channel(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _CHANNEL_MAX:
        raise ValueError(f"{name} must be an integer in 0..255, got {value!r}")


def normalize(value: int) -> float:
    """Map a channel value in 0..255 onto 0.0..1.0."""
    _check_channel(value, "value")
    return value / _CHANNEL_MAX


@dataclass(frozen=True)
class Color:
    """A colour stored as 0xRRGGBBAA."""

    hex: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.hex, bool) or not isinstance(self.hex, int) or not 0 <= self.hex <= _MASK:
            raise ValueError(f"hex must be a 32-bit unsigned integer, got {self.hex!r}")

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: int) -> Color:
        """Build a colour from four channel values."""
        for name, value in (("r", r), ("g", g), ("b", b), ("a", a)):
            _check_channel(value, name)
        return cls((r << 24) | (g << 16) | (b << 8) | a)

    @classmethod
    def from_hex(cls, hex_value: int) -> Color:
        """Build a colour from 0xRRGGBB; the alpha channel is set to 0x11."""
        if isinstance(hex_value, bool) or not isinstance(hex_value, int) or hex_value < 0:
            raise ValueError(f"hex_value must be a non-negative integer, got {hex_value!r}")
        return cls(((hex_value << 8) & _MASK) | _DEFAULT_ALPHA)

    @classmethod
    def from_hex_alpha(cls, hex_value: int) -> Color:
        """Build a colour from 0xRRGGBBAA."""
        return cls(hex_value)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        """Build a colour from three channels with an alpha of 1."""
        return cls.from_rgba(r, g, b, 1)

    def red(self) -> int:
        return (self.hex >> 24) & 0xFF

    def green(self) -> int:
        return (self.hex >> 16) & 0xFF

    def blue(self) -> int:
        return (self.hex >> 8) & 0xFF

    def alpha(self) -> int:
        return self.hex & 0xFF

    def to_vec3(self) -> np.ndarray:
        """The normalised red, green and blue channels as a float32 vector."""
        return np.array(
            [normalize(self.red()), normalize(self.green()), normalize(self.blue())],
            dtype=np.float32,
        )

    def normalized(self) -> tuple[float, float, float, float]:
        """All four channels mapped onto 0.0..1.0."""
        return (
            normalize(self.red()),
            normalize(self.green()),
            normalize(self.blue()),
            normalize(self.alpha()),
        )