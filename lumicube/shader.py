"""Shader programs built from GLSL files, with checked uniform setters."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterable

import numpy as np


class ShaderType(Enum):
    """The pipeline stage a shader source is compiled for."""

    VERTEX = "vertex"
    FRAGMENT = "fragment"
    COMPUTE = "compute"
    GEOMETRY = "geometry"


class ShaderError(Exception):
    """A shader could not be read, compiled or linked, or a uniform was not found."""


class _PygletShaders:
    """Loads the GL shader bindings on first use, so no context is needed at import time."""

    def __getattr__(self, name: str):
        from pyglet.graphics import shader

        return getattr(shader, name)


_backend = _PygletShaders()


def _compile(path, shader_type: ShaderType):
    try:
        source = Path(path).read_text()
    except OSError as exc:
        raise ShaderError(f"Error: Failed to read file {path}\n{exc}") from exc
    try:
        return _backend.Shader(source, shader_type.value)
    except _backend.ShaderException as exc:
        raise ShaderError(f"Error: Shader compilation failed\n{exc}") from exc


def _link(compiled: list):
    if not compiled:
        raise ShaderError("Error: Program linking failed\nno shaders were given")
    try:
        return _backend.ShaderProgram(*compiled)
    except _backend.ShaderException as exc:
        raise ShaderError(f"Error: Program linking failed\n{exc}") from exc


class Shader:
    """A linked shader program made from (path, ShaderType) pairs."""

    def __init__(self, shaders: Iterable[tuple[str | Path, ShaderType]]) -> None:
        self._program = None
        compiled = []
        try:
            for path, shader_type in shaders:
                compiled.append(_compile(path, shader_type))
            self._program = _link(compiled)
        finally:
            for shader in compiled:
                shader.delete()

    @property
    def program_id(self) -> int:
        return self._live_program().id

    def _live_program(self):
        if self._program is None:
            raise ShaderError("Error: Shader program has been deleted")
        return self._program

    def _set(self, uniform: str, value) -> None:
        program = self._live_program()
        if "\0" in uniform:
            raise ShaderError(
                f"Error: Uniform name is null terminated\n"
                f"nul byte found in provided data: {uniform!r}"
            )
        if uniform not in program.uniforms:
            raise ShaderError(f'Error: Could not find uniform location for "{uniform}"')
        program[uniform] = value

    def use_program(self) -> None:
        """Make this program the one used for rendering."""
        self._live_program().use()

    def set_uniform_1f(self, uniform: str, value: float) -> None:
        self._set(uniform, float(value))

    def set_uniform_2f(self, uniform: str, value1: float, value2: float) -> None:
        self._set(uniform, (float(value1), float(value2)))

    def set_uniform_3f(self, uniform: str, value1: float, value2: float, value3: float) -> None:
        self._set(uniform, (float(value1), float(value2), float(value3)))

    def set_uniform_4f(
        self, uniform: str, value1: float, value2: float, value3: float, value4: float
    ) -> None:
        self._set(uniform, (float(value1), float(value2), float(value3), float(value4)))

    def set_uniform_1i(self, uniform: str, value: int) -> None:
        self._set(uniform, int(value))

    def set_uniform_2i(self, uniform: str, value1: int, value2: int) -> None:
        self._set(uniform, (int(value1), int(value2)))

    def set_uniform_3i(self, uniform: str, value1: int, value2: int, value3: int) -> None:
        self._set(uniform, (int(value1), int(value2), int(value3)))

    def set_uniform_4i(
        self, uniform: str, value1: int, value2: int, value3: int, value4: int
    ) -> None:
        self._set(uniform, (int(value1), int(value2), int(value3), int(value4)))

    def set_uniform_mat4(self, uniform: str, matrix) -> None:
        """Upload a 4x4 matrix; it is sent in column-major order, untransposed."""
        mat = np.asarray(matrix, dtype=np.float32)
        if mat.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {mat.shape}")
        self._set(uniform, tuple(float(v) for v in mat.flatten(order="F")))

    def delete(self) -> None:
        """Release the program; later calls do nothing."""
        if self._program is not None:
            self._program.delete()
            self._program = None

    def __enter__(self) -> Shader:
        return self

    def __exit__(self, *exc_info) -> None:
        self.delete()