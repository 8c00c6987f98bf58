"""Drawable models built from coloured vertices."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from lumicube.color import Color
from lumicube.layout import VertexAttribute, layout_field, vertex_layout, vertex_stride


class _PygletGL:
    """Loads the GL bindings on first use, so no context is needed at import time."""

    def __getattr__(self, name: str):
        from pyglet import gl as pyglet_gl

        return getattr(pyglet_gl, name)


gl = _PygletGL()


class Model(ABC):
    """Something that can draw itself."""

    @abstractmethod
    def draw(self) -> None:
        """Issue the draw calls for this model."""


@dataclass(frozen=True)
class Vertex:
    """A vertex with a position and an RGB colour."""

    position: tuple[float, float, float] = layout_field(0, 3)
    color: tuple[float, float, float] = layout_field(1, 3)


_CUBE_POSITIONS = (
    (-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, 0.5, -0.5),
    (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5), (-0.5, -0.5, -0.5),
    (-0.5, -0.5, 0.5), (0.5, -0.5, 0.5), (0.5, 0.5, 0.5),
    (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5), (-0.5, -0.5, 0.5),
    (-0.5, 0.5, 0.5), (-0.5, 0.5, -0.5), (-0.5, -0.5, -0.5),
    (-0.5, -0.5, -0.5), (-0.5, -0.5, 0.5), (-0.5, 0.5, 0.5),
    (0.5, 0.5, 0.5), (0.5, 0.5, -0.5), (0.5, -0.5, -0.5),
    (0.5, -0.5, -0.5), (0.5, -0.5, 0.5), (0.5, 0.5, 0.5),
    (-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, -0.5, 0.5),
    (0.5, -0.5, 0.5), (-0.5, -0.5, 0.5), (-0.5, -0.5, -0.5),
    (-0.5, 0.5, -0.5), (0.5, 0.5, -0.5), (0.5, 0.5, 0.5),
    (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5), (-0.5, 0.5, -0.5),
)


def cube_vertices(color: Color) -> list[Vertex]:
    """The 36 vertices of a unit cube's twelve triangles, all in one colour."""
    rgb = tuple(float(c) for c in color.to_vec3())
    return [Vertex(position, rgb) for position in _CUBE_POSITIONS]


def pack_vertices(vertices: Sequence) -> np.ndarray:
    """Flatten vertices into a float32 array following their vertex layout."""
    vertex_type = type(vertices[0]) if vertices else Vertex
    layout = vertex_layout(vertex_type)
    values: list[float] = []
    for vertex in vertices:
        for attr in layout:
            components = tuple(getattr(vertex, attr.name))
            if len(components) != attr.elements:
                raise ValueError(
                    f"field '{attr.name}' has {len(components)} components, "
                    f"expected {attr.elements}"
                )
            values.extend(float(c) for c in components)
    return np.array(values, dtype=np.float32)


def setup_layout(vertex_type) -> list[VertexAttribute]:
    """Describe ``vertex_type``'s attributes to the bound vertex array and enable them."""
    stride = vertex_stride(vertex_type)
    layout = vertex_layout(vertex_type)
    for attr in layout:
        gl.glVertexAttribPointer(
            attr.location, attr.elements, gl.GL_FLOAT, gl.GL_FALSE, stride, attr.offset
        )
        gl.glEnableVertexAttribArray(attr.location)
    return layout


def _generate(gen_function) -> int:
    ids = (gl.GLuint * 1)()
    gen_function(1, ids)
    return ids[0]


def _release(delete_function, object_id: int) -> None:
    delete_function(1, (gl.GLuint * 1)(object_id))


class Cube(Model):
    """A unit cube held in its own vertex array and buffer."""

    def __init__(self, color: Color | None = None) -> None:
        self.color = color if color is not None else Color.from_hex(0xFFFFFF)
        self.vertices = cube_vertices(self.color)
        data = pack_vertices(self.vertices)

        self._vao = _generate(gl.glGenVertexArrays)
        self._vbo = _generate(gl.glGenBuffers)

        gl.glBindVertexArray(self._vao)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self._vbo)
        gl.glBufferData(gl.GL_ARRAY_BUFFER, data.nbytes, data.ctypes.data, gl.GL_STATIC_DRAW)
        setup_layout(Vertex)
        gl.glBindVertexArray(0)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)
        self._alive = True

    def with_color(self, color: Color) -> Cube:
        """A new cube in ``color``."""
        return Cube(color)

    def draw(self) -> None:
        gl.glBindVertexArray(self._vao)
        gl.glDrawArrays(gl.GL_TRIANGLES, 0, len(self.vertices))

    def delete(self) -> None:
        """Release the GL objects; later calls do nothing."""
        if self._alive:
            _release(gl.glDeleteVertexArrays, self._vao)
            _release(gl.glDeleteBuffers, self._vbo)
            self._alive = False

    def __enter__(self) -> Cube:
        return self

    def __exit__(self, *exc_info) -> None:
        self.delete()