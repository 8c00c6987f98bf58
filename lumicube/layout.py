"""Vertex attribute layouts described on dataclass fields.

A field declared with :func:`layout_field` becomes one float vertex
attribute; fields without it are left out of the layout.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

FLOAT_SIZE = 4
_LAYOUT_KEY = "layout"


class LayoutError(Exception):
    """A vertex layout could not be derived."""


@dataclass(frozen=True)
class VertexAttribute:
    """One float vertex attribute: shader location, component count and byte offset."""

    name: str
    location: int
    elements: int
    offset: int
    normalized: bool = False


def _require_count(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise LayoutError(f"'{name}' must be an integer")
    return value


def layout_field(location: int, elements: int):
    """A dataclass field carrying a vertex attribute's location and component count."""
    spec = {
        "location": _require_count(location, "location"),
        "elements": _require_count(elements, "elements"),
    }
    return dataclasses.field(metadata={_LAYOUT_KEY: spec})


def vertex_layout(vertex_type) -> list[VertexAttribute]:
    """The attributes of a vertex dataclass, in field order, with packed byte offsets."""
    if not dataclasses.is_dataclass(vertex_type):
        raise LayoutError("a vertex layout can only be derived for dataclasses")

    attributes = []
    offset = 0
    for fld in dataclasses.fields(vertex_type):
        spec = fld.metadata.get(_LAYOUT_KEY)
        if spec is None:
            continue
        if not isinstance(spec, dict):
            raise LayoutError(f"Failed to parse layout attributes of field '{fld.name}'")
        unsupported = set(spec) - {"location", "elements"}
        if unsupported:
            raise LayoutError(f"Unsupported vertex_layout property: {sorted(unsupported)[0]}")
        if "location" not in spec or "elements" not in spec:
            continue
        location = _require_count(spec["location"], "location")
        elements = _require_count(spec["elements"], "elements")
        attributes.append(VertexAttribute(fld.name, location, elements, offset))
        offset += elements * FLOAT_SIZE
    return attributes


def vertex_stride(vertex_type) -> int:
    """Size in bytes of one packed vertex of ``vertex_type``."""
    return sum(attr.elements for attr in vertex_layout(vertex_type)) * FLOAT_SIZE