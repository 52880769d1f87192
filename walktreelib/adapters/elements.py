"""Element adjacency for WalkTreeLib.

This adjacency lets WalkTreeLib treat ordinary nested Python data
(dicts, lists, tuples, arrays, scalars) as a graph. Each value is
classified once into an ElementShape; the shape decides both the children
and the label of every edge:

- mapping: one child per entry, labelled with the escaped key
- sequence: one child per element, labelled ``[index]``
- scalar: no children (strings, bytes, None and everything else)

``element_path()`` turns the labels along a walk back into a single path
string such as ``map.people[0].name``.
"""

import array
import re
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Iterable, Iterator, List

from ..core.adapter import Adjacency
from ..core.walk import Walk

# Characters with structural meaning in a rendered path
_SPECIAL_CHARACTERS = re.compile(r"([.\[\]])")


class ElementShape(Enum):
    """Runtime shape of a value, deciding how it is traversed."""
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"

    @classmethod
    def of(cls, value: Any) -> "ElementShape":
        """Classify a value by the capabilities it offers."""
        if isinstance(value, Mapping):
            return cls.MAPPING
        if isinstance(value, (str, bytes, bytearray)):
            return cls.SCALAR
        if isinstance(value, (Sequence, array.array)):
            return cls.SEQUENCE
        return cls.SCALAR

    def edges(self, value: Any) -> Iterator[Walk]:
        """Yield this shape's edges out of ``value``."""
        if self is ElementShape.MAPPING:
            for key, child in value.items():
                yield Walk.new_instance(value, child, escape_key(key))
        elif self is ElementShape.SEQUENCE:
            for index, child in enumerate(value):
                yield Walk.new_instance(value, child, f"[{index}]")


def escape_key(key: Any) -> str:
    """Render a mapping key as a path segment.

    Any ``.``, ``[`` or ``]`` in the key is prefixed with a backslash so
    that the rendered path can be split unambiguously.

    Example:
        escape_key("boolean.array") -> "boolean\\.array"
    """
    return _SPECIAL_CHARACTERS.sub(r"\\\1", str(key))


class ElementAdjacency(Adjacency):
    """Read-only adjacency over nested mappings and sequences.

    Edges run from a container to each of its elements; ``over`` is the
    rendered path segment for that element. Children views are generators,
    so remove() during traversal raises UnsupportedOperationError.
    """

    def children(self, vertex: Any) -> Iterable[Walk]:
        return ElementShape.of(vertex).edges(vertex)


def _labels(over: Any) -> Iterator[str]:
    if over is None:
        return
    if isinstance(over, str):
        yield over
        return
    for step in over:
        yield from _labels(step.over)


def element_path(walk: Walk) -> str:
    """Render the labels accumulated along a walk as one path string.

    The first segment is emitted bare, later key segments are joined with
    ``.``, and index segments are appended directly. A walk with no steps
    renders as the empty string.

    Args:
        walk: Walk produced over an ElementAdjacency (single edge or composite)

    Returns:
        Path such as ``names[0]`` or ``map.owner.name``
    """
    parts: List[str] = []
    for label in _labels(walk.over):
        if parts and not label.startswith("["):
            parts.append(".")
        parts.append(label)
    return "".join(parts)
