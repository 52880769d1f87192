"""Adjacency implementations for specific data structures."""

from .elements import ElementAdjacency, ElementShape, element_path, escape_key

__all__ = [
    'ElementAdjacency',
    'ElementShape',
    'element_path',
    'escape_key',
]
