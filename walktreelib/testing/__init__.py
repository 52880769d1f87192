"""Testing utilities for WalkTreeLib consumers."""

from .fixtures import (
    EMPTY,
    SINGLE_EDGE,
    LOOP,
    CYCLE,
    TREE,
    DAG,
    adjacency_for,
    path_of,
    vertices_of,
    first_vertices,
)

__all__ = [
    'EMPTY',
    'SINGLE_EDGE',
    'LOOP',
    'CYCLE',
    'TREE',
    'DAG',
    'adjacency_for',
    'path_of',
    'vertices_of',
    'first_vertices',
]
