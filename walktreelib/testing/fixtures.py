"""Test fixtures for WalkTreeLib consumers.

Small reference graphs, written as multimaps (vertex -> list of children),
plus helpers to read traversals back as plain vertex lists. A vertex that
is not a key has no children.
"""

import copy
from itertools import islice
from typing import Any, Dict, Iterable, List

from ..core.adapter import MappingAdjacency
from ..core.walk import Walk

Graph = Dict[str, List[str]]

EMPTY: Graph = {}

SINGLE_EDGE: Graph = {"A": ["B"]}

# Do not traverse post-order or leaves
LOOP: Graph = {"A": ["A"]}

# Do not traverse post-order or leaves
CYCLE: Graph = {"A": ["B"], "B": ["C"], "C": ["A"]}

TREE: Graph = {
    "A": ["B", "C"],
    "B": ["D", "E"],
    "C": ["F", "G"],
}

# Two paths from A to D
DAG: Graph = {
    "A": ["B", "C"],
    "B": ["D", "E"],
    "C": ["D"],
    "D": ["G"],
}


def adjacency_for(graph: Graph) -> MappingAdjacency:
    """Adjacency over a private deep copy of ``graph``.

    Removals made during a traversal change the copy, never the shared
    module-level fixture.
    """
    return MappingAdjacency(copy.deepcopy(graph))


def path_of(walk: Walk) -> List[Any]:
    """Vertices along a walk, root first."""
    return list(walk.vertices())


def vertices_of(walks: Iterable[Walk]) -> List[Any]:
    """Destination vertex of every walk, fully consuming ``walks``."""
    return [walk.to for walk in walks]


def first_vertices(walks: Iterable[Walk], count: int) -> List[Any]:
    """Destination vertex of the first ``count`` walks (for infinite traversals)."""
    return [walk.to for walk in islice(walks, count)]
