"""High-level API for WalkTreeLib.

Convenience functions for the common traversals. Each returns a lazy
Traversal; iterate it as often as you like, and use ``iter()`` on it when
you need the PruningIterator to call ``prune()`` or ``remove()``.

Example:
    graph = {"A": ["B", "C"], "B": ["D"]}
    for walk in pre_order("A", graph):
        print(walk.to)
"""

from typing import Any, Iterable, Iterator, Optional

from .adapters.elements import ElementAdjacency, element_path
from .config import TraversalConfig
from .core.iterator import Traversal
from .core.traverser import (
    BreadthFirstTraverser,
    ChildrenTraverser,
    LeavesTraverser,
    PostOrderTraverser,
    PreOrderTraverser,
)
from .core.walk import Walk
from .planning import ExecutionPlan


def pre_order(root: Any, adjacency: Any) -> Traversal:
    """Depth-first, parent before children. Safe on cycles if consumed lazily."""
    return PreOrderTraverser(adjacency).traverse(root)


def breadth_first(root: Any, adjacency: Any) -> Traversal:
    """Level by level. Safe on cycles if consumed lazily."""
    return BreadthFirstTraverser(adjacency).traverse(root)


def post_order(root: Any, adjacency: Any) -> Traversal:
    """Depth-first, children before parent. Never use on a cyclic graph."""
    return PostOrderTraverser(adjacency).traverse(root)


def leaves(root: Any, adjacency: Any) -> Traversal:
    """Walks ending at childless vertices only. Never use on a cyclic graph."""
    return LeavesTraverser(adjacency).traverse(root)


def children(root: Any, adjacency: Any) -> Traversal:
    """The root's own edges."""
    return ChildrenTraverser(adjacency).traverse(root)


def elements(root: Any) -> Traversal:
    """Immediate elements of a nested structure.

    Each walk is a single edge whose ``over`` is the path segment
    (``key`` or ``[index]``) and whose ``to`` is the element.
    """
    return ChildrenTraverser(ElementAdjacency()).traverse(root)


def leaf_elements(root: Any) -> Traversal:
    """Every leaf value of a nested structure.

    Empty containers and scalars count as leaves; a scalar root yields one
    walk with an empty path. Render paths with ``element_path()``.

    Example:
        for walk in leaf_elements({"names": ["Alice", "Becky"]}):
            print(element_path(walk), walk.to)   # names[0] Alice ...
    """
    return LeavesTraverser(ElementAdjacency()).traverse(root)


def traverse(root: Any, adjacency: Any,
             config: Optional[TraversalConfig] = None) -> Traversal:
    """Traverse using a validated configuration.

    Args:
        root: Starting vertex
        adjacency: Adjacency, Mapping of vertex -> children, or callable
        config: TraversalConfig (defaults to pre-order, unbounded)

    Returns:
        Lazy Traversal

    Raises:
        CapabilityMismatchError: If the adjacency can't satisfy config
    """
    if config is None:
        config = TraversalConfig()
    return ExecutionPlan(config, adjacency).execute(root)


def vertices(walks: Iterable[Walk]) -> Iterator[Any]:
    """Yield the destination vertex of each walk."""
    for walk in walks:
        yield walk.to


__all__ = [
    'pre_order',
    'breadth_first',
    'post_order',
    'leaves',
    'children',
    'elements',
    'leaf_elements',
    'element_path',
    'traverse',
    'vertices',
]
