"""Core abstractions for WalkTreeLib.

This package contains the Walk data model, the Adjacency abstraction, the
cancellable iterator contract and the traversal strategies built on it.
"""

from .walk import Walk, WalkBuilder
from .adapter import (
    Adjacency,
    EdgeList,
    EmptyAdjacency,
    MappingAdjacency,
    FunctionAdjacency,
    as_adjacency,
)
from .errors import (
    TraversalError,
    IllegalTraversalStateError,
    UnsupportedOperationError,
    CapabilityMismatchError,
)
from .iterator import CursorState, ChildCursor, PruningIterator, Traversal
from .traverser import (
    Traverser,
    PreOrderTraverser,
    BreadthFirstTraverser,
    PostOrderTraverser,
    LeavesTraverser,
    ChildrenTraverser,
    create_traverser,
)

__all__ = [
    "Walk",
    "WalkBuilder",
    "Adjacency",
    "EdgeList",
    "EmptyAdjacency",
    "MappingAdjacency",
    "FunctionAdjacency",
    "as_adjacency",
    "TraversalError",
    "IllegalTraversalStateError",
    "UnsupportedOperationError",
    "CapabilityMismatchError",
    "CursorState",
    "ChildCursor",
    "PruningIterator",
    "Traversal",
    "Traverser",
    "PreOrderTraverser",
    "BreadthFirstTraverser",
    "PostOrderTraverser",
    "LeavesTraverser",
    "ChildrenTraverser",
    "create_traverser",
]
