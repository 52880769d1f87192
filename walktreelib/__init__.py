"""WalkTreeLib - Lazy Graph and Tree Walking Library.

WalkTreeLib traverses any graph you can describe with an adjacency (a way
to get from a vertex to its child edges) and produces lazy sequences of
walks: paths from the root, carrying every edge taken.

Strategies:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    pre_order       parent before children (cycle tolerant)
    breadth_first   level by level (cycle tolerant)
    post_order      children before parent (finite depth only)
    leaves          childless vertices only (finite depth only)
    leaf_elements   leaf values of nested dicts / lists
━━━━━━━━━━━━━━━━━━━━━━━━━━

The iterator of every traversal can prune() the subtree it just produced
or remove() the edge it just followed.
"""

import logging

__version__ = "0.1.0"

from .core import (
    Walk,
    WalkBuilder,
    Adjacency,
    EdgeList,
    EmptyAdjacency,
    MappingAdjacency,
    FunctionAdjacency,
    as_adjacency,
    TraversalError,
    IllegalTraversalStateError,
    UnsupportedOperationError,
    CapabilityMismatchError,
    CursorState,
    PruningIterator,
    Traversal,
    Traverser,
    PreOrderTraverser,
    BreadthFirstTraverser,
    PostOrderTraverser,
    LeavesTraverser,
    ChildrenTraverser,
    create_traverser,
)
from .adapters import ElementAdjacency, ElementShape, element_path, escape_key
from .config import TraversalConfig, TraversalStrategy
from .planning import ExecutionPlan
from .api import (
    pre_order,
    breadth_first,
    post_order,
    leaves,
    children,
    elements,
    leaf_elements,
    traverse,
    vertices,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "Walk",
    "WalkBuilder",
    "Adjacency",
    "EdgeList",
    "EmptyAdjacency",
    "MappingAdjacency",
    "FunctionAdjacency",
    "as_adjacency",
    "CursorState",
    "PruningIterator",
    "Traversal",
    "Traverser",
    "PreOrderTraverser",
    "BreadthFirstTraverser",
    "PostOrderTraverser",
    "LeavesTraverser",
    "ChildrenTraverser",
    "create_traverser",
    # Errors
    "TraversalError",
    "IllegalTraversalStateError",
    "UnsupportedOperationError",
    "CapabilityMismatchError",
    # Adapters
    "ElementAdjacency",
    "ElementShape",
    "element_path",
    "escape_key",
    # Config
    "TraversalConfig",
    "TraversalStrategy",
    "ExecutionPlan",
    # API
    "pre_order",
    "breadth_first",
    "post_order",
    "leaves",
    "children",
    "elements",
    "leaf_elements",
    "traverse",
    "vertices",
]
