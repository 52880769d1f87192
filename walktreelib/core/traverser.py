"""Tree traversal strategies for WalkTreeLib.

Traversers implement different algorithms for walking through graphs.
They work with any Adjacency, and every one of them produces walks rooted
at the starting vertex whose ``over`` is the tuple of edges followed.

Cycle safety:
- PreOrderTraverser and BreadthFirstTraverser are lazy and tolerate
  cycles (the traversal is then infinite; bound your consumption)
- PostOrderTraverser and LeavesTraverser must fully descend before
  emitting and never terminate on a cyclic graph
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, List, NamedTuple, Optional, Tuple, Union

from .adapter import Adjacency, as_adjacency
from .errors import IllegalTraversalStateError
from .iterator import ChildCursor, PruningIterator, Traversal
from .walk import Walk
from .._common.config import TraversalStrategy

logger = logging.getLogger(__name__)

Steps = Tuple[Walk, ...]


class _Frame(NamedTuple):
    """One level of traversal: the edges followed so far and the children left."""
    steps: Steps
    cursor: ChildCursor


class _PostOrderFrame(NamedTuple):
    steps: Steps
    cursor: ChildCursor
    parent: Optional[ChildCursor]


def _compose(root: Any, steps: Steps) -> Walk:
    builder = Walk.builder(root)
    for step in steps:
        builder.add(step)
    return builder.build()


class Traverser(ABC):
    """Abstract base class for traversal strategies.

    Traversers implement the algorithms for walking through graphs in
    different orders. They are independent of the graph structure,
    working through the Adjacency.
    """

    strategy: TraversalStrategy

    def __init__(self, adjacency: Any):
        """Initialize traverser with an adjacency.

        Args:
            adjacency: Adjacency, Mapping of vertex -> children, or callable

        Raises:
            ValueError: If adjacency is None
        """
        self.adjacency: Adjacency = as_adjacency(adjacency)

    def traverse(self, root: Any, limit: Optional[int] = None) -> Traversal:
        """Lazily traverse the graph starting from root.

        Args:
            root: Starting vertex
            limit: Maximum number of walks per iteration (None = unlimited)

        Returns:
            Traversal; each iteration over it starts from scratch
        """
        return Traversal(lambda: self.iterator(root, limit))

    @abstractmethod
    def iterator(self, root: Any, limit: Optional[int] = None) -> PruningIterator:
        """Create a fresh PruningIterator for one pass over the graph."""
        pass


class _StrategyIterator(PruningIterator):
    """Shared state for the strategy iterators."""

    def __init__(self, root: Any, adjacency: Adjacency, limit: Optional[int]):
        super().__init__(limit)
        self._root = root
        self._adjacency = adjacency
        self._started = False
        # Cursor that produced the last edge; None for the root walk
        self._last_cursor: Optional[ChildCursor] = None

    def _cursor(self, vertex: Any) -> ChildCursor:
        return ChildCursor(self._adjacency.children(vertex))

    def _remove_last_edge(self) -> None:
        if self._last_cursor is None:
            raise IllegalTraversalStateError("the root walk has no edge to remove")
        self._last_cursor.remove_last()
        self._last_cursor = None


class _PreOrderIterator(_StrategyIterator):
    """Depth-first, parent before children, using an explicit stack."""

    def __init__(self, root: Any, adjacency: Adjacency, limit: Optional[int]):
        super().__init__(root, adjacency, limit)
        self._stack: List[_Frame] = []
        # Children of the last returned vertex, pushed on the next advance
        self._pending: Optional[_Frame] = None

    def _has_next(self) -> bool:
        if not self._started:
            return True
        if self._pending is not None and self._pending.cursor.has_next():
            return True
        return any(frame.cursor.has_next() for frame in reversed(self._stack))

    def _advance(self) -> Walk:
        if not self._started:
            self._started = True
            self._pending = _Frame((), self._cursor(self._root))
            return _compose(self._root, ())

        if self._pending is not None:
            self._stack.append(self._pending)
            self._pending = None
        while self._stack and not self._stack[-1].cursor.has_next():
            self._stack.pop()
        if not self._stack:
            raise StopIteration

        frame = self._stack[-1]
        edge = frame.cursor.next()
        steps = frame.steps + (edge,)
        self._pending = _Frame(steps, self._cursor(edge.to))
        self._last_cursor = frame.cursor
        return _compose(self._root, steps)

    def _prune(self) -> None:
        self._pending = None

    def _remove(self) -> None:
        self._remove_last_edge()
        self._pending = None


class _BreadthFirstIterator(_StrategyIterator):
    """Level by level, using a FIFO frontier of frames.

    The frame for a returned vertex is held back until the next advance,
    so prune() and remove() retract exactly that vertex's batch of children
    and nothing else.
    """

    def __init__(self, root: Any, adjacency: Adjacency, limit: Optional[int]):
        super().__init__(root, adjacency, limit)
        self._frontier: Deque[_Frame] = deque()
        self._pending: Optional[_Frame] = None

    def _has_next(self) -> bool:
        if not self._started:
            return True
        if self._pending is not None and self._pending.cursor.has_next():
            return True
        return any(frame.cursor.has_next() for frame in self._frontier)

    def _advance(self) -> Walk:
        if not self._started:
            self._started = True
            self._pending = _Frame((), self._cursor(self._root))
            return _compose(self._root, ())

        if self._pending is not None:
            self._frontier.append(self._pending)
            self._pending = None
        while self._frontier and not self._frontier[0].cursor.has_next():
            self._frontier.popleft()
        if not self._frontier:
            raise StopIteration

        frame = self._frontier[0]
        edge = frame.cursor.next()
        steps = frame.steps + (edge,)
        self._pending = _Frame(steps, self._cursor(edge.to))
        self._last_cursor = frame.cursor
        return _compose(self._root, steps)

    def _prune(self) -> None:
        self._pending = None

    def _remove(self) -> None:
        self._remove_last_edge()
        self._pending = None


class _PostOrderIterator(_StrategyIterator):
    """Depth-first, children before parent.

    A frame is emitted once its cursor is exhausted, so the whole subtree
    below a vertex is produced before the vertex itself.
    """

    def __init__(self, root: Any, adjacency: Adjacency, limit: Optional[int]):
        super().__init__(root, adjacency, limit)
        self._stack: List[_PostOrderFrame] = []

    def _has_next(self) -> bool:
        return not self._started or bool(self._stack)

    def _advance(self) -> Walk:
        if not self._started:
            self._started = True
            self._stack.append(_PostOrderFrame((), self._cursor(self._root), None))
        if not self._stack:
            raise StopIteration

        while True:
            frame = self._stack[-1]
            if frame.cursor.has_next():
                edge = frame.cursor.next()
                self._stack.append(
                    _PostOrderFrame(frame.steps + (edge,), self._cursor(edge.to), frame.cursor)
                )
                continue
            self._stack.pop()
            self._last_cursor = frame.parent
            return _compose(self._root, frame.steps)

    def _prune(self) -> None:
        # The subtree was already fully produced
        pass

    def _remove(self) -> None:
        self._remove_last_edge()


class _LeavesIterator(_StrategyIterator):
    """Depth-first descent that only emits walks ending at childless vertices."""

    def __init__(self, root: Any, adjacency: Adjacency, limit: Optional[int]):
        super().__init__(root, adjacency, limit)
        self._stack: List[_Frame] = []

    def _has_next(self) -> bool:
        if not self._started:
            return True
        # Any edge left leads to at least one more leaf on a finite graph
        return any(frame.cursor.has_next() for frame in self._stack)

    def _advance(self) -> Walk:
        if not self._started:
            self._started = True
            cursor = self._cursor(self._root)
            if not cursor.has_next():
                return _compose(self._root, ())
            self._stack.append(_Frame((), cursor))

        while self._stack:
            frame = self._stack[-1]
            if not frame.cursor.has_next():
                self._stack.pop()
                continue
            edge = frame.cursor.next()
            steps = frame.steps + (edge,)
            cursor = self._cursor(edge.to)
            if cursor.has_next():
                self._stack.append(_Frame(steps, cursor))
                continue
            self._last_cursor = frame.cursor
            return _compose(self._root, steps)
        raise StopIteration

    def _prune(self) -> None:
        # A leaf has nothing below it
        pass

    def _remove(self) -> None:
        self._remove_last_edge()


class _ChildrenIterator(_StrategyIterator):
    """One level deep: the root's edges themselves."""

    def __init__(self, root: Any, adjacency: Adjacency, limit: Optional[int]):
        super().__init__(root, adjacency, limit)
        self._children: Optional[ChildCursor] = None

    def _ensure_cursor(self) -> ChildCursor:
        if self._children is None:
            self._started = True
            self._children = self._cursor(self._root)
        return self._children

    def _has_next(self) -> bool:
        return self._ensure_cursor().has_next()

    def _advance(self) -> Walk:
        cursor = self._ensure_cursor()
        edge = cursor.next()
        self._last_cursor = cursor
        return edge

    def _prune(self) -> None:
        pass

    def _remove(self) -> None:
        self._remove_last_edge()


class PreOrderTraverser(Traverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children, left to right in adjacency order.
    Cycles are not detected: a self-loop yields the same vertex forever.
    """

    strategy = TraversalStrategy.PRE_ORDER

    def iterator(self, root: Any, limit: Optional[int] = None) -> PruningIterator:
        return _PreOrderIterator(root, self.adjacency, limit)


class BreadthFirstTraverser(Traverser):
    """Breadth-first (level-order) traversal strategy.

    Emits the root, then every walk of length 1, then length 2, and so on.
    A vertex reachable over several paths is visited once per path.
    """

    strategy = TraversalStrategy.BREADTH_FIRST

    def iterator(self, root: Any, limit: Optional[int] = None) -> PruningIterator:
        return _BreadthFirstIterator(root, self.adjacency, limit)


class PostOrderTraverser(Traverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent. Never use it on a graph with a cycle or
    self-loop; it will descend forever before producing anything.
    """

    strategy = TraversalStrategy.POST_ORDER

    def iterator(self, root: Any, limit: Optional[int] = None) -> PruningIterator:
        return _PostOrderIterator(root, self.adjacency, limit)


class LeavesTraverser(Traverser):
    """Emits only walks that end at a vertex with no children.

    A childless root is itself a leaf. Like post-order, this needs a graph
    of finite depth.
    """

    strategy = TraversalStrategy.LEAVES

    def iterator(self, root: Any, limit: Optional[int] = None) -> PruningIterator:
        return _LeavesIterator(root, self.adjacency, limit)


class ChildrenTraverser(Traverser):
    """Emits the root's own edges, one level deep."""

    strategy = TraversalStrategy.CHILDREN

    def iterator(self, root: Any, limit: Optional[int] = None) -> PruningIterator:
        return _ChildrenIterator(root, self.adjacency, limit)


# Factory function for creating traversers by name
def create_traverser(strategy: Union[str, TraversalStrategy], adjacency: Any) -> Traverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: TraversalStrategy or name (pre_order, bfs, post_order, leaves, children)
        adjacency: Adjacency for the graph

    Returns:
        Traverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'pre_order': PreOrderTraverser,
        'dfs_pre': PreOrderTraverser,
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'post_order': PostOrderTraverser,
        'dfs_post': PostOrderTraverser,
        'leaves': LeavesTraverser,
        'children': ChildrenTraverser,
    }

    if isinstance(strategy, TraversalStrategy):
        strategy = strategy.value
    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    traverser = strategies[strategy_lower](adjacency)
    logger.debug("Created %s over %s", traverser.__class__.__name__,
                 traverser.adjacency.__class__.__name__)
    return traverser
