"""Adjacency abstraction for WalkTreeLib.

An Adjacency knows how to get from a vertex to its children. Traversers
never look at vertices themselves; everything they know about the graph
comes from the edges an Adjacency hands them.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, MutableSequence
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from .walk import Walk


class Adjacency(ABC):
    """Abstract source of child edges.

    ``children()`` returns the edges leaving a vertex as Walk objects whose
    ``to`` is the child. If the returned object is a MutableSequence, it is
    treated as a live, removable view: a traversal may delete the edge it
    just followed, and that deletion must be reflected in the underlying
    graph. Any other iterable is read-only.
    """

    @abstractmethod
    def children(self, vertex: Any) -> Iterable[Walk]:
        """Get the edges leaving ``vertex``.

        Args:
            vertex: The parent vertex

        Returns:
            Iterable of Walk edges, in child order
        """
        pass

    # Capability flags - adjacencies declare what they support

    def supports_removal(self) -> bool:
        """Check if children views support removing edges.

        Returns:
            True if remove() during traversal can succeed
        """
        return False

    def is_finite(self) -> Optional[bool]:
        """Check if every walk through this adjacency has bounded length.

        Post-order and leaves traversal never terminate otherwise.

        Returns:
            True if acyclic, False if a cycle exists, None if unknown
        """
        return None


class EmptyAdjacency(Adjacency):
    """Adjacency in which no vertex has children."""

    def children(self, vertex: Any) -> Iterable[Walk]:
        return ()

    def is_finite(self) -> Optional[bool]:
        return True


class EdgeList(MutableSequence):
    """Live edge view over one vertex's list of child vertices.

    Every insertion and deletion made through the view is recorded in
    ``changes`` as a ``(position, delta)`` pair. Cursors walking the same
    view replay that record, so a removal made through one cursor moves
    all the others consistently.
    """

    def __init__(self, parent: Any, targets: List[Any]):
        self._parent = parent
        self._targets = targets
        self._changes: List[Tuple[int, int]] = []

    @property
    def targets(self) -> List[Any]:
        return self._targets

    @property
    def changes(self) -> List[Tuple[int, int]]:
        return self._changes

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [Walk.new_instance(self._parent, target) for target in self._targets[index]]
        return Walk.new_instance(self._parent, self._targets[index])

    def __setitem__(self, index, edge):
        self._targets[index] = edge.to

    def __delitem__(self, index):
        if isinstance(index, slice):
            positions = range(*index.indices(len(self._targets)))
            for position in sorted(positions, reverse=True):
                del self[position]
            return
        if index < 0:
            index += len(self._targets)
        del self._targets[index]
        self._changes.append((index, -1))

    def __len__(self) -> int:
        return len(self._targets)

    def insert(self, index: int, edge: Walk) -> None:
        size = len(self._targets)
        if index < 0:
            index += size
        index = max(0, min(index, size))
        self._targets.insert(index, edge.to)
        self._changes.append((index, 1))


class MappingAdjacency(Adjacency):
    """Adjacency backed by a multimap of vertex -> list of child vertices.

    A vertex missing from the mapping has no children. Edges carry no label
    (``over`` is None). When the child collections are lists, edges can be
    removed during traversal and the removal is applied to the mapping
    itself.

    Example:
        graph = {"A": ["B", "C"], "B": ["D"]}
        adjacency = MappingAdjacency(graph)
    """

    def __init__(self, graph: Mapping):
        if graph is None:
            raise ValueError("graph is required")
        self.graph = graph
        # One view per vertex, shared by every cursor over its children
        self._views: Dict[Any, EdgeList] = {}

    def children(self, vertex: Any) -> Iterable[Walk]:
        targets = self.graph.get(vertex)
        if targets is None:
            return ()
        if isinstance(targets, list):
            view = self._views.get(vertex)
            if view is None or view.targets is not targets:
                view = EdgeList(vertex, targets)
                self._views[vertex] = view
            return view
        return tuple(Walk.new_instance(vertex, target) for target in targets)

    def supports_removal(self) -> bool:
        return all(isinstance(targets, list) for targets in self.graph.values())

    def is_finite(self) -> Optional[bool]:
        """Check the whole mapping for a cycle (iterative three-colour DFS)."""
        # 0 = unseen, 1 = on the current path, 2 = finished
        colour: Dict[Any, int] = {}
        for start in self.graph:
            if colour.get(start, 0):
                continue
            colour[start] = 1
            stack = [(start, iter(self.graph.get(start, ())))]
            while stack:
                vertex, targets = stack[-1]
                for target in targets:
                    state = colour.get(target, 0)
                    if state == 1:
                        return False
                    if state == 0:
                        colour[target] = 1
                        stack.append((target, iter(self.graph.get(target, ()))))
                        break
                else:
                    colour[vertex] = 2
                    stack.pop()
        return True


class FunctionAdjacency(Adjacency):
    """Adjacency wrapping a plain callable.

    The callable receives a vertex and returns its edges as Walk objects,
    or None for no children. Unless ``removable`` is set, a returned
    sequence is copied into a tuple, so remove() fails instead of editing
    a throwaway list. With ``removable`` set, return a live view such as
    an EdgeList.
    """

    def __init__(self, func: Callable[[Any], Optional[Iterable[Walk]]], removable: bool = False):
        if func is None:
            raise ValueError("func is required")
        self.func = func
        self._removable = removable

    def children(self, vertex: Any) -> Iterable[Walk]:
        edges = self.func(vertex)
        if edges is None:
            return ()
        if not self._removable and isinstance(edges, MutableSequence):
            return tuple(edges)
        return edges

    def supports_removal(self) -> bool:
        return self._removable


def as_adjacency(source: Any) -> Adjacency:
    """Coerce an Adjacency, a multimap or a callable into an Adjacency.

    Args:
        source: Adjacency instance, Mapping of vertex -> children, or callable

    Returns:
        Adjacency instance

    Raises:
        ValueError: If source is None
        TypeError: If source can't be used as an adjacency
    """
    if source is None:
        raise ValueError("adjacency is required")
    if isinstance(source, Adjacency):
        return source
    if isinstance(source, Mapping):
        return MappingAdjacency(source)
    if callable(source):
        return FunctionAdjacency(source)
    raise TypeError(
        f"Cannot use {type(source).__name__} as an adjacency; "
        f"expected Adjacency, Mapping or callable"
    )
