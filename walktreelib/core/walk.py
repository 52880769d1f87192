"""Walk abstraction for WalkTreeLib.

A Walk is the unit every traversal produces: where it started, where it
ended, and what it went over to get there. Traversers emit composite walks
whose ``over`` is the ordered tuple of edges taken from the root.
"""

from dataclasses import dataclass
from typing import Any, Iterator, List, Tuple


@dataclass(frozen=True)
class Walk:
    """Immutable path record from one vertex to another.

    ``over`` is implementation specific. For a single edge it is usually a
    label (or None); for a walk produced by a traverser it is the tuple of
    sub-walks (edges) that were followed, in order.

    Attributes:
        from_: Starting vertex (trailing underscore because ``from`` is a keyword)
        to: Ending vertex
        over: Edge label, tuple of sub-walks, or None
    """

    from_: Any
    to: Any
    over: Any = None

    @classmethod
    def new_instance(cls, from_: Any, to: Any, over: Any = None) -> "Walk":
        """Create a trivial walk.

        Args:
            from_: Starting vertex
            to: Ending vertex
            over: What the walk is over, kept exactly as given

        Returns:
            New immutable Walk
        """
        return cls(from_, to, over)

    @staticmethod
    def builder(root: Any) -> "WalkBuilder":
        """Start building a composite walk rooted at ``root``."""
        return WalkBuilder(root)

    @property
    def steps(self) -> Tuple["Walk", ...]:
        """Sub-walks of a composite walk, or an empty tuple."""
        if isinstance(self.over, tuple) and all(isinstance(step, Walk) for step in self.over):
            return self.over
        return ()

    def vertices(self) -> Iterator[Any]:
        """Yield the root followed by the destination of every step."""
        yield self.from_
        for step in self.steps:
            yield step.to


class WalkBuilder:
    """Mutable helper that composes sub-walks into one Walk.

    The builder does not check that consecutive sub-walks connect; callers
    are expected to add a coherent chain.
    """

    def __init__(self, root: Any):
        self._root = root
        self._stack: List[Walk] = []

    def add(self, walk: Walk) -> "WalkBuilder":
        """Push a sub-walk."""
        self._stack.append(walk)
        return self

    def pop(self) -> "WalkBuilder":
        """Remove the most recently added sub-walk.

        Raises:
            IndexError: If nothing has been added
        """
        self._stack.pop()
        return self

    def build(self) -> Walk:
        """Produce the composite walk.

        ``to`` is the last sub-walk's destination, or the root when no
        sub-walks were added.
        """
        to = self._stack[-1].to if self._stack else self._root
        return Walk.new_instance(self._root, to, tuple(self._stack))
