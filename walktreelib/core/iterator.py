"""Cancellable iteration for WalkTreeLib.

Every traversal hands out a PruningIterator: an ordinary Python iterator
over Walk objects that can additionally, right after producing a walk,
either prune it (skip its subtree for this iteration only) or remove it
(delete the edge just followed from the adjacency).
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import MutableSequence
from enum import Enum
from typing import Any, Callable, Iterable, Iterator, Optional

from .adapter import EdgeList
from .errors import IllegalTraversalStateError, UnsupportedOperationError
from .walk import Walk

logger = logging.getLogger(__name__)

_MISSING = object()


class CursorState(Enum):
    """Where a PruningIterator stands relative to the last returned walk."""
    FRESH = "fresh"          # Nothing returned yet, or exhausted
    ADVANCED = "advanced"    # A walk was just returned
    CONSUMED = "consumed"    # remove() or prune() already applied to it


class ChildCursor:
    """Cursor over the children of one vertex.

    Over a MutableSequence the cursor is index based and re-reads the
    sequence on every step. ``remove_last()`` deletes the element most
    recently returned by ``next()``, even if ``has_next()`` has been called
    since. Over an EdgeList the cursor also replays the view's change
    record before each step, so an edit made through another cursor over
    the same view never makes it skip or repeat an element.

    Over any other iterable a single item of lookahead is buffered and
    removal is unsupported.
    """

    def __init__(self, children: Iterable[Walk]):
        if isinstance(children, MutableSequence):
            self._sequence = children
            self._iterator = None
        else:
            self._sequence = None
            self._iterator = iter(children)
        self._changes = children.changes if isinstance(children, EdgeList) else None
        self._seen = len(self._changes) if self._changes is not None else 0
        self._buffer = _MISSING
        self._index = 0
        self._last: Optional[int] = None

    @property
    def removable(self) -> bool:
        return self._sequence is not None

    def _sync(self) -> None:
        if self._changes is None:
            return
        for position, delta in self._changes[self._seen:]:
            if delta < 0:
                if position < self._index:
                    self._index -= 1
                if self._last is not None:
                    if position == self._last:
                        self._last = None
                    elif position < self._last:
                        self._last -= 1
            else:
                if position < self._index:
                    self._index += 1
                if self._last is not None and position <= self._last:
                    self._last += 1
        self._seen = len(self._changes)

    def has_next(self) -> bool:
        if self._sequence is not None:
            self._sync()
            return self._index < len(self._sequence)
        if self._buffer is _MISSING:
            try:
                self._buffer = next(self._iterator)
            except StopIteration:
                return False
        return True

    def next(self) -> Walk:
        if not self.has_next():
            raise StopIteration
        if self._sequence is not None:
            item = self._sequence[self._index]
            self._last = self._index
            self._index += 1
            return item
        item, self._buffer = self._buffer, _MISSING
        return item

    def remove_last(self) -> None:
        """Delete the element last returned by next() from the sequence.

        Raises:
            UnsupportedOperationError: If the children view is read-only
            IllegalTraversalStateError: If there is nothing to remove
        """
        if self._sequence is None:
            raise UnsupportedOperationError("children view does not support removal")
        self._sync()
        if self._last is None:
            raise IllegalTraversalStateError("no element to remove")
        del self._sequence[self._last]
        if self._index > self._last:
            self._index -= 1
        self._last = None
        if self._changes is not None:
            self._seen = len(self._changes)


class PruningIterator(ABC, Iterator[Walk]):
    """Iterator over walks that supports prune() and remove().

    The cursor state machine:
    - next() is always legal and moves to ADVANCED, or raises StopIteration
      and moves back to FRESH
    - remove() and prune() are legal only in ADVANCED and move to CONSUMED
    - has_next() never changes state

    Subclasses implement the strategy through ``_advance``, ``_has_next``,
    ``_remove`` and ``_prune``.
    """

    def __init__(self, limit: Optional[int] = None):
        """Initialize iterator.

        Args:
            limit: Maximum number of walks to produce (None = unlimited)
        """
        self._state = CursorState.FRESH
        self._limit = limit
        self._produced = 0

    @property
    def state(self) -> CursorState:
        return self._state

    def __iter__(self) -> "PruningIterator":
        return self

    def __next__(self) -> Walk:
        if self._limit is not None and self._produced >= self._limit:
            self._state = CursorState.FRESH
            raise StopIteration
        try:
            walk = self._advance()
        except StopIteration:
            self._state = CursorState.FRESH
            raise
        self._state = CursorState.ADVANCED
        self._produced += 1
        return walk

    def has_next(self) -> bool:
        """Check whether another walk can be produced."""
        if self._limit is not None and self._produced >= self._limit:
            return False
        return self._has_next()

    def remove(self) -> None:
        """Delete the edge followed to reach the last returned walk.

        Raises:
            IllegalTraversalStateError: If not called right after next()
            UnsupportedOperationError: If the adjacency is read-only
        """
        self._check_advanced("remove")
        self._remove()
        self._state = CursorState.CONSUMED
        logger.debug("%s: removed last traversed edge", self.__class__.__name__)

    def prune(self) -> None:
        """Skip the subtree of the last returned walk for this iteration.

        Raises:
            IllegalTraversalStateError: If not called right after next()
        """
        self._check_advanced("prune")
        self._prune()
        self._state = CursorState.CONSUMED
        logger.debug("%s: pruned last returned vertex", self.__class__.__name__)

    def _check_advanced(self, operation: str) -> None:
        if self._state is not CursorState.ADVANCED:
            raise IllegalTraversalStateError(
                f"{operation}() requires a walk just returned by next(); "
                f"cursor is {self._state.value}"
            )

    @abstractmethod
    def _advance(self) -> Walk:
        """Produce the next walk or raise StopIteration."""
        pass

    @abstractmethod
    def _has_next(self) -> bool:
        pass

    @abstractmethod
    def _remove(self) -> None:
        pass

    @abstractmethod
    def _prune(self) -> None:
        pass


class Traversal:
    """Lazy, re-iterable sequence of walks.

    Nothing is computed until iteration starts; every call to ``iter()``
    returns a new, independent PruningIterator.
    """

    def __init__(self, factory: Callable[[], PruningIterator]):
        self._factory = factory

    def __iter__(self) -> PruningIterator:
        return self._factory()

    def iterator(self) -> PruningIterator:
        """Same as iter(traversal), typed as PruningIterator."""
        return self._factory()
