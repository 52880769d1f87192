"""Exceptions raised by WalkTreeLib.

End of sequence is signalled with the builtin StopIteration, as for any
Python iterator. Everything else derives from TraversalError.
"""


class TraversalError(Exception):
    """Base class for WalkTreeLib errors."""
    pass


class IllegalTraversalStateError(TraversalError, RuntimeError):
    """Raised when remove() or prune() is called in the wrong cursor state.

    Both are only legal once, immediately after next() returned a walk.
    Removing the root walk is also illegal since no edge leads to it.
    """
    pass


class UnsupportedOperationError(TraversalError, NotImplementedError):
    """Raised when remove() is called against a read-only children view."""
    pass


class CapabilityMismatchError(TraversalError):
    """Raised when configuration requirements can't be met by an adjacency."""
    pass
