"""Common components shared across WalkTreeLib.

This internal package contains pure configuration code with no
dependency on the traversal machinery. It should NOT be imported
directly by users.

Important: This package must NEVER import from core or adapters to
avoid circular dependencies.
"""

from .config import (
    TraversalConfig,
    TraversalStrategy,
)

__all__ = [
    'TraversalConfig',
    'TraversalStrategy',
]
