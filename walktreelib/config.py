"""Configuration re-export.

Configuration components live in the _common package; this module is the
public place to import them from.
"""

from ._common.config import (
    TraversalConfig,
    TraversalStrategy,
)

__all__ = [
    'TraversalConfig',
    'TraversalStrategy',
]
