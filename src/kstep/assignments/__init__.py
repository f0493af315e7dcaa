"""Assignment strategies for clustering algorithms."""

from .hard import HardAssignment

__all__ = [
    'HardAssignment'
]
