"""Distance metrics for clustering algorithms."""

from .euclidean import EuclideanDistance

__all__ = [
    'EuclideanDistance'
]
