"""Clustering algorithms."""

from .kmeans import ClusteringEngine

__all__ = [
    'ClusteringEngine'
]
