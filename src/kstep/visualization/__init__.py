"""Visualization utilities for clustering results."""

from .plot_clusters import (
    cluster_colors,
    plot_snapshot,
    plot_engine
)

__all__ = [
    'cluster_colors',
    'plot_snapshot',
    'plot_engine'
]
