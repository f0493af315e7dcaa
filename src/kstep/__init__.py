"""
kstep: step-by-step K-means clustering.

Runs K-means one iteration at a time over 2D points, keeping a history so a
driver can step back, and ships a loader, a text reporter, a background
stepping driver and a matplotlib renderer around the engine.

Example usage:
    >>> from kstep import ClusteringEngine
    >>>
    >>> engine = ClusteringEngine()
    >>> engine.load([(0, 0), (1, 0), (0, 1), (10, 10)], [(0, 0), (10, 10)])
    ClusteringEngine(n_points=4, n_clusters=2, iteration=1)
    >>> engine.step()
    True
    >>> engine.step()
    False
    >>> engine.step_back()
    True
"""

__version__ = '0.1.0'

# Import main algorithm
from .algorithms.kmeans import ClusteringEngine

# Data file and report helpers
from .dataio import load_data, read_data, LoadedData, format_iteration, write_report

# Driver
from .driver import SteppingDriver

# Import visualization
from .visualization import plot_snapshot, plot_engine

# Convenience imports
from .base import (
    UNASSIGNED,
    InvalidInput,
    Point,
    Centroid,
    Snapshot
)

__all__ = [
    # Algorithm
    'ClusteringEngine',

    # Data files and reports
    'load_data',
    'read_data',
    'LoadedData',
    'format_iteration',
    'write_report',

    # Driver
    'SteppingDriver',

    # Visualization
    'plot_snapshot',
    'plot_engine',

    # Core data structures
    'UNASSIGNED',
    'InvalidInput',
    'Point',
    'Centroid',
    'Snapshot',

    # Version
    '__version__'
]
