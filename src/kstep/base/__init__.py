"""Base classes, interfaces and data types for the K-Means engine."""

from .interfaces import (
    DistanceMetric,
    AssignmentStrategy,
    ParameterUpdater,
    ConvergenceCriterion
)

from .data_structures import (
    UNASSIGNED,
    InvalidInput,
    Point,
    Centroid,
    Snapshot
)

__all__ = [
    # Interfaces
    'DistanceMetric',
    'AssignmentStrategy',
    'ParameterUpdater',
    'ConvergenceCriterion',

    # Data structures
    'UNASSIGNED',
    'InvalidInput',
    'Point',
    'Centroid',
    'Snapshot'
]
