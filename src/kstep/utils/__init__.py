"""Utility functions and classes for the K-Means engine."""

from .convergence import NoAssignmentChange
from .validation import validate_coordinates, check_delay_ms

__all__ = [
    # Convergence
    'NoAssignmentChange',

    # Validation
    'validate_coordinates',
    'check_delay_ms'
]
