"""
Core interfaces for the step-by-step K-Means engine.

This module defines the abstract base classes the engine is composed from,
so that each phase of an iteration can be swapped or tested on its own.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any
from torch import Tensor


class DistanceMetric(ABC):
    """Abstract base class for point-to-centroid distance computations."""

    @abstractmethod
    def compute(self, points: Tensor, centroids: Tensor, **kwargs) -> Tensor:
        """Compute distances from every point to every centroid.

        Args:
            points: (n, d) tensor of points
            centroids: (K, d) tensor of centroids
            **kwargs: Metric-specific parameters

        Returns:
            (n, K) tensor of distances/costs
        """
        pass


class AssignmentStrategy(ABC):
    """Abstract base class for point-to-cluster assignment strategies."""

    @abstractmethod
    def compute_assignments(self, points: Tensor, centroids: Tensor,
                            **kwargs) -> Tensor:
        """Compute cluster assignments for points.

        Args:
            points: (n, d) tensor of data points
            centroids: (K, d) tensor of centroids
            **kwargs: Strategy-specific parameters

        Returns:
            (n,) long tensor of cluster indices
        """
        pass


class ParameterUpdater(ABC):
    """Abstract base class for centroid update strategies."""

    @abstractmethod
    def update(self, points: Tensor, labels: Tensor, centroids: Tensor,
               **kwargs) -> Tensor:
        """Compute new centroids from points and their assignments.

        Args:
            points: (n, d) tensor of all data points
            labels: (n,) long tensor of assignments (-1 for unassigned)
            centroids: (K, d) tensor of current centroids
            **kwargs: Update-specific parameters

        Returns:
            (K, d) tensor of new centroids. The input is never modified.
        """
        pass


class ConvergenceCriterion(ABC):
    """Abstract base class for convergence checking."""

    def __init__(self):
        self.history = []

    @abstractmethod
    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if algorithm has converged.

        Args:
            current_state: Dictionary containing current algorithm state

        Returns:
            True if converged, False otherwise
        """
        pass

    def reset(self):
        """Reset convergence history."""
        self.history = []
