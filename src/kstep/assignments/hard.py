"""
Hard assignment strategy.

Assigns each point to its nearest centroid based on the distance metric.
"""

from typing import Optional
import torch
from torch import Tensor

from ..base.interfaces import AssignmentStrategy, DistanceMetric
from ..distances.euclidean import EuclideanDistance


class HardAssignment(AssignmentStrategy):
    """Hard (discrete) assignment to nearest centroid.

    Each point is assigned to exactly one cluster based on minimum distance.
    When a point is equidistant from several centroids the lowest index wins,
    since `torch.argmin` returns the first minimal value.
    """

    def __init__(self, metric: Optional[DistanceMetric] = None):
        """
        Args:
            metric: Distance metric (squared Euclidean if None)
        """
        super().__init__()
        self.metric = metric if metric is not None else EuclideanDistance(squared=True)

    def compute_distances(self, points: Tensor, centroids: Tensor) -> Tensor:
        """(n, K) distance matrix under this strategy's metric."""
        return self.metric.compute(points, centroids)

    def compute_assignments(self, points: Tensor, centroids: Tensor,
                            **kwargs) -> Tensor:
        """Assign each point to nearest centroid.

        Args:
            points: (n, d) data points
            centroids: (K, d) centroids
            **kwargs: Ignored for basic hard assignment

        Returns:
            (n,) long tensor of cluster indices
        """
        distances = self.compute_distances(points, centroids)

        # Assign to nearest cluster (minimum distance)
        assignments = torch.argmin(distances, dim=1)

        return assignments.long()
