"""
Euclidean distance metric for clustering.

The only metric the engine uses: plain straight-line distance between a
point and a centroid.
"""

import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric


class EuclideanDistance(DistanceMetric):
    """Euclidean distance metric.

    Computes ||x - μ|| (or ||x - μ||²) for every point/centroid pair.
    """

    def __init__(self, squared: bool = True):
        """
        Args:
            squared: If True, return squared distances (default).
                    If False, return actual Euclidean distances.
                    Both give the same nearest centroid.
        """
        self.squared = squared

    def compute(self, points: Tensor, centroids: Tensor, **kwargs) -> Tensor:
        """Compute Euclidean distances from points to centroids.

        Args:
            points: (n, d) tensor of points
            centroids: (K, d) tensor of centroids

        Returns:
            (n, K) tensor of distances
        """
        if points.shape[1] != centroids.shape[1]:
            raise ValueError(f"Dimension mismatch: points have {points.shape[1]}, "
                             f"centroids have {centroids.shape[1]}")

        # Explicit differences rather than the expanded |x|^2 - 2x.c + |c|^2
        # form, which can break exact ties through cancellation.
        diff = points.unsqueeze(1) - centroids.unsqueeze(0)
        squared_distances = torch.sum(diff * diff, dim=2)

        if self.squared:
            return squared_distances
        else:
            return torch.sqrt(squared_distances)
