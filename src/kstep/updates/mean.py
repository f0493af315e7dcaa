"""
Mean update strategy for centroid-based clustering.
"""

import torch
from torch import Tensor

from ..base.interfaces import ParameterUpdater
from ..base.data_structures import UNASSIGNED


class MeanUpdater(ParameterUpdater):
    """Moves each centroid to the mean of the points assigned to it.

    A centroid with no assigned points keeps its previous position; it is
    neither reseeded nor dropped.
    """

    def update(self, points: Tensor, labels: Tensor, centroids: Tensor,
               **kwargs) -> Tensor:
        """Compute new centroids.

        Args:
            points: (n, d) all data points
            labels: (n,) cluster indices, UNASSIGNED points are ignored
            centroids: (K, d) current centroids
            **kwargs: Ignored

        Returns:
            (K, d) new centroids
        """
        n_clusters = centroids.shape[0]

        mask = labels != UNASSIGNED
        assigned_points = points[mask]
        assigned_labels = labels[mask]

        sums = torch.zeros_like(centroids)
        sums.index_add_(0, assigned_labels, assigned_points)
        counts = torch.bincount(assigned_labels, minlength=n_clusters)

        occupied = counts > 0
        new_centroids = centroids.clone()
        new_centroids[occupied] = sums[occupied] / counts[occupied].unsqueeze(1).to(sums.dtype)

        return new_centroids
