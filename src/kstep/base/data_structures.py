"""
Core data structures for the step-by-step K-Means engine.

Points and centroids are held as tensors inside the engine; the small
dataclasses here are the read-only views handed out to renderers and
reporters, and `Snapshot` is the immutable unit of engine history.
"""

from typing import List
from dataclasses import dataclass
import torch
from torch import Tensor


# Cluster label of a point that has not been through an assignment phase yet.
UNASSIGNED = -1


class InvalidInput(ValueError):
    """Raised when points or centroids cannot be loaded into the engine."""


@dataclass(frozen=True)
class Point:
    """A 2D data point and the index of the cluster it belongs to."""
    x: float
    y: float
    cluster: int = UNASSIGNED

    @property
    def is_assigned(self) -> bool:
        return self.cluster != UNASSIGNED


@dataclass(frozen=True)
class Centroid:
    """A 2D cluster center."""
    x: float
    y: float


@dataclass(frozen=True, eq=False)
class Snapshot:
    """Immutable copy of the engine state at one iteration.

    The engine never modifies these tensors in place: each step builds new
    tensors and wraps them in a new Snapshot, so a Snapshot taken before a
    step stays valid for step-back without copying. The engine hands out
    copies made with `clone()`, so callers may modify what they receive.
    """

    points: Tensor     # (n, 2) coordinates
    labels: Tensor     # (n,) long cluster indices, UNASSIGNED before the first step
    centroids: Tensor  # (K, 2) cluster centers
    iteration: int
    converged: bool = False

    @property
    def n_points(self) -> int:
        return self.points.shape[0]

    @property
    def n_clusters(self) -> int:
        return self.centroids.shape[0]

    def cluster_sizes(self) -> Tensor:
        """Count points per cluster, ignoring unassigned points."""
        assigned = self.labels[self.labels != UNASSIGNED]
        return torch.bincount(assigned, minlength=self.n_clusters)

    def clone(self) -> 'Snapshot':
        """Deep copy whose tensors share no storage with this one."""
        return Snapshot(points=self.points.clone(), labels=self.labels.clone(),
                        centroids=self.centroids.clone(), iteration=self.iteration,
                        converged=self.converged)

    def to_points(self) -> List[Point]:
        coords = self.points.tolist()
        labels = self.labels.tolist()
        return [Point(x, y, cluster) for (x, y), cluster in zip(coords, labels)]

    def to_centroids(self) -> List[Centroid]:
        return [Centroid(x, y) for x, y in self.centroids.tolist()]

    def equals(self, other: 'Snapshot') -> bool:
        """Exact comparison of coordinates, labels and iteration."""
        return (self.iteration == other.iteration
                and torch.equal(self.points, other.points)
                and torch.equal(self.labels, other.labels)
                and torch.equal(self.centroids, other.centroids))
