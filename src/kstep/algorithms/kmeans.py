"""
Interactive K-means clustering engine.

Runs K-means one iteration at a time so a driver (UI loop, CLI, test) can
watch every assignment and update, and step back through earlier iterations.
"""

from typing import Optional, List, Tuple, Union, Sequence
import time
import warnings
import numpy as np
import torch
from torch import Tensor

from ..base.interfaces import AssignmentStrategy, ParameterUpdater, ConvergenceCriterion
from ..base.data_structures import UNASSIGNED, Point, Centroid, Snapshot
from ..assignments.hard import HardAssignment
from ..distances.euclidean import EuclideanDistance
from ..updates.mean import MeanUpdater
from ..utils.convergence import NoAssignmentChange
from ..utils.validation import validate_coordinates

Coordinates = Union[Tensor, np.ndarray, Sequence[Sequence[float]]]


class ClusteringEngine:
    """Step-by-step K-means over 2D points with a per-iteration history.

    The current state is a single immutable `Snapshot`. `step()` and
    `step_back()` build the next state completely and then replace it with
    one assignment, so accessors never see a half-updated state. The engine
    does no locking: only one caller may step it at a time.

    Parameters
    ----------
    verbose : int, default=0
        Verbosity level (0=silent, 1=progress, 2=per-iteration detail)
    dtype : torch.dtype, default=torch.float64
        Floating point type for coordinates
    device : torch.device, optional
        Device for computation (CPU if None)
    squared_distances : bool, default=True
        Compare squared distances in the assignment phase. The nearest
        centroid is the same either way.

    Attributes
    ----------
    iteration : int
        Current iteration number, 1 right after `load`
    history : tuple of Snapshot
        States recorded before each step; ``len(history) == iteration``
    """

    def __init__(self,
                 verbose: int = 0,
                 dtype: torch.dtype = torch.float64,
                 device: Optional[torch.device] = None,
                 squared_distances: bool = True):
        self.verbose = verbose
        self.dtype = dtype
        self.device = device if device is not None else torch.device('cpu')

        self.assignment_strategy: AssignmentStrategy = HardAssignment(
            EuclideanDistance(squared=squared_distances)
        )
        self.update_strategy: ParameterUpdater = MeanUpdater()
        self.convergence_criterion: ConvergenceCriterion = NoAssignmentChange()

        self._state: Optional[Snapshot] = None
        self._history: List[Snapshot] = []

    def load(self, points: Coordinates, centroids: Coordinates) -> 'ClusteringEngine':
        """Replace the point and centroid sets and start a new run.

        Args:
            points: (n, 2) coordinates, n >= 1
            centroids: (K, 2) initial centroids, K >= 1

        Returns:
            Self

        Raises:
            InvalidInput: If either set is empty, mis-shaped, or not finite.
                The engine keeps its previous state.
        """
        point_tensor = validate_coordinates(points, name='points',
                                            dtype=self.dtype, device=self.device)
        centroid_tensor = validate_coordinates(centroids, name='centroids',
                                               dtype=self.dtype, device=self.device)

        labels = torch.full((point_tensor.shape[0],), UNASSIGNED,
                            dtype=torch.long, device=self.device)
        initial = Snapshot(points=point_tensor, labels=labels,
                           centroids=centroid_tensor, iteration=1)

        self.convergence_criterion.reset()
        self._history = [initial]
        self._state = initial

        if self.verbose:
            print(f"Loaded {initial.n_points} points and {initial.n_clusters} centroids")

        return self

    @property
    def is_loaded(self) -> bool:
        return self._state is not None

    def _require_state(self) -> Snapshot:
        if self._state is None:
            raise RuntimeError("Engine must be loaded before stepping")
        return self._state

    def step(self) -> bool:
        """Run one assignment + update iteration.

        Returns:
            True if any point changed cluster, False once converged
        """
        state = self._require_state()
        iter_start_time = time.time()

        # Assignment step
        labels = self.assignment_strategy.compute_assignments(state.points, state.centroids)

        # Update step
        centroids = self.update_strategy.update(state.points, labels, state.centroids)

        converged = self.convergence_criterion.check({
            'iteration': state.iteration,
            'previous_labels': state.labels,
            'labels': labels
        })

        # Record history only once both phases have succeeded
        self._history.append(state)
        self._state = Snapshot(points=state.points, labels=labels, centroids=centroids,
                               iteration=state.iteration + 1, converged=converged)

        if self.verbose >= 2:
            iter_time = time.time() - iter_start_time
            n_changed = self.convergence_criterion.history[-1]['n_changed']
            print(f"Iteration {state.iteration:3d}: {n_changed} points changed "
                  f"({iter_time:.3f}s)")
        if converged and self.verbose:
            print(f"Converged at iteration {self._state.iteration}")

        return not converged

    def step_back(self) -> bool:
        """Restore the state from before the most recent step.

        Returns:
            True if a step was undone, False at the first iteration (no-op)
        """
        state = self._state
        if state is None or state.iteration <= 1:
            return False
        if len(self._history) < state.iteration:
            return False

        previous = self._history.pop(state.iteration - 1)
        self._state = previous

        if self.convergence_criterion.history:
            self.convergence_criterion.history.pop()

        if self.verbose >= 2:
            print(f"Stepped back to iteration {previous.iteration}")

        return True

    def run_until_converged(self, max_iter: Optional[int] = None) -> int:
        """Call `step()` until it reports no change.

        Args:
            max_iter: Optional cap on the number of steps. Without it an
                input whose assignments oscillate would never return.

        Returns:
            Number of steps taken
        """
        self._require_state()
        n_steps = 0
        start_time = time.time()

        while max_iter is None or n_steps < max_iter:
            n_steps += 1
            if not self.step():
                break
        else:
            warnings.warn(f"Failed to converge after {max_iter} iterations")

        if self.verbose:
            print(f"Total stepping time: {time.time() - start_time:.3f}s")

        return n_steps

    # Accessors for renderers and reporters

    @property
    def state(self) -> Snapshot:
        """A copy of the current state; read this once for a consistent view."""
        return self._require_state().clone()

    @property
    def iteration(self) -> int:
        return 0 if self._state is None else self._state.iteration

    @property
    def history(self) -> Tuple[Snapshot, ...]:
        return tuple(snapshot.clone() for snapshot in self._history)

    @property
    def converged(self) -> bool:
        """Whether the step that produced the current state changed nothing."""
        return self._state is not None and self._state.converged

    @property
    def points(self) -> List[Point]:
        return self._require_state().to_points()

    @property
    def centroids(self) -> List[Centroid]:
        return self._require_state().to_centroids()

    @property
    def points_tensor(self) -> Tensor:
        return self._require_state().points.clone()

    @property
    def labels(self) -> Tensor:
        return self._require_state().labels.clone()

    @property
    def centroids_tensor(self) -> Tensor:
        return self._require_state().centroids.clone()

    def cluster_sizes(self) -> Tensor:
        """(K,) number of points assigned to each centroid."""
        return self._require_state().cluster_sizes()

    def __repr__(self) -> str:
        if self._state is None:
            return "ClusteringEngine(unloaded)"
        return (f"ClusteringEngine(n_points={self._state.n_points}, "
                f"n_clusters={self._state.n_clusters}, iteration={self._state.iteration})")
