# tests/data_gen.py
"""
Tiny synthetic-data generators reused across the kstep test suite.

    >>> X, y, init = make_blobs()
    >>> X.shape, y.shape, init.shape
    ((150, 2), (150,), (3, 2))
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple
import numpy as np

NDArray = np.ndarray

# Four points, two centroids: converges on the second step.
SQUARE_POINTS = [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (10.0, 10.0)]
SQUARE_CENTROIDS = [(0.0, 0.0), (10.0, 10.0)]

DEFAULT_CENTERS = ((-6.0, -5.0), (0.0, 0.0), (6.0, 5.0))


def make_blobs(
    n_per: int = 50,
    centers: Sequence[Tuple[float, float]] = DEFAULT_CENTERS,
    spread: float = 0.5,
    seed: Optional[int] = None,
) -> Tuple[NDArray, NDArray, NDArray]:
    """
    Isotropic 2D Gaussian blobs plus one starting centroid near each blob.

    Parameters
    ----------
    n_per : int, default=50
        Points per blob.
    centers : sequence of (x, y)
        Blob centers.
    spread : float, default=0.5
        Standard deviation of each blob.
    seed : int or None
        RNG seed.

    Returns
    -------
    X : (len(centers)*n_per, 2) ndarray, float64
    y : (len(centers)*n_per,) ndarray, int64, blob index of each row
    init : (len(centers), 2) ndarray, float64, centers shifted by a small offset
    """
    rng = np.random.default_rng(seed)
    centers_np = np.asarray(centers, dtype=np.float64)

    X = np.concatenate([
        rng.normal(loc=c, scale=spread, size=(n_per, 2)) for c in centers_np
    ])
    y = np.repeat(np.arange(len(centers_np)), n_per).astype(np.int64)
    init = centers_np + rng.uniform(-1.0, 1.0, size=centers_np.shape)

    return X, y, init


def make_data_text(points: Sequence[Tuple[float, float]],
                   centroids: Sequence[Tuple[float, float]]) -> str:
    """Serialize points and centroids in the data file format."""
    lines = [str(len(points))]
    lines.extend(f"{x} {y}" for x, y in points)
    lines.append(str(len(centroids)))
    lines.extend(f"{x} {y}" for x, y in centroids)
    return "\n".join(lines) + "\n"
