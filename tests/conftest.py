"""
Global pytest fixtures for kstep tests.

- Provides deterministic seeding across Python, NumPy, and PyTorch.
- Forces single-threaded torch so driver timing tests stay predictable.
- Shared engine fixtures for the small scenarios used across the suite.
"""

from __future__ import annotations

import os
import random
import sys
from typing import Generator
from pathlib import Path

import numpy as np
import pytest
import torch

# Add the project's src directory to the Python path so tests can import the code
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))

# Render off-screen; kstep imports pyplot
os.environ.setdefault("MPLBACKEND", "Agg")

from kstep import ClusteringEngine  # noqa: E402
from data_gen import SQUARE_POINTS, SQUARE_CENTROIDS, make_blobs  # noqa: E402


def _get_seed() -> int:
    """Resolve the test seed from env or default."""
    env = os.getenv("TEST_RANDOM_SEED", "1337")
    try:
        return int(env)
    except ValueError:
        return 1337


@pytest.fixture(scope="session", autouse=True)
def seed_all() -> None:
    """
    Seed Python, NumPy, and PyTorch RNGs once per session.

    Seed value comes from TEST_RANDOM_SEED (default 1337).
    """
    seed = _get_seed()
    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)


@pytest.fixture(scope="session", autouse=True)
def set_torch_threads() -> None:
    """
    Reduce PyTorch to a single thread for stability and consistent timing.
    """
    torch.set_num_threads(1)


@pytest.fixture(scope="function")
def rng(seed_all: None) -> Generator[np.random.Generator, None, None]:
    """
    Per-test NumPy Generator seeded from the session seed.
    """
    gen = np.random.default_rng(_get_seed())
    yield gen


@pytest.fixture
def square_engine() -> ClusteringEngine:
    """Engine loaded with the four-point, two-centroid scenario."""
    return ClusteringEngine().load(SQUARE_POINTS, SQUARE_CENTROIDS)


@pytest.fixture
def blob_engine(rng) -> ClusteringEngine:
    """Engine loaded with three well separated Gaussian blobs."""
    X, _, init = make_blobs(n_per=30, seed=int(rng.integers(0, 2**31 - 1)))
    return ClusteringEngine().load(X, init)
