# tests/test_validation.py
"""
Input validation

Covers:
- validate_coordinates: list / numpy / tensor → float64 (n, 2) copies
- InvalidInput for empty, mis-shaped and non-finite input
- load() leaves the previous engine state untouched when it rejects input
- check_delay_ms for driver speeds
"""

from __future__ import annotations

import math

import numpy as np
import pytest
import torch

from kstep import ClusteringEngine, InvalidInput
from kstep.utils.validation import validate_coordinates, check_delay_ms


def test_validate_coordinates_converts_and_copies():
    source = torch.tensor([[1.0, 2.0]], dtype=torch.float32)
    X = validate_coordinates(source)
    assert X.dtype == torch.float64
    assert X.shape == (1, 2)

    X[0, 0] = 5.0
    assert source[0, 0].item() == 1.0

    X_np = validate_coordinates(np.array([[1, 2], [3, 4]]))
    assert X_np.tolist() == [[1.0, 2.0], [3.0, 4.0]]


def test_invalid_input_is_a_value_error():
    assert issubclass(InvalidInput, ValueError)


@pytest.mark.parametrize("bad", [
    [],
    np.empty((0, 2)),
    [(1.0, 2.0, 3.0)],
    [1.0, 2.0],
    [(1.0,), (2.0, 3.0)],
    [("a", "b")],
    [(math.nan, 0.0)],
    [(0.0, math.inf)],
    [(-math.inf, 0.0)],
])
def test_validate_coordinates_rejects(bad):
    with pytest.raises(InvalidInput):
        validate_coordinates(bad)


@pytest.mark.parametrize("points, centroids", [
    ([], [(0.0, 0.0)]),
    ([(0.0, 0.0)], []),
    ([(0.0, math.nan)], [(0.0, 0.0)]),
    ([(0.0, 0.0)], [(math.inf, 0.0)]),
])
def test_load_rejects_and_keeps_previous_state(square_engine, points, centroids):
    square_engine.step()
    before = square_engine.state
    history = square_engine.history

    with pytest.raises(InvalidInput):
        square_engine.load(points, centroids)

    assert square_engine.state.equals(before)
    assert len(square_engine.history) == len(history)
    assert all(a.equals(b) for a, b in zip(square_engine.history, history))


def test_load_rejects_on_fresh_engine():
    engine = ClusteringEngine()
    with pytest.raises(InvalidInput):
        engine.load([(0.0, 0.0)], [])
    assert not engine.is_loaded


def test_check_delay_ms():
    assert check_delay_ms(0) == 0.0
    assert check_delay_ms(250) == 250.0
    with pytest.raises(ValueError):
        check_delay_ms(-1)
    with pytest.raises(ValueError):
        check_delay_ms(math.nan)
    with pytest.raises(TypeError):
        check_delay_ms("fast")
