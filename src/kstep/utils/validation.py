"""
Input validation utilities.

Converts user-supplied coordinates to tensors and rejects input the engine
cannot work with.
"""

from typing import Optional, Union, Sequence
import torch
from torch import Tensor
import numpy as np

from ..base.data_structures import InvalidInput


def validate_coordinates(X: Union[Tensor, np.ndarray, Sequence],
                         name: str = 'points',
                         dtype: torch.dtype = torch.float64,
                         device: Optional[torch.device] = None,
                         dimension: int = 2) -> Tensor:
    """Validate and convert 2D coordinates to an (n, 2) tensor.

    Args:
        X: Coordinates as a tensor, numpy array, or sequence of (x, y) pairs
        name: What the coordinates are, used in error messages
        dtype: Target data type
        device: Target device
        dimension: Required number of columns

    Returns:
        Validated tensor, always a fresh copy

    Raises:
        InvalidInput: If the input is empty, mis-shaped, or not finite
    """
    try:
        if isinstance(X, Tensor):
            X = X.detach().to(dtype=dtype, device=device).clone()
        elif isinstance(X, np.ndarray):
            X = torch.from_numpy(np.array(X, dtype=np.float64)).to(dtype=dtype, device=device)
        else:
            X = torch.tensor([list(p) for p in X], dtype=dtype, device=device)
    except (TypeError, ValueError, RuntimeError) as exc:
        raise InvalidInput(f"Cannot convert {name} to coordinates: {exc}") from exc

    if X.numel() == 0:
        raise InvalidInput(f"No {name} given")

    if X.dim() != 2 or X.shape[1] != dimension:
        raise InvalidInput(f"Expected {name} of shape (n, {dimension}), "
                           f"got {tuple(X.shape)}")

    if torch.isnan(X).any():
        raise InvalidInput(f"{name.capitalize()} contain NaN values")
    if torch.isinf(X).any():
        raise InvalidInput(f"{name.capitalize()} contain infinite values")

    return X


def check_delay_ms(delay_ms: float) -> float:
    """Validate a delay between automatic steps, in milliseconds."""
    if isinstance(delay_ms, bool) or not isinstance(delay_ms, (int, float)):
        raise TypeError(f"delay_ms must be a number, got {type(delay_ms)}")
    if delay_ms != delay_ms or delay_ms < 0:
        raise ValueError(f"delay_ms must be non-negative, got {delay_ms}")
    return float(delay_ms)
