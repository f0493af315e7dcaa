"""Drivers that step the engine interactively."""

from .stepper import SteppingDriver

__all__ = [
    'SteppingDriver'
]
