"""Shared helpers for the compensated summation tests."""

import numpy as np
from fractions import Fraction


def _sigma(dtype) -> float:
    # Keep single precision samples clear of overflow and underflow.
    return 40.0 if np.dtype(dtype) == np.float64 else 8.0


def lognormal_values(seed: int, size: int, dtype=np.float64) -> np.ndarray:
    """
    Finite positive values spread over many orders of magnitude.

    For doubles (sigma 40) this covers roughly 1e-60..1e60 in practice.
    """
    rng = np.random.default_rng(seed)
    return rng.lognormal(0.0, _sigma(dtype), size).astype(dtype)


def signed_values(seed: int, size: int, dtype=np.float64) -> np.ndarray:
    """Log-normal magnitudes with random signs, exercising cancellation."""
    rng = np.random.default_rng(seed)
    magnitudes = rng.lognormal(0.0, _sigma(dtype), size)
    signs = rng.choice([-1.0, 1.0], size)
    return (signs * magnitudes).astype(dtype)


def exact(value) -> Fraction:
    """Exact rational value of a finite float of any width."""
    return Fraction(float(value))


def naive_sum(values, dtype=np.float64):
    """Left-to-right addition in the given precision."""
    cast = np.dtype(dtype).type
    total = cast(0)
    for value in values:
        total = total + cast(value)
    return total
