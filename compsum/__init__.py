"""
Compensated Summation Library

Summation of floating-point sequences with far less accumulated rounding
error than naive left-to-right addition, without resorting to higher
precision arithmetic.

This library provides:
- Error-free transforms: 2Sum, Fast2Sum and their variants
- Kahan-Babuška compensated summation
- Kahan-Babuška-Neumaier compensated summation
- Reduction of lists, iterators, NumPy arrays and PyTorch tensors
- Single and double precision alike, with no implicit promotion
"""

from .transforms import ExactSum, two_sum, two_sub, fast_two_sum, abs_two_sum
from .core import (
    KahanBabuska,
    KahanBabuskaNeumaier,
    KahanBabuška,
    KahanBabuškaNeumaier
)
from .algorithms import reduce, compensated_sum

__version__ = "1.0.0"

__all__ = [
    "ExactSum",
    "two_sum",
    "two_sub",
    "fast_two_sum",
    "abs_two_sum",
    "KahanBabuska",
    "KahanBabuskaNeumaier",
    "KahanBabuška",
    "KahanBabuškaNeumaier",
    "reduce",
    "compensated_sum"
]
