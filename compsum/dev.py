"""
Alternative formulations of the compensated sums.

For development only: these loops reproduce the arithmetic of the
accumulators in :mod:`compsum.core` without the accumulator abstraction.
The test-suite uses them to check that every formulation gives the same
bits, and the benchmarks use them to compare the cost of each style.
Do not rely on this module.
"""

import itertools
from typing import Iterable, Tuple

from . import numeric
from .transforms import abs_two_sum, two_sum

__all__ = [
    "abs_two_sum",
    "kahan_babuska_sum",
    "kahan_babuska_neumaier_sum",
    "kahan_babuska_neumaier_abs_sum",
    "kahan_babuska_neumaier_abs_two_sum",
]


def _start(values: Iterable, dtype) -> Tuple[Iterable, object]:
    # Zero of the float type the matching accumulator would use; terms of
    # another type are cast to it, so integers are summed as floats.
    values = iter(values)
    first = next(values, None)
    if first is None:
        return values, numeric.zeros((), dtype)
    if dtype is None:
        dtype = numeric.float_dtype(numeric.dtype_of(first))
    zero = numeric.zeros((), dtype)
    values = itertools.chain([first], values)
    if numeric.dtype_of(first) != numeric.dtype_of(zero):
        values = (numeric.cast(x, zero) for x in values)
    return values, zero


def kahan_babuska_sum(values: Iterable, dtype=None):
    """
    Same result as ``KahanBabuska.from_iterable(values, dtype).total()``.

    Args:
        values: Iterable of terms
        dtype: Float type of the running sum; if omitted, the type of the
            first term, or builtin float for integer terms

    Returns:
        Compensated sum, zero of ``dtype`` for an empty input
    """
    values, s = _start(values, dtype)
    c = s
    for x in values:
        y = x + c
        t = s + y
        c = y - (t - s)
        s = t
    return s + c


def kahan_babuska_neumaier_sum(values: Iterable, dtype=None):
    """
    Same result as ``KahanBabuskaNeumaier.from_iterable(values, dtype).total()``.
    """
    values, s = _start(values, dtype)
    c = s
    for x in values:
        t, d = two_sum(s, x)
        s = t
        c += d
    return s + c


def kahan_babuska_neumaier_abs_sum(values: Iterable, dtype=None):
    """
    Neumaier sum with the error term picked by a magnitude comparison.

    Same result as ``KahanBabuskaNeumaier.from_iterable(values).total()``.
    """
    values, s = _start(values, dtype)
    c = s
    for x in values:
        t = s + x
        if abs(s) >= abs(x):
            c += x - (t - s)
        else:
            c += s - (t - x)
        s = t
    return s + c


def kahan_babuska_neumaier_abs_two_sum(values: Iterable, dtype=None):
    """Neumaier sum built on :func:`abs_two_sum`."""
    values, s = _start(values, dtype)
    c = s
    for x in values:
        t, d = abs_two_sum(s, x)
        s = t
        c += d
    return s + c
