"""
Error-free transforms for floating-point addition.

Each function splits a rounded addition (or subtraction) of two floats
into the rounded result ``s`` and the exact rounding error ``t``, so that
``a + b == s + t`` holds in exact arithmetic. They are the building blocks
of the compensated accumulators in :mod:`compsum.core`.

Every function works on builtin floats, NumPy scalars/arrays and PyTorch
tensors alike; array operands are transformed elementwise.
"""

from typing import Any, NamedTuple

from . import numeric


class ExactSum(NamedTuple):
    """Rounded sum ``s`` and its exact error ``t``."""
    s: Any
    t: Any


def two_sum(a, b) -> ExactSum:
    """
    2Sum algorithm, valid for any pair of finite operands.

    Args:
        a: First operand
        b: Second operand

    Returns:
        ``(s, t)`` with ``s = a + b`` rounded to nearest and
        ``t = a + b - s`` exactly
    """
    s = a + b
    a_prime = s - b
    b_prime = s - a_prime
    delta_a = a - a_prime
    delta_b = b - b_prime
    t = delta_a + delta_b
    return ExactSum(s, t)


def two_sub(a, b) -> ExactSum:
    """
    Subtraction analogue of :func:`two_sum`.

    Returns ``(s, t)`` with ``s = a - b`` rounded to nearest and
    ``a - b == s + t`` exactly. Equal to ``two_sum(a, -b)``.
    """
    s = a - b
    a_prime = s + b
    b_prime = a_prime - s
    delta_a = a - a_prime
    delta_b = b - b_prime
    t = delta_a - delta_b
    return ExactSum(s, t)


def fast_two_sum(a, b) -> ExactSum:
    """
    Fast2Sum algorithm: three operations instead of six.

    The result is exact only when the exponent of ``a`` is at least the
    exponent of ``b`` (for instance when ``|a| >= |b|``) or when either
    operand is zero. This is not checked; with the precondition violated
    ``t`` is simply less accurate.
    """
    s = a + b
    b_prime = s - a
    t = b - b_prime
    return ExactSum(s, t)


def abs_two_sum(a, b) -> ExactSum:
    """
    :func:`two_sum` computed with an explicit magnitude comparison.

    For scalars only the residual of the smaller operand is formed; array
    and tensor operands select elementwise between both residuals. Ties
    (``|a| == |b|``) take the ``a`` branch. Bit-identical to
    :func:`two_sum` for finite operands.
    """
    s = a + b
    if numeric.is_array(a) or numeric.is_array(b):
        t = numeric.where(abs(a) >= abs(b), b - (s - a), a - (s - b))
    elif abs(a) >= abs(b):
        t = b - (s - a)
    else:
        t = a - (s - b)
    return ExactSum(s, t)
