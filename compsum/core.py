"""
Compensated summation accumulators.

This module contains the two running-sum state machines: Kahan-Babuška,
which folds the previous error into each new term, and
Kahan-Babuška-Neumaier, which keeps the error in a separate running total.
"""

from typing import Iterable, Tuple

from . import numeric
from .transforms import fast_two_sum, two_sum, two_sub


class _CompensatedAccumulator:
    """
    Running sum decomposed into a rounded ``sum`` and a compensation term.

    Attributes:
        sum: The accumulated rounded sum
        comp: Compensation of the rounding error lost so far
    """

    def __init__(self, dtype=None, shape: Tuple[int, ...] = (), device=None):
        """
        Initialize an empty accumulator.

        Args:
            dtype: ``None`` for builtin float (double precision), a NumPy
                dtype, or a ``torch.dtype``
            shape: Shape of the accumulator; ``()`` for a scalar sum
            device: Device to place tensors on
        """
        self.sum = numeric.zeros(shape, dtype, device)
        self.comp = numeric.zeros(shape, dtype, device)

    def add(self, value):
        raise NotImplementedError

    def subtract(self, value):
        raise NotImplementedError

    def total(self):
        """Estimated total: ``sum + comp`` with a single rounding."""
        return self.sum + self.comp

    def reset(self):
        """Reset the accumulator to zero, keeping its type and shape."""
        self.sum = numeric.zeros_like(self.sum)
        self.comp = numeric.zeros_like(self.comp)

    def copy(self):
        other = self.__class__.__new__(self.__class__)
        other.sum = numeric.copy(self.sum)
        other.comp = numeric.copy(self.comp)
        return other

    @classmethod
    def from_iterable(cls, values: Iterable, dtype=None,
                      shape: Tuple[int, ...] = (), device=None):
        """
        Sum ``values`` in order into a fresh accumulator.

        Args:
            values: Iterable of floats (or of arrays matching ``shape``)
            dtype: Float type of the accumulator
            shape: Shape of the accumulator
            device: Device to place tensors on

        Returns:
            The filled accumulator
        """
        acc = cls(dtype=dtype, shape=shape, device=device)
        for value in values:
            acc.add(value)
        return acc

    def __iadd__(self, value):
        self.add(value)
        return self

    def __isub__(self, value):
        self.subtract(value)
        return self

    def __add__(self, value):
        result = self.copy()
        result.add(value)
        return result

    def __sub__(self, value):
        result = self.copy()
        result.subtract(value)
        return result

    def __eq__(self, other):
        if not isinstance(other, _CompensatedAccumulator):
            return NotImplemented
        return (type(self) is type(other)
                and numeric.equal(self.sum, other.sum)
                and numeric.equal(self.comp, other.comp))

    __hash__ = None

    def __repr__(self):
        return f"{self.__class__.__name__}(sum={self.sum!r}, comp={self.comp!r})"


class KahanBabuska(_CompensatedAccumulator):
    """
    Kahan-Babuška compensated summation accumulator.

    Each update folds the previous compensation into the incoming term and
    splits the addition with :func:`fast_two_sum`. This assumes the running
    sum dominates every term in magnitude; when a term is larger, part of
    the error is lost (``[1.0, 1e100, 1.0, -1e100]`` sums to ``0.0``).
    """

    def add(self, value):
        """Add ``value`` with Kahan-Babuška compensation."""
        value = numeric.cast(value, self.sum)
        self.sum, self.comp = fast_two_sum(self.sum, value + self.comp)

    def subtract(self, value):
        """Subtract ``value``; same as adding ``-value``."""
        value = numeric.cast(value, self.sum)
        self.sum, self.comp = fast_two_sum(self.sum, self.comp - value)


class KahanBabuskaNeumaier(_CompensatedAccumulator):
    """
    Kahan-Babuška-Neumaier compensated summation accumulator.

    The exact error of every addition is obtained with the
    order-independent :func:`two_sum` and accumulated separately in
    ``comp``, so no ordering between the running sum and the terms is
    assumed (``[1.0, 1e100, 1.0, -1e100]`` sums to ``2.0``).
    """

    def add(self, value):
        """Add ``value`` with Neumaier compensation."""
        value = numeric.cast(value, self.sum)
        s, d = two_sum(self.sum, value)
        self.sum, self.comp = s, self.comp + d

    def subtract(self, value):
        """Subtract ``value`` with Neumaier compensation."""
        value = numeric.cast(value, self.sum)
        s, d = two_sub(self.sum, value)
        self.sum, self.comp = s, self.comp + d


# Same types, with the correct spelling of the second surname.
KahanBabuška = KahanBabuska
KahanBabuškaNeumaier = KahanBabuskaNeumaier
