"""
Reduction of sequences with compensated summation.

This module folds lists, iterators, NumPy arrays and PyTorch tensors into
a Kahan-Babuška or Kahan-Babuška-Neumaier accumulator.
"""

import itertools
import logging

import numpy as np
import torch
from typing import Iterable, Optional, Type, Union

from . import numeric
from .core import KahanBabuska, KahanBabuskaNeumaier, _CompensatedAccumulator

LOG = logging.getLogger('compsum.algorithms')

DEFAULT_KIND = 'kbn'

ACCUMULATOR_KINDS = {
    'kb': KahanBabuska,
    'kahan_babuska': KahanBabuska,
    'kbn': KahanBabuskaNeumaier,
    'kahan_babuska_neumaier': KahanBabuskaNeumaier,
}

Kind = Union[str, Type[_CompensatedAccumulator]]


def resolve_kind(kind: Kind) -> Type[_CompensatedAccumulator]:
    """
    Map an accumulator name or class to the accumulator class.

    Raises:
        ValueError: If ``kind`` names no known accumulator
    """
    if isinstance(kind, type) and issubclass(kind, _CompensatedAccumulator):
        return kind
    if isinstance(kind, str) and kind.lower() in ACCUMULATOR_KINDS:
        return ACCUMULATOR_KINDS[kind.lower()]
    raise ValueError(f"Unknown accumulator kind: {kind!r}")


def reduce(values: Union[Iterable, np.ndarray, torch.Tensor],
           kind: Kind = DEFAULT_KIND,
           dtype=None,
           axis: Optional[int] = None) -> _CompensatedAccumulator:
    """
    Fold ``values`` into a fresh accumulator, one addition per element.

    The fold is strictly sequential and follows the order of ``values``;
    reordering the input may change the bits of the result.

    Args:
        values: Iterable of floats, NumPy array or tensor
        kind: ``'kb'``, ``'kbn'`` (or their long names), or an accumulator class
        dtype: Float type of the accumulator; inferred from ``values`` if omitted
        axis: For arrays and tensors, reduce along this axis only, giving an
            accumulator shaped like the remaining axes

    Returns:
        The filled accumulator; call ``total()`` for the sum
    """
    cls = resolve_kind(kind)
    device = None

    if numeric.is_tensor(values):
        device = values.device
        if dtype is None:
            dtype = numeric.float_dtype(values.dtype)
        values = values.detach()
    elif isinstance(values, np.ndarray):
        if dtype is None:
            dtype = numeric.float_dtype(values.dtype)
    elif axis is not None:
        raise ValueError("axis is only supported for NumPy arrays and tensors")
    else:
        values = iter(values)
        first = next(values, None)
        if first is not None:
            if dtype is None:
                dtype = numeric.float_dtype(numeric.dtype_of(first))
            values = itertools.chain([first], values)

    LOG.debug('Reducing with %s (dtype=%s, axis=%s)', cls.__name__, dtype, axis)

    if axis is None:
        if numeric.is_array(values):
            values = values.reshape(-1)
        return cls.from_iterable(values, dtype=dtype, device=device)

    if numeric.is_tensor(values):
        lanes = values.movedim(axis, 0)
    else:
        lanes = np.moveaxis(values, axis, 0)
    return cls.from_iterable(lanes, dtype=dtype, shape=tuple(lanes.shape[1:]),
                             device=device)


def compensated_sum(values: Union[Iterable, np.ndarray, torch.Tensor],
                    kind: Kind = DEFAULT_KIND,
                    dtype=None,
                    axis: Optional[int] = None):
    """
    Compute the compensated sum of ``values``.

    Shorthand for ``reduce(values, kind, dtype, axis).total()``.
    """
    return reduce(values, kind=kind, dtype=dtype, axis=axis).total()
