"""
Numeric capability layer shared by the transforms and accumulators.

The summation algorithms only need a zero, addition, subtraction and
absolute value. This module supplies the few pieces that differ between
the supported float types: builtin ``float`` (IEEE double), NumPy scalars
and arrays, and PyTorch tensors.
"""

import numpy as np
import torch
from typing import Any, Tuple, Union

DType = Union[None, np.dtype, type, str, torch.dtype]


def is_tensor(value: Any) -> bool:
    return isinstance(value, torch.Tensor)


def is_array(value: Any) -> bool:
    """True for NumPy arrays and tensors, i.e. values with an ``axis``."""
    return isinstance(value, (np.ndarray, torch.Tensor))


def zeros(shape: Tuple[int, ...] = (), dtype: DType = None, device=None):
    """
    Additive identity of the requested float type.

    Args:
        shape: Shape of the zero; ``()`` gives a scalar
        dtype: ``None`` for builtin float, a NumPy dtype, or a ``torch.dtype``
        device: Device for tensors, ignored otherwise

    Returns:
        Zero scalar, array or tensor
    """
    shape = tuple(shape)
    if isinstance(dtype, torch.dtype):
        return torch.zeros(shape, dtype=dtype, device=device)
    if dtype is None:
        return 0.0 if shape == () else np.zeros(shape, dtype=np.float64)
    dtype = np.dtype(dtype)
    if shape == ():
        return dtype.type(0)
    return np.zeros(shape, dtype=dtype)


def zeros_like(value):
    """Zero with the same float type, shape and device as ``value``."""
    if is_tensor(value):
        return torch.zeros_like(value)
    if isinstance(value, np.ndarray):
        return np.zeros_like(value)
    if isinstance(value, np.generic):
        return value.dtype.type(0)
    return 0.0


def cast(value, like):
    """
    Convert ``value`` to the float type of ``like``.

    Accumulator state never changes type: every incoming term is cast to
    it before any arithmetic, so no implicit promotion happens.
    """
    if is_tensor(like):
        return torch.as_tensor(value, dtype=like.dtype, device=like.device)
    if isinstance(like, np.ndarray):
        if is_tensor(value):
            value = value.detach().cpu().numpy()
        return np.asarray(value, dtype=like.dtype)
    if isinstance(like, np.generic):
        if is_tensor(value):
            value = value.item()
        return like.dtype.type(value)
    return float(value)


def dtype_of(value) -> DType:
    """Float type carried by ``value``; ``None`` for builtin numbers."""
    if is_tensor(value):
        return value.dtype
    if isinstance(value, (np.ndarray, np.generic)):
        return value.dtype
    return None


def float_dtype(dtype) -> DType:
    # Integer and boolean inputs are summed as builtin floats.
    if isinstance(dtype, torch.dtype):
        return dtype if dtype.is_floating_point else None
    if dtype is not None and np.issubdtype(dtype, np.floating):
        return dtype
    return None


def where(condition, a, b):
    """Elementwise ``a if condition else b``."""
    if is_tensor(condition) and condition.dim() > 0:
        return torch.where(condition, a, b)
    if isinstance(condition, np.ndarray) and condition.ndim > 0:
        return np.where(condition, a, b)
    return a if condition else b


def equal(a, b) -> bool:
    """Exact equality of two values of the same float type."""
    if is_tensor(a) or is_tensor(b):
        return torch.equal(torch.as_tensor(a), torch.as_tensor(b))
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return bool(np.array_equal(a, b))
    return bool(a == b)


def copy(value):
    if is_tensor(value):
        return value.clone()
    if isinstance(value, np.ndarray):
        return value.copy()
    return value
