"""Argument validation shared by the filtering routines."""

from numbers import Integral

import numpy as np

from ..buffers.base import Buffer
from ..errors import InvalidArgumentError


def check_1d_array(x, dtype=float, finite: bool = True) -> np.ndarray:
    """Validate and cast input to a 1D array.

    Args:
        x: Array-like input or Buffer.
        dtype: Target dtype; None keeps the input's dtype.
        finite: Reject NaN and Inf values when True.

    Returns:
        1D numpy array.

    Raises:
        InvalidArgumentError: If input is not 1D, or contains NaN/Inf
            while ``finite`` is set.
    """
    if isinstance(x, Buffer):
        x = x.vec
    arr = np.asarray(x, dtype=dtype)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    elif arr.ndim > 1:
        raise InvalidArgumentError(f"Expected 1D array, got {arr.ndim}D array")
    if finite:
        if np.any(np.isnan(arr)):
            raise InvalidArgumentError("Input contains NaN values")
        if np.any(np.isinf(arr)):
            raise InvalidArgumentError("Input contains Inf values")
    return arr


def check_filter(h) -> np.ndarray:
    """Validate filter coefficients.

    Returns:
        Private contiguous float64 copy of the coefficients, so a buffer
        can be filtered by itself.

    Raises:
        InvalidArgumentError: If the filter is empty, not 1D, complex, or
            not finite.
    """
    raw = h.vec if isinstance(h, Buffer) else np.asarray(h)
    if np.iscomplexobj(raw):
        raise InvalidArgumentError("filter coefficients must be real")
    taps = np.array(check_1d_array(raw, dtype=np.float64), dtype=np.float64, order="C")
    if len(taps) == 0:
        raise InvalidArgumentError("filter must contain at least one coefficient")
    return taps


def check_rate(rate, name: str = "rate") -> int:
    """Validate a resampling rate.

    Raises:
        InvalidArgumentError: If rate is not a positive integer.
    """
    if isinstance(rate, bool) or not isinstance(rate, Integral):
        raise InvalidArgumentError(f"{name} must be an integer, got {rate!r}")
    if rate <= 0:
        raise InvalidArgumentError(f"{name} must be positive, got {rate}")
    return int(rate)


def check_signal(data) -> Buffer:
    """Ensure the signal is a Buffer that can be overwritten in place."""
    if not isinstance(data, Buffer):
        raise InvalidArgumentError(
            f"signal must be a Buffer (e.g. ComplexBuffer), got {type(data).__name__}"
        )
    return data
