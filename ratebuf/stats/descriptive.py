"""Descriptive statistics, saturation and power over real buffers.

Each function accepts a RealBuffer or a 1D real array-like. ``saturate``
and ``power`` work in place and therefore need a RealBuffer or a writable
float ndarray.
"""

from __future__ import annotations

import math

import numpy as np

from ..buffers.base import Buffer
from ..errors import InvalidArgumentError, PreconditionError


def _values(x) -> np.ndarray:
    arr = x.vec if isinstance(x, Buffer) else np.asarray(x)
    if np.iscomplexobj(arr):
        raise InvalidArgumentError("statistics are defined for real data only")
    if arr.ndim != 1:
        raise InvalidArgumentError(f"Expected 1D data, got shape {arr.shape}")
    return arr


def _require(arr: np.ndarray, n: int, what: str) -> None:
    if len(arr) < n:
        raise PreconditionError(
            f"{what} needs at least {n} sample{'s' if n > 1 else ''}, got {len(arr)}"
        )


def _writable(x) -> np.ndarray:
    arr = x.vec if isinstance(x, Buffer) else x
    if not isinstance(arr, np.ndarray) or arr.dtype.kind != "f":
        raise InvalidArgumentError(
            "in-place operations need a RealBuffer or a float ndarray"
        )
    if arr.ndim != 1:
        raise InvalidArgumentError(f"Expected 1D data, got shape {arr.shape}")
    return arr


def mean(x) -> float:
    """Arithmetic mean.

    Raises:
        PreconditionError: If x is empty.
    """
    arr = _values(x)
    _require(arr, 1, "mean")
    return float(np.sum(arr, dtype=np.float64) / len(arr))


def var(x) -> float:
    """Sample variance with an N - 1 denominator.

    Raises:
        PreconditionError: If x has fewer than two samples.
    """
    arr = _values(x)
    _require(arr, 2, "variance")
    diff = arr.astype(np.float64) - mean(arr)
    return float(np.sum(diff * diff) / (len(arr) - 1))


def std_dev(x) -> float:
    """Sample standard deviation, ``sqrt(var(x))``."""
    return math.sqrt(var(x))


def median(x) -> float:
    """Median of a sorted copy; the two middle values are averaged when N is even.

    Raises:
        PreconditionError: If x is empty.
    """
    arr = _values(x)
    _require(arr, 1, "median")
    ordered = np.sort(arr)
    half = len(ordered) // 2
    if len(ordered) % 2:
        return float(ordered[half])
    return float((ordered[half] + ordered[half - 1]) / 2)


def maximum(x) -> tuple[float, int]:
    """Largest value and the index of its first occurrence."""
    arr = _values(x)
    _require(arr, 1, "maximum")
    index = int(np.argmax(arr))
    return float(arr[index]), index


def minimum(x) -> tuple[float, int]:
    """Smallest value and the index of its first occurrence."""
    arr = _values(x)
    _require(arr, 1, "minimum")
    index = int(np.argmin(arr))
    return float(arr[index]), index


def saturate(x, val: float):
    """Clamp every element into ``[-val, val]`` in place.

    Args:
        x: RealBuffer or float ndarray.
        val: Non-negative limit.

    Returns:
        ``x``.

    Raises:
        InvalidArgumentError: If val is negative or x cannot be modified
            in place.
    """
    if val < 0:
        raise InvalidArgumentError(f"saturation limit must be non-negative, got {val}")
    arr = _writable(x)
    np.clip(arr, -val, val, out=arr)
    return x


def power(x, exponent: float):
    """Raise every element to ``exponent`` in place and return ``x``."""
    arr = _writable(x)
    np.power(arr, exponent, out=arr)
    return x
