"""Buffer container shared by the real and complex buffer types."""

from __future__ import annotations

from typing import Any, Iterator, Optional

import numpy as np

from ..errors import InvalidArgumentError


class Buffer:
    """
    Resizable 1D sample container backed by a NumPy array.

    The backing array is exposed as ``vec``. A buffer can carry a handle to
    a scratch buffer of the same dtype; filtering operations copy the
    buffer's content into it instead of allocating a temporary.

    A scratch buffer may be shared by several buffers, but only by buffers
    used from a single thread. Buffers used from other threads need their
    own scratch.
    """

    dtype: np.dtype = np.dtype(np.float64)

    def __init__(self, data: Any = (), scratch: Optional["Buffer"] = None) -> None:
        """
        Initialize a buffer from array-like data.

        Args:
            data: Initial samples. Scalars become a length-1 buffer.
            scratch: Optional scratch buffer handle.

        Raises:
            InvalidArgumentError: If data is not 1D or does not fit the dtype.
        """
        self.vec = self._coerce(data)
        self.scratch = scratch

    @classmethod
    def zeros(cls, size: int, scratch: Optional["Buffer"] = None) -> "Buffer":
        """Create a zero-filled buffer of the given length."""
        if size < 0:
            raise InvalidArgumentError(f"size must be non-negative, got {size}")
        return cls(np.zeros(size, dtype=cls.dtype), scratch=scratch)

    def _coerce(self, data: Any) -> np.ndarray:
        if isinstance(data, Buffer):
            data = data.vec
        raw = np.asarray(data)
        if np.iscomplexobj(raw) and self.dtype.kind != "c":
            raise InvalidArgumentError(
                f"{self.__class__.__name__} cannot hold complex values"
            )
        arr = np.array(raw, dtype=self.dtype)
        if arr.ndim == 0:
            arr = arr.reshape(1)
        elif arr.ndim > 1:
            raise InvalidArgumentError(f"Expected 1D data, got {arr.ndim}D array")
        return arr

    def resize(self, size: int) -> "Buffer":
        """
        Grow or shrink the buffer in place.

        The existing prefix is kept; slots added when growing are zero.

        Args:
            size: New length.

        Returns:
            This buffer.

        Raises:
            InvalidArgumentError: If size is negative.
        """
        if size < 0:
            raise InvalidArgumentError(f"size must be non-negative, got {size}")
        if size != len(self.vec):
            grown = np.zeros(size, dtype=self.dtype)
            keep = min(size, len(self.vec))
            grown[:keep] = self.vec[:keep]
            self.vec = grown
        return self

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the samples."""
        return self.vec.copy()

    def copy(self) -> "Buffer":
        """Return an independent buffer with the same samples and scratch handle."""
        return self.__class__(self.vec.copy(), scratch=self.scratch)

    def __len__(self) -> int:
        return len(self.vec)

    def __getitem__(self, index):
        return self.vec[index]

    def __setitem__(self, index, value) -> None:
        self.vec[index] = value

    def __iter__(self) -> Iterator:
        return iter(self.vec)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.vec.tolist()!r})"
