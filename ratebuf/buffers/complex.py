"""Complex sample buffer."""

from __future__ import annotations

import numpy as np

from .base import Buffer


class ComplexBuffer(Buffer):
    """Buffer of complex128 samples; the signal side of every filter call."""

    dtype = np.dtype(np.complex128)

    def real(self) -> np.ndarray:
        """Return a copy of the real parts."""
        return self.vec.real.copy()

    def imag(self) -> np.ndarray:
        """Return a copy of the imaginary parts."""
        return self.vec.imag.copy()

    def conj(self) -> "ComplexBuffer":
        """Conjugate the samples in place."""
        np.conjugate(self.vec, out=self.vec)
        return self
