"""Real sample buffer.

A RealBuffer is both a container for real-valued data (with descriptive
statistics, saturation and power) and the filter side of the multirate
operations: ``taps.decimate(signal, 4)`` filters ``signal`` with ``taps``.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from .base import Buffer


class RealBuffer(Buffer):
    """Buffer of float64 samples."""

    dtype = np.dtype(np.float64)

    # Statistics

    def mean(self) -> float:
        """Arithmetic mean. Requires at least one sample."""
        from ..stats.descriptive import mean

        return mean(self)

    def var(self) -> float:
        """Sample variance (N - 1 denominator). Requires at least two samples."""
        from ..stats.descriptive import var

        return var(self)

    def std_dev(self) -> float:
        """Sample standard deviation. Requires at least two samples."""
        from ..stats.descriptive import std_dev

        return std_dev(self)

    def median(self) -> float:
        """Median of the samples; the buffer itself is not reordered."""
        from ..stats.descriptive import median

        return median(self)

    def max(self) -> tuple[float, int]:
        """Return ``(value, index)`` of the first maximum."""
        from ..stats.descriptive import maximum

        return maximum(self)

    def min(self) -> tuple[float, int]:
        """Return ``(value, index)`` of the first minimum."""
        from ..stats.descriptive import minimum

        return minimum(self)

    def saturate(self, val: float) -> "RealBuffer":
        """Clamp every sample into ``[-val, val]`` in place."""
        from ..stats.descriptive import saturate

        return saturate(self, val)

    def pow(self, exponent: float) -> "RealBuffer":
        """Raise every sample to ``exponent`` in place."""
        from ..stats.descriptive import power

        return power(self, exponent)

    # Filtering, with this buffer as the filter

    def conv(
        self, data: Buffer, trim_tails: bool = False, scratch: Optional[Buffer] = None
    ) -> Buffer:
        """Convolve ``data`` with this filter in place. See :func:`ratebuf.dsp.convolve`."""
        from ..dsp.multirate import convolve

        return convolve(data, self, trim_tails=trim_tails, scratch=scratch)

    def decimate(
        self,
        data: Buffer,
        rate: int,
        trim_tails: bool = False,
        scratch: Optional[Buffer] = None,
    ) -> Buffer:
        """Filter and downsample ``data`` by ``rate``. See :func:`ratebuf.dsp.decimate`."""
        from ..dsp.multirate import decimate

        return decimate(data, rate, self, trim_tails=trim_tails, scratch=scratch)

    def interp(
        self,
        data: Buffer,
        rate: int,
        trim_tails: bool = False,
        scratch: Optional[Buffer] = None,
    ) -> Buffer:
        """Upsample ``data`` by ``rate`` and filter. See :func:`ratebuf.dsp.interpolate`."""
        from ..dsp.multirate import interpolate

        return interpolate(data, rate, self, trim_tails=trim_tails, scratch=scratch)

    def resample(
        self,
        data: Buffer,
        interp_rate: int,
        decimate_rate: int,
        trim_tails: bool = False,
        scratch: Optional[Buffer] = None,
    ) -> Buffer:
        """Resample ``data`` by ``interp_rate / decimate_rate``. See :func:`ratebuf.dsp.resample`."""
        from ..dsp.multirate import resample

        return resample(
            data, interp_rate, decimate_rate, self, trim_tails=trim_tails, scratch=scratch
        )
