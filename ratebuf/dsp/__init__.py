"""Multirate filtering.

- Fused convolution, decimation, interpolation and rational resampling
  of a signal buffer by a real filter, in place
- Output-length rules
- Materialized up/downsampling
- Argument validation helpers
"""

from .multirate import convolve, decimate, interpolate, resample
from .rates import downsample, output_length, upsample
from .utils import check_1d_array, check_filter, check_rate, check_signal

__all__ = [
    # Utils
    "check_1d_array",
    "check_filter",
    "check_rate",
    "check_signal",
    # Rates
    "output_length",
    "upsample",
    "downsample",
    # Filtering
    "convolve",
    "decimate",
    "interpolate",
    "resample",
]
