"""Output-length rules and materialized up/downsampling.

``upsample`` and ``downsample`` build the intermediate buffers that the
fused routines in :mod:`ratebuf.dsp.multirate` avoid. They are handy as
references and for one-off rate changes without filtering.
"""

import numpy as np

from .utils import check_1d_array, check_rate


def output_length(
    n: int,
    filter_len: int,
    interp_rate: int = 1,
    decimate_rate: int = 1,
    trim_tails: bool = False,
) -> int:
    """Length of the result of a fused resampling call.

    Untrimmed: ceil((n*I + F - 1 - (I - 1)) / D), never below zero.
    Trimmed: ceil(n*I / D).

    Args:
        n: Signal length.
        filter_len: Number of filter coefficients (>= 1).
        interp_rate: Upsampling factor I.
        decimate_rate: Downsampling factor D.
        trim_tails: Output-length policy.

    Returns:
        Number of output samples.
    """
    interp_rate = check_rate(interp_rate, "interp_rate")
    decimate_rate = check_rate(decimate_rate, "decimate_rate")
    if trim_tails:
        interp_len = n * interp_rate
    else:
        interp_len = max(n * interp_rate + filter_len - 1 - (interp_rate - 1), 0)
    return (interp_len + decimate_rate - 1) // decimate_rate


def upsample(x, rate: int) -> np.ndarray:
    """Insert ``rate - 1`` zeros after every sample.

    Returns:
        Array of length ``len(x) * rate`` with the input's dtype.
    """
    rate = check_rate(rate)
    x = check_1d_array(x, dtype=None, finite=False)
    out = np.zeros(len(x) * rate, dtype=np.result_type(x.dtype, np.float64))
    out[::rate] = x
    return out


def downsample(x, rate: int) -> np.ndarray:
    """Keep samples 0, rate, 2*rate, ..."""
    rate = check_rate(rate)
    x = check_1d_array(x, dtype=None, finite=False)
    return x[::rate].copy()
