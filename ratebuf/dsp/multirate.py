"""Fused multirate FIR filtering.

Convolution, decimation, interpolation and rational resampling of a signal
buffer by a real filter, computed in place. All four are one routine: the
signal is conceptually upsampled by ``interp_rate`` (zero-stuffed),
convolved with the filter and downsampled by ``decimate_rate``, but only the
output samples that are kept are computed and only the filter taps that land
on real (non-stuffed) samples are visited. Work is O(N * F * I / D) rather
than the O(N * I * F) of the materialized pipeline.

For output index ``r`` the position in the full convolution of the
upsampled signal is ``p = r * D + trim``, and

    out[r] = sum_j x[j] * h[p - j * I]

over every ``j`` where both indices are in range, summed in increasing ``j``.
The outputs fall into three contiguous regions:

1. initial: the filter hangs off the left edge of the signal, so the sum
   starts at sample 0;
2. middle: the filter lies fully within the signal;
3. final: the filter hangs off the right edge, so the sum stops at the last
   sample.

A rolling pair ``(data_start, filter_start)`` with
``data_start * I + filter_start == p`` tracks the first sample and tap of
each sum. ``filter_start`` grows by ``D`` per output; every time it reaches
the filter length it has stepped past a zero-stuffed gap, so it drops by
``I`` and ``data_start`` moves to the next sample.

Example:
    >>> import numpy as np
    >>> from ratebuf import ComplexBuffer, convolve
    >>> sig = ComplexBuffer([1, 2, 3, 4])
    >>> convolve(sig, [1.0, 1.0, 1.0]).vec.real
    array([1., 3., 6., 9., 7., 4.])
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..buffers.base import Buffer
from ..buffers.scratch import borrow_scratch
from ..diagnostics.debug_mode import is_debug_enabled
from ..logging import get_logger
from .rates import output_length
from .utils import check_filter, check_rate, check_signal

logger = get_logger(__name__)


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def _tap_sum(
    snapshot: np.ndarray,
    data_start: int,
    taps: np.ndarray,
    filter_start: int,
    interp_rate: int,
    count: int,
):
    # Taps visited are filter_start, filter_start - I, ... down to >= 0.
    if count <= 0:
        return 0
    return np.dot(
        snapshot[data_start : data_start + count],
        taps[filter_start::-interp_rate][:count],
    )


def _advance(
    data_start: int, filter_start: int, n_taps: int, interp_rate: int, decimate_rate: int
) -> tuple[int, int]:
    filter_start += decimate_rate
    # A single step of D can cross several I-wide gaps when D > I.
    while filter_start >= n_taps:
        filter_start -= interp_rate
        data_start += 1
    return data_start, filter_start


def _check_position(
    region: str,
    result_index: int,
    data_start: int,
    filter_start: int,
    trim: int,
    n_taps: int,
    interp_rate: int,
    decimate_rate: int,
) -> None:
    position = result_index * decimate_rate + trim
    if data_start * interp_rate + filter_start != position:
        raise RuntimeError(
            f"{region} region at output {result_index}: rolling pair "
            f"({data_start}, {filter_start}) does not map to position {position}"
        )
    if filter_start >= n_taps or (data_start > 0 and filter_start < n_taps - interp_rate):
        raise RuntimeError(
            f"{region} region at output {result_index}: filter_start {filter_start} "
            f"outside [{n_taps - interp_rate}, {n_taps})"
        )


def _fused_resample(
    data: Buffer,
    taps: np.ndarray,
    interp_rate: int,
    decimate_rate: int,
    trim_tails: bool,
    scratch: Optional[Buffer],
) -> Buffer:
    n_taps = len(taps)
    trim = (n_taps - 1) // 2 if trim_tails else 0

    with borrow_scratch(data, scratch) as snapshot:
        n = len(snapshot)
        out_len = output_length(n, n_taps, interp_rate, decimate_rate, trim_tails)

        # Region bounds: p < F - 1 for the initial region, p < N * I for the
        # middle one. Clamped so short signals get an empty middle region.
        initial_end = min(_ceil_div(n_taps - 1 - trim, decimate_rate), out_len)
        middle_end = min(
            max(_ceil_div(n * interp_rate - trim, decimate_rate), initial_end), out_len
        )

        logger.debug(
            "N=%d F=%d I=%d D=%d trim=%d -> %d outputs, regions [0,%d) [%d,%d) [%d,%d)",
            n, n_taps, interp_rate, decimate_rate, trim, out_len,
            initial_end, initial_end, middle_end, middle_end, out_len,
        )

        data.resize(out_len)
        out = data.vec
        debug = is_debug_enabled()
        data_start, filter_start = 0, trim

        # Initial partial overlap
        for result_index in range(initial_end):
            if debug and result_index == 0:
                _check_position("initial", result_index, data_start, filter_start,
                                trim, n_taps, interp_rate, decimate_rate)
            count = min(filter_start // interp_rate + 1, n)
            out[result_index] = _tap_sum(snapshot, 0, taps, filter_start, interp_rate, count)
            data_start, filter_start = _advance(
                data_start, filter_start, n_taps, interp_rate, decimate_rate
            )

        # Middle full overlap
        for result_index in range(initial_end, middle_end):
            if debug and result_index == initial_end:
                _check_position("middle", result_index, data_start, filter_start,
                                trim, n_taps, interp_rate, decimate_rate)
            count = filter_start // interp_rate + 1
            out[result_index] = _tap_sum(
                snapshot, data_start, taps, filter_start, interp_rate, count
            )
            data_start, filter_start = _advance(
                data_start, filter_start, n_taps, interp_rate, decimate_rate
            )

        # Final partial overlap
        for result_index in range(middle_end, out_len):
            if debug and result_index == middle_end:
                _check_position("final", result_index, data_start, filter_start,
                                trim, n_taps, interp_rate, decimate_rate)
            count = n - data_start
            out[result_index] = _tap_sum(
                snapshot, data_start, taps, filter_start, interp_rate, count
            )
            data_start, filter_start = _advance(
                data_start, filter_start, n_taps, interp_rate, decimate_rate
            )

    return data


def convolve(
    data: Buffer,
    filter,
    trim_tails: bool = False,
    scratch: Optional[Buffer] = None,
) -> Buffer:
    """Convolve a signal buffer with a real filter, in place.

    Args:
        data: Signal buffer; overwritten with the result.
        filter: Real coefficients (RealBuffer or 1D array-like), length >= 1.
        trim_tails: False returns the full convolution of length N + F - 1.
            True keeps length N by dropping the first ``(F - 1) // 2``
            samples of the full convolution and cutting the rest from the end.
        scratch: Scratch buffer for the snapshot of ``data``. Defaults to
            ``data.scratch``; if both are None a temporary copy is used.

    Returns:
        ``data``.

    Raises:
        InvalidArgumentError: If the filter is empty or arguments are
            malformed. Nothing is modified in that case.
    """
    return resample(data, 1, 1, filter, trim_tails=trim_tails, scratch=scratch)


def decimate(
    data: Buffer,
    rate: int,
    filter,
    trim_tails: bool = False,
    scratch: Optional[Buffer] = None,
) -> Buffer:
    """Filter and keep every ``rate``-th output, in place.

    Equivalent to :func:`convolve` followed by :func:`ratebuf.dsp.downsample`,
    but the discarded samples are never computed. Output length is
    ceil((N + F - 1) / rate), or ceil(N / rate) with ``trim_tails``.

    Returns:
        ``data``.
    """
    rate = check_rate(rate)
    return resample(data, 1, rate, filter, trim_tails=trim_tails, scratch=scratch)


def interpolate(
    data: Buffer,
    rate: int,
    filter,
    trim_tails: bool = False,
    scratch: Optional[Buffer] = None,
) -> Buffer:
    """Upsample by ``rate`` and filter, in place.

    Equivalent to :func:`ratebuf.dsp.upsample` followed by :func:`convolve`
    (with the final ``rate - 1`` samples, which only see stuffed zeros,
    dropped), but the stuffed zeros are never multiplied. Output length is
    N * rate + F - 1 - (rate - 1), or N * rate with ``trim_tails``.

    Returns:
        ``data``.
    """
    rate = check_rate(rate)
    return resample(data, rate, 1, filter, trim_tails=trim_tails, scratch=scratch)


def resample(
    data: Buffer,
    interp_rate: int,
    decimate_rate: int,
    filter,
    trim_tails: bool = False,
    scratch: Optional[Buffer] = None,
) -> Buffer:
    """Resample by ``interp_rate / decimate_rate`` in a single pass, in place.

    Equivalent to upsampling by ``interp_rate``, filtering and downsampling
    by ``decimate_rate``. With both rates 1 this is :func:`convolve`; with
    one of them 1 it is :func:`decimate` or :func:`interpolate`, and the
    results are bit-identical.

    Args:
        data: Signal buffer; overwritten with the result.
        interp_rate: Upsampling factor (positive integer).
        decimate_rate: Downsampling factor (positive integer).
        filter: Real coefficients, length >= 1.
        trim_tails: Keep the output at ceil(N * interp_rate / decimate_rate)
            samples, aligned with the filter's centre tap.
        scratch: Scratch buffer for the snapshot of ``data``.

    Returns:
        ``data``.

    Raises:
        InvalidArgumentError: If a rate is not a positive integer, the filter
            is empty or not real, or the scratch buffer is unusable.
    """
    data = check_signal(data)
    taps = check_filter(filter)
    interp_rate = check_rate(interp_rate, "interp_rate")
    decimate_rate = check_rate(decimate_rate, "decimate_rate")
    if scratch is None:
        scratch = data.scratch
    return _fused_resample(data, taps, interp_rate, decimate_rate, bool(trim_tails), scratch)
