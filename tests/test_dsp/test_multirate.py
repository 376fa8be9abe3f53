"""Tests for dsp.multirate module."""

import itertools

import numpy as np
import pytest

from ratebuf import ComplexBuffer, RealBuffer
from ratebuf.dsp.multirate import convolve, decimate, interpolate, resample
from ratebuf.dsp.rates import downsample, upsample
from ratebuf.errors import InvalidArgumentError


def reference_resample(x, h, interp_rate, decimate_rate, trim_tails):
    """Materialized upsample -> convolve -> downsample."""
    x = np.asarray(x, dtype=complex)
    h = np.asarray(h, dtype=float)
    n_up = len(x) * interp_rate
    full = np.convolve(upsample(x, interp_rate), h)
    if trim_tails:
        trim = (len(h) - 1) // 2
        kept = full[trim : trim + n_up]
    else:
        kept = full[: n_up + len(h) - 1 - (interp_rate - 1)]
    return downsample(kept, decimate_rate)


def run(op, x, *args, **kwargs):
    buf = ComplexBuffer(x)
    result = op(buf, *args, **kwargs)
    assert result is buf
    return buf.to_numpy()


def test_convolve_known_sequence():
    """[1,1,1] * [1,2,3,4] full and trimmed."""
    y = run(convolve, [1, 2, 3, 4], [1.0, 1.0, 1.0])
    np.testing.assert_array_equal(y, [1, 3, 6, 9, 7, 4])

    y = run(convolve, [1, 2, 3, 4], [1.0, 1.0, 1.0], trim_tails=True)
    np.testing.assert_array_equal(y, [3, 6, 9, 7])


def test_decimate_known_sequence():
    y = run(decimate, [1, 2, 3, 4], 2, [1.0, 1.0, 1.0])
    np.testing.assert_array_equal(y, [1, 6, 7])


def test_interpolate_known_sequence():
    """[1,2] upsampled by 2 is [1,0,2,0]; filtering with [1,1] gives [1,1,2,2]."""
    y = run(interpolate, [1, 2], 2, [1.0, 1.0])
    np.testing.assert_array_equal(y, [1, 1, 2, 2])
    np.testing.assert_array_equal(y, reference_resample([1, 2], [1.0, 1.0], 2, 1, False))


def test_convolve_complex_values():
    x = np.array([1 + 1j, 2 - 1j, -1j])
    h = np.array([0.5, -2.0])
    y = run(convolve, x, h)
    np.testing.assert_allclose(y, np.convolve(x, h))


def test_trim_is_asymmetric_for_even_filters():
    """Even-length filters drop one more sample from the end than the start."""
    x = np.arange(1, 7, dtype=float)
    h = np.array([1.0, 2.0, 3.0, 4.0])
    full = np.convolve(x, h)
    y = run(convolve, x, h, trim_tails=True)
    # (F - 1) // 2 == 1 leading sample dropped, 2 trailing
    np.testing.assert_allclose(y, full[1:7])


@pytest.mark.parametrize("trim_tails", [False, True])
@pytest.mark.parametrize(
    "n, n_taps, interp_rate, decimate_rate",
    [
        (16, 5, 1, 1),
        (16, 5, 1, 3),
        (16, 5, 3, 1),
        (16, 7, 3, 2),
        (16, 7, 2, 3),
        (20, 4, 5, 7),
        (9, 31, 4, 3),
        (3, 12, 2, 5),
        (1, 6, 1, 1),
        (2, 3, 7, 2),
        (5, 2, 6, 1),
        (13, 1, 3, 4),
    ],
)
def test_resample_matches_materialized_pipeline(
    random_signal, random_taps, n, n_taps, interp_rate, decimate_rate, trim_tails
):
    x = random_signal(n)
    h = random_taps(n_taps)
    y = run(resample, x, interp_rate, decimate_rate, h, trim_tails=trim_tails)
    expected = reference_resample(x, h, interp_rate, decimate_rate, trim_tails)
    assert len(y) == len(expected)
    np.testing.assert_allclose(y, expected, rtol=1e-12, atol=1e-12)


@pytest.mark.parametrize("trim_tails", [False, True])
def test_reductions_are_bit_exact(random_signal, random_taps, trim_tails):
    x = random_signal(23)
    for n_taps, rate in itertools.product([1, 2, 5, 8], [1, 2, 3, 6]):
        h = random_taps(n_taps)
        conv = run(convolve, x, h, trim_tails=trim_tails)

        np.testing.assert_array_equal(run(decimate, x, 1, h, trim_tails=trim_tails), conv)
        np.testing.assert_array_equal(run(interpolate, x, 1, h, trim_tails=trim_tails), conv)
        np.testing.assert_array_equal(run(resample, x, 1, 1, h, trim_tails=trim_tails), conv)
        np.testing.assert_array_equal(
            run(resample, x, 1, rate, h, trim_tails=trim_tails),
            run(decimate, x, rate, h, trim_tails=trim_tails),
        )
        np.testing.assert_array_equal(
            run(resample, x, rate, 1, h, trim_tails=trim_tails),
            run(interpolate, x, rate, h, trim_tails=trim_tails),
        )


def test_decimate_is_convolve_then_downsample(random_signal, random_taps):
    x = random_signal(30)
    h = random_taps(9)
    for rate in (2, 3, 4, 10, 40):
        for trim_tails in (False, True):
            conv = run(convolve, x, h, trim_tails=trim_tails)
            y = run(decimate, x, rate, h, trim_tails=trim_tails)
            np.testing.assert_allclose(y, conv[::rate], rtol=1e-12, atol=1e-12)


def test_length_laws():
    for n, n_taps, rate in itertools.product(range(0, 7), range(1, 6), range(1, 5)):
        x = np.ones(n)
        h = np.ones(n_taps)
        assert len(run(convolve, x, h)) == n + n_taps - 1
        assert len(run(convolve, x, h, trim_tails=True)) == n
        assert len(run(decimate, x, rate, h)) == -(-(n + n_taps - 1) // rate)
        assert len(run(decimate, x, rate, h, trim_tails=True)) == -(-n // rate)
        assert len(run(interpolate, x, rate, h)) == max(n * rate + n_taps - 1 - (rate - 1), 0)
        assert len(run(interpolate, x, rate, h, trim_tails=True)) == n * rate


def test_empty_signal():
    buf = ComplexBuffer([])
    convolve(buf, [1.0, 2.0, 3.0], trim_tails=True)
    assert len(buf) == 0

    buf = ComplexBuffer([])
    convolve(buf, [1.0, 2.0, 3.0])
    np.testing.assert_array_equal(buf.to_numpy(), np.zeros(2))

    buf = ComplexBuffer([])
    interpolate(buf, 4, [1.0, 2.0])
    assert len(buf) == 0


def test_signal_shorter_than_filter(random_taps):
    h = random_taps(11)
    for n in range(1, 6):
        x = np.arange(1, n + 1, dtype=complex)
        for trim_tails in (False, True):
            y = run(convolve, x, h, trim_tails=trim_tails)
            full = np.convolve(x, h)
            if trim_tails:
                np.testing.assert_allclose(y, full[5 : 5 + n])
            else:
                np.testing.assert_allclose(y, full)


def test_real_signal_buffer():
    buf = RealBuffer([1.0, 2.0, 3.0, 4.0])
    convolve(buf, [1.0, 1.0, 1.0])
    assert buf.vec.dtype == np.float64
    np.testing.assert_array_equal(buf.vec, [1, 3, 6, 9, 7, 4])


def test_filter_as_real_buffer():
    taps = RealBuffer([1.0, 1.0, 1.0])
    y = run(decimate, [1, 2, 3, 4], 2, taps)
    np.testing.assert_array_equal(y, [1, 6, 7])
    np.testing.assert_array_equal(taps.vec, [1.0, 1.0, 1.0])


@pytest.mark.parametrize(
    "call",
    [
        lambda buf, h: convolve(buf, h),
        lambda buf, h: decimate(buf, 2, h),
        lambda buf, h: interpolate(buf, 2, h),
        lambda buf, h: resample(buf, 3, 2, h),
    ],
)
def test_empty_filter_raises_without_mutation(call):
    buf = ComplexBuffer([1, 2, 3])
    with pytest.raises(InvalidArgumentError, match="at least one coefficient"):
        call(buf, [])
    np.testing.assert_array_equal(buf.vec, [1, 2, 3])


@pytest.mark.parametrize("interp_rate, decimate_rate", [(0, 1), (1, 0), (-2, 3), (2, -1)])
def test_non_positive_rates_raise(interp_rate, decimate_rate):
    buf = ComplexBuffer([1, 2, 3])
    with pytest.raises(InvalidArgumentError, match="must be positive"):
        resample(buf, interp_rate, decimate_rate, [1.0])
    np.testing.assert_array_equal(buf.vec, [1, 2, 3])


def test_invalid_arguments():
    buf = ComplexBuffer([1, 2, 3])
    with pytest.raises(InvalidArgumentError):
        decimate(buf, 0, [1.0])
    with pytest.raises(InvalidArgumentError):
        interpolate(buf, 1.5, [1.0])
    with pytest.raises(InvalidArgumentError):
        decimate(buf, True, [1.0])
    with pytest.raises(InvalidArgumentError, match="real"):
        convolve(buf, [1j])
    with pytest.raises(InvalidArgumentError, match="Buffer"):
        convolve(np.array([1.0, 2.0]), [1.0])
    # InvalidArgumentError is a ValueError
    with pytest.raises(ValueError):
        convolve(buf, np.ones((2, 2)))
    np.testing.assert_array_equal(buf.vec, [1, 2, 3])


def test_numpy_integer_rates():
    y = run(decimate, [1, 2, 3, 4], np.int64(2), [1.0, 1.0, 1.0])
    np.testing.assert_array_equal(y, [1, 6, 7])


def test_buffer_filtered_by_itself():
    """The filter is read from a private copy, so aliasing the signal is safe."""
    buf = RealBuffer([1.0, 2.0, 3.0])
    buf.conv(buf, trim_tails=True)
    np.testing.assert_array_equal(buf.vec, np.convolve([1, 2, 3], [1, 2, 3])[1:4])
