"""Benchmark fused resampling against the materialized pipeline."""

import time
from typing import Dict

import numpy as np

import ratebuf as rb


def benchmark_resample(
    n_samples: int,
    n_taps: int,
    interp_rate: int,
    decimate_rate: int,
    n_runs: int = 5,
) -> Dict[str, float]:
    """Benchmark one resampling configuration.

    Args:
        n_samples: Signal length.
        n_taps: Filter length.
        interp_rate: Upsampling factor.
        decimate_rate: Downsampling factor.
        n_runs: Repetitions averaged per method.

    Returns:
        Dictionary with timing results.
    """
    rng = np.random.default_rng(0)
    x = rng.standard_normal(n_samples) + 1j * rng.standard_normal(n_samples)
    taps = rng.standard_normal(n_taps)
    scratch = rb.ComplexBuffer()

    # Warmup
    rb.resample(rb.ComplexBuffer(x[:64]), interp_rate, decimate_rate, taps, scratch=scratch)

    start = time.perf_counter()
    for _ in range(n_runs):
        rb.resample(rb.ComplexBuffer(x), interp_rate, decimate_rate, taps, scratch=scratch)
    fused = (time.perf_counter() - start) / n_runs

    start = time.perf_counter()
    for _ in range(n_runs):
        full = np.convolve(rb.upsample(x, interp_rate), taps)
        rb.downsample(full[: len(full) - (interp_rate - 1)], decimate_rate)
    materialized = (time.perf_counter() - start) / n_runs

    return {
        "n_samples": n_samples,
        "n_taps": n_taps,
        "interp_rate": interp_rate,
        "decimate_rate": decimate_rate,
        "fused_sec": fused,
        "materialized_sec": materialized,
        "outputs_per_sec": rb.output_length(n_samples, n_taps, interp_rate, decimate_rate) / fused,
    }


if __name__ == "__main__":
    print("Benchmarking resampling...")

    for interp_rate, decimate_rate in [(1, 1), (1, 8), (8, 1), (3, 2), (2, 7)]:
        results = benchmark_resample(4096, 129, interp_rate, decimate_rate)
        print(f"I={interp_rate} D={decimate_rate}:")
        print(f"  Fused: {results['fused_sec'] * 1e3:.2f} ms")
        print(f"  Materialized (numpy): {results['materialized_sec'] * 1e3:.2f} ms")
        print(f"  Outputs per second: {results['outputs_per_sec']:.0f}")
