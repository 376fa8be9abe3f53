"""Pytest configuration and shared fixtures for ratebuf tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- Helpers that build random complex signals and real filters
"""

import os

import numpy as np
import pytest
import torch


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Seed the global numpy and torch generators before every test."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())


@pytest.fixture
def random_signal(rng):
    """Factory for random complex128 signals of a given length."""

    def make(n: int) -> np.ndarray:
        return rng.standard_normal(n) + 1j * rng.standard_normal(n)

    return make


@pytest.fixture
def random_taps(rng):
    """Factory for random real filters of a given length."""

    def make(n: int) -> np.ndarray:
        return rng.standard_normal(n)

    return make
