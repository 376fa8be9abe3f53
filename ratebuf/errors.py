"""Exception types raised by ratebuf."""

from __future__ import annotations


class RatebufError(Exception):
    """Base class for all ratebuf errors."""


class InvalidArgumentError(RatebufError, ValueError):
    """An argument is outside the domain of the operation.

    Raised for empty filters, non-positive rates, non-1D inputs and unusable
    scratch buffers. Always raised before the signal buffer is touched.
    """


class PreconditionError(RatebufError, ValueError):
    """A buffer is too short for the requested statistic."""
