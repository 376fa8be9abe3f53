"""Descriptive statistics and element-wise limiting for real data."""

from .descriptive import (
    maximum,
    mean,
    median,
    minimum,
    power,
    saturate,
    std_dev,
    var,
)

__all__ = [
    "mean",
    "var",
    "std_dev",
    "median",
    "maximum",
    "minimum",
    "saturate",
    "power",
]
