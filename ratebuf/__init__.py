"""ratebuf - in-place multirate FIR filtering over NumPy-backed buffers."""

__version__ = "0.1.0"

# Buffers
from .buffers import Buffer, ComplexBuffer, RealBuffer, borrow_scratch

# Diagnostics
from .diagnostics import debug_context, is_debug_enabled, set_debug_enabled

# Multirate filtering
from .dsp import (
    check_1d_array,
    check_filter,
    check_rate,
    convolve,
    decimate,
    downsample,
    interpolate,
    output_length,
    resample,
    upsample,
)

# Errors
from .errors import InvalidArgumentError, PreconditionError, RatebufError

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Statistics
from .stats import (
    maximum,
    mean,
    median,
    minimum,
    power,
    saturate,
    std_dev,
    var,
)

# PyTorch interop
from .torch import buffer_from_tensor, buffer_to_tensor

__all__ = [
    "__version__",
    # Buffers
    "Buffer",
    "RealBuffer",
    "ComplexBuffer",
    "borrow_scratch",
    # Filtering
    "convolve",
    "decimate",
    "interpolate",
    "resample",
    "output_length",
    "upsample",
    "downsample",
    "check_1d_array",
    "check_filter",
    "check_rate",
    # Statistics
    "mean",
    "var",
    "std_dev",
    "median",
    "maximum",
    "minimum",
    "saturate",
    "power",
    # Errors
    "RatebufError",
    "InvalidArgumentError",
    "PreconditionError",
    # Diagnostics
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
    # PyTorch
    "buffer_from_tensor",
    "buffer_to_tensor",
]
