"""Sample buffers consumed by the filtering engine."""

from .base import Buffer
from .complex import ComplexBuffer
from .real import RealBuffer
from .scratch import borrow_scratch, check_scratch

__all__ = [
    "Buffer",
    "RealBuffer",
    "ComplexBuffer",
    "borrow_scratch",
    "check_scratch",
]
