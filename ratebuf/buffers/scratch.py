"""Scoped acquisition of the snapshot storage used by in-place filtering."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

import numpy as np

from ..errors import InvalidArgumentError
from .base import Buffer


def check_scratch(data: Buffer, scratch: Optional[Buffer]) -> None:
    """Validate a scratch buffer against the buffer it will snapshot.

    Raises:
        InvalidArgumentError: If scratch is the data buffer itself, is not a
            Buffer, or has a different dtype.
    """
    if scratch is None:
        return
    if not isinstance(scratch, Buffer):
        raise InvalidArgumentError(
            f"scratch must be a Buffer, got {type(scratch).__name__}"
        )
    if scratch is data or np.shares_memory(scratch.vec, data.vec):
        raise InvalidArgumentError("scratch must not share storage with the signal")
    if scratch.vec.dtype != data.vec.dtype:
        raise InvalidArgumentError(
            f"scratch dtype {scratch.vec.dtype} does not match signal dtype {data.vec.dtype}"
        )


@contextmanager
def borrow_scratch(data: Buffer, scratch: Optional[Buffer] = None) -> Iterator[np.ndarray]:
    """Snapshot ``data`` for the duration of one call.

    With no scratch buffer a private copy is made and dropped on exit.
    Otherwise the scratch buffer is resized to ``len(data)`` and filled;
    its content is only meaningful inside the ``with`` block.

    Args:
        data: Buffer about to be overwritten.
        scratch: Optional caller-owned scratch buffer.

    Yields:
        Array holding the pre-call content of ``data``.
    """
    check_scratch(data, scratch)

    if scratch is None:
        snapshot = data.vec.copy()
        try:
            yield snapshot
        finally:
            del snapshot
    else:
        scratch.resize(len(data))
        scratch.vec[:] = data.vec
        yield scratch.vec
