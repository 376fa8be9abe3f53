"""Conversion between ratebuf buffers and PyTorch tensors."""

from __future__ import annotations

from typing import Optional

import torch

from ..buffers.base import Buffer
from ..buffers.complex import ComplexBuffer
from ..buffers.real import RealBuffer
from ..errors import InvalidArgumentError


def infer_device(device: Optional[torch.device]) -> torch.device:
    """
    Infer the PyTorch device to use.

    Parameters
    ----------
    device:
        Optional PyTorch device. If None, the CPU is used.

    Returns
    -------
    torch.device
        The device tensors are placed on.
    """
    if device is not None:
        return torch.device(device)
    return torch.device("cpu")


def buffer_from_tensor(
    t: torch.Tensor, scratch: Optional[Buffer] = None
) -> Buffer:
    """
    Copy a 1D tensor into a new buffer.

    Complex tensors become a ComplexBuffer, real tensors a RealBuffer.

    Parameters
    ----------
    t:
        1D tensor on any device.
    scratch:
        Optional scratch handle for the new buffer.

    Raises
    ------
    InvalidArgumentError
        If t is not 1D.
    """
    if t.dim() != 1:
        raise InvalidArgumentError(f"Expected 1D tensor, got {t.dim()}D tensor")
    values = t.detach().cpu()
    if values.is_complex():
        return ComplexBuffer(values.to(torch.complex128).numpy(), scratch=scratch)
    return RealBuffer(values.to(torch.float64).numpy(), scratch=scratch)


def buffer_to_tensor(
    buf: Buffer, device: Optional[torch.device] = None
) -> torch.Tensor:
    """
    Copy a buffer into a float64 or complex128 tensor.

    Parameters
    ----------
    buf:
        Source buffer.
    device:
        Target device. If None, uses infer_device().

    Returns
    -------
    torch.Tensor
        1D tensor that does not share memory with ``buf``.
    """
    if not isinstance(buf, Buffer):
        raise InvalidArgumentError(f"Expected a Buffer, got {type(buf).__name__}")
    return torch.from_numpy(buf.to_numpy()).to(device=infer_device(device))
