"""PyTorch interop for ratebuf buffers."""

from .utils import buffer_from_tensor, buffer_to_tensor, infer_device

__all__ = [
    "infer_device",
    "buffer_from_tensor",
    "buffer_to_tensor",
]
