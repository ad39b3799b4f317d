"""
Shared helpers for the torch backend.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import torch

from chromaspace.linalg import Matrix3x3


@dataclass(frozen=True)
class TensorFormat:
    """Bookkeeping for tensor layout during conversion."""

    original_shape: Tuple[int, ...]
    channel_first: bool
    batched: bool


def ensure_tensor(
    data,
    device: Optional[torch.device] = None,
    dtype: torch.dtype = torch.float32,
) -> torch.Tensor:
    """
    Convert input data to a torch tensor on the requested device.
    """

    if isinstance(data, torch.Tensor):
        tensor = data.to(dtype=dtype)
        if device is not None:
            tensor = tensor.to(device)
        return tensor

    return torch.as_tensor(data, dtype=dtype, device=device)


def matrix_tensor(
    matrix: Matrix3x3,
    device: Optional[torch.device] = None,
    dtype: torch.dtype = torch.float32,
) -> torch.Tensor:
    return torch.as_tensor(matrix.to_numpy(), dtype=dtype, device=device)


def to_nchw(
    img: torch.Tensor,
    channels_last: bool = True,
) -> Tuple[torch.Tensor, TensorFormat]:
    """
    Reshape an image tensor to NCHW format with a batch dimension.

    Rank 3 inputs are HWC when ``channels_last`` is set and CHW otherwise.
    Rank 4 inputs must already be NCHW.
    """

    if img.dim() == 3:
        batched = False
        if not channels_last:
            channel_first = True
            img_cf = img
        else:
            channel_first = False
            img_cf = img.permute(2, 0, 1)
        img_cf = img_cf.unsqueeze(0)
    elif img.dim() == 4:
        batched = True
        channel_first = True
        img_cf = img
    else:
        raise ValueError(f"Unsupported tensor rank {img.dim()} for image input.")

    if img_cf.shape[1] not in (3, 4):
        raise ValueError(f"Expected 3 or 4 channels, got {img_cf.shape[1]}")

    fmt = TensorFormat(
        original_shape=tuple(img.shape), channel_first=channel_first, batched=batched
    )
    return img_cf, fmt


def from_nchw(
    img: torch.Tensor,
    fmt: TensorFormat,
) -> torch.Tensor:
    """
    Convert an NCHW tensor back to the original layout.
    """

    if img.dim() != 4:
        raise ValueError("Expected NCHW tensor with a batch dimension.")

    if fmt.batched:
        return img

    img = img.squeeze(0)

    if fmt.channel_first:
        return img

    return img.permute(1, 2, 0)
