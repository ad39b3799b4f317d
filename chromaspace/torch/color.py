"""
Color space transforms implemented with torch tensors.
"""

from __future__ import annotations

import torch

from chromaspace.core.config import TransferFunction
from chromaspace.core.constants import (
    SRGB_DECODE_THRESHOLD,
    SRGB_ENCODE_THRESHOLD,
    SRGB_GAMMA,
    SRGB_LINEAR_SLOPE,
    SRGB_OFFSET,
    SRGB_SCALE,
)
from chromaspace.space.color_space import ColorSpace
from chromaspace.space.converter import ColorSpaceConverter
from chromaspace.torch.common import ensure_tensor, from_nchw, matrix_tensor, to_nchw


def srgb_to_linear(u: torch.Tensor) -> torch.Tensor:
    magnitude = u.abs()
    result = torch.where(
        magnitude <= SRGB_DECODE_THRESHOLD,
        magnitude / SRGB_LINEAR_SLOPE,
        ((magnitude + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA,
    )
    return torch.copysign(result, u)


def linear_to_srgb(u: torch.Tensor) -> torch.Tensor:
    magnitude = u.abs()
    result = torch.where(
        magnitude <= SRGB_ENCODE_THRESHOLD,
        magnitude * SRGB_LINEAR_SLOPE,
        SRGB_SCALE * magnitude ** (1.0 / SRGB_GAMMA) - SRGB_OFFSET,
    )
    return torch.copysign(result, u)


def _linearize(u: torch.Tensor, transfer_function: TransferFunction) -> torch.Tensor:
    if transfer_function == TransferFunction.SRGB:
        return srgb_to_linear(u)
    if transfer_function == TransferFunction.NONE:
        return u
    raise ValueError(f"Unknown transfer function: {transfer_function}")


def _delinearize(u: torch.Tensor, transfer_function: TransferFunction) -> torch.Tensor:
    if transfer_function == TransferFunction.SRGB:
        return linear_to_srgb(u)
    if transfer_function == TransferFunction.NONE:
        return u
    raise ValueError(f"Unknown transfer function: {transfer_function}")


def _matmul_channel(mat: torch.Tensor, img: torch.Tensor) -> torch.Tensor:
    """
    Multiply a 3x3 matrix with the first three channels of an NCHW tensor.
    """

    # (B, C, H, W) -> (B, H, W, C)
    img_swapped = img[:, :3].permute(0, 2, 3, 1)
    result = torch.tensordot(img_swapped, mat.T, dims=([3], [0]))
    return result.permute(0, 3, 1, 2)


def _with_alpha(color: torch.Tensor, source: torch.Tensor) -> torch.Tensor:
    if source.shape[1] == 4:
        return torch.cat([color, source[:, 3:]], dim=1)
    return color


class TorchColorSpace:
    """
    Torch equivalent of :class:`ColorSpace` for image tensors.

    Accepts HWC, CHW or NCHW tensors with 3 channels, or 4 with alpha in the
    last channel (copied through). Rank 3 tensors are HWC unless
    ``channels_last`` is False.
    """

    def __init__(
        self,
        color_space: ColorSpace,
        device: torch.device = torch.device("cpu"),
        dtype: torch.dtype = torch.float32,
    ) -> None:
        self.device = device
        self.dtype = dtype
        self.transfer_function = color_space.transfer_function
        self.to_xyz_matrix = matrix_tensor(color_space.to_xyz, device, dtype)
        self.from_xyz_matrix = matrix_tensor(color_space.from_xyz, device, dtype)

    def encode(self, rgb, channels_last: bool = True) -> torch.Tensor:
        """Stored RGB -> XYZ (D50)."""

        img, fmt = to_nchw(ensure_tensor(rgb, self.device, self.dtype), channels_last)
        linear = _linearize(img[:, :3], self.transfer_function)
        xyz = _matmul_channel(self.to_xyz_matrix, linear)
        return from_nchw(_with_alpha(xyz, img), fmt)

    def decode(self, xyz, clip: bool = True, channels_last: bool = True) -> torch.Tensor:
        """XYZ (D50) -> stored RGB, clipped to [0, 1] unless ``clip`` is False."""

        img, fmt = to_nchw(ensure_tensor(xyz, self.device, self.dtype), channels_last)
        linear = _matmul_channel(self.from_xyz_matrix, img)
        rgb = _delinearize(linear, self.transfer_function)
        if clip:
            rgb = rgb.clamp(0.0, 1.0)
        return from_nchw(_with_alpha(rgb, img), fmt)


class TorchColorSpaceConverter:
    """
    Linear RGB -> linear RGB on tensors.

    Like :class:`ColorSpaceConverter`, transfer functions are ignored.
    """

    def __init__(
        self,
        source: ColorSpace,
        destination: ColorSpace,
        device: torch.device = torch.device("cpu"),
        dtype: torch.dtype = torch.float32,
    ) -> None:
        self.device = device
        self.dtype = dtype
        self.matrix = matrix_tensor(ColorSpaceConverter(source, destination).matrix, device, dtype)

    def convert(self, rgb, channels_last: bool = True) -> torch.Tensor:
        img, fmt = to_nchw(ensure_tensor(rgb, self.device, self.dtype), channels_last)
        converted = _matmul_channel(self.matrix, img)
        return from_nchw(_with_alpha(converted, img), fmt)
