"""
Advanced chromaspace usage scenarios.
"""

from __future__ import annotations

import numpy as np

from chromaspace import (
    D50_WHITE_POINT,
    D65_WHITE_POINT,
    DISPLAY_P3,
    SRGB,
    AdaptationMethod,
    ChromaticAdaptation,
    Chromaticity,
    ColorSpace,
    TransferFunction,
)


def example_custom_primaries() -> ColorSpace:
    """Derive a linear Adobe RGB (1998) space from its primaries."""

    adobe = ColorSpace.from_primaries(
        Chromaticity(0.64, 0.33),
        Chromaticity(0.21, 0.71),
        Chromaticity(0.15, 0.06),
        D65_WHITE_POINT,
        TransferFunction.NONE,
    )
    print(f"Linear Adobe RGB -> XYZ (D50):\n{adobe.to_xyz.to_numpy()}")
    return adobe


def example_image_conversion() -> np.ndarray:
    """Convert an sRGB image to Display P3."""

    img_srgb = np.random.rand(256, 256, 3)
    img_p3 = DISPLAY_P3.decode_array(SRGB.encode_array(img_srgb))
    print(f"Display P3 output range: [{img_p3.min():0.3f}, {img_p3.max():0.3f}]")
    return img_p3


def example_adaptation_methods() -> None:
    """Compare cone response models for D65 -> D50."""

    for method in AdaptationMethod:
        adaptation = ChromaticAdaptation(D65_WHITE_POINT, D50_WHITE_POINT, method)
        print(f"{method.value:>12}: {adaptation.matrix.to_numpy().round(5).tolist()}")


def example_torch_backend():
    """Convert a batch of images on the GPU (requires torch)."""
    try:
        import torch
        from chromaspace.torch import TorchColorSpace  # type: ignore
    except ImportError:  # pragma: no cover - torch optional
        print("PyTorch is not available; skipping GPU example.")
        return None

    device = torch.device("cuda" if torch.cuda.is_available() else "cpu")
    space = TorchColorSpace(SRGB, device=device)
    img = torch.rand(4, 3, 256, 256, device=device)
    xyz = space.encode(img)
    print(f"Torch backend on {device}: Y range [{xyz[:, 1].min():0.3f}, {xyz[:, 1].max():0.3f}]")
    return xyz


if __name__ == "__main__":
    print("Running chromaspace advanced examples...")
    example_custom_primaries()
    example_image_conversion()
    example_adaptation_methods()
    example_torch_backend()
