"""
Tests for the torch backend. Skipped automatically when torch is unavailable.
"""

from __future__ import annotations

import numpy as np
import pytest

torch = pytest.importorskip("torch")

from chromaspace import DISPLAY_P3, REC2020_LINEAR, SRGB, SRGB_LINEAR, ColorSpaceConverter  # noqa: E402
from chromaspace.torch import TorchColorSpace, TorchColorSpaceConverter  # noqa: E402


def test_encode_matches_numpy_hwc() -> None:
    rgb = torch.rand(16, 16, 3, dtype=torch.float64)
    space = TorchColorSpace(SRGB, dtype=torch.float64)
    xyz = space.encode(rgb)
    assert xyz.shape == rgb.shape
    np.testing.assert_allclose(xyz.numpy(), SRGB.encode_array(rgb.numpy()), atol=1e-10)


@pytest.mark.parametrize("shape", [(4, 8, 3), (3, 8, 3), (3, 3, 3)])
def test_hwc_with_few_rows_is_not_read_as_chw(shape: tuple) -> None:
    rgb = torch.rand(*shape, dtype=torch.float64)
    space = TorchColorSpace(SRGB, dtype=torch.float64)
    xyz = space.encode(rgb)
    assert xyz.shape == rgb.shape
    np.testing.assert_allclose(xyz.numpy(), SRGB.encode_array(rgb.numpy()), atol=1e-10)
    back = space.decode(xyz, clip=False)
    np.testing.assert_allclose(back.numpy(), rgb.numpy(), atol=1e-9)


def test_chw_input_with_channels_first() -> None:
    rgb = torch.rand(3, 5, 7, dtype=torch.float64)
    space = TorchColorSpace(SRGB, dtype=torch.float64)
    xyz = space.encode(rgb, channels_last=False)
    assert xyz.shape == rgb.shape
    expected = SRGB.encode_array(rgb.permute(1, 2, 0).numpy())
    np.testing.assert_allclose(xyz.permute(1, 2, 0).numpy(), expected, atol=1e-10)
    converted = TorchColorSpaceConverter(SRGB_LINEAR, DISPLAY_P3, dtype=torch.float64).convert(
        rgb, channels_last=False
    )
    assert converted.shape == rgb.shape


def test_roundtrip_nchw_batch() -> None:
    rgb = torch.rand(2, 3, 8, 8, dtype=torch.float64)
    space = TorchColorSpace(DISPLAY_P3, dtype=torch.float64)
    back = space.decode(space.encode(rgb))
    assert back.shape == rgb.shape
    assert torch.allclose(back, rgb, atol=1e-9)


def test_alpha_channel_passes_through() -> None:
    rgba = torch.rand(4, 8, 8)
    rgba[3] = 0.25
    space = TorchColorSpace(SRGB)
    xyza = space.encode(rgba, channels_last=False)
    assert xyza.shape == rgba.shape
    assert torch.all(xyza[3] == 0.25)


def test_decode_clips_unless_asked() -> None:
    xyz = TorchColorSpace(REC2020_LINEAR).encode(torch.tensor([[[0.0, 1.0, 0.0]]]))
    space = TorchColorSpace(SRGB)
    assert space.decode(xyz).min() >= 0.0
    assert space.decode(xyz, clip=False).min() < 0.0


def test_converter_matches_numpy() -> None:
    rgb = torch.rand(1, 3, 4, 4, dtype=torch.float64)
    converter = TorchColorSpaceConverter(SRGB_LINEAR, REC2020_LINEAR, dtype=torch.float64)
    out = converter.convert(rgb)
    expected = ColorSpaceConverter(SRGB_LINEAR, REC2020_LINEAR).convert_array(
        rgb.permute(0, 2, 3, 1).numpy()
    )
    np.testing.assert_allclose(out.permute(0, 2, 3, 1).numpy(), expected, atol=1e-10)


def test_rank_two_tensor_rejected() -> None:
    with pytest.raises(ValueError):
        TorchColorSpace(SRGB).encode(torch.rand(8, 8))
