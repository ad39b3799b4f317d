"""
Tests for the precomposed color space converter.
"""

from __future__ import annotations

import numpy as np
import pytest

from chromaspace import (
    DCI_P3_LINEAR,
    DISPLAY_P3,
    REC2020_LINEAR,
    SRGB,
    SRGB_LINEAR,
    ColorSpaceConverter,
)
from chromaspace.linalg import Vector3


@pytest.mark.parametrize(
    "source, destination",
    [
        (SRGB, DISPLAY_P3),
        (SRGB_LINEAR, REC2020_LINEAR),
        (DCI_P3_LINEAR, SRGB),
        (REC2020_LINEAR, REC2020_LINEAR),
    ],
)
def test_matches_direct_matrix_product(source, destination) -> None:
    converter = ColorSpaceConverter(source, destination)
    v = Vector3(0.25, -0.5, 1.75)
    expected = destination.from_xyz @ (source.to_xyz @ v)
    np.testing.assert_allclose(converter.convert(tuple(v)), tuple(expected), atol=1e-12)


def test_transfer_functions_are_ignored() -> None:
    # Same matrices, different transfer functions: the converter must not care.
    nonlinear = ColorSpaceConverter(SRGB, SRGB)
    linear = ColorSpaceConverter(SRGB_LINEAR, SRGB_LINEAR)
    rgb = (0.5, 0.25, 0.75)
    np.testing.assert_allclose(nonlinear.convert(rgb), linear.convert(rgb), atol=0.0)
    np.testing.assert_allclose(nonlinear.convert(rgb), rgb, atol=1e-12)


def test_linear_values_agree_with_encode_decode() -> None:
    converter = ColorSpaceConverter(SRGB_LINEAR, REC2020_LINEAR)
    rgb = (0.2, 0.4, 0.6)
    color = SRGB_LINEAR.encode(*rgb)
    expected = REC2020_LINEAR.decode_unclipped(color)[:3]
    np.testing.assert_allclose(converter.convert(rgb), expected, atol=1e-12)


def test_convert_array_matches_convert() -> None:
    converter = ColorSpaceConverter(SRGB_LINEAR, DCI_P3_LINEAR)
    rgb = np.random.default_rng(11).random((3, 4, 3))
    out = converter.convert_array(rgb)
    assert out.shape == rgb.shape
    np.testing.assert_allclose(out[2, 1], converter.convert(tuple(rgb[2, 1])), atol=1e-12)


def test_convert_returns_plain_floats() -> None:
    result = ColorSpaceConverter(SRGB, DISPLAY_P3).convert((1.0, 0.0, 0.0))
    assert isinstance(result, tuple)
    assert len(result) == 3
    assert all(isinstance(c, float) for c in result)
