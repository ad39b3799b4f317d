"""
Tests for configuration primitives and the predefined color spaces.
"""

from __future__ import annotations

import numpy as np
import pytest

from chromaspace import (
    D65_WHITE_POINT,
    DCI_WHITE_POINT,
    SRGB,
    SRGB_LINEAR,
    XYZ,
    Chromaticity,
    ColorSpace,
    ColorSpaceDefinition,
    DegenerateColorSpaceError,
    RGBStandard,
    TransferFunction,
    create_color_space,
)
from chromaspace.space import STANDARD_DEFINITIONS


def test_every_standard_has_a_definition() -> None:
    for standard in RGBStandard:
        assert standard in STANDARD_DEFINITIONS
        STANDARD_DEFINITIONS[standard].validate()


def test_factory_is_cached() -> None:
    assert create_color_space(RGBStandard.SRGB) is SRGB
    assert create_color_space(RGBStandard.SRGB_LINEAR) is SRGB_LINEAR


def test_factory_rejects_unknown_standard() -> None:
    with pytest.raises(ValueError):
        create_color_space("adobe_rgb")


def test_from_definition_matches_from_primaries() -> None:
    definition = STANDARD_DEFINITIONS[RGBStandard.SRGB]
    space = ColorSpace.from_primaries(
        definition.red, definition.green, definition.blue, D65_WHITE_POINT
    )
    assert space == ColorSpace.from_definition(definition)


def test_dci_white_point_from_chromaticity() -> None:
    assert DCI_WHITE_POINT.Y == 1.0
    assert np.isclose(DCI_WHITE_POINT.X, 0.314 / 0.351)
    assert np.isclose(DCI_WHITE_POINT.Z, (1.0 - 0.314 - 0.351) / 0.351)


def test_valid_definition() -> None:
    definition = ColorSpaceDefinition(
        Chromaticity(0.64, 0.33),
        Chromaticity(0.21, 0.71),
        Chromaticity(0.15, 0.06),
        D65_WHITE_POINT,
        TransferFunction.NONE,
        name="Linear Adobe RGB",
    )
    definition.validate()


def test_invalid_transfer_function() -> None:
    definition = ColorSpaceDefinition(
        Chromaticity(0.64, 0.33),
        Chromaticity(0.3, 0.6),
        Chromaticity(0.15, 0.06),
        D65_WHITE_POINT,
        transfer_function="gamma",  # type: ignore[arg-type]
    )
    with pytest.raises(ValueError):
        definition.validate()


def test_invalid_white_point() -> None:
    definition = ColorSpaceDefinition(
        Chromaticity(0.64, 0.33),
        Chromaticity(0.3, 0.6),
        Chromaticity(0.15, 0.06),
        XYZ(0.0, 1.0, 1.0),
    )
    with pytest.raises(DegenerateColorSpaceError):
        definition.validate()


def test_chromaticity_with_zero_y() -> None:
    with pytest.raises(DegenerateColorSpaceError):
        Chromaticity(0.3, 0.0).to_unscaled_xyz()


def test_xyz_from_chromaticity() -> None:
    xyz = XYZ.from_chromaticity(Chromaticity(0.3127, 0.3290), Y=2.0)
    assert xyz.Y == 2.0
    assert np.isclose(xyz.X, 2.0 * 0.3127 / 0.3290)
