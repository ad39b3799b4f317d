"""
Primaries and white points of the predefined RGB standards.
"""

from __future__ import annotations

from typing import Dict

from chromaspace.core.config import ColorSpaceDefinition, RGBStandard, TransferFunction
from chromaspace.core.types import Chromaticity
from chromaspace.space.illuminants import D65_WHITE_POINT, DCI_WHITE_POINT

# ITU-R BT.709 / sRGB
SRGB_PRIMARIES = (
    Chromaticity(0.64, 0.33),
    Chromaticity(0.30, 0.60),
    Chromaticity(0.15, 0.06),
)

# ITU-R BT.2020
REC_2020_PRIMARIES = (
    Chromaticity(0.708, 0.292),
    Chromaticity(0.170, 0.797),
    Chromaticity(0.131, 0.046),
)

# SMPTE RP 431-2
P3_PRIMARIES = (
    Chromaticity(0.680, 0.320),
    Chromaticity(0.265, 0.690),
    Chromaticity(0.150, 0.060),
)

STANDARD_DEFINITIONS: Dict[RGBStandard, ColorSpaceDefinition] = {
    RGBStandard.SRGB: ColorSpaceDefinition(
        *SRGB_PRIMARIES, D65_WHITE_POINT, TransferFunction.SRGB, name="sRGB"
    ),
    RGBStandard.SRGB_LINEAR: ColorSpaceDefinition(
        *SRGB_PRIMARIES, D65_WHITE_POINT, TransferFunction.NONE, name="Linear sRGB"
    ),
    RGBStandard.REC_2020_LINEAR: ColorSpaceDefinition(
        *REC_2020_PRIMARIES, D65_WHITE_POINT, TransferFunction.NONE, name="Linear Rec. 2020"
    ),
    RGBStandard.DISPLAY_P3: ColorSpaceDefinition(
        *P3_PRIMARIES, D65_WHITE_POINT, TransferFunction.SRGB, name="Display P3"
    ),
    RGBStandard.DCI_P3_LINEAR: ColorSpaceDefinition(
        *P3_PRIMARIES, DCI_WHITE_POINT, TransferFunction.NONE, name="Linear DCI-P3"
    ),
}
