"""RGB color spaces and conversions between them."""

from chromaspace.space.color_space import ColorSpace
from chromaspace.space.converter import ColorSpaceConverter
from chromaspace.space.factory import (
    DCI_P3_LINEAR,
    DISPLAY_P3,
    REC2020_LINEAR,
    SRGB,
    SRGB_LINEAR,
    create_color_space,
)
from chromaspace.space.illuminants import D50_WHITE_POINT, D65_WHITE_POINT, DCI_WHITE_POINT
from chromaspace.space.standards import STANDARD_DEFINITIONS

__all__ = [
    "ColorSpace",
    "ColorSpaceConverter",
    "D50_WHITE_POINT",
    "D65_WHITE_POINT",
    "DCI_WHITE_POINT",
    "DCI_P3_LINEAR",
    "DISPLAY_P3",
    "REC2020_LINEAR",
    "SRGB",
    "SRGB_LINEAR",
    "STANDARD_DEFINITIONS",
    "create_color_space",
]
