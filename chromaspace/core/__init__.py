"""Enums, value types, constants and exceptions shared across chromaspace."""

from chromaspace.core.config import (
    AdaptationMethod,
    ColorSpaceDefinition,
    RGBStandard,
    TransferFunction,
    validate_white_point,
)
from chromaspace.core.exceptions import (
    ColorimetryError,
    DegenerateColorSpaceError,
    DegenerateWhitePointError,
)
from chromaspace.core.types import XYZ, Chromaticity, Color

__all__ = [
    "AdaptationMethod",
    "Chromaticity",
    "Color",
    "ColorSpaceDefinition",
    "ColorimetryError",
    "DegenerateColorSpaceError",
    "DegenerateWhitePointError",
    "RGBStandard",
    "TransferFunction",
    "XYZ",
    "validate_white_point",
]
