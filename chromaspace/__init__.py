"""chromaspace: RGB <-> CIE XYZ conversion.

Derives RGB/XYZ matrices from primaries and a white point, applies transfer
functions and adapts XYZ values between white points (Bradford by default).
All matrices are stored relative to D50, as in ICC profiles.
"""

from chromaspace.adaptation import ChromaticAdaptation
from chromaspace.core import (
    XYZ,
    AdaptationMethod,
    Chromaticity,
    Color,
    ColorimetryError,
    ColorSpaceDefinition,
    DegenerateColorSpaceError,
    DegenerateWhitePointError,
    RGBStandard,
    TransferFunction,
)
from chromaspace.space import (
    D50_WHITE_POINT,
    D65_WHITE_POINT,
    DCI_P3_LINEAR,
    DCI_WHITE_POINT,
    DISPLAY_P3,
    REC2020_LINEAR,
    SRGB,
    SRGB_LINEAR,
    ColorSpace,
    ColorSpaceConverter,
    create_color_space,
)
from chromaspace.transfer import linear_to_srgb, srgb_to_linear

__all__ = [
    "AdaptationMethod",
    "ChromaticAdaptation",
    "Chromaticity",
    "Color",
    "ColorSpace",
    "ColorSpaceConverter",
    "ColorSpaceDefinition",
    "ColorimetryError",
    "D50_WHITE_POINT",
    "D65_WHITE_POINT",
    "DCI_P3_LINEAR",
    "DCI_WHITE_POINT",
    "DISPLAY_P3",
    "DegenerateColorSpaceError",
    "DegenerateWhitePointError",
    "REC2020_LINEAR",
    "RGBStandard",
    "SRGB",
    "SRGB_LINEAR",
    "TransferFunction",
    "XYZ",
    "create_color_space",
    "linear_to_srgb",
    "srgb_to_linear",
]

try:  # Optional PyTorch acceleration
    from chromaspace.torch import TorchColorSpace, TorchColorSpaceConverter  # type: ignore

    __all__.extend(["TorchColorSpace", "TorchColorSpaceConverter"])
except ImportError:  # pragma: no cover - torch not installed
    TorchColorSpace = None  # type: ignore
    TorchColorSpaceConverter = None  # type: ignore

__version__ = "1.0.0"
