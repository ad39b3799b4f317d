"""
RGB color spaces expressed in relation to CIE XYZ.

A color space is derived from three primaries (xy chromaticities), a white
point (XYZ) and a transfer function. The derivation follows
http://www.brucelindbloom.com/index.html?Eqn_RGB_XYZ_Matrix.html and then
adapts the result to D50 so that any two color spaces can be chained with a
single matrix product, the same convention ICC profiles use.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

import numpy as np

from chromaspace.adaptation.chromatic import ChromaticAdaptation
from chromaspace.core.config import (
    AdaptationMethod,
    ColorSpaceDefinition,
    TransferFunction,
)
from chromaspace.core.constants import DETERMINANT_TOLERANCE
from chromaspace.core.exceptions import DegenerateColorSpaceError
from chromaspace.core.types import XYZ, Chromaticity, Color
from chromaspace.linalg import Matrix3x3, Vector3
from chromaspace.space.illuminants import D50_WHITE_POINT, D65_WHITE_POINT
from chromaspace.transfer import delinearize, linearize

logger = logging.getLogger(__name__)

RGBA = Tuple[float, float, float, float]


def _split_channels(values: np.ndarray) -> Tuple[np.ndarray, Optional[np.ndarray]]:
    """Split ``(..., 3)`` or ``(..., 4)`` into color and alpha parts."""

    if values.shape[-1:] == (3,):
        return values, None
    if values.shape[-1:] == (4,):
        return values[..., :3], values[..., 3:]
    raise ValueError(f"Expected last dimension 3 or 4, got shape {values.shape}")


def _join_channels(color: np.ndarray, alpha: Optional[np.ndarray]) -> np.ndarray:
    if alpha is None:
        return color
    return np.concatenate([color, alpha], axis=-1)


@dataclass(frozen=True)
class ColorSpace:
    """
    An RGB color space as a pair of D50-relative matrices.

    Attributes
    ----------
    to_xyz : Matrix3x3
        Linear RGB -> XYZ (D50).
    from_xyz : Matrix3x3
        XYZ (D50) -> linear RGB; the inverse of ``to_xyz``.
    transfer_function : TransferFunction
        Curve between stored RGB values and linear light.
    """

    to_xyz: Matrix3x3
    from_xyz: Matrix3x3
    transfer_function: TransferFunction

    D50_WHITE_POINT: ClassVar[XYZ] = D50_WHITE_POINT
    D65_WHITE_POINT: ClassVar[XYZ] = D65_WHITE_POINT

    @classmethod
    def from_primaries(
        cls,
        red_primary: Chromaticity,
        green_primary: Chromaticity,
        blue_primary: Chromaticity,
        white_point: XYZ,
        transfer_function: TransferFunction = TransferFunction.SRGB,
        adaptation_method: AdaptationMethod = AdaptationMethod.BRADFORD,
    ) -> "ColorSpace":
        """
        Derive a color space from xy primaries and an XYZ white point.

        The white point is the brightest representable color: RGB (1, 1, 1)
        maps to it before adaptation to D50.

        Raises
        ------
        DegenerateColorSpaceError
            If a primary has ``y == 0``, the primaries are collinear or the
            white point is not finite and positive.
        DegenerateWhitePointError
            If the white point cannot be adapted to D50.
        """

        definition = ColorSpaceDefinition(
            red=red_primary,
            green=green_primary,
            blue=blue_primary,
            white_point=white_point,
            transfer_function=transfer_function,
            adaptation_method=adaptation_method,
        )
        return cls.from_definition(definition)

    @classmethod
    def from_definition(cls, definition: ColorSpaceDefinition) -> "ColorSpace":
        definition.validate()
        white_point = definition.white_point

        if not np.isclose(white_point.Y, 1.0):
            logger.warning(
                "White point %s has Y=%g; RGB (1, 1, 1) will not have unit luminance",
                white_point,
                white_point.Y,
            )

        # Unscaled primaries as columns, then solve for the per-primary scale
        # that makes R = G = B = 1 land on the white point.
        primaries = definition.primary_matrix()
        s = primaries.inverse() @ white_point.to_vector()
        scaled = Matrix3x3.from_columns(
            primaries.column(0) * s.x,
            primaries.column(1) * s.y,
            primaries.column(2) * s.z,
        )

        if white_point != D50_WHITE_POINT:
            logger.debug(
                "Adapting '%s' primaries from %s to D50 (%s)",
                definition.name,
                white_point,
                definition.adaptation_method.value,
            )
            adaptation = ChromaticAdaptation(
                white_point, D50_WHITE_POINT, definition.adaptation_method
            )
            to_xyz = adaptation.matrix @ scaled
        else:
            to_xyz = scaled

        from_xyz = to_xyz.inverse()

        det = to_xyz.determinant()
        if not (to_xyz.is_finite() and from_xyz.is_finite()) or abs(det) <= DETERMINANT_TOLERANCE:
            raise DegenerateColorSpaceError(
                f"Color space '{definition.name}' has a singular RGB -> XYZ matrix"
            )

        logger.debug("Derived color space '%s': to_xyz=%r", definition.name, to_xyz)
        return cls(to_xyz, from_xyz, definition.transfer_function)

    @property
    def white_point(self) -> XYZ:
        """XYZ (D50) of RGB (1, 1, 1)."""

        return XYZ.from_vector(self.to_xyz @ Vector3(1.0, 1.0, 1.0))

    def encode(self, r: float, g: float, b: float, alpha: float = 1.0) -> Color:
        """Create a color from RGB values stored in this color space."""

        tf = self.transfer_function
        rgb = Vector3(linearize(r, tf), linearize(g, tf), linearize(b, tf))
        xyz = self.to_xyz @ rgb
        return Color(xyz.x, xyz.y, xyz.z, alpha)

    def new_color_from_hex(self, hex_value: int, alpha: float = 1.0) -> Color:
        """Create a color from a packed ``0xRRGGBB`` integer."""

        if isinstance(hex_value, bool) or not isinstance(hex_value, (int, np.integer)):
            raise ValueError(f"Hex color must be an integer, got {hex_value!r}")
        hex_value = int(hex_value)
        if not 0 <= hex_value <= 0xFFFFFF:
            raise ValueError(f"Hex color {hex_value:#x} is outside 0x000000-0xFFFFFF")
        r = ((hex_value >> 16) & 0xFF) / 255.0
        g = ((hex_value >> 8) & 0xFF) / 255.0
        b = (hex_value & 0xFF) / 255.0
        return self.encode(r, g, b, alpha)

    def new_color_from_bytes(self, r: int, g: int, b: int, alpha: int = 255) -> Color:
        """Create a color from 8-bit channels; alpha is transparency."""

        for name, value in (("r", r), ("g", g), ("b", b), ("alpha", alpha)):
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name}={value} out of range [0, 255]")
        return self.encode(r / 255.0, g / 255.0, b / 255.0, alpha / 255.0)

    def decode_unclipped(self, color: Color) -> RGBA:
        """
        RGBA of ``color`` in this space, without clipping.

        Components may fall outside [0, 1]; negative values are encoded with
        the mirrored transfer function.
        """

        rgb = self.from_xyz @ Vector3(color.X, color.Y, color.Z)
        tf = self.transfer_function
        return (
            delinearize(rgb.x, tf),
            delinearize(rgb.y, tf),
            delinearize(rgb.z, tf),
            color.alpha,
        )

    def decode_clipped(self, color: Color) -> RGBA:
        """RGBA of ``color`` with r, g and b clipped to [0, 1]. Alpha is kept as is."""

        r, g, b, alpha = self.decode_unclipped(color)
        r, g, b = (float(v) for v in np.clip([r, g, b], 0.0, 1.0))
        return (r, g, b, alpha)

    def encode_array(self, rgb: np.ndarray) -> np.ndarray:
        """
        Stored RGB -> XYZ (D50) for an array shaped ``(..., 3)`` or ``(..., 4)``.

        A fourth channel is treated as alpha and copied through.
        """

        color, alpha = _split_channels(np.asarray(rgb, dtype=np.float64))
        xyz = self.to_xyz @ linearize(color, self.transfer_function)
        return _join_channels(xyz, alpha)

    def decode_array(self, xyz: np.ndarray, clip: bool = True) -> np.ndarray:
        """XYZ (D50) -> stored RGB; the array counterpart of ``decode_clipped``."""

        color, alpha = _split_channels(np.asarray(xyz, dtype=np.float64))
        rgb = delinearize(self.from_xyz @ color, self.transfer_function)
        if clip:
            rgb = np.clip(rgb, 0.0, 1.0)
        return _join_channels(rgb, alpha)
