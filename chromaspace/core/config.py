"""
Configuration primitives for chromaspace.

Defines enums for transfer functions, chromatic adaptation methods and the
predefined RGB standards, and a dataclass describing an RGB color space
before its matrices are derived.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from chromaspace.core.constants import DETERMINANT_TOLERANCE
from chromaspace.core.exceptions import DegenerateColorSpaceError
from chromaspace.core.types import XYZ, Chromaticity
from chromaspace.linalg import Matrix3x3


class TransferFunction(Enum):
    """How stored RGB values relate to linear light."""

    SRGB = "srgb"  # IEC 61966-2-1 piecewise curve
    NONE = "none"  # values are already linear


class AdaptationMethod(Enum):
    """Cone response model used for chromatic adaptation."""

    BRADFORD = "bradford"        # Lam 1985, ICC default
    VON_KRIES = "von_kries"      # Hunt-Pointer-Estevez cone space
    CAT16 = "cat16"              # CIECAM16 adaptation space
    XYZ_SCALING = "xyz_scaling"  # scale XYZ directly


class RGBStandard(Enum):
    """Predefined RGB color spaces."""

    SRGB = "srgb"                        # IEC 61966-2-1, D65
    SRGB_LINEAR = "srgb_linear"          # sRGB primaries, linear
    REC_2020_LINEAR = "rec_2020_linear"  # ITU-R BT.2020 primaries, linear
    DISPLAY_P3 = "display_p3"            # P3 primaries, D65, sRGB curve
    DCI_P3_LINEAR = "dci_p3_linear"      # P3 primaries, DCI white, linear


def validate_white_point(white_point: XYZ) -> None:
    """Reject white points that cannot anchor a color space."""

    if not white_point.is_finite():
        raise DegenerateColorSpaceError(f"White point {white_point} is not finite")
    if min(white_point.as_tuple()) <= 0.0:
        raise DegenerateColorSpaceError(
            f"White point {white_point} must have positive components"
        )


@dataclass(frozen=True)
class ColorSpaceDefinition:
    """
    Primaries, white point and transfer function of an RGB color space.

    The white point is the XYZ value of RGB (1, 1, 1); it does not have to be
    D50; matrices are adapted to D50 when the space is built.
    """

    red: Chromaticity
    green: Chromaticity
    blue: Chromaticity
    white_point: XYZ
    transfer_function: TransferFunction = TransferFunction.SRGB
    adaptation_method: AdaptationMethod = AdaptationMethod.BRADFORD
    name: str = "custom"

    def primary_matrix(self) -> Matrix3x3:
        """Unscaled primaries as columns (each column has Y == 1)."""

        return Matrix3x3.from_columns(
            self.red.to_unscaled_xyz(),
            self.green.to_unscaled_xyz(),
            self.blue.to_unscaled_xyz(),
        )

    def validate(self) -> None:
        """Validate primaries and white point."""

        if not isinstance(self.transfer_function, TransferFunction):
            raise ValueError(f"Unknown transfer function: {self.transfer_function}")

        if not isinstance(self.adaptation_method, AdaptationMethod):
            raise ValueError(f"Unknown adaptation method: {self.adaptation_method}")

        validate_white_point(self.white_point)

        det = self.primary_matrix().determinant()
        if not np.isfinite(det) or abs(det) <= DETERMINANT_TOLERANCE:
            raise DegenerateColorSpaceError(
                f"Primaries of '{self.name}' are collinear (determinant {det:g})"
            )
