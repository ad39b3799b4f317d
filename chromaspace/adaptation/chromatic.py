"""
Chromatic adaptation between reference white points.

A stimulus that looks white under one illuminant is produced by different
XYZ values under another one because the eye adapts to the lighting. The
transforms here model that adaptation as a von Kries style scaling in a
cone-response space:

    result = M^-1 @ diag(crd / crs) @ M

where ``M`` maps XYZ to cone responses and ``crs``/``crd`` are the cone
responses of the source and destination white points.

V4 ICC profiles store primaries relative to D50 even when the device white
is different; the ``chad`` tag records the matrix used for that step. This
module computes the same kind of matrix.
Reference: http://www.brucelindbloom.com/index.html?Eqn_ChromAdapt.html
"""

from __future__ import annotations

import logging
from typing import Dict, Tuple

import numpy as np

from chromaspace.core.config import AdaptationMethod
from chromaspace.core.constants import (
    BRADFORD_MATRIX,
    BRADFORD_MATRIX_INVERSE,
    CAT16_MATRIX,
    DETERMINANT_TOLERANCE,
    HPE_MATRIX,
)
from chromaspace.core.exceptions import DegenerateWhitePointError
from chromaspace.core.types import XYZ
from chromaspace.linalg import Matrix3x3

logger = logging.getLogger(__name__)


def _cone_matrices() -> Dict[AdaptationMethod, Tuple[Matrix3x3, Matrix3x3]]:
    bradford = Matrix3x3(BRADFORD_MATRIX)
    hpe = Matrix3x3(HPE_MATRIX)
    cat16 = Matrix3x3(CAT16_MATRIX)
    return {
        # Bradford keeps its published inverse table.
        AdaptationMethod.BRADFORD: (bradford, Matrix3x3(BRADFORD_MATRIX_INVERSE)),
        AdaptationMethod.VON_KRIES: (hpe, hpe.inverse()),
        AdaptationMethod.CAT16: (cat16, cat16.inverse()),
        AdaptationMethod.XYZ_SCALING: (Matrix3x3.identity(), Matrix3x3.identity()),
    }


CONE_RESPONSE_MATRICES = _cone_matrices()


def cone_response_matrices(method: AdaptationMethod) -> Tuple[Matrix3x3, Matrix3x3]:
    """Return ``(XYZ -> cone, cone -> XYZ)`` for ``method``."""

    try:
        return CONE_RESPONSE_MATRICES[method]
    except KeyError:
        raise ValueError(f"Unknown adaptation method: {method}") from None


class ChromaticAdaptation:
    """
    Map XYZ values relative to one white point onto another white point.

    Parameters
    ----------
    source_white_point : XYZ
        White the input values are relative to.
    destination_white_point : XYZ
        White the output values should be relative to.
    method : AdaptationMethod
        Cone response model. Bradford by default.

    Raises
    ------
    DegenerateWhitePointError
        If either white point is not finite or the source white point has a
        zero cone response (the ratio in the diagonal would be undefined).
    """

    __slots__ = ("_matrix", "_method")

    def __init__(
        self,
        source_white_point: XYZ,
        destination_white_point: XYZ,
        method: AdaptationMethod = AdaptationMethod.BRADFORD,
    ) -> None:
        forward, inverse = cone_response_matrices(method)

        for label, white in (("source", source_white_point), ("destination", destination_white_point)):
            if not white.is_finite():
                raise DegenerateWhitePointError(f"The {label} white point {white} is not finite")

        # crs: cone response of the source white, crd: of the destination white.
        crs = forward @ source_white_point.to_vector()
        crd = forward @ destination_white_point.to_vector()

        if min(abs(c) for c in crs) <= DETERMINANT_TOLERANCE:
            raise DegenerateWhitePointError(
                f"Source white point {source_white_point} has a zero cone response {tuple(crs)}"
            )

        scale = Matrix3x3.diagonal(crd.x / crs.x, crd.y / crs.y, crd.z / crs.z)
        self._matrix = inverse @ scale @ forward
        self._method = method

        logger.debug(
            "%s adaptation %s -> %s", method.value, source_white_point, destination_white_point
        )

    @classmethod
    def from_matrix(
        cls, matrix: Matrix3x3, method: AdaptationMethod = AdaptationMethod.BRADFORD
    ) -> "ChromaticAdaptation":
        """Wrap an already computed adaptation matrix (e.g. an ICC ``chad`` tag)."""

        adaptation = cls.__new__(cls)
        adaptation._matrix = matrix
        adaptation._method = method
        return adaptation

    @property
    def matrix(self) -> Matrix3x3:
        return self._matrix

    @property
    def method(self) -> AdaptationMethod:
        return self._method

    def inverse(self) -> "ChromaticAdaptation":
        """Adaptation in the opposite direction (exact matrix inverse)."""

        return ChromaticAdaptation.from_matrix(self._matrix.inverse(), self._method)

    def convert(self, xyz: XYZ) -> XYZ:
        return XYZ.from_vector(self._matrix @ xyz.to_vector())

    def convert_array(self, xyz: np.ndarray) -> np.ndarray:
        """Adapt an array of XYZ values shaped ``(..., 3)``."""

        return self._matrix @ np.asarray(xyz, dtype=np.float64)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChromaticAdaptation):
            return NotImplemented
        return self._matrix == other._matrix

    def __hash__(self) -> int:
        return hash(self._matrix)

    def __repr__(self) -> str:
        return f"ChromaticAdaptation({self._method.value}, {self._matrix!r})"
