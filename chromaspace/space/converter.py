"""
Precomposed conversion between two color spaces.
"""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from chromaspace.linalg import Matrix3x3, Vector3
from chromaspace.space.color_space import ColorSpace

logger = logging.getLogger(__name__)


class ColorSpaceConverter:
    """
    Direct linear RGB -> linear RGB conversion for repeated use.

    The matrix ``destination.from_xyz @ source.to_xyz`` is computed once.

    .. warning::
        Transfer functions are **not** applied. Both input and output are
        linear-light values, whatever the transfer functions of ``source``
        and ``destination`` are. Passing sRGB-encoded values gives
        meaningless results; decode them first (or go through
        :meth:`ColorSpace.encode` / :meth:`ColorSpace.decode_clipped`).
    """

    __slots__ = ("_matrix",)

    def __init__(self, source: ColorSpace, destination: ColorSpace) -> None:
        self._matrix = destination.from_xyz @ source.to_xyz
        logger.debug("Precomposed converter matrix %r", self._matrix)

    @property
    def matrix(self) -> Matrix3x3:
        return self._matrix

    def convert(self, rgb: Tuple[float, float, float]) -> Tuple[float, float, float]:
        """Convert one linear RGB triple."""

        return tuple(self._matrix @ Vector3.from_iterable(rgb))

    def convert_array(self, rgb: np.ndarray) -> np.ndarray:
        """Convert linear RGB values shaped ``(..., 3)``."""

        return self._matrix @ np.asarray(rgb, dtype=np.float64)
