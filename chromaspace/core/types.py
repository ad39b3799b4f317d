"""
Value types shared by every conversion stage.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np

from chromaspace.core.exceptions import DegenerateColorSpaceError
from chromaspace.linalg import Vector3


@dataclass(frozen=True)
class Chromaticity:
    """CIE 1931 xy chromaticity: hue irrespective of brightness."""

    x: float
    y: float

    def to_unscaled_xyz(self) -> Vector3:
        """
        Tristimulus direction of this chromaticity with Y fixed to 1.

        Raises
        ------
        DegenerateColorSpaceError
            If ``y`` is zero or either coordinate is not finite.
        """

        if not (np.isfinite(self.x) and np.isfinite(self.y)):
            raise DegenerateColorSpaceError(f"Chromaticity {self} is not finite")
        if self.y == 0.0:
            raise DegenerateColorSpaceError(f"Chromaticity {self} has y == 0")
        return Vector3(self.x / self.y, 1.0, (1.0 - self.x - self.y) / self.y)


@dataclass(frozen=True)
class XYZ:
    """CIE XYZ tristimulus values."""

    X: float
    Y: float
    Z: float

    @classmethod
    def from_vector(cls, vector: Iterable[float]) -> "XYZ":
        X, Y, Z = (float(v) for v in vector)
        return cls(X, Y, Z)

    @classmethod
    def from_chromaticity(cls, chromaticity: Chromaticity, Y: float = 1.0) -> "XYZ":
        return cls.from_vector(chromaticity.to_unscaled_xyz() * Y)

    def to_vector(self) -> Vector3:
        return Vector3(self.X, self.Y, self.Z)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.X, self.Y, self.Z)

    def is_finite(self) -> bool:
        return self.to_vector().is_finite()


@dataclass(frozen=True)
class Color:
    """
    A color stored as D50-relative XYZ plus straight alpha.

    Colors are produced by :meth:`ColorSpace.encode` and read back with
    :meth:`ColorSpace.decode_clipped` or :meth:`ColorSpace.decode_unclipped`.
    Alpha is carried through untouched.
    """

    X: float
    Y: float
    Z: float
    alpha: float = 1.0

    @property
    def xyz(self) -> XYZ:
        return XYZ(self.X, self.Y, self.Z)
