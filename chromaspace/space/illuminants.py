"""Reference white points."""

from __future__ import annotations

from chromaspace.core.constants import D50_XYZ, D65_XYZ, DCI_XY
from chromaspace.core.types import XYZ, Chromaticity

# "Horizon light". Every ColorSpace stores its matrices relative to D50,
# the profile connection space white of ICC profiles.
D50_WHITE_POINT = XYZ(*D50_XYZ)

# Average midday light in Western / Northern Europe.
D65_WHITE_POINT = XYZ(*D65_XYZ)

DCI_WHITE_POINT = XYZ.from_chromaticity(Chromaticity(*DCI_XY))
