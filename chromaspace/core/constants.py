"""Shared numeric constants."""

from __future__ import annotations

from typing import Tuple

# Reference white points as XYZ triples (Y normalized to 1). Values from
# http://www.brucelindbloom.com/index.html?Eqn_ChromAdapt.html
D50_XYZ: Tuple[float, float, float] = (0.96422, 1.0, 0.82521)
D65_XYZ: Tuple[float, float, float] = (0.95047, 1.0, 1.08883)

# DCI theatrical white, given as a chromaticity.
DCI_XY: Tuple[float, float] = (0.314, 0.351)

# Row-major XYZ -> cone response matrices.
BRADFORD_MATRIX = (
    (0.8951000, 0.2664000, -0.1614000),
    (-0.7502000, 1.7135000, 0.0367000),
    (0.0389000, -0.0685000, 1.0296000),
)

# Published inverse, rounded to 7 places. The sRGB matrices below were
# derived with this exact table so it must not be replaced by a computed one.
BRADFORD_MATRIX_INVERSE = (
    (0.9869929, -0.1470543, 0.1599627),
    (0.4323053, 0.5183603, 0.0492912),
    (-0.0085287, 0.0400428, 0.9684867),
)

# Hunt-Pointer-Estevez
HPE_MATRIX = (
    (0.38971, 0.68898, -0.07868),
    (-0.22981, 1.18340, 0.04641),
    (0.00000, 0.00000, 1.00000),
)

CAT16_MATRIX = (
    (0.401288, 0.650173, -0.051461),
    (-0.250268, 1.204414, 0.045854),
    (-0.002079, 0.048952, 0.953127),
)

# sRGB transfer curve (IEC 61966-2-1)
SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308
SRGB_LINEAR_SLOPE = 12.92
SRGB_GAMMA = 2.4
SRGB_OFFSET = 0.055
SRGB_SCALE = 1.055

# Magnitudes at or below this are treated as zero when checking primaries,
# white points and matrix determinants.
DETERMINANT_TOLERANCE = 1e-12
