"""
Factory utilities for the predefined color spaces.
"""

from __future__ import annotations

from functools import lru_cache

from chromaspace.core.config import RGBStandard
from chromaspace.space.color_space import ColorSpace
from chromaspace.space.standards import STANDARD_DEFINITIONS


@lru_cache(maxsize=None)
def create_color_space(standard: RGBStandard) -> ColorSpace:
    """Build (once) the color space for a predefined standard."""

    if standard not in STANDARD_DEFINITIONS:
        raise ValueError(f"Unknown RGB standard: {standard}")

    return ColorSpace.from_definition(STANDARD_DEFINITIONS[standard])


# The popular sRGB color space, https://en.wikipedia.org/wiki/SRGB
SRGB = create_color_space(RGBStandard.SRGB)

# sRGB primaries and white point with a linear transfer function.
SRGB_LINEAR = create_color_space(RGBStandard.SRGB_LINEAR)

REC2020_LINEAR = create_color_space(RGBStandard.REC_2020_LINEAR)
DISPLAY_P3 = create_color_space(RGBStandard.DISPLAY_P3)
DCI_P3_LINEAR = create_color_space(RGBStandard.DCI_P3_LINEAR)
