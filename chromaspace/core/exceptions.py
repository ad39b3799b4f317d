"""Exceptions raised while deriving color spaces and adaptations."""


class ColorimetryError(ValueError):
    """Base exception for invalid colorimetric input data."""

    pass


class DegenerateColorSpaceError(ColorimetryError):
    """Primaries or white point do not describe an invertible color space."""

    pass


class DegenerateWhitePointError(ColorimetryError):
    """A white point produces a zero or non-finite cone response."""

    pass
