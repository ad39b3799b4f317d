"""
Basic usage examples for chromaspace.
"""

from __future__ import annotations

from chromaspace import REC2020_LINEAR, SRGB, SRGB_LINEAR, Color, ColorSpaceConverter


def example_hex_color() -> Color:
    """Create an sRGB color from hex and read it back."""

    color = SRGB.new_color_from_hex(0x3366CC, 1.0)
    r, g, b, a = SRGB.decode_clipped(color)
    print(f"0x3366CC -> XYZ(D50)=({color.X:0.4f}, {color.Y:0.4f}, {color.Z:0.4f}) -> rgb=({r:0.3f}, {g:0.3f}, {b:0.3f}, {a})")
    return color


def example_out_of_gamut() -> None:
    """A Rec. 2020 green is outside the sRGB gamut."""

    green = REC2020_LINEAR.encode(0.0, 1.0, 0.0, 1.0)
    print(f"Unclipped sRGB: {SRGB.decode_unclipped(green)}")
    print(f"Clipped sRGB:   {SRGB.decode_clipped(green)}")


def example_converter() -> None:
    """Repeated linear-light conversions with a precomposed matrix."""

    converter = ColorSpaceConverter(SRGB_LINEAR, REC2020_LINEAR)
    for rgb in ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)):
        print(f"linear sRGB {rgb} -> linear Rec. 2020 {converter.convert(rgb)}")


if __name__ == "__main__":
    print("Running chromaspace basic examples...")
    example_hex_color()
    example_out_of_gamut()
    example_converter()
