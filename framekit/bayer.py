"""Demosaicing of 8-bit Bayer pattern images.

The conversions use simple bilinear neighbour averaging.  The last row and the
last column of the output have no neighbours below or to the right, so they
are left black.
"""

from __future__ import annotations

from enum import Enum


class BayerPattern(Enum):
    """Order of the colour filters in the top-left 2x2 block of the sensor."""

    RGGB = "RGGB"
    GRBG = "GRBG"
    BGGR = "BGGR"
    GBRG = "GBRG"


def _pattern(pattern: BayerPattern | str) -> BayerPattern:
    if isinstance(pattern, BayerPattern):
        return pattern
    try:
        return BayerPattern(str(pattern).upper())
    except ValueError:
        raise ValueError(f"Unknown Bayer pattern: {pattern!r}") from None


def _source(src, width: int, height: int) -> bytes:
    if width < 2 or height < 1:
        raise ValueError("Bayer image must be at least two pixels wide and one pixel high")
    data = bytes(src)
    if len(data) < width * height:
        raise ValueError(
            f"source holds {len(data)} bytes, {width * height} are needed for {width}x{height}"
        )
    return data


def _layout(pattern: BayerPattern) -> tuple[int, bool]:
    blue = 1 if pattern in (BayerPattern.RGGB, BayerPattern.GRBG) else -1
    start_with_green = pattern in (BayerPattern.GBRG, BayerPattern.GRBG)
    return blue, start_with_green


def convert_bayer_to_rgb24(src, width: int, height: int, pattern: BayerPattern | str) -> bytes:
    """Convert a Bayer image to packed 8-bit RGB, three bytes per pixel."""
    pattern = _pattern(pattern)
    data = _source(src, width, height)
    dst = bytearray(width * height * 3)
    blue, start_with_green = _layout(pattern)

    for row in range(height - 1):
        s = row * width
        # Index of the green byte of the current pixel; red/blue sit at +-1.
        d = row * width * 3 + 1
        end = s + width - 1

        if start_with_green:
            dst[d - blue] = data[s + 1]
            dst[d] = (data[s] + data[s + width + 1] + 1) >> 1
            dst[d + blue] = data[s + width]
            s += 1
            d += 3

        while s <= end - 2:
            dst[d - blue] = data[s]
            dst[d] = (data[s + 1] + data[s + width] + 1) >> 1
            dst[d + blue] = data[s + width + 1]

            dst[d + 3 - blue] = data[s + 2]
            dst[d + 3] = (data[s + 1] + data[s + width + 2] + 1) >> 1
            dst[d + 3 + blue] = data[s + width + 1]
            s += 2
            d += 6

        if s < end:
            dst[d - blue] = data[s]
            dst[d] = (data[s + 1] + data[s + width] + 1) >> 1
            dst[d + blue] = data[s + width + 1]

        blue = -blue
        start_with_green = not start_with_green

    return bytes(dst)


def convert_bayer_to_green_channel(
    src, width: int, height: int, pattern: BayerPattern | str
) -> bytes:
    """Extract an interpolated green channel, one byte per pixel."""
    pattern = _pattern(pattern)
    data = _source(src, width, height)
    dst = bytearray(width * height)
    _, start_with_green = _layout(pattern)

    for row in range(height - 1):
        s = row * width
        d = row * width
        end = s + width - 1

        if start_with_green:
            dst[d] = (data[s] + data[s + width + 1] + 1) >> 1
            s += 1
            d += 1

        while s <= end - 2:
            dst[d] = (data[s + 1] + data[s + width] + 1) >> 1
            dst[d + 1] = (data[s + 1] + data[s + width + 2] + 1) >> 1
            s += 2
            d += 2

        if s < end:
            dst[d] = (data[s + 1] + data[s + width] + 1) >> 1

        start_with_green = not start_with_green

    return bytes(dst)