"""JPEG compression and decompression of packed 8-bit images.

Grayscale, RGB and BGR images can be compressed to JPEG and JPEG data can
be decompressed to any of those modes.  Data that is already JPEG is passed
through unchanged.
"""

from __future__ import annotations

import io
from enum import Enum

import numpy as np
from PIL import Image, UnidentifiedImageError

JPEG_QUALITY = 80
_MAX_QUALITY = 100


class PixelMode(Enum):
    """Colour layout of an image buffer."""

    UNDEFINED = "UNDEFINED"
    GRAYSCALE = "GRAYSCALE"
    RGB = "RGB"
    BGR = "BGR"
    UYVY = "UYVY"
    RGB32 = "RGB32"
    BAYER = "BAYER"
    BAYER_RGGB = "BAYER_RGGB"
    BAYER_GRBG = "BAYER_GRBG"
    BAYER_BGGR = "BAYER_BGGR"
    BAYER_GBRG = "BAYER_GBRG"
    PJPG = "PJPG"
    JPEG = "JPEG"
    PNG = "PNG"


# Pillow mode, bytes per pixel and whether red and blue must be swapped.
_JPEG_LAYOUTS = {
    PixelMode.GRAYSCALE: ("L", 1, False),
    PixelMode.RGB: ("RGB", 3, False),
    PixelMode.BGR: ("RGB", 3, True),
}


def _mode(mode: PixelMode | str) -> PixelMode:
    if isinstance(mode, PixelMode):
        return mode
    try:
        return PixelMode(str(mode).upper())
    except ValueError:
        raise ValueError(f"Unknown pixel mode: {mode!r}") from None


def swap_red_blue(data) -> bytes:
    """Swap the first and third byte of every three-byte pixel.

    A trailing incomplete pixel is left unchanged.
    """
    raw = np.frombuffer(bytes(data), dtype=np.uint8).copy()
    whole = raw.size // 3 * 3
    pixels = raw[:whole].reshape(-1, 3)
    pixels[:, [0, 2]] = pixels[:, [2, 0]]
    return raw.tobytes()


class JpegConversion:
    """Converts between raw pixel buffers and JPEG data at a fixed quality."""

    def __init__(self, quality: int = JPEG_QUALITY):
        quality = int(quality)
        if quality < 0:
            raise ValueError("JPEG quality must not be negative")
        self.quality = min(quality, _MAX_QUALITY)

    def compress(self, data, mode: PixelMode | str) -> bytes:
        """Compress an image to JPEG.

        ``data`` is an array of shape (height, width) or (height, width, 1)
        for grayscale and (height, width, 3) for RGB or BGR.  JPEG input is
        returned unchanged as bytes.  Raises ValueError for modes that cannot
        be compressed or data of the wrong shape.
        """
        mode = _mode(mode)
        if mode is PixelMode.JPEG:
            return bytes(data)
        layout = _JPEG_LAYOUTS.get(mode)
        if layout is None:
            raise ValueError("Frame color mode can not be compressed to JPEG.")
        pil_mode, channels, flip = layout

        pixels = np.asarray(data, dtype=np.uint8)
        if channels == 1 and pixels.ndim == 3 and pixels.shape[2] == 1:
            pixels = pixels[:, :, 0]
        expected_ndim = 2 if channels == 1 else 3
        if pixels.ndim != expected_ndim or (channels == 3 and pixels.shape[2] != 3):
            raise ValueError(f"image data of shape {pixels.shape} does not match mode {mode.name}")
        if pixels.shape[0] == 0 or pixels.shape[1] == 0:
            raise ValueError("cannot compress an empty image")
        if flip:
            pixels = pixels[:, :, ::-1]

        image = Image.fromarray(np.ascontiguousarray(pixels), mode=pil_mode)
        out = io.BytesIO()
        image.save(out, format="JPEG", quality=self.quality)
        return out.getvalue()

    def decompress(self, data, width: int, height: int, mode: PixelMode | str) -> bytes:
        """Decompress JPEG data to packed pixels of the given mode.

        Decompressing to JPEG returns the data unchanged.  Raises ValueError
        if the output mode is not supported, the data is not a JPEG, or the
        image size differs from ``width`` x ``height``.
        """
        mode = _mode(mode)
        raw = bytes(data)
        if mode is PixelMode.JPEG:
            return raw
        layout = _JPEG_LAYOUTS.get(mode)
        if layout is None:
            raise ValueError("Frame can not be decompressed to the color mode of the output frame")
        pil_mode, _, flip = layout
        if not raw:
            raise ValueError("no JPEG data to decompress")

        try:
            with Image.open(io.BytesIO(raw)) as image:
                if image.format != "JPEG":
                    raise ValueError("Only JPEGs can be decompressed.")
                if image.size != (int(width), int(height)):
                    raise ValueError(
                        f"JPEG of size {image.size[0]}x{image.size[1]} does not fit "
                        f"an output of {width}x{height}"
                    )
                result = image.convert(pil_mode).tobytes()
        except (UnidentifiedImageError, OSError) as exc:
            raise ValueError(f"invalid JPEG data: {exc}") from exc

        return swap_red_blue(result) if flip else result