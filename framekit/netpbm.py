"""Writing frames as plain-text Netpbm or raw JPEG files, and reading JPEG files."""

from __future__ import annotations

import os
from pathlib import Path

from framekit.jpeg import PixelMode, _mode

_MAX_VALUE = 255

# File suffix and Netpbm magic number; None marks data written unchanged.
_FORMATS = {
    PixelMode.RGB: (".ppm", "P3"),
    PixelMode.BGR: (".ppm", "P3"),
    PixelMode.GRAYSCALE: (".pgm", "P2"),
    PixelMode.JPEG: (".jpeg", None),
    PixelMode.PJPG: (".jpeg", None),
}


def store_frame(filename, data, width: int, height: int, mode: PixelMode | str) -> str:
    """Write an image to ``filename`` plus an extension chosen by its mode.

    RGB and BGR images become plain PPM files, grayscale images plain PGM
    files, and JPEG data is written unchanged to a ``.jpeg`` file.  The bytes
    of RGB and BGR data are written in their stored order.  Returns the path
    that was written.  Raises ValueError for empty data or an unsupported
    mode.
    """
    raw = bytes(data)
    if not raw:
        raise ValueError("Frame is empty.")
    mode = _mode(mode)
    fmt = _FORMATS.get(mode)
    if fmt is None:
        raise ValueError(f"Frame color mode {mode.name} can not be written.")
    suffix, magic = fmt
    path = os.fspath(filename) + suffix

    with open(path, "wb") as handle:
        if magic is None:
            handle.write(raw)
        else:
            header = f"{magic}\n{int(width)} {int(height)}\n{_MAX_VALUE}\n"
            body = "".join(f"{value} " for value in raw)
            handle.write((header + body).encode("ascii"))
    return path


def load_jpeg(filename) -> bytes:
    """Return the whole content of a JPEG file.

    Raises OSError if the file cannot be read.
    """
    return Path(filename).read_bytes()