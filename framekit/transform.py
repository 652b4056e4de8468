"""Geometric transforms of image arrays."""

from __future__ import annotations

from enum import Enum

import numpy as np


class ResizeAlgorithm(Enum):
    """Interpolation used when resizing a frame."""

    INTER_LINEAR = 0
    INTER_NEAREST = 1
    INTER_AREA = 2
    INTER_CUBIC = 3
    INTER_LANCZOS4 = 4
    BAYER_RESIZE = 5


def resize_bayer(
    src, dst_width: int, dst_height: int, offset_x: int = 0, offset_y: int = 0
) -> np.ndarray:
    """Halve a Bayer image by skipping pixels, keeping the colour pattern.

    ``src`` is a two-dimensional (height, width) array.  From the region that
    starts at the offsets, every other 2x2 block of rows and columns is kept.
    The region must be exactly twice the destination size and the destination
    size must be even; otherwise ValueError is raised.
    """
    image = np.asarray(src, dtype=np.uint8)
    if image.ndim != 2:
        raise ValueError("Bayer image must be a two-dimensional array")
    dst_width = int(dst_width)
    dst_height = int(dst_height)
    if dst_width <= 0 or dst_height <= 0:
        raise ValueError("destination size must be positive")
    if offset_x < 0 or offset_y < 0:
        raise ValueError("offsets must not be negative")

    src_height = image.shape[0] - offset_y
    src_width = image.shape[1] - offset_x
    factor_x = src_width // dst_width
    factor_y = src_height // dst_height

    if dst_width % 2 or dst_height % 2:
        raise ValueError("cannot resize frame: the destination size is not a multiple of two")
    if (
        src_width % dst_width
        or src_height % dst_height
        or factor_x != 2
        or factor_y != 2
    ):
        raise ValueError("cannot resize frame: only 0.5 as scale factor is supported")

    region = image[offset_y:, offset_x:]
    rows = np.arange(src_height) % 4 < 2
    cols = np.arange(src_width) % 4 < 2
    return np.ascontiguousarray(region[rows][:, cols])


def rotate_180(data) -> np.ndarray:
    """Rotate an image array of shape (height, width[, channels]) by 180 degrees."""
    image = np.asarray(data)
    if image.ndim < 2:
        raise ValueError("image must have at least two dimensions")
    return np.ascontiguousarray(image[::-1, ::-1])