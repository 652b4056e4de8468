"""Per-pixel operations on packed 8-bit image buffers."""

from __future__ import annotations

import numpy as np

_LEVELS = np.arange(256, dtype=np.float64)
_R_FACT = (0.299 * _LEVELS).astype(np.uint8)
_G_FACT = (0.587 * _LEVELS).astype(np.uint8)
_B_FACT = (0.114 * _LEVELS).astype(np.uint8)


def _as_bytes(data) -> np.ndarray:
    if isinstance(data, np.ndarray):
        return np.ascontiguousarray(data, dtype=np.uint8).reshape(-1)
    return np.frombuffer(bytes(data), dtype=np.uint8)


def _as_rgb(data) -> np.ndarray:
    pixels = _as_bytes(data)
    if pixels.size % 3:
        raise ValueError("RGB data must hold three bytes per pixel")
    return pixels.reshape(-1, 3)


def rgb_to_gray(data) -> bytes:
    """Convert packed 24-bit RGB to 8-bit grayscale using truncated luma weights."""
    rgb = _as_rgb(data)
    total = (
        _R_FACT[rgb[:, 0]].astype(np.uint32)
        + _G_FACT[rgb[:, 1]]
        + _B_FACT[rgb[:, 2]]
    )
    return np.minimum(total & 0xFF, 255).astype(np.uint8).tobytes()


def calc_diff(src1, src2) -> bytes:
    """Return ``src1 - src2`` per byte, clamped at zero.

    Raises ValueError if the buffers differ in size.
    """
    a = _as_bytes(src1)
    b = _as_bytes(src2)
    if a.size != b.size:
        raise ValueError("size mismatch between src1 and src2, cannot compute the difference")
    return np.where(a > b, a - b, 0).astype(np.uint8).tobytes()


def rgb_to_bgr(data) -> bytes:
    """Swap the first and third channel of packed 24-bit pixels."""
    return np.ascontiguousarray(_as_rgb(data)[:, ::-1]).tobytes()