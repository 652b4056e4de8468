"""Helpers for camera frames: Bayer demosaicing, calibration, colour gradients, JPEG, Netpbm and pixel utilities."""

__version__ = "0.1.0"

__all__ = [
    "bayer",
    "calibration",
    "color_gradient",
    "geometry",
    "jpeg",
    "netpbm",
    "pixels",
    "transform",
]