"""Distances and relative positions of objects seen by a pinhole camera.

All functions assume that an object's size does not change with its
position in the image plane.
"""

from __future__ import annotations


def _require(value: float | None, name: str) -> float:
    if value is None:
        raise ValueError(f"frame has no attribute {name}")
    return float(value)


def calc_rel_pos_to_point(
    fx: float, fy: float, x1: int, y1: int, x2: int, y2: int, d: float
) -> tuple[float, float]:
    """Return the metric (x, y) offset between two image points at distance ``d``.

    ``fx`` and ``fy`` are the focal lengths in pixels.  Raises ValueError if
    either focal length is missing (None).
    """
    fx = _require(fx, "fx")
    fy = _require(fy, "fy")
    return ((int(x1) - int(x2)) * d / fx, (int(y1) - int(y2)) * d / fy)


def calc_rel_pos_to_center(
    fx: float, fy: float, width: int, height: int, x1: int, y1: int, d: float
) -> tuple[float, float]:
    """Return the metric offset of an image point from the image centre.

    The centre is taken at whole pixel coordinates (half the size, truncated).
    """
    return calc_rel_pos_to_point(fx, fy, x1, y1, int(width * 0.5), int(height * 0.5), d)


def calc_distance_to_object(f: float, virtual_size: float, real_size: float) -> float:
    """Return the distance to an object of ``real_size`` that appears ``virtual_size`` pixels large.

    Use ``fx`` as ``f`` for widths and ``fy`` for heights.
    """
    return real_size * f / virtual_size


def calc_distance_to_object_by_size(
    fx: float | None,
    fy: float | None,
    virtual_width: float,
    real_width: float,
    virtual_height: float,
    real_height: float,
) -> float:
    """Return the distance to an object using its larger image dimension.

    The width is used with ``fx`` if it is the larger image dimension,
    otherwise the height is used with ``fy``.  Set a dimension to zero to
    ignore it.  Raises ValueError if the needed focal length is None.
    """
    if virtual_width > virtual_height:
        return calc_distance_to_object(_require(fx, "fx"), virtual_width, real_width)
    return calc_distance_to_object(_require(fy, "fy"), virtual_height, real_height)