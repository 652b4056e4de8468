"""Piecewise linear colour gradients for mapping values to RGB."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class ColorGradientType(Enum):
    """Predefined colour maps."""

    JET = 0
    HOT = 1
    GRAYSCALE = 2
    BRONZE = 3


class ColorPoint(NamedTuple):
    """A colour at a position along the gradient."""

    r: float
    g: float
    b: float
    val: float


_COLORMAPS = {
    ColorGradientType.JET: (
        ColorPoint(0, 0, 1, 0.0),
        ColorPoint(0, 1, 1, 0.25),
        ColorPoint(0, 1, 0, 0.5),
        ColorPoint(1, 1, 0, 0.75),
        ColorPoint(1, 0, 0, 1.0),
    ),
    ColorGradientType.HOT: (
        ColorPoint(0, 0, 0, 0.0),
        ColorPoint(1, 0, 0, 0.125),
        ColorPoint(1, 1, 0, 0.55),
        ColorPoint(1, 1, 1, 1.0),
    ),
    ColorGradientType.GRAYSCALE: (
        ColorPoint(0, 0, 0, 0.0),
        ColorPoint(1, 1, 1, 1.0),
    ),
    ColorGradientType.BRONZE: (
        ColorPoint(0, 0, 0, 0.0),
        ColorPoint(0.87, 0.43, 0, 0.5),
        ColorPoint(1, 0.97, 0.48, 1.0),
    ),
}


class ColorGradient:
    """An ordered list of colour points, interpolated linearly."""

    def __init__(self) -> None:
        self.points: list[ColorPoint] = []

    def add_color_point(self, red: float, green: float, blue: float, value: float) -> None:
        """Insert a colour point, keeping the points sorted by value."""
        point = ColorPoint(red, green, blue, value)
        index = next(
            (i for i, existing in enumerate(self.points) if value < existing.val),
            len(self.points),
        )
        self.points.insert(index, point)

    def clear(self) -> None:
        """Remove all colour points."""
        self.points.clear()

    def color_at(self, value: float) -> tuple[float, float, float]:
        """Return the (red, green, blue) colour at the given position.

        Values below the first point take its colour, values at or beyond the
        last point take the last colour.  Raises IndexError if the gradient is
        empty.
        """
        if not self.points:
            raise IndexError("There is no color in the current palette.")
        for index, curr in enumerate(self.points):
            if value < curr.val:
                prev = self.points[max(0, index - 1)]
                value_diff = prev.val - curr.val
                fract = 0.0 if value_diff == 0 else (value - curr.val) / value_diff
                return (
                    (prev.r - curr.r) * fract + curr.r,
                    (prev.g - curr.g) * fract + curr.g,
                    (prev.b - curr.b) * fract + curr.b,
                )
        last = self.points[-1]
        return (last.r, last.g, last.b)

    def select_colormap(self, gradient_type: ColorGradientType | int) -> None:
        """Replace the points with a predefined colour map.

        Raises ValueError for an unknown gradient type.
        """
        try:
            gradient_type = ColorGradientType(gradient_type)
        except ValueError:
            raise ValueError("Color gradient type does not match a known value") from None
        self.clear()
        self.points.extend(_COLORMAPS[gradient_type])