"""Intrinsic, extrinsic and stereo camera calibration parameters.

Unset values are represented by NaN.  The intrinsic parameters follow the
usual pinhole model with four distortion coefficients (k1, k2, p1, p2).
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field, fields

import numpy as np

UNSET = math.nan

_INTRINSIC_KEYS = ("fx", "fy", "cx", "cy", "d0", "d1", "d2", "d3")
_MATLAB_ASSIGNMENT = re.compile(r"(\w+?) = \[([^\]]+?)\]")


def _is_set(value: float) -> bool:
    return not math.isnan(value)


@dataclass
class CameraCalibration:
    """Camera matrix, lens distortion and image size of one camera."""

    fx: float = UNSET
    fy: float = UNSET
    cx: float = UNSET
    cy: float = UNSET
    d0: float = UNSET
    d1: float = UNSET
    d2: float = UNSET
    d3: float = UNSET
    width: int = -1
    height: int = -1
    ex: float = UNSET
    ey: float = UNSET
    fisheye: bool = False

    def camera_matrix(self) -> np.ndarray:
        """Return the 3x3 matrix mapping scene points to image points."""
        return np.array(
            [[self.fx, 0.0, self.cx], [0.0, self.fy, self.cy], [0.0, 0.0, 1.0]],
            dtype=float,
        )

    def pixel_covariance(self) -> np.ndarray:
        """Return the 2x2 covariance of the pixel reprojection error."""
        return np.array([[self.ex, 0.0], [0.0, self.ey]], dtype=float)

    def is_valid(self) -> bool:
        """True if the image size and all intrinsic values are set."""
        return (
            self.width > 0
            and self.height > 0
            and all(_is_set(getattr(self, key)) for key in _INTRINSIC_KEYS)
        )

    def rescale(self, width: int, height: int) -> None:
        """Scale focal length and optical centre to another image size.

        The stored image size is left untouched and the aspect ratio is not
        preserved.
        """
        sx = width / self.width
        sy = height / self.height
        self.fx *= sx
        self.cx *= sx
        self.fy *= sy
        self.cy *= sy

    @classmethod
    def from_attributes(
        cls, attributes: Mapping[str, float], width: int, height: int
    ) -> CameraCalibration:
        """Build a calibration from frame attributes; raises KeyError if one is missing."""
        values = {key: float(attributes[key]) for key in _INTRINSIC_KEYS}
        return cls(width=width, height=height, **values)

    def to_attributes(
        self, attributes: MutableMapping[str, float], width: int, height: int
    ) -> None:
        """Write the intrinsic values into frame attributes.

        Raises ValueError if the given frame size differs from the calibration's;
        the attributes are written before the check.
        """
        for key in _INTRINSIC_KEYS:
            attributes[key] = getattr(self, key)
        if width != self.width:
            raise ValueError("frame width does not match calibration")
        if height != self.height:
            raise ValueError("frame height does not match calibration")


@dataclass
class ExtrinsicCalibration:
    """Translation and rotation vector between two cameras."""

    tx: float = UNSET
    ty: float = UNSET
    tz: float = UNSET
    rx: float = UNSET
    ry: float = UNSET
    rz: float = UNSET

    def is_valid(self) -> bool:
        """True if all six values are set."""
        return all(_is_set(getattr(self, f.name)) for f in fields(self))

    def transform(self) -> np.ndarray:
        """Return the 4x4 homogeneous transform from the left to the right camera frame."""
        result = np.eye(4)
        r = np.array([self.rx, self.ry, self.rz], dtype=float)
        angle = float(np.linalg.norm(r))
        if angle > 0:
            kx, ky, kz = r / angle
            k = np.array([[0.0, -kz, ky], [kz, 0.0, -kx], [-ky, kx, 0.0]])
            result[:3, :3] = np.eye(3) + math.sin(angle) * k + (1.0 - math.cos(angle)) * (k @ k)
        result[:3, 3] = [self.tx, self.ty, self.tz]
        return result


@dataclass
class StereoCalibration:
    """Full calibration of a stereo camera pair."""

    cam_left: CameraCalibration = field(default_factory=CameraCalibration)
    cam_right: CameraCalibration = field(default_factory=CameraCalibration)
    extrinsic: ExtrinsicCalibration = field(default_factory=ExtrinsicCalibration)

    def is_valid(self) -> bool:
        """True if both cameras and the extrinsic calibration are valid."""
        return self.cam_left.is_valid() and self.cam_right.is_valid() and self.extrinsic.is_valid()

    @classmethod
    def from_matlab_file(cls, file_name, width: int = -1, height: int = -1) -> StereoCalibration:
        """Read the text output of the Matlab stereo calibration toolbox.

        Without an image size the result is not valid.  Raises ValueError if a
        required variable is missing or too short.
        """
        raw: dict[str, list[float]] = {}
        with open(file_name, encoding="utf-8") as handle:
            for line in handle:
                match = _MATLAB_ASSIGNMENT.search(line)
                if match:
                    raw[match.group(1)] = [float(token) for token in match.group(2).split()]

        def require(name: str, count: int) -> list[float]:
            values = raw.get(name, [])
            if len(values) < count:
                raise ValueError(f"calibration file lacks {count} values for '{name}'")
            return values

        def camera(side: str) -> CameraCalibration:
            fc = require(f"fc_{side}", 2)
            cc = require(f"cc_{side}", 2)
            kc = require(f"kc_{side}", 4)
            return CameraCalibration(
                fc[0], fc[1], cc[0], cc[1], kc[0], kc[1], kc[2], kc[3], width, height
            )

        left = camera("left")
        right = camera("right")
        t = require("T", 3)
        om = require("om", 3)
        return cls(left, right, ExtrinsicCalibration(t[0], t[1], t[2], om[0], om[1], om[2]))