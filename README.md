# framekit

Helpers for working with raw camera frames held as byte buffers or NumPy
arrays.

## Modules

- **`framekit.bayer`**: demosaic 8-bit Bayer images (`BayerPattern.RGGB`,
  `GRBG`, `BGGR`, `GBRG`) into packed RGB24 bytes with `convert_bayer_to_rgb24`,
  or extract an interpolated green channel with `convert_bayer_to_green_channel`.
  The last row and the last column of the output are left black.
- **`framekit.pixels`**: `rgb_to_gray`, `rgb_to_bgr` and `calc_diff` (per-byte
  `src1 - src2`, clamped at zero) on packed 8-bit buffers.
- **`framekit.transform`**: `resize_bayer` halves a two-dimensional Bayer array
  by skipping pixels while keeping the colour pattern, and `rotate_180` turns an
  image array around. `ResizeAlgorithm` is an enumeration of resize method names.
- **`framekit.geometry`**: pinhole-camera estimates: `calc_distance_to_object`,
  `calc_distance_to_object_by_size`, `calc_rel_pos_to_point` and
  `calc_rel_pos_to_center`. A missing focal length (`None`) raises `ValueError`.
- **`framekit.calibration`**: the dataclasses `CameraCalibration`,
  `ExtrinsicCalibration` and `StereoCalibration`. Unset values are NaN.
  `CameraCalibration` offers `camera_matrix`, `pixel_covariance`, `is_valid`,
  `rescale`, `from_attributes` and `to_attributes`. `ExtrinsicCalibration.transform`
  returns a 4x4 homogeneous matrix. `StereoCalibration.from_matlab_file` reads the
  text output of the MATLAB stereo calibration toolbox.
- **`framekit.color_gradient`**: `ColorGradient` interpolates linearly between
  colour points (`add_color_point`, `clear`, `color_at`, `select_colormap`).
  Ready-made maps are listed in `ColorGradientType` (JET, HOT, GRAYSCALE, BRONZE).
- **`framekit.jpeg`**: `JpegConversion` compresses grayscale, RGB or BGR arrays
  to JPEG and decompresses JPEG data to packed bytes in those modes. Data that is
  already JPEG passes through unchanged. `PixelMode` names the buffer layouts, and
  `swap_red_blue` swaps the R and B bytes of three-byte pixels.
- **`framekit.netpbm`**: `store_frame` writes RGB/BGR data as plain-text PPM,
  grayscale data as plain-text PGM, and JPEG data unchanged. It returns the path it
  wrote, with the extension added. `load_jpeg` returns the bytes of a file.

## Installation

```
pip install framekit
```

## Examples

Demosaic a Bayer frame and compress the result:

```python
import numpy as np
from framekit.bayer import BayerPattern, convert_bayer_to_rgb24
from framekit.jpeg import JpegConversion, PixelMode

rgb = convert_bayer_to_rgb24(raw_bytes, 640, 480, BayerPattern.RGGB)
image = np.frombuffer(rgb, dtype=np.uint8).reshape(480, 640, 3)
jpeg_bytes = JpegConversion(quality=90).compress(image, PixelMode.RGB)
pixels = JpegConversion().decompress(jpeg_bytes, 640, 480, PixelMode.BGR)
```

Colour a value with a gradient:

```python
from framekit.color_gradient import ColorGradient, ColorGradientType

gradient = ColorGradient()
gradient.select_colormap(ColorGradientType.JET)
red, green, blue = gradient.color_at(0.3)
```

Load a stereo calibration:

```python
from framekit.calibration import StereoCalibration

calib = StereoCalibration.from_matlab_file("Calib_Results_stereo.txt", 640, 480)
print(calib.is_valid(), calib.extrinsic.transform())
```

Write a grayscale frame as a PGM file:

```python
from framekit.netpbm import store_frame

path = store_frame("frame", gray_bytes, 640, 480, "GRAYSCALE")  # "frame.pgm"
```

## What it does not do

framekit has no command-line tool and no image viewer. It does not undistort or
rectify images with a calibration, and apart from `resize_bayer` it does not
resize images; `ResizeAlgorithm` only names methods. It does not encode or
decode PNG, and it does not decode PJPG, UYVY or RGB32 data. It has no logging
facility of its own.

## Running the tests

```
pip install -e .[test]
pytest
```