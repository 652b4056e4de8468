import pytest

from framekit.bayer import BayerPattern, convert_bayer_to_green_channel, convert_bayer_to_rgb24

ALL_PATTERNS = list(BayerPattern)


def _pixel(rgb: bytes, width: int, x: int, y: int) -> tuple[int, int, int]:
    i = (y * width + x) * 3
    return rgb[i], rgb[i + 1], rgb[i + 2]


def test_rgb_2x2_rggb_worked_example():
    out = convert_bayer_to_rgb24(bytes([10, 20, 30, 40]), 2, 2, BayerPattern.RGGB)
    assert out == bytes([10, 25, 40] + [0] * 9)


def test_rgb_2x2_bggr_swaps_red_and_blue_relative_to_rggb():
    rggb = convert_bayer_to_rgb24(bytes([10, 20, 30, 40]), 2, 2, BayerPattern.RGGB)
    bggr = convert_bayer_to_rgb24(bytes([10, 20, 30, 40]), 2, 2, BayerPattern.BGGR)
    assert _pixel(bggr, 2, 0, 0) == tuple(reversed(_pixel(rggb, 2, 0, 0)))


def test_rgb_2x2_grbg_takes_red_and_blue_from_their_sites():
    r, g, b = _pixel(convert_bayer_to_rgb24(bytes([10, 20, 30, 40]), 2, 2, "GRBG"), 2, 0, 0)
    assert (r, b) == (20, 30)
    assert g == 25


def test_rgb_2x2_gbrg():
    r, _, b = _pixel(convert_bayer_to_rgb24(bytes([10, 20, 30, 40]), 2, 2, "gbrg"), 2, 0, 0)
    assert (r, b) == (30, 20)


@pytest.mark.parametrize("pattern", ALL_PATTERNS)
def test_rgb_uniform_image_keeps_value_and_black_border(pattern):
    width, height, value = 5, 4, 7
    out = convert_bayer_to_rgb24(bytes([value] * width * height), width, height, pattern)
    assert len(out) == width * height * 3
    for y in range(height):
        for x in range(width):
            expected = (0, 0, 0) if x == width - 1 or y == height - 1 else (value,) * 3
            assert _pixel(out, width, x, y) == expected


@pytest.mark.parametrize("pattern", ALL_PATTERNS)
def test_green_uniform_image_keeps_value_and_black_border(pattern):
    width, height, value = 6, 3, 200
    out = convert_bayer_to_green_channel(bytes([value] * width * height), width, height, pattern)
    assert len(out) == width * height
    for y in range(height):
        for x in range(width):
            expected = 0 if x == width - 1 or y == height - 1 else value
            assert out[y * width + x] == expected


def test_green_2x2_worked_example():
    out = convert_bayer_to_green_channel(bytes([10, 20, 30, 40]), 2, 2, BayerPattern.RGGB)
    assert out == bytes([25, 0, 0, 0])


@pytest.mark.parametrize("pattern", ALL_PATTERNS)
def test_green_channel_matches_green_of_rgb(pattern):
    width, height = 6, 5
    src = bytes((i * 37 + 11) % 256 for i in range(width * height))
    rgb = convert_bayer_to_rgb24(src, width, height, pattern)
    green = convert_bayer_to_green_channel(src, width, height, pattern)
    for y in range(height - 1):
        for x in range(width - 1):
            sites_green = (x + y) % 2 == (0 if pattern in (BayerPattern.GRBG, BayerPattern.GBRG) else 1)
            if not sites_green:
                assert green[y * width + x] == _pixel(rgb, width, x, y)[1]


def test_rggb_red_site_copied_directly():
    width, height = 4, 4
    src = bytes(range(1, width * height + 1))
    out = convert_bayer_to_rgb24(src, width, height, BayerPattern.RGGB)
    assert _pixel(out, width, 0, 0)[0] == src[0]
    assert _pixel(out, width, 2, 0)[0] == src[2]
    assert _pixel(out, width, 0, 0)[2] == src[width + 1]


def test_accepts_bytearray_and_list():
    data = [10, 20, 30, 40]
    assert convert_bayer_to_rgb24(bytearray(data), 2, 2, "RGGB") == convert_bayer_to_rgb24(
        data, 2, 2, "RGGB"
    )


def test_unknown_pattern_raises():
    with pytest.raises(ValueError):
        convert_bayer_to_rgb24(bytes(4), 2, 2, "RGBG")
    with pytest.raises(ValueError):
        convert_bayer_to_green_channel(bytes(4), 2, 2, "XXXX")


def test_short_buffer_raises():
    with pytest.raises(ValueError):
        convert_bayer_to_rgb24(bytes(3), 2, 2, BayerPattern.RGGB)
    with pytest.raises(ValueError):
        convert_bayer_to_green_channel(bytes(5), 3, 2, BayerPattern.RGGB)


def test_too_narrow_raises():
    with pytest.raises(ValueError):
        convert_bayer_to_rgb24(bytes(4), 1, 4, BayerPattern.RGGB)