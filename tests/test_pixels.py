import numpy as np
import pytest

from framekit.pixels import calc_diff, rgb_to_bgr, rgb_to_gray


def test_rgb_to_bgr_swaps_channels():
    assert rgb_to_bgr(b"\x01\x02\x03\x0a\x0b\x0c") == b"\x03\x02\x01\x0c\x0b\x0a"


def test_rgb_to_bgr_twice_is_identity():
    data = bytes(range(60))
    assert rgb_to_bgr(rgb_to_bgr(data)) == data


def test_rgb_to_bgr_accepts_arrays():
    arr = np.array([[[1, 2, 3], [4, 5, 6]]], dtype=np.uint8)
    assert rgb_to_bgr(arr) == bytes([3, 2, 1, 6, 5, 4])


def test_rgb_to_bgr_rejects_partial_pixel():
    with pytest.raises(ValueError):
        rgb_to_bgr(b"\x01\x02")


def test_gray_of_black_is_zero():
    assert rgb_to_gray(bytes(9)) == bytes(3)


def test_gray_of_white():
    assert rgb_to_gray(b"\xff\xff\xff") == bytes([254])


def test_gray_has_one_byte_per_pixel():
    assert len(rgb_to_gray(bytes(range(30)))) == 10


def test_gray_of_neutral_pixels_stays_close():
    values = list(range(0, 256, 5))
    data = bytes(v for v in values for _ in range(3))
    gray = rgb_to_gray(data)
    for v, g in zip(values, gray):
        assert v - 2 <= g <= v


def test_gray_is_monotonic_in_each_channel():
    darker = rgb_to_gray(b"\x10\x20\x30")[0]
    assert rgb_to_gray(b"\x90\x20\x30")[0] >= darker
    assert rgb_to_gray(b"\x10\xa0\x30")[0] >= darker
    assert rgb_to_gray(b"\x10\x20\xb0")[0] >= darker


def test_gray_green_weighs_most():
    red = rgb_to_gray(b"\xc8\x00\x00")[0]
    green = rgb_to_gray(b"\x00\xc8\x00")[0]
    blue = rgb_to_gray(b"\x00\x00\xc8")[0]
    assert green > red > blue


def test_gray_rejects_partial_pixel():
    with pytest.raises(ValueError):
        rgb_to_gray(b"\x01\x02\x03\x04")


def test_diff_with_itself_is_zero():
    data = bytes(range(0, 250, 7))
    assert calc_diff(data, data) == bytes(len(data))


def test_diff_with_zeros_is_identity():
    data = bytes(range(0, 250, 7))
    assert calc_diff(data, bytes(len(data))) == data


def test_diff_clamps_negative_to_zero():
    assert calc_diff(b"\x05\x64", b"\x0a\x14") == bytes([0, 0x64 - 0x14])


def test_diff_is_one_sided():
    a = bytes([10, 200, 30, 40])
    b = bytes([20, 100, 30, 0])
    forward = calc_diff(a, b)
    backward = calc_diff(b, a)
    for f, r, x, y in zip(forward, backward, a, b):
        assert f == 0 or r == 0
        assert f - r == x - y


def test_diff_size_mismatch_raises():
    with pytest.raises(ValueError):
        calc_diff(b"\x01\x02\x03", b"\x01\x02")