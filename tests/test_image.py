import numpy as np
import pytest

from hpcmat.image import Image
from hpcmat.mat import Depth


def test_new_image_is_zero_filled_with_shape():
    img = Image(2, 3, 3, Depth.F32)
    assert img.data.shape == (2, 3, 3)
    assert img.data.dtype == np.float32
    assert img.size == 18
    assert not img.data.any()


def test_data_length_mismatch_raises():
    with pytest.raises(ValueError):
        Image(2, 2, 3, Depth.U8, range(11))


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        Image(-1, 2, 1)
    with pytest.raises(ValueError):
        Image(2, 2, 0)


def test_pixel_follows_interleaved_layout():
    img = Image(2, 2, 3, Depth.U8, range(12))
    assert img.pixel(0, 0, 0) == 0
    assert img.pixel(0, 1, 1) == 4
    assert img.pixel(1, 0, 2) == 8
    assert img.pixel(1, 1, 2) == 11


def test_pixel_out_of_range_raises():
    img = Image(2, 2, 1)
    with pytest.raises(IndexError):
        img.pixel(2, 0, 0)
    with pytest.raises(IndexError):
        img.pixel(0, 0, 1)


def test_convert_to_u8_saturates():
    img = Image(1, 4, 1, Depth.F32, [-5.0, 300.0, 12.7, 255.0])
    out = img.convert(Depth.U8)
    assert out.depth is Depth.U8
    assert out.data.reshape(-1).tolist() == [0, 255, 12, 255]


def test_convert_int_to_u8_saturates():
    img = Image(1, 3, 1, Depth.S32, [-1, 1000, 42])
    out = img.convert(Depth.U8)
    assert out.data.reshape(-1).tolist() == [0, 255, 42]


def test_convert_float_to_s16_truncates_toward_zero():
    img = Image(1, 2, 1, Depth.F64, [-2.7, 3.9])
    out = img.convert(Depth.S16)
    assert out.data.reshape(-1).tolist() == [-2, 3]


def test_convert_round_trip_preserves_values():
    img = Image(2, 2, 2, Depth.U8, range(8))
    back = img.convert(Depth.F64).convert(Depth.U8)
    assert np.array_equal(back.data, img.data)
    assert (back.rows, back.cols, back.channels) == (2, 2, 2)


def test_copy_is_independent():
    img = Image(1, 2, 1, Depth.S32, [5, 6])
    dup = img.copy()
    dup.data[0, 0, 0] = 99
    assert img.pixel(0, 0) == 5
    assert dup.pixel(0, 0) == 99
    assert dup.depth is Depth.S32