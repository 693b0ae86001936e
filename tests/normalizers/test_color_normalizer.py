import numpy as np
import pytest

from chromacontrast import (
    AlphaRangeError,
    ChannelCountError,
    ChannelRangeError,
    Color,
    ColorTypeError,
    InvalidShapeError,
)
from chromacontrast.normalizers import (
    as_rgb,
    normalize_alpha,
    normalize_channel,
    normalize_color_input,
    normalize_rgba,
)


def test_normalize_channel():
    assert normalize_channel(0, 0) == 0
    assert normalize_channel(254.5, 1) == 255
    assert normalize_channel(np.float32(12.2), 2) == 12
    assert isinstance(normalize_channel(3.0, 0), int)


@pytest.mark.parametrize("value", [255.5, -0.6, 1000, float("nan"), float("inf")])
def test_normalize_channel_out_of_range(value):
    with pytest.raises(ChannelRangeError) as info:
        normalize_channel(value, 1)
    assert info.value.index == 1


def test_normalize_alpha():
    assert normalize_alpha(None) == 1
    assert normalize_alpha(0) == 0
    assert normalize_alpha(0.5004) == 0.5
    assert normalize_alpha(1.0004) == 1


@pytest.mark.parametrize("value", [1.0006, -0.001, float("nan")])
def test_normalize_alpha_out_of_range(value):
    with pytest.raises(AlphaRangeError):
        normalize_alpha(value)


def test_normalize_rgba():
    assert normalize_rgba([1, 2, 3]) == (1, 2, 3, 1)
    assert normalize_rgba((1, 2, 3, 0.25)) == (1, 2, 3, 0.25)
    assert normalize_rgba((1, 2, 3, None)) == (1, 2, 3, 1)


@pytest.mark.parametrize("channels", [(), (1,), (1, 2), (1, 2, 3, 4, 5)])
def test_normalize_rgba_wrong_count(channels):
    with pytest.raises(ChannelCountError):
        normalize_rgba(channels)


def test_normalize_color_input_dispatch():
    assert normalize_color_input((1, 2, 3)) == (1, 2, 3, 1)
    assert normalize_color_input([1, 2, 3, 0.5]) == (1, 2, 3, 0.5)
    assert normalize_color_input(np.array([1, 2, 3], dtype=np.uint8)) == (1, 2, 3, 1)
    assert normalize_color_input("rgb(1, 2, 3)") == (1, 2, 3, 1)
    assert normalize_color_input(Color((1, 2, 3, 0.5))) == (1, 2, 3, 0.5)


def test_normalize_color_input_rejects():
    with pytest.raises(ChannelCountError):
        normalize_color_input(np.zeros((2, 3)))
    with pytest.raises(ColorTypeError):
        normalize_color_input({"r": 1, "g": 2, "b": 3})
    with pytest.raises(ColorTypeError):
        normalize_color_input(None)


def test_as_rgb():
    assert as_rgb([1, 2, 3]) == (1, 2, 3)
    with pytest.raises(InvalidShapeError):
        as_rgb([1, 2])
