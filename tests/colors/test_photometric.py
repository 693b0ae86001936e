import pytest

from chromacontrast import Color, inverse, luminance, relative_luminance
from chromacontrast.colors.photometric import srgb_to_linear
from chromacontrast.samples import samples_luminance


def test_luminance_samples():
    for rgb, expected in samples_luminance.items():
        assert Color(rgb).luminance == pytest.approx(expected, abs=1e-10)


def test_luminance_function_matches_property():
    color = Color((32, 150, 223))
    assert luminance(color) == color.luminance == relative_luminance(32, 150, 223)


def test_luminance_ignores_alpha():
    opaque = Color((32, 150, 223, 1))
    for alpha in [0, 0.25, 0.5, 0.999]:
        assert Color((32, 150, 223, alpha)).luminance == opaque.luminance


def test_luminance_monotonic():
    values = [relative_luminance(v, v, v) for v in range(256)]
    assert all(a < b for a, b in zip(values, values[1:]))
    for i in range(3):
        channel = [0, 0, 0]
        previous = -1.0
        for v in range(0, 256, 15):
            channel[i] = v
            current = relative_luminance(*channel)
            assert current > previous
            previous = current


def test_primary_weights():
    assert relative_luminance(255, 0, 0) == pytest.approx(0.2126)
    assert relative_luminance(0, 255, 0) == pytest.approx(0.7152)
    assert relative_luminance(0, 0, 255) == pytest.approx(0.0722)


def test_srgb_to_linear_branches():
    linear = srgb_to_linear([10, 11, 255])
    # 10 / 255 is below the threshold, 11 / 255 above it
    assert linear[0] == pytest.approx(10 / 255 / 12.92)
    assert linear[1] == pytest.approx(((11 / 255 + 0.055) / 1.055) ** 2.4)
    assert linear[2] == pytest.approx(1.0)


def test_inverse():
    color = Color((100, 255, 255, 0.5))
    assert color.inverse.rgba == (155, 0, 0, 0.5)
    assert inverse(color) == color.inverse
    assert color.rgba == (100, 255, 255, 0.5)


def test_inverse_twice_is_identity():
    color = Color((12, 200, 77, 0.3))
    assert color.inverse.inverse == color
