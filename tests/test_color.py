import numpy as np
import pytest

from lumicube.color import Color, normalize


def test_normalize_bounds():
    assert normalize(0) == 0.0
    assert normalize(255) == 1.0


def test_normalize_is_monotonic():
    values = [normalize(v) for v in range(256)]
    assert values == sorted(values)


@pytest.mark.parametrize("bad", [-1, 256, 1.5, True])
def test_normalize_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        normalize(bad)


@pytest.mark.parametrize("r,g,b,a", [(0, 0, 0, 0), (255, 255, 255, 255), (12, 34, 56, 78)])
def test_rgba_round_trip(r, g, b, a):
    color = Color.from_rgba(r, g, b, a)
    assert (color.red(), color.green(), color.blue(), color.alpha()) == (r, g, b, a)


def test_rgba_packing_order():
    assert Color.from_rgba(0x01, 0x02, 0x03, 0x04).hex == 0x01020304


def test_from_hex_sets_default_alpha():
    color = Color.from_hex(0xED5700)
    assert color.red() == 0xED
    assert color.green() == 0x57
    assert color.blue() == 0x00
    assert color.alpha() == 0x11


def test_from_hex_discards_bits_beyond_32():
    color = Color.from_hex(0x12345678)
    assert color.hex <= 0xFFFFFFFF
    assert color.red() == 0x34


def test_from_hex_alpha_keeps_value():
    assert Color.from_hex_alpha(0xAABBCCDD).hex == 0xAABBCCDD


def test_from_rgb_alpha_is_one():
    color = Color.from_rgb(10, 20, 30)
    assert color.alpha() == 1
    assert (color.red(), color.green(), color.blue()) == (10, 20, 30)


def test_to_vec3_white():
    vec = Color.from_hex(0xFFFFFF).to_vec3()
    assert vec.dtype == np.float32
    assert np.allclose(vec, [1.0, 1.0, 1.0])


def test_normalized_matches_channels():
    color = Color.from_rgba(0, 255, 0, 255)
    assert color.normalized() == (0.0, 1.0, 0.0, 1.0)


@pytest.mark.parametrize("args", [(256, 0, 0, 0), (0, -1, 0, 0), (0, 0, 0, 300)])
def test_from_rgba_rejects_bad_channels(args):
    with pytest.raises(ValueError):
        Color.from_rgba(*args)


def test_hex_out_of_range_rejected():
    with pytest.raises(ValueError):
        Color(0x1_0000_0000)
    with pytest.raises(ValueError):
        Color.from_hex(-5)