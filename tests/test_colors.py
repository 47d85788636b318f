import pytest

from settlersfmt.colors import ColorBGRA, ColorRGB


def test_rgb_from_bgr_reverses_order():
    assert ColorRGB.from_bgr(b"\x01\x02\x03") == ColorRGB(3, 2, 1)


def test_rgb_bgr_round_trip():
    clr = ColorRGB(0xFF, 0, 0x8F)
    assert ColorRGB.from_bgr(clr.to_bgr()) == clr
    assert clr.to_bgr() == bytes((0x8F, 0, 0xFF))


def test_rgb_rejects_out_of_range():
    with pytest.raises(ValueError):
        ColorRGB(256, 0, 0)
    with pytest.raises(ValueError):
        ColorRGB(0, -1, 0)


def test_rgb_from_short_buffer():
    with pytest.raises(ValueError):
        ColorRGB.from_bgr(b"\x01\x02")


def test_bgra_value_round_trip():
    clr = ColorBGRA.from_value(0x11223344)
    assert (clr.a, clr.r, clr.g, clr.b) == (0x11, 0x22, 0x33, 0x44)
    assert clr.as_value() == 0x11223344


def test_bgra_buffer_round_trip():
    data = bytes((10, 20, 30, 40))
    clr = ColorBGRA.from_bgra(data)
    assert clr == ColorBGRA(10, 20, 30, 40)
    assert clr.to_bgra() == data


def test_bgra_value_and_buffer_agree():
    clr = ColorBGRA(1, 2, 3, 4)
    assert int.from_bytes(clr.to_bgra(), "little") == clr.as_value()


def test_bgra_rgb_conversion():
    rgb = ColorRGB(5, 6, 7)
    clr = ColorBGRA.from_rgb(rgb)
    assert clr.a == 0xFF
    assert clr.to_rgb() == rgb
    assert ColorBGRA.from_rgb(rgb, 0).a == 0


def test_bgra_default_is_transparent_black():
    assert ColorBGRA().as_value() == 0


def test_bgra_rejects_out_of_range():
    with pytest.raises(ValueError):
        ColorBGRA(0, 0, 0, 300)