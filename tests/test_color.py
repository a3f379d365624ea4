import pytest

from pixelkit.color import Rgb8, Rgba, Rgba8, align, to_bytes


def test_display_opaque():
    assert str(Rgba8(0xFF, 0x0, 0xA, 0xFF)) == "#ff000a"


def test_display_with_alpha_appends_channel():
    assert str(Rgba8(0xFF, 0x0, 0xA, 0x80)) == "#ff000a80"


def test_alpha_replaces_only_alpha():
    c = Rgba8.WHITE
    assert c.alpha(0x88) == Rgba8(c.r, c.g, c.b, 0x88)


def test_from_rgba_red():
    assert Rgba8.from_rgba(Rgba.RED) == Rgba8.RED


@pytest.mark.parametrize(
    "c", [Rgba8.WHITE, Rgba8.BLACK, Rgba8.RED, Rgba8(12, 200, 7, 33), Rgba8.TRANSPARENT]
)
def test_rgba_round_trip(c):
    assert Rgba8.from_rgba(Rgba.from_rgba8(c)) == c


def test_invert_white_is_black():
    assert Rgba8.WHITE.invert() == Rgba8.BLACK


@pytest.mark.parametrize("c", [Rgba8(1, 2, 3, 4), Rgba8(255, 0, 128, 9)])
def test_invert_twice_is_identity(c):
    assert c.invert().invert() == c
    assert c.invert().a == c.a


def test_rgba_invert_twice_is_identity():
    c = Rgba(0.25, 0.5, 0.75, 0.5)
    assert c.invert().invert() == c
    assert Rgba.WHITE.invert() == Rgba.BLACK


def test_from_hex_round_trips_through_str():
    for code in ("#ffaa44", "#141414", "#000000", "#ff000a"):
        assert str(Rgba8.from_hex(code)) == code


def test_from_hex_alpha_is_opaque():
    assert Rgba8.from_hex("#141414") == Rgba8(0x14, 0x14, 0x14, 255)


@pytest.mark.parametrize("bad", ["#zzzzzz", "#ff", "", "#ff 0aa"])
def test_from_hex_errors(bad):
    with pytest.raises(ValueError):
        Rgba8.from_hex(bad)


def test_from_u32_little_endian_layout():
    value = int.from_bytes(bytes([1, 2, 3, 4]), "little")
    assert Rgba8.from_u32(value) == Rgba8(1, 2, 3, 4)


def test_from_u32_rejects_out_of_range():
    with pytest.raises(ValueError):
        Rgba8.from_u32(-1)
    with pytest.raises(ValueError):
        Rgba8.from_u32(1 << 32)


def test_channel_range_checked():
    with pytest.raises(ValueError):
        Rgba8(256, 0, 0, 0)


def test_rgb8_display_is_uppercase():
    assert str(Rgb8.from_rgba8(Rgba8.from_hex("#ffaa44"))) == "#FFAA44"


def test_align_and_to_bytes_round_trip():
    pixels = [Rgba8(1, 2, 3, 4), Rgba8(5, 6, 7, 8)]
    data = to_bytes(pixels)
    assert data == bytes([1, 2, 3, 4, 5, 6, 7, 8])
    assert align(data) == pixels


def test_align_rejects_partial_pixel():
    with pytest.raises(ValueError):
        align(bytes(5))


def test_ordering_is_by_channels():
    white = Rgba8.from_hex("#ffffff")
    black = Rgba8.from_hex("#000000")
    assert sorted([white, black]) == [Rgba8.BLACK, Rgba8.WHITE]
    assert (Rgba8(0, 0, 0, 1) < Rgba8(0, 0, 1, 0)) is True