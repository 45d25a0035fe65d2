from chromaramp.colors import Color, encode
from chromaramp.errors import InvalidColorError
from chromaramp.types.format_type import ColorFormat
import math
import re
import pytest

HEX_RE = re.compile(r"^#[0-9a-f]{6}$")
RGB_RE = re.compile(r"^rgb\((\d{1,3}), (\d{1,3}), (\d{1,3})\)$")
HSL_RE = re.compile(r"^hsl\((\d{1,3}), (\d{1,3})%, (\d{1,3})%\)$")

format_samples = ["#3366ff", "#000000", "#ffffff", "#ff8000", "#123456", "#7f7f7f"]


def test_from_hex_and_back():
    c = Color.from_hex("#3366FF")
    assert c.hex == "#3366ff"
    assert c.rgb == (51, 102, 255)
    assert c.unit_rgb == (0.2, 0.4, 1.0)


def test_color_is_immutable():
    c = Color.from_hex("#3366ff")
    with pytest.raises(AttributeError):
        c._value = (0.0, 0.0, 0.0)
    with pytest.raises(AttributeError):
        c.anything = 1


def test_color_value_semantics():
    assert Color.from_hex("#3366ff") == Color((0.2, 0.4, 1.0))
    assert hash(Color.from_hex("#3366ff")) == hash(Color((0.2, 0.4, 1.0)))
    assert Color.from_hex("#3366ff") != Color.from_hex("#3366fe")
    assert repr(Color.from_hex("#abcdef")) == "Color('#abcdef')"


def test_color_rejects_bad_input():
    with pytest.raises(InvalidColorError):
        Color((math.nan, 0.0, 0.0))
    with pytest.raises(ValueError):
        Color((0.0, 0.0))
    with pytest.raises(InvalidColorError):
        Color.from_hex("#12345")


def test_from_lab_keeps_out_of_gamut_channels():
    bright = Color.from_lab(140, 0, 0)
    assert min(bright.unit_rgb) > 1.0
    assert bright.hex == "#ffffff"
    assert Color.from_lab(-20, 0, 0).hex == "#000000"


def test_lab_and_lch_properties():
    c = Color.from_hex("#ff0000")
    l, a, b = c.lab
    assert abs(l - 53.24) < 0.1
    l2, ch, h = c.lch
    assert l2 == l
    assert abs(ch - math.hypot(a, b)) < 1e-9
    assert 0 <= h < 360


def test_from_hsl():
    assert Color.from_hsl(225, 1.0, 0.6).hex == "#3366ff"
    h, s, l = Color.from_hex("#3366ff").hsl
    assert abs(h - 225) < 1e-9
    assert abs(l - 0.6) < 1e-9


def test_encode_formats():
    c = Color.from_hex("#3366ff")
    assert c.encode() == "#3366ff"
    assert c.encode(ColorFormat.RGB) == "rgb(51, 102, 255)"
    assert c.encode("hsl") == "hsl(225, 100%, 60%)"
    assert encode("#3366ff", "rgb") == "rgb(51, 102, 255)"


def test_encode_unknown_format():
    with pytest.raises(ValueError):
        Color.from_hex("#3366ff").encode("cmyk")


def test_format_fidelity():
    colors = [Color.from_hex(h) for h in format_samples] + [Color.from_lab(140, 30, -30), Color.from_lab(-20, 10, 10)]
    for c in colors:
        assert HEX_RE.match(c.encode("hex"))

        m = RGB_RE.match(c.encode("rgb"))
        assert m is not None
        assert all(0 <= int(v) <= 255 for v in m.groups())

        m = HSL_RE.match(c.encode("hsl"))
        assert m is not None
        h, s, l = (int(v) for v in m.groups())
        assert 0 <= h <= 360
        assert 0 <= s <= 100
        assert 0 <= l <= 100
