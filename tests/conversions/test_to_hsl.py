from chromaramp.conversions import (
    hex_to_hsl,
    hsl_to_hex,
    css_hsl_to_rgb,
    css_rgb_to_hsl,
    np_css_hsl_to_rgb,
    np_hsl_to_unit_rgb,
)
import numpy as np
from ..samples import samples_hex_hsl


def test_hex_to_hsl():
    for hex_color, (h_exp, s_exp, l_exp) in samples_hex_hsl.items():
        h, s, l = hex_to_hsl(hex_color)
        assert abs(h - h_exp) < 1/2
        assert abs(s - s_exp) < 1/255
        assert abs(l - l_exp) < 1/255


def test_achromatic_hue_is_zero():
    for hex_color in ("#000000", "#808080", "#ffffff"):
        h, s, _ = hex_to_hsl(hex_color)
        assert h == 0.0
        assert s == 0.0


def test_hsl_to_hex_primaries():
    assert hsl_to_hex(0, 1, 0.5) == "#ff0000"
    assert hsl_to_hex(120, 1, 0.5) == "#00ff00"
    assert hsl_to_hex(240, 1, 0.5) == "#0000ff"
    assert hsl_to_hex(360, 1, 0.5) == "#ff0000"
    assert hsl_to_hex(225, 1, 0.6) == "#3366ff"


def test_hsl_lightness_round_trips_through_rgb():
    for l in (0.05, 0.25, 0.5, 0.75, 0.95):
        _, _, l_out = css_rgb_to_hsl(*css_hsl_to_rgb(200, 0.7, l))
        assert abs(l_out - l) < 1e-9


def test_hsl_lightness_is_not_clamped():
    r, g, b = css_hsl_to_rgb(0, 0, 1.2)
    assert (r, g, b) == (1.2, 1.2, 1.2)
    assert hsl_to_hex(0, 0, 1.2) == "#ffffff"
    assert hsl_to_hex(0, 0, -0.1) == "#000000"


def test_css_hsl_to_rgb_numpy_matches_scalar():
    hues = np.arange(0, 360, 15, dtype=float)
    s = np.full_like(hues, 0.8)
    l = np.linspace(0.1, 0.9, hues.size)
    result = np_css_hsl_to_rgb(hues, s, l)
    assert result.shape == (hues.size, 3)
    for i, h in enumerate(hues):
        assert np.allclose(result[i], css_hsl_to_rgb(h, s[i], l[i]))


def test_np_hsl_to_unit_rgb_broadcasts_rows():
    hsl = np.array([[0, 1, 0.5], [120, 1, 0.5], [240, 1, 0.5]])
    assert np.allclose(np_hsl_to_unit_rgb(hsl), np.eye(3))
