from chromaramp.conversions import (
    hex_to_lab,
    hex_to_hsl,
    hex_to_rgb255,
    lab_to_hex,
    hsl_to_hex,
    lab_to_xyz,
    xyz_to_lab,
    xyz_to_linear_rgb,
    linear_rgb_to_xyz,
    np_lab_to_xyz,
    np_xyz_to_lab,
    np_lab_to_unit_rgb,
    lab_to_unit_rgb,
)
import numpy as np
from ..samples import round_trip_hex, samples_hex_lab


def _channel_diff(a: str, b: str) -> int:
    return max(abs(x - y) for x, y in zip(hex_to_rgb255(a), hex_to_rgb255(b)))


def test_round_trip_hex_lab_hex():
    for hex_color in round_trip_hex:
        assert _channel_diff(lab_to_hex(*hex_to_lab(hex_color)), hex_color) <= 1


def test_round_trip_hex_hsl_hex():
    for hex_color in round_trip_hex:
        assert _channel_diff(hsl_to_hex(*hex_to_hsl(hex_color)), hex_color) <= 1


def test_round_trip_xyz_lab():
    for l, a, b in samples_hex_lab.values():
        x, y, z = lab_to_xyz(l, a, b)
        l_out, a_out, b_out = xyz_to_lab(x, y, z)
        assert abs(l - l_out) < 1e-9
        assert abs(a - a_out) < 1e-9
        assert abs(b - b_out) < 1e-9


def test_round_trip_linear_rgb_xyz():
    for rgb in [(0.2, 0.4, 1.0), (1.0, 0.0, 0.5), (0.0, 0.0, 0.0)]:
        out = xyz_to_linear_rgb(*linear_rgb_to_xyz(*rgb))
        assert np.allclose(out, rgb, atol=1e-12)


def test_round_trip_lab_numpy():
    lab = np.array(list(samples_hex_lab.values()))
    assert np.allclose(np_xyz_to_lab(np_lab_to_xyz(lab)), lab, atol=1e-9)


def test_np_lab_to_unit_rgb_matches_scalar():
    lab = np.array([[10, 20, -30], [50, 0, 0], [140, 5, 5], [-20, 5, 5]])
    result = np_lab_to_unit_rgb(lab)
    for row, out in zip(lab, result):
        assert np.allclose(out, lab_to_unit_rgb(*row))


def test_lab_lightness_is_not_clamped():
    r, g, b = lab_to_unit_rgb(140, 0, 0)
    assert min(r, g, b) > 1.0
    r, g, b = lab_to_unit_rgb(-20, 0, 0)
    assert max(r, g, b) < 0.0
    assert lab_to_hex(140, 0, 0) == "#ffffff"
    assert lab_to_hex(-20, 0, 0) == "#000000"
