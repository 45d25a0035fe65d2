from typing import Iterable, Tuple
import numpy as np
from numpy import ndarray as NDArray

from ..types.format_type import ColorFormat
from ..types.color_types import RGB255, Triple
from .hex import hex_to_rgb255, hex_to_unit_rgb, quantize, rgb255_to_hex, round_half_up
from .srgb import (
    unit_rgb_to_linear_rgb,
    linear_rgb_to_unit_rgb,
    np_unit_rgb_to_linear_rgb,
    np_linear_rgb_to_unit_rgb,
)
from .lab import (
    linear_rgb_to_xyz,
    xyz_to_linear_rgb,
    xyz_to_lab,
    lab_to_xyz,
    lab_to_lch,
    np_linear_rgb_to_xyz,
    np_xyz_to_linear_rgb,
    np_xyz_to_lab,
    np_lab_to_xyz,
    np_lab_to_lch,
)
from .css_to_hsl import css_rgb_to_hsl, css_hsl_to_rgb, np_css_hsl_to_rgb


def hex_to_linear_rgb(hex_color: str) -> Triple:
    """Decode a hex color and gamma-expand it to linear RGB in [0, 1]."""
    return unit_rgb_to_linear_rgb(*hex_to_unit_rgb(hex_color))


def hex_to_lab(hex_color: str) -> Triple:
    """hex -> linear RGB -> XYZ -> Lab, unrounded."""
    return xyz_to_lab(*linear_rgb_to_xyz(*hex_to_linear_rgb(hex_color)))


def hex_to_lch(hex_color: str) -> Tuple[int, int, int]:
    """
    Diagnostic LCH report of a hex color.

    L, C and H are rounded half-up to integers. This rounding is for display
    only; ramp generation works from :func:`hex_to_lab`.
    """
    l, c, h = lab_to_lch(*hex_to_lab(hex_color))
    return round_half_up(l), round_half_up(c), round_half_up(h)


def lab_to_unit_rgb(l: float, a: float, b: float) -> Triple:
    """Lab -> XYZ -> linear RGB -> gamma-encoded sRGB. No clamping."""
    return linear_rgb_to_unit_rgb(*xyz_to_linear_rgb(*lab_to_xyz(l, a, b)))


def lab_to_hex(l: float, a: float, b: float) -> str:
    return rgb255_to_hex(*quantize(*lab_to_unit_rgb(l, a, b)))


def hex_to_hsl(hex_color: str) -> Triple:
    """Return (H in [0, 360), S in [0, 1], L in [0, 1])."""
    return css_rgb_to_hsl(*hex_to_unit_rgb(hex_color))


def hsl_to_unit_rgb(h: float, s: float, l: float) -> Triple:
    return css_hsl_to_rgb(h, s, l)


def hsl_to_hex(h: float, s: float, l: float) -> str:
    return rgb255_to_hex(*quantize(*css_hsl_to_rgb(h, s, l)))


def encode_rgb255(rgb: RGB255, fmt: ColorFormat | str) -> str:
    """
    Encode quantized 8-bit channels as a CSS color string.

    Args:
        rgb: (r, g, b) in [0, 255]
        fmt: ``hex`` -> ``#rrggbb``, ``rgb`` -> ``rgb(r, g, b)``,
            ``hsl`` -> ``hsl(h, s%, l%)``

    Returns:
        The encoded string
    """
    fmt = ColorFormat(fmt)
    r, g, b = rgb
    if fmt == ColorFormat.HEX:
        return rgb255_to_hex(r, g, b)
    if fmt == ColorFormat.RGB:
        return f"rgb({r}, {g}, {b})"
    h, s, l = css_rgb_to_hsl(r / 255, g / 255, b / 255)
    return f"hsl({round_half_up(h) % 360}, {round_half_up(s * 100)}%, {round_half_up(l * 100)}%)"


## Vectorized helpers

def np_hex_to_lab(hex_colors: Iterable[str]) -> NDArray:
    """Vectorized: a sequence of hex strings to a Lab array of shape (n, 3)."""
    unit = np.array([hex_to_rgb255(c) for c in hex_colors], dtype=float).reshape(-1, 3) / 255
    return np_xyz_to_lab(np_linear_rgb_to_xyz(np_unit_rgb_to_linear_rgb(unit)))


def np_hex_to_lch(hex_colors: Iterable[str]) -> NDArray:
    """Vectorized diagnostic LCH, rounded half-up to integers."""
    lch = np_lab_to_lch(np_hex_to_lab(hex_colors))
    return np.floor(lch + 0.5).astype(int)


def np_lab_to_unit_rgb(lab: NDArray) -> NDArray:
    """Vectorized: Lab (..., 3) to unclamped gamma-encoded sRGB (..., 3)."""
    return np_linear_rgb_to_unit_rgb(np_xyz_to_linear_rgb(np_lab_to_xyz(lab)))


def np_hsl_to_unit_rgb(hsl: NDArray) -> NDArray:
    """Vectorized: HSL (..., 3) with S, L as fractions to sRGB (..., 3)."""
    hsl = np.asarray(hsl, dtype=float)
    return np_css_hsl_to_rgb(hsl[..., 0], hsl[..., 1], hsl[..., 2])
