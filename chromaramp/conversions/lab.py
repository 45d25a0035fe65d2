"""
CIE XYZ / Lab / LCH conversions (D65 reference white).

Scalar functions work on plain tuples; the ``np_`` variants take arrays whose
last dimension holds the three channels.
"""
import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Triple

# sRGB (D65) linear RGB -> XYZ, rows are X, Y, Z
RGB_TO_XYZ = np.array([
    [0.4124, 0.3576, 0.1805],
    [0.2126, 0.7152, 0.0722],
    [0.0193, 0.1192, 0.9505],
])
XYZ_TO_RGB = np.linalg.inv(RGB_TO_XYZ)

WHITE_D65 = (95.047, 100.000, 108.883)

EPSILON = 0.008856
KAPPA_SLOPE = 7.787
OFFSET = 16 / 116


def _f(t: float) -> float:
    return t ** (1 / 3) if t > EPSILON else KAPPA_SLOPE * t + OFFSET


def _f_inv(ft: float) -> float:
    cube = ft ** 3
    return cube if cube > EPSILON else (ft - OFFSET) / KAPPA_SLOPE


def linear_rgb_to_xyz(r: float, g: float, b: float) -> Triple:
    """
    Convert linear RGB to CIE XYZ.

    Args:
        r, g, b: Linear channels in [0, 1]

    Returns:
        Tuple[float, float, float]: (X, Y, Z) on the 0-100 scale
    """
    x, y, z = RGB_TO_XYZ @ (np.array([r, g, b], dtype=float) * 100)
    return float(x), float(y), float(z)


def xyz_to_linear_rgb(x: float, y: float, z: float) -> Triple:
    """Inverse of :func:`linear_rgb_to_xyz`. Out-of-gamut values are kept."""
    r, g, b = (XYZ_TO_RGB @ np.array([x, y, z], dtype=float)) / 100
    return float(r), float(g), float(b)


def xyz_to_lab(x: float, y: float, z: float) -> Triple:
    """
    Convert CIE XYZ to CIE Lab.

    Args:
        x, y, z: XYZ on the 0-100 scale

    Returns:
        Tuple[float, float, float]: (L, a, b)
    """
    xn, yn, zn = WHITE_D65
    fx, fy, fz = _f(x / xn), _f(y / yn), _f(z / zn)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def lab_to_xyz(l: float, a: float, b: float) -> Triple:
    """
    Convert CIE Lab to CIE XYZ.

    ``l`` is not restricted to [0, 100]; lightness beyond the range is
    extrapolated through the same curve.
    """
    xn, yn, zn = WHITE_D65
    fy = (l + 16) / 116
    fx = fy + a / 500
    fz = fy - b / 200
    return xn * _f_inv(fx), yn * _f_inv(fy), zn * _f_inv(fz)


def lab_to_lch(l: float, a: float, b: float) -> Triple:
    """
    Convert Lab to its polar form.

    Returns:
        Tuple[float, float, float]: (L, C, H) with H in [0, 360)
    """
    c = math.sqrt(a * a + b * b)
    h = math.degrees(math.atan2(b, a))
    if h < 0:
        h += 360
    return l, c, h


def np_linear_rgb_to_xyz(rgb: NDArray) -> NDArray:
    """Vectorized: linear RGB (..., 3) to XYZ (..., 3)."""
    return (np.asarray(rgb, dtype=float) * 100) @ RGB_TO_XYZ.T


def np_xyz_to_linear_rgb(xyz: NDArray) -> NDArray:
    """Vectorized: XYZ (..., 3) to linear RGB (..., 3)."""
    return (np.asarray(xyz, dtype=float) @ XYZ_TO_RGB.T) / 100


def np_xyz_to_lab(xyz: NDArray) -> NDArray:
    """Vectorized: XYZ (..., 3) to Lab (..., 3)."""
    t = np.asarray(xyz, dtype=float) / np.array(WHITE_D65)
    f = np.where(t > EPSILON, np.cbrt(t), KAPPA_SLOPE * t + OFFSET)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)], axis=-1)


def np_lab_to_xyz(lab: NDArray) -> NDArray:
    """Vectorized: Lab (..., 3) to XYZ (..., 3)."""
    lab = np.asarray(lab, dtype=float)
    fy = (lab[..., 0] + 16) / 116
    fx = fy + lab[..., 1] / 500
    fz = fy - lab[..., 2] / 200
    f = np.stack([fx, fy, fz], axis=-1)
    cube = f ** 3
    t = np.where(cube > EPSILON, cube, (f - OFFSET) / KAPPA_SLOPE)
    return t * np.array(WHITE_D65)


def np_lab_to_lch(lab: NDArray) -> NDArray:
    """Vectorized: Lab (..., 3) to LCH (..., 3), hue in [0, 360)."""
    lab = np.asarray(lab, dtype=float)
    l, a, b = lab[..., 0], lab[..., 1], lab[..., 2]
    c = np.hypot(a, b)
    h = np.degrees(np.arctan2(b, a))
    h = np.where(h < 0, h + 360, h)
    return np.stack([l, c, h], axis=-1)
