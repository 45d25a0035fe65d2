import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Triple

# sRGB transfer function breakpoints
_EXPAND_THRESHOLD = 0.04045
_COMPRESS_THRESHOLD = 0.0031308


def expand_channel(c: float) -> float:
    """Gamma-expand one sRGB channel in [0, 1] to linear light."""
    if c > _EXPAND_THRESHOLD:
        return ((c + 0.055) / 1.055) ** 2.4
    return c / 12.92


def compress_channel(c: float) -> float:
    """Gamma-compress one linear channel back to sRGB. Not clamped."""
    if c > _COMPRESS_THRESHOLD:
        return 1.055 * c ** (1 / 2.4) - 0.055
    return c * 12.92


def unit_rgb_to_linear_rgb(r: float, g: float, b: float) -> Triple:
    """
    Convert gamma-encoded sRGB to linear RGB.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: linear (r, g, b) in [0, 1]
    """
    return expand_channel(r), expand_channel(g), expand_channel(b)


def linear_rgb_to_unit_rgb(r: float, g: float, b: float) -> Triple:
    """
    Convert linear RGB to gamma-encoded sRGB.

    Values outside [0, 1] are passed through untouched so that extrapolated
    lightness survives until quantization.
    """
    return compress_channel(r), compress_channel(g), compress_channel(b)


def np_unit_rgb_to_linear_rgb(rgb: NDArray) -> NDArray:
    """Vectorized: gamma-expand an array of shape (..., 3)."""
    rgb = np.asarray(rgb, dtype=float)
    return np.where(rgb > _EXPAND_THRESHOLD, ((rgb + 0.055) / 1.055) ** 2.4, rgb / 12.92)


def np_linear_rgb_to_unit_rgb(rgb: NDArray) -> NDArray:
    """Vectorized: gamma-compress an array of shape (..., 3)."""
    rgb = np.asarray(rgb, dtype=float)
    # np.where evaluates both branches; feed the power a positive base.
    safe = np.where(rgb > _COMPRESS_THRESHOLD, rgb, _COMPRESS_THRESHOLD)
    return np.where(rgb > _COMPRESS_THRESHOLD, 1.055 * safe ** (1 / 2.4) - 0.055, rgb * 12.92)
