import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Triple


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return h % 360


## HSL to RGB conversions

def css_hsl_to_rgb(h: float, s: float, l: float) -> Triple:
    """
    Convert HSL to RGB using the CSS Color 4 algorithm.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#Converting_to_RGB

    Lightness and saturation are not clamped; a lightness beyond [0, 1]
    produces channels beyond [0, 1] which are clamped at quantization.

    Args:
        h: Hue in degrees
        s: Saturation, nominally in [0, 1]
        l: Lightness, nominally in [0, 1]

    Returns:
        Tuple[float, float, float]: gamma-encoded (r, g, b)
    """
    h = normalize_hue(h)

    m1 = l + s * (l if l < 0.5 else 1 - l)
    m2 = m1 - (m1 - l) * 2 * abs(((h / 60) % 2) - 1)
    low = 2 * l - m1

    hue_section = int(math.floor(h / 60))

    if hue_section == 0:
        return m1, m2, low
    if hue_section == 1:
        return m2, m1, low
    if hue_section == 2:
        return low, m1, m2
    if hue_section == 3:
        return low, m2, m1
    if hue_section == 4:
        return m2, low, m1
    return m1, low, m2


def np_css_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB using the CSS Color 4 algorithm.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation
        l: array-like or scalar, lightness

    Returns:
        rgb: array of shape (..., 3)
    """
    h = np.asarray(h, dtype=float) % 360
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    m1 = l + s * np.where(l < 0.5, l, 1 - l)
    m2 = m1 - (m1 - l) * 2 * np.abs(((h / 60) % 2) - 1)
    low = 2 * l - m1

    section = np.floor(h / 60).astype(int)
    sections = [section == i for i in range(5)]

    r = np.select(sections, [m1, m2, low, low, m2], default=m1)
    g = np.select(sections, [m2, m1, m1, m2, low], default=low)
    b = np.select(sections, [low, low, m2, m1, m1], default=m2)

    return np.stack([r, g, b], axis=-1)


## RGB to HSL conversions

def css_rgb_to_hsl(r: float, g: float, b: float) -> Triple:
    """
    Convert RGB to HSL using the CSS Color 4 algorithm.

    Achromatic colors report a hue of 0.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        return 0.0, 0.0, lightness

    saturation = delta / (1 - abs(2 * lightness - 1))

    if max_c == r:
        hue = (60 * ((g - b) / delta) + 360) % 360
    elif max_c == g:
        hue = (60 * ((b - r) / delta) + 120) % 360
    else:
        hue = (60 * ((r - g) / delta) + 240) % 360

    return hue, saturation, lightness
