import math
import re

from ..errors import InvalidColorError
from ..types.color_types import RGB255, Triple

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def round_half_up(value: float) -> int:
    """Round like ``Math.round``: halves go towards +infinity."""
    return int(math.floor(value + 0.5))


def hex_to_rgb255(hex_color: str) -> RGB255:
    """
    Decode a hex color string into 8-bit channels.

    Accepts ``#rrggbb``, ``rrggbb`` and the ``#rgb`` shorthand, any case.

    Args:
        hex_color: Hex encoded color

    Returns:
        Tuple[int, int, int]: (r, g, b) in [0, 255]

    Raises:
        InvalidColorError: if the string has the wrong length or non-hex digits
    """
    if not isinstance(hex_color, str):
        raise InvalidColorError(f"Hex color must be a string, got {type(hex_color).__name__}", hex_color)
    match = _HEX_RE.match(hex_color.strip())
    if match is None:
        raise InvalidColorError(f"Invalid hex color: {hex_color!r}", hex_color)
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def hex_to_unit_rgb(hex_color: str) -> Triple:
    """Decode a hex color to gamma-encoded sRGB floats in [0, 1]."""
    r, g, b = hex_to_rgb255(hex_color)
    return r / 255, g / 255, b / 255


def quantize(r: float, g: float, b: float) -> RGB255:
    """
    Convert gamma-encoded sRGB floats to 8-bit channels.

    This is the only place where out-of-gamut values are clamped: channels are
    scaled by 255, rounded half-up and clamped to [0, 255].

    Raises:
        InvalidColorError: if any channel is NaN or infinite
    """
    channels = (r, g, b)
    if not all(math.isfinite(c) for c in channels):
        raise InvalidColorError(f"Cannot quantize non-finite color {channels!r}", channels)
    return tuple(max(0, min(255, round_half_up(c * 255))) for c in channels)  # type: ignore[return-value]


def rgb255_to_hex(r: int, g: int, b: int) -> str:
    """Encode 8-bit channels as a lowercase ``#rrggbb`` string."""
    return f"#{int(r):02x}{int(g):02x}{int(b):02x}"
