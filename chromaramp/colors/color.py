from __future__ import annotations
import math
from ..conversions import (
    hex_to_unit_rgb,
    lab_to_unit_rgb,
    hsl_to_unit_rgb,
    linear_rgb_to_xyz,
    unit_rgb_to_linear_rgb,
    xyz_to_lab,
    lab_to_lch,
    css_rgb_to_hsl,
    quantize,
    rgb255_to_hex,
    encode_rgb255,
)
from ..errors import InvalidColorError
from ..types.format_type import ColorFormat
from ..types.color_types import RGB255, Triple


class Color:
    """
    Immutable color value.

    Stores gamma-encoded sRGB as floats without clamping, so a color built
    from an extrapolated lightness keeps its out-of-gamut channels until it is
    quantized for output.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, unit_rgb: Triple) -> None:
        if len(unit_rgb) != 3:
            raise ValueError(f"Color expects 3 channels, got {len(unit_rgb)}")
        value = tuple(float(c) for c in unit_rgb)
        if not all(math.isfinite(c) for c in value):
            raise InvalidColorError(f"Color channels must be finite, got {value!r}", value)
        self._value = value
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_hex(cls, hex_color: str) -> Color:
        return cls(hex_to_unit_rgb(hex_color))

    @classmethod
    def from_lab(cls, l: float, a: float, b: float) -> Color:
        return cls(lab_to_unit_rgb(l, a, b))

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> Color:
        """Build from HSL with S and L as fractions (not percentages)."""
        return cls(hsl_to_unit_rgb(h, s, l))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def unit_rgb(self) -> Triple:
        return self._value  # type: ignore[return-value]

    @property
    def rgb(self) -> RGB255:
        """Quantized 0-255 channels (clamped)."""
        return quantize(*self._value)

    @property
    def hex(self) -> str:
        return rgb255_to_hex(*self.rgb)

    @property
    def lab(self) -> Triple:
        return xyz_to_lab(*linear_rgb_to_xyz(*unit_rgb_to_linear_rgb(*self._value)))

    @property
    def lch(self) -> Triple:
        return lab_to_lch(*self.lab)

    @property
    def hsl(self) -> Triple:
        return css_rgb_to_hsl(*self._value)

    def encode(self, fmt: ColorFormat | str = ColorFormat.HEX) -> str:
        return encode_rgb255(self.rgb, fmt)

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Color({self.hex!r})"

    def __str__(self) -> str:
        return self.hex


def encode(color: Color | str, fmt: ColorFormat | str = ColorFormat.HEX) -> str:
    """
    Encode a color as a CSS string.

    Args:
        color: A :class:`Color` or a hex string
        fmt: Target :class:`ColorFormat`

    Returns:
        ``#rrggbb``, ``rgb(r, g, b)`` or ``hsl(h, s%, l%)``
    """
    if isinstance(color, str):
        color = Color.from_hex(color)
    return color.encode(fmt)
