"""
Chromaramp Color Space Conversions
==================================

Conversions between hex sRGB, linear RGB, CIE XYZ, CIE Lab, CIE LCH and HSL,
with scalar and vectorized (numpy) implementations.

Conversion Functions
--------------------

hex / sRGB:
    hex_to_rgb255(hex), hex_to_unit_rgb(hex), hex_to_linear_rgb(hex)
    quantize(r, g, b)
        The only clamping step: float sRGB -> 0-255 integers
    rgb255_to_hex(r, g, b)

Linear RGB ↔ XYZ ↔ Lab ↔ LCH (D65):
    linear_rgb_to_xyz, xyz_to_linear_rgb
    xyz_to_lab, lab_to_xyz
    lab_to_lch
    np_* counterparts operating on (..., 3) arrays

High-Level API
--------------
    hex_to_lab(hex)           unrounded Lab, used by ramp generation
    hex_to_lch(hex)           rounded LCH, diagnostic only
    lab_to_unit_rgb / lab_to_hex
    hex_to_hsl / hsl_to_unit_rgb / hsl_to_hex
    encode_rgb255(rgb, fmt)   hex / rgb() / hsl() strings

Lightness outside its nominal range is never clamped here; it is carried
through the inverse transforms and clamped once, at quantization.

Examples
--------
>>> from chromaramp.conversions import hex_to_lch, hex_to_lab, lab_to_hex
>>> hex_to_lch("#ff0000")
(53, 105, 40)
>>> l, a, b = hex_to_lab("#3366ff")
>>> lab_to_hex(l, a, b)
'#3366ff'
"""

from .hex import (
    hex_to_rgb255,
    hex_to_unit_rgb,
    quantize,
    rgb255_to_hex,
    round_half_up,
)
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

from .wrapper import (
    hex_to_linear_rgb,
    hex_to_lab,
    hex_to_lch,
    lab_to_unit_rgb,
    lab_to_hex,
    hex_to_hsl,
    hsl_to_unit_rgb,
    hsl_to_hex,
    encode_rgb255,
    np_hex_to_lab,
    np_hex_to_lch,
    np_lab_to_unit_rgb,
    np_hsl_to_unit_rgb,
)

from ..types.format_type import ColorFormat

__all__ = [
    # hex / sRGB
    'hex_to_rgb255',
    'hex_to_unit_rgb',
    'hex_to_linear_rgb',
    'quantize',
    'rgb255_to_hex',
    'round_half_up',
    'unit_rgb_to_linear_rgb',
    'linear_rgb_to_unit_rgb',
    'np_unit_rgb_to_linear_rgb',
    'np_linear_rgb_to_unit_rgb',

    # XYZ / Lab / LCH
    'linear_rgb_to_xyz',
    'xyz_to_linear_rgb',
    'xyz_to_lab',
    'lab_to_xyz',
    'lab_to_lch',
    'np_linear_rgb_to_xyz',
    'np_xyz_to_linear_rgb',
    'np_xyz_to_lab',
    'np_lab_to_xyz',
    'np_lab_to_lch',

    # HSL
    'css_rgb_to_hsl',
    'css_hsl_to_rgb',
    'np_css_hsl_to_rgb',

    # High-level API
    'hex_to_lab',
    'hex_to_lch',
    'lab_to_unit_rgb',
    'lab_to_hex',
    'hex_to_hsl',
    'hsl_to_unit_rgb',
    'hsl_to_hex',
    'encode_rgb255',
    'np_hex_to_lab',
    'np_hex_to_lch',
    'np_lab_to_unit_rgb',
    'np_hsl_to_unit_rgb',

    # Types
    'ColorFormat',
]
