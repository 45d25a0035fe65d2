"""
Chromaramp - Color Ramp Generation for Design Tokens
====================================================

Derives named lightness ramps from a base color and emits them as CSS custom
properties.

Key Features
------------
- hex ↔ linear RGB ↔ CIE XYZ ↔ CIE Lab ↔ CIE LCH and sRGB ↔ HSL conversions
- Three ramp strategies: fixed Lab steps, Lab control points, HSL control points
- Contrast ramps, inversion and edge entries
- hex / rgb() / hsl() output
- Lossless JSON configuration interchange

Quick Start
-----------
>>> from chromaramp import PaletteConfig, Section, generate_css
>>> config = PaletteConfig(
...     sections=[Section(name="primary", color="#3366ff")],
...     strategy="lab-step",
...     color_format="rgb",
... )
>>> css = generate_css(config)
>>>
>>> from chromaramp import hex_to_lch
>>> hex_to_lch("#ff0000")
(53, 105, 40)

Modules
-------
- conversions: color space conversion functions
- colors: the immutable Color value
- palette: sections, strategies, generation and serialization
"""

from .errors import ChromarampError, InvalidColorError, ConfigParseError
from .types.format_type import ColorFormat
from .colors import Color, encode
from .conversions import (
    hex_to_linear_rgb,
    linear_rgb_to_xyz,
    xyz_to_lab,
    lab_to_lch,
    hex_to_lab,
    hex_to_lch,
    lab_to_hex,
    hex_to_hsl,
    hsl_to_hex,
)
from .palette import (
    Section,
    PaletteConfig,
    PaletteEntry,
    StrategyKind,
    GenerationStrategy,
    get_strategy,
    generate_section,
    generate_palette,
    generate_css_block,
    generate_css,
    palette_table,
    dumps,
    loads,
    dump,
    load,
)

__version__ = "1.0.0"

__all__ = [
    # Errors
    "ChromarampError",
    "InvalidColorError",
    "ConfigParseError",

    # Colors
    "ColorFormat",
    "Color",
    "encode",

    # Conversions
    "hex_to_linear_rgb",
    "linear_rgb_to_xyz",
    "xyz_to_lab",
    "lab_to_lch",
    "hex_to_lab",
    "hex_to_lch",
    "lab_to_hex",
    "hex_to_hsl",
    "hsl_to_hex",

    # Palette generation
    "Section",
    "PaletteConfig",
    "PaletteEntry",
    "StrategyKind",
    "GenerationStrategy",
    "get_strategy",
    "generate_section",
    "generate_palette",
    "generate_css_block",
    "generate_css",
    "palette_table",

    # Interchange
    "dumps",
    "loads",
    "dump",
    "load",

    # Version
    "__version__",
]
