"""
Chromaramp Palette Generation
=============================

Turns a :class:`PaletteConfig` (ordered sections, output format, shared
percentage control points and a strategy) into CSS custom properties.

>>> from chromaramp.palette import PaletteConfig, Section, generate_css
>>> config = PaletteConfig(sections=[Section("primary", "#3366ff")], strategy="lab-step")
>>> print(generate_css(config))  # doctest: +ELLIPSIS
:root {
  --color-primary-100: #...;
...
}
"""
from .section import (
    NUM_STEPS,
    DEFAULT_PERCENTAGE_VALUES,
    Section,
    PaletteConfig,
    PaletteEntry,
    StrategyKind,
)
from .strategies import (
    GenerationStrategy,
    FixedLabStepStrategy,
    LabPercentageStrategy,
    HslPercentageStrategy,
    STRATEGIES,
    get_strategy,
)
from .generator import (
    TableRow,
    generate_section,
    generate_palette,
    generate_css_block,
    generate_css,
    palette_table,
)
from .serialization import config_to_dict, config_from_dict, dumps, loads, dump, load

__all__ = [
    # configuration
    "NUM_STEPS",
    "DEFAULT_PERCENTAGE_VALUES",
    "Section",
    "PaletteConfig",
    "PaletteEntry",
    "StrategyKind",
    # strategies
    "GenerationStrategy",
    "FixedLabStepStrategy",
    "LabPercentageStrategy",
    "HslPercentageStrategy",
    "STRATEGIES",
    "get_strategy",
    # generation
    "TableRow",
    "generate_section",
    "generate_palette",
    "generate_css_block",
    "generate_css",
    "palette_table",
    # interchange
    "config_to_dict",
    "config_from_dict",
    "dumps",
    "loads",
    "dump",
    "load",
]
