"""
Configuration interchange.

The JSON layout keeps the camelCase keys of the exported ``sections.json``
files::

    {
      "sections": [{"name": "primary", "color": "#3366ff",
                    "generateContrast": true, "inverse": false,
                    "includeEdges": false}],
      "colorFormat": "hex",
      "percentageValues": [5, 15, 25, 35, 45, 55, 65, 75, 85],
      "strategy": "lab-percentage"
    }

A bare list of sections (the older export format) is also accepted and is
read as a ``lab-step`` configuration.
"""

from __future__ import annotations

import json
import logging
import math
from numbers import Real
from pathlib import Path
from typing import Any

from ..errors import ConfigParseError
from ..types.format_type import ColorFormat
from .section import DEFAULT_PERCENTAGE_VALUES, NUM_STEPS, PaletteConfig, Section, StrategyKind

logger = logging.getLogger(__name__)

# JSON key -> (Section attribute, expected type, required)
_SECTION_FIELDS: dict[str, tuple[str, type, bool]] = {
    'name': ('name', str, True),
    'color': ('color', str, True),
    'generateContrast': ('generate_contrast', bool, False),
    'inverse': ('inverse', bool, False),
    'includeEdges': ('include_edges', bool, False),
}


def section_to_dict(section: Section) -> dict[str, Any]:
    return {key: getattr(section, attr) for key, (attr, _, _) in _SECTION_FIELDS.items()}


def section_from_dict(data: Any, path: str = 'sections') -> Section:
    if not isinstance(data, dict):
        raise ConfigParseError(f"expected an object, got {type(data).__name__}", path)
    kwargs: dict[str, Any] = {}
    for key, (attr, expected, required) in _SECTION_FIELDS.items():
        if key not in data:
            if required:
                raise ConfigParseError(f"missing required field {key!r}", path)
            continue
        value = data[key]
        if not isinstance(value, expected):
            raise ConfigParseError(
                f"field {key!r} must be {expected.__name__}, got {type(value).__name__}", path
            )
        kwargs[attr] = value
    return Section(**kwargs)


def config_to_dict(config: PaletteConfig) -> dict[str, Any]:
    return {
        'sections': [section_to_dict(s) for s in config.sections],
        'colorFormat': config.color_format.value,
        'percentageValues': list(config.percentage_values),
        'strategy': config.strategy.value,
    }


def _parse_percentages(value: Any) -> tuple[float, ...]:
    path = 'percentageValues'
    if not isinstance(value, list):
        raise ConfigParseError(f"expected a list, got {type(value).__name__}", path)
    if len(value) != NUM_STEPS:
        raise ConfigParseError(f"expected {NUM_STEPS} values, got {len(value)}", path)
    for i, v in enumerate(value):
        if isinstance(v, bool) or not isinstance(v, Real):
            raise ConfigParseError(f"value {v!r} is not a number", f"{path}[{i}]")
        if not math.isfinite(v):
            raise ConfigParseError(f"value {v!r} is not finite", f"{path}[{i}]")
    return tuple(value)


def _parse_enum(enum_cls: type, value: Any, path: str):
    try:
        return enum_cls(value)
    except ValueError as e:
        choices = ', '.join(m.value for m in enum_cls)
        raise ConfigParseError(f"unknown value {value!r} (expected one of {choices})", path) from e


def config_from_dict(data: Any) -> PaletteConfig:
    """
    Build a :class:`PaletteConfig` from a decoded JSON value.

    Raises:
        ConfigParseError: if the value does not have the expected structure
    """
    if isinstance(data, list):
        logger.debug("Reading legacy section list (%d sections)", len(data))
        data = {'sections': data, 'strategy': StrategyKind.LAB_STEP.value}
    if not isinstance(data, dict):
        raise ConfigParseError(f"expected an object or a list, got {type(data).__name__}")
    if 'sections' not in data:
        raise ConfigParseError("missing required field 'sections'")

    raw_sections = data['sections']
    if not isinstance(raw_sections, list):
        raise ConfigParseError(f"expected a list, got {type(raw_sections).__name__}", 'sections')
    sections = tuple(section_from_dict(s, f"sections[{i}]") for i, s in enumerate(raw_sections))

    percentages = DEFAULT_PERCENTAGE_VALUES
    if 'percentageValues' in data:
        percentages = _parse_percentages(data['percentageValues'])

    return PaletteConfig(
        sections=sections,
        color_format=_parse_enum(ColorFormat, data.get('colorFormat', ColorFormat.HEX.value), 'colorFormat'),
        percentage_values=percentages,
        strategy=_parse_enum(StrategyKind, data.get('strategy', StrategyKind.LAB_PERCENTAGE.value), 'strategy'),
    )


def dumps(config: PaletteConfig, indent: int | None = 2) -> str:
    try:
        return json.dumps(config_to_dict(config), indent=indent, allow_nan=False)
    except ValueError as e:
        raise ConfigParseError(f"cannot serialize non-finite value: {e}", "percentageValues") from e


def loads(text: str) -> PaletteConfig:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"invalid JSON: {e}") from e
    return config_from_dict(data)


def dump(config: PaletteConfig, path: str | Path) -> None:
    Path(path).write_text(dumps(config) + '\n', encoding='utf-8')


def load(path: str | Path) -> PaletteConfig:
    return loads(Path(path).read_text(encoding='utf-8'))
