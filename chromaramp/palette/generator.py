from __future__ import annotations

import logging
from typing import Iterator, NamedTuple

from ..types.format_type import ColorFormat
from .section import PaletteConfig, PaletteEntry, Section
from .strategies import get_strategy

logger = logging.getLogger(__name__)


class TableRow(NamedTuple):
    variable_name: str
    value: str
    percentage: float | None


def generate_section(section: Section, config: PaletteConfig) -> list[PaletteEntry]:
    """
    Generate the ordered entries for one section.

    Sections with an empty name or color yield no entries.
    """
    if not section.is_active:
        logger.debug("Skipping section %r: empty name or color", section.name)
        return []
    return get_strategy(config.strategy).generate(section, config.percentage_values)


def iter_palette(config: PaletteConfig) -> Iterator[tuple[Section, list[PaletteEntry]]]:
    for section in config.sections:
        entries = generate_section(section, config)
        if entries:
            yield section, entries


def generate_palette(config: PaletteConfig) -> list[tuple[Section, list[PaletteEntry]]]:
    """Every active section with its entries, in section order."""
    return list(iter_palette(config))


def _format(config: PaletteConfig, fmt: ColorFormat | str | None) -> ColorFormat:
    return ColorFormat(fmt) if fmt is not None else config.color_format


def generate_css_block(config: PaletteConfig, fmt: ColorFormat | str | None = None) -> str:
    """
    Render the custom property lines, one ``  --name: value;`` per entry.

    Args:
        config: Sections and shared settings
        fmt: Overrides ``config.color_format`` when given

    Returns:
        The concatenated lines, each ending in a newline
    """
    fmt = _format(config, fmt)
    return ''.join(
        f"  {entry.variable_name}: {entry.value(fmt)};\n"
        for _, entries in iter_palette(config)
        for entry in entries
    )


def generate_css(config: PaletteConfig, selector: str = ':root', fmt: ColorFormat | str | None = None) -> str:
    """Wrap :func:`generate_css_block` in ``selector { ... }``."""
    return f"{selector} {{\n{generate_css_block(config, fmt)}}}"


def palette_table(config: PaletteConfig, fmt: ColorFormat | str | None = None) -> list[tuple[str, list[TableRow]]]:
    """Per section: rows of (variable name, encoded value, percentage) for tabular display."""
    fmt = _format(config, fmt)
    return [
        (section.name, [TableRow(e.variable_name, e.value(fmt), e.percentage) for e in entries])
        for section, entries in iter_palette(config)
    ]
