"""Configuration records for palette generation: Section, PaletteConfig, PaletteEntry."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from ..colors import Color
from ..types.format_type import ColorFormat

NUM_STEPS = 9
DEFAULT_PERCENTAGE_VALUES: tuple[float, ...] = tuple(5 + 10 * i for i in range(NUM_STEPS))


class StrategyKind(str, Enum):
    LAB_STEP = "lab-step"
    LAB_PERCENTAGE = "lab-percentage"
    HSL_PERCENTAGE = "hsl-percentage"


@dataclass(frozen=True)
class Section:
    """One named ramp request. Inactive (skipped) when name or color is empty."""

    name: str = ''
    color: str = '#ffffff'
    generate_contrast: bool = True
    inverse: bool = False
    include_edges: bool = False  # only honoured by the lab-step strategy

    @property
    def is_active(self) -> bool:
        return bool(self.name) and bool(self.color)


@dataclass(frozen=True)
class PaletteEntry:
    """A generated color and the CSS custom property it is emitted as."""

    variable_name: str
    color: Color
    percentage: float | None = None  # control point applied, percentage strategies only

    def value(self, fmt: ColorFormat | str = ColorFormat.HEX) -> str:
        return self.color.encode(fmt)


@dataclass(frozen=True)
class PaletteConfig:
    """
    Immutable generation request: ordered sections plus the shared settings.

    Every editing helper returns a new config; the generator only reads it.
    """

    sections: tuple[Section, ...] = ()
    color_format: ColorFormat = ColorFormat.HEX
    percentage_values: tuple[float, ...] = DEFAULT_PERCENTAGE_VALUES
    strategy: StrategyKind = StrategyKind.LAB_PERCENTAGE

    def __post_init__(self) -> None:
        # Accept lists and plain strings from callers, store tuples and enums.
        object.__setattr__(self, 'sections', tuple(self.sections))
        object.__setattr__(self, 'percentage_values', tuple(self.percentage_values))
        object.__setattr__(self, 'color_format', ColorFormat(self.color_format))
        object.__setattr__(self, 'strategy', StrategyKind(self.strategy))
        if len(self.percentage_values) != NUM_STEPS:
            raise ValueError(
                f"percentage_values must hold {NUM_STEPS} values, got {len(self.percentage_values)}"
            )

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.sections):
            raise IndexError(f"Section index {index} out of range (0..{len(self.sections) - 1})")

    def add_section(self, section: Section | None = None) -> PaletteConfig:
        return replace(self, sections=self.sections + (section or Section(),))

    def update_section(self, index: int, **changes: Any) -> PaletteConfig:
        self._check_index(index)
        sections = list(self.sections)
        sections[index] = replace(sections[index], **changes)
        return replace(self, sections=tuple(sections))

    def remove_section(self, index: int) -> PaletteConfig:
        self._check_index(index)
        return replace(self, sections=self.sections[:index] + self.sections[index + 1:])

    def move_section_up(self, index: int) -> PaletteConfig:
        """Swap with the previous section; no-op for the first one."""
        self._check_index(index)
        if index == 0:
            return self
        return self._swap(index - 1, index)

    def move_section_down(self, index: int) -> PaletteConfig:
        """Swap with the next section; no-op for the last one."""
        self._check_index(index)
        if index == len(self.sections) - 1:
            return self
        return self._swap(index, index + 1)

    def _swap(self, i: int, j: int) -> PaletteConfig:
        sections = list(self.sections)
        sections[i], sections[j] = sections[j], sections[i]
        return replace(self, sections=tuple(sections))

    def with_percentage(self, index: int, value: float) -> PaletteConfig:
        """Replace one control point. The value is not range checked."""
        if not 0 <= index < NUM_STEPS:
            raise IndexError(f"Percentage index {index} out of range (0..{NUM_STEPS - 1})")
        values = list(self.percentage_values)
        values[index] = value
        return replace(self, percentage_values=tuple(values))
