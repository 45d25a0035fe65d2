"""
Ramp generation strategies.

All three variants share one interface, :class:`GenerationStrategy`, and are
looked up by :class:`StrategyKind`:

- ``lab-step``: base Lab lightness ±10 per step, optional edge entries
- ``lab-percentage``: Lab lightness taken from the shared control points
- ``hsl-percentage``: HSL lightness taken from the control points, inversion
  by reversing the control point order

Lightness is never clamped here. Control points such as 120 or -10 are
extrapolated and only clamped when the color is quantized for output.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np
from numpy import ndarray as NDArray

from ..colors import Color
from ..conversions import hex_to_lab, hex_to_hsl, np_lab_to_unit_rgb, np_hsl_to_unit_rgb
from .section import NUM_STEPS, PaletteEntry, Section, StrategyKind

logger = logging.getLogger(__name__)

STEP_SIZE = 10
MIDPOINT_STEP = 5


def slot_name(step: int) -> str:
    """Slot label for zero-based step ``step``: 0 -> '100', 8 -> '900'."""
    return str((step + 1) * 100)


def variable_name(section_name: str, slot: str, contrast: bool = False) -> str:
    if contrast:
        return f"--color-{section_name}-contrast-{slot}"
    return f"--color-{section_name}-{slot}"


def _colors_from_rows(rgb: NDArray) -> list[Color]:
    return [Color(tuple(row)) for row in rgb]


def lab_ramp(lightness: Sequence[float] | NDArray, a: float, b: float) -> list[Color]:
    """Colors with the given Lab lightness values and fixed chroma axes."""
    ls = np.asarray(lightness, dtype=float)
    lab = np.stack([ls, np.full_like(ls, a), np.full_like(ls, b)], axis=-1)
    return _colors_from_rows(np_lab_to_unit_rgb(lab))


def hsl_ramp(lightness: Sequence[float] | NDArray, h: float, s: float) -> list[Color]:
    """Colors with the given HSL lightness fractions and fixed hue/saturation."""
    ls = np.asarray(lightness, dtype=float)
    hsl = np.stack([np.full_like(ls, h), np.full_like(ls, s), ls], axis=-1)
    return _colors_from_rows(np_hsl_to_unit_rgb(hsl))


class GenerationStrategy(ABC):
    """Turns one active section into its ordered palette entries."""

    kind: StrategyKind

    @abstractmethod
    def generate(self, section: Section, percentage_values: Sequence[float]) -> list[PaletteEntry]:
        ...

    def _block(
        self,
        section: Section,
        colors: list[Color],
        contrast: bool = False,
        percentages: Sequence[float] | None = None,
    ) -> list[PaletteEntry]:
        return [
            PaletteEntry(
                variable_name(section.name, slot_name(i), contrast),
                color,
                None if percentages is None else float(percentages[i]),
            )
            for i, color in enumerate(colors)
        ]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class FixedLabStepStrategy(GenerationStrategy):
    """
    Step ``i`` (1..9) sits at ``baseL ± (i - 5) * 10`` with a/b held fixed.

    ``inverse`` flips the sign of the offset, so step 5 is always the base
    lightness. Contrast entries use ``100 - L`` of the matching step. With
    ``include_edges`` the block is framed by ``-0`` (base color, unmodified)
    and ``-1000`` (L = 100); the contrast block by ``contrast-0`` (L = 100) and
    ``contrast-1000`` (L = 0).
    """

    kind = StrategyKind.LAB_STEP

    @staticmethod
    def step_lightness(base_l: float, inverse: bool) -> NDArray:
        offsets = (np.arange(1, NUM_STEPS + 1) - MIDPOINT_STEP) * STEP_SIZE
        return base_l - offsets if inverse else base_l + offsets

    def generate(self, section: Section, percentage_values: Sequence[float]) -> list[PaletteEntry]:
        base_l, a, b = hex_to_lab(section.color)
        lightness = self.step_lightness(base_l, section.inverse)

        entries: list[PaletteEntry] = []
        if section.include_edges:
            edge_low, edge_high = lab_ramp([base_l, 100], a, b)
            entries.append(PaletteEntry(variable_name(section.name, '0'), edge_low))
        entries += self._block(section, lab_ramp(lightness, a, b))
        if section.include_edges:
            entries.append(PaletteEntry(variable_name(section.name, '1000'), edge_high))

        if section.generate_contrast:
            if section.include_edges:
                contrast_low, contrast_high = lab_ramp([100, 0], a, b)
                entries.append(PaletteEntry(variable_name(section.name, '0', True), contrast_low))
            entries += self._block(section, lab_ramp(100 - lightness, a, b), contrast=True)
            if section.include_edges:
                entries.append(PaletteEntry(variable_name(section.name, '1000', True), contrast_high))
        return entries


class LabPercentageStrategy(GenerationStrategy):
    """
    Step ``i`` sits at Lab ``L = percentage_values[i]`` with a/b held fixed.

    Contrast uses the complement ``100 - L``. ``inverse`` complements the ramp
    itself, so the ramp and contrast blocks swap.
    """

    kind = StrategyKind.LAB_PERCENTAGE

    def generate(self, section: Section, percentage_values: Sequence[float]) -> list[PaletteEntry]:
        _, a, b = hex_to_lab(section.color)
        brightness = np.asarray(percentage_values, dtype=float) / 100
        if section.inverse:
            brightness = 1 - brightness
        lightness = brightness * 100

        entries = self._block(section, lab_ramp(lightness, a, b), percentages=lightness)
        if section.generate_contrast:
            contrast = (1 - brightness) * 100
            entries += self._block(section, lab_ramp(contrast, a, b), contrast=True, percentages=contrast)
        return entries


class HslPercentageStrategy(GenerationStrategy):
    """
    Step ``i`` sits at HSL ``L = values[i] / 100`` with hue and saturation
    taken once from the base color.

    ``values`` is the control point array, reversed when ``inverse`` is set.
    Contrast uses ``(100 - values[i]) / 100``.
    """

    kind = StrategyKind.HSL_PERCENTAGE

    def generate(self, section: Section, percentage_values: Sequence[float]) -> list[PaletteEntry]:
        h, s, _ = hex_to_hsl(section.color)
        values = np.asarray(percentage_values, dtype=float)
        if section.inverse:
            values = values[::-1]

        entries = self._block(section, hsl_ramp(values / 100, h, s), percentages=values)
        if section.generate_contrast:
            contrast = 100 - values
            entries += self._block(section, hsl_ramp(contrast / 100, h, s), contrast=True, percentages=contrast)
        return entries


STRATEGIES: dict[StrategyKind, GenerationStrategy] = {
    strategy.kind: strategy
    for strategy in (FixedLabStepStrategy(), LabPercentageStrategy(), HslPercentageStrategy())
}


def get_strategy(kind: StrategyKind | str) -> GenerationStrategy:
    try:
        strategy = STRATEGIES[StrategyKind(kind)]
    except ValueError:
        raise ValueError(
            f"Unknown generation strategy {kind!r}. Available: {', '.join(k.value for k in StrategyKind)}"
        ) from None
    logger.debug("Using %r for strategy %s", strategy, strategy.kind.value)
    return strategy
