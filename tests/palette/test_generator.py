from chromaramp.palette import (
    PaletteConfig,
    Section,
    generate_css,
    generate_css_block,
    generate_palette,
    generate_section,
    palette_table,
)
from dataclasses import replace
import re
import pytest

LINE_RE = re.compile(r"^  --color-[a-z]+-(contrast-)?\d+: (.+);$")


def test_end_to_end_lab_step(primary_section):
    config = PaletteConfig(sections=[primary_section], strategy="lab-step")
    entries = generate_section(primary_section, config)
    assert [e.variable_name for e in entries] == (
        [f"--color-primary-{i}00" for i in range(1, 10)]
        + [f"--color-primary-contrast-{i}00" for i in range(1, 10)]
    )


@pytest.mark.parametrize("section", [
    Section(name="", color="#ffffff"),
    Section(name="x", color=""),
    Section(name="", color="", include_edges=True),
])
@pytest.mark.parametrize("strategy", ["lab-step", "lab-percentage", "hsl-percentage"])
def test_inactive_sections_are_skipped(section, strategy):
    config = PaletteConfig(sections=[section], strategy=strategy)
    assert generate_section(section, config) == []
    assert generate_palette(config) == []
    assert generate_css_block(config) == ""
    assert palette_table(config) == []


def test_inactive_section_does_not_validate_color():
    config = PaletteConfig(sections=[Section(name="", color="not-a-color")])
    assert generate_css_block(config) == ""


def test_invalid_color_propagates():
    from chromaramp.errors import InvalidColorError
    config = PaletteConfig(sections=[Section(name="bad", color="#12345")])
    with pytest.raises(InvalidColorError):
        generate_css_block(config)


def test_palette_preserves_section_order(two_section_config):
    config = two_section_config.add_section(Section(name="", color="#000000")).add_section(
        Section(name="zeta", color="#00aa00", generate_contrast=False)
    )
    palette = generate_palette(config)
    assert [s.name for s, _ in palette] == ["primary", "accent", "zeta"]
    assert [len(entries) for _, entries in palette] == [18, 9, 9]


def test_css_block_lines(two_section_config):
    block = generate_css_block(two_section_config)
    lines = block.splitlines()
    assert block.endswith(";\n")
    assert len(lines) == 27
    assert all(LINE_RE.match(line) for line in lines)
    assert lines[0].startswith("  --color-primary-100: #")
    assert lines[4] == "  --color-primary-500: #3366ff;"
    assert lines[18].startswith("  --color-accent-100: ")


def test_css_block_uses_config_format(two_section_config):
    config = replace(two_section_config, color_format="rgb")
    lines = generate_css_block(config).splitlines()
    assert lines[4] == "  --color-primary-500: rgb(51, 102, 255);"
    lines = generate_css_block(config, fmt="hsl").splitlines()
    assert lines[4] == "  --color-primary-500: hsl(225, 100%, 60%);"


def test_generate_css_wraps_selector(two_section_config):
    css = generate_css(two_section_config)
    assert css.startswith(":root {\n  --color-primary-100: ")
    assert css.endswith(";\n}")
    assert generate_css(two_section_config, selector=".dark").startswith(".dark {\n")
    assert generate_css(PaletteConfig()) == ":root {\n}"


def test_palette_table(primary_section):
    config = PaletteConfig(sections=[primary_section], percentage_values=[10, 20, 30, 40, 50, 60, 70, 80, 90])
    table = palette_table(config, fmt="hex")
    assert len(table) == 1
    name, rows = table[0]
    assert name == "primary"
    assert len(rows) == 18
    assert rows[0].variable_name == "--color-primary-100"
    assert rows[0].percentage == pytest.approx(10)
    assert rows[9].percentage == pytest.approx(90)
    assert re.match(r"^#[0-9a-f]{6}$", rows[0].value)


def test_generation_does_not_mutate_config(two_section_config):
    before = (two_section_config.sections, two_section_config.percentage_values)
    generate_css(two_section_config)
    generate_css(replace(two_section_config, strategy="hsl-percentage"))
    assert (two_section_config.sections, two_section_config.percentage_values) == before


def test_generation_is_deterministic(two_section_config):
    assert generate_css(two_section_config) == generate_css(two_section_config)
