"""Basic Chromaramp usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromaramp import (
    Color,
    PaletteConfig,
    Section,
    StrategyKind,
    generate_css,
    hex_to_lch,
    palette_table,
)
from chromaramp.types.format_type import ColorFormat


def demonstrate_colors() -> None:
    # Decode, inspect and re-encode a single color.
    accent = Color.from_hex("#3366ff")
    print("Lab:", accent.lab)
    print("LCH (rounded):", hex_to_lch(accent.hex))
    print("as rgb():", accent.encode(ColorFormat.RGB))
    print("as hsl():", accent.encode(ColorFormat.HSL))

    # Lightness past 100 is extrapolated and clamps only on output.
    print("L=140:", Color.from_lab(140, *accent.lab[1:]).hex)


def demonstrate_palettes() -> None:
    config = PaletteConfig(
        sections=[
            Section(name="primary", color="#3366ff"),
            Section(name="neutral", color="#808080", generate_contrast=False, include_edges=True),
        ],
        strategy=StrategyKind.LAB_STEP,
    )
    print(generate_css(config))

    # Same sections, HSL control points, inverted primary.
    hsl_config = config.update_section(0, inverse=True)
    hsl_config = PaletteConfig(
        sections=hsl_config.sections,
        strategy=StrategyKind.HSL_PERCENTAGE,
        color_format=ColorFormat.HSL,
    )
    for name, rows in palette_table(hsl_config):
        print(name)
        for row in rows:
            print(f"  {row.variable_name:<28} {row.value:<22} {row.percentage:g}%")


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_palettes()
