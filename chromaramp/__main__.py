"""chromaramp: generate CSS color ramps from a palette configuration.

Usage: python -m chromaramp <command> [options]

Commands:
  css CONFIG     print the palette as CSS custom properties
  table CONFIG   print one table per section: variable, value, percentage
  lch HEX...     print the rounded CIE LCH of each color

CONFIG is a JSON file as written by chromaramp.palette.dump (or a legacy
bare list of sections). --format and --strategy override the values stored
in the file.
"""

import argparse
import logging
import sys
from dataclasses import replace

from chromaramp.conversions import np_hex_to_lch
from chromaramp.errors import ChromarampError
from chromaramp.palette import PaletteConfig, StrategyKind, generate_css, load, palette_table
from chromaramp.types.format_type import ColorFormat

logger = logging.getLogger('chromaramp')


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  chromaramp css palette.json\n'
        '  chromaramp css palette.json --format hsl --selector ".theme-dark"\n'
        '  chromaramp table sections.json --strategy lab-step\n'
        '  chromaramp lch "#ff0000" "#3366ff"\n'
    )
    parser = argparse.ArgumentParser(
        prog='chromaramp',
        description='Generate CSS color ramps from a base color configuration.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, help_text in (('css', 'Print CSS custom properties'), ('table', 'Print palette tables')):
        p = sub.add_parser(name, help=help_text)
        p.add_argument('config', help='Path to the JSON configuration')
        p.add_argument(
            '-f',
            '--format',
            choices=[f.value for f in ColorFormat],
            default=None,
            help='Color encoding (default: value stored in the config)',
        )
        p.add_argument(
            '-s',
            '--strategy',
            choices=[k.value for k in StrategyKind],
            default=None,
            help='Generation strategy (default: value stored in the config)',
        )
        if name == 'css':
            p.add_argument('--selector', default=':root', help='CSS selector wrapping the block (default: :root)')

    lch = sub.add_parser('lch', help='Print rounded CIE LCH values')
    lch.add_argument('colors', nargs='+', metavar='HEX', help='Hex colors such as #ff0000')

    return parser


def _load_config(args: argparse.Namespace) -> PaletteConfig:
    config = load(args.config)
    if args.format:
        config = replace(config, color_format=ColorFormat(args.format))
    if args.strategy:
        config = replace(config, strategy=StrategyKind(args.strategy))
    logger.debug('Loaded %d section(s) from %s', len(config.sections), args.config)
    return config


def _print_table(config: PaletteConfig) -> None:
    for section_name, rows in palette_table(config):
        print(f'[{section_name}]')
        width = max(len(row.variable_name) for row in rows)
        for row in rows:
            pct = '' if row.percentage is None else f'  {row.percentage:g}%'
            print(f'  {row.variable_name:<{width}}  {row.value}{pct}')
        print()


def _print_lch(colors: list[str]) -> None:
    for hex_color, (l, c, h) in zip(colors, np_hex_to_lch(colors)):
        print(f'{hex_color}  L={l} C={c} H={h}')


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s: %(message)s',
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == 'lch':
            _print_lch(args.colors)
        elif args.command == 'css':
            print(generate_css(_load_config(args), selector=args.selector))
        else:
            _print_table(_load_config(args))
    except (ChromarampError, OSError) as e:
        print(f'error: {e}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
