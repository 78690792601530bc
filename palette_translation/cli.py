#!/usr/bin/env python3
"""
Palette translation command line tool

Usage:
    python -m palette_translation parse "0:16=32:48"
    python -m palette_translation analyze TRANTBL0.lmp
    python -m palette_translation translate "0:16=32:48" --palette PLAYPAL.lmp --index 8
    python -m palette_translation apply "Ice" --palette PLAYPAL.lmp --output ice.pal
"""

import argparse
import sys
from typing import Optional

from .colour import Colour
from .constants import PALETTE_EXPORT_FORMATS
from .exceptions import TranslationError, format_error_message
from .logging_config import get_logger, parse_log_level, setup_logging
from .palette import Palette
from .settings_manager import get_settings
from .table_analyzer import read_table_file
from .translation import Translation, translation_from_table

logger = get_logger("cli")


def describe_colour(colour: Colour) -> str:
    index = "unresolved" if colour.index is None else str(colour.index)
    return f"{colour.as_hex()} rgb({colour.r}, {colour.g}, {colour.b}) index {index}"


def cmd_parse(args) -> int:
    translation = Translation()
    complete = translation.parse(args.definition)
    print(translation.as_text())
    if translation.built_in_name:
        print(f"Built-in preset: {translation.built_in_name}")
    for i, trange in enumerate(translation):
        print(f"  {i}: {trange.type.value:8s} {trange.as_text()}")
    if not complete:
        print("Warning: definition is malformed, parsing stopped early", file=sys.stderr)
        return 1
    get_settings().add_recent_definition(args.definition)
    return 0


def cmd_analyze(args) -> int:
    table = read_table_file(args.table, offset=args.offset)
    translation = translation_from_table(table)
    if translation.is_empty():
        print("(identity table, no translation ranges)")
    else:
        print(translation.as_text())
    return 0


def cmd_translate(args) -> int:
    translation, palette = _load_translation_and_palette(args)
    if translation is None:
        return 1
    if not 0 <= args.index <= 255:
        print(f"Error: index must be 0-255, got {args.index}", file=sys.stderr)
        return 1

    weights = get_settings().get_greyscale_weights()
    source = palette.colour(args.index)
    result = translation.translate(source, palette, weights)
    print(f"Input:  {describe_colour(source)}")
    print(f"Output: {describe_colour(result)}")
    return 0


def cmd_apply(args) -> int:
    translation, palette = _load_translation_and_palette(args)
    if translation is None:
        return 1

    weights = get_settings().get_greyscale_weights()
    translated = translation.translate_palette(palette, weights)
    translated.name = f"{palette.name} ({translation.as_text()})"
    translated.save(args.output, args.format)
    print(f"Wrote translated palette to {args.output}")
    return 0


def _load_translation_and_palette(args) -> tuple[Optional[Translation], Palette]:
    palette = Palette.from_file(args.palette)
    get_settings().update_last_palette(args.palette)

    translation = Translation()
    if not translation.parse(args.definition):
        print(f"Error: malformed translation definition: {args.definition}", file=sys.stderr)
        return None, palette
    return translation, palette


def log_level_argument(value: str) -> str:
    try:
        return parse_log_level(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="palette_translation",
        description="Parse, analyze and apply ZDoom style palette translations",
    )
    parser.add_argument("--log-level", type=log_level_argument, default="WARNING",
                        help="Logging level (DEBUG, INFO, ...)")
    parser.add_argument("--log-file", default=None, help="Optional log file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("parse", help="Parse a definition and print its ranges")
    p.add_argument("definition", help='Translation definition, e.g. "0:16=32:48"')
    p.set_defaults(func=cmd_parse)

    p = subparsers.add_parser("analyze", help="Infer a definition from a raw 256-byte table")
    p.add_argument("table", help="Translation table file")
    p.add_argument("--offset", type=lambda v: int(v, 0), default=0,
                   help="Byte offset of the table in the file (hex with 0x)")
    p.set_defaults(func=cmd_analyze)

    p = subparsers.add_parser("translate", help="Translate a single palette index")
    p.add_argument("definition", help="Translation definition")
    p.add_argument("--palette", required=True, help="Palette file")
    p.add_argument("--index", type=int, required=True, help="Palette index to translate")
    p.set_defaults(func=cmd_translate)

    p = subparsers.add_parser("apply", help="Write a palette with the translation applied")
    p.add_argument("definition", help="Translation definition")
    p.add_argument("--palette", required=True, help="Palette file")
    p.add_argument("--output", required=True, help="Output palette file")
    p.add_argument("--format", choices=PALETTE_EXPORT_FORMATS, default=None,
                   help="Output format (default: from output suffix)")
    p.set_defaults(func=cmd_apply)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        return args.func(args)
    except TranslationError as e:
        logger.debug(f"{args.command} failed: {e}")
        print(f"Error: {format_error_message(args.command, e)}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
