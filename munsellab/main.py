#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: munsellab/main.py

import argparse
import sys
from typing import List, Optional

from munsellab import __version__
from munsellab.logic.describe import engine
from munsellab.shared.logger import MunsellabArgumentParser
from munsellab.shared.sanitizer import INPUT_HANDLERS
from munsellab.subcommands.command_registry import SUBCOMMANDS

EPILOG = """\
subcommands:
  hues            hue sector table with a sample swatch per sector
                  (munsellab hues --help)

examples:
  munsellab -H FF8800
  munsellab -c "12, 90, 200" --json
  munsellab hues -V 5 -C 8
"""


def get_describe_parser() -> argparse.ArgumentParser:
    """Parser for the default command: describe one sRGB color."""
    parser = MunsellabArgumentParser(
        prog="munsellab",
        description="munsellab: approximate Munsell notation and a descriptive name for an sRGB color",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--version", action="version", version=f"munsellab {__version__}")

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "-H", "--hex",
        type=INPUT_HANDLERS["hex"],
        metavar="HEX",
        help="hex color, e.g. FF8800, #ff8800 or F80",
    )
    source.add_argument(
        "-c", "--rgb",
        type=INPUT_HANDLERS["rgb"],
        metavar="R,G,B",
        help="8-bit channels, e.g. '255,136,0' (each 0-255)",
    )

    output = parser.add_argument_group("output")
    output.add_argument("--json", action="store_true", help="print the description as JSON")
    output.add_argument(
        "-hs", "--hide-scales",
        action="store_true",
        help="omit the value and chroma scales under the description",
    )

    # Catches a subcommand name given after the options
    parser.add_argument("command", nargs="?", help=argparse.SUPPRESS)
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for munsellab CLI"""
    argv = sys.argv[1:] if argv is None else list(argv)

    if argv and argv[0].lower() in SUBCOMMANDS:
        SUBCOMMANDS[argv[0].lower()].main(argv[1:])
        return

    parser = get_describe_parser()
    args = parser.parse_args(argv)

    if args.command is not None:
        if args.command.lower() in SUBCOMMANDS:
            parser.error(f"the '{args.command}' command must be the first argument")
        parser.error(f"unrecognized command or argument: '{args.command}'")

    engine.run(args)


if __name__ == "__main__":
    main()
