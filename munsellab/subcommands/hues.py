#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: munsellab/subcommands/hues.py

"""
'munsellab hues': the ten-step hue circle cut into sectors, with one
sample per sector painted at the requested Munsell Value and Chroma.

The last column converts each painted sample back through the forward
pipeline; gamut clipping and 8-bit rounding show up as a mismatch.
"""

import argparse
import sys
from typing import List, Optional

from munsellab.core import config as c
from munsellab.core.naming import hue_name
from munsellab.core.pipeline import convert
from munsellab.core.swatches import hue_circle
from munsellab.shared.formatting import format_angle, format_hue_range
from munsellab.shared.logger import MunsellabArgumentParser
from munsellab.shared.preview import swatch
from munsellab.shared.sanitizer import INPUT_HANDLERS


def build_hue_table(value: float, chroma: int) -> List[dict]:
    rows = []
    for sample in hue_circle(value, chroma):
        reads_as = convert(*sample.rgb).notation
        rows.append({
            "notation": sample.color.notation,
            "hue": hue_name(sample.color.hue),
            "range": format_hue_range(sample.lo, sample.hi),
            "center": sample.center,
            "rgb": sample.rgb,
            "reads_as": reads_as,
            # chroma 0 always reads back as N
            "differs": chroma > 0 and reads_as != sample.color.notation,
        })
    return rows


def handle_hues_command(args: argparse.Namespace) -> None:
    print()
    for row in build_hue_table(args.value, args.chroma):
        mark = f"  {c.DIM}(differs){c.RESET}" if row["differs"] else ""
        print(
            f"{swatch(row['rgb'], 6)}  {c.BOLD_WHITE}{row['notation']:<10}{c.RESET}"
            f"{row['hue']:<14}{row['range']:<22}{format_angle(row['center']):>10}"
            f"  -> {row['reads_as']}{mark}"
        )
    print()


def get_hues_parser() -> argparse.ArgumentParser:
    parser = MunsellabArgumentParser(
        prog="munsellab hues",
        description="munsellab hues: show the Munsell hue sectors with a sample of each",
    )
    parser.add_argument(
        "-V",
        "--value",
        type=INPUT_HANDLERS["munsell_value"],
        default=c.HUES_DEFAULT_VALUE,
        metavar="VALUE",
        help=f"Munsell Value of the samples, 0-10 (default: {c.HUES_DEFAULT_VALUE:g})",
    )
    parser.add_argument(
        "-C",
        "--chroma",
        type=INPUT_HANDLERS["munsell_chroma"],
        default=c.HUES_DEFAULT_CHROMA,
        metavar="CHROMA",
        help=f"Munsell Chroma of the samples, 0-{c.CHROMA_ARG_MAX} (default: {c.HUES_DEFAULT_CHROMA})",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = get_hues_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    handle_hues_command(args)


if __name__ == "__main__":
    main()
