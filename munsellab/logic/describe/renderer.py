#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: munsellab/logic/describe/renderer.py

from typing import List, Tuple

from munsellab.core import config as c
from munsellab.core.munsell import format_value, hue_angle, round_half_up
from munsellab.core.naming import brightness_band, hue_name, saturation_band
from munsellab.core.pipeline import ColorDescription
from munsellab.core.swatches import chroma_scale, value_scale
from munsellab.shared.formatting import format_angle, format_lab, format_rgb
from munsellab.shared.preview import label, print_field, swatch

_W = c.SCALE_CELL_WIDTH


def _scale_row(cells: List[Tuple[int, Tuple[int, int, int]]]) -> str:
    return "".join(swatch(rgb, _W) for _, rgb in cells)


def _marker_row(index: int) -> str:
    # Caret centered under the index-th cell
    return " " * (c.LABEL_WIDTH + 2 + index * _W + _W // 2) + "^"


def _print_value_scale(value: float) -> None:
    print(f"{label('value scale')}{_scale_row(value_scale())}  {c.DIM}N0 .. N10{c.RESET}")
    print(_marker_row(int(round_half_up(value))))


def _print_chroma_scale(description: ColorDescription) -> None:
    cells = chroma_scale(description.munsell)
    if not cells:
        return
    span = f"/0 .. /{cells[-1][0]}"
    print(f"{label('chroma scale')}{_scale_row(cells)}  {c.DIM}{span}{c.RESET}")


def render_description(description: ColorDescription, show_scales: bool = True) -> None:
    m = description.munsell
    _, a, b = description.lab

    print()
    print(f"{label('color')}{swatch(description.rgb)}  {c.BOLD_WHITE}{description.hex}{c.RESET}")
    print_field("rgb", format_rgb(description.rgb))
    print_field("lab", format_lab(description.lab))
    print()
    print_field("munsell", description.notation)
    if m.is_neutral:
        print_field("  hue", "N  achromatic")
    else:
        print_field("  hue", f"{m.hue} {hue_name(m.hue)}  angle {format_angle(hue_angle(a, b))}")
    print_field("  value", f"{format_value(m.value)}  {brightness_band(m.value)}")
    print_field("  chroma", f"{m.chroma}  {saturation_band(m.chroma)}")
    print_field("name", description.name)

    if show_scales:
        print()
        _print_value_scale(m.value)
        _print_chroma_scale(description)
    print()
