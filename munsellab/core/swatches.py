#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: munsellab/core/swatches.py

"""
Paintable sRGB samples of Munsell colors: the value and chroma scales
shown under a description and the hue circle of 'munsellab hues'.
"""

from typing import List, NamedTuple, Tuple

from . import config as c
from .conversions import lab_to_rgb
from .munsell import MunsellColor, munsell_to_lab, sector_center


class HueSample(NamedTuple):
    lo: float
    hi: float
    center: float
    color: MunsellColor
    rgb: Tuple[int, int, int]


def munsell_to_rgb(color: MunsellColor) -> Tuple[int, int, int]:
    return lab_to_rgb(*munsell_to_lab(color))


def value_scale() -> List[Tuple[int, Tuple[int, int, int]]]:
    """Neutral steps N 0/ through N 10/."""
    steps = range(int(c.VALUE_MIN), int(c.VALUE_MAX) + 1)
    return [(v, munsell_to_rgb(MunsellColor(None, float(v), 0))) for v in steps]


def chroma_steps(chroma: int) -> List[int]:
    """0, 2, 4, ... up to and always ending on chroma itself."""
    steps = list(range(0, chroma, c.CHROMA_SCALE_STEP))
    steps.append(chroma)
    return steps


def chroma_scale(color: MunsellColor) -> List[Tuple[int, Tuple[int, int, int]]]:
    """Samples from gray out to the color's own chroma at its hue and value."""
    if color.is_neutral:
        return []
    return [
        (step, munsell_to_rgb(color._replace(chroma=step)))
        for step in chroma_steps(color.chroma)
    ]


def hue_circle(value: float, chroma: int) -> List[HueSample]:
    """One sample per hue sector, at the sector's center angle."""
    samples = []
    for lo, hi, code in c.HUE_SECTORS:
        color = MunsellColor(code, value, chroma)
        samples.append(HueSample(lo, hi, sector_center(code), color, munsell_to_rgb(color)))
    return samples
