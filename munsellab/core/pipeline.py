#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: munsellab/core/pipeline.py

import numbers
from typing import NamedTuple, Tuple

from . import config as c
from . import conversions as conv
from .munsell import MunsellColor, lab_to_munsell
from .naming import analytical_name, hue_name


class RGBRangeError(ValueError):
    """Raised when an RGB channel is not an integer in [0, 255]."""


class ColorDescription(NamedTuple):
    notation: str
    name: str
    hex: str
    rgb: Tuple[int, int, int]
    lab: Tuple[float, float, float]
    munsell: MunsellColor

    def to_dict(self) -> dict:
        m = self.munsell
        return {
            "hex": self.hex,
            "rgb": list(self.rgb),
            "lab": [round(v, 4) for v in self.lab],
            "munsell": {
                "notation": self.notation,
                "hue": m.hue,
                "value": m.value,
                "chroma": m.chroma,
            },
            "name": self.name,
        }


def _check_channel(label: str, v) -> int:
    if isinstance(v, bool) or not isinstance(v, numbers.Integral):
        raise RGBRangeError(f"{label} channel must be an integer, got {v!r}")
    if not c.RGB_MIN <= v <= c.RGB_MAX:
        raise RGBRangeError(f"{label} channel {v} is outside [0, 255]")
    return int(v)


def convert(r: int, g: int, b: int) -> ColorDescription:
    """
    Describe an 8-bit sRGB color by its approximate Munsell notation and
    a descriptive name.

    Every in-range input yields a result; out-of-range or non-integer
    channels raise RGBRangeError.
    """
    r = _check_channel("red", r)
    g = _check_channel("green", g)
    b = _check_channel("blue", b)

    lab = conv.rgb_to_lab(r, g, b)
    munsell = lab_to_munsell(*lab)
    name = analytical_name(munsell.value, munsell.chroma, hue_name(munsell.hue))

    return ColorDescription(
        notation=munsell.notation,
        name=name,
        hex=conv.rgb_to_hex(r, g, b),
        rgb=(r, g, b),
        lab=lab,
        munsell=munsell,
    )
