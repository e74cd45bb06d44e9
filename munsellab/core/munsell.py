#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: munsellab/core/munsell.py

"""
Continuous approximation of Munsell Hue, Value and Chroma from CIELAB.

This is not the Munsell Renotation lookup; Value tracks L*/10, Chroma
tracks C*ab/5.5 and the hue circle is cut into fixed sectors on the
CIELAB hue angle.
"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import NamedTuple, Optional, Tuple

from . import config as c
from munsellab.shared.clamping import _clamp


class MunsellColor(NamedTuple):
    hue: Optional[str]
    value: float
    chroma: int

    @property
    def is_neutral(self) -> bool:
        return self.hue is None

    @property
    def notation(self) -> str:
        v = format_value(self.value)
        if self.is_neutral:
            return f"{c.NEUTRAL_HUE} {v}/"
        return f"{self.hue} {v}/{self.chroma}"


def round_half_up(x: float, ndigits: int = 0) -> float:
    """
    Round with ties going away from zero, unlike the banker's rounding
    of the builtin round(). The decimal form of x is rounded, so 5.35
    gives 5.4 even though its binary value sits just below 5.35.
    """
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(repr(x)).quantize(quantum, rounding=ROUND_HALF_UP))


def format_value(value: float) -> str:
    """Shortest form of a one-decimal Value: 5.0 -> '5', 5.3 -> '5.3'."""
    if value == int(value):
        return str(int(value))
    return f"{value:.{c.VALUE_DECIMALS}f}"


def munsell_value(L: float) -> float:
    """Munsell Value from L*: L/10 clamped to [0, 10], rounded half-up to 0.1."""
    v = _clamp(L / c.VALUE_SCALE, c.VALUE_MIN, c.VALUE_MAX)
    return round_half_up(v, c.VALUE_DECIMALS)


def munsell_chroma(a: float, b: float) -> int:
    """Munsell Chroma from a* and b*: C*ab / 5.5 rounded half-up to an integer."""
    c_ab = math.hypot(a, b)
    return max(0, int(round_half_up(c_ab / c.CHROMA_SCALE)))


def hue_angle(a: float, b: float) -> Optional[float]:
    """CIELAB hue angle in [0, 360), or None when a* and b* are both zero."""
    if a == 0 and b == 0:
        return None
    h = math.degrees(math.atan2(b, a)) % c.HUE_MAX
    # -tiny % 360.0 rounds up to 360.0
    if h >= c.HUE_MAX:
        h -= c.HUE_MAX
    return h


def hue_sector(h: float) -> str:
    """Map a hue angle in degrees to its 5-step Munsell hue code."""
    for lo, hi, code in c.HUE_SECTORS:
        if lo > hi:
            if h >= lo or h < hi:
                return code
        elif lo <= h < hi:
            return code
    # Only reachable for angles outside [0, 360)
    return c.HUE_SECTORS[0][2]


def lab_to_munsell(L: float, a: float, b: float) -> MunsellColor:
    """Approximate the Munsell coordinates of a CIELAB color."""
    value = munsell_value(L)
    h = hue_angle(a, b)
    chroma = 0 if h is None else munsell_chroma(a, b)

    if chroma < c.NEUTRAL_CHROMA_TH:
        return MunsellColor(None, value, 0)
    return MunsellColor(hue_sector(h), value, chroma)


def sector_center(hue_code: str) -> float:
    """Angle in the middle of a hue code's sector; 5R sits at 5 degrees."""
    for lo, hi, code in c.HUE_SECTORS:
        if code == hue_code:
            if lo > hi:
                hi += c.HUE_MAX
            return ((lo + hi) / 2.0) % c.HUE_MAX
    raise KeyError(hue_code)


def munsell_to_lab(color: MunsellColor) -> Tuple[float, float, float]:
    """
    Representative CIELAB point of a Munsell color, reversing the scales
    used by lab_to_munsell. Chromatic colors are placed at the center of
    their hue sector.
    """
    L = color.value * c.VALUE_SCALE
    if color.is_neutral or color.chroma == 0:
        return L, 0.0, 0.0
    c_ab = color.chroma * c.CHROMA_SCALE
    h = math.radians(sector_center(color.hue))
    return L, c_ab * math.cos(h), c_ab * math.sin(h)
