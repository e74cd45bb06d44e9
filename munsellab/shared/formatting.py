#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: munsellab/shared/formatting.py

from typing import Tuple


def format_rgb(rgb: Tuple[int, int, int]) -> str:
    return "rgb({}, {}, {})".format(*rgb)


def format_lab(lab: Tuple[float, float, float]) -> str:
    # keeps "-0.00" off gray axes
    L, a, b = (0.0 if abs(v) < 0.005 else v for v in lab)
    return f"L* {L:.2f}  a* {a:.2f}  b* {b:.2f}"


def format_angle(h: float) -> str:
    return f"{h:.1f} deg"


def format_hue_range(lo: float, hi: float) -> str:
    """Render a half-open hue sector, splitting the one that wraps 0 degrees."""
    if lo > hi:
        return f"[{lo:g}, 360) + [0, {hi:g})"
    return f"[{lo:g}, {hi:g})"
