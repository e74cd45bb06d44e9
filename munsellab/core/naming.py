#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: munsellab/core/naming.py

from typing import Optional

from . import config as c
from .munsell import format_value


def hue_name(hue_code: Optional[str]) -> str:
    """English word for a Munsell hue code, 'Neutral' when unknown."""
    return c.HUE_NAMES.get(hue_code, c.UNKNOWN_HUE_NAME)


def brightness_band(value: float) -> str:
    for lower, label in c.BRIGHTNESS_BANDS:
        if value >= lower:
            return label
    return c.BRIGHTNESS_FLOOR


def saturation_band(chroma: float) -> str:
    for upper, label in c.SATURATION_BANDS:
        if chroma < upper:
            return label
    return c.SATURATION_CEILING


def neutral_name(value: float) -> str:
    if value > c.WHITE_VALUE_TH:
        return "White"
    if value < c.BLACK_VALUE_TH:
        return "Black"
    return f"Neutral Gray (V={format_value(value)})"


def analytical_name(value: float, chroma: float, hue_word: str) -> str:
    """
    Compose a descriptive name from Munsell Value, Chroma and a hue word.

    Achromatic colors get White, Black or a Neutral Gray label. The
    Moderate/Medium band pair is dropped so that mid colors read as the
    plain hue word.
    """
    if chroma < c.NEUTRAL_CHROMA_TH:
        return neutral_name(value)

    saturation = saturation_band(chroma)
    brightness = brightness_band(value)
    if (saturation, brightness) == c.PLAIN_BANDS:
        return hue_word
    return f"{saturation} {brightness} {hue_word}"
