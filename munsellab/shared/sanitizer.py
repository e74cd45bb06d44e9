#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: munsellab/shared/sanitizer.py

import argparse
import re
from typing import List, Tuple

from munsellab.core import config as c
from munsellab.core.conversions import hex_to_rgb

_WS = re.compile(r"\s+")
_HEX_BODY = re.compile(r"(?:#|0X)?([0-9A-F]{3}|[0-9A-F]{6})")
_INT = re.compile(r"[-+]?\d+")


def _echo(value) -> str:
    """One-line rendering of raw user input for error messages."""
    return _WS.sub(" ", "" if value is None else str(value)).strip()


def normalize_hex(value: str) -> str:
    """
    Canonical 'RRGGBB' for '#rrggbb', 'rrggbb', '0xrrggbb' or the
    3-digit shorthand 'rgb'; '' when the input is none of these.
    """
    s = _WS.sub("", str(value or "")).strip("\"'`").upper()
    m = _HEX_BODY.fullmatch(s)
    if m is None:
        return ""
    digits = m.group(1)
    if len(digits) == 3:
        digits = "".join(ch + ch for ch in digits)
    return digits


def _split_rgb_string(value: str) -> List[str]:
    """Tokens of 'r,g,b', 'r g b', 'r/g/b' or 'rgb(r, g, b)'."""
    s = str(value).strip().strip("\"'`")
    s = re.sub(r"^[a-zA-Z]+\s*\(", "", s).rstrip(")")
    return [tok for tok in re.split(r"[\s,/]+", s) if tok]


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> Tuple[int, int, int]:
    """Validator for hex colors; yields the RGB triple."""
    cleaned = normalize_hex(v)
    if not cleaned:
        raise argparse.ArgumentTypeError(f"invalid hex value: '{_echo(v)}'")
    return hex_to_rgb(cleaned)


def handle_rgb(v: str) -> Tuple[int, int, int]:
    """
    Validator for 'r,g,b' triples. Channels outside 0-255 are rejected
    rather than clamped, matching the library's own contract.
    """
    raw = _echo(v)
    tokens = _split_rgb_string(v)
    if len(tokens) != 3 or not all(_INT.fullmatch(t) for t in tokens):
        raise argparse.ArgumentTypeError(f"invalid rgb value: '{raw}' (expected 'r,g,b')")

    channels = tuple(int(t) for t in tokens)
    if any(not c.RGB_MIN <= ch <= c.RGB_MAX for ch in channels):
        raise argparse.ArgumentTypeError(f"rgb channel out of range 0-255: '{raw}'")
    return channels


def handle_munsell_value(v: str) -> float:
    """Validator for a Munsell Value between 0 and 10."""
    try:
        value = float(_echo(v))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid munsell value: '{_echo(v)}'") from None
    if not c.VALUE_MIN <= value <= c.VALUE_MAX:
        raise argparse.ArgumentTypeError(f"munsell value out of range 0-10: '{_echo(v)}'")
    return value


def handle_munsell_chroma(v: str) -> int:
    """Validator for a whole-number Munsell Chroma."""
    raw = _echo(v)
    if not _INT.fullmatch(raw):
        raise argparse.ArgumentTypeError(f"invalid munsell chroma: '{raw}'")
    chroma = int(raw)
    if not 0 <= chroma <= c.CHROMA_ARG_MAX:
        raise argparse.ArgumentTypeError(
            f"munsell chroma out of range 0-{c.CHROMA_ARG_MAX}: '{raw}'"
        )
    return chroma


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "hex": handle_hex,
    "rgb": handle_rgb,
    "munsell_value": handle_munsell_value,
    "munsell_chroma": handle_munsell_chroma,
}
