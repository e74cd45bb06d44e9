#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: munsellab/shared/preview.py

from typing import Tuple

from munsellab.core import config as c


def swatch(rgb: Tuple[int, int, int], width: int = c.SWATCH_WIDTH) -> str:
    """A run of 24-bit background-colored blanks."""
    r, g, b = rgb
    return f"\033[48;2;{r};{g};{b}m{' ' * width}{c.RESET}"


def label(text: str) -> str:
    return f"{c.LABEL_STYLE}{text:<{c.LABEL_WIDTH}}{c.RESET}: "


def print_field(name: str, text: str) -> None:
    print(f"{label(name)}{c.BOLD_WHITE}{text}{c.RESET}")
