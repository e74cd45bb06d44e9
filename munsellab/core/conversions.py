#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: munsellab/core/conversions.py

import re
from typing import Sequence, Tuple

from . import config as c
from munsellab.shared.clamping import _clamp

_HEX6 = re.compile(r"#?([0-9A-Fa-f]{6})")


def hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    """
    Parse a 6-digit hex string (leading '#' optional) into an RGB triple.

    Raises ValueError for anything else. Lenient forms such as 'F0A' are
    expanded by sanitizer.normalize_hex before they get here.
    """
    m = _HEX6.fullmatch(str(hex_code).strip())
    if m is None:
        raise ValueError(f"not a 6-digit hex color: {hex_code!r}")
    r, g, b = bytes.fromhex(m.group(1))
    return r, g, b


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """'#RRGGBB' for three 8-bit channels."""
    return "#{:02X}{:02X}{:02X}".format(r, g, b)


def _dot3(row: Sequence[float], vec: Sequence[float]) -> float:
    return row[0] * vec[0] + row[1] * vec[1] + row[2] * vec[2]


# ==========================================
# Forward: sRGB -> XYZ -> CIELAB
# ==========================================


def srgb_to_linear(color_comp: int) -> float:
    """Linearize one 8-bit sRGB component onto [0, 1]."""
    c_norm = _clamp(color_comp / c.RGB_MAX, 0.0, 1.0)
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def rgb_to_linear(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Linearize all three sRGB components."""
    return srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b)


def linear_to_xyz(r_lin: float, g_lin: float, b_lin: float) -> Tuple[float, float, float]:
    """Convert linear RGB to CIE XYZ on the 0-100 scale."""
    scaled = (r_lin * c.XYZ_SCALING, g_lin * c.XYZ_SCALING, b_lin * c.XYZ_SCALING)
    x, y, z = (_dot3(row, scaled) for row in c.M_SRGB_TO_XYZ)
    return x, y, z


def rgb_to_xyz(r: int, g: int, b: int) -> Tuple[float, float, float]:
    return linear_to_xyz(*rgb_to_linear(r, g, b))


def _lab_f(t: float) -> float:
    if t > c.LAB_E:
        return t ** c.LAB_POW
    return (c.LAB_KAPPA * t + c.LAB_L_SUB) / c.LAB_L_MULT


def xyz_to_lab(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert XYZ (0-100, D65) to CIE L*a*b*."""
    fx = _lab_f(x / c.D65_X)
    fy = _lab_f(y / c.D65_Y)
    fz = _lab_f(z / c.D65_Z)
    return (
        c.LAB_L_MULT * fy - c.LAB_L_SUB,
        c.LAB_A_MULT * (fx - fy),
        c.LAB_B_MULT * (fy - fz),
    )


def rgb_to_lab(r: int, g: int, b: int) -> Tuple[float, float, float]:
    return xyz_to_lab(*rgb_to_xyz(r, g, b))


# ==========================================
# Inverse: CIELAB -> 8-bit sRGB (swatches only)
# ==========================================


def _lab_f_inv(t: float) -> float:
    cube = t ** 3
    if cube > c.LAB_E:
        return cube
    return (c.LAB_L_MULT * t - c.LAB_L_SUB) / c.LAB_KAPPA


def lab_to_xyz(L: float, a: float, b: float) -> Tuple[float, float, float]:
    fy = (L + c.LAB_L_SUB) / c.LAB_L_MULT
    fx = fy + a / c.LAB_A_MULT
    fz = fy - b / c.LAB_B_MULT
    return _lab_f_inv(fx) * c.D65_X, _lab_f_inv(fy) * c.D65_Y, _lab_f_inv(fz) * c.D65_Z


def linear_to_srgb(l_val: float) -> float:
    """Gamma-encode one linear component, clipped to [0, 1] first."""
    l_val = _clamp(l_val, 0.0, 1.0)
    if l_val <= c.LINEAR_TO_SRGB_TH:
        return l_val * c.SRGB_SLOPE
    return c.SRGB_DIVISOR * l_val ** (1.0 / c.SRGB_GAMMA) - c.SRGB_OFFSET


def lab_to_rgb(L: float, a: float, b: float) -> Tuple[int, int, int]:
    """
    Nearest displayable 8-bit sRGB color for a CIELAB point.

    Out-of-gamut points are clipped per channel in linear light, so the
    result may drift in hue and chroma from the requested color.
    """
    xyz = [v / c.XYZ_SCALING for v in lab_to_xyz(L, a, b)]
    red, green, blue = (
        int(round(linear_to_srgb(_dot3(row, xyz)) * c.RGB_MAX)) for row in c.M_XYZ_TO_SRGB
    )
    return red, green, blue
