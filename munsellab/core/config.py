#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: munsellab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Standard Scaling & Mathematical Constants
RGB_MIN = 0                        # Lowest valid 8-bit channel value
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
XYZ_SCALING = 100.0                # Factor for scaling linear RGB onto the 0-100 XYZ range

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# XYZ D65 Reference White (Source: ASTM E308-01 / CIE D65)
D65_X = 95.047                     # X coordinate for D65 illuminant (2-degree observer)
D65_Y = 100.0                      # Y coordinate (Luminance) for D65 illuminant
D65_Z = 108.883                    # Z coordinate for D65 illuminant

# sRGB -> XYZ matrix rows (Source: sRGB D65, four-digit form)
M_SRGB_TO_XYZ = (
    (0.4124, 0.3576, 0.1805),      # X
    (0.2126, 0.7152, 0.0722),      # Y (luminance)
    (0.0193, 0.1192, 0.9505),      # Z
)

# XYZ -> sRGB matrix rows, used only to paint swatches
M_XYZ_TO_SRGB = (
    (3.2404542, -1.5371385, -0.4985314),   # linear R
    (-0.9692660, 1.8760108, 0.0415560),    # linear G
    (0.0556434, -0.2040259, 1.0572252),    # linear B
)

# CIELAB Constants (Source: CIE 15:2004)
LAB_E = 0.008856                   # Threshold for switching between linear and power functions
LAB_KAPPA = 903.3                  # Slope of the linear segment for low luminance values
LAB_POW = 1.0 / 3.0                # Cube-root exponent of the non-linear segment
LAB_L_MULT = 116.0                 # Multiplier for Lightness (L*) calculation
LAB_L_SUB = 16.0                   # Subtraction constant for Lightness (L*) calculation
LAB_A_MULT = 500.0                 # Multiplier for 'a*' (green-red) channel calculation
LAB_B_MULT = 200.0                 # Multiplier for 'b*' (blue-yellow) channel calculation

# ==========================================
# Munsell Approximation
# ==========================================

VALUE_SCALE = 10.0                 # L* units per Munsell Value step
VALUE_MIN = 0.0                    # Darkest Munsell Value
VALUE_MAX = 10.0                   # Lightest Munsell Value
VALUE_DECIMALS = 1                 # Value is reported to one decimal place
CHROMA_SCALE = 5.5                 # C*ab units per Munsell Chroma step (empirical)
NEUTRAL_CHROMA_TH = 0.5            # Rounded chroma below this is treated as achromatic
NEUTRAL_HUE = "N"                  # Hue designator of neutral notation

# Hue sectors as half-open [lo, hi) degree ranges on the CIELAB hue angle.
# A sector with lo > hi wraps through 0 degrees.
HUE_SECTORS = (
    (332.0, 38.0, "5R"),
    (38.0, 69.0, "5YR"),
    (69.0, 105.0, "5Y"),
    (105.0, 140.0, "5GY"),
    (140.0, 176.0, "5G"),
    (176.0, 215.0, "5BG"),
    (215.0, 255.0, "5B"),
    (255.0, 295.0, "5PB"),
    (295.0, 332.0, "5P"),
)

# Hue code to English compound word. 5RP is folded into the 5R sector above.
HUE_NAMES = {
    "5R": "Red",
    "5YR": "Yellow-Red",
    "5Y": "Yellow",
    "5GY": "Green-Yellow",
    "5G": "Green",
    "5BG": "Blue-Green",
    "5B": "Blue",
    "5PB": "Purple-Blue",
    "5P": "Purple",
    "5RP": "Red-Purple",
}
UNKNOWN_HUE_NAME = "Neutral"       # Name for neutral or unmapped hue codes

# ==========================================
# Descriptive Naming Bands
# ==========================================

# (inclusive lower bound on Value, label), scanned top-down
BRIGHTNESS_BANDS = (
    (8.0, "Pale"),
    (6.0, "Light"),
    (4.0, "Medium"),
    (2.0, "Dark"),
)
BRIGHTNESS_FLOOR = "Deep"          # Value below every brightness band

# (exclusive upper bound on Chroma, label), scanned bottom-up
SATURATION_BANDS = (
    (2.0, "Grayish"),
    (6.0, "Moderate"),
    (10.0, "Strong"),
)
SATURATION_CEILING = "Vivid"       # Chroma at or above every saturation band

# Band pair that collapses to the bare hue word
PLAIN_BANDS = ("Moderate", "Medium")

WHITE_VALUE_TH = 8.5               # Neutral Value above this reads as White
BLACK_VALUE_TH = 1.5               # Neutral Value below this reads as Black

# ==========================================
# Swatch Rendering
# ==========================================

HUES_DEFAULT_VALUE = 6.0           # Munsell Value of the 'hues' table swatches
HUES_DEFAULT_CHROMA = 4            # Munsell Chroma of the 'hues' table swatches
CHROMA_ARG_MAX = 30                # Largest Chroma accepted on the command line
CHROMA_SCALE_STEP = 2              # Chroma spacing of the chroma scale cells

SWATCH_WIDTH = 16                  # Cells in the main swatch block
SCALE_CELL_WIDTH = 3               # Cells per step on the value/chroma scales
LABEL_WIDTH = 14                   # Column width of the field labels

# ==========================================
# CLI UI
# ==========================================

# level -> (tag style, message style)
LOG_STYLES = {
    "error": ("\033[1;31m", "\033[0;31m"),
    "warning": ("\033[1;33m", "\033[0;33m"),
    "info": ("\033[1;36m", "\033[0;36m"),
    "success": ("\033[1;32m", "\033[0;32m"),
}

LABEL_STYLE = "\033[1;36m"
BOLD_WHITE = "\033[1;37m"
DIM = "\033[90m"
RESET = "\033[0m"
