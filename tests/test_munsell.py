"""Tests for munsellab.core.munsell: Lab -> approximate Munsell coordinates."""

import math

import pytest

from munsellab.core import config as c
from munsellab.core.munsell import (
    MunsellColor,
    format_value,
    hue_angle,
    hue_sector,
    lab_to_munsell,
    munsell_chroma,
    munsell_to_lab,
    munsell_value,
    round_half_up,
    sector_center,
)

SECTOR_CODES = {code for _, _, code in c.HUE_SECTORS}


@pytest.mark.parametrize(
    "x, ndigits, expected",
    [
        (0.5, 0, 1.0),
        (1.5, 0, 2.0),
        (2.5, 0, 3.0),
        (2.4999, 0, 2.0),
        (5.25, 1, 5.3),
        (5.35, 1, 5.4),
        (5.24, 1, 5.2),
    ],
)
def test_round_half_up(x, ndigits, expected):
    assert round_half_up(x, ndigits) == expected


def test_value_rounds_half_up_to_one_decimal():
    assert munsell_value(53.5) == 5.4
    assert munsell_value(53.49) == 5.3


def test_value_is_clamped():
    assert munsell_value(-5.0) == 0.0
    assert munsell_value(120.0) == 10.0
    assert munsell_value(100.0) == 10.0


def test_chroma_rounds_half_up():
    assert munsell_chroma(2.75, 0.0) == 1
    assert munsell_chroma(2.7, 0.0) == 0
    assert munsell_chroma(0.0, 13.75) == 3


def test_hue_angle_of_neutral_is_none():
    assert hue_angle(0.0, 0.0) is None
    assert hue_angle(-0.0, 0.0) is None


def test_hue_angle_is_normalized():
    assert hue_angle(1.0, 0.0) == 0.0
    assert hue_angle(0.0, -1.0) == pytest.approx(270.0)
    assert hue_angle(-1.0, -0.0) == pytest.approx(180.0)
    h = hue_angle(1.0, -1e-300)
    assert 0.0 <= h < 360.0


@pytest.mark.parametrize(
    "angle, code",
    [
        (0.0, "5R"),
        (37.9, "5R"),
        (38.0, "5YR"),
        (38.1, "5YR"),
        (68.99, "5YR"),
        (69.0, "5Y"),
        (104.9, "5Y"),
        (105.0, "5GY"),
        (139.9, "5GY"),
        (140.0, "5G"),
        (175.9, "5G"),
        (176.0, "5BG"),
        (214.9, "5BG"),
        (215.0, "5B"),
        (254.9, "5B"),
        (255.0, "5PB"),
        (294.9, "5PB"),
        (295.0, "5P"),
        (331.9, "5P"),
        (332.0, "5R"),
        (359.9, "5R"),
    ],
)
def test_hue_sector_boundaries(angle, code):
    assert hue_sector(angle) == code


def test_hue_sweep_covers_every_sector():
    seen = {hue_sector(float(h)) for h in range(360)}
    assert seen == SECTOR_CODES
    assert len(seen) == 9


def _lab_at(angle, L=50.0, chroma=40.0):
    rad = math.radians(angle)
    return L, chroma * math.cos(rad), chroma * math.sin(rad)


def test_sector_switches_between_37_9_and_38_1_degrees():
    below = lab_to_munsell(*_lab_at(37.9))
    above = lab_to_munsell(*_lab_at(38.1))
    assert below == MunsellColor("5R", 5.0, 7)
    assert above == MunsellColor("5YR", 5.0, 7)


def test_neutral_lab_has_no_hue():
    m = lab_to_munsell(50.0, 0.0, 0.0)
    assert m == MunsellColor(None, 5.0, 0)
    assert m.is_neutral
    assert m.notation == "N 5/"


def test_low_chroma_is_neutral_regardless_of_angle():
    m = lab_to_munsell(72.0, 2.0, 1.0)
    assert m.is_neutral
    assert m.notation == "N 7.2/"


def test_chromatic_notation():
    assert MunsellColor("5R", 4.5, 8).notation == "5R 4.5/8"
    assert MunsellColor("5Y", 9.0, 12).notation == "5Y 9/12"


@pytest.mark.parametrize(
    "value, text",
    [(0.0, "0"), (5.0, "5"), (10.0, "10"), (7.1, "7.1")],
)
def test_format_value(value, text):
    assert format_value(value) == text


def test_sector_center():
    assert sector_center("5R") == 5.0
    assert sector_center("5YR") == 53.5
    assert sector_center("5P") == 313.5
    with pytest.raises(KeyError):
        sector_center("5RP")


def test_neutral_munsell_to_lab_sits_on_gray_axis():
    assert munsell_to_lab(MunsellColor(None, 5.0, 0)) == (50.0, 0.0, 0.0)


@pytest.mark.parametrize("code", sorted(SECTOR_CODES))
def test_munsell_to_lab_reads_back_as_the_same_color(code):
    color = MunsellColor(code, 6.0, 8)
    assert lab_to_munsell(*munsell_to_lab(color)) == color
