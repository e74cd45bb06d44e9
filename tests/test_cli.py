"""Tests for the munsellab command line interface."""

import json
import sys

import pytest

from munsellab import main as cli


def run_cli(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["munsellab", *argv])
    cli.main()


def test_describe_hex(monkeypatch, capsys):
    run_cli(monkeypatch, "-H", "FF0000")
    out = capsys.readouterr().out
    assert "#FF0000" in out
    assert "rgb(255, 0, 0)" in out
    assert "5YR 5.3/19" in out
    assert "5YR Yellow-Red" in out
    assert "5.3  Medium" in out
    assert "19  Vivid" in out
    assert "Vivid Medium Yellow-Red" in out
    assert "value scale" in out
    assert "/0 .. /19" in out


def test_describe_gray_has_no_chroma_scale(monkeypatch, capsys):
    run_cli(monkeypatch, "-H", "#777")
    out = capsys.readouterr().out
    assert "N 5/" in out
    assert "achromatic" in out
    assert "Neutral Gray (V=5)" in out
    assert "value scale" in out
    assert "chroma scale" not in out


def test_hide_scales(monkeypatch, capsys):
    run_cli(monkeypatch, "-c", "255,255,255", "-hs")
    out = capsys.readouterr().out
    assert "N 10/" in out
    assert "White" in out
    assert "value scale" not in out


def test_describe_rgb_json(monkeypatch, capsys):
    run_cli(monkeypatch, "-c", "0,0,255", "--json")
    data = json.loads(capsys.readouterr().out)
    assert data["munsell"]["notation"] == "5P 3.2/24"
    assert data["name"] == "Vivid Dark Purple"
    assert data["hex"] == "#0000FF"


def test_main_accepts_explicit_argv(capsys):
    cli.main(["-c", "0,0,0", "--json"])
    assert json.loads(capsys.readouterr().out)["name"] == "Black"


def test_missing_input_exits(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch)
    assert exc.value.code == 2
    assert "is required" in capsys.readouterr().err


def test_hex_and_rgb_are_exclusive(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "-H", "FF0000", "-c", "1,2,3")
    assert exc.value.code == 2
    assert "not allowed with" in capsys.readouterr().err


def test_out_of_range_rgb_exits(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "-c", "300,0,0")
    assert exc.value.code == 2
    assert "out of range" in capsys.readouterr().err


def test_misplaced_subcommand_exits(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "-H", "FF0000", "hues")
    assert exc.value.code == 2
    assert "must be the first argument" in capsys.readouterr().err


def test_unknown_positional_exits(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "-H", "FF0000", "extra")
    assert exc.value.code == 2
    assert "unrecognized command or argument: 'extra'" in capsys.readouterr().err


def test_hues_subcommand(monkeypatch, capsys):
    run_cli(monkeypatch, "hues", "-V", "5", "-C", "6")
    out = capsys.readouterr().out
    assert "5YR 5/6" in out
    assert "Yellow-Red" in out
    assert "[332, 360) + [0, 38)" in out
    assert "[295, 332)" in out
    assert "313.5 deg" in out


def test_hues_rejects_value_out_of_range(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "hues", "-V", "11")
    assert exc.value.code == 2
    assert "munsell value out of range" in capsys.readouterr().err
