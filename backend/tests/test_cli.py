"""Tests for the command-line entry point."""

import pytest

from logo_outline.cli import main
from tests.conftest import NO_PATH_SVG, TWO_SQUARES_SVG


def test_cli_prints_outline(tmp_path, capsys):
    src = tmp_path / "logo.svg"
    src.write_text(TWO_SQUARES_SVG)
    assert main([str(src)]) == 0
    out = capsys.readouterr().out
    assert out.count('stroke="#FF0000"') == 2


def test_cli_writes_output_file(tmp_path):
    src = tmp_path / "logo.svg"
    dst = tmp_path / "outline.svg"
    src.write_text(TWO_SQUARES_SVG)
    assert main([str(src), "-o", str(dst), "--seed", "5"]) == 0
    assert dst.read_text().startswith("<svg")


def test_cli_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.svg")]) == 1
    assert "Error" in capsys.readouterr().err


def test_cli_no_geometry(tmp_path, capsys):
    src = tmp_path / "logo.svg"
    src.write_text(NO_PATH_SVG)
    assert main([str(src)]) == 1
    assert "No <path>" in capsys.readouterr().err
