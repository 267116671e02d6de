"""Tests for the payroll-rates command-line entry point."""

import io
import json
import sys
from pathlib import Path

import pytest

from payroll_core.cli import _printable, main

TEXT = "BILLUNIT,DESIGSHORTDESC,GROSSPAY\n0915101,SR. TECH,50000\n"


@pytest.fixture
def payroll_csv(tmp_path: Path) -> Path:
    path = tmp_path / "payroll.csv"
    path.write_text(TEXT)
    return path


def test_table_output(payroll_csv: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(payroll_csv), "--quiet"]) == 0

    out = capsys.readouterr().out
    assert "MILLWRIGHT" in out
    assert "208.33" in out


def test_json_output_file(payroll_csv: Path, tmp_path: Path) -> None:
    output = tmp_path / "out" / "report.json"

    assert main([str(payroll_csv), "--format", "json", "-o", str(output), "--quiet"]) == 0

    data = json.loads(output.read_text())
    assert data["totalShops"] == 1
    assert data["fileName"] == "payroll.csv"
    assert data["totals"]["category1"] == "208.33"
    assert data["shops"][0]["categories"][0]["noOfStaff"] == 1


def test_non_ascii_header_printed_intact(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "accents.csv"
    path.write_text("BILLUNIT,DESIGSHORTDESC,GROSSPAY (\u20ac)\n0915101,SR. TECH,50000\n", encoding="utf-8")

    assert main([str(path), "--quiet"]) == 0
    assert "payment=GROSSPAY (\u20ac)" in capsys.readouterr().out


def test_strict_flag(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "partial.csv"
    path.write_text("BILLUNIT,DESIGSHORTDESC,GROSSPAY\n0915101-A,SR. TECH,50000\n")

    assert main([str(path), "--strict-pay-group", "--quiet"]) == 0
    assert "No shops matched the payroll data." in capsys.readouterr().out


@pytest.mark.parametrize(
    ("name", "content", "message"),
    [
        ("header_only.csv", "BILLUNIT,DESIGSHORTDESC,GROSSPAY\n", "at least a header and one data row"),
        ("payroll.txt", TEXT, "Only CSV files are accepted"),
    ],
)
def test_input_errors_exit_1(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], name: str, content: str, message: str
) -> None:
    path = tmp_path / name
    path.write_text(content)

    assert main([str(path), "--quiet"]) == 1
    assert message in capsys.readouterr().err


def test_missing_file_exit_1(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "nope.csv"), "--quiet"]) == 1
    assert "ERROR: No file provided" in capsys.readouterr().err


def test_ascii_console_drops_unencodable_characters(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "stdout", io.TextIOWrapper(io.BytesIO(), encoding="ascii"))

    assert _printable("GROSSPAY (€)") == "GROSSPAY ()"
    assert _printable("GROSSPAY") == "GROSSPAY"
