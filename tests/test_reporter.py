"""Tests for report generation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from chipcontrast.analyzer import ContrastAnalyzer
from chipcontrast.models import PaletteEntry, PaletteResult
from chipcontrast.palette import PaletteFile
from chipcontrast.reporter import (
    format_contrast_summary,
    write_json_report,
    write_markdown_report,
)


@pytest.fixture
def palette_result(analyzer: ContrastAnalyzer, palette_file: Path) -> PaletteResult:
    palette = PaletteFile.load(palette_file)
    return analyzer.check_palette(palette.entries(), palette.background)


class TestJsonReport:
    def test_contents(self, palette_result: PaletteResult, tmp_path: Path) -> None:
        out = tmp_path / "report.json"
        write_json_report(palette_result, out)
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["background"] == "#ffffff"
        assert data["total"] == 5
        assert data["passing"] == 3
        assert data["failing"] == 1
        assert data["chips"][0] == {
            "code": "01",
            "color": "#000000",
            "ratio": 21.0,
            "level": "AAA",
            "grade": "great",
        }
        assert data["chips"][3]["level"] is None
        assert data["invalid"][0]["code"] == "05"

    def test_precision(self, palette_result: PaletteResult, tmp_path: Path) -> None:
        out = tmp_path / "report.json"
        write_json_report(palette_result, out, precision=1)
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["chips"][1]["ratio"] == 4.5


class TestMarkdownReport:
    def test_contents(self, palette_result: PaletteResult, tmp_path: Path) -> None:
        out = tmp_path / "report.md"
        write_markdown_report(palette_result, out)
        text = out.read_text(encoding="utf-8")
        assert "# Contrast Report" in text
        assert "(3 passing, 1 failing)" in text
        assert "| 02 | `#767676` | 4.54:1 | AA (4.5:1) | good :) |" in text
        assert "## Invalid colors" in text

    def test_undefined_section(self, tmp_path: Path) -> None:
        result = PaletteResult(undefined=[PaletteEntry(code="01", color="#000000")])
        out = tmp_path / "report.md"
        write_markdown_report(result, out)
        text = out.read_text(encoding="utf-8")
        assert "Background:** Not set" in text
        assert "Contrast undefined" in text


class TestContrastSummary:
    def test_summary(self, analyzer: ContrastAnalyzer) -> None:
        summary = format_contrast_summary(analyzer.check("#000000", "#ffffff"))
        assert "Ratio: 21.00:1" in summary
        assert "Level: AAA (7:1)" in summary
        assert "Chip: contrast:21.00 :D" in summary

    def test_failing_summary(self, analyzer: ContrastAnalyzer) -> None:
        summary = format_contrast_summary(analyzer.check("#eeeeee", "#ffffff"))
        assert "Level: Fail" in summary
