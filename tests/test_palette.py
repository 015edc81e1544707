"""Tests for palette YAML files."""

from __future__ import annotations

from pathlib import Path

import pytest

from chipcontrast.palette import PaletteFile


class TestPaletteFile:
    def test_load(self, palette_file: Path) -> None:
        palette = PaletteFile.load(palette_file)
        assert palette.background == "#ffffff"
        assert [e.code for e in palette.entries()] == ["01", "02", "03", "04", "05"]

    def test_plain_strings_get_sequential_codes(self, tmp_path: Path) -> None:
        path = tmp_path / "p.yaml"
        path.write_text('colors:\n  - "#000000"\n  - rgb(1, 2, 3)\n', encoding="utf-8")
        entries = PaletteFile.load(path).entries()
        assert [(e.code, e.color) for e in entries] == [("01", "#000000"), ("02", "rgb(1, 2, 3)")]

    def test_top_level_list(self, tmp_path: Path) -> None:
        path = tmp_path / "p.yaml"
        path.write_text('- "#a0ffa0"\n', encoding="utf-8")
        palette = PaletteFile.load(path)
        assert palette.background is None
        assert palette.entries()[0].color == "#a0ffa0"

    def test_numeric_code_coerced(self, tmp_path: Path) -> None:
        path = tmp_path / "p.yaml"
        path.write_text('colors:\n  - code: 7\n    color: "#000000"\n', encoding="utf-8")
        assert PaletteFile.load(path).entries()[0].code == "7"

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "p.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ValueError, match="empty"):
            PaletteFile.load(path)
