"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from chipcontrast.analyzer import ContrastAnalyzer


@pytest.fixture
def analyzer() -> ContrastAnalyzer:
    return ContrastAnalyzer()


@pytest.fixture
def palette_file(tmp_path: Path) -> Path:
    """A small palette with one chip per grade and one broken chip."""
    path = tmp_path / "palette.yaml"
    path.write_text(
        """\
background: "#ffffff"
colors:
  - code: "01"
    color: "#000000"
  - code: "02"
    color: "#767676"
  - code: "03"
    color: "#777777"
  - code: "04"
    color: "#eeeeee"
  - code: "05"
    color: not-a-color
""",
        encoding="utf-8",
    )
    return path
