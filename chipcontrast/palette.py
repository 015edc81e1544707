"""Palette YAML files.

A palette file lists the colors to check and, optionally, the background
they are shown on::

    background: "#111111"
    colors:
      - "#a0ffa0"
      - code: "07"
        color: rgb(255, 97, 97)

Plain string entries get sequential two-digit codes (``01``, ``02``, ...).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from chipcontrast.models import PaletteEntry


class PaletteChip(BaseModel):
    """A single chip in the palette file."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    code: str
    color: str


class PaletteFile(BaseModel):
    """In-memory representation of a palette YAML file."""

    background: str | None = None
    colors: list[PaletteChip] = Field(default_factory=list)

    @field_validator("colors", mode="before")
    @classmethod
    def _number_plain_colors(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        chips: list[Any] = []
        for idx, item in enumerate(value, start=1):
            if isinstance(item, str):
                chips.append({"code": f"{idx:02d}", "color": item})
            else:
                chips.append(item)
        return chips

    def entries(self) -> list[PaletteEntry]:
        return [PaletteEntry(code=c.code, color=c.color) for c in self.colors]

    @classmethod
    def load(cls, path: Path) -> PaletteFile:
        """Load a palette file from disk."""
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        if raw is None:
            raise ValueError(f"Palette file is empty: {path}")
        if isinstance(raw, list):
            raw = {"colors": raw}
        return cls.model_validate(raw)
