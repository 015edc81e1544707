"""Pydantic configuration model with YAML loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field

_DEFAULT_CONFIG_NAME = "chipcontrast.yaml"


class ThemeConfig(BaseModel):
    """Background colors the chips are shown on."""

    mode: Literal["dark", "light"] = "dark"
    dark_background: str = "#0b0c0e"
    light_background: str = "#ffffff"

    @property
    def background(self) -> str:
        return self.dark_background if self.mode == "dark" else self.light_background


class OutputConfig(BaseModel):
    """Report settings."""

    report_format: Literal["json", "markdown"] = "markdown"
    precision: int = Field(default=2, ge=0, le=6)


class ChipContrastConfig(BaseModel):
    """Top-level configuration for chipcontrast."""

    theme: ThemeConfig = Field(default_factory=ThemeConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> ChipContrastConfig:
        """Load config from a YAML file.

        Search order when *path* is None:
          1. ./chipcontrast.yaml
          2. ~/.config/chipcontrast/chipcontrast.yaml

        Returns default config if no file is found.
        """
        if path is not None:
            return cls._from_yaml(path)

        candidates = [
            Path.cwd() / _DEFAULT_CONFIG_NAME,
            Path.home() / ".config" / "chipcontrast" / _DEFAULT_CONFIG_NAME,
        ]
        for candidate in candidates:
            if candidate.is_file():
                return cls._from_yaml(candidate)

        return cls()

    @classmethod
    def _from_yaml(cls, path: Path) -> ChipContrastConfig:
        raw: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return cls.model_validate(raw)
