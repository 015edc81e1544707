"""Shared data models used across the contrast checker."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


@dataclass(frozen=True)
class RGBColor:
    """A parsed color. Channels are kept exactly as parsed (not rounded).

    Alpha is carried for fidelity only; contrast math ignores it.
    """

    r: float
    g: float
    b: float
    a: float | None = None


class WcagLevel(enum.Enum):
    """WCAG 2.0 contrast levels, ordered from least to most strict."""

    # Min ISO-recommended ratio for people with 20/20 vision.
    AA_LARGE = ("AA for Large Text", 3.0)
    # Extrapolation of AA_LARGE for people with 20/40 vision.
    AA = ("AA", 4.5)
    # Extrapolation of AA_LARGE for people with 20/80 vision.
    AAA = ("AAA", 7.0)

    def __init__(self, label: str, min_ratio: float) -> None:
        self.label = label
        self.min_ratio = min_ratio

    def __str__(self) -> str:
        return f"{self.label} ({self.min_ratio:g}:1)"


class ContrastGrade(str, enum.Enum):
    """Visual verdict of a contrast chip."""

    GREAT = "great"
    GOOD = "good"
    MEH = "meh"
    BAD = "bad"

    @property
    def face(self) -> str:
        return _FACES[self]

    @classmethod
    def for_level(cls, level: WcagLevel | None) -> ContrastGrade:
        if level is WcagLevel.AAA:
            return cls.GREAT
        if level is WcagLevel.AA:
            return cls.GOOD
        if level is WcagLevel.AA_LARGE:
            return cls.MEH
        return cls.BAD


_FACES = {
    ContrastGrade.GREAT: ":D",
    ContrastGrade.GOOD: ":)",
    ContrastGrade.MEH: ":/",
    ContrastGrade.BAD: ":(",
}


@dataclass
class ContrastResult:
    """Contrast of one foreground color against one background."""

    foreground: str
    background: str
    ratio: float
    level: WcagLevel | None = None

    @property
    def grade(self) -> ContrastGrade:
        return ContrastGrade.for_level(self.level)

    @property
    def passes(self) -> bool:
        """True when at least AA for large text is met."""
        return self.level is not None

    @property
    def display_ratio(self) -> str:
        return f"{self.ratio:.2f}"

    @property
    def chip_text(self) -> str:
        return f"contrast:{self.display_ratio} {self.grade.face}"


@dataclass
class PaletteEntry:
    """A named color in a palette, e.g. one chip."""

    code: str
    color: str


@dataclass
class PaletteResult:
    """Aggregate result from checking a whole palette against a background."""

    background: str | None = None
    results: list[tuple[PaletteEntry, ContrastResult]] = field(default_factory=list)
    failed: list[tuple[PaletteEntry, str]] = field(default_factory=list)
    undefined: list[PaletteEntry] = field(default_factory=list)

    @property
    def total_entries(self) -> int:
        return len(self.results) + len(self.failed) + len(self.undefined)

    @property
    def passing_count(self) -> int:
        return sum(1 for _, r in self.results if r.passes)

    @property
    def failing_count(self) -> int:
        return sum(1 for _, r in self.results if not r.passes)

    @property
    def worst(self) -> ContrastResult | None:
        if not self.results:
            return None
        return min((r for _, r in self.results), key=lambda r: r.ratio)
