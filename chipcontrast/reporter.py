"""Report generation — JSON and Markdown output."""

from __future__ import annotations

import json
from pathlib import Path

from chipcontrast.models import ContrastResult, PaletteResult


def _level_name(result: ContrastResult) -> str:
    return str(result.level) if result.level is not None else "Fail"


def write_json_report(result: PaletteResult, output: Path, *, precision: int = 2) -> None:
    """Write a palette result as a JSON report."""
    data = {
        "background": result.background,
        "total": result.total_entries,
        "passing": result.passing_count,
        "failing": result.failing_count,
        "chips": [
            {
                "code": entry.code,
                "color": entry.color,
                "ratio": round(r.ratio, precision),
                "level": r.level.name if r.level is not None else None,
                "grade": r.grade.value,
            }
            for entry, r in result.results
        ],
        "invalid": [
            {"code": entry.code, "color": entry.color, "error": error}
            for entry, error in result.failed
        ],
        "undefined": [{"code": e.code, "color": e.color} for e in result.undefined],
    }
    output.write_text(json.dumps(data, indent=2), encoding="utf-8")


def write_markdown_report(result: PaletteResult, output: Path, *, precision: int = 2) -> None:
    """Write a palette result as a Markdown report."""
    lines: list[str] = [
        "# Contrast Report",
        "",
        f"- **Background:** {result.background or 'Not set'}",
        f"- **Chips:** {result.total_entries}",
        "",
        f"## Results ({result.passing_count} passing, {result.failing_count} failing)",
        "",
        "| Code | Color | Ratio | Level | Grade |",
        "|---|---|---|---|---|",
    ]
    for entry, r in result.results:
        lines.append(
            f"| {entry.code} | `{entry.color}` | {r.ratio:.{precision}f}:1 "
            f"| {_level_name(r)} | {r.grade.value} {r.grade.face} |"
        )

    if result.failed:
        lines += ["", "## Invalid colors", ""]
        for entry, error in result.failed:
            lines.append(f"- **{entry.code}** `{entry.color}`: {error}")

    if result.undefined:
        lines += ["", "## Contrast undefined (no background)", ""]
        for entry in result.undefined:
            lines.append(f"- **{entry.code}** `{entry.color}`")

    lines.append("")
    output.write_text("\n".join(lines), encoding="utf-8")


def format_contrast_summary(result: ContrastResult) -> str:
    """Return a human-readable summary of a single contrast check."""
    lines = [
        f"Contrast: {result.foreground} on {result.background}",
        f"Ratio: {result.display_ratio}:1",
        f"Level: {_level_name(result)}",
        f"Chip: {result.chip_text}",
    ]
    return "\n".join(lines)
