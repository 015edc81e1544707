"""CLI entry point — all commands defined here."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from chipcontrast import __version__
from chipcontrast.models import ContrastGrade, WcagLevel

app = typer.Typer(
    name="chipcontrast",
    help="WCAG color contrast checker.",
    no_args_is_help=True,
)
console = Console()

_GRADE_STYLE = {
    ContrastGrade.GREAT: "bold green",
    ContrastGrade.GOOD: "green",
    ContrastGrade.MEH: "yellow",
    ContrastGrade.BAD: "red",
}


def version_callback(value: bool) -> None:
    if value:
        console.print(f"chipcontrast {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(  # noqa: UP007
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug output."),
) -> None:
    """chipcontrast — WCAG 2.0 contrast ratios for color chips."""
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _parse_level(name: str) -> WcagLevel:
    try:
        return WcagLevel[name.upper().replace("-", "_")]
    except KeyError:
        console.print(
            f"[red]Unknown level:[/red] {name}. "
            f"Choose from: {', '.join(lvl.name for lvl in WcagLevel)}"
        )
        raise typer.Exit(code=1)


@app.command()
def check(
    foreground: str = typer.Argument(..., help="Foreground color (#RRGGBB or rgb())."),
    background: str = typer.Argument(..., help="Background color (#RRGGBB or rgb())."),
    require: Optional[str] = typer.Option(  # noqa: UP007
        None, "--require", "-r", help="Fail unless this level is met (AA_LARGE, AA, AAA).",
    ),
    plain: bool = typer.Option(False, "--plain", help="Print a plain-text summary instead of a table."),
) -> None:
    """Compute the contrast ratio of a foreground color over a background."""
    from chipcontrast.analyzer import ContrastAnalyzer
    from chipcontrast.utils.color import InvalidColorFormat

    required = _parse_level(require) if require else None

    try:
        result = ContrastAnalyzer().check(foreground, background)
    except InvalidColorFormat as exc:
        console.print(f"[red]Invalid color:[/red] {exc}")
        raise typer.Exit(code=1)

    if plain:
        from chipcontrast.reporter import format_contrast_summary

        console.print(format_contrast_summary(result), markup=False, highlight=False)
    else:
        style = _GRADE_STYLE[result.grade]
        table = Table(title=f"Contrast: {foreground} on {background}")
        table.add_column("Metric", style="bold")
        table.add_column("Value")
        table.add_row("Ratio", f"{result.display_ratio}:1")
        table.add_row("Level", str(result.level) if result.level is not None else "[red]None[/red]")
        table.add_row("Grade", f"[{style}]{result.grade.value}[/{style}]")
        table.add_row("Chip", f"[{style}]{result.chip_text}[/{style}]")
        console.print(table)

    if required is not None and not result.ratio >= required.min_ratio:
        console.print(f"[red]X[/red] Does not meet {required}")
        raise typer.Exit(code=1)


@app.command()
def levels() -> None:
    """Show the WCAG contrast levels and their minimum ratios."""
    table = Table(title="WCAG Contrast Levels")
    table.add_column("Level", style="bold")
    table.add_column("Minimum ratio")
    table.add_column("Use")

    notes_map = {
        WcagLevel.AA_LARGE: "Large-scale text",
        WcagLevel.AA: "General use",
        WcagLevel.AAA: "Ideal, high contrast",
    }

    for level in WcagLevel:
        table.add_row(level.name, f"{level.min_ratio:g}:1", notes_map[level])

    console.print(table)


@app.command()
def palette(
    palette_file: Path = typer.Argument(..., help="Palette YAML file listing colors."),
    background: Optional[str] = typer.Option(  # noqa: UP007
        None, "--background", "-b", help="Background color. Overrides the file and theme.",
    ),
    theme: Optional[str] = typer.Option(  # noqa: UP007
        None, "--theme", "-t", help="Theme background to use: dark or light.",
    ),
    report: Optional[Path] = typer.Option(  # noqa: UP007
        None, "--report", help="Write a report (format from config) to this path.",
    ),
    config: Optional[Path] = typer.Option(  # noqa: UP007
        None, "--config", "-c", help="Path to chipcontrast.yaml.",
    ),
) -> None:
    """Check every color in a palette file against a background."""
    from chipcontrast.analyzer import ContrastAnalyzer
    from chipcontrast.config import ChipContrastConfig
    from chipcontrast.palette import PaletteFile
    from chipcontrast.utils.color import InvalidColorFormat

    if not palette_file.is_file():
        console.print(f"[red]File not found:[/red] {palette_file}")
        raise typer.Exit(code=1)

    cfg = ChipContrastConfig.load(config)
    if theme is not None:
        if theme not in ("dark", "light"):
            console.print(f"[red]Unknown theme:[/red] {theme}")
            raise typer.Exit(code=1)
        cfg.theme.mode = theme

    try:
        palette_data = PaletteFile.load(palette_file)
    except ValueError as exc:
        console.print(f"[red]Invalid palette:[/red] {exc}")
        raise typer.Exit(code=1)

    bg = background or palette_data.background or cfg.theme.background

    try:
        result = ContrastAnalyzer().check_palette(palette_data.entries(), bg)
    except InvalidColorFormat as exc:
        console.print(f"[red]Invalid background:[/red] {exc}")
        raise typer.Exit(code=1)

    precision = cfg.output.precision
    table = Table(title=f"Palette on {bg}")
    table.add_column("Code", style="bold")
    table.add_column("Color")
    table.add_column("Ratio")
    table.add_column("Level")
    table.add_column("Grade")
    for entry, r in result.results:
        style = _GRADE_STYLE[r.grade]
        table.add_row(
            entry.code,
            entry.color,
            f"{r.ratio:.{precision}f}:1",
            str(r.level) if r.level is not None else "[red]None[/red]",
            f"[{style}]{r.grade.value} {r.grade.face}[/{style}]",
        )
    console.print(table)

    if result.failed:
        console.print()
        for entry, error in result.failed:
            console.print(f"  [red]X[/red] {entry.code}: {error}")

    console.print(
        f"[dim]{result.passing_count} passing, {result.failing_count} failing, "
        f"{len(result.failed)} invalid[/dim]"
    )
    worst = result.worst
    if worst is not None:
        console.print(
            f"[dim]Lowest contrast:[/dim] {worst.foreground} at "
            f"{worst.ratio:.{precision}f}:1",
            highlight=False,
        )

    if report is not None:
        from chipcontrast.reporter import write_json_report, write_markdown_report

        if cfg.output.report_format == "json":
            write_json_report(result, report, precision=precision)
        else:
            write_markdown_report(result, report, precision=precision)
        console.print(f"[green]OK[/green] Report written to {report}")
