"""Contrast analyzer.

Runs the contrast pipeline for a single foreground/background pair or for a
whole palette of chips, producing ContrastResult / PaletteResult objects.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chipcontrast.models import ContrastResult, PaletteEntry, PaletteResult
from chipcontrast.utils.color import InvalidColorFormat, parse_color
from chipcontrast.utils.contrast import (
    contrast_ratio,
    relative_luminance,
    strictest_level,
)

logger = logging.getLogger(__name__)


class ContrastAnalyzer:
    """Checks colors against a background for WCAG contrast.

    Usage::

        analyzer = ContrastAnalyzer()
        result = analyzer.check("#a0ffa0", "#111111")
        result.level  # WcagLevel.AAA
    """

    def check(self, foreground: str, background: str) -> ContrastResult:
        """Compute contrast of *foreground* over *background*.

        Raises ``InvalidColorFormat`` if either color cannot be parsed.
        """
        fg = parse_color(foreground)
        bg = parse_color(background)
        logger.debug("Parsed colors: fg %s -> %s, bg %s -> %s", foreground, fg, background, bg)

        ratio = contrast_ratio(relative_luminance(fg), relative_luminance(bg))
        level = strictest_level(ratio)
        logger.debug(
            "Contrast ratio of fg %s to bg %s is %.4f at WCAG level %s",
            foreground, background, ratio, level,
        )
        return ContrastResult(
            foreground=foreground,
            background=background,
            ratio=ratio,
            level=level,
        )

    def check_palette(
        self, palette: Iterable[PaletteEntry], background: str | None
    ) -> PaletteResult:
        """Check every entry of *palette* against *background*.

        Entries with unparsable colors are collected in ``failed``. With no
        background the contrast is undefined and entries land in
        ``undefined``. An unparsable background raises ``InvalidColorFormat``.
        """
        result = PaletteResult(background=background)

        if background is None:
            logger.debug("No background color, contrast is undefined")
            result.undefined.extend(palette)
            return result

        # Fail fast on a bad background rather than once per entry.
        parse_color(background)

        for entry in palette:
            try:
                result.results.append((entry, self.check(entry.color, background)))
            except InvalidColorFormat as exc:
                logger.warning("Skipping chip %s: %s", entry.code, exc)
                result.failed.append((entry, str(exc)))

        return result
