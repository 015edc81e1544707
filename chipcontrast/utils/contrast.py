"""WCAG 2.0 contrast ratio utilities.

Implements the relative luminance and contrast ratio definitions from
WCAG 2.0:
https://www.w3.org/TR/2008/REC-WCAG20-20081211/#relativeluminancedef
https://www.w3.org/TR/2008/REC-WCAG20-20081211/#contrast-ratiodef
"""

from __future__ import annotations

from chipcontrast.models import RGBColor, WcagLevel
from chipcontrast.utils.color import parse_color

# Strictest first.
_LEVELS_BY_STRICTNESS = tuple(sorted(WcagLevel, key=lambda lvl: lvl.min_ratio, reverse=True))


def _srgb_to_linear(v: float) -> float:
    """Convert an sRGB channel (0-1) to linear light."""
    if v <= 0.03928:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(color: RGBColor) -> float:
    """Compute relative luminance for a color with 0-255 channels.

    Per WCAG 2.0: L = 0.2126*R + 0.7152*G + 0.0722*B
    where R, G, B are linearized sRGB values. Alpha is ignored and channels
    are not clamped.
    """
    rl = _srgb_to_linear(color.r / 255.0)
    gl = _srgb_to_linear(color.g / 255.0)
    bl = _srgb_to_linear(color.b / 255.0)
    return 0.2126 * rl + 0.7152 * gl + 0.0722 * bl


def contrast_ratio(luminance1: float, luminance2: float) -> float:
    """Compute the WCAG contrast ratio between two relative luminances.

    Returns a value between 1.0 (identical) and 21.0 (black on white) for
    luminances in [0, 1]. Out-of-range luminances that zero the denominator
    give ``inf``, or ``nan`` when the numerator is zero too.
    """
    lighter = max(luminance1, luminance2)
    darker = min(luminance1, luminance2)
    numerator = lighter + 0.05
    denominator = darker + 0.05
    if denominator == 0:
        return float("nan") if numerator == 0 else float("inf")
    return numerator / denominator


def color_contrast(foreground: str, background: str) -> float:
    """Compute the contrast ratio between two color strings.

    Raises ``InvalidColorFormat`` if either string cannot be parsed.
    """
    return contrast_ratio(
        relative_luminance(parse_color(foreground)),
        relative_luminance(parse_color(background)),
    )


def strictest_level(ratio: float) -> WcagLevel | None:
    """Return the strictest level met by *ratio*, or None below 3:1."""
    for level in _LEVELS_BY_STRICTNESS:
        if ratio >= level.min_ratio:
            return level
    return None
