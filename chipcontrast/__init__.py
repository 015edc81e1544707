"""chipcontrast — WCAG 2.0 color contrast checker."""

from chipcontrast.models import ContrastGrade, ContrastResult, RGBColor, WcagLevel
from chipcontrast.utils.color import InvalidColorFormat, parse_color
from chipcontrast.utils.contrast import (
    color_contrast,
    contrast_ratio,
    relative_luminance,
    strictest_level,
)

__version__ = "0.1.0"

__all__ = [
    "ContrastGrade",
    "ContrastResult",
    "InvalidColorFormat",
    "RGBColor",
    "WcagLevel",
    "color_contrast",
    "contrast_ratio",
    "parse_color",
    "relative_luminance",
    "strictest_level",
]
