"""Color text parsing.

Accepted forms are 6-digit hex (``#RRGGBB`` or ``RRGGBB``) and the functional
``rgb(r, g, b)`` / ``rgba(r, g, b, a)`` notation. Anything richer (named
colors, ``hsl()``, 3-digit hex) must be normalized by the caller first.
"""

from __future__ import annotations

import re

from chipcontrast.models import RGBColor

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")
_FUNCTIONAL_PATTERN = re.compile(r"^rgba?\s*\(([^()]*)\)$", re.IGNORECASE)
_NUMBER_PATTERN = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)$")


class InvalidColorFormat(ValueError):
    """Raised when text is not a supported color syntax."""

    def __init__(self, text: str, reason: str = "not a hex or rgb() color") -> None:
        super().__init__(f"Invalid color {text!r}: {reason}")
        self.text = text
        self.reason = reason


def parse_color(text: str) -> RGBColor:
    """Parse *text* into an :class:`RGBColor`.

    Raises :class:`InvalidColorFormat` when *text* matches neither grammar,
    when a component is not a number, or when there are not 3 or 4
    components.
    """
    stripped = text.strip()

    match = _HEX_PATTERN.match(stripped)
    if match:
        r, g, b = (int(pair, 16) for pair in match.groups())
        return RGBColor(r=r, g=g, b=b)

    match = _FUNCTIONAL_PATTERN.match(stripped)
    if not match:
        raise InvalidColorFormat(text)

    values = [_parse_component(text, token) for token in match.group(1).split(",")]
    if len(values) < 3:
        raise InvalidColorFormat(text, "rgba string is too short")
    if len(values) > 4:
        raise InvalidColorFormat(text, "rgba string is too long")

    return RGBColor(
        r=values[0],
        g=values[1],
        b=values[2],
        a=values[3] if len(values) == 4 else None,
    )


def _parse_component(text: str, token: str) -> float:
    token = token.strip()
    if not _NUMBER_PATTERN.match(token):
        raise InvalidColorFormat(text, f"cannot parse {token!r} as float")
    return float(token)
