# RU: Разбор цвета тёмных модулей QR (#RRGGBB) с безопасным откатом на чёрный.
# EN: Foreground color resolution (#RRGGBB); total, falls back to opaque black.

from __future__ import annotations

import logging
import re
from typing import Any, Final, NamedTuple, Optional

logger = logging.getLogger(__name__)

__all__ = ["RGBColor", "DEFAULT_COLOR", "WHITE", "resolve_color"]

_HEX_RE: Final = re.compile(r"[0-9A-Fa-f]{6}")


class RGBColor(NamedTuple):
    """Three 8-bit channels (R, G, B)."""

    r: int
    g: int
    b: int

    def to_hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


DEFAULT_COLOR: Final[RGBColor] = RGBColor(0, 0, 0)
WHITE: Final[RGBColor] = RGBColor(255, 255, 255)


def resolve_color(spec: Optional[Any]) -> RGBColor:
    """Resolve a color specification into an RGB triple.

    A single leading ``#`` is optional; the rest must be exactly six hex
    digits read as RR, GG, BB. Anything else (None, wrong length, non-hex
    characters, non-string input) resolves to ``DEFAULT_COLOR``.

    Args:
        spec: Color string such as ``"#FF0000"`` or ``"00ff00"``.

    Returns:
        RGBColor: Parsed color, never raises.

    Example:
        >>> resolve_color("#1A2B3C")
        RGBColor(r=26, g=43, b=60)
        >>> resolve_color("red")
        RGBColor(r=0, g=0, b=0)
    """
    if not isinstance(spec, str):
        if spec is not None:
            logger.debug("Color spec of type %s ignored, using default", type(spec).__name__)
        return DEFAULT_COLOR

    hex_digits = spec[1:] if spec.startswith("#") else spec
    if not _HEX_RE.fullmatch(hex_digits):
        logger.debug("Malformed color spec (%d chars), using default", len(spec))
        return DEFAULT_COLOR

    return RGBColor(
        int(hex_digits[0:2], 16),
        int(hex_digits[2:4], 16),
        int(hex_digits[4:6], 16),
    )
