"""Color normalization for the renderer.

Turns a user-supplied color plus a 0..1 opacity into a single CSS color
string. Unlike the settings validators this never raises: a bad color
degrades to transparent-adjustable black so a render is never blocked.
"""

from __future__ import annotations

import logging
import math
import re

logger = logging.getLogger(__name__)

_HEX6_RE = re.compile(r"[0-9a-fA-F]{6}")


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp *value* into the closed interval [lo, hi]. NaN maps to *lo*."""
    if math.isnan(value) or value < lo:
        return lo
    if value > hi:
        return hi
    return value


def _expand_hex(value: str) -> str:
    raw = value.strip()
    if raw.startswith("#"):
        raw = raw[1:]
    if len(raw) == 3:
        raw = "".join(c + c for c in raw)
    return raw


def is_hex_color(value: str) -> bool:
    """True for ``#rgb``, ``#rrggbb`` and the same without the leading ``#``."""
    return _HEX6_RE.fullmatch(_expand_hex(value)) is not None


def hex_to_rgba(hex_color: str, alpha: float) -> str:
    """Convert a hex color to ``rgba(r, g, b, a)``.

    Malformed input (empty, wrong length, non-hex digits) yields
    ``rgba(0,0,0,a)``. Alpha is clamped to [0, 1].
    """
    a = clamp(alpha, 0, 1)
    expanded = _expand_hex(hex_color)

    if not _HEX6_RE.fullmatch(expanded):
        logger.debug("Not a hex color %r, falling back to black", hex_color)
        return f"rgba(0,0,0,{a})"

    r = int(expanded[0:2], 16)
    g = int(expanded[2:4], 16)
    b = int(expanded[4:6], 16)
    return f"rgba({r}, {g}, {b}, {a})"


def _looks_like_hex(value: str) -> bool:
    raw = value.strip()
    # rgb()/hsl()/named colors never start with '#', so anything that does is hex or broken
    return not raw or raw.startswith("#") or is_hex_color(raw)


def color_with_opacity(color: str, alpha: float) -> str:
    """Apply *alpha* to a hex color; pass any other CSS color through untouched.

    ``#``-prefixed and empty input always goes through :func:`hex_to_rgba`, so
    a broken hex such as ``#zzzzzz`` degrades to the black fallback rather
    than reaching the renderer as-is.
    """
    if _looks_like_hex(color):
        return hex_to_rgba(color, alpha)

    # Already a renderer-understood expression (named color, rgb(), hsl(), ...)
    return color
