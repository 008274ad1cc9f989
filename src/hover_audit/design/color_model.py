"""Color model for the hover audit.

Decodes ``#RRGGBB`` strings into RGB tuples and measures the L1 (Manhattan)
distance between two colors. The metric is not perceptual; it is cheap and
reproducible, which is all the structural check needs.

Public API:
- decode(value) -> (r, g, b)
- encode(color) -> "#rrggbb"
- distance(c1, c2) -> int in [0, 765]
"""

from __future__ import annotations

import re
from typing import Any, Tuple

from hover_audit.errors import MalformedColor

__all__ = ["Color", "decode", "encode", "distance", "MAX_DISTANCE"]

Color = Tuple[int, int, int]

MAX_DISTANCE = 3 * 255

_HEX6 = re.compile(r"[0-9a-fA-F]{6}")
_HEX_ERR = "Color must be a #RRGGBB hex string: {value!r}"


def decode(value: Any) -> Color:
    """Decode a hex color (leading ``#`` optional) into an (r, g, b) tuple.

    Raises MalformedColor for anything that is not exactly six hex digits
    after the optional prefix, including ``None`` for a missing attribute.
    """
    if not isinstance(value, str):
        raise MalformedColor(_HEX_ERR.format(value=value), context={"value": value})
    digits = value[1:] if value.startswith("#") else value
    if not _HEX6.fullmatch(digits):
        raise MalformedColor(_HEX_ERR.format(value=value), context={"value": value})
    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    return r, g, b


def encode(color: Color) -> str:
    r, g, b = color
    return f"#{r:02x}{g:02x}{b:02x}"


def distance(c1: Color, c2: Color) -> int:
    return sum(abs(a - b) for a, b in zip(c1, c2))
