"""Brighten-on-collision simulator.

The host lightens a theme's hover color when authors leave it equal to the
background (``QColor::lighter(130)`` inside its theme loader). This module is
an independent model of that policy so theme data can be checked offline
without a rendering environment. It must not call into Qt.

Each channel ``v`` maps to ``min(255, floor(v * factor) + bias)``. The bias
keeps pure black moving.
"""

from __future__ import annotations

import math

from hover_audit.config.settings import DEFAULT_BRIGHTEN_BIAS, DEFAULT_BRIGHTEN_FACTOR
from .color_model import Color

__all__ = ["brighten", "brighten_channel"]


def brighten_channel(
    value: int, factor: float = DEFAULT_BRIGHTEN_FACTOR, bias: int = DEFAULT_BRIGHTEN_BIAS
) -> int:
    return min(255, math.floor(value * factor) + bias)


def brighten(
    color: Color, factor: float = DEFAULT_BRIGHTEN_FACTOR, bias: int = DEFAULT_BRIGHTEN_BIAS
) -> Color:
    r, g, b = color
    return (
        brighten_channel(r, factor, bias),
        brighten_channel(g, factor, bias),
        brighten_channel(b, factor, bias),
    )
