"""Compare the brighten simulator against Qt's ``QColor.lighter``.

The simulator is kept independent of Qt on purpose; this probe only measures
how far it drifts from the toolkit the host actually uses, for gray levels
(the colors hover collisions happen on in practice). It is informational and
never part of the pass/fail verdict.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from hover_audit.config.settings import DEFAULT_BRIGHTEN_BIAS, DEFAULT_BRIGHTEN_FACTOR
from hover_audit.errors import CalibrationUnavailable
from .brighten import brighten

__all__ = ["CalibrationReport", "compare_with_qt"]


@dataclass
class CalibrationReport:
    factor: float
    # (gray level, simulated channel, qt channel)
    samples: List[Tuple[int, int, int]] = field(default_factory=list)

    @property
    def max_deviation(self) -> int:
        return max((abs(sim - qt) for _, sim, qt in self.samples), default=0)

    def worst(self) -> Tuple[int, int, int] | None:
        if not self.samples:
            return None
        return max(self.samples, key=lambda s: abs(s[1] - s[2]))


def _qcolor():
    try:
        from PyQt6.QtGui import QColor
    except ImportError as e:
        raise CalibrationUnavailable(f"PyQt6 not available: {e}") from e
    return QColor


def compare_with_qt(
    levels: Iterable[int] = range(256),
    factor: float = DEFAULT_BRIGHTEN_FACTOR,
    bias: int = DEFAULT_BRIGHTEN_BIAS,
) -> CalibrationReport:
    QColor = _qcolor()
    qt_factor = int(round(factor * 100))
    report = CalibrationReport(factor=factor)
    for level in levels:
        sim = brighten((level, level, level), factor, bias)[0]
        qt = QColor(level, level, level).lighter(qt_factor).red()
        report.samples.append((level, sim, qt))
    return report
