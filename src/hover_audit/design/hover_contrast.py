"""Hover vs background contrast checker.

For each theme:

 1. Decode ``background`` and ``hover``. A missing or malformed value fails
    the theme with ``MalformedColor``.
 2. If ``distance(background, hover) >= thresholds.raw`` the authored colors
    are already distinct (raw path).
 3. Otherwise simulate the host's brighten fixup on the background. The theme
    passes if ``distance(background, brighten(background)) >= thresholds.fixed``
    (fixup path).
 4. Else the theme fails with ``ContrastInadequate``.

Each evaluation is a pure function of one theme record. A failing theme never
prevents the remaining themes from being evaluated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from hover_audit.config.settings import HoverThresholds
from hover_audit.errors import (
    ContrastInadequate,
    HoverAuditError,
    MalformedColor,
    ThemeLoadError,
)
from .brighten import brighten
from .color_model import Color, decode, distance
from .theme_store import ThemeRecord

_logger = logging.getLogger(__name__)

__all__ = [
    "ContrastVerdict",
    "evaluate_theme",
    "check_themes",
    "RAW_PATH",
    "FIXUP_PATH",
]

RAW_PATH = "raw"
FIXUP_PATH = "fixup"


@dataclass(frozen=True)
class ContrastVerdict:
    """Outcome for a single theme.

    Attributes
    ----------
    theme : str
        Theme identifier (file name).
    passed : bool
        Final verdict.
    path : str | None
        ``"raw"`` or ``"fixup"`` when passed, ``None`` otherwise.
    distance : int | None
        Raw hover/background distance (``None`` if colors did not decode).
    fixed_distance : int | None
        Background/brightened distance, only set when the fixup was simulated.
    failure : HoverAuditError | None
        The error explaining a failed verdict.
    """

    theme: str
    passed: bool
    path: Optional[str] = None
    distance: Optional[int] = None
    fixed_distance: Optional[int] = None
    failure: Optional[HoverAuditError] = None

    def message(self) -> str:
        if self.failure is not None:
            return f"{self.theme}: {self.failure}"
        if self.path == FIXUP_PATH:
            return (
                f"{self.theme}: hover==bg, brighten fixup -> "
                f"dist {self.distance}->{self.fixed_distance}"
            )
        return f"{self.theme}: hover distinct (dist={self.distance})"

    def as_dict(self) -> Dict[str, Any]:
        return {
            "theme": self.theme,
            "passed": self.passed,
            "path": self.path,
            "distance": self.distance,
            "fixed_distance": self.fixed_distance,
            "error": type(self.failure).__name__ if self.failure else None,
            "message": self.message(),
        }


def _decode_attr(record: ThemeRecord, key: str) -> Color:
    value = record.get(key)
    try:
        return decode(value)
    except MalformedColor as e:
        raise MalformedColor(
            f"malformed color for '{key}': {value!r}",
            context={"theme": record.name, "attribute": key, "value": value},
        ) from e


def evaluate_theme(
    record: ThemeRecord, thresholds: HoverThresholds = HoverThresholds()
) -> ContrastVerdict:
    if record.load_error is not None:
        err = ThemeLoadError(record.load_error, context={"theme": record.name})
        return ContrastVerdict(theme=record.name, passed=False, failure=err)
    try:
        bg = _decode_attr(record, "background")
        hover = _decode_attr(record, "hover")
    except MalformedColor as e:
        _logger.debug("Theme %s has malformed colors: %s", record.name, e)
        return ContrastVerdict(theme=record.name, passed=False, failure=e)

    dist = distance(bg, hover)
    if dist >= thresholds.raw:
        return ContrastVerdict(theme=record.name, passed=True, path=RAW_PATH, distance=dist)

    fixed = brighten(bg, thresholds.factor, thresholds.bias)
    fixed_dist = distance(bg, fixed)
    _logger.debug(
        "Theme %s below raw threshold (%d < %d); simulated fixup distance %d",
        record.name,
        dist,
        thresholds.raw,
        fixed_dist,
    )
    if fixed_dist >= thresholds.fixed:
        return ContrastVerdict(
            theme=record.name,
            passed=True,
            path=FIXUP_PATH,
            distance=dist,
            fixed_distance=fixed_dist,
        )
    err = ContrastInadequate(
        f"hover too close to background and brighten fixup still too close "
        f"(dist={dist}, fixed={fixed_dist})",
        context={"theme": record.name, "distance": dist, "fixed_distance": fixed_dist},
    )
    return ContrastVerdict(
        theme=record.name,
        passed=False,
        distance=dist,
        fixed_distance=fixed_dist,
        failure=err,
    )


def check_themes(
    records: Iterable[ThemeRecord], thresholds: HoverThresholds = HoverThresholds()
) -> List[ContrastVerdict]:
    """Evaluate every theme, ordered by theme name."""
    return [evaluate_theme(r, thresholds) for r in sorted(records, key=lambda r: r.name)]
