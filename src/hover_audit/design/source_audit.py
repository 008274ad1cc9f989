"""Source pattern audit for the host's hover painting.

Regex checks against host source text, no parsing:

 - Paint routing markers: the proxy style's ``drawControl`` must branch on the
   menu control elements, test ``State_Selected`` and use ``QPalette::Mid``
   for the highlight.
 - Menu bar stylesheets: no UI source line may call ``setStyleSheet`` on the
   menu bar, since a stylesheet bypasses the proxy style entirely.
 - Hover fixup: the theme loader must still lighten ``t.hover`` with
   ``lighter(130)`` when it collides with the background.

Files are read as UTF-8 with replacement, so encoding problems never fail a
check on their own.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from hover_audit.errors import ForbiddenPattern, HoverAuditError, MissingMarker

_logger = logging.getLogger(__name__)

__all__ = [
    "Marker",
    "CheckResult",
    "DEFAULT_PAINT_MARKERS",
    "HOVER_FIXUP_MARKERS",
    "audit_paint_markers",
    "scan_menubar_stylesheets",
    "audit_hover_fixup",
]


@dataclass(frozen=True)
class Marker:
    label: str
    pattern: re.Pattern[str]

    @classmethod
    def regex(cls, label: str, expr: str) -> "Marker":
        return cls(label, re.compile(expr))

    @classmethod
    def literal(cls, text: str) -> "Marker":
        return cls(text, re.compile(re.escape(text)))


DEFAULT_PAINT_MARKERS: Tuple[Marker, ...] = (
    Marker.regex("CE_MenuBarItem", r"element\s*==\s*CE_MenuBarItem\b"),
    Marker.regex("CE_MenuItem", r"element\s*==\s*CE_MenuItem\b"),
    Marker.regex("CE_MenuBarEmptyArea", r"element\s*==\s*CE_MenuBarEmptyArea\b"),
    Marker.regex("State_Selected", r"State_Selected"),
    Marker.regex("QPalette::Mid", r"QPalette::Mid\b"),
)

HOVER_FIXUP_MARKERS: Tuple[Marker, ...] = (
    Marker.literal("lighter(130)"),
    Marker.literal("t.hover"),
)

MENUBAR_REF = re.compile(r"menuBar")  # also matches m_menuBar
SET_STYLESHEET = re.compile(r"setStyleSheet")


@dataclass
class CheckResult:
    """Outcome of one source check.

    ``passes`` lists the affirmative findings (e.g. each marker found) so the
    report can print one line per finding.
    """

    label: str
    ok: bool
    passes: List[str] = field(default_factory=list)
    failures: List[HoverAuditError] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "ok": self.ok,
            "passes": list(self.passes),
            "failures": [
                {"error": type(f).__name__, "message": str(f), **f.context}
                for f in self.failures
            ],
            "notes": list(self.notes),
        }


def _read_text(path: Path) -> Optional[str]:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        _logger.warning("Could not read source file %s: %s", path, e)
        return None


def _iter_file_lines(path: Path) -> Iterable[tuple[int, str]]:
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for idx, line in enumerate(f, 1):
                yield idx, line.rstrip("\n")
    except OSError as e:
        _logger.warning("Could not read source file %s: %s", path, e)
        return


def _audit_markers(label: str, path: Path, markers: Sequence[Marker]) -> CheckResult:
    result = CheckResult(label=label, ok=True)
    code = _read_text(path)
    if code is None:
        result.notes.append(f"source file not readable: {path}")
        code = ""
    for marker in markers:
        if marker.pattern.search(code):
            result.passes.append(marker.label)
        else:
            result.ok = False
            result.failures.append(
                MissingMarker(
                    f"missing {marker.label}",
                    context={"marker": marker.label, "file": str(path)},
                )
            )
    _logger.debug("%s: %d/%d markers present in %s", label, len(result.passes), len(markers), path)
    return result


def audit_paint_markers(
    path: str | Path, markers: Sequence[Marker] = DEFAULT_PAINT_MARKERS
) -> CheckResult:
    """Require every marker to appear in the paint routing source."""
    return _audit_markers("paint-routing", Path(path), markers)


def audit_hover_fixup(
    path: str | Path, markers: Sequence[Marker] = HOVER_FIXUP_MARKERS
) -> CheckResult:
    """Require the theme loader to keep its hover brighten fixup."""
    return _audit_markers("hover-fixup", Path(path), markers)


def _iter_source_files(source_dir: Path, extensions: Sequence[str]) -> Iterable[Path]:
    for root, dirs, files in os.walk(source_dir):
        dirs.sort()
        for fname in sorted(files):
            if fname.endswith(tuple(extensions)):
                yield Path(root) / fname


def scan_menubar_stylesheets(
    source_dir: str | Path, extensions: Sequence[str] = (".cpp",)
) -> CheckResult:
    """Report every line applying a stylesheet to the menu bar.

    Parameters
    ----------
    source_dir : str | Path
        Root of the host's UI sources, walked recursively.
    extensions : sequence[str]
        File suffixes to scan.
    """
    root = Path(source_dir)
    result = CheckResult(label="menubar-stylesheet", ok=True)
    if not root.is_dir():
        result.notes.append(f"source directory not found: {root}")
        return result
    scanned = 0
    for path in _iter_source_files(root, extensions):
        scanned += 1
        for line_no, line in _iter_file_lines(path):
            if MENUBAR_REF.search(line) and SET_STYLESHEET.search(line):
                rel = path.relative_to(root).as_posix()
                snippet = line.strip()[:200]
                result.ok = False
                result.failures.append(
                    ForbiddenPattern(
                        f"stylesheet on menu bar at {rel}:{line_no}: {snippet}",
                        context={"file": rel, "line": line_no, "snippet": snippet},
                    )
                )
    _logger.debug("Scanned %d source file(s) under %s", scanned, root)
    return result
