"""Report driver for the hover audit.

Runs the theme contrast check and the source checks, writes one line per
theme/finding to the report stream and folds every outcome into a single
pass/fail verdict. All run state lives on a ``ReportContext`` created per run.

Report layout::

    --- Hover visibility across themes ---
      OK:   dark.json: hover distinct (dist=42)
      FAIL: black.json: hover too close ...
    ...
    ==================================================
    SOME HOVER CHECKS FAILED
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TextIO

from hover_audit.config.settings import HostLayout, HoverThresholds
from hover_audit.design.calibration import compare_with_qt
from hover_audit.design.hover_contrast import ContrastVerdict, check_themes
from hover_audit.design.source_audit import (
    CheckResult,
    audit_hover_fixup,
    audit_paint_markers,
    scan_menubar_stylesheets,
)
from hover_audit.design.theme_store import load_theme_store
from hover_audit.errors import CalibrationUnavailable, NoThemesFound

_logger = logging.getLogger(__name__)

__all__ = ["ReportContext", "run_report"]

SEPARATOR = "=" * 50
PASS_BANNER = "ALL HOVER CHECKS PASSED"
FAIL_BANNER = "SOME HOVER CHECKS FAILED"


@dataclass
class ReportContext:
    out: TextIO = field(default_factory=lambda: sys.stdout)
    ok: bool = True
    verdicts: List[ContrastVerdict] = field(default_factory=list)
    checks: List[CheckResult] = field(default_factory=list)
    fatal: Optional[str] = None
    calibration: Optional[Dict[str, Any]] = None
    _sections: int = 0

    def section(self, title: str) -> None:
        if self._sections:
            self.write("")
        self._sections += 1
        self.write(f"--- {title} ---")

    def write(self, line: str) -> None:
        print(line, file=self.out)

    def passed(self, message: str) -> None:
        self.write(f"  OK:   {message}")

    def failed(self, message: str) -> None:
        self.ok = False
        self.write(f"  FAIL: {message}")

    def as_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "fatal": self.fatal,
            "themes": [v.as_dict() for v in self.verdicts],
            "checks": [c.as_dict() for c in self.checks],
            "calibration": self.calibration,
        }


def _report_themes(ctx: ReportContext, verdicts: List[ContrastVerdict]) -> None:
    ctx.section("Hover visibility across themes")
    for verdict in verdicts:
        ctx.verdicts.append(verdict)
        if verdict.passed:
            ctx.passed(verdict.message())
        else:
            ctx.failed(verdict.message())


def _report_markers(ctx: ReportContext, result: CheckResult, subject: str) -> None:
    ctx.checks.append(result)
    for note in result.notes:
        ctx.write(f"  note: {note}")
    for label in result.passes:
        ctx.passed(f"{subject} handles {label}")
    for failure in result.failures:
        ctx.failed(f"{subject} {failure}")


def _report_stylesheets(ctx: ReportContext, result: CheckResult) -> None:
    ctx.checks.append(result)
    for note in result.notes:
        ctx.write(f"  note: {note}")
    for failure in result.failures:
        ctx.failed(str(failure))
    if result.ok:
        ctx.passed("No stylesheet on the menu bar")


def _report_fixup(ctx: ReportContext, result: CheckResult) -> None:
    ctx.checks.append(result)
    for note in result.notes:
        ctx.write(f"  note: {note}")
    if result.ok:
        ctx.passed("Theme loader has hover fixup")
    else:
        missing = ", ".join(f.context.get("marker", "?") for f in result.failures)
        ctx.failed(f"Theme loader missing hover fixup ({missing})")


def _report_calibration(ctx: ReportContext, thresholds: HoverThresholds) -> None:
    ctx.section("Calibration against QColor.lighter (informational)")
    try:
        report = compare_with_qt(factor=thresholds.factor, bias=thresholds.bias)
    except CalibrationUnavailable as e:
        _logger.info("Calibration skipped: %s", e)
        ctx.write(f"  note: calibration skipped ({e})")
        return
    worst = report.worst()
    ctx.calibration = {
        "factor": report.factor,
        "max_deviation": report.max_deviation,
        "worst": list(worst) if worst else None,
    }
    if worst is None:
        ctx.write("  note: no gray levels sampled")
        return
    level, sim, qt = worst
    ctx.write(
        f"  note: max deviation {report.max_deviation} over {len(report.samples)} "
        f"gray levels (worst at {level}: simulated {sim}, Qt {qt})"
    )


def run_report(
    layout: HostLayout,
    thresholds: HoverThresholds = HoverThresholds(),
    ctx: Optional[ReportContext] = None,
    *,
    calibrate: bool = False,
) -> int:
    """Run every check and return the process exit status (0 pass, 1 fail)."""
    ctx = ctx or ReportContext()
    try:
        records = load_theme_store(layout.themes_dir)
    except NoThemesFound as e:
        _logger.debug("Aborting run: %s", e)
        ctx.ok = False
        ctx.fatal = str(e)
        ctx.write(f"FAIL: No theme files found ({e})")
        return 1

    _report_themes(ctx, check_themes(records, thresholds))

    ctx.section("Paint routing handles required elements")
    _report_markers(ctx, audit_paint_markers(layout.paint_source), "Paint routing")

    ctx.section("No stylesheet on the menu bar")
    _report_stylesheets(
        ctx, scan_menubar_stylesheets(layout.ui_source_dir, layout.ui_extensions)
    )

    ctx.section("Theme loader applies hover fixup")
    _report_fixup(ctx, audit_hover_fixup(layout.theme_source))

    if calibrate:
        _report_calibration(ctx, thresholds)

    ctx.write("")
    ctx.write(SEPARATOR)
    ctx.write(PASS_BANNER if ctx.ok else FAIL_BANNER)
    return 0 if ctx.ok else 1
