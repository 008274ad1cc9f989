"""Hover audit CLI.

Checks a host application checkout:
 - every theme under ``src/themes/defaults`` keeps hover visually distinct
   from background (directly or via the simulated brighten fixup);
 - the paint routing source handles the menu control elements;
 - no UI source sets a stylesheet on the menu bar;
 - the theme loader keeps its hover fixup.

Exit code 0 when everything passes, else 1. ``--json`` prints the structured
result instead of the text report.

Example:
  hover-audit --root ../host-app --calibrate
"""

from __future__ import annotations

import argparse
import io
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from hover_audit import __version__
from hover_audit.config.settings import HOST_ROOT, HostLayout, HoverThresholds
from hover_audit.services.report import ReportContext, run_report


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    defaults = HoverThresholds()
    p = argparse.ArgumentParser(description="Structural hover contrast audit")
    p.add_argument("--root", default=HOST_ROOT, help="Host application root directory")
    p.add_argument("--themes-dir", help="Override theme store directory")
    p.add_argument("--paint-source", help="Override paint routing source file")
    p.add_argument("--theme-source", help="Override theme loader source file")
    p.add_argument("--ui-source-dir", help="Override UI source directory")
    p.add_argument(
        "--raw-threshold",
        type=int,
        default=defaults.raw,
        help=f"Minimum hover/background distance (default: {defaults.raw})",
    )
    p.add_argument(
        "--fixed-threshold",
        type=int,
        default=defaults.fixed,
        help=f"Minimum distance after brighten fixup (default: {defaults.fixed})",
    )
    p.add_argument("--calibrate", action="store_true", help="Compare fixup with QColor.lighter")
    p.add_argument("--json", action="store_true", help="Output JSON result")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostic log level (stderr)",
    )
    p.add_argument("--version", action="version", version=f"hover-audit {__version__}")
    return p.parse_args(argv)


def build_layout(args: argparse.Namespace) -> HostLayout:
    layout = HostLayout.from_root(args.root)
    overrides = {
        "themes_dir": args.themes_dir,
        "paint_source": args.paint_source,
        "theme_source": args.theme_source,
        "ui_source_dir": args.ui_source_dir,
    }
    return replace(layout, **{k: Path(v) for k, v in overrides.items() if v})


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        stream=sys.stderr,
    )
    thresholds = replace(
        HoverThresholds(), raw=args.raw_threshold, fixed=args.fixed_threshold
    )
    layout = build_layout(args)
    if args.json:
        ctx = ReportContext(out=io.StringIO())
        code = run_report(layout, thresholds, ctx, calibrate=args.calibrate)
        print(json.dumps(ctx.as_dict(), indent=2))
        return code
    return run_report(layout, thresholds, calibrate=args.calibrate)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
