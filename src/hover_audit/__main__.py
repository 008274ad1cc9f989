"""Module entrypoint for `python -m hover_audit`.

Delegates to `hover_audit.cli.check_hover.main`.
"""

from __future__ import annotations

from .cli import check_hover as _cli


def main() -> int:  # pragma: no cover - runtime delegation
    return _cli.main()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
