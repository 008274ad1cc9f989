"""Global configuration and defaults for the hover audit.

The thresholds and the brighten formula constants were calibrated against one
host rendering behaviour; they are kept here (overridable via environment)
rather than hardcoded in the checker.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final, Tuple

DEFAULT_RAW_THRESHOLD: Final = int(os.environ.get("HOVER_AUDIT_RAW_THRESHOLD", "20"))
DEFAULT_FIXED_THRESHOLD: Final = int(os.environ.get("HOVER_AUDIT_FIXED_THRESHOLD", "15"))
DEFAULT_BRIGHTEN_FACTOR: Final = float(os.environ.get("HOVER_AUDIT_BRIGHTEN_FACTOR", "1.3"))
DEFAULT_BRIGHTEN_BIAS: Final = int(os.environ.get("HOVER_AUDIT_BRIGHTEN_BIAS", "1"))
HOST_ROOT: Final = os.environ.get("HOVER_AUDIT_ROOT", ".")

# Host project layout, relative to the host root
THEMES_SUBDIR: Final = os.path.join("src", "themes", "defaults")
PAINT_SOURCE: Final = os.path.join("src", "main.cpp")
THEME_SOURCE: Final = os.path.join("src", "themes", "theme.cpp")
UI_SOURCE_SUBDIR: Final = "src"
UI_SOURCE_EXTENSIONS: Final = (".cpp",)


@dataclass(frozen=True)
class HoverThresholds:
    """Numeric policy for the hover contrast check.

    Attributes
    ----------
    raw : int
        Minimum L1 distance between authored hover and background.
    fixed : int
        Minimum L1 distance between background and its brightened variant.
    factor : float
        Brighten multiplier per channel.
    bias : int
        Constant added after flooring so dark channels still move.
    """

    raw: int = DEFAULT_RAW_THRESHOLD
    fixed: int = DEFAULT_FIXED_THRESHOLD
    factor: float = DEFAULT_BRIGHTEN_FACTOR
    bias: int = DEFAULT_BRIGHTEN_BIAS


@dataclass(frozen=True)
class HostLayout:
    """Locations of the host application's themes and source files."""

    root: Path
    themes_dir: Path
    paint_source: Path
    theme_source: Path
    ui_source_dir: Path
    ui_extensions: Tuple[str, ...] = field(default=UI_SOURCE_EXTENSIONS)

    @classmethod
    def from_root(cls, root: str | os.PathLike[str] = HOST_ROOT) -> "HostLayout":
        base = Path(root)
        return cls(
            root=base,
            themes_dir=base / THEMES_SUBDIR,
            paint_source=base / PAINT_SOURCE,
            theme_source=base / THEME_SOURCE,
            ui_source_dir=base / UI_SOURCE_SUBDIR,
        )
