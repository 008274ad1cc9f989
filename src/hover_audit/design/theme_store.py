"""Theme store loading.

A theme store is a directory of JSON files, one flat object per theme:

{
  "name": "Dark",
  "background": "#1e1e1e",
  "hover": "#2a2d2e",
  ...
}

Only ``background`` and ``hover`` matter to the hover audit; other keys are
carried along untouched. Files that cannot be parsed do not abort loading,
they become records with ``load_error`` set so the checker can fail that one
theme and keep going.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, List, Mapping, Optional

from hover_audit.errors import NoThemesFound

_logger = logging.getLogger(__name__)

__all__ = ["ThemeRecord", "load_theme_store", "load_theme_file"]

THEME_SUFFIX = ".json"


@dataclass(frozen=True)
class ThemeRecord:
    name: str
    path: Path
    attributes: Mapping[str, Any] = field(default_factory=dict)
    load_error: Optional[str] = None

    def get(self, key: str) -> Any:
        return self.attributes.get(key)


def load_theme_file(path: str | Path) -> ThemeRecord:
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        _logger.warning("Could not read theme file %s: %s", p, e)
        return ThemeRecord(name=p.name, path=p, load_error=f"Unreadable theme file: {e}")
    except json.JSONDecodeError as e:
        _logger.warning("Invalid JSON in theme file %s: %s", p, e)
        return ThemeRecord(name=p.name, path=p, load_error=f"Invalid JSON: {e}")
    if not isinstance(data, Mapping):
        return ThemeRecord(name=p.name, path=p, load_error="Root of theme file must be an object")
    return ThemeRecord(name=p.name, path=p, attributes=MappingProxyType(dict(data)))


def load_theme_store(directory: str | Path) -> List[ThemeRecord]:
    """Load every theme file in ``directory``, sorted by theme name.

    Raises
    ------
    NoThemesFound
        If the directory is missing, unreadable, or holds no theme files.
    """
    d = Path(directory)
    if not d.is_dir():
        raise NoThemesFound(f"Theme directory not found: {d}", context={"directory": str(d)})
    try:
        paths = [p for p in d.iterdir() if p.suffix == THEME_SUFFIX and p.is_file()]
    except OSError as e:
        raise NoThemesFound(
            f"Theme directory unreadable: {d}", context={"directory": str(d)}
        ) from e
    if not paths:
        raise NoThemesFound(f"No theme files in {d}", context={"directory": str(d)})
    records = [load_theme_file(p) for p in sorted(paths, key=lambda p: p.name)]
    _logger.debug("Loaded %d theme file(s) from %s", len(records), d)
    return records
