"""Structured errors for the hover audit.

Every per-theme or per-check problem is represented by one of these classes.
The report driver converts them into report lines; only ``NoThemesFound``
ends a run early.
"""

from __future__ import annotations
from typing import Any


class HoverAuditError(Exception):
    """Base class for hover audit issues."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class MalformedColor(HoverAuditError):
    """Raised when a theme color attribute is missing or not a #RRGGBB hex string."""


class ThemeLoadError(HoverAuditError):
    """Raised when a theme file cannot be read or is not a JSON object."""


class ContrastInadequate(HoverAuditError):
    """Hover and background stay too close even after the simulated fixup."""


class MissingMarker(HoverAuditError):
    """A required marker is absent from host source text."""


class ForbiddenPattern(HoverAuditError):
    """A forbidden call pattern was found in host source text."""


class NoThemesFound(HoverAuditError):
    """The theme store is missing or holds no theme files."""


class CalibrationUnavailable(HoverAuditError):
    """Qt bindings required for calibration could not be imported."""
