"""Color model, fixup simulator and checks for the hover audit."""

from .color_model import decode, encode, distance, Color  # noqa: F401
from .brighten import brighten  # noqa: F401
from .theme_store import ThemeRecord, load_theme_store  # noqa: F401
from .hover_contrast import ContrastVerdict, evaluate_theme, check_themes  # noqa: F401
from .source_audit import (  # noqa: F401
    CheckResult,
    Marker,
    audit_paint_markers,
    audit_hover_fixup,
    scan_menubar_stylesheets,
)
