"""Run configuration (thresholds and host layout)."""

from .settings import HoverThresholds, HostLayout  # noqa: F401
