"""Structural hover validation for desktop application themes."""

__version__ = "0.1.0"
