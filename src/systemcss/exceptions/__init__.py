"""Shared exception hierarchy for SystemCSS."""

from __future__ import annotations

from .base import SystemCSSError
from .config import ConfigError
from .validation import ValidationError, format_errors, sort_errors

__all__ = [
    "ConfigError",
    "SystemCSSError",
    "ValidationError",
    "format_errors",
    "sort_errors",
]
