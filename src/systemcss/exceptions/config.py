"""Configuration-related exceptions."""

from __future__ import annotations

from systemcss.exceptions.base import SystemCSSError


class ConfigError(SystemCSSError, ValueError):
    """Raised when SystemCSS configuration is invalid or incomplete."""
