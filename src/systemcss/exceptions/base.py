"""Root of the SystemCSS exception hierarchy."""

from __future__ import annotations


class SystemCSSError(Exception):
    """Base class for all SystemCSS errors."""
