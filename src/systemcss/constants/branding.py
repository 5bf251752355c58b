"""CLI branding strings."""

from __future__ import annotations

CLI_DESCRIPTION: str = """\
SystemCSS compiles selector DSL calls into CSS selectors.

  component(card) when(active) has(title)  ->  .card.\\+active .card--title
"""
