"""Mixin template locations and temp-file naming."""

from __future__ import annotations

from pathlib import Path

TEMPLATES_DIR: Path = Path(__file__).resolve().parent.parent / "templates"
TEMPLATE_SUFFIX: str = ".j2"

MIXIN_TEMP_PREFIX: str = ".systemcss-"
MIXIN_TEMP_SUFFIX: str = ".tmp"
