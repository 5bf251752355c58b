"""Typed configuration structures for SystemCSS settings."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

from systemcss.constants.config import DEFAULT_MIXIN_FILENAME, DEFAULT_MIXIN_NAMESPACE


@dataclass(frozen=True)
class RoleTable:
    """One string per selector role (keywords, prefixes or suffixes)."""

    block: str = ""
    element: str = ""
    modifier: str = ""
    state: str = ""
    context: str = ""
    util: str = ""
    parent: str = ""

    def get(self, role: str) -> str:
        """Return the value configured for ``role``."""
        return getattr(self, role)

    def to_dict(self) -> dict[str, str]:
        return {field.name: getattr(self, field.name) for field in fields(self)}


@dataclass(frozen=True)
class PreprocessorConfig:
    """Settings for mixin file generation."""

    engine: str | None = None
    output: Path | None = None
    namespace: str = DEFAULT_MIXIN_NAMESPACE
    filename: str = DEFAULT_MIXIN_FILENAME
