"""Config data model for SystemCSS."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from systemcss.constants.config import (
    DEFAULT_EXTENSIONS,
    DEFAULT_MIXINS,
    DEFAULT_PREFIXES,
    DEFAULT_PROTECTED_STATES,
    DEFAULT_ROOT,
    DEFAULT_SUFFIXES,
)
from systemcss.constants.roles import ROOT_ANCHORED_ROLES
from systemcss.types.config import PreprocessorConfig, RoleTable


@dataclass(frozen=True)
class SystemConfig:
    """Resolved compiler and mixin generator settings.

    Built once per run and never mutated; pass it explicitly to every
    compiler operation.
    """

    root: str = DEFAULT_ROOT
    mixins: RoleTable = RoleTable(**DEFAULT_MIXINS)
    prefixes: RoleTable = RoleTable(**DEFAULT_PREFIXES)
    suffixes: RoleTable = RoleTable(**DEFAULT_SUFFIXES)
    protected_states: tuple[str, ...] = DEFAULT_PROTECTED_STATES
    preprocessor: PreprocessorConfig = PreprocessorConfig()
    extensions: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_EXTENSIONS))

    def keyword_for(self, role: str) -> str:
        return self.mixins.get(role)

    def prefix_for(self, role: str) -> str:
        """Return the CSS prefix for ``role``, anchored to ``root`` where required."""
        prefix = self.prefixes.get(role)
        if role in ROOT_ANCHORED_ROLES:
            return f"{self.root} {prefix}"
        return prefix

    def suffix_for(self, role: str) -> str:
        return self.suffixes.get(role)

    @property
    def mixin_extension(self) -> str | None:
        """File extension for the configured preprocessor engine, if known."""
        engine = self.preprocessor.engine
        if engine is None:
            return None
        return self.extensions.get(engine)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable view, the same shape ``build_config`` accepts."""
        output = self.preprocessor.output
        return {
            "root": self.root,
            "mixins": self.mixins.to_dict(),
            "prefixes": self.prefixes.to_dict(),
            "suffixes": self.suffixes.to_dict(),
            "protected_states": list(self.protected_states),
            "preprocessor": {
                "engine": self.preprocessor.engine,
                "output": str(output) if output is not None else None,
                "namespace": self.preprocessor.namespace,
                "filename": self.preprocessor.filename,
            },
            "extensions": dict(self.extensions),
        }
