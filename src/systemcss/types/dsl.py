"""Frozen dataclasses for the selector compiler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

Role: TypeAlias = Literal["block", "element", "modifier", "state", "context", "util", "parent", "other"]


@dataclass(frozen=True)
class CallDefinition:
    """A single DSL call such as ``component(one,two):hover``.

    ``keyword`` is empty for literal fragments, which are carried through
    expansion as a single argument.
    """

    keyword: str
    args: tuple[str, ...]
    pseudo: str = ""

    @classmethod
    def literal(cls, fragment: str) -> CallDefinition:
        return cls(keyword="", args=(fragment,))

    @property
    def is_literal(self) -> bool:
        return not self.keyword

    def expand(self) -> list[str]:
        """Return one single-argument call string per argument."""
        if self.is_literal:
            return list(self.args)
        suffix = f":{self.pseudo}" if self.pseudo else ""
        return [f"{self.keyword}({arg}){suffix}" for arg in self.args]


@dataclass(frozen=True)
class TargetAbstraction:
    """A classified selector fragment ready for rendering."""

    role: Role
    name: str
    pseudo: str = ""
    prefix: str = ""
    suffix: str = ""

    def render(self) -> str:
        return f"{self.prefix}{self.name}{self.suffix}{self.pseudo}"
