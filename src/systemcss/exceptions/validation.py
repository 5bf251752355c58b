"""Structured validation findings for config files."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class ValidationError:
    """One config problem, addressed by file, dotted key and optional YAML position."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""
    line: int | None = None

    def format(self) -> str:
        """Render as ``[CODE] path[:line] field: message (hint)``."""
        location = self.path if self.line is None else f"{self.path}:{self.line}"
        text = f"[{self.code}] {location}"
        text += f" {self.field}: {self.message}" if self.field else f" {self.message}"
        if self.hint:
            text += f" ({self.hint})"
        return text

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Order errors by code, then file, then key."""
    return sorted(errors, key=lambda e: (e.code, e.path, e.field))


def format_errors(errors: list[ValidationError]) -> str:
    return "\n".join(error.format() for error in sort_errors(errors))
