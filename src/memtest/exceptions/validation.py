"""Structured validation problems reported by ``--check-config`` and preflight."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """One config problem with a stable code and the location it was found at.

    ``line`` and ``column`` are 1-based and only set for YAML syntax errors.
    """

    code: str
    path: str
    field: str
    message: str
    hint: str = ""
    line: int | None = None
    column: int | None = None

    @property
    def location(self) -> str:
        if self.line is None:
            return self.path
        if self.column is None:
            return f"{self.path}:{self.line}"
        return f"{self.path}:{self.line}:{self.column}"

    def format(self) -> str:
        """Render as ``[CODE] location message (hint)``."""
        rendered = f"[{self.code}] {self.location} {self.message}"
        if self.hint:
            rendered = f"{rendered} ({self.hint})"
        return rendered


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Order errors by code, then path, field and line."""
    return sorted(errors, key=lambda err: (err.code, err.path, err.field, err.line or 0))


def format_errors(errors: list[ValidationError]) -> str:
    return "\n".join(err.format() for err in sort_errors(errors))
