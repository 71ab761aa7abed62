"""Diagnostics core types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from loxpy.diagnostics.codes import Severity
from loxpy.text import TextRange

if TYPE_CHECKING:
    from loxpy.diagnostics.codes import DiagnosticSpec


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the scanner.

    `line` is 1-based and points at the line the scanner had reached when the
    problem was detected; `range` covers the offending source text.
    """

    code: str
    message: str
    line: int
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @classmethod
    def from_spec(cls, spec: DiagnosticSpec, *, line: int, range: TextRange) -> Diagnostic:
        return cls(
            code=spec.code,
            message=spec.message,
            line=line,
            range=range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )

    @property
    def is_error(self) -> bool:
        return self.severity == "error"

    def render(self) -> str:
        """Display form, e.g. `[line 3] Error: Unterminated string.`"""
        label = "Error" if self.is_error else "Warning"
        return f"[line {self.line}] {label}: {self.message}"

    def __str__(self) -> str:
        return self.render()
