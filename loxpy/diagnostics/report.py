"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Callable, Iterable
import sys
from typing import TextIO

from loxpy.diagnostics.diagnostic import Diagnostic

DiagnosticSink = Callable[[Diagnostic], None]
"""Receives each diagnostic at the moment it is produced."""


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def print_diagnostic(diagnostic: Diagnostic, file: TextIO | None = None) -> None:
    """Write the display form of `diagnostic` to `file` (stderr by default)."""
    print(diagnostic.render(), file=sys.stderr if file is None else file)
