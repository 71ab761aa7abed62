"""Diagnostics."""

from loxpy.diagnostics.codes import (
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    DiagnosticSpec,
)
from loxpy.diagnostics.diagnostic import Diagnostic, Severity
from loxpy.diagnostics.report import (
    DiagnosticSink,
    collect_diagnostics,
    has_errors,
    print_diagnostic,
)

__all__ = [
    "LEXER_UNEXPECTED_CHARACTER",
    "LEXER_UNTERMINATED_STRING",
    "Diagnostic",
    "DiagnosticSink",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "has_errors",
    "print_diagnostic",
]
