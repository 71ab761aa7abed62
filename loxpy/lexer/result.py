"""Scan result carrier."""

from __future__ import annotations

from dataclasses import dataclass

from loxpy.diagnostics import Diagnostic, has_errors
from loxpy.lexer.tokens import Token, TokenKind


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Tokens and diagnostics of one scan, owned by the caller."""

    source_text: str
    tokens: list[Token]
    diagnostics: list[Diagnostic]

    @property
    def had_error(self) -> bool:
        return has_errors(self.diagnostics)

    def kinds(self) -> list[TokenKind]:
        return [token.kind for token in self.tokens]
