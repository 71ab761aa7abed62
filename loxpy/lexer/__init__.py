"""Lexer."""

from loxpy.lexer.keywords import DEFAULT_KEYWORDS, KeywordTable
from loxpy.lexer.options import DEFAULT_OPTIONS, ScannerOptions
from loxpy.lexer.result import ScanResult
from loxpy.lexer.scanner import Scanner, dump_tokens, scan
from loxpy.lexer.tokens import (
    NO_VALUE,
    LiteralValue,
    NoValue,
    NumValue,
    StrValue,
    Token,
    TokenKind,
    eof_token,
)

__all__ = [
    "DEFAULT_KEYWORDS",
    "DEFAULT_OPTIONS",
    "NO_VALUE",
    "KeywordTable",
    "LiteralValue",
    "NoValue",
    "NumValue",
    "ScanResult",
    "Scanner",
    "ScannerOptions",
    "StrValue",
    "Token",
    "TokenKind",
    "dump_tokens",
    "eof_token",
    "scan",
]
