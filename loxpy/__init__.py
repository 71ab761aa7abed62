"""Lexical front end for the Lox scripting language."""

from loxpy.lexer import Scanner, ScannerOptions, Token, TokenKind, scan
from loxpy.pipeline import ScanResult

__version__ = "0.1.0"

__all__ = [
    "ScanResult",
    "Scanner",
    "ScannerOptions",
    "Token",
    "TokenKind",
    "__version__",
    "scan",
]
