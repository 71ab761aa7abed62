"""Scanner."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Final, TextIO

from loxpy.diagnostics import (
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    Diagnostic,
    DiagnosticSpec,
    has_errors,
)
from loxpy.lexer.options import DEFAULT_OPTIONS, ScannerOptions
from loxpy.lexer.result import ScanResult
from loxpy.lexer.tokens import NO_VALUE, LiteralValue, NumValue, StrValue, Token, TokenKind, eof_token
from loxpy.text import TextRange, slice_text_range

if TYPE_CHECKING:
    from loxpy.diagnostics import DiagnosticSink

logger = logging.getLogger(__name__)

_SINGLE_CHAR_KINDS: Final[dict[str, TokenKind]] = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
}

# (bare kind, kind when followed by "=")
_EQUAL_SUFFIX_KINDS: Final[dict[str, tuple[TokenKind, TokenKind]]] = {
    "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
    "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
}


def _is_digit(ch: str) -> bool:
    # ASCII only: str.isdigit() also accepts characters float() rejects.
    return "0" <= ch <= "9"


def _is_alpha(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_"


def _is_alphanumeric(ch: str) -> bool:
    return _is_alpha(ch) or _is_digit(ch)


class Scanner:
    """Single-pass scanner producing every token of a source text.

    Lexical errors are recorded as diagnostics and never stop the pass, so one
    scan reports all of them. Each `scan_tokens()` call starts from a fresh
    cursor, line counter and diagnostics list.
    """

    def __init__(
        self,
        source: str,
        options: ScannerOptions | None = None,
        *,
        on_diagnostic: DiagnosticSink | None = None,
    ) -> None:
        self._source = source
        self._options = options if options is not None else DEFAULT_OPTIONS
        self._on_diagnostic = on_diagnostic
        self._reset()

    def _reset(self) -> None:
        self._start = 0
        self._current = 0
        self._line = self._options.first_line
        self._start_line = self._line
        self._tokens: list[Token] = []
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def options(self) -> ScannerOptions:
        return self._options

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Diagnostics emitted during the last scan."""
        return self._diagnostics

    @property
    def had_error(self) -> bool:
        return has_errors(self._diagnostics)

    @property
    def line(self) -> int:
        return self._line

    @property
    def current_range(self) -> TextRange:
        """Span of the lexeme being recognized."""
        return TextRange(self._start, self._current)

    @property
    def is_at_end(self) -> bool:
        return self._current >= len(self._source)

    def scan_tokens(self) -> list[Token]:
        self._reset()

        while not self.is_at_end:
            self._start = self._current
            self._start_line = self._line
            self._scan_token()

        self._tokens.append(eof_token(self._line, self._current))
        logger.debug(
            "scanned %d chars into %d tokens with %d diagnostics",
            len(self._source),
            len(self._tokens),
            len(self._diagnostics),
        )
        return self._tokens

    def _scan_token(self) -> None:
        ch = self._advance()

        kind = _SINGLE_CHAR_KINDS.get(ch)
        if kind is not None:
            self._add_token(kind)
            return

        pair = _EQUAL_SUFFIX_KINDS.get(ch)
        if pair is not None:
            bare, compound = pair
            self._add_token(compound if self._match("=") else bare)
            return

        match ch:
            case "/":
                if self._match("/"):
                    # A comment goes until the end of the line.
                    while self._current_char() != "\n" and not self.is_at_end:
                        self._advance()
                else:
                    self._add_token(TokenKind.SLASH)
            case " " | "\r" | "\t":
                pass
            case "\n":
                self._line += 1
            case '"':
                self._lex_string()
            case c if _is_digit(c):
                self._lex_number()
            case c if _is_alpha(c):
                self._lex_identifier()
            case _:
                self._report(LEXER_UNEXPECTED_CHARACTER)

    def _lex_string(self) -> None:
        while self._current_char() != '"' and not self.is_at_end:
            if self._current_char() == "\n":
                if not self._options.allow_multiline_strings:
                    break
                self._line += 1
            self._advance()

        if self.is_at_end or self._current_char() != '"':
            self._report(LEXER_UNTERMINATED_STRING)
            return

        # The closing quote.
        self._advance()

        # Trim the surrounding quotes.
        value = self._source[self._start + 1 : self._current - 1]
        self._add_token(TokenKind.STRING, StrValue(value))

    def _lex_number(self) -> None:
        while _is_digit(self._current_char()):
            self._advance()

        # Fractional part only when a digit follows the dot.
        if self._current_char() == "." and _is_digit(self._peek_char()):
            self._advance()
            while _is_digit(self._current_char()):
                self._advance()

        self._add_token(TokenKind.NUMBER, NumValue(float(self._lexeme())))

    def _lex_identifier(self) -> None:
        while _is_alphanumeric(self._current_char()):
            self._advance()

        self._add_token(self._options.keywords.resolve(self._lexeme()))

    def _add_token(self, kind: TokenKind, literal: LiteralValue = NO_VALUE) -> None:
        self._tokens.append(
            Token(
                kind,
                self._lexeme(),
                self._start_line,
                literal,
                self.current_range,
            )
        )

    def _report(self, spec: DiagnosticSpec) -> None:
        diagnostic = Diagnostic.from_spec(
            spec,
            line=self._line,
            range=self.current_range,
        )
        self._diagnostics.append(diagnostic)
        logger.debug("%s at line %d: %r", spec.code, self._line, self._lexeme())
        if self._on_diagnostic is not None:
            self._on_diagnostic(diagnostic)

    def _lexeme(self) -> str:
        return slice_text_range(self._source, self.current_range)

    def _match(self, expected: str) -> bool:
        if self._current_char() != expected or self.is_at_end:
            return False
        self._current += 1
        return True

    def _current_char(self) -> str:
        if self.is_at_end:
            return "\0"
        return self._source[self._current]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._current + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self) -> str:
        ch = self._source[self._current]
        self._current += 1
        return ch


def scan(
    source: str,
    options: ScannerOptions | None = None,
    *,
    on_diagnostic: DiagnosticSink | None = None,
) -> ScanResult:
    """Scan `source` with a fresh Scanner; no state is shared between calls."""
    scanner = Scanner(source, options, on_diagnostic=on_diagnostic)
    tokens = scanner.scan_tokens()
    return ScanResult(source_text=source, tokens=tokens, diagnostics=scanner.diagnostics)


def dump_tokens(
    tokens: list[Token],
    diagnostics: list[Diagnostic] | None = None,
    file: TextIO | None = None,
) -> None:
    """Print token list with kind, range, line, and lexeme for debugging."""
    out = sys.stdout if file is None else file
    for i, tok in enumerate(tokens):
        print(
            f"{i:03d} {tok.kind.name:<14} range={tok.range.as_tuple()} line={tok.line} "
            f"text={tok.lexeme!r} literal={tok.value!r}",
            file=out,
        )

    if diagnostics is not None:
        print("\nDiagnostics:", file=out)
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} line={d.line} range={d.range.as_tuple()} message={d.message}", file=out)
