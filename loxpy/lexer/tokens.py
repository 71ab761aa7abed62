"""Lexer tokens."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Final

from loxpy.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Single-character punctuation
    # -------------------------
    LEFT_PAREN = 1  # (
    RIGHT_PAREN = 2  # )
    LEFT_BRACE = 3  # {
    RIGHT_BRACE = 4  # }
    COMMA = 5  # ,
    DOT = 6  # .
    MINUS = 7  # -
    PLUS = 8  # +
    SEMICOLON = 9  # ;
    SLASH = 10  # /
    STAR = 11  # *

    # -------------------------
    # Operators (one or two chars)
    # -------------------------
    BANG = 20  # !
    BANG_EQUAL = 21  # !=
    EQUAL = 22  # =
    EQUAL_EQUAL = 23  # ==
    GREATER = 24  # >
    GREATER_EQUAL = 25  # >=
    LESS = 26  # <
    LESS_EQUAL = 27  # <=

    # -------------------------
    # Literals
    # -------------------------
    IDENTIFIER = 30
    STRING = 31
    NUMBER = 32

    # -------------------------
    # Keywords
    # -------------------------
    AND = 40
    CLASS = 41
    ELSE = 42
    FALSE = 43
    FUN = 44
    FOR = 45
    IF = 46
    NIL = 47
    OR = 48
    PRINT = 49
    RETURN = 50
    SUPER = 51
    THIS = 52
    TRUE = 53
    VAR = 54
    WHILE = 55

    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 99

    @property
    def is_keyword(self) -> bool:
        return TokenKind.AND <= self <= TokenKind.WHILE

    @property
    def is_literal(self) -> bool:
        return self in (TokenKind.IDENTIFIER, TokenKind.STRING, TokenKind.NUMBER)


# -------------------------
# Decoded literal values
# -------------------------


@dataclass(frozen=True, slots=True)
class NoValue:
    """Absent literal (every kind except STRING and NUMBER)."""

    @property
    def python_value(self) -> None:
        return None

    def __str__(self) -> str:
        return "null"


@dataclass(frozen=True, slots=True)
class StrValue:
    """Text between the quotes of a STRING token."""

    text: str

    @property
    def python_value(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class NumValue:
    """Decimal value of a NUMBER token. There is no separate integer form."""

    value: float

    @property
    def python_value(self) -> float:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


LiteralValue = NoValue | StrValue | NumValue

NO_VALUE: Final[NoValue] = NoValue()


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token.

    `range` is the half-open span of `lexeme` in the source text and `line`
    is the 1-based line of the lexeme's first character.
    """

    kind: TokenKind
    lexeme: str
    line: int
    literal: LiteralValue = NO_VALUE
    range: TextRange = field(default=TextRange(0, 0), compare=False)

    @property
    def value(self) -> str | float | None:
        """Decoded literal as a plain Python value."""
        return self.literal.python_value

    @property
    def is_eof(self) -> bool:
        return self.kind == TokenKind.EOF

    def __str__(self) -> str:
        return f"{self.kind.name} {self.lexeme} {self.literal}"


def eof_token(line: int, offset: int) -> Token:
    """The terminal sentinel: empty lexeme, no literal, empty range at `offset`."""
    return Token(TokenKind.EOF, "", line, NO_VALUE, TextRange.empty(offset))
