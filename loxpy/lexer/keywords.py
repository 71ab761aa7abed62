"""Reserved words."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Final

from loxpy.lexer.tokens import TokenKind


class KeywordTable(Mapping[str, TokenKind]):
    """Read-only mapping from reserved words to their token kinds.

    Lookup is by exact, whole-lexeme match: `classify` is not `class`.
    """

    __slots__ = ("_words",)

    def __init__(self, words: Mapping[str, TokenKind]) -> None:
        for word, kind in words.items():
            if not kind.is_keyword:
                raise ValueError(f"Not a keyword token kind for {word!r}: {kind!r}")
        self._words = MappingProxyType(dict(words))

    def __getitem__(self, word: str) -> TokenKind:
        return self._words[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __hash__(self) -> int:
        return hash(frozenset(self._words.items()))

    def resolve(self, text: str) -> TokenKind:
        """Kind for an identifier-shaped lexeme: the reserved kind or IDENTIFIER."""
        return self._words.get(text, TokenKind.IDENTIFIER)

    def __repr__(self) -> str:
        return f"KeywordTable({sorted(self._words)!r})"


DEFAULT_KEYWORDS: Final[KeywordTable] = KeywordTable(
    {
        "and": TokenKind.AND,
        "class": TokenKind.CLASS,
        "else": TokenKind.ELSE,
        "false": TokenKind.FALSE,
        "for": TokenKind.FOR,
        "fun": TokenKind.FUN,
        "if": TokenKind.IF,
        "nil": TokenKind.NIL,
        "or": TokenKind.OR,
        "print": TokenKind.PRINT,
        "return": TokenKind.RETURN,
        "super": TokenKind.SUPER,
        "this": TokenKind.THIS,
        "true": TokenKind.TRUE,
        "var": TokenKind.VAR,
        "while": TokenKind.WHILE,
    }
)
