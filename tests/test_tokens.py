from types import MappingProxyType

import pytest

from loxpy.lexer import (
    DEFAULT_KEYWORDS,
    NO_VALUE,
    KeywordTable,
    NoValue,
    NumValue,
    StrValue,
    Token,
    TokenKind,
    eof_token,
    scan,
)


def test_token_kind_vocabulary_is_closed() -> None:
    assert len(TokenKind) == 39
    assert sum(1 for kind in TokenKind if kind.is_keyword) == 16
    assert {kind for kind in TokenKind if kind.is_literal} == {
        TokenKind.IDENTIFIER,
        TokenKind.STRING,
        TokenKind.NUMBER,
    }
    assert not TokenKind.EOF.is_keyword


def test_keyword_table_covers_every_keyword_kind() -> None:
    assert len(DEFAULT_KEYWORDS) == 16
    assert set(DEFAULT_KEYWORDS.values()) == {kind for kind in TokenKind if kind.is_keyword}
    for word, kind in DEFAULT_KEYWORDS.items():
        assert kind.name == word.upper()


def test_keyword_table_resolves_whole_words_only() -> None:
    assert DEFAULT_KEYWORDS.resolve("while") == TokenKind.WHILE
    assert DEFAULT_KEYWORDS.resolve("whilex") == TokenKind.IDENTIFIER
    assert DEFAULT_KEYWORDS.resolve("whil") == TokenKind.IDENTIFIER
    assert DEFAULT_KEYWORDS.resolve("WHILE") == TokenKind.IDENTIFIER


def test_keyword_table_is_read_only() -> None:
    source = {"let": TokenKind.VAR}
    table = KeywordTable(source)
    source["fn"] = TokenKind.FUN

    assert "fn" not in table
    assert isinstance(table._words, MappingProxyType)
    with pytest.raises(TypeError):
        table["fn"] = TokenKind.FUN  # type: ignore[index]


def test_keyword_table_rejects_non_keyword_kinds() -> None:
    with pytest.raises(ValueError, match="Not a keyword token kind"):
        KeywordTable({"x": TokenKind.IDENTIFIER})


def test_literal_union_variants() -> None:
    assert NO_VALUE == NoValue()
    assert NO_VALUE.python_value is None
    assert StrValue("hi").python_value == "hi"
    assert NumValue(2.5).python_value == 2.5
    assert StrValue("1") != NumValue(1.0)


def test_token_display_form() -> None:
    tokens = scan('var greeting = "hi"; 10').tokens

    assert [str(token) for token in tokens] == [
        "VAR var null",
        "IDENTIFIER greeting null",
        "EQUAL = null",
        'STRING "hi" hi',
        "SEMICOLON ; null",
        "NUMBER 10 10.0",
        "EOF  null",
    ]


def test_token_is_immutable() -> None:
    token = Token(TokenKind.NIL, "nil", 1)

    with pytest.raises(AttributeError):
        token.lexeme = "null"  # type: ignore[misc]


def test_eof_token_shape() -> None:
    token = eof_token(3, 12)

    assert token.is_eof
    assert token.lexeme == ""
    assert token.value is None
    assert token.line == 3
    assert token.range.as_tuple() == (12, 12)
