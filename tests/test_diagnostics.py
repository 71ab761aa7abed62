import io

from loxpy.diagnostics import (
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    Diagnostic,
    collect_diagnostics,
    has_errors,
    print_diagnostic,
)
from loxpy.lexer import scan
from loxpy.text import TextRange


def make(severity: str = "error", line: int = 1) -> Diagnostic:
    return Diagnostic(
        code="X",
        message="Something happened.",
        line=line,
        range=TextRange(0, 1),
        severity=severity,  # type: ignore[arg-type]
    )


def test_from_spec_copies_spec_fields() -> None:
    diagnostic = Diagnostic.from_spec(LEXER_UNTERMINATED_STRING, line=7, range=TextRange(3, 9))

    assert diagnostic.code == "LEXER_UNTERMINATED_STRING"
    assert diagnostic.message == LEXER_UNTERMINATED_STRING.message
    assert diagnostic.hint == LEXER_UNTERMINATED_STRING.hint
    assert diagnostic.category == "lexer"
    assert diagnostic.line == 7
    assert diagnostic.is_error


def test_render_display_form() -> None:
    diagnostic = Diagnostic.from_spec(LEXER_UNEXPECTED_CHARACTER, line=4, range=TextRange(0, 1))

    assert diagnostic.render() == "[line 4] Error: Unexpected character."
    assert str(diagnostic) == diagnostic.render()
    assert make("warning", line=2).render() == "[line 2] Warning: Something happened."


def test_has_errors_ignores_warnings() -> None:
    assert has_errors([]) is False
    assert has_errors([make("warning")]) is False
    assert has_errors([make("warning"), make("error")]) is True


def test_collect_diagnostics_preserves_group_order() -> None:
    first = scan("@").diagnostics
    second = scan('"').diagnostics

    collected = collect_diagnostics(first, second)

    assert [d.code for d in collected] == ["LEXER_UNEXPECTED_CHARACTER", "LEXER_UNTERMINATED_STRING"]


def test_print_diagnostic_writes_rendered_line() -> None:
    out = io.StringIO()

    print_diagnostic(make(line=3), file=out)

    assert out.getvalue() == "[line 3] Error: Something happened.\n"
