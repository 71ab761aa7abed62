import io
from pathlib import Path

import pytest

from loxpy.driver import (
    EX_DATAERR,
    EX_NOINPUT,
    EX_OK,
    PROMPT,
    build_parser,
    main,
    run_file_mode,
    run_prompt,
)


def write_script(tmp_path: Path, source: str) -> Path:
    path = tmp_path / "script.lox"
    path.write_text(source, encoding="utf-8")
    return path


def test_file_mode_prints_tokens_and_exits_zero(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = write_script(tmp_path, "var x = 10;\n")

    status = run_file_mode(path)

    captured = capsys.readouterr()
    assert status == EX_OK
    assert captured.out.splitlines() == [
        "VAR var null",
        "IDENTIFIER x null",
        "EQUAL = null",
        "NUMBER 10 10.0",
        "SEMICOLON ; null",
        "EOF  null",
    ]
    assert captured.err == ""


def test_file_mode_exits_65_on_lexical_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = write_script(tmp_path, 'print @;\n"open')

    status = run_file_mode(path)

    captured = capsys.readouterr()
    assert status == EX_DATAERR == 65
    assert captured.err.splitlines() == [
        "[line 1] Error: Unexpected character.",
        "[line 2] Error: Unterminated string.",
    ]
    # Tokens are still printed after errors.
    assert captured.out.splitlines()[-1] == "EOF  null"


def test_file_mode_reports_unreadable_file(tmp_path: Path) -> None:
    err = io.StringIO()

    status = run_file_mode(tmp_path / "missing.lox", stderr=err)

    assert status == EX_NOINPUT
    assert err.getvalue().startswith("Could not read ")


def test_file_mode_reports_undecodable_file(tmp_path: Path) -> None:
    path = tmp_path / "latin1.lox"
    path.write_bytes(b'"caf\xe9"')
    err = io.StringIO()

    status = run_file_mode(path, stderr=err)

    assert status == EX_DATAERR
    assert err.getvalue().startswith("Could not decode ")


def test_prompt_scans_each_line_independently() -> None:
    stdin = io.StringIO("var a;\n\nb\n")
    stdout = io.StringIO()
    stderr = io.StringIO()

    status = run_prompt(stdin=stdin, stdout=stdout, stderr=stderr)

    assert status == EX_OK
    output = stdout.getvalue()
    assert output.count(PROMPT) == 4
    assert "VAR var null" in output
    assert "IDENTIFIER b null" in output
    assert stderr.getvalue() == ""


def test_prompt_continues_after_errors_and_reports_line_one() -> None:
    stdin = io.StringIO('"open\n@\nnil\n')
    stdout = io.StringIO()
    stderr = io.StringIO()

    status = run_prompt(stdin=stdin, stdout=stdout, stderr=stderr)

    assert status == EX_OK
    assert stderr.getvalue().splitlines() == [
        "[line 1] Error: Unterminated string.",
        "[line 1] Error: Unexpected character.",
    ]
    assert "NIL nil null" in stdout.getvalue()


def test_prompt_returns_zero_on_keyboard_interrupt() -> None:
    class InterruptingInput(io.StringIO):
        def readline(self, size: int = -1) -> str:
            raise KeyboardInterrupt

    stdout = io.StringIO()

    assert run_prompt(stdin=InterruptingInput(), stdout=stdout) == EX_OK
    assert stdout.getvalue() == PROMPT + "\n"


def test_main_runs_file_mode(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = write_script(tmp_path, "1 $")

    assert main([str(path)]) == EX_DATAERR
    assert "NUMBER 1 1.0" in capsys.readouterr().out


def test_main_without_script_starts_prompt(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("and\n"))

    assert main([]) == EX_OK
    assert "AND and null" in capsys.readouterr().out


def test_parser_accepts_at_most_one_script() -> None:
    parser = build_parser()

    args = parser.parse_args(["-v", "a.lox"])
    assert args.verbose is True
    assert args.script == Path("a.lox")
    assert args.encoding == "utf-8"

    with pytest.raises(SystemExit):
        parser.parse_args(["a.lox", "b.lox"])
