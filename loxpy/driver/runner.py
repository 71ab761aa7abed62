"""File and interactive drivers around the scanner."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Final, TextIO

from loxpy.diagnostics import Diagnostic, print_diagnostic
from loxpy.pipeline import run_file, run_source

if TYPE_CHECKING:
    from loxpy.lexer import ScannerOptions, Token

logger = logging.getLogger(__name__)

# BSD sysexits.h
EX_OK: Final[int] = 0
EX_DATAERR: Final[int] = 65
EX_NOINPUT: Final[int] = 66

PROMPT: Final[str] = "> "


def print_tokens(tokens: list[Token], file: TextIO | None = None) -> None:
    out = sys.stdout if file is None else file
    for token in tokens:
        print(token, file=out)


def _stderr_sink(stderr: TextIO | None):
    def sink(diagnostic: Diagnostic) -> None:
        print_diagnostic(diagnostic, file=stderr)

    return sink


def run_file_mode(
    path: str | Path,
    options: ScannerOptions | None = None,
    *,
    encoding: str = "utf-8",
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Scan one file, print its tokens and return the process exit status."""
    err = sys.stderr if stderr is None else stderr
    try:
        result = run_file(path, options, encoding=encoding, on_diagnostic=_stderr_sink(err))
    except UnicodeDecodeError as exc:
        print(f"Could not decode {path}: {exc}", file=err)
        return EX_DATAERR
    except OSError as exc:
        print(f"Could not read {path}: {exc.strerror or exc}", file=err)
        return EX_NOINPUT

    print_tokens(result.tokens, file=stdout)

    if result.had_error:
        logger.debug("%s: %d lexical error(s)", path, len(result.diagnostics))
        return EX_DATAERR
    return EX_OK


def run_prompt(
    options: ScannerOptions | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Read-scan-print loop, one independent scan per input line.

    Lexical errors are reported and the session continues; closing the input
    ends it with a zero status.
    """
    inp = sys.stdin if stdin is None else stdin
    out = sys.stdout if stdout is None else stdout
    sink = _stderr_sink(sys.stderr if stderr is None else stderr)

    while True:
        print(PROMPT, end="", file=out, flush=True)
        try:
            line = inp.readline()
        except KeyboardInterrupt:
            print(file=out)
            return EX_OK
        if not line:
            print(file=out)
            return EX_OK

        result = run_source(line.rstrip("\n"), options, on_diagnostic=sink)
        print_tokens(result.tokens, file=out)
