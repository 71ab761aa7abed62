"""Driver: file mode, interactive mode and the console entrypoint."""

from loxpy.driver.cli import build_parser, main
from loxpy.driver.runner import (
    EX_DATAERR,
    EX_NOINPUT,
    EX_OK,
    PROMPT,
    print_tokens,
    run_file_mode,
    run_prompt,
)

__all__ = [
    "EX_DATAERR",
    "EX_NOINPUT",
    "EX_OK",
    "PROMPT",
    "build_parser",
    "main",
    "print_tokens",
    "run_file_mode",
    "run_prompt",
]
