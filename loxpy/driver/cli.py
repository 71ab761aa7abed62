"""Command line entrypoint."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from loxpy.driver.runner import run_file_mode, run_prompt


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loxpy",
        description="Scan a Lox script (or interactive input) and print its tokens.",
    )
    parser.add_argument(
        "script",
        nargs="?",
        type=Path,
        default=None,
        help="Script to scan. Without it, starts an interactive prompt.",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding of the script (default: utf-8).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.script is not None:
        return run_file_mode(args.script, encoding=args.encoding)
    return run_prompt()


if __name__ == "__main__":
    raise SystemExit(main())
