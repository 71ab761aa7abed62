#!/usr/bin/env python
from __future__ import annotations

import argparse
from pathlib import Path
import sys

from loxpy.lexer import dump_tokens
from loxpy.pipeline import run_file


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Dump scanner tokens and diagnostics for a Lox file.")
    parser.add_argument("input", type=Path, help="Lox source file.")
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write the dump here instead of stdout.",
    )
    args = parser.parse_args(argv)

    result = run_file(args.input)

    if args.out is None:
        dump_tokens(result.tokens, result.diagnostics)
        return 0

    args.out.parent.mkdir(parents=True, exist_ok=True)
    with args.out.open("w", encoding="utf-8") as f:
        dump_tokens(result.tokens, result.diagnostics, file=f)

    print(f"Wrote {len(result.tokens)} tokens to {args.out}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
