#!/usr/bin/env python3
"""Time scanning every *.lox file under a directory."""

from __future__ import annotations

import argparse
from pathlib import Path
import statistics
import time

from tqdm import tqdm

from loxpy.pipeline import run_file


def _scan_all(files: list[Path], *, label: str, show_progress: bool) -> tuple[float, int, int]:
    tokens = 0
    diagnostics = 0
    start = time.perf_counter()
    for path in tqdm(files, desc=label, unit="file", disable=not show_progress):
        result = run_file(path)
        tokens += len(result.tokens)
        diagnostics += len(result.diagnostics)
    return time.perf_counter() - start, tokens, diagnostics


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark scanner throughput")
    parser.add_argument("root", type=Path, help="Directory searched recursively for *.lox files")
    parser.add_argument("--runs", type=int, default=3, help="Measured runs")
    parser.add_argument("--no-progress", action="store_true", help="Disable progress bars")
    args = parser.parse_args(argv)

    files = sorted(path for path in args.root.rglob("*.lox") if path.is_file())
    if not files:
        raise SystemExit(f"No .lox files found under {args.root}")

    timings: list[float] = []
    tokens = diagnostics = 0
    runs = max(args.runs, 1)
    for run_idx in range(runs):
        duration, tokens, diagnostics = _scan_all(
            files,
            label=f"run {run_idx + 1}/{runs}",
            show_progress=not args.no_progress,
        )
        timings.append(duration)

    median = statistics.median(timings)
    print(f"{len(files)} files, {tokens} tokens, {diagnostics} diagnostics")
    print(f"best {min(timings):.4f}s  median {median:.4f}s  ({tokens / median:.0f} tokens/s)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
