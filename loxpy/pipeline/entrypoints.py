"""Unified entrypoints over one scan lifecycle."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from loxpy.lexer import ScannerOptions, scan

if TYPE_CHECKING:
    from loxpy.diagnostics import DiagnosticSink
    from loxpy.lexer import ScanResult

logger = logging.getLogger(__name__)


def run_source(
    text: str,
    options: ScannerOptions | None = None,
    *,
    on_diagnostic: DiagnosticSink | None = None,
) -> ScanResult:
    """Scan in-memory source text."""
    return scan(text, options, on_diagnostic=on_diagnostic)


def run_file(
    path: str | Path,
    options: ScannerOptions | None = None,
    *,
    encoding: str = "utf-8",
    on_diagnostic: DiagnosticSink | None = None,
) -> ScanResult:
    """Read a whole file verbatim and scan it.

    No BOM stripping and no newline translation. `OSError` from reading
    propagates to the caller.
    """
    path = Path(path)
    with path.open("r", encoding=encoding, newline="") as f:
        text = f.read()
    logger.debug("read %d chars from %s", len(text), path)
    return run_source(text, options, on_diagnostic=on_diagnostic)
