"""Entrypoints that read source text and run one scan over it."""

from loxpy.lexer.result import ScanResult
from loxpy.pipeline.entrypoints import run_file, run_source

__all__ = [
    "ScanResult",
    "run_file",
    "run_source",
]
