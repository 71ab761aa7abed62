"""Scanner configuration options."""

from dataclasses import dataclass

from loxpy.lexer.keywords import DEFAULT_KEYWORDS, KeywordTable


@dataclass(frozen=True, slots=True)
class ScannerOptions:
    """Immutable settings owned by a Scanner for the duration of a scan."""

    keywords: KeywordTable = DEFAULT_KEYWORDS
    allow_multiline_strings: bool = True
    first_line: int = 1

    def __post_init__(self):
        if self.first_line < 1:
            raise ValueError("first_line must be >= 1")


DEFAULT_OPTIONS = ScannerOptions()
