from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """Half-open span `[start, end)` of string indices into a source text."""

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self.start > self.end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def empty(offset: int) -> "TextRange":
        return TextRange(offset, offset)

    def is_empty(self) -> bool:
        return self.start == self.end

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)

    def __repr__(self) -> str:
        return f"TextRange({self.start}, {self.end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Source text covered by `range`."""
    return source[range.start : range.end]
