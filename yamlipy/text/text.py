from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Offset into source text, in Python string indices."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    @staticmethod
    def from_int(value: int) -> "TextSize":
        return TextSize(value)

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in the source text.

    Invariant:
    - 0 <= start <= end

    Tokens synthesized by the lexer (indent, dedent, end) carry empty ranges.
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def empty(offset: TextSize) -> "TextRange":
        """Create an empty TextRange at the given offset."""
        return TextRange(offset.value, offset.value)

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def is_empty(self) -> bool:
        return self._start == self._end

    def as_tuple(self) -> tuple[int, int]:
        return (self._start, self._end)

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Source text covered by `range`. Offsets are plain string indices."""
    return source[range.start.value : range.end.value]


def line_column(source: str, offset: TextSize) -> tuple[int, int]:
    """1-based (line, column) of an offset. `\\r\\n`, `\\r` and `\\n` each end a line."""
    prefix = source[: offset.value]
    line_start = max(prefix.rfind("\n"), prefix.rfind("\r")) + 1
    line = prefix.count("\n") + prefix.count("\r") - prefix.count("\r\n") + 1
    return line, offset.value - line_start + 1
