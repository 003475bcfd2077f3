from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Byte offset / byte length into a source buffer."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    def to_int(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open byte range [start, end) in a source buffer.

    Invariant:
    - 0 <= start <= end
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def from_offsets(start: int, end: int) -> "TextRange":
        return TextRange(start, end)

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def len(self) -> TextSize:
        return TextSize(self._end - self._start)

    def as_tuple(self) -> tuple[int, int]:
        """Get the range as a tuple of (start, end) integers."""
        return (self._start, self._end)

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def slice_text_range(source: bytes, range: TextRange) -> bytes:
    """Get the bytes of the source covered by the given TextRange."""
    return source[range.start.value : range.end.value]


def line_number(source: bytes, offset: int) -> int:
    """1-based line number of the byte at `offset`."""
    return source.count(b"\n", 0, offset) + 1


def line_bounds(source: bytes, offset: int) -> tuple[int, int]:
    """Byte bounds [start, end) of the line holding `offset`, newline excluded."""
    start = source.rfind(b"\n", 0, offset) + 1
    end = source.find(b"\n", offset)
    if end == -1:
        end = len(source)
    return start, end
