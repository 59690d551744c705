from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) of character offsets in a document.

    Invariant:
    - 0 <= start <= end
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self.start > self.end:
            raise ValueError("TextRange invariant violated: start > end")

    def __repr__(self) -> str:
        return f"TextRange({self.start}, {self.end})"


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Zero-based line/character location, as editors report it."""

    line: int
    character: int

    def __repr__(self) -> str:
        return f"Position({self.line}, {self.character})"


class LineIndex:
    """Maps character offsets to line/column positions for one source text.

    Lines break on ``\\n``; a ``\\r`` before it stays part of the line's
    content span but is excluded from `line_text`.
    """

    __slots__ = ("_text", "_line_starts")

    def __init__(self, text: str) -> None:
        self._text = text
        starts = [0]
        index = text.find("\n")
        while index != -1:
            starts.append(index + 1)
            index = text.find("\n", index + 1)
        self._line_starts: tuple[int, ...] = tuple(starts)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def position_at(self, offset: int) -> Position:
        """Translate an offset into a position, clamping to the text bounds."""
        offset = min(max(offset, 0), len(self._text))
        line = bisect_right(self._line_starts, offset) - 1
        return Position(line, offset - self._line_starts[line])

    def line_text(self, line: int) -> str:
        if line < 0 or line >= self.line_count:
            return ""
        start, end = self._line_bounds(line)
        return self._text[start:end].removesuffix("\r")

    def _line_bounds(self, line: int) -> tuple[int, int]:
        start = self._line_starts[line]
        if line + 1 < self.line_count:
            return start, self._line_starts[line + 1] - 1
        return start, len(self._text)
