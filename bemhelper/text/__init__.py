"""Text offsets, ranges and line/column positions."""

from bemhelper.text.text import LineIndex, Position, TextRange

__all__ = [
    "LineIndex",
    "Position",
    "TextRange",
]
