"""Literal occurrence scanning of class names within document text."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from bemhelper.host import TextDocument
from bemhelper.text import Position, TextRange


@dataclass(frozen=True, slots=True)
class ClassOccurrence:
    """One literal hit of a class name, with its offsets and start position."""

    class_name: str
    start: int
    end: int
    line: int
    character: int

    @property
    def range(self) -> TextRange:
        return TextRange(self.start, self.end)

    @property
    def start_position(self) -> Position:
        return Position(self.line, self.character)


def find_occurrences(text: str, class_name: str, document: TextDocument) -> Iterator[ClassOccurrence]:
    """Yield every hit of `class_name` in `text`, left to right.

    Each search resumes one character past the previous hit, so overlapping
    hits are reported too. No word-boundary check is made: `nav` also hits
    inside `navigation`.
    """
    if not class_name:
        return
    index = text.find(class_name)
    while index != -1:
        position = document.position_at(index)
        yield ClassOccurrence(
            class_name=class_name,
            start=index,
            end=index + len(class_name),
            line=position.line,
            character=position.character,
        )
        index = text.find(class_name, index + 1)
