"""Case-family detection and segment-aware class-name conversion."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
import re
from typing import Final

from bemhelper.naming.bem import name_segments, split_segments
from bemhelper.naming.options import DEFAULT_OPTIONS, BemOptions


class CaseFamily(StrEnum):
    """Naming-case conventions; `ANY` disables case checking."""

    ANY = "any"
    CAMEL = "camel"
    PASCAL = "pascal"
    KEBAB = "kebab"
    SNAKE = "snake"

    @classmethod
    def parse(cls, value: object) -> CaseFamily:
        """Lenient lookup for settings values; anything unknown is `ANY`."""
        if isinstance(value, CaseFamily):
            return value
        if not isinstance(value, str):
            return cls.ANY
        key = re.sub(r"[\s_-]", "", value).lower().removesuffix("case")
        return _ALIASES.get(key, cls.ANY)


_ALIASES: Final[dict[str, CaseFamily]] = {
    "any": CaseFamily.ANY,
    "camel": CaseFamily.CAMEL,
    "pascal": CaseFamily.PASCAL,
    "kebab": CaseFamily.KEBAB,
    "snake": CaseFamily.SNAKE,
}

SPECIFIC_FAMILIES: Final[tuple[CaseFamily, ...]] = (
    CaseFamily.CAMEL,
    CaseFamily.PASCAL,
    CaseFamily.KEBAB,
    CaseFamily.SNAKE,
)

# Matched against one block/element/modifier segment at a time.
_SEGMENT_PATTERNS: Final[dict[CaseFamily, re.Pattern[str]]] = {
    CaseFamily.CAMEL: re.compile(r"[a-z][a-z0-9]*(?:[A-Z][a-z0-9]*)*"),
    CaseFamily.PASCAL: re.compile(r"[A-Z][a-z0-9]*(?:[A-Z][a-z0-9]*)*"),
    CaseFamily.KEBAB: re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*"),
    CaseFamily.SNAKE: re.compile(r"[a-z0-9]+(?:_[a-z0-9]+)*"),
}

_WORD_JOINS: Final[re.Pattern[str]] = re.compile(r"[-_]+")
_CASE_BOUNDARY: Final[re.Pattern[str]] = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def matching_cases(name: str, options: BemOptions = DEFAULT_OPTIONS) -> frozenset[CaseFamily]:
    """Every specific family all segments of `name` conform to.

    A lone lowercase word conforms to camel, kebab and snake case at once.
    """
    segments = name_segments(name, options)
    if not segments:
        return frozenset()
    return frozenset(
        family
        for family in SPECIFIC_FAMILIES
        if all(_SEGMENT_PATTERNS[family].fullmatch(segment) for segment in segments)
    )


def detect_case(name: str, options: BemOptions = DEFAULT_OPTIONS) -> CaseFamily:
    """The single family `name` is written in, or `ANY` when mixed or ambiguous."""
    families = matching_cases(name, options)
    if len(families) == 1:
        return next(iter(families))
    return CaseFamily.ANY


def is_case_match(name: str, family: CaseFamily | str, options: BemOptions = DEFAULT_OPTIONS) -> bool:
    family = CaseFamily.parse(family)
    if family is CaseFamily.ANY:
        return True
    return family in matching_cases(name, options)


def split_words(segment: str) -> list[str]:
    """Split one segment on `-`/`_` joins and case transitions.

    >>> split_words("ModiFier")
    ['Modi', 'Fier']
    >>> split_words("parseHTTPResponse")
    ['parse', 'HTTP', 'Response']
    """
    words: list[str] = []
    for chunk in _WORD_JOINS.split(segment):
        words.extend(word for word in _CASE_BOUNDARY.split(chunk) if word)
    return words


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _join_kebab(words: list[str]) -> str:
    return "-".join(word.lower() for word in words)


def _join_snake(words: list[str]) -> str:
    return "_".join(word.lower() for word in words)


def _join_pascal(words: list[str]) -> str:
    return "".join(_capitalize(word) for word in words)


def _join_camel(words: list[str]) -> str:
    if not words:
        return ""
    return words[0].lower() + "".join(_capitalize(word) for word in words[1:])


_JOINERS: Final[dict[CaseFamily, Callable[[list[str]], str]]] = {
    CaseFamily.CAMEL: _join_camel,
    CaseFamily.PASCAL: _join_pascal,
    CaseFamily.KEBAB: _join_kebab,
    CaseFamily.SNAKE: _join_snake,
}


def convert_segment(segment: str, target: CaseFamily | str) -> str:
    target = CaseFamily.parse(target)
    if target is CaseFamily.ANY:
        return segment
    return _JOINERS[target](split_words(segment))


def convert_class(name: str, target: CaseFamily | str, options: BemOptions = DEFAULT_OPTIONS) -> str:
    """Rewrite every segment of `name` in `target` case, keeping separators verbatim."""
    target = CaseFamily.parse(target)
    if target is CaseFamily.ANY:
        return name
    parts = split_segments(name, options)
    # Even indexes are segments, odd indexes are the separators between them.
    return "".join(
        convert_segment(part, target) if index % 2 == 0 else part
        for index, part in enumerate(parts)
    )
