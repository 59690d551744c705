"""In-memory host services for command-line use and tests."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any, TypeVar

from bemhelper.diagnostics import Diagnostic
from bemhelper.text import LineIndex, Position

T = TypeVar("T")


class SourceDocument:
    """`TextDocument` over a string already held in memory."""

    __slots__ = ("_text", "_index", "uri")

    def __init__(self, text: str, uri: str = "<memory>") -> None:
        self._text = text
        self._index = LineIndex(text)
        self.uri = uri

    def get_text(self) -> str:
        return self._text

    def position_at(self, offset: int) -> Position:
        return self._index.position_at(offset)

    def get_line_text(self, line: int) -> str:
        return self._index.line_text(line)

    def __repr__(self) -> str:
        return f"SourceDocument(uri={self.uri!r}, length={len(self._text)})"


class MemoryDiagnosticCollection:
    """`DiagnosticCollection` that keeps the installed diagnostics per uri."""

    def __init__(self) -> None:
        self._by_uri: dict[str, tuple[Diagnostic, ...]] = {}

    def set_diagnostics(self, uri: str, diagnostics: Sequence[Diagnostic]) -> None:
        self._by_uri[uri] = tuple(diagnostics)

    def clear_diagnostics(self, uri: str) -> None:
        self._by_uri.pop(uri, None)

    def get(self, uri: str) -> tuple[Diagnostic, ...]:
        return self._by_uri.get(uri, ())

    def __contains__(self, uri: object) -> bool:
        return uri in self._by_uri


class MappingConfigSource:
    """`ConfigSource` backed by a flat mapping of setting keys."""

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: Mapping[str, Any] = MappingProxyType(dict(values or {}))

    def get_config_value(self, key: str, default: T) -> T | Any:
        return self._values.get(key, default)

    def overlay(self, values: Mapping[str, Any]) -> MappingConfigSource:
        """A new source where non-None `values` take precedence over this one."""
        merged = dict(self._values)
        merged.update({key: value for key, value in values.items() if value is not None})
        return MappingConfigSource(merged)
