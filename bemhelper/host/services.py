"""Host-side services the analysis reads from and reports to."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

if TYPE_CHECKING:
    from bemhelper.diagnostics import Diagnostic
    from bemhelper.text import Position

T = TypeVar("T")


class TextDocument(Protocol):
    """Read-only view of the document being analyzed."""

    def get_text(self) -> str: ...

    def position_at(self, offset: int) -> Position: ...

    def get_line_text(self, line: int) -> str: ...


class DiagnosticCollection(Protocol):
    """Display surface for diagnostics, keyed by document uri."""

    def set_diagnostics(self, uri: str, diagnostics: Sequence[Diagnostic]) -> None: ...

    def clear_diagnostics(self, uri: str) -> None: ...


class ConfigSource(Protocol):
    """User settings lookup with caller-supplied defaults."""

    def get_config_value(self, key: str, default: T) -> T | Any: ...
