"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from bemhelper.diagnostics.codes import DIAGNOSTIC_SOURCE, Severity
from bemhelper.text import Position, TextRange

DiagnosticCode = Literal["depth", "case"]


@dataclass(frozen=True, slots=True)
class RelatedInformation:
    """Secondary location attached to a diagnostic (document uri plus span)."""

    uri: str
    start: Position
    end: Position
    message: str


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic for one class-name occurrence in a document."""

    code: DiagnosticCode
    message: str
    range: TextRange
    start: Position
    end: Position
    severity: Severity = "warning"
    source: str = DIAGNOSTIC_SOURCE
    related_information: tuple[RelatedInformation, ...] = ()
