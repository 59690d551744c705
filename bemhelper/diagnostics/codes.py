"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning", "information", "hint"]

DIAGNOSTIC_SOURCE: Final[str] = "bem helper"


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    severity: Severity = "warning"


BEM_CLASS_DEPTH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="depth",
    message="BEM - classes must only consist of block and element.",
    severity="warning",
)

BEM_CLASS_CASE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="case",
    message="BEM - Class names must be in {case} case",
    severity="warning",
)
