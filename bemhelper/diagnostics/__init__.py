"""Diagnostics."""

from bemhelper.diagnostics.codes import (
    BEM_CLASS_CASE,
    BEM_CLASS_DEPTH,
    DIAGNOSTIC_SOURCE,
    DiagnosticSpec,
    Severity,
)
from bemhelper.diagnostics.diagnostic import (
    Diagnostic,
    DiagnosticCode,
    RelatedInformation,
)
from bemhelper.diagnostics.report import (
    collect_diagnostics,
    format_diagnostic,
)

__all__ = [
    "BEM_CLASS_CASE",
    "BEM_CLASS_DEPTH",
    "DIAGNOSTIC_SOURCE",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticSpec",
    "RelatedInformation",
    "Severity",
    "collect_diagnostics",
    "format_diagnostic",
]
