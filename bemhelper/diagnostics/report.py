"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from bemhelper.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def format_diagnostic(diagnostic: Diagnostic, path: str) -> str:
    """Render as `path:line:col: severity [code] message` with one-based line/col."""
    return (
        f"{path}:{diagnostic.start.line + 1}:{diagnostic.start.character + 1}: "
        f"{diagnostic.severity} [{diagnostic.code}] {diagnostic.message}"
    )
