"""Diagnostic provider: one analysis pass from host document to host display."""

from __future__ import annotations

import logging

from bemhelper.config import BemConfig
from bemhelper.diagnostics import Diagnostic
from bemhelper.host import ConfigSource, DiagnosticCollection, TextDocument
from bemhelper.lint import run_lint

logger = logging.getLogger(__name__)


class BemDiagnosticProvider:
    """Recomputes and installs the diagnostics of a document on every change.

    Nothing carries over between passes except `errors`, the list installed by
    the most recent pass.
    """

    collection_name = "BemHelper"

    def __init__(self, settings: ConfigSource | None = None) -> None:
        self.settings = settings
        self.errors: list[Diagnostic] = []

    def resolve_config(self) -> BemConfig:
        """Settings are re-read on each pass so edits apply without a new provider."""
        if self.settings is None:
            return BemConfig()
        return BemConfig.from_source(self.settings)

    def update_diagnostics(
        self,
        document: TextDocument,
        uri: str,
        collection: DiagnosticCollection,
        config: BemConfig | None = None,
    ) -> list[Diagnostic]:
        resolved_config = config if config is not None else self.resolve_config()
        result = run_lint(document, uri, resolved_config)
        diagnostics = list(result.diagnostics)

        if diagnostics:
            collection.set_diagnostics(uri, diagnostics)
        else:
            collection.clear_diagnostics(uri)
            logger.debug("Cleared diagnostics for %s", uri)
        self.errors = diagnostics
        return diagnostics
