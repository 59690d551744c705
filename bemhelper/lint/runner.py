"""Lint runner over one document snapshot."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging

from bemhelper.config import BemConfig
from bemhelper.diagnostics import Diagnostic, collect_diagnostics
from bemhelper.host import TextDocument
from bemhelper.lint.rules import (
    LintContext,
    LintRule,
    default_lint_rules,
    validate_lint_rules,
)
from bemhelper.naming import unique_classes

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LintRunResult:
    uri: str
    classes: tuple[str, ...]
    diagnostics: tuple[Diagnostic, ...]

    @property
    def has_diagnostics(self) -> bool:
        return bool(self.diagnostics)


def run_lint(
    document: TextDocument,
    uri: str,
    config: BemConfig | None = None,
    *,
    rules: Sequence[LintRule] | None = None,
) -> LintRunResult:
    """Run every enabled rule over the document's current text."""
    resolved_config = config if config is not None else BemConfig()
    resolved_rules = tuple(rules) if rules is not None else default_lint_rules(resolved_config)
    validate_lint_rules(resolved_rules)

    text = document.get_text()
    options = resolved_config.options
    context = LintContext(
        document=document,
        uri=uri,
        text=text,
        classes=tuple(unique_classes(text, options)),
        options=options,
    )
    diagnostics = collect_diagnostics(*(rule.run(context) for rule in resolved_rules))
    logger.debug(
        "Linted %s: %d classes, %d rules, %d diagnostics",
        uri,
        len(context.classes),
        len(resolved_rules),
        len(diagnostics),
    )
    return LintRunResult(uri=uri, classes=context.classes, diagnostics=tuple(diagnostics))
