"""Class-name lint rules and runner."""

from bemhelper.lint.occurrences import ClassOccurrence, find_occurrences
from bemhelper.lint.rules import (
    ClassCaseRule,
    ClassDepthRule,
    LintContext,
    LintRule,
    default_lint_rules,
    validate_lint_rules,
)
from bemhelper.lint.runner import LintRunResult, run_lint

__all__ = [
    "ClassCaseRule",
    "ClassDepthRule",
    "ClassOccurrence",
    "LintContext",
    "LintRule",
    "LintRunResult",
    "default_lint_rules",
    "find_occurrences",
    "run_lint",
    "validate_lint_rules",
]
