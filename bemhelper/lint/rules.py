"""Lint rules and rule contracts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from bemhelper.config import BemConfig
from bemhelper.diagnostics import (
    BEM_CLASS_CASE,
    BEM_CLASS_DEPTH,
    Diagnostic,
    DiagnosticCode,
    DiagnosticSpec,
    RelatedInformation,
)
from bemhelper.host import TextDocument
from bemhelper.lint.occurrences import ClassOccurrence, find_occurrences
from bemhelper.naming import BemOptions, CaseFamily, is_bem_class, is_case_match


@dataclass(frozen=True, slots=True)
class LintContext:
    """Inputs shared by every rule during one analysis pass."""

    document: TextDocument
    uri: str
    text: str
    classes: tuple[str, ...]
    options: BemOptions


class LintRule(Protocol):
    """Class-name lint rule contract."""

    @property
    def code(self) -> DiagnosticCode: ...

    @property
    def name(self) -> str: ...

    def run(self, context: LintContext) -> list[Diagnostic]: ...


@dataclass(frozen=True, slots=True)
class ClassDepthRule:
    """Flags every occurrence of a class nested deeper than block/element/modifier."""

    code: DiagnosticCode = "depth"
    name: str = "classNameDepth"

    def run(self, context: LintContext) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for class_name in context.classes:
            if not class_name or is_bem_class(class_name, context.options):
                continue
            for occurrence in find_occurrences(context.text, class_name, context.document):
                diagnostics.append(
                    _occurrence_diagnostic(
                        self.code,
                        BEM_CLASS_DEPTH,
                        BEM_CLASS_DEPTH.message,
                        occurrence,
                        context,
                    )
                )
        return diagnostics


@dataclass(frozen=True, slots=True)
class ClassCaseRule:
    """Flags class-attribute occurrences of names not written in `case`.

    Hits on lines that do not define a class attribute are dropped. Stops once
    `max_count` diagnostics have been collected.
    """

    case: CaseFamily
    max_count: int
    code: DiagnosticCode = "case"
    name: str = "classNameCase"

    def __post_init__(self) -> None:
        object.__setattr__(self, "case", CaseFamily.parse(self.case))

    def run(self, context: LintContext) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        if self.case is CaseFamily.ANY:
            return diagnostics
        message = BEM_CLASS_CASE.message.format(case=self.case.value)
        for class_name in context.classes:
            if len(diagnostics) >= self.max_count:
                break
            if not class_name or is_case_match(class_name, self.case, context.options):
                continue
            for occurrence in find_occurrences(context.text, class_name, context.document):
                line_text = context.document.get_line_text(occurrence.line)
                if not context.options.is_definition_line(line_text):
                    continue
                diagnostics.append(_occurrence_diagnostic(self.code, BEM_CLASS_CASE, message, occurrence, context))
                if len(diagnostics) >= self.max_count:
                    break
        return diagnostics


def default_lint_rules(config: BemConfig) -> tuple[LintRule, ...]:
    """Rules enabled by `config`, depth checks first."""
    rules: list[LintRule] = []
    if config.show_depth_warnings:
        rules.append(ClassDepthRule())
    if config.class_name_case is not CaseFamily.ANY:
        rules.append(ClassCaseRule(case=config.class_name_case, max_count=config.max_warnings_count))
    return tuple(rules)


def validate_lint_rules(rules: tuple[LintRule, ...]) -> None:
    seen: set[str] = set()
    for rule in rules:
        if rule.code not in ("depth", "case"):
            raise ValueError(f"Lint rule `{rule.name}` has invalid code `{rule.code}`")
        if rule.name in seen:
            raise ValueError(f"Lint rule `{rule.name}` is registered twice")
        seen.add(rule.name)


def _occurrence_diagnostic(
    code: DiagnosticCode,
    spec: DiagnosticSpec,
    message: str,
    occurrence: ClassOccurrence,
    context: LintContext,
) -> Diagnostic:
    start = occurrence.start_position
    end = context.document.position_at(occurrence.end)
    return Diagnostic(
        code=code,
        message=message,
        range=occurrence.range,
        start=start,
        end=end,
        severity=spec.severity,
        related_information=(
            RelatedInformation(
                uri=context.uri,
                start=start,
                end=end,
                message=occurrence.class_name,
            ),
        ),
    )
