from dataclasses import fields

from bemhelper.config import BemConfig
from bemhelper.diagnostics import format_diagnostic
from bemhelper.host import SourceDocument
from bemhelper.lint import (
    ClassCaseRule,
    ClassDepthRule,
    LintContext,
    default_lint_rules,
    find_occurrences,
    run_lint,
)
from bemhelper.naming import DEFAULT_OPTIONS, CaseFamily
from bemhelper.text import Position, TextRange

DEPTH_SOURCE = (
    '<div class="one__two__three">\n'
    '  <p class="one__two__three">one__two__three</p>\n'
    "</div>\n"
)

CASE_SOURCE = (
    '<div class="navBody">\n'
    "  <span>navBody</span>\n"
    '  <a class="navBody__link" href="#">navBody</a>\n'
    "</div>\n"
)


def _starts(diagnostics) -> list[tuple[int, int]]:
    return [(d.start.line, d.start.character) for d in diagnostics]


def test_find_occurrences_reports_every_literal_hit() -> None:
    document = SourceDocument("aaa")

    hits = list(find_occurrences(document.get_text(), "aa", document))

    assert [(hit.start, hit.end) for hit in hits] == [(0, 2), (1, 3)]
    assert hits[1].range == TextRange(1, 3)


def test_find_occurrences_matches_inside_longer_words() -> None:
    source = '<nav class="nav">navigation</nav>'
    document = SourceDocument(source)

    hits = list(find_occurrences(source, "nav", document))

    assert [hit.start for hit in hits] == [1, 12, 17, 29]


def test_find_occurrences_skips_empty_class_name() -> None:
    document = SourceDocument("anything")

    assert list(find_occurrences("anything", "", document)) == []


def test_depth_rule_flags_every_occurrence() -> None:
    result = run_lint(SourceDocument(DEPTH_SOURCE), "file:///page.html", BemConfig(show_depth_warnings=True))

    assert [d.code for d in result.diagnostics] == ["depth", "depth", "depth"]
    assert _starts(result.diagnostics) == [(0, 12), (1, 12), (1, 29)]
    first = result.diagnostics[0]
    assert first.message == "BEM - classes must only consist of block and element."
    assert first.severity == "warning"
    assert first.source == "bem helper"
    assert first.range == TextRange(12, 27)
    assert first.end == Position(0, 27)
    assert first.related_information[0].uri == "file:///page.html"
    assert first.related_information[0].message == "one__two__three"
    assert format_diagnostic(first, "page.html") == (
        "page.html:1:13: warning [depth] BEM - classes must only consist of block and element."
    )
    assert {field.name for field in fields(first)} == {
        "code",
        "message",
        "range",
        "start",
        "end",
        "severity",
        "source",
        "related_information",
    }


def test_depth_rule_disabled_by_default() -> None:
    result = run_lint(SourceDocument(DEPTH_SOURCE), "page.html")

    assert result.diagnostics == ()
    assert result.classes == ("one__two__three",)


def test_case_rule_filters_non_definition_lines() -> None:
    config = BemConfig(class_name_case=CaseFamily.KEBAB)

    result = run_lint(SourceDocument(CASE_SOURCE), "page.html", config)

    assert [d.code for d in result.diagnostics] == ["case"] * 4
    assert _starts(result.diagnostics) == [(0, 12), (2, 12), (2, 36), (2, 12)]
    assert result.diagnostics[0].message == "BEM - Class names must be in kebab case"
    assert [d.related_information[0].message for d in result.diagnostics] == [
        "navBody",
        "navBody",
        "navBody",
        "navBody__link",
    ]


def test_case_rule_never_exceeds_max_count() -> None:
    config = BemConfig(class_name_case=CaseFamily.KEBAB, max_warnings_count=2)

    result = run_lint(SourceDocument(CASE_SOURCE), "page.html", config)

    assert len(result.diagnostics) == 2
    assert _starts(result.diagnostics) == [(0, 12), (2, 12)]


def test_case_rule_with_zero_max_count_reports_nothing() -> None:
    config = BemConfig(class_name_case=CaseFamily.KEBAB, max_warnings_count=0)

    assert run_lint(SourceDocument(CASE_SOURCE), "page.html", config).diagnostics == ()


def test_case_rule_accepts_matching_classes() -> None:
    config = BemConfig(class_name_case=CaseFamily.CAMEL)

    assert run_lint(SourceDocument(CASE_SOURCE), "page.html", config).diagnostics == ()


def test_depth_and_case_diagnostics_are_combined_depth_first() -> None:
    source = '<div class="Deep__er__class"></div>\n'
    config = BemConfig(class_name_case=CaseFamily.KEBAB, show_depth_warnings=True)

    result = run_lint(SourceDocument(source), "page.html", config)

    assert [d.code for d in result.diagnostics] == ["depth", "case"]


def test_rules_skip_empty_class_names() -> None:
    source = '<div class="a__b__c"></div>'
    document = SourceDocument(source)
    context = LintContext(
        document=document,
        uri="page.html",
        text=source,
        classes=("", "a__b__c"),
        options=DEFAULT_OPTIONS,
    )

    assert len(ClassDepthRule().run(context)) == 1
    assert len(ClassCaseRule(case=CaseFamily.PASCAL, max_count=10).run(context)) == 1


def test_default_lint_rules_follow_config() -> None:
    assert default_lint_rules(BemConfig()) == ()
    assert [rule.code for rule in default_lint_rules(BemConfig(show_depth_warnings=True))] == ["depth"]
    rules = default_lint_rules(BemConfig(class_name_case=CaseFamily.SNAKE, max_warnings_count=7))
    assert rules == (ClassCaseRule(case=CaseFamily.SNAKE, max_count=7),)


def test_string_case_families_are_normalised_for_rules() -> None:
    assert default_lint_rules(BemConfig(class_name_case="any")) == ()  # type: ignore[arg-type]
    assert ClassCaseRule(case="snake", max_count=1).case is CaseFamily.SNAKE  # type: ignore[arg-type]


def test_run_lint_rejects_duplicate_rules() -> None:
    try:
        run_lint(SourceDocument(""), "page.html", rules=(ClassDepthRule(), ClassDepthRule()))
    except ValueError as exc:
        assert "registered twice" in str(exc)
    else:
        raise AssertionError("Expected ValueError for duplicate lint rules")


def test_run_lint_is_idempotent() -> None:
    config = BemConfig(class_name_case=CaseFamily.SNAKE, show_depth_warnings=True)
    document = SourceDocument(CASE_SOURCE + DEPTH_SOURCE)

    assert run_lint(document, "page.html", config) == run_lint(document, "page.html", config)
