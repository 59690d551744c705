"""BEM class-name linting, case conversion and stylesheet skeletons."""

from bemhelper.config import BemConfig
from bemhelper.diagnostics import Diagnostic, RelatedInformation
from bemhelper.host import (
    ConfigSource,
    DiagnosticCollection,
    MappingConfigSource,
    MemoryDiagnosticCollection,
    SourceDocument,
    TextDocument,
)
from bemhelper.lint import LintRunResult, run_lint
from bemhelper.naming import (
    BemClassName,
    BemOptions,
    CaseFamily,
    convert_class,
    detect_case,
    get_classes,
    is_bem_class,
    is_case_match,
    parse_class_name,
    unique_classes,
)
from bemhelper.navigation import get_preceding_class_name, suggest_child_class
from bemhelper.provider import BemDiagnosticProvider
from bemhelper.stylesheet import generate_stylesheet

__all__ = [
    "BemClassName",
    "BemConfig",
    "BemDiagnosticProvider",
    "BemOptions",
    "CaseFamily",
    "ConfigSource",
    "Diagnostic",
    "DiagnosticCollection",
    "LintRunResult",
    "MappingConfigSource",
    "MemoryDiagnosticCollection",
    "RelatedInformation",
    "SourceDocument",
    "TextDocument",
    "convert_class",
    "detect_case",
    "generate_stylesheet",
    "get_classes",
    "get_preceding_class_name",
    "is_bem_class",
    "is_case_match",
    "parse_class_name",
    "run_lint",
    "suggest_child_class",
    "unique_classes",
]
