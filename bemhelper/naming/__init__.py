"""BEM class-name parsing, validation and case conversion."""

from bemhelper.naming.bem import (
    BemClassName,
    get_classes,
    is_bem_class,
    name_segments,
    parse_class_name,
    split_segments,
    unique_classes,
)
from bemhelper.naming.cases import (
    SPECIFIC_FAMILIES,
    CaseFamily,
    convert_class,
    convert_segment,
    detect_case,
    is_case_match,
    matching_cases,
    split_words,
)
from bemhelper.naming.options import (
    DEFAULT_ELEMENT_SEPARATOR,
    DEFAULT_MODIFIER_SEPARATOR,
    DEFAULT_OPTIONS,
    BemOptions,
)

__all__ = [
    "DEFAULT_ELEMENT_SEPARATOR",
    "DEFAULT_MODIFIER_SEPARATOR",
    "DEFAULT_OPTIONS",
    "SPECIFIC_FAMILIES",
    "BemClassName",
    "BemOptions",
    "CaseFamily",
    "convert_class",
    "convert_segment",
    "detect_case",
    "get_classes",
    "is_bem_class",
    "is_case_match",
    "matching_cases",
    "name_segments",
    "parse_class_name",
    "split_segments",
    "split_words",
    "unique_classes",
]
