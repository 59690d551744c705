"""Separator tokens and markup patterns shared by every naming operation."""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import lru_cache
import re
from typing import Final

DEFAULT_ELEMENT_SEPARATOR: Final[str] = "__"
DEFAULT_MODIFIER_SEPARATOR: Final[str] = "--"

# Group 1 holds a double-quoted value, group 2 a single-quoted one.
CLASS_ATTRIBUTE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"""(?<![\w-])class(?:Name)?\s*=\s*(?:"([^"]*)"|'([^']*)')"""
)
DEFINITION_LINE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"""(?<![\w-])class(?:Name)?\s*=\s*["']"""
)


@dataclass(frozen=True, slots=True)
class BemOptions:
    """Naming dialect: BEM separators plus the class-attribute matchers.

    `class_attribute_pattern` must expose the attribute value through one of its
    groups; the first non-empty group wins. `definition_line_pattern` decides
    whether a line defines a class attribute at all.
    """

    element_separator: str = DEFAULT_ELEMENT_SEPARATOR
    modifier_separator: str = DEFAULT_MODIFIER_SEPARATOR
    class_attribute_pattern: re.Pattern[str] = CLASS_ATTRIBUTE_PATTERN
    definition_line_pattern: re.Pattern[str] = DEFINITION_LINE_PATTERN

    def __post_init__(self):
        if not self.element_separator:
            raise ValueError("Element separator cannot be empty")
        if not self.modifier_separator:
            raise ValueError("Modifier separator cannot be empty")
        if self.element_separator == self.modifier_separator:
            raise ValueError("Element and modifier separators must differ")

    def with_separators(
        self,
        *,
        element_separator: str | None = None,
        modifier_separator: str | None = None,
    ) -> BemOptions:
        return replace(
            self,
            element_separator=element_separator or self.element_separator,
            modifier_separator=modifier_separator or self.modifier_separator,
        )

    def separator_pattern(self) -> re.Pattern[str]:
        """Pattern matching either separator, longest first, as a capturing group."""
        return _separator_pattern(self.element_separator, self.modifier_separator)

    def is_definition_line(self, line_text: str) -> bool:
        return self.definition_line_pattern.search(line_text) is not None


DEFAULT_OPTIONS: Final[BemOptions] = BemOptions()


@lru_cache(maxsize=32)
def _separator_pattern(element_separator: str, modifier_separator: str) -> re.Pattern[str]:
    alternatives = sorted((element_separator, modifier_separator), key=len, reverse=True)
    return re.compile("(" + "|".join(re.escape(item) for item in alternatives) + ")")
