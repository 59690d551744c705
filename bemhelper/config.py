"""User settings for the diagnostic pass."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Final

from bemhelper.host import ConfigSource
from bemhelper.naming import (
    DEFAULT_ELEMENT_SEPARATOR,
    DEFAULT_MODIFIER_SEPARATOR,
    BemOptions,
    CaseFamily,
)

logger = logging.getLogger(__name__)

ELEMENT_SEPARATOR_KEY: Final[str] = "bemHelper.elementSeparator"
MODIFIER_SEPARATOR_KEY: Final[str] = "bemHelper.modifierSeparator"
MAX_WARNINGS_COUNT_KEY: Final[str] = "bemHelper.maxWarningsCount"
CLASS_NAME_CASE_KEY: Final[str] = "bemHelper.classNameCase"
SHOW_DEPTH_WARNINGS_KEY: Final[str] = "bemHelper.showDepthWarnings"

DEFAULT_MAX_WARNINGS_COUNT: Final[int] = 100


@dataclass(frozen=True, slots=True)
class BemConfig:
    """Resolved settings for one analysis pass."""

    element_separator: str = DEFAULT_ELEMENT_SEPARATOR
    modifier_separator: str = DEFAULT_MODIFIER_SEPARATOR
    max_warnings_count: int = DEFAULT_MAX_WARNINGS_COUNT
    class_name_case: CaseFamily = CaseFamily.ANY
    show_depth_warnings: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "class_name_case", CaseFamily.parse(self.class_name_case))

    @property
    def options(self) -> BemOptions:
        return BemOptions(
            element_separator=self.element_separator,
            modifier_separator=self.modifier_separator,
        )

    @staticmethod
    def from_source(source: ConfigSource) -> BemConfig:
        """Read every setting, falling back to defaults for unusable values."""
        element_separator = _read_separator(source, ELEMENT_SEPARATOR_KEY, DEFAULT_ELEMENT_SEPARATOR)
        modifier_separator = _read_separator(source, MODIFIER_SEPARATOR_KEY, DEFAULT_MODIFIER_SEPARATOR)
        if element_separator == modifier_separator:
            logger.warning(
                "Element and modifier separators are both %r; using defaults",
                element_separator,
            )
            element_separator = DEFAULT_ELEMENT_SEPARATOR
            modifier_separator = DEFAULT_MODIFIER_SEPARATOR

        return BemConfig(
            element_separator=element_separator,
            modifier_separator=modifier_separator,
            max_warnings_count=_read_max_count(source),
            class_name_case=_read_case(source),
            show_depth_warnings=_read_flag(source, SHOW_DEPTH_WARNINGS_KEY),
        )


def _read_separator(source: ConfigSource, key: str, default: str) -> str:
    value: Any = source.get_config_value(key, default)
    if not isinstance(value, str) or not value:
        logger.warning("Ignoring invalid %s=%r; using %r", key, value, default)
        return default
    return value


def _read_max_count(source: ConfigSource) -> int:
    value: Any = source.get_config_value(MAX_WARNINGS_COUNT_KEY, DEFAULT_MAX_WARNINGS_COUNT)
    try:
        count = int(value)
    except (TypeError, ValueError):
        count = -1
    if isinstance(value, bool) or count < 0:
        logger.warning(
            "Ignoring invalid %s=%r; using %d",
            MAX_WARNINGS_COUNT_KEY,
            value,
            DEFAULT_MAX_WARNINGS_COUNT,
        )
        return DEFAULT_MAX_WARNINGS_COUNT
    return count


def _read_case(source: ConfigSource) -> CaseFamily:
    value: Any = source.get_config_value(CLASS_NAME_CASE_KEY, CaseFamily.ANY.value)
    family = CaseFamily.parse(value)
    if family is CaseFamily.ANY and str(value or "").strip().lower() not in ("", "any"):
        logger.warning("Unrecognized %s=%r; case checking disabled", CLASS_NAME_CASE_KEY, value)
    return family


def _read_flag(source: ConfigSource, key: str) -> bool:
    value: Any = source.get_config_value(key, False)
    if not isinstance(value, bool):
        logger.warning("Ignoring invalid %s=%r; using False", key, value)
        return False
    return value
