"""Class-name extraction and BEM structure checks."""

from __future__ import annotations

from dataclasses import dataclass

from bemhelper.naming.options import DEFAULT_OPTIONS, BemOptions


@dataclass(frozen=True, slots=True)
class BemClassName:
    """One class name decomposed as `block[__element][--modifier]`.

    Over-depth names keep their surplus separators inside `element` or
    `modifier`; use `is_bem_class` to tell them apart.
    """

    block: str
    element: str | None = None
    modifier: str | None = None

    @property
    def is_block(self) -> bool:
        return self.element is None and self.modifier is None

    @property
    def has_element(self) -> bool:
        return self.element is not None

    @property
    def has_modifier(self) -> bool:
        return self.modifier is not None

    def sort_key(self) -> tuple[str, str, str]:
        return (self.block, self.element or "", self.modifier or "")


def get_classes(markup: str, options: BemOptions = DEFAULT_OPTIONS) -> list[str]:
    """Every class token from `class`/`className` attributes, in document order."""
    classes: list[str] = []
    for match in options.class_attribute_pattern.finditer(markup):
        value = next((group for group in match.groups() if group), "")
        classes.extend(value.split())
    return classes


def unique_classes(markup: str, options: BemOptions = DEFAULT_OPTIONS) -> list[str]:
    return list(dict.fromkeys(get_classes(markup, options)))


def parse_class_name(name: str, options: BemOptions = DEFAULT_OPTIONS) -> BemClassName:
    """Decompose `name` using the same tokenisation as `is_bem_class`.

    The first element separator opens the element, the first modifier separator
    opens the modifier; any later separator stays inside the open part.
    """
    parts = split_segments(name, options)
    element: str | None = None
    modifier: str | None = None
    for separator, segment in zip(parts[1::2], parts[2::2]):
        if modifier is not None:
            modifier += separator + segment
        elif separator == options.modifier_separator:
            modifier = segment
        elif element is None:
            element = segment
        else:
            element += separator + segment
    return BemClassName(block=parts[0], element=element, modifier=modifier)


def is_bem_class(name: str, options: BemOptions = DEFAULT_OPTIONS) -> bool:
    """Whether `name` has at most one element and one modifier, element first."""
    separators = split_segments(name, options)[1::2]
    if len(separators) > 2 or len(set(separators)) != len(separators):
        return False
    if separators == [options.modifier_separator, options.element_separator]:
        return False
    return True


def split_segments(name: str, options: BemOptions = DEFAULT_OPTIONS) -> list[str]:
    """Alternating segments and separators; joining the result gives `name` back."""
    return options.separator_pattern().split(name)


def name_segments(name: str, options: BemOptions = DEFAULT_OPTIONS) -> list[str]:
    """The non-empty block/element/modifier segments of `name`, separators dropped."""
    return [segment for segment in split_segments(name, options)[0::2] if segment]
