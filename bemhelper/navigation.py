"""Lookups of the class a new piece of markup most likely belongs to."""

from __future__ import annotations

from bemhelper.naming import DEFAULT_OPTIONS, BemOptions, get_classes, parse_class_name


def get_preceding_class_name(
    markup: str,
    want_element: bool = False,
    options: BemOptions = DEFAULT_OPTIONS,
) -> str | None:
    """The last block class in `markup`, or the last element class when `want_element`.

    Element classes may carry a modifier; block classes carry neither.
    """
    for name in reversed(get_classes(markup, options)):
        class_name = parse_class_name(name, options)
        if want_element and class_name.has_element:
            return name
        if not want_element and class_name.is_block:
            return name
    return None


def suggest_child_class(markup: str, options: BemOptions = DEFAULT_OPTIONS) -> str | None:
    """Prefix for a new child element of the closest preceding block, e.g. `nav__`."""
    block = get_preceding_class_name(markup, want_element=False, options=options)
    if block is None:
        return None
    return f"{block}{options.element_separator}"
