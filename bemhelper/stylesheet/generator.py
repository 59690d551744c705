"""Nested and flat stylesheet skeletons from flat class-name lists."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from bemhelper.naming import DEFAULT_OPTIONS, BemOptions, parse_class_name


@dataclass(slots=True)
class StylesheetElement:
    name: str
    modifiers: list[str] = field(default_factory=list)


@dataclass(slots=True)
class StylesheetBlock:
    """One top-level rule with its modifier and element children, in output order."""

    name: str
    modifiers: list[str] = field(default_factory=list)
    elements: dict[str, StylesheetElement] = field(default_factory=dict)


def build_stylesheet_tree(
    class_names: Iterable[str],
    options: BemOptions = DEFAULT_OPTIONS,
) -> list[StylesheetBlock]:
    """Group class names by block, then element, sorted for deterministic output."""
    parsed = sorted(
        {parse_class_name(name, options) for name in class_names if name},
        key=lambda class_name: class_name.sort_key(),
    )

    blocks: dict[str, StylesheetBlock] = {}
    for class_name in parsed:
        block = blocks.setdefault(class_name.block, StylesheetBlock(class_name.block))
        if class_name.element is None:
            if class_name.modifier is not None:
                block.modifiers.append(class_name.modifier)
            continue
        element = block.elements.setdefault(class_name.element, StylesheetElement(class_name.element))
        if class_name.modifier is not None:
            element.modifiers.append(class_name.modifier)
    return list(blocks.values())


def generate_stylesheet(
    class_names: Iterable[str],
    flat: bool = False,
    options: BemOptions = DEFAULT_OPTIONS,
) -> str:
    """Render empty rules for `class_names`.

    Flat mode emits `.name{}` per distinct class. Nested mode emits one rule per
    block with `&<separator>` children, e.g. `.block{&--mod{}&__el{&--mod{}}}`.
    """
    names = set(class_names)
    if flat:
        ordered = sorted(
            (name for name in names if name),
            key=lambda name: (parse_class_name(name, options).sort_key(), name),
        )
        return "".join(f".{name}{{}}" for name in ordered)

    return "".join(_render_block(block, options) for block in build_stylesheet_tree(names, options))


def _render_block(block: StylesheetBlock, options: BemOptions) -> str:
    body = _render_modifiers(block.modifiers, options)
    for element in block.elements.values():
        body += (
            f"&{options.element_separator}{element.name}{{"
            f"{_render_modifiers(element.modifiers, options)}}}"
        )
    return f".{block.name}{{{body}}}"


def _render_modifiers(modifiers: list[str], options: BemOptions) -> str:
    return "".join(f"&{options.modifier_separator}{modifier}{{}}" for modifier in modifiers)
