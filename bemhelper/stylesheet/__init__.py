"""Stylesheet skeleton generation."""

from bemhelper.stylesheet.generator import (
    StylesheetBlock,
    StylesheetElement,
    build_stylesheet_tree,
    generate_stylesheet,
)

__all__ = [
    "StylesheetBlock",
    "StylesheetElement",
    "build_stylesheet_tree",
    "generate_stylesheet",
]
