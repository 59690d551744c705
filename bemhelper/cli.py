"""Command-line adapter over the naming, stylesheet and lint APIs."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import json
import logging
from pathlib import Path
import sys
from typing import Any

from bemhelper.config import (
    CLASS_NAME_CASE_KEY,
    ELEMENT_SEPARATOR_KEY,
    MAX_WARNINGS_COUNT_KEY,
    MODIFIER_SEPARATOR_KEY,
    SHOW_DEPTH_WARNINGS_KEY,
    BemConfig,
)
from bemhelper.diagnostics import format_diagnostic
from bemhelper.host import MappingConfigSource, MemoryDiagnosticCollection, SourceDocument
from bemhelper.naming import CaseFamily, convert_class, get_classes, unique_classes
from bemhelper.navigation import get_preceding_class_name
from bemhelper.provider import BemDiagnosticProvider
from bemhelper.stylesheet import generate_stylesheet

logger = logging.getLogger(__name__)

_CASE_CHOICES = [family.value for family in CaseFamily]


def load_settings(path: Path | None) -> dict[str, Any]:
    """Read editor-style settings JSON; nested `{"bemHelper": {...}}` is flattened."""
    if path is None:
        return {}
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"Settings file {path} must contain a JSON object")
    settings: dict[str, Any] = {}
    for key, value in raw.items():
        if isinstance(value, dict):
            settings.update({f"{key}.{inner}": inner_value for inner, inner_value in value.items()})
        else:
            settings[key] = value
    return settings


def _resolve_config(args: argparse.Namespace) -> BemConfig:
    source = MappingConfigSource(load_settings(args.settings)).overlay(
        {
            ELEMENT_SEPARATOR_KEY: args.element_separator,
            MODIFIER_SEPARATOR_KEY: args.modifier_separator,
            MAX_WARNINGS_COUNT_KEY: getattr(args, "max_warnings", None),
            CLASS_NAME_CASE_KEY: getattr(args, "case", None),
            SHOW_DEPTH_WARNINGS_KEY: True if getattr(args, "depth", False) else None,
        }
    )
    return BemConfig.from_source(source)


def _cmd_lint(args: argparse.Namespace) -> int:
    config = _resolve_config(args)
    provider = BemDiagnosticProvider()
    collection = MemoryDiagnosticCollection()
    total = 0
    for path in args.paths:
        document = SourceDocument(path.read_text(encoding="utf-8"), uri=path.as_posix())
        diagnostics = provider.update_diagnostics(document, document.uri, collection, config)
        for diagnostic in diagnostics:
            print(format_diagnostic(diagnostic, document.uri))
        total += len(diagnostics)
    logger.info("%d diagnostics in %d files", total, len(args.paths))
    return 1 if total else 0


def _cmd_classes(args: argparse.Namespace) -> int:
    options = _resolve_config(args).options
    markup = args.path.read_text(encoding="utf-8")
    classes = unique_classes(markup, options) if args.unique else get_classes(markup, options)
    for name in classes:
        print(name)
    return 0


def _cmd_convert(args: argparse.Namespace) -> int:
    options = _resolve_config(args).options
    target = CaseFamily.parse(args.to)
    for name in args.names:
        print(convert_class(name, target, options))
    return 0


def _cmd_stylesheet(args: argparse.Namespace) -> int:
    options = _resolve_config(args).options
    markup = args.path.read_text(encoding="utf-8")
    print(generate_stylesheet(get_classes(markup, options), flat=args.flat, options=options))
    return 0


def _cmd_parent(args: argparse.Namespace) -> int:
    options = _resolve_config(args).options
    markup = args.path.read_text(encoding="utf-8")
    name = get_preceding_class_name(markup, want_element=args.element, options=options)
    if name is None:
        return 1
    print(name)
    return 0


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--settings", type=Path, default=None, help="JSON settings file (bemHelper.* keys).")
    common.add_argument("--element-separator", default=None, help="Element separator (default: __).")
    common.add_argument("--modifier-separator", default=None, help="Modifier separator (default: --).")
    common.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity.")

    parser = argparse.ArgumentParser(prog="bemhelper", description="BEM class-name helper.")
    commands = parser.add_subparsers(dest="command", required=True)

    lint = commands.add_parser("lint", parents=[common], help="Report BEM naming problems.")
    lint.add_argument("paths", nargs="+", type=Path)
    lint.add_argument("--case", choices=_CASE_CHOICES, default=None, help="Required class-name case.")
    lint.add_argument("--depth", action="store_true", help="Report classes nested deeper than BEM allows.")
    lint.add_argument("--max-warnings", type=int, default=None, help="Cap on case warnings per file.")
    lint.set_defaults(handler=_cmd_lint)

    classes = commands.add_parser("classes", parents=[common], help="List classes defined in markup.")
    classes.add_argument("path", type=Path)
    classes.add_argument("--unique", action="store_true", help="Drop repeated class names.")
    classes.set_defaults(handler=_cmd_classes)

    convert = commands.add_parser("convert", parents=[common], help="Convert class names to another case.")
    convert.add_argument("names", nargs="+")
    convert.add_argument("--to", choices=_CASE_CHOICES[1:], required=True)
    convert.set_defaults(handler=_cmd_convert)

    stylesheet = commands.add_parser("stylesheet", parents=[common], help="Generate a stylesheet skeleton.")
    stylesheet.add_argument("path", type=Path)
    stylesheet.add_argument("--flat", action="store_true", help="One rule per class, no nesting.")
    stylesheet.set_defaults(handler=_cmd_stylesheet)

    parent = commands.add_parser("parent", parents=[common], help="Print the closest preceding block class.")
    parent.add_argument("path", type=Path)
    parent.add_argument("--element", action="store_true", help="Look for an element class instead.")
    parent.set_defaults(handler=_cmd_parent)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = logging.WARNING - 10 * min(args.verbose, 2)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        return args.handler(args)
    except (OSError, ValueError) as exc:
        print(f"bemhelper: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
