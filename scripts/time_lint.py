#!/usr/bin/env python3
"""Time the diagnostic pass over a directory of markup files."""

from __future__ import annotations

import argparse
from pathlib import Path
import time

from tqdm import tqdm

from bemhelper import BemConfig, CaseFamily, SourceDocument, run_lint

MARKUP_SUFFIXES = (".html", ".htm", ".jsx", ".tsx", ".vue", ".svelte")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Time run_lint over every markup file under a directory")
    parser.add_argument("root", type=Path)
    parser.add_argument("--case", choices=[family.value for family in CaseFamily], default="kebab")
    parser.add_argument("--slowest", type=int, default=10, help="How many of the slowest files to list")
    args = parser.parse_args(argv)

    paths = sorted(path for path in args.root.rglob("*") if path.is_file() and path.suffix in MARKUP_SUFFIXES)
    if not paths:
        raise SystemExit(f"No markup files found under {args.root}")
    config = BemConfig(class_name_case=args.case, show_depth_warnings=True, max_warnings_count=10**9)

    rows: list[tuple[float, Path, int, int]] = []
    for path in tqdm(paths, unit="file"):
        document = SourceDocument(path.read_text(encoding="utf-8"), uri=path.as_posix())
        started = time.perf_counter()
        result = run_lint(document, document.uri, config)
        rows.append((time.perf_counter() - started, path, len(result.classes), len(result.diagnostics)))

    total = sum(row[0] for row in rows) or 1e-9
    print(f"{len(rows)} files in {total:.4f}s ({len(rows) / total:.1f} files/s)")
    print(f"classes={sum(row[2] for row in rows)} diagnostics={sum(row[3] for row in rows)}")
    for elapsed, path, classes, diagnostics in sorted(rows, reverse=True)[: max(args.slowest, 0)]:
        print(f"{elapsed * 1000:8.2f}ms  classes={classes:<5} diagnostics={diagnostics:<5} {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
