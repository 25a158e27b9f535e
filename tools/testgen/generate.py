#!/usr/bin/env python3
"""
Regenerate the polynomial-solver and trig-table fixture files.

Typical usage (from the repo root):

  python -m tools.testgen.generate --root <path/to/csharp/repo>

Then commit the resulting diffs. Use `--check` in CI to fail when a committed
fixture is out of date.
"""

from __future__ import annotations

import argparse
import dataclasses
import os
from pathlib import Path

from .documents import RenderedDocument, polynomial_document, trig_document, write_document
from .polynomial import DEFAULT_SEED
from .structure import check_balanced

DEFAULT_POLYNOMIAL_OUT = Path("Tests/UnitTests/Algebra/SolveTest/SolverNumericalTests.cs")
DEFAULT_TRIG_OUT = Path("Tests/UnitTests/Core/TableTrigConstTest.cs")

DOCUMENT_NAMES = ("polynomial", "trig")


@dataclasses.dataclass(frozen=True)
class GeneratorConfig:
    root: Path
    polynomial_out: Path
    trig_out: Path
    seed: int = DEFAULT_SEED

    def output_path(self, name: str) -> Path:
        if name == "polynomial":
            out = self.polynomial_out
        elif name == "trig":
            out = self.trig_out
        else:
            raise ValueError(f"Unknown document: {name!r}")
        return out if out.is_absolute() else self.root / out


def _default_root() -> Path:
    raw = os.environ.get("TESTGEN_ROOT", "").strip()
    return Path(raw) if raw else Path.cwd()


def _build(name: str, config: GeneratorConfig) -> RenderedDocument:
    if name == "polynomial":
        return polynomial_document(seed=config.seed)
    return trig_document()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Regenerate the generated C# unit-test fixture files."
    )
    parser.add_argument(
        "--only",
        action="append",
        choices=DOCUMENT_NAMES,
        help="Generate only this document (repeatable). Default: all.",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Base directory for relative output paths (default: $TESTGEN_ROOT or cwd).",
    )
    parser.add_argument("--polynomial-out", type=Path, default=DEFAULT_POLYNOMIAL_OUT)
    parser.add_argument("--trig-out", type=Path, default=DEFAULT_TRIG_OUT)
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--check",
        action="store_true",
        help="Do not write; exit 1 if any fixture is missing or out of date.",
    )
    mode.add_argument(
        "--dry-run",
        action="store_true",
        help="Print what would be written without touching the filesystem.",
    )
    args = parser.parse_args(argv)

    config = GeneratorConfig(
        root=args.root if args.root is not None else _default_root(),
        polynomial_out=args.polynomial_out,
        trig_out=args.trig_out,
        seed=args.seed,
    )
    selected = [n for n in DOCUMENT_NAMES if not args.only or n in args.only]

    documents: list[tuple[Path, RenderedDocument]] = []
    for name in selected:
        try:
            doc = _build(name, config)
            check_balanced(doc.text, name=doc.name)
        except ValueError as e:
            print(f"TESTGEN ERROR: {e}")
            return 2
        documents.append((config.output_path(name), doc))

    if args.check:
        stale = False
        for path, doc in documents:
            try:
                current = path.read_bytes()
            except FileNotFoundError:
                current = None
            except OSError as e:
                print(f"TESTGEN ERROR: Failed to read {path}: {e}")
                return 1
            # Compared as bytes; an undecodable file counts as stale.
            if current != doc.text.encode("utf-8"):
                print(f"STALE: {path}")
                stale = True
            else:
                print(f"OK: {path} is up to date")
        if stale:
            print("Fixtures are out of date; rerun `python -m tools.testgen.generate` and commit the result.")
            return 1
        return 0

    for path, doc in documents:
        if args.dry_run:
            print(f"Would write {path} ({doc.case_count} test methods)")
            continue
        try:
            write_document(path, doc.text)
        except OSError as e:
            print(f"TESTGEN ERROR: Failed to write {path}: {e}")
            return 1
        print(f"Wrote {path} ({doc.case_count} test methods)")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
