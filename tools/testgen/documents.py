"""
Assemble and write the two generated fixture files.

The block tables below are the source of truth for what gets generated:

- POLYNOMIAL_BLOCKS: Cardano (degree 3) and Ferrari (degree 4) solver coverage,
  each with real and complex roots.
- TRIG_BLOCKS: table-driven trig constants for 2*pi/i, i in 1..29, minus the
  denominators each function cannot be checked at.
"""

from __future__ import annotations

import dataclasses
from pathlib import Path

from .polynomial import DEFAULT_SEED, build_polynomial_block, render_polynomial_block
from .trig import build_trig_block, render_trig_block


@dataclasses.dataclass(frozen=True)
class PolynomialBlockParams:
    class_name: str
    iteration_count: int
    degree: int
    complex_roots: bool


@dataclasses.dataclass(frozen=True)
class TrigBlockParams:
    function: str
    exclude: tuple[int, ...] = ()


@dataclasses.dataclass(frozen=True)
class RenderedDocument:
    name: str
    text: str
    case_count: int


# NOTE: Table order is part of output stability; keep it deterministic.
POLYNOMIAL_BLOCKS: tuple[PolynomialBlockParams, ...] = (
    PolynomialBlockParams("ClassRealCardanoNumericRoots", 20, 3, False),
    PolynomialBlockParams("ClassComplexCardanoNumericRoots", 30, 3, True),
    PolynomialBlockParams("ClassRealFerrariNumericRoots", 12, 4, False),
    PolynomialBlockParams("ClassComplexFerrariNumericRoots", 8, 4, True),
)

TRIG_BLOCKS: tuple[TrigBlockParams, ...] = (
    # 2*pi/9 simplifies to an expression that is ambiguous due to cubic roots.
    TrigBlockParams("Sin", (9,)),
    TrigBlockParams("Cos"),
    TrigBlockParams("Tan", (4,)),
    TrigBlockParams("Cotan", (1, 2, 4)),
)

GENERATED_BANNER = """/*
 * This file was auto-generated by tools/testgen
 * Do not modify it; modify tools/testgen and rerun it instead.
 */
"""

TRIG_IMPORTANCE_NOTE = """/*
 * It's super important to test all following cases because they test replacements for Trigonometric functions
 * so if one is wrong your result might be wrong at all
 */
"""

USINGS = """using AngouriMath;
using Microsoft.VisualStudio.TestTools.UnitTesting;
"""

TRIG_NAMESPACE = "UnitTests.Core.TrigTableConstTest"


def polynomial_document(
    *,
    seed: int = DEFAULT_SEED,
    blocks: tuple[PolynomialBlockParams, ...] = POLYNOMIAL_BLOCKS,
) -> RenderedDocument:
    built = [
        build_polynomial_block(p.class_name, p.iteration_count, p.degree, p.complex_roots, seed=seed)
        for p in blocks
    ]
    body = "\n\n".join(render_polynomial_block(b) for b in built)
    text = GENERATED_BANNER + "\n\n" + USINGS + "\n" + body + "\n"
    return RenderedDocument(
        name="polynomial",
        text=text,
        case_count=sum(len(b.cases) for b in built),
    )


def trig_document(*, blocks: tuple[TrigBlockParams, ...] = TRIG_BLOCKS) -> RenderedDocument:
    built = [build_trig_block(p.function, p.exclude) for p in blocks]
    body = "\n".join(render_trig_block(b) for b in built)
    text = (
        GENERATED_BANNER
        + "\n"
        + TRIG_IMPORTANCE_NOTE
        + "\n\n"
        + USINGS
        + "\n"
        + f"namespace {TRIG_NAMESPACE}\n"
        + "{\n"
        + body
        + "}\n"
    )
    return RenderedDocument(
        name="trig",
        text=text,
        case_count=sum(len(b.cases) for b in built),
    )


def write_document(path: Path, text: str) -> None:
    """
    Overwrite `path` with `text`.

    Parent directories are not created: writing into a missing directory is a
    configuration error and surfaces as the underlying `OSError`.
    """

    # Stable newlines for review diffs.
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)
