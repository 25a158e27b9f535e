"""
Polynomial-root fixture blocks.

Each generated test builds a product of linear factors `(x - r)` (or
`(x - r + MathS.i * r2)` in complex mode), expands it, solves it for `x` and
checks that every root it finds satisfies the expanded expression.

Factors come from a seeded `JavaRandom`, which reproduces the draws of
`java.util.Random`. The committed fixture file was first produced from that
sequence, so regenerating it leaves every existing factor unchanged.
"""

from __future__ import annotations

import dataclasses

from .util import indent, require_identifier, require_int

DEFAULT_SEED = 44

# Factor roots are drawn from [0, ROOT_BOUND).
ROOT_BOUND = 10

NAMESPACE = "UnitTests.Algebra.PolynomialSolverTests"

_MULTIPLIER = 0x5DEECE66D
_INCREMENT = 0xB
_MASK = (1 << 48) - 1


class JavaRandom:
    """
    48-bit linear congruential generator with the `java.util.Random` contract.

    Only the pieces the fixtures need are implemented: `next_bits` and the
    bounded `next_int`, including its rejection loop for non-power-of-two bounds.
    """

    def __init__(self, seed: int) -> None:
        self._seed = (seed ^ _MULTIPLIER) & _MASK

    def next_bits(self, bits: int) -> int:
        self._seed = (self._seed * _MULTIPLIER + _INCREMENT) & _MASK
        value = self._seed >> (48 - bits)
        # Java returns a signed 32-bit int.
        if value >= 1 << 31:
            value -= 1 << 32
        return value

    def next_int(self, bound: int | None = None) -> int:
        if bound is None:
            return self.next_bits(32)
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")

        r = self.next_bits(31)
        m = bound - 1
        if bound & m == 0:
            return (bound * r) >> 31

        u = r
        r = u % bound
        # Java rejects draws where `u - r + m` overflows a signed 32-bit int.
        while u - r + m >= 1 << 31:
            u = self.next_bits(31)
            r = u % bound
        return r


@dataclasses.dataclass(frozen=True)
class LinearFactor:
    real: int
    imag: int | None = None

    def render(self) -> str:
        if self.imag is None:
            return f"(x - {self.real})"
        return f"(x - {self.real} + MathS.i * {self.imag})"


@dataclasses.dataclass(frozen=True)
class PolynomialCase:
    index: int
    degree: int
    factors: tuple[LinearFactor, ...]

    @property
    def method_name(self) -> str:
        # Historic name; renaming it would churn every generated method.
        return f"TestAllcomplexNumeric{self.index}_{self.degree}"

    def expression(self) -> str:
        return " * ".join(f.render() for f in self.factors)


@dataclasses.dataclass(frozen=True)
class PolynomialBlock:
    class_name: str
    degree: int
    complex_roots: bool
    cases: tuple[PolynomialCase, ...]


def build_polynomial_block(
    class_name: str,
    iteration_count: int,
    degree: int,
    complex_roots: bool,
    *,
    seed: int = DEFAULT_SEED,
    rng: JavaRandom | None = None,
) -> PolynomialBlock:
    """
    Draw `iteration_count` random polynomials of the given degree.

    A fresh generator seeded with `seed` is used unless `rng` is passed, so two
    blocks built in sequence never see each other's draws.
    """

    require_identifier(class_name, what="class_name")
    require_int(iteration_count, what="iteration_count", minimum=0)
    require_int(degree, what="degree", minimum=1)

    if rng is None:
        rng = JavaRandom(seed)

    cases: list[PolynomialCase] = []
    for index in range(1, iteration_count + 1):
        factors: list[LinearFactor] = []
        for _ in range(degree):
            # Draw order (real, then imaginary) is part of output stability.
            real = rng.next_int(ROOT_BOUND)
            imag = rng.next_int(ROOT_BOUND) if complex_roots else None
            factors.append(LinearFactor(real, imag))
        cases.append(PolynomialCase(index=index, degree=degree, factors=tuple(factors)))

    return PolynomialBlock(
        class_name=class_name,
        degree=degree,
        complex_roots=bool(complex_roots),
        cases=tuple(cases),
    )


def _render_case(case: PolynomialCase) -> list[str]:
    return [
        f"{indent(2)}[TestMethod]",
        f"{indent(2)}public void {case.method_name}()",
        f"{indent(2)}{{",
        f"{indent(3)}var expr = {case.expression()};",
        f"{indent(3)}var newexpr = expr.Expand();",
        f"{indent(3)}foreach (var root in newexpr.SolveEquation(x).FiniteSet())",
        f"{indent(4)}SolveOneEquation.AssertRoots(newexpr, x, root);",
        f"{indent(2)}}}",
    ]


def render_polynomial_block(block: PolynomialBlock) -> str:
    lines = [
        f"namespace {NAMESPACE}",
        "{",
        f"{indent(1)}[TestClass]",
        f"{indent(1)}public class {block.class_name}",
        f"{indent(1)}{{",
        f'{indent(2)}public static VariableEntity x = "x";',
        "",
        "",
    ]
    for case in block.cases:
        lines.extend(_render_case(case))
    lines.append(f"{indent(1)}}}")
    lines.append("}")
    return "\n".join(lines)
