from __future__ import annotations

import dataclasses
from typing import Iterable

from .util import indent, require_identifier, require_int

# Angles are 2*pi/i for every denominator i in this range.
TRIG_DENOMINATORS = range(1, 30)

PRECISION = "1e-8m"


@dataclasses.dataclass(frozen=True)
class TrigCase:
    function: str
    denominator: int

    @property
    def method_name(self) -> str:
        return f"{self.function}{self.denominator}Test"


@dataclasses.dataclass(frozen=True)
class TrigBlock:
    function: str
    excluded: frozenset[int]
    cases: tuple[TrigCase, ...]

    @property
    def class_name(self) -> str:
        return f"TestTrigTableConst{self.function}"

    @property
    def denominators(self) -> list[int]:
        return [c.denominator for c in self.cases]


def build_trig_block(function: str, exclude: Iterable[int] = ()) -> TrigBlock:
    """Build one test per denominator in TRIG_DENOMINATORS that is not excluded."""

    require_identifier(function, what="function")
    excluded = frozenset(require_int(i, what="excluded denominator", minimum=0) for i in exclude)
    cases = tuple(TrigCase(function, i) for i in TRIG_DENOMINATORS if i not in excluded)
    return TrigBlock(function=function, excluded=excluded, cases=cases)


def _render_case(case: TrigCase) -> list[str]:
    return [
        f"{indent(2)}[TestMethod]",
        f"{indent(2)}public void {case.method_name}()",
        f"{indent(2)}{{",
        f"{indent(3)}MathS.Settings.PrecisionErrorCommon.Set({PRECISION});",
        f"{indent(3)}var toSimplify = MathS.{case.function}(2 * MathS.pi / {case.denominator});",
        f"{indent(3)}var expected = toSimplify.Eval();",
        f"{indent(3)}var real = toSimplify.Simplify().Eval();",
        f'{indent(3)}Assert.IsTrue(expected == real, "expected: " + expected.ToString() + "  Got instead: " + real.ToString());',
        f"{indent(3)}MathS.Settings.PrecisionErrorCommon.Unset();",
        f"{indent(2)}}}",
        "",
    ]


def render_trig_block(block: TrigBlock) -> str:
    lines = [
        f"{indent(1)}[TestClass]",
        f"{indent(1)}public class {block.class_name}",
        f"{indent(1)}{{",
    ]
    for case in block.cases:
        lines.extend(_render_case(case))
    lines.append(f"{indent(1)}}}")
    return "\n".join(lines) + "\n"
