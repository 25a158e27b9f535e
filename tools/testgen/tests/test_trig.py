from __future__ import annotations

import re
import unittest

from tools.testgen.trig import TrigBlock, TrigCase, build_trig_block, render_trig_block
from tools.testgen.structure import find_unbalanced


def _rendered_denominators(text: str, function: str) -> list[int]:
    return [int(m) for m in re.findall(rf"public void {function}(\d+)Test\(\)", text)]


class TrigBlockTests(unittest.TestCase):
    def test_no_exclusions_covers_1_through_29(self) -> None:
        block = build_trig_block("Cos")
        self.assertEqual(block.denominators, list(range(1, 30)))
        self.assertEqual(_rendered_denominators(render_trig_block(block), "Cos"), list(range(1, 30)))

    def test_exclusions_are_removed_exactly(self) -> None:
        for function, exclude in [("Sin", (9,)), ("Tan", (4,)), ("Cotan", (1, 2, 4))]:
            block = build_trig_block(function, exclude)
            expected = sorted(set(range(1, 30)) - set(exclude))
            self.assertEqual(block.denominators, expected, function)
            self.assertEqual(_rendered_denominators(render_trig_block(block), function), expected)

    def test_cotan_emits_26_cases(self) -> None:
        block = build_trig_block("Cotan", [1, 2, 4])
        self.assertEqual(len(block.cases), 26)
        self.assertEqual(block.excluded, frozenset({1, 2, 4}))

    def test_out_of_range_exclusions_have_no_effect(self) -> None:
        self.assertEqual(build_trig_block("Sin", [0, 30, 100]).denominators, list(range(1, 30)))

    def test_names(self) -> None:
        block = build_trig_block("Tan", [4])
        self.assertEqual(block.class_name, "TestTrigTableConstTan")
        self.assertEqual(block.cases[0].method_name, "Tan1Test")

    def test_render_known_case(self) -> None:
        block = TrigBlock(function="Sin", excluded=frozenset(), cases=(TrigCase("Sin", 7),))
        expected = "\n".join(
            [
                "    [TestClass]",
                "    public class TestTrigTableConstSin",
                "    {",
                "        [TestMethod]",
                "        public void Sin7Test()",
                "        {",
                "            MathS.Settings.PrecisionErrorCommon.Set(1e-8m);",
                "            var toSimplify = MathS.Sin(2 * MathS.pi / 7);",
                "            var expected = toSimplify.Eval();",
                "            var real = toSimplify.Simplify().Eval();",
                '            Assert.IsTrue(expected == real, "expected: " + expected.ToString() + "  Got instead: " + real.ToString());',
                "            MathS.Settings.PrecisionErrorCommon.Unset();",
                "        }",
                "",
                "    }",
                "",
            ]
        )
        self.assertEqual(render_trig_block(block), expected)

    def test_every_case_restores_precision(self) -> None:
        rendered = render_trig_block(build_trig_block("Cos"))
        self.assertEqual(rendered.count("PrecisionErrorCommon.Set(1e-8m)"), 29)
        self.assertEqual(rendered.count("PrecisionErrorCommon.Unset()"), 29)

    def test_rendered_block_is_balanced(self) -> None:
        self.assertEqual(find_unbalanced(render_trig_block(build_trig_block("Cotan", [1, 2, 4]))), [])

    def test_rejects_invalid_function_names(self) -> None:
        for bad in ["", "Sin(x)", "2Sin", "Math.Sin", "Sin\n", "\nSin", "int"]:
            with self.assertRaisesRegex(ValueError, "function"):
                build_trig_block(bad)

    def test_rejects_non_integer_exclusions(self) -> None:
        with self.assertRaises(ValueError):
            build_trig_block("Sin", ["9"])  # type: ignore[list-item]
        with self.assertRaises(ValueError):
            build_trig_block("Sin", [True])


if __name__ == "__main__":
    unittest.main()
