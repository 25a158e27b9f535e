"""Unit-test fixture generator.

Emits the C# MSTest fixture files for the polynomial solver and the
trigonometric constant table. Output is deterministic so regenerating a
fixture never produces a spurious diff.

Regenerate from the repo root with:

  python -m tools.testgen --root <path/to/repo>
"""

from __future__ import annotations
