"""
Balanced-delimiter check for generated C# text.

This is not a C# parser. It only tracks `()`, `[]` and `{}` nesting while
skipping string/char literals and comments, which is enough to catch a
template edit that drops a closing brace before the fixture reaches the
compiler.
"""

from __future__ import annotations

_OPEN_TO_CLOSE = {"(": ")", "[": "]", "{": "}"}
_CLOSE_TO_OPEN = {v: k for k, v in _OPEN_TO_CLOSE.items()}


def find_unbalanced(text: str) -> list[str]:
    """Return human-readable problems (empty when every delimiter is matched)."""

    problems: list[str] = []
    stack: list[tuple[str, int]] = []
    line = 1
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\n":
            line += 1
            i += 1
            continue

        if text.startswith("//", i):
            end = text.find("\n", i)
            i = n if end == -1 else end
            continue

        if text.startswith("/*", i):
            end = text.find("*/", i + 2)
            if end == -1:
                problems.append(f"line {line}: unterminated block comment")
                break
            line += text.count("\n", i, end)
            i = end + 2
            continue

        if ch in ('"', "'"):
            start_line = line
            i += 1
            while i < n and text[i] != ch:
                if text[i] == "\n":
                    problems.append(f"line {start_line}: unterminated literal")
                    break
                # Escapes like `\"` must not end the literal.
                i += 2 if text[i] == "\\" else 1
            else:
                if i >= n:
                    problems.append(f"line {start_line}: unterminated literal")
                i += 1
            continue

        if ch in _OPEN_TO_CLOSE:
            stack.append((ch, line))
        elif ch in _CLOSE_TO_OPEN:
            if not stack:
                problems.append(f"line {line}: unexpected {ch!r}")
            else:
                opener, opened_at = stack.pop()
                if _OPEN_TO_CLOSE[opener] != ch:
                    problems.append(
                        f"line {line}: {ch!r} closes {opener!r} opened on line {opened_at}"
                    )
        i += 1

    for opener, opened_at in stack:
        problems.append(f"line {opened_at}: {opener!r} is never closed")
    return problems


def check_balanced(text: str, *, name: str = "document") -> None:
    problems = find_unbalanced(text)
    if problems:
        preview = "; ".join(problems[:5])
        suffix = "" if len(problems) <= 5 else f" (+{len(problems) - 5} more)"
        raise ValueError(f"{name} has unbalanced delimiters: {preview}{suffix}")
