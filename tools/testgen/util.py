from __future__ import annotations

import re

INDENT = "    "

_IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

# Reserved (non-contextual) C# keywords; none of them can name a class or method.
CSHARP_KEYWORDS = frozenset(
    """
    abstract as base bool break byte case catch char checked class const continue
    decimal default delegate do double else enum event explicit extern false finally
    fixed float for foreach goto if implicit in int interface internal is lock long
    namespace new null object operator out override params private protected public
    readonly ref return sbyte sealed short sizeof stackalloc static string struct
    switch this throw true try typeof uint ulong unchecked unsafe ushort using virtual
    void volatile while
    """.split()
)


def indent(level: int) -> str:
    return INDENT * level


def require_identifier(value: object, *, what: str) -> str:
    # Identifiers end up as C# class/method name fragments, so anything else would not compile.
    if not isinstance(value, str) or not _IDENT_RE.fullmatch(value):
        raise ValueError(f"{what} must be a C# identifier, got {value!r}")
    if value in CSHARP_KEYWORDS:
        raise ValueError(f"{what} must not be a C# keyword, got {value!r}")
    return value


def require_int(value: object, *, what: str, minimum: int) -> int:
    if isinstance(value, bool):
        # Guard against accidentally treating booleans as integers.
        raise ValueError(f"{what} must be an int, got bool")
    if not isinstance(value, int):
        raise ValueError(f"{what} must be an int, got {type(value).__name__}")
    if value < minimum:
        raise ValueError(f"{what} must be >= {minimum}, got {value}")
    return value
