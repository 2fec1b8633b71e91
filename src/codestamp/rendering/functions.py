# topmark:header:start
#
#   project      : CodeStamp
#   file         : functions.py
#   file_relpath : src/codestamp/rendering/functions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in template functions.

These helpers cover what code templates keep needing on top of Jinja2's own
filters: small integer arithmetic for unrolled loops, index helpers for separators,
and identifier case conversion. They are registered both as globals
(``{{ add(i, 1) }}``) and as filters (``{{ i | add(1) }}``).
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from typing import Any, Final

_WORD_SPLIT: Final[re.Pattern[str]] = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")


def add(a: int, b: int) -> int:
    return a + b


def sub(a: int, b: int) -> int:
    return a - b


def mul(a: int, b: int) -> int:
    return a * b


def div(a: int, b: int) -> int:
    """Integer (floor) division."""
    return a // b


def mod(a: int, b: int) -> int:
    return a % b


def iterate(start: int, end: int) -> list[int]:
    """Return ``[start, ..., end - 1]``."""
    return list(range(start, end))


def last(index: int, seq: Sequence[Any]) -> bool:
    """Return True if ``index`` is the last index of ``seq``."""
    return index == len(seq) - 1


def reverse(seq: Sequence[Any]) -> list[Any]:
    return list(reversed(seq))


def hex_(value: int) -> str:
    """Format ``value`` as a ``0x``-prefixed lower-case hexadecimal literal."""
    return f"{value:#x}"


def words(text: str) -> list[str]:
    """Split an identifier or phrase into its words (``"fieldElement"`` → field, Element)."""
    return _WORD_SPLIT.findall(text)


def pascal(text: str) -> str:
    return "".join(w[:1].upper() + w[1:].lower() for w in words(text))


def camel(text: str) -> str:
    s = pascal(text)
    return s[:1].lower() + s[1:]


def snake(text: str) -> str:
    return "_".join(w.lower() for w in words(text))


def quote(text: str) -> str:
    """Return ``text`` as a double-quoted string literal."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def builtin_functions() -> dict[str, Callable[..., Any]]:
    """Return a fresh mapping of the built-in template functions."""
    return {
        "add": add,
        "sub": sub,
        "mul": mul,
        "div": div,
        "mod": mod,
        "iterate": iterate,
        "last": last,
        "reverse": reverse,
        "hex": hex_,
        "words": words,
        "pascal": pascal,
        "camel": camel,
        "snake": snake,
        "quote": quote,
    }
