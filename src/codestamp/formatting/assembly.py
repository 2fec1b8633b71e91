# topmark:header:start
#
#   project      : CodeStamp
#   file         : assembly.py
#   file_relpath : src/codestamp/formatting/assembly.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in line normalizer for generated assembly files.

Assembly has no canonical formatter, and templates typically produce an unindented
preamble (comments, ``#include`` and ``DATA`` directives) followed by an instruction
body. The normalizer makes one forward pass over the lines:

Preamble:
    Every line is stripped of surrounding whitespace and runs of blank lines collapse
    to a single blank line. The first line starting with the label prefix
    (``"TEXT "`` by default) is copied unindented and ends the preamble.

Body:
    Same blank-line collapsing (the run tracker restarts after the label line), and
    every retained line, blank ones included, is prefixed with one indent unit.

The result is idempotent: normalizing normalized output changes nothing.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from codestamp.config.logging import get_logger
from codestamp.constants import DEFAULT_INDENT, DEFAULT_LABEL_PREFIX

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from codestamp.config.logging import CodeStampLogger

logger: CodeStampLogger = get_logger(__name__)

# Only LF, CRLF and lone CR end a line; form feeds and Unicode separators are line content.
_LINE_BREAK: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split ``text`` on ``\\n``, ``\\r\\n`` and ``\\r`` only, without line terminators.

    A final line terminator does not start an extra empty line.
    """
    lines: list[str] = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def normalize_assembly_lines(
    lines: Iterable[str],
    *,
    label_prefix: str = DEFAULT_LABEL_PREFIX,
    indent: str = DEFAULT_INDENT,
) -> list[str]:
    """Normalize assembly lines (without line terminators).

    Args:
        lines (Iterable[str]): Input lines; surrounding whitespace is ignored.
        label_prefix (str): Prefix of the line that opens the indented body.
        indent (str): Indent unit for body lines.

    Returns:
        list[str]: The normalized lines, without line terminators.
    """
    result: list[str] = []
    in_body: bool = False
    prev_blank: bool = False

    for raw in lines:
        line: str = raw.strip()
        blank: bool = line == ""
        if not (blank and prev_blank):
            result.append(indent + line if in_body else line)
        if not in_body and line.startswith(label_prefix):
            in_body = True
            prev_blank = False
            continue
        prev_blank = blank

    logger.trace("Normalized %d assembly lines (body found: %s)", len(result), in_body)
    return result


def normalize_assembly_text(
    text: str,
    *,
    label_prefix: str = DEFAULT_LABEL_PREFIX,
    indent: str = DEFAULT_INDENT,
) -> str:
    """Normalize assembly ``text``.

    ``\\n``, ``\\r\\n`` and ``\\r`` line endings are accepted; ``\\n`` is produced.
    """
    out = normalize_assembly_lines(split_lines(text), label_prefix=label_prefix, indent=indent)
    return "".join(line + "\n" for line in out)


def normalize_assembly_file(
    path: Path,
    *,
    label_prefix: str = DEFAULT_LABEL_PREFIX,
    indent: str = DEFAULT_INDENT,
) -> int:
    """Rewrite the assembly file at ``path`` with its normalized content.

    The file is rewritten in place (no temporary file): a failing write may leave it
    truncated. `OSError` and `UnicodeDecodeError` propagate to the caller.

    Args:
        path (Path): The file to normalize.
        label_prefix (str): Prefix of the line that opens the indented body.
        indent (str): Indent unit for body lines.

    Returns:
        int: Number of characters written.
    """
    with path.open("r", encoding="utf-8", newline="") as fp:
        text: str = fp.read()
    normalized: str = normalize_assembly_text(text, label_prefix=label_prefix, indent=indent)
    with path.open("w", encoding="utf-8", newline="") as fp:
        written: int = fp.write(normalized)
    logger.debug("Assembly normalizer: wrote %d characters to %s", written, path)
    return written
