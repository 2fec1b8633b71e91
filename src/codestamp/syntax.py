# topmark:header:start
#
#   project      : CodeStamp
#   file         : syntax.py
#   file_relpath : src/codestamp/syntax.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output syntax families and their resolution from a file path.

The post-formatting strategy is selected once per generation call from the output
file's extension:

- ``GENERAL``: general-purpose source (``.go``), formatted by an external tool.
- ``ASSEMBLY``: assembler source (``.s``), normalized by the built-in line formatter.
- ``UNFORMATTED``: anything else; left as rendered.

Additional extensions can be mapped with
[`register_extension`][codestamp.syntax.register_extension].
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from codestamp.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from codestamp.config.logging import CodeStampLogger

logger: CodeStampLogger = get_logger(__name__)


class OutputSyntax(str, Enum):
    """Syntax family of a generated file, as far as post-formatting is concerned."""

    GENERAL = "general"
    ASSEMBLY = "assembly"
    UNFORMATTED = "unformatted"


_EXTENSIONS: dict[str, OutputSyntax] = {
    ".go": OutputSyntax.GENERAL,
    ".s": OutputSyntax.ASSEMBLY,
}


def register_extension(suffix: str, syntax: OutputSyntax) -> None:
    """Map a filename extension to a syntax family.

    Args:
        suffix (str): Extension including the leading dot (e.g. ``".S"``).
        syntax (OutputSyntax): Family used for files with this extension.

    Raises:
        ValueError: If ``suffix`` does not start with a dot.
    """
    if not suffix.startswith(".") or len(suffix) < 2:
        raise ValueError(f"Extension must start with '.': {suffix!r}")
    _EXTENSIONS[suffix] = syntax


def resolve_output_syntax(path: Path) -> OutputSyntax:
    """Return the syntax family for ``path`` based on its extension.

    Matching is case-sensitive (``.S`` is preprocessed assembly, not ``.s``).
    """
    syntax: OutputSyntax = _EXTENSIONS.get(path.suffix, OutputSyntax.UNFORMATTED)
    logger.debug("Resolved %s to output syntax %s", path, syntax.value)
    return syntax
