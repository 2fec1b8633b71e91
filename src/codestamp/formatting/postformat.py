# topmark:header:start
#
#   project      : CodeStamp
#   file         : postformat.py
#   file_relpath : src/codestamp/formatting/postformat.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Post-formatting of a rendered file, dispatched on its output syntax."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestamp.config.logging import get_logger
from codestamp.errors import CodeStampIOError, FormattingError
from codestamp.formatting.assembly import normalize_assembly_file
from codestamp.syntax import OutputSyntax

if TYPE_CHECKING:
    from pathlib import Path

    from codestamp.config.logging import CodeStampLogger
    from codestamp.config.model import Config

logger: CodeStampLogger = get_logger(__name__)


def post_format(path: Path, syntax: OutputSyntax, config: Config) -> bool:
    """Canonicalize the file at ``path`` according to ``syntax``.

    - ``GENERAL``: run ``config.formatter`` in place.
    - ``ASSEMBLY``: run the built-in normalizer.
    - ``UNFORMATTED``: nothing to do.

    Args:
        path (Path): The rendered file.
        syntax (OutputSyntax): Syntax family resolved from ``path``.
        config (Config): Generation options (tools, label prefix, indent unit).

    Returns:
        bool: True if the file was formatted, False if its syntax has no formatter.

    Raises:
        FormattingError: If the external formatter fails or cannot be launched.
        CodeStampIOError: If the assembly normalizer cannot read or rewrite the file.
    """
    if syntax is OutputSyntax.GENERAL:
        tool = config.formatter
        try:
            status: int = tool.run(path)
        except OSError as exc:
            raise FormattingError(f"Cannot run {tool.name} on {path}: {exc}") from exc
        if status != 0:
            raise FormattingError(f"{tool.name} failed on {path} (exit status {status})")
        return True

    if syntax is OutputSyntax.ASSEMBLY:
        try:
            normalize_assembly_file(path, label_prefix=config.label_prefix, indent=config.indent)
        except (OSError, UnicodeError) as exc:
            raise CodeStampIOError(f"Cannot normalize {path}: {exc}", stage="format") from exc
        return True

    logger.debug("No formatter for %s (%s)", path, syntax.value)
    return False
