# topmark:header:start
#
#   project      : CodeStamp
#   file         : imports.py
#   file_relpath : src/codestamp/formatting/imports.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Import resolution on a formatted file.

The resolver is only meaningful for general-purpose source files; calling it on
other syntaxes is left to the caller (disable it with ``options.imports(False)``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestamp.errors import ImportResolutionError

if TYPE_CHECKING:
    from pathlib import Path

    from codestamp.config.model import Config


def resolve_imports(path: Path, config: Config) -> None:
    """Run ``config.import_resolver`` on ``path``.

    Raises:
        ImportResolutionError: If the tool exits non-zero or cannot be launched.
    """
    tool = config.import_resolver
    try:
        status: int = tool.run(path)
    except OSError as exc:
        raise ImportResolutionError(f"Cannot run {tool.name} on {path}: {exc}") from exc
    if status != 0:
        raise ImportResolutionError(f"{tool.name} failed on {path} (exit status {status})")
