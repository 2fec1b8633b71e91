# topmark:header:start
#
#   project      : CodeStamp
#   file         : io.py
#   file_relpath : src/codestamp/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reading template fragments and data payloads for the CLI.

Data files are selected by extension: ``.json`` is parsed with the standard
library, ``.toml`` with `tomlkit`.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from codestamp.config.logging import get_logger
from codestamp.errors import CodeStampError, CodeStampInputNotFoundError, CodeStampIOError
from codestamp.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from codestamp.config.logging import CodeStampLogger

logger: CodeStampLogger = get_logger(__name__)


class DataFormatError(CodeStampError):
    """A data file could not be decoded."""

    exit_code = ExitCode.TEMPLATE_ERROR
    default_stage = "load"


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise CodeStampInputNotFoundError(f"No such file: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise CodeStampIOError(f"Cannot read {path}: {exc}", stage="load") from exc


def read_templates(paths: Sequence[Path]) -> list[str]:
    """Read template fragments, in the given order."""
    fragments: list[str] = [_read_text(p) for p in paths]
    logger.debug("Read %d template fragment(s)", len(fragments))
    return fragments


def load_data(path: Path | None) -> Any:
    """Load the data payload from a ``.json`` or ``.toml`` file (``None``: empty mapping).

    Raises:
        DataFormatError: If the extension is unknown or the content cannot be decoded.
    """
    if path is None:
        return {}
    text: str = _read_text(path)
    suffix: str = path.suffix.lower()
    try:
        if suffix == ".json":
            return json.loads(text)
        if suffix == ".toml":
            return tomlkit.parse(text).unwrap()
    except (json.JSONDecodeError, TomlkitParseError) as exc:
        raise DataFormatError(f"Cannot decode {path}: {exc}") from exc
    raise DataFormatError(f"Unsupported data file type {path.suffix!r} (expected .json or .toml)")
