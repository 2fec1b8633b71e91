# topmark:header:start
#
#   project      : CodeStamp
#   file         : header.py
#   file_relpath : src/codestamp/rendering/header.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header emission for generated files.

The header is written in a fixed order, skipping every element whose config field
is empty:

1. build-constraint line, then a blank line;
2. license text, then a newline;
3. ``// Code generated by <label>. DO NOT EDIT.`` banner, then a blank line
   (never skipped);
4. ``// Package <name> <doc>`` (only with a doc) and ``package <name>``, then a
   blank line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestamp.config.logging import get_logger
from codestamp.constants import BANNER_TEMPLATE

if TYPE_CHECKING:
    from typing import TextIO

    from codestamp.config.logging import CodeStampLogger
    from codestamp.config.model import Config

logger: CodeStampLogger = get_logger(__name__)


def banner_line(label: str) -> str:
    """Return the generated-by banner for ``label`` (without newline)."""
    return BANNER_TEMPLATE.format(label=label)


def header_chunks(config: Config) -> list[str]:
    """Return the header as the ordered list of chunks to write.

    Args:
        config (Config): Generation options providing the header texts.

    Returns:
        list[str]: Newline-terminated chunks, in emission order.
    """
    chunks: list[str] = []
    if config.build_tag:
        chunks.append(config.build_tag + "\n\n")
    if config.license_text:
        chunks.append(config.license_text + "\n")
    chunks.append(banner_line(config.generated_by) + "\n\n")
    if config.package_name:
        if config.package_doc:
            chunks.append(f"// Package {config.package_name} {config.package_doc}\n")
        chunks.append(f"package {config.package_name}\n\n")
    return chunks


def emit_header(fp: TextIO, config: Config) -> int:
    """Write the header to ``fp`` chunk by chunk.

    A failing write propagates its `OSError` (or `UnicodeEncodeError` for text the
    stream cannot encode); chunks already written stay in the file.

    Args:
        fp (TextIO): Open text stream positioned at the start of the output file.
        config (Config): Generation options providing the header texts.

    Returns:
        int: Number of characters written.
    """
    written: int = 0
    for chunk in header_chunks(config):
        written += fp.write(chunk)
    logger.debug("Header: wrote %d characters", written)
    return written
