# topmark:header:start
#
#   project      : CodeStamp
#   file         : status.py
#   file_relpath : src/codestamp/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stages of a single generation call.

A call moves through::

    CONFIGURING → HEADER_WRITTEN → RENDERED → [FORMATTED] → [IMPORTS_RESOLVED] → DONE

Bracketed stages only occur when enabled. Any failure moves the call to ``FAILED``;
the stage it failed in is kept on the context.
"""

from __future__ import annotations

from yachalk import chalk

from codestamp.rendering.colored_enum import ColoredStrEnum


class GenerationStage(ColoredStrEnum):
    """Progress of a generation call; the on-disk file reflects the last completed stage."""

    CONFIGURING = ("configuring", chalk.gray)
    HEADER_WRITTEN = ("header written", chalk.blue)
    RENDERED = ("rendered", chalk.blue)
    FORMATTED = ("formatted", chalk.cyan)
    IMPORTS_RESOLVED = ("imports resolved", chalk.cyan)
    DONE = ("done", chalk.green)
    FAILED = ("failed", chalk.red_bright)
