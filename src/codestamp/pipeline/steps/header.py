# topmark:header:start
#
#   project      : CodeStamp
#   file         : header.py
#   file_relpath : src/codestamp/pipeline/steps/header.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header step: create the output file and write its header.

Parent directories are created as needed and the output file is created or
truncated. In verbose mode a single ``generating <path>`` line is printed to stdout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from codestamp.config.logging import get_logger
from codestamp.errors import CodeStampIOError
from codestamp.pipeline.status import GenerationStage
from codestamp.pipeline.steps.base import BaseStep
from codestamp.rendering.header import emit_header

if TYPE_CHECKING:
    from codestamp.config.logging import CodeStampLogger
    from codestamp.pipeline.context import GenerationContext

logger: CodeStampLogger = get_logger(__name__)


class HeaderStep(BaseStep):
    """Create the output file and write build constraint, license, banner and package."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: GenerationContext) -> None:
        """Create ``ctx.path`` and write the header.

        Args:
            ctx (GenerationContext): The context of the current generation call.

        Raises:
            CodeStampIOError: If the directory, the file, or a header write fails, or if
                the header text cannot be encoded as UTF-8.
        """
        try:
            ctx.path.parent.mkdir(parents=True, exist_ok=True)
            with ctx.path.open("w", encoding="utf-8", newline="") as fp:
                if ctx.config.verbose:
                    click.echo(f"generating {str(ctx.path):<70}")
                emit_header(fp, ctx.config)
        except (OSError, UnicodeError) as exc:
            raise CodeStampIOError(
                f"Cannot write header to {ctx.path}: {exc}", stage="header"
            ) from exc
        ctx.advance(GenerationStage.HEADER_WRITTEN)
