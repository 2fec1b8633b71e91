# topmark:header:start
#
#   project      : CodeStamp
#   file         : runner.py
#   file_relpath : src/codestamp/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the generation pipeline for a single output file."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestamp.config.logging import get_logger
from codestamp.pipeline.status import GenerationStage

if TYPE_CHECKING:
    from collections.abc import Sequence

    from codestamp.config.logging import CodeStampLogger
    from codestamp.pipeline.context import GenerationContext
    from codestamp.pipeline.steps.base import BaseStep

logger: CodeStampLogger = get_logger(__name__)


def run(ctx: GenerationContext, steps: Sequence[BaseStep]) -> GenerationContext:
    """Execute ``steps`` sequentially; the first failing step halts the run.

    Args:
        ctx (GenerationContext): Context of the generation call.
        steps (Sequence[BaseStep]): Ordered pipeline steps.

    Returns:
        GenerationContext: The final context, either ``DONE`` or ``FAILED``.
    """
    logger.info("Generating %s (syntax: %s)", ctx.path, ctx.syntax.value)
    for step in steps:
        ctx = step(ctx)
        if ctx.halted:
            break
    else:
        ctx.advance(GenerationStage.DONE)

    logger.debug("Generation result: %s", ctx.to_dict())
    return ctx
