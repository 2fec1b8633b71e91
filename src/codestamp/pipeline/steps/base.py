# topmark:header:start
#
#   project      : CodeStamp
#   file         : base.py
#   file_relpath : src/codestamp/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The runner invokes steps as *callables*. `BaseStep` implements the common lifecycle:

    ctx = step(ctx)  # internally: halted? → may_proceed? → run

A step signals failure by raising a
[`CodeStampError`][codestamp.errors.CodeStampError] from ``run()``; the lifecycle turns it
into a halted context so that no later step runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from codestamp.config.logging import get_logger
from codestamp.errors import CodeStampError

if TYPE_CHECKING:
    from codestamp.config.logging import CodeStampLogger
    from codestamp.pipeline.context import GenerationContext

logger: CodeStampLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclass this to implement a concrete step by overriding ``may_proceed()`` and
    ``run()``. Do not override ``__call__``.

    Attributes:
        name (str): Stable step identifier for logs and failure reports.
    """

    name: str

    def __call__(self, ctx: GenerationContext) -> GenerationContext:
        """Invoke the step lifecycle: gate → run (if allowed).

        Args:
            ctx (GenerationContext): The context of the current generation call.

        Returns:
            GenerationContext: The same context instance, possibly halted.
        """
        if ctx.halted:
            logger.debug("Step %s skipped: pipeline halted by %s", self.name, ctx.failed_step)
            return ctx

        if not self.may_proceed(ctx):
            logger.debug("Step %s disabled for %s", self.name, ctx.path)
            return ctx

        ctx.steps.append(self.name)
        logger.debug("Step %s running on %s", self.name, ctx.path)
        try:
            self.run(ctx)
        except CodeStampError as exc:
            ctx.fail(exc, at_step=self)
        return ctx

    def may_proceed(self, ctx: GenerationContext) -> bool:
        """Return whether the step is enabled for ``ctx`` (default: always).

        Args:
            ctx (GenerationContext): The context of the current generation call.

        Returns:
            bool: True to run ``run()``, False to skip.
        """
        return True

    def run(self, ctx: GenerationContext) -> None:
        """Perform the step's work; raise `CodeStampError` on failure.

        Args:
            ctx (GenerationContext): The context of the current generation call.
        """
        raise NotImplementedError
