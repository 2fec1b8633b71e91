# topmark:header:start
#
#   project      : CodeStamp
#   file         : format.py
#   file_relpath : src/codestamp/pipeline/steps/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format step: canonicalize the rendered file according to its output syntax."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestamp.formatting.postformat import post_format
from codestamp.pipeline.status import GenerationStage
from codestamp.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from codestamp.pipeline.context import GenerationContext


class FormatStep(BaseStep):
    """Run the external formatter or the assembly normalizer (when enabled)."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: GenerationContext) -> bool:
        return ctx.config.format_output

    def run(self, ctx: GenerationContext) -> None:
        # Unformatted syntaxes keep the RENDERED stage.
        if post_format(ctx.path, ctx.syntax, ctx.config):
            ctx.advance(GenerationStage.FORMATTED)
