# topmark:header:start
#
#   project      : CodeStamp
#   file         : render.py
#   file_relpath : src/codestamp/pipeline/steps/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render step: execute the aggregated template and append the body to the file."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestamp.config.logging import get_logger
from codestamp.errors import CodeStampIOError
from codestamp.pipeline.status import GenerationStage
from codestamp.pipeline.steps.base import BaseStep
from codestamp.rendering.templates import TemplateRenderer

if TYPE_CHECKING:
    from codestamp.config.logging import CodeStampLogger
    from codestamp.pipeline.context import GenerationContext

logger: CodeStampLogger = get_logger(__name__)


class RenderStep(BaseStep):
    """Parse the template source with the merged function set and render the data.

    The body is appended after the header only once execution succeeded, so a
    syntax or execution error leaves the header alone on disk.
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: GenerationContext) -> None:
        """Render ``ctx.source`` against ``ctx.data`` into ``ctx.path``.

        Args:
            ctx (GenerationContext): The context of the current generation call.

        Raises:
            CodeStampIOError: If appending the body fails or the body cannot be encoded
                as UTF-8.
        """
        renderer = TemplateRenderer(ctx.source, ctx.config.funcs)
        body: str = renderer.render(ctx.data)
        try:
            with ctx.path.open("a", encoding="utf-8", newline="") as fp:
                fp.write(body)
        except (OSError, UnicodeError) as exc:
            raise CodeStampIOError(
                f"Cannot write body to {ctx.path}: {exc}", stage="render"
            ) from exc
        logger.debug("Rendered %d characters into %s", len(body), ctx.path)
        ctx.advance(GenerationStage.RENDERED)
