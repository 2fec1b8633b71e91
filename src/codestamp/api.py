# topmark:header:start
#
#   project      : CodeStamp
#   file         : api.py
#   file_relpath : src/codestamp/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public entry point: render templates and data into one generated file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from codestamp.config.logging import get_logger
from codestamp.config.model import MutableConfig
from codestamp.pipeline.context import GenerationContext
from codestamp.pipeline.pipelines import GENERATE_PIPELINE
from codestamp.pipeline.runner import run
from codestamp.rendering.templates import aggregate

if TYPE_CHECKING:
    from collections.abc import Sequence

    from codestamp.config.logging import CodeStampLogger
    from codestamp.config.model import Config, Option

logger: CodeStampLogger = get_logger(__name__)


def generate(
    output: str | Path,
    templates: Sequence[str],
    data: Any,
    *options: Option,
) -> GenerationContext:
    """Render ``templates`` against ``data`` into the file ``output``.

    The template fragments are concatenated in order and executed after a header
    (build constraint, license, ``DO NOT EDIT`` banner, package clause). The file is
    then post-formatted according to its extension and passed to the import
    resolver, each stage only when enabled by ``options``.

    Args:
        output (str | Path): Output file; parent directories are created as needed.
        templates (Sequence[str]): Template source fragments (Jinja2 syntax).
        data (Any): Value the template is executed against.
        *options (Option): Options from [`codestamp.options`][codestamp.options],
            applied left to right.

    Returns:
        GenerationContext: The final context (stage ``DONE``).

    Raises:
        CodeStampError: The first failure, with the failed stage in ``stage``.
            Nothing is written when an option fails; otherwise the file reflects the
            last completed stage.
    """
    config: Config = MutableConfig.from_options(options).freeze()
    ctx: GenerationContext = GenerationContext.create(
        path=Path(output),
        config=config,
        source=aggregate(templates),
        data=data,
    )
    ctx = run(ctx, GENERATE_PIPELINE)
    if ctx.error is not None:
        raise ctx.error
    return ctx
