# topmark:header:start
#
#   project      : CodeStamp
#   file         : context.py
#   file_relpath : src/codestamp/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-call processing context for the generation pipeline.

The context carries the inputs of one `generate()` call (output path, frozen
config, aggregated template source, data) and its progress: the current
[`GenerationStage`][codestamp.pipeline.status.GenerationStage], the steps that ran,
and, once a step fails, the failing step and its error. Stages never share a
document in memory: each one reads and rewrites the file at ``path``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from codestamp.config.logging import get_logger
from codestamp.pipeline.status import GenerationStage
from codestamp.syntax import OutputSyntax, resolve_output_syntax

if TYPE_CHECKING:
    from pathlib import Path

    from codestamp.config.logging import CodeStampLogger
    from codestamp.config.model import Config
    from codestamp.errors import CodeStampError
    from codestamp.pipeline.steps.base import BaseStep

logger: CodeStampLogger = get_logger(__name__)


@dataclass
class GenerationContext:
    """Mutable state of one generation call.

    Attributes:
        path (Path): Output file path.
        config (Config): Frozen generation options.
        source (str): Aggregated template source.
        data (Any): Value the template is executed against.
        syntax (OutputSyntax): Syntax family resolved once from ``path``.
        stage (GenerationStage): Last stage reached.
        steps (list[str]): Names of the steps that ran, in order.
        failed_step (str | None): Name of the step that failed, if any.
        error (CodeStampError | None): The error that stopped the pipeline, if any.
    """

    path: Path
    config: Config
    source: str
    data: Any
    syntax: OutputSyntax = OutputSyntax.UNFORMATTED
    stage: GenerationStage = GenerationStage.CONFIGURING
    steps: list[str] = field(default_factory=lambda: [])
    failed_step: str | None = None
    error: CodeStampError | None = None

    @classmethod
    def create(cls, path: Path, config: Config, source: str, data: Any) -> GenerationContext:
        """Create a context and resolve the output syntax from ``path``."""
        return cls(
            path=path,
            config=config,
            source=source,
            data=data,
            syntax=resolve_output_syntax(path),
        )

    @property
    def halted(self) -> bool:
        """True once a step failed."""
        return self.stage is GenerationStage.FAILED

    def advance(self, stage: GenerationStage) -> None:
        """Record that ``stage`` completed."""
        logger.debug("%s: %s -> %s", self.path, self.stage.value, stage.value)
        self.stage = stage

    def fail(self, error: CodeStampError, *, at_step: BaseStep) -> None:
        """Stop the pipeline with ``error`` raised by ``at_step``."""
        logger.info("%s: %s failed: %s", self.path, at_step.name, error.message)
        self.failed_step = at_step.name
        self.error = error
        self.stage = GenerationStage.FAILED

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly summary, for logging and diagnostics."""
        return {
            "path": str(self.path),
            "syntax": self.syntax.value,
            "stage": self.stage.value,
            "steps": list(self.steps),
            "failed_step": self.failed_step,
            "error": None if self.error is None else self.error.format_message(),
        }
