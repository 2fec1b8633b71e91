# topmark:header:start
#
#   project      : CodeStamp
#   file         : imports.py
#   file_relpath : src/codestamp/pipeline/steps/imports.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Imports step: run the external import resolver (when enabled)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codestamp.formatting.imports import resolve_imports
from codestamp.pipeline.status import GenerationStage
from codestamp.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from codestamp.pipeline.context import GenerationContext


class ImportsStep(BaseStep):
    """Fix the import block of the generated file with the configured resolver."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: GenerationContext) -> bool:
        return ctx.config.resolve_imports

    def run(self, ctx: GenerationContext) -> None:
        resolve_imports(ctx.path, ctx.config)
        ctx.advance(GenerationStage.IMPORTS_RESOLVED)
