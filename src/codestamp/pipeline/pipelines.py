# topmark:header:start
#
#   project      : CodeStamp
#   file         : pipelines.py
#   file_relpath : src/codestamp/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named pipeline variants (immutable, typed step sequences).

- ``RENDER_PIPELINE``: header → render (the raw file only)
- ``GENERATE_PIPELINE``: RENDER + format → imports

Format and imports steps gate themselves on the config toggles, so
``GENERATE_PIPELINE`` is the pipeline behind every `generate()` call.
"""

from __future__ import annotations

from typing import Final

from codestamp.pipeline.steps.base import BaseStep
from codestamp.pipeline.steps.format import FormatStep
from codestamp.pipeline.steps.header import HeaderStep
from codestamp.pipeline.steps.imports import ImportsStep
from codestamp.pipeline.steps.render import RenderStep

RENDER_PIPELINE: Final[tuple[BaseStep, ...]] = (
    HeaderStep(),  # Create the file, write build tag/license/banner/package
    RenderStep(),  # Execute the template and append the body
)

GENERATE_PIPELINE: Final[tuple[BaseStep, ...]] = RENDER_PIPELINE + (
    FormatStep(),  # External formatter or assembly normalizer
    ImportsStep(),  # External import resolver
)
