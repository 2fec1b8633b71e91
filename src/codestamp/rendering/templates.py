# topmark:header:start
#
#   project      : CodeStamp
#   file         : templates.py
#   file_relpath : src/codestamp/rendering/templates.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Template aggregation and execution (Jinja2).

Fragments are concatenated verbatim into one template source, which is parsed once
with the merged function set and executed against the caller's data.

Environment:
    - ``StrictUndefined``: referencing a missing name or attribute is an error,
      not an empty string.
    - ``keep_trailing_newline=True`` and no block trimming: the template text is
      reproduced exactly; whitespace is the template author's business.
    - No autoescaping: the output is source code, not HTML.

Function set:
    The built-ins from [`codestamp.rendering.functions`][codestamp.rendering.functions] are
    merged with the caller's functions (caller wins). Every function is available as a
    global. Functions are also registered as filters, except built-ins whose name
    would shadow one of Jinja2's own filters (``last``, ``reverse``).

Data:
    A mapping's string keys become top-level template names; the whole value is also
    available as ``data`` (the only way to reach non-mapping values).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from jinja2 import BaseLoader, Environment, StrictUndefined
from jinja2 import TemplateError as JinjaTemplateError
from jinja2 import TemplateSyntaxError as JinjaTemplateSyntaxError
from jinja2.defaults import DEFAULT_FILTERS

from codestamp.config.logging import get_logger
from codestamp.errors import TemplateExecutionError, TemplateSyntaxError
from codestamp.rendering.functions import builtin_functions

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from jinja2 import Template

    from codestamp.config.logging import CodeStampLogger

logger: CodeStampLogger = get_logger(__name__)

TEMPLATE_NAME: str = "<aggregate>"


def aggregate(fragments: Iterable[str]) -> str:
    """Concatenate template fragments in order, without separators.

    Args:
        fragments (Iterable[str]): Template source fragments; each may be a partial unit.

    Returns:
        str: The aggregated template source.
    """
    return "".join(fragments)


def merge_functions(extra: Mapping[str, Callable[..., Any]]) -> dict[str, Callable[..., Any]]:
    """Return the built-in functions updated with ``extra`` (``extra`` wins)."""
    merged = builtin_functions()
    merged.update(extra)
    return merged


def create_environment(extra: Mapping[str, Callable[..., Any]] | None = None) -> Environment:
    """Create the Jinja2 environment used to render generated files.

    Args:
        extra (Mapping[str, Callable[..., Any]] | None): Caller-supplied functions.

    Returns:
        Environment: A fresh environment with the merged function set installed.
    """
    extra = extra or {}
    env = Environment(
        loader=BaseLoader(),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )
    merged = merge_functions(extra)
    env.globals.update(merged)
    env.filters.update(
        {name: fn for name, fn in merged.items() if name in extra or name not in DEFAULT_FILTERS}
    )
    return env


def build_context(data: Any) -> dict[str, Any]:
    """Return the render context for ``data``."""
    context: dict[str, Any] = {}
    if isinstance(data, Mapping):
        context.update({k: v for k, v in data.items() if isinstance(k, str)})
    context["data"] = data
    return context


class TemplateRenderer:
    """Parse an aggregated template source once and execute it against data.

    Args:
        source (str): Aggregated template source.
        funcs (Mapping[str, Callable[..., Any]] | None): Caller-supplied template functions.

    Raises:
        TemplateSyntaxError: If ``source`` does not parse.
    """

    def __init__(
        self,
        source: str,
        funcs: Mapping[str, Callable[..., Any]] | None = None,
    ) -> None:
        self.source: str = source
        self.env: Environment = create_environment(funcs)
        try:
            self.template: Template = self.env.from_string(source)
        except JinjaTemplateSyntaxError as exc:
            raise TemplateSyntaxError(
                f"Cannot parse template {TEMPLATE_NAME} (line {exc.lineno}): {exc.message}"
            ) from exc
        logger.debug("Parsed template source (%d characters)", len(source))

    def render(self, data: Any) -> str:
        """Execute the template against ``data`` and return the rendered text.

        The whole body is produced before it is returned, so a failing execution never
        yields partial output.

        Args:
            data (Any): Any value the template can traverse.

        Returns:
            str: The rendered text.

        Raises:
            TemplateExecutionError: If execution fails (undefined name, function error, ...).
        """
        try:
            return "".join(self.template.generate(build_context(data)))
        except JinjaTemplateError as exc:
            raise TemplateExecutionError(f"Cannot execute template {TEMPLATE_NAME}: {exc}") from exc
        except Exception as exc:
            # Errors raised by template functions surface unchanged from Jinja2.
            raise TemplateExecutionError(
                f"Cannot execute template {TEMPLATE_NAME}: {type(exc).__name__}: {exc}"
            ) from exc
