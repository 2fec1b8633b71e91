# topmark:header:start
#
#   project      : CodeStamp
#   file         : errors.py
#   file_relpath : src/codestamp/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the CodeStamp generation pipeline.

Every error carries the pipeline stage that failed (``stage``) and a sysexits-style
``exit_code``. The base class derives from `click.ClickException` so the CLI can
display the error and exit with its code, while library callers simply catch
`CodeStampError`.

The original exception (OS error, Jinja2 error, ...) is always chained as
``__cause__``.
"""

from __future__ import annotations

from typing import IO, Any, ClassVar

import click

from codestamp.exit_codes import ExitCode


class CodeStampError(click.ClickException):
    """Base class for all CodeStamp errors."""

    exit_code = ExitCode.FAILURE
    default_stage: ClassVar[str] = "generate"

    def __init__(self, message: str, *, stage: str | None = None) -> None:
        super().__init__(message)
        self.stage: str = stage or self.default_stage

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the message prefixed with the failed stage."""
        return f"[{self.stage}] {self.message}"

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class CodeStampConfigError(CodeStampError):
    """Invalid option value or option combination."""

    exit_code = ExitCode.CONFIG_ERROR
    default_stage = "configure"


class CodeStampIOError(CodeStampError):
    """Creating, reading or writing the output path failed."""

    exit_code = ExitCode.IO_ERROR


class CodeStampInputNotFoundError(CodeStampError):
    """A template or data file given on the command line does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND
    default_stage = "load"


class TemplateSyntaxError(CodeStampError):
    """The aggregated template source failed to parse."""

    exit_code = ExitCode.TEMPLATE_ERROR
    default_stage = "render"


class TemplateExecutionError(CodeStampError):
    """Executing the template against the supplied data failed."""

    exit_code = ExitCode.TEMPLATE_ERROR
    default_stage = "render"


class FormattingError(CodeStampError):
    """The external formatter exited non-zero or could not be launched."""

    exit_code = ExitCode.TOOL_ERROR
    default_stage = "format"


class ImportResolutionError(CodeStampError):
    """The external import resolver exited non-zero or could not be launched."""

    exit_code = ExitCode.TOOL_ERROR
    default_stage = "imports"
