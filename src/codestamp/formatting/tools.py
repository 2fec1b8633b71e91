# topmark:header:start
#
#   project      : CodeStamp
#   file         : tools.py
#   file_relpath : src/codestamp/formatting/tools.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""External command-line tools invoked on a generated file.

The pipeline only depends on the [`ExternalTool`][codestamp.formatting.tools.ExternalTool]
protocol, so tests can inject a fake instead of spawning processes. The default
implementation, [`CommandTool`][codestamp.formatting.tools.CommandTool], runs a command with
the file path appended as its last argument. The tool's stdout/stderr are forwarded to the
console (not captured), and there is no timeout.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from codestamp.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from codestamp.config.logging import CodeStampLogger

logger: CodeStampLogger = get_logger(__name__)


@runtime_checkable
class ExternalTool(Protocol):
    """Capability that rewrites a file in place."""

    name: str

    def run(self, path: Path) -> int:
        """Process ``path`` in place.

        Args:
            path (Path): The file to process.

        Returns:
            int: The exit status (``0`` on success).

        Raises:
            OSError: If the tool cannot be launched.
        """
        ...


@dataclass(frozen=True)
class CommandTool:
    """Run ``argv + [path]`` as a blocking subprocess.

    Attributes:
        name (str): Human-readable tool name, used in messages.
        argv (tuple[str, ...]): Command and leading arguments.
    """

    name: str
    argv: tuple[str, ...]

    def run(self, path: Path) -> int:
        """Run the command on ``path`` and return its exit status.

        Args:
            path (Path): The file to process.

        Returns:
            int: The subprocess return code.
        """
        cmd: list[str] = [*self.argv, str(path)]
        logger.debug("Running %s: %s", self.name, cmd)
        completed = subprocess.run(cmd, check=False)  # noqa: S603
        logger.debug("%s exited with status %d", self.name, completed.returncode)
        return completed.returncode


GOFMT: CommandTool = CommandTool(name="gofmt", argv=("gofmt", "-s", "-w"))
GOIMPORTS: CommandTool = CommandTool(name="goimports", argv=("goimports", "-w"))
