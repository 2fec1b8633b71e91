# topmark:header:start
#
#   project      : CodeStamp
#   file         : options.py
#   file_relpath : src/codestamp/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options for the CodeStamp CLI.

Program output (the ``generating ...`` line and the summary) is controlled per
command; the group-level ``-v`` flag only raises the diagnostic log level.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from codestamp.config.logging import TRACE_LEVEL, resolve_env_log_level

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


def resolve_log_level(verbose_count: int) -> int | None:
    """Resolve the logging level from the number of ``-v`` flags.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.

    Returns:
        int | None: ``INFO``, ``DEBUG`` or ``TRACE`` for one, two or three flags;
        otherwise the level from ``CODESTAMP_LOG_LEVEL`` (None if unset).
    """
    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    return resolve_env_log_level()


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add a counting ``-v/--verbose`` option to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity on stderr. Specify up to three times for more detail.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add a ``--no-color`` flag to a command."""
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in program output.",
    )(f)
    return f
