# topmark:header:start
#
#   project      : CodeStamp
#   file         : constants.py
#   file_relpath : src/codestamp/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CodeStamp Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

CODESTAMP_VERSION: str = get_version("codestamp")

DEFAULT_GENERATED_BY: Final[str] = "default"

# Go assembler routines start with a TEXT directive (e.g. "TEXT ·add(SB), NOSPLIT, $0-24").
DEFAULT_LABEL_PREFIX: Final[str] = "TEXT "
DEFAULT_INDENT: Final[str] = "    "

BANNER_TEMPLATE: Final[str] = "// Code generated by {label}. DO NOT EDIT."
BUILD_CONSTRAINT_PREFIX: Final[str] = "//go:build "

CONFIG_TABLE: Final[str] = "codestamp"
PYPROJECT_CONFIG_TABLE: Final[str] = "tool.codestamp"

LOG_LEVEL_ENV: Final[str] = "CODESTAMP_LOG_LEVEL"

