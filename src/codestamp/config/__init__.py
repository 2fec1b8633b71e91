# topmark:header:start
#
#   project      : CodeStamp
#   file         : __init__.py
#   file_relpath : src/codestamp/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for CodeStamp: logging, the config model and TOML loading.

Build configs with `MutableConfig` (usually through options), then `freeze()` into
an immutable `Config`. Do not mutate a frozen `Config`: call `Config.thaw()`, edit,
and freeze again.
"""

from __future__ import annotations

from codestamp.config.logging import get_logger, setup_logging
from codestamp.config.model import Config, MutableConfig, Option

__all__ = [
    "Config",
    "MutableConfig",
    "Option",
    "get_logger",
    "setup_logging",
]
