# topmark:header:start
#
#   project      : CodeStamp
#   file         : __main__.py
#   file_relpath : src/codestamp/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry point for `python -m codestamp`."""

from __future__ import annotations

from codestamp.cli.main import cli

if __name__ == "__main__":
    cli()
