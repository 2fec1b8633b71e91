# topmark:header:start
#
#   project      : CodeStamp
#   file         : licenses.py
#   file_relpath : src/codestamp/rendering/licenses.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""License header texts for generated files.

Each helper returns the license as ``//`` line comments without a trailing newline;
the header emitter adds the line break.
"""

from __future__ import annotations

from typing import Final

_APACHE2: Final[str] = """\
// Copyright {year} {holder}
//
// Licensed under the Apache License, Version 2.0 (the "License");
// you may not use this file except in compliance with the License.
// You may obtain a copy of the License at
//
//     http://www.apache.org/licenses/LICENSE-2.0
//
// Unless required by applicable law or agreed to in writing, software
// distributed under the License is distributed on an "AS IS" BASIS,
// WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
// See the License for the specific language governing permissions and
// limitations under the License."""

_MIT: Final[str] = """\
// Copyright (c) {year} {holder}
//
// Use of this source code is governed by the MIT license
// that can be found at https://opensource.org/licenses/MIT."""


def apache2_header(copyright_holder: str, year: int) -> str:
    """Return the Apache License 2.0 header for ``copyright_holder``."""
    return _APACHE2.format(year=year, holder=copyright_holder)


def mit_header(copyright_holder: str, year: int) -> str:
    """Return a short MIT license header for ``copyright_holder``."""
    return _MIT.format(year=year, holder=copyright_holder)
