# topmark:header:start
#
#   project      : CodeStamp
#   file         : colored_enum.py
#   file_relpath : src/codestamp/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String enum members that carry a colorizer for console display.

`ColoredStrEnum` keeps ``_value_`` as the plain text and stores the colorizer
separately, so Enum semantics (hashing, equality, ``repr``) stay intact:

```python
from yachalk import chalk

class Stage(ColoredStrEnum):
    DONE = ("done", chalk.green)

Stage.DONE.value            # 'done'
Stage.DONE.styled()         # green "done"
```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display (e.g. a `yachalk.ChalkBuilder`)."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and join ``args`` into one display string."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose value is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value for the enum member (stored in `_value_`).
            color (Colorizer): A callable used to colorize text for display.

        Returns:
            ColoredStrEnum: The newly constructed enum member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    def styled(self, enabled: bool = True) -> str:
        """Return the value, colorized when ``enabled``."""
        return self._color(self._value_) if enabled else self._value_
