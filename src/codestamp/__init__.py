# topmark:header:start
#
#   project      : CodeStamp
#   file         : __init__.py
#   file_relpath : src/codestamp/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CodeStamp package.

CodeStamp renders one or more template fragments and a data payload into a single
generated source file, stamps it with standard metadata (build constraint, license,
``DO NOT EDIT`` banner, package clause) and post-processes it with the canonical
formatter and import resolver for its syntax.

```python
from codestamp import generate, options

generate("out/demo.go", ["Hello, {{ Name }}!\\n"], {"Name": "World"}, options.format(False))
```
"""

from __future__ import annotations

from codestamp import options
from codestamp.api import generate
from codestamp.errors import (
    CodeStampConfigError,
    CodeStampError,
    CodeStampIOError,
    FormattingError,
    ImportResolutionError,
    TemplateExecutionError,
    TemplateSyntaxError,
)
from codestamp.syntax import OutputSyntax

__all__ = [
    "CodeStampConfigError",
    "CodeStampError",
    "CodeStampIOError",
    "FormattingError",
    "ImportResolutionError",
    "OutputSyntax",
    "TemplateExecutionError",
    "TemplateSyntaxError",
    "generate",
    "options",
]
