# topmark:header:start
#
#   project      : CodeStamp
#   file         : __init__.py
#   file_relpath : src/codestamp/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generation pipeline: context, stages, steps and runner.

```mermaid
flowchart LR
  H[header] --> R[render] --> F[format] --> I[imports]
```

Each step reads and rewrites the file at the output path; any failure halts the
pipeline and leaves the file as the last completed step wrote it.
"""
