# topmark:header:start
#
#   project      : CodeStamp
#   file         : test_assembly_property.py
#   file_relpath : tests/formatting/test_assembly_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the assembly normalizer.

Generated assembly-like documents (padding, blank-line runs, CRLF) must satisfy:
1) normalizing is idempotent,
2) the output never contains two consecutive blank lines, and
3) every line from the label line on carries exactly one indent unit more than
   in the preamble (the label itself excepted).
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from strategies_codestamp import LABEL_PREFIX, s_assembly_source

from codestamp.formatting.assembly import normalize_assembly_text

INDENT = "    "

# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@settings(deadline=None, max_examples=200)
@given(source=s_assembly_source())
def test_normalizer_is_idempotent(source: str) -> None:
    once = normalize_assembly_text(source)
    assert normalize_assembly_text(once) == once


@settings(deadline=None, max_examples=200)
@given(source=s_assembly_source())
def test_no_consecutive_blank_lines(source: str) -> None:
    lines = normalize_assembly_text(source).splitlines()
    for prev, cur in zip(lines, lines[1:]):
        assert prev.strip() or cur.strip(), lines


@settings(deadline=None, max_examples=200)
@given(source=s_assembly_source())
def test_body_lines_carry_one_indent_unit(source: str) -> None:
    lines = normalize_assembly_text(source).splitlines()
    label_at = next((i for i, ln in enumerate(lines) if ln.startswith(LABEL_PREFIX)), len(lines))

    for line in lines[: label_at + 1]:
        assert line == line.strip()
    for line in lines[label_at + 1 :]:
        assert line.startswith(INDENT)
        assert line[len(INDENT) :] == line[len(INDENT) :].strip()
