# topmark:header:start
#
#   project      : CodeStamp
#   file         : test_header.py
#   file_relpath : tests/rendering/test_header.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for header emission (`codestamp.rendering.header`)."""

from __future__ import annotations

import io

from helpers_codestamp import make_config

from codestamp import options as opts
from codestamp.config import Option
from codestamp.rendering.header import banner_line, emit_header, header_chunks
from codestamp.rendering.licenses import mit_header


def _emit(*options: Option) -> str:
    buf = io.StringIO()
    emit_header(buf, make_config(*options))
    return buf.getvalue()


def test_banner_line() -> None:
    assert banner_line("fieldgen") == "// Code generated by fieldgen. DO NOT EDIT."


def test_minimal_header_is_banner_only() -> None:
    """Every empty element is omitted; the banner never is."""
    assert _emit() == "// Code generated by default. DO NOT EDIT.\n\n"


def test_full_header_order() -> None:
    text = _emit(
        opts.build_tag("amd64"),
        opts.mit("ACME", 2025),
        opts.generated_by("fieldgen"),
        opts.package("field", "provides field arithmetic."),
    )
    expected = (
        "//go:build amd64\n\n"
        + mit_header("ACME", 2025)
        + "\n"
        + "// Code generated by fieldgen. DO NOT EDIT.\n\n"
        + "// Package field provides field arithmetic.\n"
        + "package field\n\n"
    )
    assert text == expected


def test_package_without_doc() -> None:
    text = _emit(opts.package("demo"))
    assert text.endswith("DO NOT EDIT.\n\npackage demo\n\n")
    assert "// Package" not in text


def test_banner_present_for_every_combination() -> None:
    """Each optional element toggled on or off still yields exactly one banner."""
    toggles = [opts.build_tag("linux"), opts.license_text("// L"), opts.package("p", "d.")]
    for mask in range(2 ** len(toggles)):
        chosen = [t for i, t in enumerate(toggles) if mask & (1 << i)]
        chunks = header_chunks(make_config(*chosen))
        text = "".join(chunks)
        assert text.count("// Code generated by default. DO NOT EDIT.\n") == 1
        assert ("//go:build" in text) == bool(mask & 1)
        assert ("// L\n" in text) == bool(mask & 2)
        assert ("package p\n" in text) == bool(mask & 4)


def test_emit_header_returns_character_count() -> None:
    buf = io.StringIO()
    written = emit_header(buf, make_config(opts.package("demo")))
    assert written == len(buf.getvalue())
