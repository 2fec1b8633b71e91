# topmark:header:start
#
#   project      : CodeStamp
#   file         : test_postformat.py
#   file_relpath : tests/formatting/test_postformat.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for syntax-dispatched post-formatting and import resolution."""

from __future__ import annotations

import errno
from typing import TYPE_CHECKING

import pytest
from helpers_codestamp import FakeTool, make_config

from codestamp import options as opts
from codestamp.errors import CodeStampIOError, FormattingError, ImportResolutionError
from codestamp.formatting.imports import resolve_imports
from codestamp.formatting.postformat import post_format
from codestamp.syntax import OutputSyntax

if TYPE_CHECKING:
    from pathlib import Path


def test_general_runs_formatter(tmp_path: Path, fake_formatter: FakeTool) -> None:
    path = tmp_path / "x.go"
    path.write_text("package x\n", encoding="utf-8")

    assert post_format(path, OutputSyntax.GENERAL, make_config(opts.formatter(fake_formatter)))
    assert fake_formatter.calls == [path]


def test_general_formatter_failure(tmp_path: Path) -> None:
    path = tmp_path / "x.go"
    path.write_text("package x\n", encoding="utf-8")
    tool = FakeTool(name="gofmt", status=2)

    with pytest.raises(FormattingError, match="gofmt failed") as excinfo:
        post_format(path, OutputSyntax.GENERAL, make_config(opts.formatter(tool)))
    assert excinfo.value.stage == "format"
    assert excinfo.value.exit_code == 69


def test_general_formatter_cannot_launch(tmp_path: Path) -> None:
    path = tmp_path / "x.go"
    path.write_text("package x\n", encoding="utf-8")
    tool = FakeTool(name="gofmt", raises=FileNotFoundError(errno.ENOENT, "not found"))

    with pytest.raises(FormattingError) as excinfo:
        post_format(path, OutputSyntax.GENERAL, make_config(opts.formatter(tool)))
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_assembly_uses_builtin_normalizer(tmp_path: Path, fake_formatter: FakeTool) -> None:
    path = tmp_path / "x.s"
    path.write_text("#include \"textflag.h\"\n\n\nTEXT ·f(SB), $0\nRET\n", encoding="utf-8")
    cfg = make_config(opts.formatter(fake_formatter))

    assert post_format(path, OutputSyntax.ASSEMBLY, cfg)
    assert path.read_text(encoding="utf-8") == '#include "textflag.h"\n\nTEXT ·f(SB), $0\n    RET\n'
    assert fake_formatter.calls == []


def test_assembly_missing_file_is_io_error(tmp_path: Path) -> None:
    with pytest.raises(CodeStampIOError) as excinfo:
        post_format(tmp_path / "absent.s", OutputSyntax.ASSEMBLY, make_config())
    assert excinfo.value.stage == "format"
    assert excinfo.value.exit_code == 74


def test_unformatted_is_left_alone(tmp_path: Path, fake_formatter: FakeTool) -> None:
    path = tmp_path / "notes.txt"
    path.write_text("  keep\n\n\n", encoding="utf-8")

    assert not post_format(path, OutputSyntax.UNFORMATTED, make_config(opts.formatter(fake_formatter)))
    assert path.read_text(encoding="utf-8") == "  keep\n\n\n"
    assert fake_formatter.calls == []


def test_resolve_imports(tmp_path: Path, fake_resolver: FakeTool) -> None:
    path = tmp_path / "x.go"
    path.write_text("package x\n", encoding="utf-8")

    resolve_imports(path, make_config(opts.import_resolver(fake_resolver)))
    assert fake_resolver.calls == [path]


@pytest.mark.parametrize(
    "tool",
    [
        FakeTool(name="goimports", status=1),
        FakeTool(name="goimports", raises=PermissionError(errno.EACCES, "denied")),
    ],
)
def test_resolve_imports_failure(tmp_path: Path, tool: FakeTool) -> None:
    path = tmp_path / "x.go"
    path.write_text("package x\n", encoding="utf-8")

    with pytest.raises(ImportResolutionError) as excinfo:
        resolve_imports(path, make_config(opts.import_resolver(tool)))
    assert excinfo.value.stage == "imports"
