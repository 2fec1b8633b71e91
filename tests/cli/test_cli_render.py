# topmark:header:start
#
#   project      : CodeStamp
#   file         : test_cli_render.py
#   file_relpath : tests/cli/test_cli_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the `render` command.

Every invocation passes ``--no-format --no-imports`` (or a config file that
disables them) so no external tool is spawned.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from codestamp.cli.main import cli
from codestamp.exit_codes import ExitCode
from codestamp.rendering.licenses import mit_header

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

BANNER = "// Code generated by default. DO NOT EDIT.\n"

NO_TOOLS: tuple[str, ...] = ("--no-format", "--no-imports")

pytestmark: pytest.MarkDecorator = pytest.mark.cli


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI with color disabled."""
    return CliRunner().invoke(cli, ["--no-color", *argv])


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_render_with_json_data(tmp_path: Path) -> None:
    tmpl = _write(tmp_path / "hello.tmpl", "Hello, {{ Name }}!")
    data = _write(tmp_path / "data.json", json.dumps({"Name": "World"}))
    out = tmp_path / "out" / "hello.go"

    result = run_cli(["render", str(out), str(tmpl), "--data", str(data), *NO_TOOLS])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert out.read_text(encoding="utf-8") == BANNER + "\nHello, World!"
    assert "generating" in result.output
    assert "done" in result.output


def test_render_with_toml_data_and_several_templates(tmp_path: Path) -> None:
    first = _write(tmp_path / "a.tmpl", "{% for n in Names %}")
    second = _write(tmp_path / "b.tmpl", "{{ n }};{% endfor %}")
    data = _write(tmp_path / "data.toml", 'Names = ["x", "y"]\n')
    out = tmp_path / "list.txt"

    result = run_cli(["render", str(out), str(first), str(second), "--data", str(data), *NO_TOOLS])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert out.read_text(encoding="utf-8") == BANNER + "\nx;y;"


def test_render_header_flags(tmp_path: Path) -> None:
    tmpl = _write(tmp_path / "t.tmpl", "var X = 1\n")
    out = tmp_path / "x.go"

    result = run_cli(
        [
            "render",
            str(out),
            str(tmpl),
            "--package",
            "demo",
            "--package-doc",
            "does things.",
            "--mit",
            "ACME",
            "--year",
            "2024",
            "--generated-by",
            "demogen",
            "--build-tag",
            "linux",
            "--quiet",
            *NO_TOOLS,
        ]
    )

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output == ""
    assert out.read_text(encoding="utf-8") == (
        "//go:build linux\n\n"
        + mit_header("ACME", 2024)
        + "\n// Code generated by demogen. DO NOT EDIT.\n\n"
        + "// Package demo does things.\npackage demo\n\n"
        + "var X = 1\n"
    )


def test_cli_flags_override_config_file(tmp_path: Path) -> None:
    config = _write(
        tmp_path / "codestamp.toml",
        '[codestamp]\ngenerated_by = "fromconfig"\npackage = "cfgpkg"\nformat = false\nimports = false\n',
    )
    tmpl = _write(tmp_path / "t.tmpl", "body")
    out = tmp_path / "x.go"

    result = run_cli(
        ["render", str(out), str(tmpl), "--config", str(config), "--generated-by", "fromcli"]
    )

    assert result.exit_code == ExitCode.SUCCESS, result.output
    text = out.read_text(encoding="utf-8")
    assert "// Code generated by fromcli. DO NOT EDIT." in text
    assert "package cfgpkg\n" in text


def test_missing_template_exit_code(tmp_path: Path) -> None:
    result = run_cli(["render", str(tmp_path / "x.go"), str(tmp_path / "absent.tmpl"), *NO_TOOLS])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert "absent.tmpl" in result.output
    assert not (tmp_path / "x.go").exists()


def test_undefined_field_exit_code(tmp_path: Path) -> None:
    tmpl = _write(tmp_path / "t.tmpl", "{{ Missing }}")
    out = tmp_path / "x.go"

    result = run_cli(["render", str(out), str(tmpl), "--quiet", *NO_TOOLS])

    assert result.exit_code == ExitCode.TEMPLATE_ERROR
    assert "[render]" in result.output
    assert out.read_text(encoding="utf-8") == BANNER + "\n"


def test_invalid_package_exit_code(tmp_path: Path) -> None:
    tmpl = _write(tmp_path / "t.tmpl", "x")
    result = run_cli(["render", str(tmp_path / "x.go"), str(tmpl), "--package", "not valid", *NO_TOOLS])

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "[configure]" in result.output


def test_invalid_config_file_exit_code(tmp_path: Path) -> None:
    config = _write(tmp_path / "bad.toml", "[codestamp\n")
    tmpl = _write(tmp_path / "t.tmpl", "x")

    result = run_cli(["render", str(tmp_path / "x.go"), str(tmpl), "--config", str(config)])
    assert result.exit_code == ExitCode.CONFIG_ERROR


def test_bad_data_file(tmp_path: Path) -> None:
    tmpl = _write(tmp_path / "t.tmpl", "x")
    data = _write(tmp_path / "data.yaml", "a: 1\n")

    result = run_cli(["render", str(tmp_path / "x.go"), str(tmpl), "--data", str(data), *NO_TOOLS])
    assert result.exit_code == ExitCode.TEMPLATE_ERROR
    assert "Unsupported data file type" in result.output


def test_conflicting_license_flags_are_usage_errors(tmp_path: Path) -> None:
    tmpl = _write(tmp_path / "t.tmpl", "x")
    result = run_cli(
        ["render", str(tmp_path / "x.go"), str(tmpl), "--mit", "A", "--apache2", "B", *NO_TOOLS]
    )
    assert result.exit_code == 2
    assert "mutually exclusive" in result.output


def test_templates_are_required(tmp_path: Path) -> None:
    result = run_cli(["render", str(tmp_path / "x.go")])
    assert result.exit_code == 2


def test_group_without_command_prints_hint() -> None:
    result = run_cli([])
    assert result.exit_code == ExitCode.SUCCESS
    assert "codestamp render" in result.output


def test_unencodable_data_exit_code(tmp_path: Path) -> None:
    tmpl = _write(tmp_path / "t.tmpl", "{{ s }}")
    data = _write(tmp_path / "data.json", '{"s": "\\udcff"}')

    result = run_cli(["render", str(tmp_path / "x.go"), str(tmpl), "--data", str(data), *NO_TOOLS])

    assert result.exit_code == ExitCode.IO_ERROR
    assert "[render]" in result.output
