# topmark:header:start
#
#   project      : CodeStamp
#   file         : test_cli_io.py
#   file_relpath : tests/cli/test_cli_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for template and data file loading used by the CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from codestamp.cli.io import DataFormatError, load_data, read_templates
from codestamp.errors import CodeStampInputNotFoundError

if TYPE_CHECKING:
    from pathlib import Path


def test_read_templates_in_order(tmp_path: Path) -> None:
    a = tmp_path / "a.tmpl"
    b = tmp_path / "b.tmpl"
    a.write_text("A", encoding="utf-8")
    b.write_text("B", encoding="utf-8")
    assert read_templates([b, a]) == ["B", "A"]


def test_read_templates_missing(tmp_path: Path) -> None:
    with pytest.raises(CodeStampInputNotFoundError) as excinfo:
        read_templates([tmp_path / "absent.tmpl"])
    assert excinfo.value.exit_code == 66
    assert excinfo.value.stage == "load"


def test_load_data_default_is_empty_mapping() -> None:
    assert load_data(None) == {}


def test_load_json_and_toml(tmp_path: Path) -> None:
    js = tmp_path / "d.json"
    js.write_text('{"Names": ["x"], "N": 2}', encoding="utf-8")
    tm = tmp_path / "d.toml"
    tm.write_text('Names = ["x"]\nN = 2\n', encoding="utf-8")

    assert load_data(js) == {"Names": ["x"], "N": 2}
    assert load_data(tm) == {"Names": ["x"], "N": 2}


def test_load_json_list(tmp_path: Path) -> None:
    js = tmp_path / "d.json"
    js.write_text("[1, 2]", encoding="utf-8")
    assert load_data(js) == [1, 2]


@pytest.mark.parametrize(("name", "text"), [("d.json", "{nope"), ("d.toml", "= 1"), ("d.ini", "a=1")])
def test_load_data_errors(tmp_path: Path, name: str, text: str) -> None:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    with pytest.raises(DataFormatError):
        load_data(path)
