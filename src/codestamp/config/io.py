# topmark:header:start
#
#   project      : CodeStamp
#   file         : io.py
#   file_relpath : src/codestamp/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load generation options from TOML.

A config file holds a ``[codestamp]`` table (or ``[tool.codestamp]`` in a
``pyproject.toml``)::

    [codestamp]
    package = "field"
    package_doc = "provides field arithmetic."
    generated_by = "fieldgen"
    build_tag = "amd64"
    format = true
    imports = false
    verbose = true
    label_prefix = "TEXT "
    indent = "\\t"
    formatter = ["gofmt", "-s", "-w"]
    import_resolver = ["goimports", "-w"]

    [codestamp.license]
    kind = "apache2"          # or "mit"
    holder = "ACME Inc."
    year = 2025
    # text = "// custom license"   (instead of kind/holder/year)

Parsing is done with `tomlkit`; the table is translated into the same option
callables a library caller would pass, in a fixed key order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from codestamp import options as opts
from codestamp.config.logging import get_logger
from codestamp.constants import CONFIG_TABLE, PYPROJECT_CONFIG_TABLE
from codestamp.errors import CodeStampConfigError
from codestamp.formatting.tools import CommandTool

if TYPE_CHECKING:
    from pathlib import Path

    from codestamp.config.logging import CodeStampLogger
    from codestamp.config.model import Option

logger: CodeStampLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file into plain Python values.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed document.

    Raises:
        CodeStampConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        raise CodeStampConfigError(f"Cannot read config file {path}: {exc}") from exc
    except TomlkitParseError as exc:
        raise CodeStampConfigError(f"Invalid TOML in {path}: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def select_config_table(doc: TomlTable) -> TomlTable:
    """Return the ``[codestamp]`` or ``[tool.codestamp]`` table of ``doc`` (empty if absent)."""
    table: Any = doc.get(CONFIG_TABLE)
    if table is None:
        table = doc
        for key in PYPROJECT_CONFIG_TABLE.split("."):
            table = table.get(key) if isinstance(table, dict) else None
    if table is None:
        logger.debug("No [%s] table found", CONFIG_TABLE)
        return {}
    if not isinstance(table, dict):
        raise CodeStampConfigError(f"[{CONFIG_TABLE}] must be a table")
    return cast("TomlTable", table)


def _get(table: TomlTable, key: str, kind: type | tuple[type, ...]) -> Any:
    value: Any = table.get(key)
    if value is not None and not isinstance(value, kind):
        raise CodeStampConfigError(f"Config key {key!r} has an invalid type: {value!r}")
    return value


def _command(table: TomlTable, key: str) -> CommandTool | None:
    argv: list[Any] | None = _get(table, key, list)
    if argv is None:
        return None
    if not argv or not all(isinstance(a, str) for a in argv):
        raise CodeStampConfigError(f"Config key {key!r} must be a non-empty list of strings")
    return CommandTool(name=argv[0], argv=tuple(argv))


def _license_option(table: TomlTable) -> Option | None:
    lic: TomlTable | None = _get(table, "license", dict)
    if lic is None:
        return None
    text: str | None = _get(lic, "text", str)
    if text is not None:
        return opts.license_text(text)
    kind: str | None = _get(lic, "kind", str)
    holder: str = _get(lic, "holder", str) or ""
    year: int | None = _get(lic, "year", int)
    if year is None:
        raise CodeStampConfigError("[codestamp.license] requires 'year'")
    if kind == "apache2":
        return opts.apache2(holder, year)
    if kind == "mit":
        return opts.mit(holder, year)
    raise CodeStampConfigError(f"Unknown license kind: {kind!r} (expected 'apache2' or 'mit')")


def options_from_table(table: TomlTable) -> list[Option]:
    """Translate a ``[codestamp]`` table into option callables.

    Args:
        table (TomlTable): The config table.

    Returns:
        list[Option]: Options in a fixed order; absent keys produce no option.

    Raises:
        CodeStampConfigError: On a value of the wrong type or an unknown license kind.
    """
    out: list[Option] = []

    license_opt: Option | None = _license_option(table)
    if license_opt is not None:
        out.append(license_opt)

    label: str | None = _get(table, "generated_by", str)
    if label is not None:
        out.append(opts.generated_by(label))

    tag: str | None = _get(table, "build_tag", str)
    if tag is not None:
        out.append(opts.build_tag(tag))

    name: str | None = _get(table, "package", str)
    if name is not None:
        out.append(opts.package(name, _get(table, "package_doc", str) or ""))

    for key, make in (("verbose", opts.verbose), ("format", opts.format), ("imports", opts.imports)):
        flag: bool | None = _get(table, key, bool)
        if flag is not None:
            out.append(make(flag))

    prefix: str | None = _get(table, "label_prefix", str)
    if prefix is not None:
        out.append(opts.label_prefix(prefix))

    unit: str | None = _get(table, "indent", str)
    if unit is not None:
        out.append(opts.indent(unit))

    fmt_tool: CommandTool | None = _command(table, "formatter")
    if fmt_tool is not None:
        out.append(opts.formatter(fmt_tool))

    imp_tool: CommandTool | None = _command(table, "import_resolver")
    if imp_tool is not None:
        out.append(opts.import_resolver(imp_tool))

    logger.debug("Loaded %d option(s) from config table", len(out))
    return out


def load_options(path: Path) -> list[Option]:
    """Load the options declared in the TOML config file at ``path``."""
    return options_from_table(select_config_table(load_toml_dict(path)))
