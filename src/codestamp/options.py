# topmark:header:start
#
#   project      : CodeStamp
#   file         : options.py
#   file_relpath : src/codestamp/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Options accepted by [`codestamp.generate`][codestamp.api.generate].

Every function here returns an *option*: a callable that mutates a
[`MutableConfig`][codestamp.config.model.MutableConfig]. Options are applied left to
right, so the last option touching a field wins, and applying the same option twice
has the same effect as applying it once. Invalid arguments raise
[`CodeStampConfigError`][codestamp.errors.CodeStampConfigError] when the option is
applied, before any file is touched.

Example:
    ```python
    from codestamp import generate, options

    generate(
        "out/add.go",
        [HEADER_TMPL, ADD_TMPL],
        {"Names": ["x", "y"]},
        options.apache2("ACME Inc.", 2025),
        options.package("field", "provides field arithmetic."),
        options.imports(False),
    )
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from codestamp.constants import BUILD_CONSTRAINT_PREFIX
from codestamp.errors import CodeStampConfigError
from codestamp.rendering.licenses import apache2_header, mit_header

if TYPE_CHECKING:
    from codestamp.config.model import MutableConfig, Option
    from codestamp.formatting.tools import ExternalTool


def _check_license_args(copyright_holder: str, year: int) -> None:
    if not copyright_holder.strip():
        raise CodeStampConfigError("License copyright holder must not be empty.")
    if year <= 0:
        raise CodeStampConfigError(f"License year must be positive, got {year}.")


def apache2(copyright_holder: str, year: int) -> Option:
    """Write an Apache 2.0 license header for ``copyright_holder`` and ``year``."""

    def _apply(cfg: MutableConfig) -> None:
        _check_license_args(copyright_holder, year)
        cfg.license_text = apache2_header(copyright_holder, year)

    return _apply


def mit(copyright_holder: str, year: int) -> Option:
    """Write a short MIT license header for ``copyright_holder`` and ``year``."""

    def _apply(cfg: MutableConfig) -> None:
        _check_license_args(copyright_holder, year)
        cfg.license_text = mit_header(copyright_holder, year)

    return _apply


def license_text(text: str) -> Option:
    """Write ``text`` verbatim as the license header (empty disables it)."""

    def _apply(cfg: MutableConfig) -> None:
        cfg.license_text = text

    return _apply


def generated_by(label: str) -> Option:
    """Set the label of the ``Code generated by <label>. DO NOT EDIT.`` banner."""

    def _apply(cfg: MutableConfig) -> None:
        if not label.strip() or "\n" in label:
            raise CodeStampConfigError(f"Invalid generated-by label: {label!r}")
        cfg.generated_by = label

    return _apply


def build_tag(expr: str) -> Option:
    """Add a ``//go:build <expr>`` constraint line on top of the generated file."""

    def _apply(cfg: MutableConfig) -> None:
        if not expr.strip() or "\n" in expr or "\r" in expr:
            raise CodeStampConfigError(f"Build tag must be a single non-empty line: {expr!r}")
        cfg.build_tag = BUILD_CONSTRAINT_PREFIX + expr.strip()

    return _apply


def package(name: str, doc: str = "") -> Option:
    """Declare package ``name``, with an optional doc comment ``// Package <name> <doc>``.

    Args:
        name (str): Package name; must be a valid identifier.
        doc (str): Package documentation; empty means no doc comment.

    Returns:
        Option: The option setting both fields.
    """

    def _apply(cfg: MutableConfig) -> None:
        if not name.isidentifier():
            raise CodeStampConfigError(f"Invalid package name: {name!r}")
        cfg.package_name = name
        cfg.package_doc = doc

    return _apply


def verbose(enabled: bool) -> Option:
    """Print (or not) a ``generating <path>`` line to stdout for each call."""

    def _apply(cfg: MutableConfig) -> None:
        cfg.verbose = enabled

    return _apply


def format(enabled: bool) -> Option:  # noqa: A001
    """Run (or skip) the post-formatter: external formatter or assembly normalizer."""

    def _apply(cfg: MutableConfig) -> None:
        cfg.format_output = enabled

    return _apply


def imports(enabled: bool) -> Option:
    """Run (or skip) the external import resolver."""

    def _apply(cfg: MutableConfig) -> None:
        cfg.resolve_imports = enabled

    return _apply


def funcs(mapping: Mapping[str, Callable[..., Any]]) -> Option:
    """Merge extra template functions; they override built-ins of the same name."""

    def _apply(cfg: MutableConfig) -> None:
        for fname, fn in mapping.items():
            if not callable(fn):
                raise CodeStampConfigError(f"Template function {fname!r} is not callable.")
        cfg.funcs.update(mapping)

    return _apply


def label_prefix(prefix: str) -> Option:
    """Set the prefix that marks the first routine line of an assembly file."""

    def _apply(cfg: MutableConfig) -> None:
        cfg.label_prefix = prefix

    return _apply


def indent(unit: str) -> Option:
    """Set the indent unit applied to assembly body lines."""

    def _apply(cfg: MutableConfig) -> None:
        cfg.indent = unit

    return _apply


def formatter(tool: ExternalTool) -> Option:
    """Replace the external formatter used for general-purpose source files."""

    def _apply(cfg: MutableConfig) -> None:
        cfg.formatter = tool

    return _apply


def import_resolver(tool: ExternalTool) -> Option:
    """Replace the external import resolver."""

    def _apply(cfg: MutableConfig) -> None:
        cfg.import_resolver = tool

    return _apply
