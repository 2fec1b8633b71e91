# topmark:header:start
#
#   project      : CodeStamp
#   file         : model.py
#   file_relpath : src/codestamp/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for a single generation call.

This module defines:
    - `Config`: an immutable snapshot consumed by the pipeline steps.
    - `MutableConfig`: a mutable builder that options are applied to; it is
      frozen into `Config` once all options succeeded and thawed back for edits.

Options (see [`codestamp.options`][codestamp.options]) are plain callables taking a
`MutableConfig`. They are applied left to right, so later options win on any field
they both set.

Immutability:
    - `Config` is ``frozen=True`` and stores ``funcs`` as a read-only mapping.
    - A `Config` is owned by exactly one generation call and never shared.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from codestamp.config.logging import get_logger
from codestamp.constants import DEFAULT_GENERATED_BY, DEFAULT_INDENT, DEFAULT_LABEL_PREFIX
from codestamp.errors import CodeStampConfigError
from codestamp.formatting.tools import GOFMT, GOIMPORTS

if TYPE_CHECKING:
    from collections.abc import Iterable

    from codestamp.config.logging import CodeStampLogger
    from codestamp.formatting.tools import ExternalTool

logger: CodeStampLogger = get_logger(__name__)

TemplateFunc = Callable[..., Any]

# An option mutates the builder in place and may raise CodeStampConfigError.
Option = Callable[["MutableConfig"], None]


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable generation options.

    Attributes:
        verbose (bool): Print a ``generating <path>`` progress line to stdout.
        format_output (bool): Run the post-formatter stage.
        resolve_imports (bool): Run the import resolver stage.
        package_name (str): Package declared in the header (empty: no package clause).
        package_doc (str): Package doc text, emitted as ``// Package <name> <doc>``.
        license_text (str): License header text, written verbatim.
        generated_by (str): Label of the ``Code generated by ... DO NOT EDIT.`` banner.
        build_tag (str): Full build-constraint line (empty: none).
        funcs (Mapping[str, TemplateFunc]): Extra template functions; they override
            built-ins with the same name.
        label_prefix (str): Prefix of the line that opens the indented body of an
            assembly file.
        indent (str): Indent unit applied to assembly body lines.
        formatter (ExternalTool): Tool run on general-purpose source files.
        import_resolver (ExternalTool): Tool run when ``resolve_imports`` is set.
    """

    verbose: bool
    format_output: bool
    resolve_imports: bool

    # Header texts
    package_name: str
    package_doc: str
    license_text: str
    generated_by: str
    build_tag: str

    # Template function set
    funcs: Mapping[str, TemplateFunc]

    # Assembly normalizer
    label_prefix: str
    indent: str

    # External collaborators
    formatter: ExternalTool
    import_resolver: ExternalTool

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableConfig: A builder initialized from this snapshot.
        """
        return MutableConfig(
            verbose=self.verbose,
            format_output=self.format_output,
            resolve_imports=self.resolve_imports,
            package_name=self.package_name,
            package_doc=self.package_doc,
            license_text=self.license_text,
            generated_by=self.generated_by,
            build_tag=self.build_tag,
            funcs=dict(self.funcs),
            label_prefix=self.label_prefix,
            indent=self.indent,
            formatter=self.formatter,
            import_resolver=self.import_resolver,
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration that options are applied to.

    Field semantics are documented on `Config`. Defaults: formatting, import
    resolution and the progress line are enabled, the banner label is
    ``"default"`` and every header text is empty.
    """

    verbose: bool = True
    format_output: bool = True
    resolve_imports: bool = True

    package_name: str = ""
    package_doc: str = ""
    license_text: str = ""
    generated_by: str = DEFAULT_GENERATED_BY
    build_tag: str = ""

    funcs: dict[str, TemplateFunc] = field(default_factory=lambda: {})

    label_prefix: str = DEFAULT_LABEL_PREFIX
    indent: str = DEFAULT_INDENT

    formatter: ExternalTool = GOFMT
    import_resolver: ExternalTool = GOIMPORTS

    @classmethod
    def from_options(cls, options: Iterable[Option]) -> MutableConfig:
        """Build a draft from the defaults by applying ``options`` in order.

        Args:
            options (Iterable[Option]): Option callables; the first one that raises aborts.

        Returns:
            MutableConfig: The draft with every option applied.
        """
        draft = cls()
        for option in options:
            option(draft)
        return draft

    def freeze(self) -> Config:
        """Validate this builder and freeze it into an immutable `Config`.

        Returns:
            Config: The immutable snapshot.

        Raises:
            CodeStampConfigError: If the option combination is invalid.
        """
        if self.package_doc and not self.package_name:
            raise CodeStampConfigError("Package documentation requires a package name.")
        if not self.indent or self.indent.strip():
            raise CodeStampConfigError(f"Indent unit must be non-empty whitespace: {self.indent!r}")
        if not self.label_prefix.strip():
            raise CodeStampConfigError("Label prefix must not be blank.")
        if self.label_prefix != self.label_prefix.lstrip():
            # Lines are stripped before the prefix test.
            raise CodeStampConfigError(
                f"Label prefix must not start with whitespace: {self.label_prefix!r}"
            )

        logger.trace("Freezing config: %s", self)
        return Config(
            verbose=self.verbose,
            format_output=self.format_output,
            resolve_imports=self.resolve_imports,
            package_name=self.package_name,
            package_doc=self.package_doc,
            license_text=self.license_text,
            generated_by=self.generated_by,
            build_tag=self.build_tag,
            funcs=MappingProxyType(dict(self.funcs)),
            label_prefix=self.label_prefix,
            indent=self.indent,
            formatter=self.formatter,
            import_resolver=self.import_resolver,
        )
