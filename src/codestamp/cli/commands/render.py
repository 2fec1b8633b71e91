# topmark:header:start
#
#   project      : CodeStamp
#   file         : render.py
#   file_relpath : src/codestamp/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CodeStamp `render` command.

Reads template files and an optional data file, then generates ``OUTPUT`` through
[`codestamp.generate`][codestamp.api.generate].

Option precedence:
    Options from ``--config`` are applied first, explicit command-line flags after
    them, so a flag always overrides the config file. Flags that were not given
    leave the config file (or built-in default) value in place.

Exit status:
    0 on success; otherwise the ``exit_code`` of the
    [`CodeStampError`][codestamp.errors.CodeStampError] that stopped generation.
"""

from __future__ import annotations

import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from codestamp import options as opts
from codestamp.api import generate
from codestamp.cli.console import ClickConsole
from codestamp.cli.io import load_data, read_templates
from codestamp.config.io import load_options
from codestamp.config.logging import get_logger

if TYPE_CHECKING:
    from codestamp.config.logging import CodeStampLogger
    from codestamp.config.model import Option
    from codestamp.pipeline.context import GenerationContext

logger: CodeStampLogger = get_logger(__name__)


def build_cli_options(
    *,
    package: str | None,
    package_doc: str | None,
    apache2: str | None,
    mit: str | None,
    year: int | None,
    generated_by: str | None,
    build_tag: str | None,
    format_output: bool | None,
    resolve_imports: bool | None,
    quiet: bool,
    label_prefix: str | None,
) -> list[Option]:
    """Translate explicit command-line flags into option callables.

    Returns:
        list[Option]: One option per flag that was given.

    Raises:
        click.UsageError: If ``--apache2`` and ``--mit`` are both given, or
            ``--package-doc`` is given without ``--package``.
    """
    out: list[Option] = []
    if apache2 is not None and mit is not None:
        raise click.UsageError("--apache2 and --mit are mutually exclusive.")
    license_year: int = year if year is not None else datetime.date.today().year
    if apache2 is not None:
        out.append(opts.apache2(apache2, license_year))
    if mit is not None:
        out.append(opts.mit(mit, license_year))

    if generated_by is not None:
        out.append(opts.generated_by(generated_by))
    if build_tag is not None:
        out.append(opts.build_tag(build_tag))

    if package_doc is not None and package is None:
        raise click.UsageError("--package-doc requires --package.")
    if package is not None:
        out.append(opts.package(package, package_doc or ""))

    if format_output is not None:
        out.append(opts.format(format_output))
    if resolve_imports is not None:
        out.append(opts.imports(resolve_imports))
    if quiet:
        out.append(opts.verbose(False))
    if label_prefix is not None:
        out.append(opts.label_prefix(label_prefix))
    return out


@click.command(
    name="render",
    help="Render TEMPLATE files (in order) with the given data into OUTPUT.",
)
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.argument(
    "templates",
    nargs=-1,
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--data",
    "data_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Data file (.json or .toml) the templates are executed against.",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="TOML file with a [codestamp] or [tool.codestamp] table of defaults.",
)
@click.option("--package", default=None, help="Package name declared in the header.")
@click.option("--package-doc", default=None, help="Package documentation text.")
@click.option("--apache2", metavar="HOLDER", default=None, help="Apache 2.0 license header.")
@click.option("--mit", metavar="HOLDER", default=None, help="MIT license header.")
@click.option(
    "--year",
    type=click.IntRange(min=1),
    default=None,
    help="Copyright year of the license header (default: current year).",
)
@click.option("--generated-by", default=None, help="Label of the DO NOT EDIT banner.")
@click.option("--build-tag", default=None, help="Build constraint expression.")
@click.option(
    "--format/--no-format",
    "format_output",
    default=None,
    help="Run (or skip) the post-formatter.",
)
@click.option(
    "--imports/--no-imports",
    "resolve_imports",
    default=None,
    help="Run (or skip) the import resolver.",
)
@click.option("--quiet", is_flag=True, default=False, help="Do not print progress output.")
@click.option(
    "--label-prefix",
    default=None,
    help="Prefix of the first routine line in assembly output.",
)
def render_command(
    *,
    output: Path,
    templates: tuple[Path, ...],
    data_file: Path | None,
    config_file: Path | None,
    package: str | None,
    package_doc: str | None,
    apache2: str | None,
    mit: str | None,
    year: int | None,
    generated_by: str | None,
    build_tag: str | None,
    format_output: bool | None,
    resolve_imports: bool | None,
    quiet: bool,
    label_prefix: str | None,
) -> None:
    """Render templates and data into one generated file.

    Args:
        output (Path): Output file path.
        templates (tuple[Path, ...]): Template files, aggregated in argument order.
        data_file (Path | None): Optional ``.json`` or ``.toml`` data file.
        config_file (Path | None): Optional TOML config file.
        package (str | None): Package name.
        package_doc (str | None): Package documentation text.
        apache2 (str | None): Copyright holder of an Apache 2.0 header.
        mit (str | None): Copyright holder of an MIT header.
        year (int | None): Copyright year.
        generated_by (str | None): Banner label.
        build_tag (str | None): Build constraint expression.
        format_output (bool | None): Post-formatter switch (None: not given).
        resolve_imports (bool | None): Import resolver switch (None: not given).
        quiet (bool): Suppress the progress line and the summary.
        label_prefix (str | None): Assembly label prefix.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj.get("console") or ClickConsole()

    options: list[Option] = []
    if config_file is not None:
        options.extend(load_options(config_file))
    options.extend(
        build_cli_options(
            package=package,
            package_doc=package_doc,
            apache2=apache2,
            mit=mit,
            year=year,
            generated_by=generated_by,
            build_tag=build_tag,
            format_output=format_output,
            resolve_imports=resolve_imports,
            quiet=quiet,
            label_prefix=label_prefix,
        )
    )

    fragments: list[str] = read_templates(templates)
    data: Any = load_data(data_file)

    result: GenerationContext = generate(output, fragments, data, *options)
    logger.debug("Generation summary: %s", result.to_dict())

    if not quiet:
        console.print(
            f"{console.styled(str(result.path), bold=True)}: "
            f"{result.stage.styled(console.enable_color)} ({', '.join(result.steps)})"
        )
