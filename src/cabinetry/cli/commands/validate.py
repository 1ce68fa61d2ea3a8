"""The ``validate`` command and the shared load-error exit path."""

from pathlib import Path
from typing import Annotated, Callable, TypeVar

import typer

from cabinetry.application.config import (
    LAYOUT_CHECKS,
    ConfigError,
    ValidationResult,
    load_config,
)
from cabinetry.infrastructure import ConfigErrorFormatter, ValidationReportFormatter

DocumentT = TypeVar("DocumentT")


def load_or_exit(loader: Callable[[Path], DocumentT], path: Path) -> DocumentT:
    """Load a document, printing the failure and exiting 1 if it cannot be read."""
    try:
        return loader(path)
    except ConfigError as e:
        typer.echo(ConfigErrorFormatter().format(e), err=True)
        raise typer.Exit(code=1)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the carcass JSON configuration file"),
    ],
) -> None:
    """Check a carcass file without resolving it.

    Schema problems stop at load time. A loaded document is then checked
    group by group: dimensions against the panel thickness, saved drawer
    heights against the carcass, and selections the layout will ignore.

    Exit codes:
        0 - Clean
        1 - Errors
        2 - Warnings only

    Example:
        cabinetry validate base-600.json
    """
    document = load_or_exit(load_config, config_file)
    d = document.dimensions
    typer.echo(
        f"{config_file}: {document.cabinet_type.value} carcass "
        f"{d.width:g} x {d.height:g} x {d.depth:g} mm"
    )

    groups = [(heading, check(document)) for heading, check in LAYOUT_CHECKS]
    typer.echo(ValidationReportFormatter().format(groups))

    combined = ValidationResult()
    for _, result in groups:
        combined.merge(result)
    raise typer.Exit(code=combined.exit_code)
