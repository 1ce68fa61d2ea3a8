"""Typer CLI for carcass layout, drawer heights and slab merging."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from cabinetry.application import MergeSlabsCommand, ResolveLayoutCommand
from cabinetry.application.config import load_config, load_merge_config
from cabinetry.cli.commands import load_or_exit, validate_command
from cabinetry.domain import CardinalityError
from cabinetry.domain.services import (
    HeightState,
    calculate_optimal_heights,
    update_height,
    validate_heights,
)
from cabinetry.domain.entities import check_drawer_quantity
from cabinetry.infrastructure import (
    CutListFormatter,
    DrawerHeightsFormatter,
    JsonExporter,
    LayoutFormatter,
    MergeWarningFormatter,
)

RESOLVE_FORMATS = ("text", "json", "cutlist")
MERGE_FORMATS = ("text", "json")

app = typer.Typer(
    name="cabinetry",
    help="Resolve carcass panel layouts, drawer heights and slab merges.",
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """Resolve carcass panel layouts, drawer heights and slab merges."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _check_format(output_format: str, allowed: tuple[str, ...]) -> None:
    if output_format not in allowed:
        typer.echo(
            f"Error: unknown format '{output_format}' (choose from {', '.join(allowed)})",
            err=True,
        )
        raise typer.Exit(code=1)


@app.command()
def resolve(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the carcass JSON configuration file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json, cutlist"),
    ] = "text",
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Reject carcasses too small for their panels"),
    ] = False,
) -> None:
    """Resolve every panel of a carcass and print the layout.

    Examples:
        cabinetry resolve base-600.json
        cabinetry resolve base-600.json --format json
    """
    _check_format(output_format, RESOLVE_FORMATS)

    document = load_or_exit(load_config, config_file)

    result = ResolveLayoutCommand().execute(document, strict=strict)

    if output_format == "json":
        typer.echo(JsonExporter().export(result))
        if not result.is_valid:
            raise typer.Exit(code=1)
        return

    if not result.is_valid or result.layout is None:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if output_format == "text":
        typer.echo(LayoutFormatter().format(result.layout))
        typer.echo()
    typer.echo(CutListFormatter().format(result.cut_list))

    if result.drawer_validation and not result.drawer_validation.is_valid:
        typer.echo()
        typer.echo("Warnings:")
        for error in result.drawer_validation.errors:
            typer.echo(f"  config.drawer_heights: {error}")


def _parse_edit(value: str, quantity: int) -> tuple[int, float]:
    try:
        number, height = value.split("=", 1)
        index = int(number) - 1
        new_height = float(height)
    except ValueError:
        raise typer.BadParameter(
            f"Expected DRAWER=HEIGHT (e.g. 1=300), got '{value}'", param_hint="--set"
        ) from None
    if not 0 <= index < quantity:
        raise typer.BadParameter(
            f"Drawer {index + 1} does not exist (1 to {quantity})", param_hint="--set"
        )
    return index, new_height


@app.command()
def drawers(
    height: Annotated[
        float,
        typer.Option("--height", "-h", help="Carcass height in mm"),
    ],
    quantity: Annotated[
        int,
        typer.Option("--quantity", "-q", help="Number of drawers (1 to 6)"),
    ] = 3,
    edits: Annotated[
        list[str] | None,
        typer.Option(
            "--set",
            help="Set a drawer height as DRAWER=HEIGHT (bottom drawer is 1); repeatable",
        ),
    ] = None,
) -> None:
    """Distribute drawer heights over a carcass and apply edits in order.

    Examples:
        cabinetry drawers --height 720 --quantity 3
        cabinetry drawers --height 720 --quantity 3 --set 1=300
    """
    if height <= 0:
        typer.echo("Error: --height must be positive", err=True)
        raise typer.Exit(code=1)
    try:
        check_drawer_quantity(quantity)
    except CardinalityError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    heights = calculate_optimal_heights(height, quantity)
    was_reset = False
    for edit in edits or []:
        index, new_height = _parse_edit(edit, quantity)
        update = update_height(HeightState(height, quantity, tuple(heights)), index, new_height)
        heights = update.heights
        was_reset = update.was_reset

    validation = validate_heights(HeightState(height, quantity, tuple(heights)))
    typer.echo(DrawerHeightsFormatter().format(heights, height, validation, was_reset))


@app.command()
def merge(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the slab merge JSON file"),
    ],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Confirm the merge despite warnings"),
    ] = False,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    new_id: Annotated[
        str | None,
        typer.Option("--id", help="Id for the merged slab"),
    ] = None,
) -> None:
    """Merge benchtops or kickers into one slab.

    Conflicts (differing heights, depths, thicknesses or materials) are
    reported and the merge is held back unless --yes is given.

    Exit codes:
        0 - Merged
        1 - Invalid file or nothing to merge
        2 - Warnings found, merge not confirmed
    """
    _check_format(output_format, MERGE_FORMATS)

    document = load_or_exit(load_merge_config, config_file)

    output = MergeSlabsCommand().execute(document, confirm=yes, new_id=new_id)

    if output_format == "json":
        typer.echo(JsonExporter().export_merge(output))
    else:
        text = MergeWarningFormatter().format(output)
        if text:
            typer.echo(text)

    if not output.is_valid:
        for error in output.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)
    if output.needs_confirmation:
        raise typer.Exit(code=2)


if __name__ == "__main__":
    app()
