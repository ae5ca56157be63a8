"""Typer CLI for step and repeat layouts."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from stepnrepeat.application import (
    ComputeLayoutCommand,
    ExpressionError,
    LayoutInput,
    parse_dimension,
)
from stepnrepeat.application.config import (
    ConfigError,
    config_to_layout_input,
    load_config,
    merge_config_with_cli,
)
from stepnrepeat.cli.commands import templates_app, validate_command
from stepnrepeat.domain import PREVIEW_SCALE, LayoutError, Unit
from stepnrepeat.infrastructure import (
    LayoutJsonFormatter,
    LayoutSummaryFormatter,
    PreviewRenderer,
)

OUTPUT_FORMATS: tuple[str, ...] = ("text", "ascii", "svg", "json")

app = typer.Typer(
    name="stepnrepeat",
    help="Find the best step and repeat grid of identical items on a document.",
)

# Register validate command
app.command(name="validate")(validate_command)

# Register templates subcommand group
app.add_typer(templates_app, name="templates")


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log computation details"),
    ] = False,
) -> None:
    """Step and repeat layout optimizer."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


def _parse_or_exit(text: str | None, name: str, allow_zero: bool = False) -> float | None:
    try:
        return parse_dimension(text, name, allow_zero=allow_zero)
    except ExpressionError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def layout(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    width: Annotated[
        str | None,
        typer.Option("--width", "-w", help="Document width (expressions allowed, e.g. '297+33')"),
    ] = None,
    height: Annotated[
        str | None,
        typer.Option("--height", "-h", help="Document height"),
    ] = None,
    margin: Annotated[
        str | None,
        typer.Option("--margin", "-m", help="Margin on every side (default: 12.7)"),
    ] = None,
    item_width: Annotated[
        str | None,
        typer.Option("--item-width", "-W", help="Item width"),
    ] = None,
    item_height: Annotated[
        str | None,
        typer.Option("--item-height", "-H", help="Item height"),
    ] = None,
    unit: Annotated[
        Unit | None,
        typer.Option("--unit", "-u", help="Unit of every dimension (default: mm)"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, ascii, svg, json"),
    ] = "text",
    preferred_only: Annotated[
        bool,
        typer.Option(
            "--preferred-only",
            help="Show only the orientation that fits the most items",
        ),
    ] = False,
    swap_document: Annotated[
        bool,
        typer.Option("--swap-document", help="Exchange document width and height"),
    ] = False,
    swap_item: Annotated[
        bool,
        typer.Option("--swap-item", help="Exchange item width and height"),
    ] = False,
) -> None:
    """Compute the best step and repeat layout.

    Dimensions come from CLI options, a JSON configuration file, or both
    (CLI options override config file values). Non-square documents are
    computed in landscape and portrait; the orientation holding more items
    is preferred.

    Examples:
        stepnrepeat layout -w 330 -h 488 -W 90 -H 50
        stepnrepeat layout -w 330 -h 488 -m 0 -W 90 -H 50 --format ascii
        stepnrepeat layout --config cards.json --format svg > preview.svg
    """
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Error: Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    width_value = _parse_or_exit(width, "width")
    height_value = _parse_or_exit(height, "height")
    margin_value = _parse_or_exit(margin, "margin", allow_zero=True)
    item_width_value = _parse_or_exit(item_width, "item width")
    item_height_value = _parse_or_exit(item_height, "item height")

    preview_scale = PREVIEW_SCALE
    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

        config = merge_config_with_cli(
            config,
            width=width_value,
            height=height_value,
            margin=margin_value,
            item_width=item_width_value,
            item_height=item_height_value,
            unit=unit,
            preferred_only=preferred_only or None,
        )
        layout_input = config_to_layout_input(config)
        preview_scale = config.preview.scale
        preferred_only = config.preview.preferred_only
    else:
        if None in (width_value, height_value, item_width_value, item_height_value):
            typer.echo(
                "Error: --width, --height, --item-width and --item-height are "
                "required when --config is not provided",
                err=True,
            )
            raise typer.Exit(code=1)

        layout_input = LayoutInput(
            document_width=width_value,
            document_height=height_value,
            document_margin=margin_value,
            item_width=item_width_value,
            item_height=item_height_value,
            unit=unit or Unit.MM,
        )

    if swap_document:
        layout_input = layout_input.swapped_document()
    if swap_item:
        layout_input = layout_input.swapped_item()

    command = ComputeLayoutCommand(preview_scale=preview_scale)
    try:
        output = command.execute(layout_input)
    except LayoutError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        typer.echo(LayoutJsonFormatter().format(output))
    elif output_format == "svg":
        typer.echo(PreviewRenderer().render_outcome_svg(output, preferred_only))
    elif output_format == "ascii":
        typer.echo(
            PreviewRenderer().render_outcome_ascii(
                output, preferred_only=preferred_only
            )
        )
    else:
        typer.echo(LayoutSummaryFormatter().format(output, preferred_only))


if __name__ == "__main__":
    app()
