"""Validate command for checking configuration files.

Loads a JSON configuration, runs the optimizer against it and reports
blocking errors and layout advisories.
"""

from pathlib import Path
from typing import Annotated

import typer

from stepnrepeat.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)


def _display_load_error(error: ConfigError) -> None:
    """Explain why no layout could be computed from the file."""
    typer.echo("Cannot read document and item sizes:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  No configuration at {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Configuration is not valid JSON", err=True)
        for detail in error.details:
            typer.echo(
                f"    at line {detail.get('line', '?')}, column {detail.get('column', '?')}: "
                f"{detail.get('message', 'Unknown error')}",
                err=True,
            )
    elif error.error_type == "validation":
        for detail in error.details:
            line = f"  {detail.get('path', 'unknown')}: {detail.get('message', 'Unknown error')}"
            value = detail.get("value")
            if value is not None:
                line += f" (got {value!r})"
            typer.echo(line, err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("No layout computed.", err=True)


def _display_best_layout(result: ValidationResult) -> None:
    """Show the preferred grid the configuration produces."""
    if result.output is None:
        return
    outcome = result.output.outcome
    best = outcome.preferred_result
    if best.item_count == 0:
        return
    unit = result.output.unit.value
    typer.echo(
        f"Best layout: {outcome.preferred.value}, "
        f"{best.max_columns} x {best.max_rows} = {best.item_count} items "
        f"on a {best.document_width:g}x{best.document_height:g} {unit} usable area "
        f"({best.coverage:.1%} covered)"
    )
    typer.echo()


def _display_validation_result(result: ValidationResult) -> None:
    """Display the best layout, errors, advisories and a verdict line."""
    _display_best_layout(result)

    if result.errors:
        typer.echo("Layout errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Layout advisories:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Try: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Layout rejected: {len(result.errors)} error(s), "
            f"{len(result.warnings)} advisory(ies)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Layout usable with {len(result.warnings)} advisory(ies)")
    else:
        typer.echo("Layout OK: document, margin and item sizes are consistent.")


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Check that a configuration produces a sensible step and repeat layout.

    Checks the configuration file for:
    - JSON syntax errors
    - Schema validation errors (missing fields, non-positive sizes, etc.)
    - Layout errors (margin larger than the document)
    - Layout advisories (nothing fits, low coverage, zero margin)

    Exit codes:
        0 - Layout is usable with no advisories
        1 - No layout can be computed
        2 - Layout is usable but has advisories

    Example:
        stepnrepeat validate cards.json
    """
    typer.echo(f"Checking layout from {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)
