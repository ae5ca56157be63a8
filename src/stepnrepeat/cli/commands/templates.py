"""Templates commands for bundled step and repeat configurations."""

from pathlib import Path
from typing import Annotated

import typer

from stepnrepeat.application.templates import TemplateManager, TemplateNotFoundError

templates_app = typer.Typer(
    name="templates",
    help="Manage bundled step and repeat templates.",
)


def _exit_unknown_template(manager: TemplateManager, name: str) -> None:
    available = ", ".join(n for n, _ in manager.list_templates())
    typer.echo(f"Error: Template not found: {name}", err=True)
    typer.echo(f"Available templates: {available}", err=True)
    raise typer.Exit(code=1)


@templates_app.command(name="list")
def list_templates() -> None:
    """List all bundled templates.

    Example:
        stepnrepeat templates list
    """
    templates = TemplateManager().list_templates()

    typer.echo("Available templates:")
    typer.echo()

    max_name_width = max(len(name) for name, _ in templates) if templates else 0
    for name, description in templates:
        typer.echo(f"  {name:<{max_name_width}}  - {description}")

    typer.echo()
    typer.echo(
        "Use 'stepnrepeat templates init <name>' to create a configuration file "
        "from a template."
    )


@templates_app.command(name="show")
def show_template(
    name: Annotated[str, typer.Argument(help="Name of the template to show")],
) -> None:
    """Print the JSON content of a template.

    Example:
        stepnrepeat templates show sra3-business-cards
    """
    manager = TemplateManager()
    if not manager.template_exists(name):
        _exit_unknown_template(manager, name)
    typer.echo(manager.get_template(name))


@templates_app.command(name="init")
def init_template(
    name: Annotated[
        str,
        typer.Argument(help="Name of the template to initialize"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (default: <name>.json)"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file"),
    ] = False,
) -> None:
    """Create a configuration file from a template.

    Examples:
        stepnrepeat templates init sra3-business-cards
        stepnrepeat templates init letter-labels --output labels.json --force
    """
    manager = TemplateManager()
    if not manager.template_exists(name):
        _exit_unknown_template(manager, name)

    if output is None:
        output = Path(f"{name}.json")

    if output.exists() and not force:
        typer.echo(f"Error: File already exists: {output}", err=True)
        typer.echo("Use --force to overwrite.", err=True)
        raise typer.Exit(code=1)

    try:
        manager.init_template(name, output)
    except TemplateNotFoundError:
        _exit_unknown_template(manager, name)
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Created: {output}")
