"""CLI command implementations for the stepnrepeat application.

This package contains subcommands for the stepnrepeat CLI, including:
- validate: Validate a configuration file
- templates: List, show and initialize bundled templates
"""

from stepnrepeat.cli.commands.templates import templates_app
from stepnrepeat.cli.commands.validate import validate_command

__all__ = ["templates_app", "validate_command"]
