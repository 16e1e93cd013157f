"""CLI entry point for gitai.

This module provides the main CLI application that combines the default
generate command and the config subcommands into a single interface.
"""

import typer

from gitai.cli.config import config_app
from gitai.cli.main import main_command

# Main application
app = typer.Typer(
    name="gitai",
    help="gitai: AI-powered git commit message generator",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Set the main callback for default behavior
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
]
