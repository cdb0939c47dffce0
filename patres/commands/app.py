"""
Defines the main Click command group for patres.

This module provides:
- The root `cli` command group for the application.
- Registration of the resolution subcommands.

Usage:
Import `cli` to initialize and run the command-line interface.
"""

import click
from patres.commands.base import RichGroup
from patres.commands.resolve import resolve, match


@click.group(
    cls=RichGroup,
    help="""
    patres

    Resolve glob:<i>, glob:count and ${...} tokens in templates.
    """,
)
def cli() -> None:
    """
    The root Click command group for patres.
    """
    pass


cli.add_command(resolve)
cli.add_command(match)
