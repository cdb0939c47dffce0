"""
patres main module.

Entry point for the patres command line.

Examples:
    Resolve against explicit captures:
        $ patres resolve "out/glob:0/glob:1.js" -c src -c index

    Capture a path and resolve:
        $ patres match "src/**/*.ts" src/a/b.ts "out/glob:0/glob:1.js"
"""

from typing import Final
import click
from patres.commands.app import cli

__version__: Final[str] = "0.1.0"

click.version_option(__version__, "-V", "--version", prog_name="patres")(cli)


def main() -> None:
    """Run the patres CLI."""
    cli.main(prog_name="patres")


if __name__ == "__main__":
    main()
