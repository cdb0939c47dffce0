"""
Template Resolution Commands

This module provides CLI commands that resolve templates against glob
captures, either given explicitly or taken from matching a path.

Commands:
- resolve <template> [-c <capture>]...: Resolve against explicit captures.
- match <pattern> <path> <template>: Capture <path> with a glob, then resolve.
"""

import sys
from typing import NoReturn
import click
from rich.markup import escape
from patres.commands.base import RichCommand, rich_help
from patres.config.settings import appsettings, console
from patres.lib.log import LOG
from patres.lib.resolver import PatternResolutionError, glob_capture, glob_resolver
from patres.models.dataModel import ResolveRequest


def result_print(text: str) -> None:
    """Print a resolved string verbatim."""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def error_report(message: str) -> NoReturn:
    """Report a failure and exit with status 1."""
    if appsettings.noComplain:
        console.print(message, markup=False, highlight=False, emoji=False, soft_wrap=True)
    else:
        console.print(f"[bold red]Error:[/bold red] {escape(message)}", emoji=False, soft_wrap=True)
    sys.exit(1)


def request_resolve(request: ResolveRequest) -> None:
    """Resolve a validated request and print the outcome."""
    try:
        result_print(glob_resolver(request.captures).resolve(request.template))
    except PatternResolutionError as e:
        LOG(f"Resolution failed for {request.template!r}: {e}")
        error_report(str(e))


@click.command(
    cls=RichCommand,
    short_help="Resolve a template against glob captures",
    help=rich_help(
        command="resolve",
        description="Resolve a template against explicit glob captures.",
        usage="patres resolve <template> [-c <capture>]...",
        args={
            "<template>": "String containing glob:<i>, glob:count or ${...} tokens.",
            "-c <capture>": "A captured string; repeat in capture order.",
        },
    ),
)
@click.argument("template", type=str)
@click.option("-c", "--capture", "captures", multiple=True, type=str)
def resolve(template: str, captures: tuple[str, ...]) -> None:
    """
    Resolves a template against the given captures.

    :param template: The template to resolve.
    :param captures: Ordered glob captures.
    """
    request_resolve(ResolveRequest(template=template, captures=captures))


@click.command(
    cls=RichCommand,
    short_help="Capture a path with a glob and resolve a template",
    help=rich_help(
        command="match",
        description="Match a path against a glob and resolve a template with the captures.",
        usage="patres match <pattern> <path> <template>",
        args={
            "<pattern>": "Glob pattern, each wildcard yields one capture.",
            "<path>": "Path to match.",
            "<template>": "String containing glob:<i>, glob:count or ${...} tokens.",
        },
    ),
)
@click.argument("pattern", type=str)
@click.argument("path", type=str)
@click.argument("template", type=str)
def match(pattern: str, path: str, template: str) -> None:
    """
    Captures ``path`` with ``pattern`` and resolves ``template``.

    :param pattern: The glob pattern.
    :param path: The path to capture.
    :param template: The template to resolve.
    """
    captures = glob_capture(pattern, path)
    if captures is None:
        LOG(f"{path!r} does not match {pattern!r}")
        error_report(f"'{path}' does not match '{pattern}'")
    request_resolve(ResolveRequest(template=template, captures=captures))
