# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .. import __version__
from .new import new_command

app = typer.Typer(
    help="Create Azure Functions from templates.",
    no_args_is_help=True,
    add_completion=False,
)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Create Azure Functions from templates."""


app.command("new", help="Create a new function from a template.")(new_command)
app.command("create", help="Alias for 'new'.", hidden=True)(new_command)

__all__ = ["app"]
