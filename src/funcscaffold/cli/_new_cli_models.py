# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared data structures for the ``new`` CLI command."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ..authorization import AuthorizationLevel

ARGS_ARGUMENT = Annotated[
    list[str] | None,
    typer.Argument(
        help="Optional '<TriggerName> help' pair for new-model Python projects.",
        show_default=False,
    ),
]
LANGUAGE_OPTION = Annotated[
    str | None,
    typer.Option(
        "--language",
        "-l",
        help="Template programming language, such as C#, F#, JavaScript, etc.",
    ),
]
TEMPLATE_OPTION = Annotated[str | None, typer.Option("--template", "-t", help="Template name.")]
NAME_OPTION = Annotated[str | None, typer.Option("--name", "-n", help="Function name.")]
FILE_OPTION = Annotated[
    str | None,
    typer.Option(
        "--file",
        "-f",
        help="File name for new-model Python templates (default: function_app.py).",
    ),
]
AUTH_LEVEL_OPTION = Annotated[
    AuthorizationLevel | None,
    typer.Option(
        "--authlevel",
        "-a",
        case_sensitive=False,
        help=(
            "Authorization level for templates that use an HTTP trigger. "
            "It is not enforced when running functions locally."
        ),
    ),
]
CSX_OPTION = Annotated[bool, typer.Option("--csx", help="Use old style csx dotnet functions.")]
ROOT_OPTION = Annotated[
    Path | None,
    typer.Option("--root", "-r", help="Project root (default: current directory).", show_default=False),
]
TEMPLATES_OPTION = Annotated[
    Path | None,
    typer.Option("--templates", help="Template catalog JSON file overriding the bundled catalog."),
]
EMOJI_OPTION = Annotated[
    bool | None,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output.", show_default=False),
]
COLOR_OPTION = Annotated[
    bool | None,
    typer.Option("--color/--no-color", help="Toggle coloured output.", show_default=False),
]
DEBUG_OPTION = Annotated[bool, typer.Option("--debug", help="Emit diagnostic logging.")]


def normalize_cli_value(value: str | None) -> str | None:
    """Return ``value`` stripped, or ``None`` when it is blank."""

    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


@dataclass(slots=True)
class NewCLIOptions:
    """Capture CLI input supplied to the ``new`` command."""

    root: Path
    args: tuple[str, ...]
    language: str | None
    template: str | None
    name: str | None
    file_name: str | None
    auth_level: AuthorizationLevel | None
    csx: bool
    templates: Path | None
    emoji: bool | None
    color: bool | None
    debug: bool


def build_new_options(
    *,
    root: Path | None,
    args: Sequence[str] | None,
    language: str | None,
    template: str | None,
    name: str | None,
    file_name: str | None,
    auth_level: AuthorizationLevel | None,
    csx: bool,
    templates: Path | None,
    emoji: bool | None,
    color: bool | None,
    debug: bool,
) -> NewCLIOptions:
    """Construct ``NewCLIOptions`` from Typer callback parameters."""

    return NewCLIOptions(
        root=(root if root is not None else Path.cwd()).resolve(),
        args=tuple(args or ()),
        language=normalize_cli_value(language),
        template=normalize_cli_value(template),
        name=normalize_cli_value(name),
        file_name=normalize_cli_value(file_name),
        auth_level=auth_level,
        csx=csx,
        templates=templates.resolve() if templates is not None else None,
        emoji=emoji,
        color=color,
        debug=debug,
    )


__all__ = [
    "ARGS_ARGUMENT",
    "AUTH_LEVEL_OPTION",
    "COLOR_OPTION",
    "CSX_OPTION",
    "DEBUG_OPTION",
    "EMOJI_OPTION",
    "FILE_OPTION",
    "LANGUAGE_OPTION",
    "NAME_OPTION",
    "NewCLIOptions",
    "ROOT_OPTION",
    "TEMPLATES_OPTION",
    "TEMPLATE_OPTION",
    "build_new_options",
    "normalize_cli_value",
]
