# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command creating a new function from a template."""

from __future__ import annotations

import asyncio

import typer

from ..catalog import JsonCatalogProvider
from ..config import ScaffoldConfig, load_config
from ..context import ProjectContext
from ..core.logging import configure_diagnostics
from ..errors import ScaffoldError
from ..interfaces import SelectionWizard
from ..telemetry import CommandTelemetry
from ..workflow import CreateFunctionRequest, CreationResult, build_default_workflow
from ._new_cli_models import (
    ARGS_ARGUMENT,
    AUTH_LEVEL_OPTION,
    COLOR_OPTION,
    CSX_OPTION,
    DEBUG_OPTION,
    EMOJI_OPTION,
    FILE_OPTION,
    LANGUAGE_OPTION,
    NAME_OPTION,
    ROOT_OPTION,
    TEMPLATE_OPTION,
    TEMPLATES_OPTION,
    NewCLIOptions,
    build_new_options,
)
from .prompts import ConsoleSelectionWizard
from .shared import CLILogger, build_cli_logger


def run_new(
    options: NewCLIOptions,
    *,
    config: ScaffoldConfig,
    logger: CLILogger,
    context: ProjectContext | None = None,
    wizard: SelectionWizard | None = None,
) -> CreationResult:
    """Create a function for ``options`` and report the outcome.

    Args:
        options: Normalised CLI input.
        config: Project configuration supplying defaults.
        logger: Logger used for user-facing output.
        context: Optional invocation context; defaults to the running process.
        wizard: Optional prompt implementation; defaults to console prompts.

    Returns:
        CreationResult: Outcome of the workflow.

    Raises:
        ScaffoldError: When the function cannot be created.
    """

    project = context or ProjectContext.from_environment(options.root)
    prompts = wizard or ConsoleSelectionWizard(console=logger.console, interactive=project.interactive)
    telemetry = CommandTelemetry()
    workflow = build_default_workflow(
        project,
        prompts,
        catalog_provider=JsonCatalogProvider(options.templates or config.templates),
        language=options.language,
        telemetry=telemetry,
    )
    request = CreateFunctionRequest(
        language=options.language,
        template_name=options.template,
        function_name=options.name,
        file_name=options.file_name or config.default_file_name,
        auth_level=options.auth_level,
        legacy=options.csx,
        args=options.args,
    )
    try:
        result = asyncio.run(workflow.run(request))
    finally:
        if telemetry.events:
            logger.debug(" ".join(f"{key}={value}" for key, value in telemetry.events.items()))

    if result.created:
        logger.ok(result.confirmation)
    for notice in result.notices:
        logger.info(notice)
    return result


def new_command(
    args: ARGS_ARGUMENT = None,
    language: LANGUAGE_OPTION = None,
    template: TEMPLATE_OPTION = None,
    name: NAME_OPTION = None,
    file_name: FILE_OPTION = None,
    auth_level: AUTH_LEVEL_OPTION = None,
    csx: CSX_OPTION = False,
    root: ROOT_OPTION = None,
    templates: TEMPLATES_OPTION = None,
    emoji: EMOJI_OPTION = None,
    color: COLOR_OPTION = None,
    debug: DEBUG_OPTION = False,
) -> None:
    """Create a new function from a template."""

    options = build_new_options(
        root=root,
        args=args,
        language=language,
        template=template,
        name=name,
        file_name=file_name,
        auth_level=auth_level,
        csx=csx,
        templates=templates,
        emoji=emoji,
        color=color,
        debug=debug,
    )
    configure_diagnostics(debug=options.debug)
    fallback_logger = build_cli_logger(emoji=options.emoji is not False, debug=options.debug)
    try:
        config = load_config(options.root)
    except ScaffoldError as exc:
        fallback_logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    use_emoji = config.emoji if options.emoji is None else options.emoji
    use_color = config.color if options.color is None else options.color
    logger = build_cli_logger(emoji=use_emoji, debug=options.debug, no_color=not use_color)
    try:
        run_new(options, config=config, logger=logger)
    except ScaffoldError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    except (OSError, ValueError) as exc:
        logger.fail(f"Unable to finish creating the function: {exc}")
        raise typer.Exit(code=1) from exc
    raise typer.Exit(code=0)


__all__ = ["new_command", "run_new"]
