# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Language-specific patches applied after a template was deployed."""

from __future__ import annotations

import json
import logging

from .constants import FUNCTION_JSON_FILE_NAME, TYPESCRIPT_SCRIPT_FILE_TEMPLATE
from .context import ProjectContext
from .runtimes import Languages

LOGGER = logging.getLogger(__name__)


def apply_post_deploy_tasks(
    context: ProjectContext,
    function_name: str,
    language: str | None,
    *,
    new_node_model: bool = False,
) -> bool:
    """Patch the freshly created function for ``language``.

    Classic TypeScript functions get a ``scriptFile`` entry pointing at the
    compiled output in ``dist``. New-model Node.js functions have no
    ``function.json`` and are left alone. Read, parse and write failures
    propagate to the caller.

    Args:
        context: Project the function was deployed into.
        function_name: Name of the deployed function folder.
        language: Normalised template language.
        new_node_model: ``True`` when the project uses the new Node.js model.

    Returns:
        bool: ``True`` when a patch was applied.
    """

    if language != Languages.TYPESCRIPT or new_node_model:
        return False
    path = context.path(function_name, FUNCTION_JSON_FILE_NAME)
    function_definition = json.loads(context.store.read_all_text(path))
    if not isinstance(function_definition, dict):
        raise ValueError(f"{path}: expected a JSON object")
    function_definition["scriptFile"] = TYPESCRIPT_SCRIPT_FILE_TEMPLATE.format(function_name=function_name)
    context.store.write_all_text(path, json.dumps(function_definition, indent=2) + "\n")
    LOGGER.debug("patched scriptFile in %s", path)
    return True


__all__ = ["apply_post_deploy_tasks"]
