# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Detect which programming model generation a project is written against.

Two independent checks exist. Python projects use the newer decorator model when
``function_app.py`` is present. Node.js projects use the newer model when
``package.json`` depends on ``@azure/functions`` with a major version of at least
four. Classification is best effort: a missing or malformed manifest simply means
"classic model".
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from .constants import NODE_FUNCTIONS_PACKAGE, NODE_NEW_MODEL_MIN_MAJOR
from .probe import ProjectStateProbe
from .runtimes import Languages, WorkerRuntime

LOGGER = logging.getLogger(__name__)


def parse_leading_major(version: str) -> int | None:
    """Return the leading major version number of a dependency specifier.

    Any non-digit prefix such as ``^``, ``~`` or ``>=`` is stripped first; the
    digits that follow are read as the major version and everything after them
    (minor, patch, pre-release and build metadata) is ignored.

    Args:
        version: Raw version string from a ``package.json`` dependency entry.

    Returns:
        int | None: Major version, or ``None`` when no digit follows the prefix.

    Examples:
        >>> parse_leading_major("^4.0.0")
        4
        >>> parse_leading_major(">=4.1.0-beta.2+build")
        4
        >>> parse_leading_major("latest") is None
        True
    """

    index = 0
    while index < len(version) and not version[index].isdigit():
        index += 1
    end = index
    while end < len(version) and version[end].isdigit():
        end += 1
    if end == index:
        return None
    return int(version[index:end])


def is_new_node_version(version: object) -> bool:
    """Return ``True`` when ``version`` names the new Node.js model package."""

    if not isinstance(version, str):
        return False
    major = parse_leading_major(version.strip())
    return major is not None and major >= NODE_NEW_MODEL_MIN_MAJOR


@dataclass(frozen=True, slots=True)
class ProgrammingModelClassifier:
    """Answer the per-language programming model questions for one project."""

    probe: ProjectStateProbe

    def is_new_python_model(self, language: str | None) -> bool:
        """Return ``True`` for Python projects authored with ``function_app.py``."""

        if language is None or language.strip().lower() != Languages.PYTHON.lower():
            return False
        return self.probe.has_python_model_marker()

    def is_new_node_model(self, runtime: WorkerRuntime) -> bool:
        """Return ``True`` for Node.js projects on ``@azure/functions`` v4 or later."""

        if runtime is not WorkerRuntime.NODE:
            return False
        try:
            manifest = self.probe.read_package_manifest()
            if manifest is None:
                return False
            payload = json.loads(manifest)
        except (OSError, ValueError) as exc:
            LOGGER.debug("treating project as classic node model: %s", exc)
            return False
        if not isinstance(payload, dict):
            return False
        dependencies = payload.get("dependencies")
        if not isinstance(dependencies, dict):
            return False
        return is_new_node_version(dependencies.get(NODE_FUNCTIONS_PACKAGE))


__all__ = ["ProgrammingModelClassifier", "is_new_node_version", "parse_leading_major"]
