# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Marker inspection for the current function project."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    FSPROJ_PATTERN,
    LOCAL_SETTINGS_FILE_NAME,
    PACKAGE_JSON_FILE_NAME,
    PYTHON_MODEL_FILE_NAME,
    SETTINGS_VALUES_KEY,
    TSCONFIG_FILE_NAME,
    WORKER_RUNTIME_SETTING,
)
from .context import ProjectContext
from .settings import read_local_settings


@dataclass(frozen=True, slots=True)
class ProjectStateProbe:
    """Report project markers without interpreting them."""

    context: ProjectContext

    def has_persisted_settings(self) -> bool:
        """Return ``True`` when ``local.settings.json`` exists."""

        return self.context.file_exists(LOCAL_SETTINGS_FILE_NAME)

    def persisted_worker_runtime(self) -> str | None:
        """Return the raw worker runtime setting, if any.

        The value stored under ``Values`` in ``local.settings.json`` wins over the
        environment variable of the same name.
        """

        values = read_local_settings(self.context).get(SETTINGS_VALUES_KEY)
        if isinstance(values, dict):
            stored = values.get(WORKER_RUNTIME_SETTING)
            if isinstance(stored, str) and stored.strip():
                return stored
        env_value = self.context.environ.get(WORKER_RUNTIME_SETTING)
        return env_value or None

    def has_fsproj(self) -> bool:
        """Return ``True`` when an F# project file sits in the project root."""

        return bool(self.context.store.glob(str(self.context.root), FSPROJ_PATTERN))

    def has_tsconfig(self) -> bool:
        """Return ``True`` when ``tsconfig.json`` exists."""

        return self.context.file_exists(TSCONFIG_FILE_NAME)

    def has_python_model_marker(self) -> bool:
        """Return ``True`` when ``function_app.py`` exists."""

        return self.context.file_exists(PYTHON_MODEL_FILE_NAME)

    def read_package_manifest(self) -> str | None:
        """Return the raw ``package.json`` text or ``None`` when it is absent."""

        path = self.context.path(PACKAGE_JSON_FILE_NAME)
        if not self.context.store.file_exists(path):
            return None
        return self.context.store.read_all_text(path)


__all__ = ["ProjectStateProbe"]
