# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Access to ``local.settings.json`` and the files around it."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from .constants import LOCAL_SETTINGS_FILE_NAME, SETTINGS_VALUES_KEY, WORKER_RUNTIME_SETTING
from .context import ProjectContext
from .runtimes import WorkerRuntime, normalize_worker_runtime

LOGGER = logging.getLogger(__name__)


class FileSystemSettingsStore:
    """Settings store backed by the local file system."""

    def file_exists(self, path: str) -> bool:
        """Return ``True`` when ``path`` is an existing regular file."""

        return Path(path).is_file()

    def read_all_text(self, path: str) -> str:
        return Path(path).read_text(encoding="utf-8")

    def write_all_text(self, path: str, text: str) -> None:
        """Write ``text`` to ``path``, creating parent directories."""

        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")

    def glob(self, directory: str, pattern: str) -> Sequence[str]:
        """Return files under ``directory`` matching ``pattern``, sorted."""

        base = Path(directory)
        if not base.is_dir():
            return ()
        return tuple(str(path) for path in sorted(base.glob(pattern)) if path.is_file())


def read_local_settings(context: ProjectContext) -> dict[str, Any]:
    """Return the parsed ``local.settings.json`` payload, or an empty mapping.

    Missing, unreadable and malformed files all read as empty settings.
    """

    path = context.path(LOCAL_SETTINGS_FILE_NAME)
    if not context.store.file_exists(path):
        return {}
    try:
        payload = json.loads(context.store.read_all_text(path))
    except (OSError, ValueError) as exc:
        LOGGER.debug("ignoring unreadable %s: %s", path, exc)
        return {}
    return payload if isinstance(payload, dict) else {}


def persist_worker_runtime(context: ProjectContext, runtime: WorkerRuntime) -> None:
    """Record ``runtime`` in ``local.settings.json`` keeping every other key."""

    settings = read_local_settings(context)
    values = settings.get(SETTINGS_VALUES_KEY)
    if not isinstance(values, dict):
        values = {}
        settings[SETTINGS_VALUES_KEY] = values
    values[WORKER_RUNTIME_SETTING] = runtime.value
    settings.setdefault("IsEncrypted", False)
    context.store.write_all_text(
        context.path(LOCAL_SETTINGS_FILE_NAME),
        json.dumps(settings, indent=2) + "\n",
    )
    LOGGER.debug("persisted %s=%s", WORKER_RUNTIME_SETTING, runtime.value)


def set_worker_runtime(context: ProjectContext, language: str) -> WorkerRuntime:
    """Derive the runtime from ``language``, persist it, and return it."""

    runtime = normalize_worker_runtime(language)
    persist_worker_runtime(context, runtime)
    return runtime


__all__ = [
    "FileSystemSettingsStore",
    "persist_worker_runtime",
    "read_local_settings",
    "set_worker_runtime",
]
