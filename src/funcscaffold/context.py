# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Explicit invocation context threaded through the resolution engine."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from .interfaces import SettingsStore


def _stream_is_tty(stream: object) -> bool:
    try:
        return bool(getattr(stream, "isatty")())
    except (AttributeError, ValueError):
        return False


@dataclass(frozen=True, slots=True)
class ProjectContext:
    """Working directory, file access and environment of one invocation.

    Attributes:
        root: Project directory the function is created in.
        store: File access used for every read and write the engine performs.
        environ: Environment variables visible to the invocation.
        interactive: ``False`` when stdin or stdout is redirected.
    """

    root: Path
    store: SettingsStore
    environ: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    interactive: bool = True

    def path(self, *parts: str) -> str:
        """Return ``parts`` joined beneath the project root."""

        return str(self.root.joinpath(*parts))

    def file_exists(self, *parts: str) -> bool:
        """Return ``True`` when ``parts`` names an existing file beneath the root."""

        return self.store.file_exists(self.path(*parts))

    @classmethod
    def from_environment(cls, root: Path, *, store: SettingsStore | None = None) -> ProjectContext:
        """Build a context for ``root`` from the running process.

        Args:
            root: Project directory, resolved before use.
            store: Optional file access override; defaults to the real file system.

        Returns:
            ProjectContext: Context capturing environment and terminal state.
        """

        from .settings import FileSystemSettingsStore

        interactive = _stream_is_tty(sys.stdin) and _stream_is_tty(sys.stdout)
        return cls(
            root=root.resolve(),
            store=store if store is not None else FileSystemSettingsStore(),
            environ=MappingProxyType(dict(os.environ)),
            interactive=interactive,
        )


__all__ = ["ProjectContext"]
