# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Collaborator interfaces consumed by the resolution engine."""

# pylint: disable=too-few-public-methods -- protocols expose minimal method surfaces.

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .authorization import AuthorizationLevel
    from .catalog.models import Template
    from .context import ProjectContext
    from .runtimes import WorkerRuntime


@runtime_checkable
class SettingsStore(Protocol):
    """File access used for project settings and marker inspection."""

    def file_exists(self, path: str) -> bool:
        """Return ``True`` when ``path`` names an existing file."""

        raise NotImplementedError

    def read_all_text(self, path: str) -> str:
        """Return the text stored at ``path``."""

        raise NotImplementedError

    def write_all_text(self, path: str, text: str) -> None:
        """Replace the contents of ``path`` with ``text``."""

        raise NotImplementedError

    def glob(self, directory: str, pattern: str) -> Sequence[str]:
        """Return files directly under ``directory`` matching ``pattern``."""

        raise NotImplementedError


@runtime_checkable
class BootstrapCollaborator(Protocol):
    """Initialise a project that has no persisted settings yet."""

    async def run(self, context: ProjectContext) -> tuple[WorkerRuntime, str | None]:
        """Return the runtime and language the new project was created with."""

        raise NotImplementedError


@runtime_checkable
class CatalogProvider(Protocol):
    """Produce the raw template entries of the catalog."""

    async def fetch_templates(self) -> Sequence[Template]:
        """Return every template published by the catalog."""

        raise NotImplementedError


@runtime_checkable
class DeployCollaborator(Protocol):
    """Materialise a catalog template on disk."""

    async def deploy(self, function_name: str, file_name: str, template: Template) -> None:
        """Write ``template`` for ``function_name`` into the project."""

        raise NotImplementedError


@runtime_checkable
class DotnetDeployCollaborator(Protocol):
    """Create functions for the managed-language runtimes."""

    def templates(self, runtime: WorkerRuntime) -> Sequence[str]:
        """Return the template names available to ``runtime``."""

        raise NotImplementedError

    async def deploy(
        self,
        template_name: str,
        class_name: str,
        namespace: str,
        language: str,
        runtime: WorkerRuntime,
        auth_level: AuthorizationLevel | None,
    ) -> None:
        """Create the function class from ``template_name``."""

        raise NotImplementedError


@runtime_checkable
class ExtensionBundleChecker(Protocol):
    """Report whether the project configures an extension bundle."""

    def is_extension_bundle_configured(self) -> bool:
        """Return ``True`` when an extension bundle is configured."""

        raise NotImplementedError


@runtime_checkable
class HostToolChecker(Protocol):
    """Report whether a command-line tool is available on the host."""

    def command_exists(self, name: str) -> bool:
        """Return ``True`` when ``name`` can be executed."""

        raise NotImplementedError


@runtime_checkable
class SelectionWizard(Protocol):
    """Interactive console prompts."""

    def select(self, label: str, options: Sequence[str]) -> str:
        """Return one of ``options`` chosen by the user."""

        raise NotImplementedError

    def ask(self, prompt: str) -> str:
        """Return a line typed by the user (empty when nothing was entered)."""

        raise NotImplementedError


__all__ = [
    "BootstrapCollaborator",
    "CatalogProvider",
    "DeployCollaborator",
    "DotnetDeployCollaborator",
    "ExtensionBundleChecker",
    "HostToolChecker",
    "SelectionWizard",
    "SettingsStore",
]
