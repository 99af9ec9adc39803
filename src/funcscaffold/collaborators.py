# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Default collaborator implementations backed by the local machine."""

from __future__ import annotations

import asyncio
import json
import logging
import shutil
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Final

from .authorization import AuthorizationLevel
from .catalog import Template
from .constants import (
    DOTNET_COMMAND,
    DOTNET_TEMPLATES,
    FUNCTION_JSON_FILE_NAME,
    HOST_JSON_FILE_NAME,
    LOCAL_SETTINGS_FILE_NAME,
    SETTINGS_VALUES_KEY,
    WORKER_RUNTIME_SETTING,
)
from .context import ProjectContext
from .errors import DeployError
from .interfaces import SelectionWizard
from .runtimes import (
    WorkerRuntime,
    is_dotnet,
    normalize_language,
    normalize_worker_runtime,
    template_languages_for_worker,
)

LOGGER = logging.getLogger(__name__)

FUNCTION_NAME_PLACEHOLDER: Final[str] = "%functionName%"
PYTHON_APP_PREAMBLE: Final[str] = "import azure.functions as func\n\napp = func.FunctionApp()\n"
DEFAULT_EXTENSION_BUNDLE: Final[dict[str, str]] = {
    "id": "Microsoft.Azure.Functions.ExtensionBundle",
    "version": "[4.*, 5.0.0)",
}


def _read_json_object(context: ProjectContext, file_name: str) -> dict[str, Any] | None:
    path = context.path(file_name)
    if not context.store.file_exists(path):
        return None
    try:
        payload = json.loads(context.store.read_all_text(path))
    except (OSError, ValueError):
        return None
    return payload if isinstance(payload, dict) else None


@dataclass(frozen=True, slots=True)
class LocalSettingsBootstrap:
    """Initialise a bare project with ``local.settings.json`` and ``host.json``.

    The language passed on the command line wins; otherwise the user picks a
    worker runtime and, when the runtime has several languages, a language.
    """

    wizard: SelectionWizard
    language: str | None = None

    async def run(self, context: ProjectContext) -> tuple[WorkerRuntime, str | None]:
        """Write the project settings and return the chosen runtime and language.

        Args:
            context: Project being initialised.

        Returns:
            tuple[WorkerRuntime, str | None]: Runtime and language; the language is
            ``None`` for managed runtimes whose language is inferred later.
        """

        if self.language and self.language.strip():
            runtime = normalize_worker_runtime(self.language)
            language: str | None = normalize_language(self.language)
        else:
            choices = [runtime.value for runtime in WorkerRuntime if runtime is not WorkerRuntime.NONE]
            runtime = WorkerRuntime.parse(self.wizard.select("worker runtime", choices))
            languages = template_languages_for_worker(runtime)
            if len(languages) == 1:
                language = languages[0]
            elif is_dotnet(runtime):
                language = None
            else:
                language = self.wizard.select("language", languages)
        self._write_settings(context, runtime)
        LOGGER.debug("bootstrapped project runtime=%s language=%s", runtime, language)
        return runtime, language

    @staticmethod
    def _write_settings(context: ProjectContext, runtime: WorkerRuntime) -> None:
        settings = {
            "IsEncrypted": False,
            SETTINGS_VALUES_KEY: {
                WORKER_RUNTIME_SETTING: runtime.value,
                "AzureWebJobsStorage": "",
            },
        }
        context.store.write_all_text(
            context.path(LOCAL_SETTINGS_FILE_NAME),
            json.dumps(settings, indent=2) + "\n",
        )
        if context.file_exists(HOST_JSON_FILE_NAME):
            return
        host: dict[str, Any] = {"version": "2.0"}
        if not is_dotnet(runtime):
            host["extensionBundle"] = dict(DEFAULT_EXTENSION_BUNDLE)
        context.store.write_all_text(context.path(HOST_JSON_FILE_NAME), json.dumps(host, indent=2) + "\n")


@dataclass(frozen=True, slots=True)
class FileSystemDeployer:
    """Write template files into the project.

    Classic templates become a ``<name>/function.json`` folder. New-model Python
    templates are appended to the ``--file`` target, and new-model Node.js
    templates (no function definition) are written relative to the project root.
    """

    context: ProjectContext

    async def deploy(self, function_name: str, file_name: str, template: Template) -> None:
        """Write ``template`` into the project as ``function_name``.

        Args:
            function_name: Name of the new function.
            file_name: Target file for new-model Python templates.
            template: Template to materialise.

        Raises:
            DeployError: If a file the template would create already exists.
        """

        if template.metadata.programming_model:
            self._append_to_app_file(function_name, file_name, template)
        elif not template.function:
            self._write_root_files(function_name, template)
        else:
            self._write_function_folder(function_name, template)

    def _write_function_folder(self, function_name: str, template: Template) -> None:
        function_json = self.context.path(function_name, FUNCTION_JSON_FILE_NAME)
        if self.context.store.file_exists(function_json):
            raise DeployError(f'A function named "{function_name}" already exists.')
        self.context.store.write_all_text(function_json, json.dumps(template.function, indent=2) + "\n")
        for relative, content in template.files.items():
            target = self.context.path(function_name, relative)
            self.context.store.write_all_text(target, content.replace(FUNCTION_NAME_PLACEHOLDER, function_name))

    def _write_root_files(self, function_name: str, template: Template) -> None:
        for relative, content in template.files.items():
            target = self.context.path(relative.replace(FUNCTION_NAME_PLACEHOLDER, function_name))
            if self.context.store.file_exists(target):
                raise DeployError(f"{target} already exists.")
            self.context.store.write_all_text(target, content.replace(FUNCTION_NAME_PLACEHOLDER, function_name))

    def _append_to_app_file(self, function_name: str, file_name: str, template: Template) -> None:
        target = self.context.path(file_name)
        existing = (
            self.context.store.read_all_text(target)
            if self.context.store.file_exists(target)
            else PYTHON_APP_PREAMBLE
        )
        snippets = [content.replace(FUNCTION_NAME_PLACEHOLDER, function_name) for content in template.files.values()]
        self.context.store.write_all_text(target, existing.rstrip("\n") + "\n" + "".join(snippets))


@dataclass(frozen=True, slots=True)
class DotnetCliDeployer:
    """Create managed-language functions through ``dotnet new``."""

    context: ProjectContext

    def templates(self, runtime: WorkerRuntime) -> Sequence[str]:
        """Return the ``dotnet new`` template names offered for ``runtime``."""

        del runtime
        return DOTNET_TEMPLATES

    async def deploy(
        self,
        template_name: str,
        class_name: str,
        namespace: str,
        language: str,
        runtime: WorkerRuntime,
        auth_level: AuthorizationLevel | None,
    ) -> None:
        """Run ``dotnet new`` in the project root.

        Raises:
            DeployError: If ``dotnet`` is missing or the command fails.
        """

        executable = shutil.which(DOTNET_COMMAND)
        if executable is None:
            raise DeployError(f"Executable '{DOTNET_COMMAND}' was not found on PATH")
        args = [
            executable,
            "new",
            template_name,
            "--name",
            class_name,
            "--namespace",
            namespace,
            "--language",
            language,
        ]
        if auth_level is not None:
            args.extend(["--AccessRights", auth_level.binding_value])
        LOGGER.debug("running command=%s runtime=%s", " ".join(args), runtime)
        try:
            await asyncio.to_thread(
                subprocess.run,
                args,
                cwd=str(self.context.root),
                check=True,
                capture_output=True,
                text=True,
            )
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or exc.stdout or "").strip()
            raise DeployError(f"dotnet new {template_name} failed: {detail}") from exc


@dataclass(frozen=True, slots=True)
class HostJsonExtensionBundleChecker:
    """Report extension bundles declared in ``host.json``."""

    context: ProjectContext

    def is_extension_bundle_configured(self) -> bool:
        """Return ``True`` when ``host.json`` declares an ``extensionBundle`` object."""

        host = _read_json_object(self.context, HOST_JSON_FILE_NAME)
        return bool(host and isinstance(host.get("extensionBundle"), dict))


class PathToolChecker:
    """Look commands up on ``PATH``."""

    def command_exists(self, name: str) -> bool:
        """Return ``True`` when ``name`` resolves on ``PATH``."""

        return shutil.which(name) is not None


__all__ = [
    "DotnetCliDeployer",
    "FileSystemDeployer",
    "HostJsonExtensionBundleChecker",
    "LocalSettingsBootstrap",
    "PathToolChecker",
]
