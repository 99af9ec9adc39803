# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType, SimpleNamespace
from typing import Any

import pytest

from funcscaffold.authorization import AuthorizationLevel
from funcscaffold.catalog import JsonCatalogProvider, Template, TemplateCatalog
from funcscaffold.context import ProjectContext
from funcscaffold.runtimes import WorkerRuntime
from funcscaffold.settings import FileSystemSettingsStore


@dataclass
class ScriptedWizard:
    """Answer prompts from a fixed script and record what was asked."""

    answers: list[str] = field(default_factory=list)
    prompts: list[tuple[str, tuple[str, ...]]] = field(default_factory=list)

    def select(self, label: str, options: Sequence[str]) -> str:
        self.prompts.append((label, tuple(options)))
        answer = self.answers.pop(0)
        assert answer in options
        return answer

    def ask(self, prompt: str) -> str:
        self.prompts.append(("ask", (prompt,)))
        return self.answers.pop(0) if self.answers else ""


@dataclass
class FakeBootstrap:
    runtime: WorkerRuntime = WorkerRuntime.NONE
    language: str | None = None
    calls: int = 0

    async def run(self, context: ProjectContext) -> tuple[WorkerRuntime, str | None]:
        del context
        self.calls += 1
        return self.runtime, self.language


@dataclass
class RecordingDeployer:
    deployed: list[tuple[str, str, Template]] = field(default_factory=list)

    async def deploy(self, function_name: str, file_name: str, template: Template) -> None:
        self.deployed.append((function_name, file_name, template))


@dataclass
class RecordingDotnetDeployer:
    calls: list[dict[str, Any]] = field(default_factory=list)

    def templates(self, runtime: WorkerRuntime) -> Sequence[str]:
        del runtime
        return ("HttpTrigger", "TimerTrigger")

    async def deploy(
        self,
        template_name: str,
        class_name: str,
        namespace: str,
        language: str,
        runtime: WorkerRuntime,
        auth_level: AuthorizationLevel | None,
    ) -> None:
        self.calls.append(
            {
                "template_name": template_name,
                "class_name": class_name,
                "namespace": namespace,
                "language": language,
                "runtime": runtime,
                "auth_level": auth_level,
            },
        )


@dataclass
class StaticHostChecks:
    bundle: bool = False
    tools: frozenset[str] = frozenset()

    def is_extension_bundle_configured(self) -> bool:
        return self.bundle

    def command_exists(self, name: str) -> bool:
        return name in self.tools


@dataclass
class CountingProvider:
    templates: list[Template]
    calls: int = 0

    async def fetch_templates(self) -> list[Template]:
        self.calls += 1
        return list(self.templates)


@pytest.fixture
def make_context(tmp_path: Path) -> Callable[..., ProjectContext]:
    """Return a factory building contexts rooted at ``tmp_path``."""

    def _factory(
        *,
        environ: Mapping[str, str] | None = None,
        interactive: bool = True,
        root: Path | None = None,
    ) -> ProjectContext:
        return ProjectContext(
            root=root or tmp_path,
            store=FileSystemSettingsStore(),
            environ=MappingProxyType(dict(environ or {})),
            interactive=interactive,
        )

    return _factory


@pytest.fixture
def context(make_context: Callable[..., ProjectContext]) -> ProjectContext:
    return make_context()


@pytest.fixture
def write_settings(tmp_path: Path) -> Callable[[str | None], Path]:
    """Return a helper writing ``local.settings.json`` with an optional runtime."""

    def _write(runtime: str | None, root: Path | None = None) -> Path:
        values: dict[str, str] = {"AzureWebJobsStorage": ""}
        if runtime is not None:
            values["FUNCTIONS_WORKER_RUNTIME"] = runtime
        path = (root or tmp_path) / "local.settings.json"
        path.write_text(json.dumps({"IsEncrypted": False, "Values": values}), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def bundled_catalog() -> TemplateCatalog:
    return TemplateCatalog(JsonCatalogProvider())


@pytest.fixture
def wizard_factory() -> Callable[..., ScriptedWizard]:
    def _factory(*answers: str) -> ScriptedWizard:
        return ScriptedWizard(answers=list(answers))

    return _factory


@pytest.fixture
def fakes() -> Any:
    """Expose the fake collaborator classes to test modules."""

    return SimpleNamespace(
        wizard=ScriptedWizard,
        bootstrap=FakeBootstrap,
        deployer=RecordingDeployer,
        dotnet_deployer=RecordingDotnetDeployer,
        checks=StaticHostChecks,
        provider=CountingProvider,
    )


def make_template(
    template_id: str,
    *,
    name: str = "HTTP trigger",
    language: str = "JavaScript",
    bindings: list[dict[str, Any]] | None = None,
    programming_model: bool = False,
    extensions: list[dict[str, Any]] | None = None,
    files: dict[str, str] | None = None,
) -> Template:
    return Template.model_validate(
        {
            "id": template_id,
            "metadata": {
                "name": name,
                "language": language,
                "defaultFunctionName": "HttpTrigger",
                "programmingModel": programming_model,
                "extensions": extensions,
            },
            "function": {"bindings": bindings} if bindings is not None else {},
            "files": files or {},
        },
    )


@pytest.fixture
def template_factory() -> Callable[..., Template]:
    return make_template
