# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Orchestrate the creation of a function from a template."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .authorization import AuthorizationLevel, configure_authorization_level
from .catalog import TemplateCatalog
from .collaborators import (
    DotnetCliDeployer,
    FileSystemDeployer,
    HostJsonExtensionBundleChecker,
    LocalSettingsBootstrap,
    PathToolChecker,
)
from .constants import NODE_MODEL_REFERENCE_URL, PYTHON_MODEL_FILE_NAME, PYTHON_MODEL_REFERENCE_URL
from .context import ProjectContext
from .errors import MissingInputError, UnknownLanguageError
from .help_shortcut import HelpShortcutInterceptor
from .interfaces import (
    BootstrapCollaborator,
    CatalogProvider,
    DeployCollaborator,
    DotnetDeployCollaborator,
    ExtensionBundleChecker,
    HostToolChecker,
    SelectionWizard,
)
from .naming import sanitize_class_name, sanitize_namespace
from .post_deploy import apply_post_deploy_tasks
from .probe import ProjectStateProbe
from .programming_model import ProgrammingModelClassifier
from .resolver import ResolvedRuntime, RuntimeResolver
from .runtimes import Languages, WorkerRuntime, default_template_language, is_dotnet, normalize_language
from .selector import TemplateFilter, TemplateSelector
from .telemetry import CommandTelemetry

LOGGER = logging.getLogger(__name__)

REDIRECTED_INPUT_MESSAGE = (
    "Running with stdin/stdout redirected. Command must specify --template, and --name explicitly."
)
PYTHON_MODEL_AWARENESS_MESSAGE = (
    "Did you know? There is a new Python programming model with fewer files and a decorator "
    f"based approach. Learn more at {PYTHON_MODEL_REFERENCE_URL}"
)
NODE_MODEL_AWARENESS_MESSAGE = (
    "Did you know? There is a new Node.js programming model (@azure/functions v4) with a "
    f"code-centric approach to triggers and bindings. Learn more at {NODE_MODEL_REFERENCE_URL}"
)


@dataclass(frozen=True, slots=True)
class CreateFunctionRequest:
    """User input for one ``new`` invocation."""

    language: str | None = None
    template_name: str | None = None
    function_name: str | None = None
    file_name: str = PYTHON_MODEL_FILE_NAME
    auth_level: AuthorizationLevel | None = None
    legacy: bool = False
    args: tuple[str, ...] = ()


@dataclass(slots=True)
class CreationResult:
    """Outcome of a ``new`` invocation.

    Attributes:
        created: ``False`` when the run ended at the trigger help shortcut.
        notices: Informational messages to show after the run.
    """

    created: bool
    function_name: str | None = None
    template_name: str | None = None
    runtime: WorkerRuntime = WorkerRuntime.NONE
    language: str | None = None
    notices: list[str] = field(default_factory=list)

    @property
    def confirmation(self) -> str:
        """Return the success line printed after a function was created."""

        return (
            f'The function "{self.function_name}" was created successfully '
            f'from the "{self.template_name}" template.'
        )


@dataclass(slots=True)
class CreateFunctionWorkflow:
    """Wire the resolution engine to its collaborators and run it."""

    context: ProjectContext
    catalog: TemplateCatalog
    wizard: SelectionWizard
    bootstrap: BootstrapCollaborator
    deployer: DeployCollaborator
    dotnet_deployer: DotnetDeployCollaborator
    bundle_checker: ExtensionBundleChecker
    tool_checker: HostToolChecker
    telemetry: CommandTelemetry = field(default_factory=CommandTelemetry)
    probe: ProjectStateProbe = field(init=False)
    classifier: ProgrammingModelClassifier = field(init=False)
    resolver: RuntimeResolver = field(init=False)
    selector: TemplateSelector = field(init=False)

    def __post_init__(self) -> None:
        self.probe = ProjectStateProbe(self.context)
        self.classifier = ProgrammingModelClassifier(self.probe)
        self.resolver = RuntimeResolver(
            context=self.context,
            probe=self.probe,
            catalog=self.catalog,
            wizard=self.wizard,
            bootstrap=self.bootstrap,
        )
        self.selector = TemplateSelector(
            catalog=self.catalog,
            telemetry=self.telemetry,
            bundle_checker=self.bundle_checker,
            tool_checker=self.tool_checker,
        )

    async def run(self, request: CreateFunctionRequest) -> CreationResult:
        """Create a function for ``request``.

        Raises:
            ScaffoldError: For every failure that should end the command.
        """

        resolved: ResolvedRuntime | None = None
        interceptor = HelpShortcutInterceptor(self.probe, self.catalog)
        await interceptor.inspect(request.args)
        if interceptor.triggered:
            language = request.language
            if not language:
                resolved = await self.resolver.resolve(None, legacy=request.legacy)
                language = resolved.language
            if self.classifier.is_new_python_model(language):
                return CreationResult(created=False, language=language, notices=[interceptor.message()])

        self.validate_inputs(request)
        if resolved is None:
            resolved = await self.resolver.resolve(request.language, legacy=request.legacy)
        LOGGER.debug("resolved runtime=%s language=%s", resolved.runtime, resolved.language)

        if is_dotnet(resolved.runtime) and not request.legacy:
            return await self._create_dotnet_function(request, resolved)
        return await self._create_from_catalog(request, resolved)

    def validate_inputs(self, request: CreateFunctionRequest) -> None:
        """Require template and function names when prompts are impossible."""

        if self.context.interactive:
            return
        if not request.template_name or not request.function_name:
            raise MissingInputError(REDIRECTED_INPUT_MESSAGE)

    def _template_language(self, resolved: ResolvedRuntime) -> str:
        try:
            return normalize_language(resolved.language)
        except UnknownLanguageError:
            return default_template_language(resolved.runtime)

    def _function_name(self, request: CreateFunctionRequest, default: str) -> str:
        if request.function_name:
            return request.function_name
        answer = self.wizard.ask(f"Function name: [{default}] " if default else "Function name: ")
        return answer.strip() or default

    async def _create_from_catalog(
        self,
        request: CreateFunctionRequest,
        resolved: ResolvedRuntime,
    ) -> CreationResult:
        template_language = self._template_language(resolved)
        self.telemetry.record("language", template_language)
        await self.catalog.load()
        template_name = request.template_name or self.wizard.select(
            "template",
            self.catalog.template_names(template_language),
        )

        new_python_model = self.classifier.is_new_python_model(template_language)
        new_node_model = self.classifier.is_new_node_model(resolved.runtime)
        template_filter = TemplateFilter.for_project(
            new_python_model=new_python_model,
            new_node_model=new_node_model,
        )
        template = self.selector.select(template_name, template_language, template_filter)
        if request.auth_level is not None:
            template = configure_authorization_level(template, request.auth_level)

        function_name = self._function_name(request, template.metadata.default_function_name)
        if not function_name:
            raise MissingInputError("A function name is required.")
        await self.deployer.deploy(function_name, request.file_name, template)
        apply_post_deploy_tasks(
            self.context,
            function_name,
            template_language,
            new_node_model=new_node_model,
        )

        notices: list[str] = []
        if template_language == Languages.PYTHON and not new_python_model:
            notices.append(PYTHON_MODEL_AWARENESS_MESSAGE)
        if resolved.runtime is WorkerRuntime.NODE and not new_node_model:
            notices.append(NODE_MODEL_AWARENESS_MESSAGE)
        return CreationResult(
            created=True,
            function_name=function_name,
            template_name=template_name,
            runtime=resolved.runtime,
            language=template_language,
            notices=notices,
        )

    async def _create_dotnet_function(
        self,
        request: CreateFunctionRequest,
        resolved: ResolvedRuntime,
    ) -> CreationResult:
        language = resolved.language or default_template_language(resolved.runtime)
        template_name = request.template_name or self.wizard.select(
            "template",
            list(self.dotnet_deployer.templates(resolved.runtime)),
        )
        function_name = self._function_name(request, "")
        if not function_name:
            raise MissingInputError("A function name is required.")
        await self.dotnet_deployer.deploy(
            template_name.replace(" ", ""),
            sanitize_class_name(function_name),
            sanitize_namespace(self.context.root.name),
            language.replace("-isolated", ""),
            resolved.runtime,
            request.auth_level,
        )
        return CreationResult(
            created=True,
            function_name=function_name,
            template_name=template_name,
            runtime=resolved.runtime,
            language=language,
        )


def build_default_workflow(
    context: ProjectContext,
    wizard: SelectionWizard,
    *,
    catalog_provider: CatalogProvider,
    language: str | None = None,
    telemetry: CommandTelemetry | None = None,
) -> CreateFunctionWorkflow:
    """Return a workflow using the local-machine collaborators."""

    return CreateFunctionWorkflow(
        context=context,
        catalog=TemplateCatalog(catalog_provider),
        wizard=wizard,
        bootstrap=LocalSettingsBootstrap(wizard=wizard, language=language),
        deployer=FileSystemDeployer(context),
        dotnet_deployer=DotnetCliDeployer(context),
        bundle_checker=HostJsonExtensionBundleChecker(context),
        tool_checker=PathToolChecker(),
        telemetry=telemetry if telemetry is not None else CommandTelemetry(),
    )


__all__ = [
    "CreateFunctionRequest",
    "CreateFunctionWorkflow",
    "CreationResult",
    "build_default_workflow",
]
