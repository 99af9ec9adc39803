# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Pick exactly one catalog template for a display name and language."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .catalog import Template, TemplateCatalog
from .constants import DOTNET_COMMAND, EXTENSIONS_NEED_DOTNET_MESSAGE, NODE_NEW_MODEL_ID_SUFFIX
from .errors import PreconditionError, TemplateNotFoundError
from .interfaces import ExtensionBundleChecker, HostToolChecker
from .telemetry import CommandTelemetry

LOGGER = logging.getLogger(__name__)

TemplatePredicate = Callable[[Template], bool]


class TemplateFilter(Enum):
    """Catalog subset eligible for the project's programming model."""

    CLASSIC = "classic"
    NEW_PYTHON_MODEL = "new-python-model"
    NEW_NODE_MODEL = "new-node-model"

    @classmethod
    def for_project(cls, *, new_python_model: bool, new_node_model: bool) -> TemplateFilter:
        """Return the filter implied by the classifier answers; Python wins ties."""

        if new_python_model:
            return cls.NEW_PYTHON_MODEL
        if new_node_model:
            return cls.NEW_NODE_MODEL
        return cls.CLASSIC


def names_match(left: str, right: str) -> bool:
    """Compare template names ignoring case and whitespace."""

    return "".join(left.split()).lower() == "".join(right.split()).lower()


def _model_predicate(template_filter: TemplateFilter) -> TemplatePredicate:
    if template_filter is TemplateFilter.NEW_PYTHON_MODEL:
        return lambda template: template.metadata.programming_model
    if template_filter is TemplateFilter.NEW_NODE_MODEL:
        return lambda template: template.id.endswith(NODE_NEW_MODEL_ID_SUFFIX)
    return lambda template: True


@dataclass(slots=True)
class TemplateSelector:
    """Filter the catalog and enforce template host requirements."""

    catalog: TemplateCatalog
    telemetry: CommandTelemetry
    bundle_checker: ExtensionBundleChecker
    tool_checker: HostToolChecker

    def find(self, template_name: str, language: str, template_filter: TemplateFilter) -> Template | None:
        """Return the first template matching name, language and model filter.

        The catalog is scanned in order so duplicate entries always resolve to the
        earliest one.
        """

        wanted_language = language.lower()
        in_model = _model_predicate(template_filter)
        for template in self.catalog.templates:
            if (
                names_match(template.metadata.name, template_name)
                and in_model(template)
                and template.metadata.language.lower() == wanted_language
            ):
                return template
        return None

    def select(self, template_name: str, language: str, template_filter: TemplateFilter) -> Template:
        """Return the template to deploy for ``template_name`` in ``language``.

        Args:
            template_name: Display name typed or chosen by the user.
            language: Canonical template language.
            template_filter: Programming model subset to search.

        Returns:
            Template: Matching catalog template.

        Raises:
            TemplateNotFoundError: If no template matches.
            PreconditionError: If the template needs extensions that cannot be installed.
        """

        template = self.find(template_name, language, template_filter)
        if template is None:
            self.telemetry.record("template", "N/A")
            raise TemplateNotFoundError(template_name, language)
        self.telemetry.record("template", template_name)
        LOGGER.debug("selected template id=%s filter=%s", template.id, template_filter.value)
        self.ensure_extensions_installable(template)
        return template

    def ensure_extensions_installable(self, template: Template) -> None:
        """Fail when ``template`` needs extensions but neither a bundle nor dotnet exists."""

        if template.metadata.extensions is None:
            return
        if self.bundle_checker.is_extension_bundle_configured():
            return
        if self.tool_checker.command_exists(DOTNET_COMMAND):
            return
        raise PreconditionError(
            f"The {template.metadata.name} template has extensions. {EXTENSIONS_NEED_DOTNET_MESSAGE}",
        )


__all__ = ["TemplateFilter", "TemplateSelector", "names_match"]
