# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exception hierarchy raised while resolving and creating functions."""

from __future__ import annotations


class ScaffoldError(RuntimeError):
    """Base error for failures that terminate a ``new`` invocation."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


class ConfigurationConflictError(ScaffoldError):
    """Raised when an explicit language disagrees with the persisted worker runtime."""


class TemplateNotFoundError(ScaffoldError):
    """Raised when no catalog template matches the requested name and language."""

    def __init__(self, template_name: str, language: str) -> None:
        super().__init__(f'Can\'t find template "{template_name}" in "{language}"')
        self.template_name = template_name
        self.language = language


class PreconditionError(ScaffoldError):
    """Raised when a template requirement is not satisfied on this host."""


class InapplicableOperationError(ScaffoldError):
    """Raised when an option does not apply to the selected template."""


class MissingInputError(ScaffoldError):
    """Raised when a non-interactive run lacks required options."""


class UnknownLanguageError(ScaffoldError):
    """Raised when a language identifier does not map to any worker runtime."""


class DeployError(ScaffoldError):
    """Raised when a deploy collaborator cannot materialise a template."""


class ConfigError(ScaffoldError):
    """Raised when configuration input is invalid."""


class CatalogError(ScaffoldError):
    """Raised when the template catalog cannot be read or validated."""


__all__ = [
    "CatalogError",
    "ConfigError",
    "ConfigurationConflictError",
    "DeployError",
    "InapplicableOperationError",
    "MissingInputError",
    "PreconditionError",
    "ScaffoldError",
    "TemplateNotFoundError",
    "UnknownLanguageError",
]
