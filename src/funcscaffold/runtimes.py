# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Worker runtimes and the language tables that map onto them."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping

from .errors import UnknownLanguageError


class WorkerRuntime(str, Enum):
    """Execution hosts a function project can target."""

    DOTNET = "dotnet"
    DOTNET_ISOLATED = "dotnet-isolated"
    NODE = "node"
    PYTHON = "python"
    JAVA = "java"
    POWERSHELL = "powershell"
    CUSTOM = "custom"
    NONE = "None"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str | None) -> WorkerRuntime:
        """Return the runtime named by ``value`` or :attr:`NONE` when unknown.

        Args:
            value: Raw runtime string, typically read from persisted settings.

        Returns:
            WorkerRuntime: Matching runtime, compared case-insensitively.
        """

        if not value:
            return cls.NONE
        candidate = value.strip().lower()
        for runtime in cls:
            if runtime.value.lower() == candidate:
                return runtime
        return cls.NONE


class Languages:
    """Canonical template language identifiers."""

    CSHARP: Final[str] = "C#"
    CSHARP_ISOLATED: Final[str] = "C#-isolated"
    FSHARP: Final[str] = "F#"
    FSHARP_ISOLATED: Final[str] = "F#-isolated"
    JAVASCRIPT: Final[str] = "JavaScript"
    TYPESCRIPT: Final[str] = "TypeScript"
    PYTHON: Final[str] = "Python"
    JAVA: Final[str] = "Java"
    POWERSHELL: Final[str] = "PowerShell"
    CUSTOM: Final[str] = "Custom"


_WORKER_LANGUAGES: Final[Mapping[WorkerRuntime, tuple[str, ...]]] = MappingProxyType(
    {
        WorkerRuntime.DOTNET: ("c#", "csharp", "f#", "fsharp"),
        WorkerRuntime.DOTNET_ISOLATED: (
            "c#-isolated",
            "csharp-isolated",
            "f#-isolated",
            "fsharp-isolated",
        ),
        WorkerRuntime.NODE: ("js", "javascript", "typescript", "ts"),
        WorkerRuntime.PYTHON: ("py", "python"),
        WorkerRuntime.JAVA: ("java",),
        WorkerRuntime.POWERSHELL: ("pwsh", "powershell"),
        WorkerRuntime.CUSTOM: ("custom",),
    },
)

_CANONICAL_LANGUAGES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "c#": Languages.CSHARP,
        "csharp": Languages.CSHARP,
        "f#": Languages.FSHARP,
        "fsharp": Languages.FSHARP,
        "c#-isolated": Languages.CSHARP_ISOLATED,
        "csharp-isolated": Languages.CSHARP_ISOLATED,
        "f#-isolated": Languages.FSHARP_ISOLATED,
        "fsharp-isolated": Languages.FSHARP_ISOLATED,
        "js": Languages.JAVASCRIPT,
        "javascript": Languages.JAVASCRIPT,
        "ts": Languages.TYPESCRIPT,
        "typescript": Languages.TYPESCRIPT,
        "py": Languages.PYTHON,
        "python": Languages.PYTHON,
        "java": Languages.JAVA,
        "pwsh": Languages.POWERSHELL,
        "powershell": Languages.POWERSHELL,
        "custom": Languages.CUSTOM,
    },
)

_DEFAULT_TEMPLATE_LANGUAGES: Final[Mapping[WorkerRuntime, str]] = MappingProxyType(
    {
        WorkerRuntime.DOTNET: Languages.CSHARP,
        WorkerRuntime.DOTNET_ISOLATED: Languages.CSHARP_ISOLATED,
        WorkerRuntime.NODE: Languages.JAVASCRIPT,
        WorkerRuntime.PYTHON: Languages.PYTHON,
        WorkerRuntime.JAVA: Languages.JAVA,
        WorkerRuntime.POWERSHELL: Languages.POWERSHELL,
        WorkerRuntime.CUSTOM: Languages.CUSTOM,
    },
)


def is_dotnet(runtime: WorkerRuntime) -> bool:
    """Return ``True`` for the managed-language runtimes."""

    return runtime in (WorkerRuntime.DOTNET, WorkerRuntime.DOTNET_ISOLATED)


def languages_for_worker(runtime: WorkerRuntime) -> tuple[str, ...]:
    """Return the lower-case language aliases that imply ``runtime``."""

    return _WORKER_LANGUAGES.get(runtime, ())


def template_languages_for_worker(runtime: WorkerRuntime) -> tuple[str, ...]:
    """Return the canonical template languages of ``runtime`` in table order."""

    languages: list[str] = []
    for alias in languages_for_worker(runtime):
        canonical = _CANONICAL_LANGUAGES[alias]
        if canonical not in languages:
            languages.append(canonical)
    return tuple(languages)


def normalize_worker_runtime(language: str) -> WorkerRuntime:
    """Return the worker runtime implied by ``language``.

    Args:
        language: Language identifier or alias supplied by the user or catalog.

    Returns:
        WorkerRuntime: Runtime whose alias table contains ``language``.

    Raises:
        UnknownLanguageError: If ``language`` is not a known identifier.
    """

    candidate = language.strip().lower()
    for runtime, aliases in _WORKER_LANGUAGES.items():
        if candidate in aliases:
            return runtime
    supported = ", ".join(sorted(set(_CANONICAL_LANGUAGES.values()), key=str.lower))
    raise UnknownLanguageError(f"Unknown language '{language}'. Supported languages: {supported}")


def normalize_language(language: str | None) -> str:
    """Return the canonical template language for ``language``.

    Raises:
        UnknownLanguageError: If ``language`` is empty or unknown.
    """

    if language is None or not language.strip():
        raise UnknownLanguageError("Language is required")
    canonical = _CANONICAL_LANGUAGES.get(language.strip().lower())
    if canonical is None:
        raise UnknownLanguageError(f"Unknown language '{language}'")
    return canonical


def default_template_language(runtime: WorkerRuntime) -> str:
    """Return the template language used when ``runtime`` has no explicit language."""

    try:
        return _DEFAULT_TEMPLATE_LANGUAGES[runtime]
    except KeyError:
        raise UnknownLanguageError(f"Worker runtime '{runtime}' has no default language") from None


__all__ = [
    "Languages",
    "WorkerRuntime",
    "default_template_language",
    "is_dotnet",
    "languages_for_worker",
    "normalize_language",
    "normalize_worker_runtime",
    "template_languages_for_worker",
]
