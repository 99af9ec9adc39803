# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Resolve the worker runtime and language a new function targets.

Resolution reconciles four sources: persisted project settings, the language the
user passed explicitly, file-system heuristics, and the languages advertised by the
template catalog. It runs as an ordered chain of strategies; each strategy either
resolves both values or reports that it is inconclusive, and the first strategy
that resolves ends the chain.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from .catalog import TemplateCatalog
from .context import ProjectContext
from .errors import ConfigurationConflictError, ScaffoldError, UnknownLanguageError
from .interfaces import BootstrapCollaborator, SelectionWizard
from .probe import ProjectStateProbe
from .runtimes import (
    Languages,
    WorkerRuntime,
    is_dotnet,
    languages_for_worker,
    normalize_worker_runtime,
)
from .settings import set_worker_runtime

LOGGER = logging.getLogger(__name__)

# Python has a dedicated project flow and is never offered by the generic wizard.
WIZARD_EXCLUDED_LANGUAGE = Languages.PYTHON


class ResolutionOutcome(Enum):
    """Result reported by a single resolution strategy."""

    RESOLVED = "resolved"
    INCONCLUSIVE = "inconclusive"


@dataclass(slots=True)
class ResolutionState:
    """Mutable runtime/language pair refined by the strategy chain."""

    runtime: WorkerRuntime
    language: str | None = None
    legacy: bool = False

    @property
    def has_language(self) -> bool:
        """Return ``True`` when a non-blank language is known."""

        return bool(self.language and self.language.strip())


@dataclass(frozen=True, slots=True)
class ResolvedRuntime:
    """Mutually consistent worker runtime and language."""

    runtime: WorkerRuntime
    language: str | None


ResolutionStrategy = Callable[[ResolutionState], Awaitable[ResolutionOutcome]]


def infer_language(runtime: WorkerRuntime, probe: ProjectStateProbe) -> str | None:
    """Guess the language of ``runtime`` from project files.

    An ``.fsproj`` file selects F# for both managed runtimes, a ``tsconfig.json``
    selects TypeScript for Node.js. Every other runtime is inconclusive.

    Returns:
        str | None: Inferred language, or ``None`` when nothing can be inferred.
    """

    if runtime is WorkerRuntime.DOTNET:
        return Languages.FSHARP if probe.has_fsproj() else Languages.CSHARP
    if runtime is WorkerRuntime.DOTNET_ISOLATED:
        return Languages.FSHARP_ISOLATED if probe.has_fsproj() else Languages.CSHARP_ISOLATED
    if runtime is WorkerRuntime.NODE:
        return Languages.TYPESCRIPT if probe.has_tsconfig() else Languages.JAVASCRIPT
    return None


def _distinct_casefold(values: Sequence[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for value in values:
        key = value.lower()
        if key not in seen:
            seen.add(key)
            ordered.append(value)
    return ordered


@dataclass(slots=True)
class RuntimeResolver:
    """Run the runtime/language precedence chain for one invocation."""

    context: ProjectContext
    probe: ProjectStateProbe
    catalog: TemplateCatalog
    wizard: SelectionWizard
    bootstrap: BootstrapCollaborator
    strategies: tuple[ResolutionStrategy, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.strategies = (
            self.bootstrap_missing_project,
            self.check_language_conflict,
            self.select_language_without_runtime,
            self.narrow_language_for_runtime,
            self.infer_dotnet_language,
            self.derive_runtime_from_language,
        )

    def initial_state(self, language: str | None, *, legacy: bool) -> ResolutionState:
        """Return the starting state from persisted settings and explicit input."""

        runtime = WorkerRuntime.parse(self.probe.persisted_worker_runtime())
        explicit = language.strip() if language and language.strip() else None
        return ResolutionState(runtime=runtime, language=explicit, legacy=legacy)

    async def resolve(self, language: str | None = None, *, legacy: bool = False) -> ResolvedRuntime:
        """Return the resolved runtime and language.

        Args:
            language: Language passed explicitly by the user, if any.
            legacy: ``True`` when legacy script (csx) functions were requested.

        Returns:
            ResolvedRuntime: Consistent runtime/language pair.

        Raises:
            ConfigurationConflictError: If ``language`` contradicts the persisted runtime.
            UnknownLanguageError: If a language does not map to any runtime.
        """

        state = self.initial_state(language, legacy=legacy)
        for strategy in self.strategies:
            outcome = await strategy(state)
            LOGGER.debug(
                "strategy=%s outcome=%s runtime=%s language=%s",
                getattr(strategy, "__name__", strategy),
                outcome.value,
                state.runtime,
                state.language,
            )
            if outcome is ResolutionOutcome.RESOLVED:
                return ResolvedRuntime(runtime=state.runtime, language=state.language)
        raise ScaffoldError("Unable to determine the worker runtime and language for this project.")

    async def bootstrap_missing_project(self, state: ResolutionState) -> ResolutionOutcome:
        """Initialise the project when no settings exist and adopt its choices."""

        if self.probe.has_persisted_settings():
            return ResolutionOutcome.INCONCLUSIVE
        runtime, language = await self.bootstrap.run(self.context)
        state.runtime = runtime
        state.language = language
        if state.runtime is not WorkerRuntime.NONE and state.has_language:
            return ResolutionOutcome.RESOLVED
        return ResolutionOutcome.INCONCLUSIVE

    async def check_language_conflict(self, state: ResolutionState) -> ResolutionOutcome:
        """Validate an explicit language against an already known runtime."""

        if state.runtime is WorkerRuntime.NONE or not state.has_language:
            return ResolutionOutcome.INCONCLUSIVE
        selected = normalize_worker_runtime(state.language or "")
        if selected is not state.runtime:
            raise ConfigurationConflictError(
                "Selected language doesn't match worker set in local.settings.json. "
                f"Selected worker is: {state.runtime} and selected language is: {selected}",
            )
        return ResolutionOutcome.RESOLVED

    async def select_language_without_runtime(self, state: ResolutionState) -> ResolutionOutcome:
        """Ask for a language when neither runtime nor language is known."""

        if state.runtime is not WorkerRuntime.NONE or state.has_language:
            return ResolutionOutcome.INCONCLUSIVE
        await self.catalog.load()
        options = [
            language
            for language in self.catalog.languages()
            if language.lower() != WIZARD_EXCLUDED_LANGUAGE.lower()
        ]
        state.language = self.wizard.select("language", options)
        state.runtime = set_worker_runtime(self.context, state.language)
        return ResolutionOutcome.RESOLVED

    async def narrow_language_for_runtime(self, state: ResolutionState) -> ResolutionOutcome:
        """Pick the language of a non-managed (or legacy script) runtime."""

        if state.has_language or state.runtime is WorkerRuntime.NONE:
            return ResolutionOutcome.INCONCLUSIVE
        if is_dotnet(state.runtime) and not state.legacy:
            return ResolutionOutcome.INCONCLUSIVE
        await self.catalog.load()
        aliases = languages_for_worker(state.runtime)
        candidates = _distinct_casefold(
            [language for language in self.catalog.languages() if language.lower() in aliases],
        )
        if len(candidates) == 1:
            state.language = candidates[0]
            return ResolutionOutcome.RESOLVED
        inferred = infer_language(state.runtime, self.probe)
        if inferred is not None:
            state.language = inferred
            return ResolutionOutcome.RESOLVED
        if not candidates:
            raise UnknownLanguageError(
                f"The template catalog has no languages for worker runtime '{state.runtime}'.",
            )
        state.language = self.wizard.select("language", candidates)
        return ResolutionOutcome.RESOLVED

    async def infer_dotnet_language(self, state: ResolutionState) -> ResolutionOutcome:
        """Infer C# or F# for the managed runtimes; this never fails."""

        if state.has_language or not is_dotnet(state.runtime) or state.legacy:
            return ResolutionOutcome.INCONCLUSIVE
        state.language = infer_language(state.runtime, self.probe)
        return ResolutionOutcome.RESOLVED

    async def derive_runtime_from_language(self, state: ResolutionState) -> ResolutionOutcome:
        """Persist the runtime implied by an explicit language."""

        if not state.has_language:
            return ResolutionOutcome.INCONCLUSIVE
        state.runtime = set_worker_runtime(self.context, state.language or "")
        return ResolutionOutcome.RESOLVED


__all__ = [
    "ResolutionOutcome",
    "ResolutionState",
    "ResolvedRuntime",
    "RuntimeResolver",
    "infer_language",
]
