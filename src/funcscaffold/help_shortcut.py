# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Recognise ``new <TriggerName> help`` in new-model Python projects."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .catalog import TemplateCatalog
from .constants import HELP_KEYWORD, PYTHON_MODEL_REFERENCE_URL
from .probe import ProjectStateProbe
from .runtimes import Languages


class HelpShortcutState(Enum):
    """Whether the help shortcut recognised the invocation."""

    INERT = "inert"
    TRIGGERED = "triggered"


def _squash(name: str) -> str:
    return "".join(name.split())


@dataclass(slots=True)
class HelpShortcutInterceptor:
    """Two-state recogniser for the trigger help shortcut."""

    probe: ProjectStateProbe
    catalog: TemplateCatalog
    state: HelpShortcutState = HelpShortcutState.INERT
    trigger_name: str | None = None

    @property
    def triggered(self) -> bool:
        """Return ``True`` once the shortcut recognised the invocation."""

        return self.state is HelpShortcutState.TRIGGERED

    async def inspect(self, args: Sequence[str]) -> HelpShortcutState:
        """Examine the raw positional arguments and update the state.

        The shortcut only applies to projects with ``function_app.py`` and to
        exactly two arguments: a Python template name (spaces removed) followed by
        ``help``.
        """

        if not self.probe.has_python_model_marker() or len(args) != 2:
            return self.state
        trigger_name, keyword = args
        if keyword.lower() != HELP_KEYWORD:
            return self.state
        if await self.is_python_trigger_name(trigger_name):
            self.state = HelpShortcutState.TRIGGERED
            self.trigger_name = trigger_name
        return self.state

    async def is_python_trigger_name(self, trigger_name: str) -> bool:
        """Return ``True`` when ``trigger_name`` names a Python template."""

        await self.catalog.load()
        wanted = _squash(trigger_name).lower()
        return any(
            _squash(name).lower() == wanted for name in self.catalog.template_names(Languages.PYTHON)
        )

    def message(self) -> str:
        """Return the informational text printed for the recognised trigger."""

        return (
            f"Did you know about {self.trigger_name}? There is a new Python programming model "
            "with fewer files and a decorator based approach. Add the trigger to function_app.py "
            f"with a decorator; learn how at {PYTHON_MODEL_REFERENCE_URL}"
        )


__all__ = ["HelpShortcutInterceptor", "HelpShortcutState"]
