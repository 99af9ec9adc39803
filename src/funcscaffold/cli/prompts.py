# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Interactive selection prompts rendered with Rich."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from rich.console import Console
from rich.prompt import IntPrompt, Prompt

from ..errors import MissingInputError, ScaffoldError


@dataclass(slots=True)
class ConsoleSelectionWizard:
    """Numbered-menu wizard reading answers from the console.

    Attributes:
        console: Console used for both the menu and the prompt.
        interactive: ``False`` when stdin/stdout are redirected; prompting then
            fails instead of blocking on input that will never arrive.
    """

    console: Console
    interactive: bool = True

    def select(self, label: str, options: Sequence[str]) -> str:
        """Display ``options`` and return the one the user picked."""

        self._require_interactive(label)
        if not options:
            raise ScaffoldError(f"No {label} options are available.")
        self.console.print(f"Select a number for {label}:")
        for index, option in enumerate(options, start=1):
            self.console.print(f"{index}. {option}")
        choice = IntPrompt.ask(
            "Choose option",
            console=self.console,
            choices=[str(index) for index in range(1, len(options) + 1)],
            show_choices=False,
        )
        selected = options[choice - 1]
        self.console.print(selected, style="bold")
        return selected

    def ask(self, prompt: str) -> str:
        """Return one line of user input for ``prompt``."""

        self._require_interactive("name")
        return Prompt.ask(prompt.rstrip(), console=self.console, default="", show_default=False)

    def _require_interactive(self, label: str) -> None:
        if not self.interactive:
            option = label.replace(" ", "-")
            raise MissingInputError(
                f"Running with stdin/stdout redirected. Command must specify --{option} explicitly.",
            )


__all__ = ["ConsoleSelectionWizard"]
