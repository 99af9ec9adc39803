# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console provisioning for user-facing output."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import cache

from rich.console import Console


def stdout_is_terminal() -> bool:
    """Return ``True`` when ``sys.stdout`` is attached to a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@dataclass(frozen=True, slots=True)
class ConsoleProfile:
    """Presentation flags selecting one shared console.

    Attributes:
        color: Whether styled output was requested.
        emoji: Whether rich may render emoji codes.
        terminal: Whether stdout was a terminal when the console was requested.
    """

    color: bool
    emoji: bool
    terminal: bool

    def build(self) -> Console:
        """Return a new console honouring the profile."""

        styled = self.color and self.terminal
        return Console(
            color_system="auto" if styled else None,
            force_terminal=self.terminal,
            no_color=not styled,
            emoji=self.emoji,
            soft_wrap=True,
        )


@cache
def console_for(profile: ConsoleProfile) -> Console:
    """Return the process-wide console for ``profile``."""

    return profile.build()


def output_console(*, color: bool, emoji: bool) -> Console:
    """Return the shared console for ``color``/``emoji`` on the current stdout."""

    return console_for(ConsoleProfile(color=color, emoji=emoji, terminal=stdout_is_terminal()))


__all__ = ["ConsoleProfile", "console_for", "output_console", "stdout_is_terminal"]
