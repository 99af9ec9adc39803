# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Output adapter shared by CLI commands."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from rich.console import Console
from rich.text import Text

from ..core.logging import fail as core_fail
from ..core.logging import info as core_info
from ..core.logging import ok as core_ok

_KEY_VALUE: Final[re.Pattern[str]] = re.compile(r"([\w-]+)=(\".*?\"|\S+)")


def highlight_pairs(message: str) -> Text:
    """Return ``message`` as a debug line with ``key=value`` pairs emphasised."""

    line = Text("[debug] ", style="bold cyan")
    position = 0
    for match in _KEY_VALUE.finditer(message):
        line.append(message[position : match.start()], style="dim")
        line.append(match.group(1), style="bold magenta")
        line.append("=", style="dim")
        line.append(match.group(2), style="bold green")
        position = match.end()
    line.append(message[position:], style="dim")
    return line


@dataclass(slots=True)
class CLILogger:
    """Print command output with the invocation's emoji and colour choices.

    Attributes:
        console: Console receiving debug lines.
        use_emoji: Prefix status lines with emoji glyphs.
        use_color: ``False`` forces plain output; ``True`` defers to terminal detection.
        debug_enabled: Print ``debug`` messages.
    """

    console: Console
    use_emoji: bool
    use_color: bool = True
    debug_enabled: bool = False

    def fail(self, message: str) -> None:
        """Print a failure line."""

        core_fail(message, use_emoji=self.use_emoji, use_color=self._color_override())

    def ok(self, message: str) -> None:
        """Print a success line."""

        core_ok(message, use_emoji=self.use_emoji, use_color=self._color_override())

    def info(self, message: str) -> None:
        """Print an informational line."""

        core_info(message, use_emoji=self.use_emoji, use_color=self._color_override())

    def debug(self, message: str) -> None:
        """Print ``message`` when debug output is enabled."""

        if self.debug_enabled:
            self.console.print(highlight_pairs(message))

    def _color_override(self) -> bool | None:
        return None if self.use_color else False


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` bound to a fresh console.

    Args:
        emoji: Whether status lines may include emoji glyphs.
        debug: Whether debug lines are printed.
        no_color: Whether colour output is disabled.

    Returns:
        CLILogger: Logger for one command invocation.
    """

    console = Console(no_color=no_color, highlight=False)
    return CLILogger(console=console, use_emoji=emoji, use_color=not no_color, debug_enabled=debug)


__all__ = ["CLILogger", "build_cli_logger", "highlight_pairs"]
