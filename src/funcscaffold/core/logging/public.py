# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing status lines and diagnostic log routing."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.logging import RichHandler
from rich.text import Text

from ..console import output_console, stdout_is_terminal

_PACKAGE_LOGGER = "funcscaffold"


@dataclass(frozen=True, slots=True)
class _Status:
    glyph: str
    style: str


_INFO = _Status("ℹ️ ", "cyan")
_OK = _Status("✅ ", "green")
_FAIL = _Status("❌ ", "red")


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise an empty string."""

    return symbol if enable else ""


def _emit(msg: str, status: _Status, *, use_emoji: bool, use_color: bool | None) -> None:
    color = stdout_is_terminal() if use_color is None else use_color
    line = Text(f"{emoji(status.glyph, use_emoji)}{msg}", style=status.style if color else "")
    output_console(color=color, emoji=use_emoji).print(line)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an informational message.

    Args:
        msg: Text to print.
        use_emoji: Prefix the line with an emoji glyph.
        use_color: Force colour on or off; ``None`` follows terminal detection.
    """

    _emit(msg, _INFO, use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a success message."""

    _emit(msg, _OK, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message."""

    _emit(msg, _FAIL, use_emoji=use_emoji, use_color=use_color)


def configure_diagnostics(*, debug: bool) -> None:
    """Route package diagnostics through a Rich handler when ``debug`` is set.

    Repeated calls replace the handler instead of stacking another one.

    Args:
        debug: ``True`` to emit ``DEBUG`` records of the ``funcscaffold`` loggers.
    """

    logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    if not debug:
        logger.setLevel(logging.NOTSET)
        return
    handler = RichHandler(show_path=False, markup=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


__all__ = ["configure_diagnostics", "emoji", "fail", "info", "ok"]
