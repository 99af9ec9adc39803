# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for console prompts and diagnostic logging."""

from __future__ import annotations

import io
import logging
from typing import Any

import pytest
from rich.console import Console
from rich.logging import RichHandler

from funcscaffold.cli import prompts
from funcscaffold.cli.prompts import ConsoleSelectionWizard
from funcscaffold.cli.shared import CLILogger
from funcscaffold.core.logging import configure_diagnostics
from funcscaffold.errors import MissingInputError, ScaffoldError


def _console() -> Console:
    return Console(file=io.StringIO(), width=120, color_system=None)


def test_redirected_wizard_fails_fast() -> None:
    wizard = ConsoleSelectionWizard(console=_console(), interactive=False)

    with pytest.raises(MissingInputError, match="--worker-runtime explicitly"):
        wizard.select("worker runtime", ["node", "python"])
    with pytest.raises(MissingInputError, match="--name explicitly"):
        wizard.ask("Function name: ")


def test_wizard_lists_numbered_options(monkeypatch: pytest.MonkeyPatch) -> None:
    console = _console()
    captured: dict[str, Any] = {}

    def _fake_ask(*args: Any, **kwargs: Any) -> int:
        captured.update(kwargs)
        return 2

    monkeypatch.setattr(prompts.IntPrompt, "ask", _fake_ask)
    wizard = ConsoleSelectionWizard(console=console)

    assert wizard.select("language", ["JavaScript", "TypeScript"]) == "TypeScript"
    output = console.file.getvalue()
    assert "Select a number for language:" in output
    assert "1. JavaScript" in output
    assert captured["choices"] == ["1", "2"]
    with pytest.raises(ScaffoldError):
        wizard.select("template", [])


def test_debug_messages_only_when_enabled() -> None:
    console = _console()
    CLILogger(console=console, use_emoji=False).debug("skipped=1")
    CLILogger(console=console, use_emoji=False, debug_enabled=True).debug("language=Python template=Timer")

    output = console.file.getvalue()
    assert "skipped" not in output
    assert "[debug] language=Python template=Timer" in output


def test_configure_diagnostics_toggles_rich_handler() -> None:
    logger = logging.getLogger("funcscaffold")

    configure_diagnostics(debug=True)
    configure_diagnostics(debug=True)
    assert sum(isinstance(handler, RichHandler) for handler in logger.handlers) == 1
    assert logger.level == logging.DEBUG

    configure_diagnostics(debug=False)
    assert not any(isinstance(handler, RichHandler) for handler in logger.handlers)
    assert logger.level == logging.NOTSET
