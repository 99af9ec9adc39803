# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for HTTP authorization level configuration."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from funcscaffold.authorization import AuthorizationLevel, configure_authorization_level
from funcscaffold.catalog import Template
from funcscaffold.errors import InapplicableOperationError


def test_level_is_written_to_a_copy(template_factory: Callable[..., Template]) -> None:
    template = template_factory(
        "HttpTrigger-JavaScript",
        bindings=[
            {"type": "httpTrigger", "authLevel": "function", "name": "req"},
            {"type": "http", "direction": "out"},
        ],
    )

    configured = configure_authorization_level(template, AuthorizationLevel.ANONYMOUS)

    assert configured.bindings[0]["authLevel"] == "Anonymous"
    assert "authLevel" not in configured.bindings[1]
    assert template.bindings[0]["authLevel"] == "function"


def test_only_first_http_binding_is_updated(template_factory: Callable[..., Template]) -> None:
    template = template_factory(
        "HttpTrigger-Custom",
        bindings=[
            {"type": "HTTPTRIGGER", "name": "first"},
            {"type": "httpTrigger", "name": "second"},
        ],
    )

    configured = configure_authorization_level(template, AuthorizationLevel.ADMIN)

    assert configured.bindings[0]["authLevel"] == "Admin"
    assert "authLevel" not in configured.bindings[1]


@pytest.mark.parametrize(
    "bindings",
    [
        [],
        [{"type": "timerTrigger"}],
        [{"type": "HttpTrigger"}],
    ],
)
def test_templates_without_http_trigger_are_rejected(
    template_factory: Callable[..., Template],
    bindings: list[dict[str, str]],
) -> None:
    template = template_factory("Other", bindings=bindings)

    with pytest.raises(InapplicableOperationError, match="applicable to templates that use HTTP trigger"):
        configure_authorization_level(template, AuthorizationLevel.FUNCTION)


def test_parse_levels() -> None:
    assert AuthorizationLevel.parse(" ADMIN ") is AuthorizationLevel.ADMIN
    assert AuthorizationLevel.FUNCTION.binding_value == "Function"
    with pytest.raises(ValueError, match="Allowed values"):
        AuthorizationLevel.parse("public")
