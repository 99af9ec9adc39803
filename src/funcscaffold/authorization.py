# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""HTTP authorization level injection for HTTP-triggered templates."""

from __future__ import annotations

from enum import Enum

from .catalog import Template
from .constants import AUTH_LEVEL_ERROR_MESSAGE, AUTH_LEVEL_PROPERTY, HTTP_TRIGGER_BINDING_TYPE
from .errors import InapplicableOperationError


class AuthorizationLevel(str, Enum):
    """Authorization levels accepted on the command line."""

    FUNCTION = "function"
    ANONYMOUS = "anonymous"
    ADMIN = "admin"

    @property
    def binding_value(self) -> str:
        """Return the level as written into the binding, e.g. ``Anonymous``."""

        return self.value.capitalize()

    @classmethod
    def parse(cls, value: str) -> AuthorizationLevel:
        """Return the level named by ``value`` (case-insensitive).

        Raises:
            ValueError: If ``value`` is not a known level.
        """

        candidate = value.strip().lower()
        for level in cls:
            if level.value == candidate:
                return level
        allowed = ", ".join(level.value for level in cls)
        raise ValueError(f"Unknown authorization level '{value}'. Allowed values: [{allowed}]")


def configure_authorization_level(template: Template, level: AuthorizationLevel) -> Template:
    """Return a copy of ``template`` whose HTTP trigger uses ``level``.

    Applicability is decided by an exact ``httpTrigger`` type match; the binding
    that receives the level is the first whose type matches case-insensitively.
    The catalog entry itself is never modified.

    Raises:
        InapplicableOperationError: If the template has no HTTP trigger binding.
    """

    configured = template.detached_copy()
    bindings = configured.bindings
    if not any(binding.get("type") == HTTP_TRIGGER_BINDING_TYPE for binding in bindings):
        raise InapplicableOperationError(AUTH_LEVEL_ERROR_MESSAGE)
    for binding in bindings:
        binding_type = binding.get("type")
        if isinstance(binding_type, str) and binding_type.lower() == HTTP_TRIGGER_BINDING_TYPE.lower():
            binding[AUTH_LEVEL_PROPERTY] = level.binding_value
            break
    return configured


__all__ = ["AuthorizationLevel", "configure_authorization_level"]
