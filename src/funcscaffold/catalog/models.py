# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Pydantic models describing template catalog entries."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TemplateMetadata(BaseModel):
    """Descriptive metadata attached to a catalog template."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str
    language: str
    default_function_name: str = Field(default="", alias="defaultFunctionName")
    programming_model: bool = Field(default=False, alias="programmingModel")
    extensions: list[dict[str, Any]] | None = None


class Template(BaseModel):
    """Scaffoldable function template as published in the catalog.

    Attributes:
        id: Catalog identity; new Node.js model entries end in ``-4.x``.
        metadata: Display name, owning language and model flags.
        function: Function definition body (the ``function.json`` payload).
        files: Source files keyed by relative file name.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    metadata: TemplateMetadata
    function: dict[str, Any] = Field(default_factory=dict)
    files: dict[str, str] = Field(default_factory=dict)

    @property
    def bindings(self) -> list[dict[str, Any]]:
        """Return the binding declarations of the function definition."""

        bindings = self.function.get("bindings")
        if isinstance(bindings, list):
            return bindings
        return []

    def detached_copy(self) -> Template:
        """Return a deep copy safe to mutate before deployment."""

        return self.model_copy(deep=True)


__all__ = ["Template", "TemplateMetadata"]
