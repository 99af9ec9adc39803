# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalog provider reading templates from a JSON document."""

from __future__ import annotations

import json
from dataclasses import dataclass
from importlib import resources
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ..errors import CatalogError
from .models import Template

_TEMPLATE_LIST = TypeAdapter(list[Template])
BUNDLED_CATALOG_NAME = "templates.json"


def _read_bundled_catalog() -> str:
    return resources.files("funcscaffold.data").joinpath(BUNDLED_CATALOG_NAME).read_text(encoding="utf-8")


def parse_catalog(text: str, *, source: str) -> list[Template]:
    """Return the templates described by the JSON ``text``.

    Args:
        text: JSON array of template objects.
        source: Human-readable origin used in error messages.

    Returns:
        list[Template]: Templates in document order.

    Raises:
        CatalogError: If the document is not valid JSON or fails validation.
    """

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CatalogError(f"{source}: invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    try:
        return _TEMPLATE_LIST.validate_python(payload)
    except ValidationError as exc:
        raise CatalogError(f"{source}: invalid template catalog\n{exc}") from exc


@dataclass(frozen=True, slots=True)
class JsonCatalogProvider:
    """Serve templates from ``path`` or from the catalog bundled with the package."""

    path: Path | None = None

    async def fetch_templates(self) -> list[Template]:
        """Return every template of the configured catalog.

        Raises:
            CatalogError: If the catalog file cannot be read or validated.
        """

        if self.path is None:
            return parse_catalog(_read_bundled_catalog(), source=BUNDLED_CATALOG_NAME)
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CatalogError(f"Unable to read template catalog {self.path}: {exc}") from exc
        return parse_catalog(text, source=str(self.path))


__all__ = ["BUNDLED_CATALOG_NAME", "JsonCatalogProvider", "parse_catalog"]
