# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Template catalog models, loading and memoization."""

from __future__ import annotations

from .catalog import TemplateCatalog
from .models import Template, TemplateMetadata
from .provider import JsonCatalogProvider, parse_catalog

__all__ = [
    "JsonCatalogProvider",
    "Template",
    "TemplateCatalog",
    "TemplateMetadata",
    "parse_catalog",
]
