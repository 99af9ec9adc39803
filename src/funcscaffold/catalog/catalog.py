# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Memoized view over the template catalog for a single invocation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..interfaces import CatalogProvider
from .models import Template

LOGGER = logging.getLogger(__name__)


def _distinct(values: list[str], *, casefold: bool) -> tuple[str, ...]:
    seen: set[str] = set()
    ordered: list[str] = []
    for value in values:
        key = value.lower() if casefold else value
        if key in seen:
            continue
        seen.add(key)
        ordered.append(value)
    return tuple(ordered)


@dataclass(slots=True)
class TemplateCatalog:
    """Load templates from ``provider`` at most once and serve cached reads.

    Attributes:
        provider: Source of raw catalog entries.
    """

    provider: CatalogProvider
    _templates: tuple[Template, ...] | None = field(default=None, init=False, repr=False)

    @property
    def loaded(self) -> bool:
        """Return ``True`` once the provider has been consulted."""

        return self._templates is not None

    async def load(self) -> tuple[Template, ...]:
        """Fetch the catalog on first use and return the cached entries."""

        if self._templates is None:
            fetched = await self.provider.fetch_templates()
            self._templates = tuple(fetched)
            LOGGER.debug("catalog loaded templates=%d", len(self._templates))
        return self._templates

    @property
    def templates(self) -> tuple[Template, ...]:
        """Return the cached templates in catalog order.

        Raises:
            RuntimeError: If :meth:`load` has not completed yet.
        """

        if self._templates is None:
            raise RuntimeError("template catalog accessed before it was loaded")
        return self._templates

    def languages(self) -> tuple[str, ...]:
        """Return the distinct languages advertised by the catalog."""

        return _distinct([template.metadata.language for template in self.templates], casefold=False)

    def template_names(self, language: str) -> tuple[str, ...]:
        """Return the distinct template names published for ``language``."""

        wanted = language.lower()
        names = [
            template.metadata.name
            for template in self.templates
            if template.metadata.language.lower() == wanted
        ]
        return _distinct(names, casefold=False)


__all__ = ["TemplateCatalog"]
