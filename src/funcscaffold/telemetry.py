# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Command event recording for a single invocation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class CommandTelemetry:
    """Collect key/value command events; later values replace earlier ones."""

    events: dict[str, str] = field(default_factory=dict)

    def record(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any earlier value.

        Args:
            key: Event name, such as ``language`` or ``template``.
            value: Value recorded for the event.
        """

        self.events[key] = value
        LOGGER.debug("telemetry %s=%s", key, value)


__all__ = ["CommandTelemetry"]
