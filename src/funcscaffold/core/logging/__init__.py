# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""User-facing logging helpers and diagnostic log configuration."""

from __future__ import annotations

from .public import configure_diagnostics, emoji, fail, info, ok

__all__ = [
    "configure_diagnostics",
    "emoji",
    "fail",
    "info",
    "ok",
]
