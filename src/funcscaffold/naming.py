# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Identifier sanitisation for generated class and namespace names."""

from __future__ import annotations

import re
from typing import Final

_INVALID_IDENTIFIER_CHARS: Final[re.Pattern[str]] = re.compile(r"[^\w]", re.UNICODE)


def sanitize_class_name(name: str) -> str:
    """Return ``name`` reduced to a valid class identifier.

    Characters other than letters, digits and underscores are dropped and a
    leading digit is prefixed with an underscore.

    Examples:
        >>> sanitize_class_name("my-func 1")
        'myfunc1'
        >>> sanitize_class_name("1st")
        '_1st'
    """

    cleaned = _INVALID_IDENTIFIER_CHARS.sub("", name)
    if cleaned and cleaned[0].isdigit():
        cleaned = f"_{cleaned}"
    return cleaned


def sanitize_namespace(name: str) -> str:
    """Return ``name`` as a dotted namespace with each segment sanitised."""

    segments = (sanitize_class_name(segment) for segment in name.split("."))
    return ".".join(segment for segment in segments if segment)


__all__ = ["sanitize_class_name", "sanitize_namespace"]
