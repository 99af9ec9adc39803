# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for identifier sanitisation."""

from __future__ import annotations

import pytest

from funcscaffold.naming import sanitize_class_name, sanitize_namespace


@pytest.mark.parametrize(
    ("name", "expected"),
    [("my-func 1", "myfunc1"), ("1st", "_1st"), ("Orders", "Orders"), ("", "")],
)
def test_sanitize_class_name(name: str, expected: str) -> None:
    assert sanitize_class_name(name) == expected


def test_sanitize_namespace_drops_empty_segments() -> None:
    assert sanitize_namespace("my-app..2024.api") == "myapp._2024.api"
