# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for programming model classification."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from funcscaffold.context import ProjectContext
from funcscaffold.probe import ProjectStateProbe
from funcscaffold.programming_model import (
    ProgrammingModelClassifier,
    is_new_node_version,
    parse_leading_major,
)
from funcscaffold.runtimes import WorkerRuntime


def _classifier(context: ProjectContext) -> ProgrammingModelClassifier:
    return ProgrammingModelClassifier(ProjectStateProbe(context))


@pytest.mark.parametrize(
    ("version", "expected"),
    [
        ("^4.0.0", 4),
        ("4.1.2", 4),
        (">=4.0.0", 4),
        ("~3.5.1", 3),
        ("^10.0.0-alpha.1+build", 10),
        ("latest", None),
        ("", None),
    ],
)
def test_parse_leading_major(version: str, expected: int | None) -> None:
    assert parse_leading_major(version) == expected


@pytest.mark.parametrize(
    ("version", "expected"),
    [("^4.0.0", True), ("4.1.2", True), (">=4.0.0", True), ("^3.5.0", False), ("*", False), (4, False)],
)
def test_is_new_node_version(version: object, expected: bool) -> None:
    assert is_new_node_version(version) is expected


@pytest.mark.parametrize(
    ("manifest", "expected"),
    [
        ({"dependencies": {"@azure/functions": "^4.0.0"}}, True),
        ({"dependencies": {"@azure/functions": "4.1.2"}}, True),
        ({"dependencies": {"@azure/functions": ">=4.0.0"}}, True),
        ({"dependencies": {"@azure/functions": "^3.0.0"}}, False),
        ({"dependencies": {"left-pad": "^1.0.0"}}, False),
        ({"devDependencies": {"@azure/functions": "^4.0.0"}}, False),
        ({"dependencies": ["@azure/functions"]}, False),
        (["not", "an", "object"], False),
    ],
)
def test_new_node_model_reads_package_manifest(
    tmp_path: Path,
    context: ProjectContext,
    manifest: object,
    expected: bool,
) -> None:
    (tmp_path / "package.json").write_text(json.dumps(manifest), encoding="utf-8")

    assert _classifier(context).is_new_node_model(WorkerRuntime.NODE) is expected


def test_new_node_model_tolerates_missing_and_malformed_manifest(tmp_path: Path, context: ProjectContext) -> None:
    classifier = _classifier(context)
    assert classifier.is_new_node_model(WorkerRuntime.NODE) is False

    (tmp_path / "package.json").write_text("{ not json", encoding="utf-8")
    assert classifier.is_new_node_model(WorkerRuntime.NODE) is False


def test_new_node_model_only_applies_to_node(tmp_path: Path, context: ProjectContext) -> None:
    (tmp_path / "package.json").write_text(
        json.dumps({"dependencies": {"@azure/functions": "^4.0.0"}}),
        encoding="utf-8",
    )

    assert _classifier(context).is_new_node_model(WorkerRuntime.PYTHON) is False


def test_new_python_model_requires_marker_and_python(tmp_path: Path, context: ProjectContext) -> None:
    classifier = _classifier(context)
    assert classifier.is_new_python_model("Python") is False

    (tmp_path / "function_app.py").write_text("", encoding="utf-8")
    assert classifier.is_new_python_model("python") is True
    assert classifier.is_new_python_model("JavaScript") is False
    assert classifier.is_new_python_model(None) is False
