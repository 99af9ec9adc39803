# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the ``new`` CLI command."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from funcscaffold.cli.app import app


def _invoke(*args: str) -> Any:
    runner = CliRunner()
    return runner.invoke(app, [*args, "--no-emoji"])


def test_new_creates_function_in_empty_project(tmp_path: Path) -> None:
    result = _invoke(
        "new",
        "--root",
        str(tmp_path),
        "--language",
        "python",
        "--template",
        "HTTP trigger",
        "--name",
        "hello",
    )

    assert result.exit_code == 0, result.output
    assert 'The function "hello" was created successfully from the "HTTP trigger" template.' in result.output
    assert "Did you know?" in result.output
    settings = json.loads((tmp_path / "local.settings.json").read_text(encoding="utf-8"))
    assert settings["Values"]["FUNCTIONS_WORKER_RUNTIME"] == "python"
    assert (tmp_path / "hello" / "function.json").is_file()


def test_new_javascript_function_in_empty_project(tmp_path: Path) -> None:
    result = _invoke(
        "new",
        "--root",
        str(tmp_path),
        "--language",
        "JavaScript",
        "--template",
        "HTTP trigger",
        "--name",
        "Foo",
    )

    assert result.exit_code == 0, result.output
    settings = json.loads((tmp_path / "local.settings.json").read_text(encoding="utf-8"))
    assert settings["Values"]["FUNCTIONS_WORKER_RUNTIME"] == "node"
    function = json.loads((tmp_path / "Foo" / "function.json").read_text(encoding="utf-8"))
    assert function["bindings"][0]["type"] == "httpTrigger"
    assert "scriptFile" not in function
    assert (tmp_path / "Foo" / "index.js").is_file()


def test_new_typescript_function_in_empty_project_points_at_dist(tmp_path: Path) -> None:
    (tmp_path / "tsconfig.json").write_text("{}", encoding="utf-8")

    result = _invoke(
        "new",
        "--root",
        str(tmp_path),
        "--language",
        "TypeScript",
        "--template",
        "HTTP trigger",
        "--name",
        "Foo",
    )

    assert result.exit_code == 0, result.output
    settings = json.loads((tmp_path / "local.settings.json").read_text(encoding="utf-8"))
    assert settings["Values"]["FUNCTIONS_WORKER_RUNTIME"] == "node"
    function = json.loads((tmp_path / "Foo" / "function.json").read_text(encoding="utf-8"))
    assert function["scriptFile"] == "../dist/Foo/index.js"
    assert (tmp_path / "Foo" / "index.ts").is_file()


def test_create_alias_and_authlevel(tmp_path: Path) -> None:
    (tmp_path / "local.settings.json").write_text(
        json.dumps({"IsEncrypted": False, "Values": {"FUNCTIONS_WORKER_RUNTIME": "node"}}),
        encoding="utf-8",
    )

    result = _invoke(
        "create",
        "-r",
        str(tmp_path),
        "-t",
        "HTTP trigger",
        "-n",
        "orders",
        "-a",
        "ANONYMOUS",
    )

    assert result.exit_code == 0, result.output
    function = json.loads((tmp_path / "orders" / "function.json").read_text(encoding="utf-8"))
    assert function["bindings"][0]["authLevel"] == "Anonymous"


def test_redirected_input_requires_name(tmp_path: Path) -> None:
    result = _invoke("new", "--root", str(tmp_path), "--language", "python", "--template", "HTTP trigger")

    assert result.exit_code == 1
    assert "Command must specify --template, and --name explicitly." in result.output
    assert not (tmp_path / "local.settings.json").exists()


def test_language_conflict_is_reported(tmp_path: Path) -> None:
    (tmp_path / "local.settings.json").write_text(
        json.dumps({"Values": {"FUNCTIONS_WORKER_RUNTIME": "node"}}),
        encoding="utf-8",
    )

    result = _invoke(
        "new",
        "--root",
        str(tmp_path),
        "--language",
        "python",
        "--template",
        "HTTP trigger",
        "--name",
        "hello",
    )

    assert result.exit_code == 1
    assert "Selected language doesn't match worker set in local.settings.json." in result.output


def test_unknown_template_is_reported(tmp_path: Path) -> None:
    result = _invoke(
        "new",
        "--root",
        str(tmp_path),
        "--language",
        "python",
        "--template",
        "Nope",
        "--name",
        "hello",
    )

    assert result.exit_code == 1
    assert 'Can\'t find template "Nope" in "Python"' in result.output


def test_custom_catalog_from_config(tmp_path: Path) -> None:
    catalog = tmp_path / "catalog.json"
    catalog.write_text(
        json.dumps(
            [
                {
                    "id": "QueueTrigger-PowerShell",
                    "metadata": {"name": "Queue trigger", "language": "PowerShell"},
                    "function": {"bindings": [{"type": "queueTrigger", "name": "item"}]},
                    "files": {"run.ps1": "param($item)\n"},
                },
            ],
        ),
        encoding="utf-8",
    )
    (tmp_path / ".funcscaffold.toml").write_text('templates = "catalog.json"\n', encoding="utf-8")

    result = _invoke(
        "new",
        "--root",
        str(tmp_path),
        "--language",
        "pwsh",
        "--template",
        "Queue trigger",
        "--name",
        "drain",
    )

    assert result.exit_code == 0, result.output
    assert (tmp_path / "drain" / "run.ps1").read_text(encoding="utf-8") == "param($item)\n"


def test_invalid_config_fails(tmp_path: Path) -> None:
    (tmp_path / ".funcscaffold.toml").write_text("unknown = 1\n", encoding="utf-8")

    result = _invoke("new", "--root", str(tmp_path), "--template", "HTTP trigger", "--name", "x")

    assert result.exit_code == 1
    assert "Invalid funcscaffold configuration" in result.output


def test_trigger_help_in_python_model_project(tmp_path: Path) -> None:
    (tmp_path / "local.settings.json").write_text(
        json.dumps({"Values": {"FUNCTIONS_WORKER_RUNTIME": "python"}}),
        encoding="utf-8",
    )
    (tmp_path / "function_app.py").write_text("", encoding="utf-8")

    result = _invoke("new", "HttpTrigger", "help", "--root", str(tmp_path))

    assert result.exit_code == 0, result.output
    assert "Did you know about HttpTrigger?" in result.output
    assert "created successfully" not in result.output


def test_root_defaults_to_current_directory_at_call_time(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    result = _invoke("new", "--language", "JavaScript", "--template", "HTTP trigger", "--name", "Foo")

    assert result.exit_code == 0, result.output
    assert (tmp_path / "Foo" / "function.json").is_file()
