# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and loader for funcscaffold."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import PYTHON_MODEL_FILE_NAME
from .errors import ConfigError

PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
CONFIG_FILE_NAME: Final[str] = ".funcscaffold.toml"
TOOL_SECTION: Final[str] = "funcscaffold"


class ScaffoldConfig(BaseModel):
    """User preferences applied to every ``new`` invocation in a project."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid", populate_by_name=True)

    templates: Path | None = None
    emoji: bool = True
    color: bool = True
    default_file_name: str = Field(default=PYTHON_MODEL_FILE_NAME, alias="default-file-name")


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc


def _config_section(root: Path) -> tuple[dict[str, Any], Path | None]:
    dedicated = root / CONFIG_FILE_NAME
    if dedicated.is_file():
        return _read_toml(dedicated), dedicated
    pyproject = root / PYPROJECT_FILE_NAME
    if pyproject.is_file():
        tool = _read_toml(pyproject).get("tool")
        if isinstance(tool, dict):
            section = tool.get(TOOL_SECTION)
            if isinstance(section, dict):
                return section, pyproject
    return {}, None


def load_config(root: Path) -> ScaffoldConfig:
    """Return the configuration for the project at ``root``.

    ``.funcscaffold.toml`` takes precedence over ``[tool.funcscaffold]`` in
    ``pyproject.toml``. A relative ``templates`` path is resolved against the
    directory of the file that declared it.

    Raises:
        ConfigError: If a configuration file is unreadable or invalid.
    """

    data, source = _config_section(root)
    try:
        config = ScaffoldConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid funcscaffold configuration in {source}:\n{exc}") from exc
    if config.templates is not None and source is not None and not config.templates.is_absolute():
        config.templates = (source.parent / config.templates).resolve()
    return config


__all__ = ["CONFIG_FILE_NAME", "ScaffoldConfig", "load_config"]
