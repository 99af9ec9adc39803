# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across funcscaffold modules."""

from __future__ import annotations

from typing import Final

LOCAL_SETTINGS_FILE_NAME: Final[str] = "local.settings.json"
HOST_JSON_FILE_NAME: Final[str] = "host.json"
FUNCTION_JSON_FILE_NAME: Final[str] = "function.json"
PACKAGE_JSON_FILE_NAME: Final[str] = "package.json"
TSCONFIG_FILE_NAME: Final[str] = "tsconfig.json"
FSPROJ_PATTERN: Final[str] = "*.fsproj"
PYTHON_MODEL_FILE_NAME: Final[str] = "function_app.py"

WORKER_RUNTIME_SETTING: Final[str] = "FUNCTIONS_WORKER_RUNTIME"
SETTINGS_VALUES_KEY: Final[str] = "Values"

NODE_FUNCTIONS_PACKAGE: Final[str] = "@azure/functions"
NODE_NEW_MODEL_MIN_MAJOR: Final[int] = 4
NODE_NEW_MODEL_ID_SUFFIX: Final[str] = "-4.x"

HTTP_TRIGGER_BINDING_TYPE: Final[str] = "httpTrigger"
AUTH_LEVEL_PROPERTY: Final[str] = "authLevel"
HELP_KEYWORD: Final[str] = "help"
DOTNET_COMMAND: Final[str] = "dotnet"

TYPESCRIPT_SCRIPT_FILE_TEMPLATE: Final[str] = "../dist/{function_name}/index.js"

AUTH_LEVEL_ERROR_MESSAGE: Final[str] = (
    "Authorization level is applicable to templates that use HTTP trigger."
)
EXTENSIONS_NEED_DOTNET_MESSAGE: Final[str] = (
    "Extensions require the .NET SDK to be installed. Either install dotnet or configure "
    'an "extensionBundle" section in host.json.'
)
PYTHON_MODEL_REFERENCE_URL: Final[str] = "https://aka.ms/pythonprogrammingmodel"
NODE_MODEL_REFERENCE_URL: Final[str] = "https://aka.ms/AzFuncNodeV4"

DOTNET_TEMPLATES: Final[tuple[str, ...]] = (
    "BlobTrigger",
    "CosmosDBTrigger",
    "DurableFunctionsOrchestration",
    "EventGridTrigger",
    "EventHubTrigger",
    "HttpTrigger",
    "IotHubTrigger",
    "QueueTrigger",
    "RabbitMQTrigger",
    "SendGrid",
    "ServiceBusQueueTrigger",
    "ServiceBusTopicTrigger",
    "SignalR",
    "TimerTrigger",
)

__all__ = [
    "AUTH_LEVEL_ERROR_MESSAGE",
    "AUTH_LEVEL_PROPERTY",
    "DOTNET_COMMAND",
    "DOTNET_TEMPLATES",
    "EXTENSIONS_NEED_DOTNET_MESSAGE",
    "FSPROJ_PATTERN",
    "FUNCTION_JSON_FILE_NAME",
    "HELP_KEYWORD",
    "HOST_JSON_FILE_NAME",
    "HTTP_TRIGGER_BINDING_TYPE",
    "LOCAL_SETTINGS_FILE_NAME",
    "NODE_FUNCTIONS_PACKAGE",
    "NODE_MODEL_REFERENCE_URL",
    "NODE_NEW_MODEL_ID_SUFFIX",
    "NODE_NEW_MODEL_MIN_MAJOR",
    "PACKAGE_JSON_FILE_NAME",
    "PYTHON_MODEL_FILE_NAME",
    "PYTHON_MODEL_REFERENCE_URL",
    "SETTINGS_VALUES_KEY",
    "TSCONFIG_FILE_NAME",
    "TYPESCRIPT_SCRIPT_FILE_TEMPLATE",
    "WORKER_RUNTIME_SETTING",
]
