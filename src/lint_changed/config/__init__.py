# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders."""

from __future__ import annotations

from .models import DEFAULT_BRANCH, LintChangedConfig, LintRule
from .sources import (
    CONFIG_NAME,
    ConfigSource,
    PackageJsonConfigSource,
    PyProjectConfigSource,
    TomlConfigSource,
    default_sources,
    load_config,
)

__all__ = [
    "CONFIG_NAME",
    "DEFAULT_BRANCH",
    "ConfigSource",
    "LintChangedConfig",
    "LintRule",
    "PackageJsonConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "default_sources",
    "load_config",
]
