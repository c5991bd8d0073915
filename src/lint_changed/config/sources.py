# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Concrete configuration sources (TOML file, pyproject, package.json)."""

from __future__ import annotations

import json
import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Final, Protocol, runtime_checkable

from ..errors import ConfigurationError
from .models import LintChangedConfig

CONFIG_NAME: Final[str] = "lint-changed"
RULES_KEY: Final[str] = "rules"
BASE_BRANCH_KEY: Final[str] = "base-branch"
RELEASE_BRANCH_KEY: Final[str] = "release-branch"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PACKAGE_JSON_FILENAME: Final[str] = "package.json"
PACKAGE_JSON_BASE_BRANCH_KEY: Final[str] = f"{CONFIG_NAME}-{BASE_BRANCH_KEY}"
PACKAGE_JSON_RELEASE_BRANCH_KEY: Final[str] = f"{CONFIG_NAME}-{RELEASE_BRANCH_KEY}"


@runtime_checkable
class ConfigSource(Protocol):
    """A place lint-changed configuration may be read from."""

    name: str

    def load(self) -> LintChangedConfig | None:
        """Return the configuration, or ``None`` when this source declares none."""
        ...

    def describe(self) -> str:
        """Return a human readable description of the source."""
        ...


def _read_toml(path: Path) -> Mapping[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigurationError(f"Unable to read {path}: {exc}") from exc


def _lookup(section: Mapping[str, Any], key: str) -> Any:
    """Return ``section[key]`` accepting either hyphenated or underscored keys."""

    if key in section:
        return section[key]
    return section.get(key.replace("-", "_"))


def _from_section(section: Mapping[str, Any], *, source: str) -> LintChangedConfig | None:
    rules = section.get(RULES_KEY)
    if rules is None:
        return None
    return LintChangedConfig.from_mapping(
        rules,
        base_branch=_lookup(section, BASE_BRANCH_KEY),
        release_branch=_lookup(section, RELEASE_BRANCH_KEY),
        source=source,
    )


class TomlConfigSource:
    """Standalone TOML document with ``base-branch``, ``release-branch`` and ``[rules]``."""

    def __init__(self, path: Path, *, required: bool = True) -> None:
        """Create a source for ``path``.

        Args:
            path: TOML file to read.
            required: Raise when the file is missing instead of returning ``None``.
        """

        self.path = path
        self.name = str(path)
        self._required = required

    def load(self) -> LintChangedConfig | None:
        """Return the configuration declared by the TOML document.

        Returns:
            LintChangedConfig | None: Parsed configuration or ``None`` when
            the document carries no ``rules`` table.

        Raises:
            ConfigurationError: If a required file is missing or malformed.
        """

        if not self.path.is_file():
            if self._required:
                raise ConfigurationError(f"Configuration file {self.path} does not exist")
            return None
        return _from_section(_read_toml(self.path), source=self.describe())

    def describe(self) -> str:
        return f"TOML configuration at {self.name}"


class PyProjectConfigSource:
    """Read configuration from ``[tool.lint-changed]`` within ``pyproject.toml``."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.name = str(path)

    def load(self) -> LintChangedConfig | None:
        if not self.path.is_file():
            return None
        document = _read_toml(self.path)
        tool_section = document.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return None
        section = _lookup(tool_section, CONFIG_NAME)
        if not isinstance(section, Mapping):
            return None
        return _from_section(section, source=self.describe())

    def describe(self) -> str:
        return f"pyproject.toml ({self.name})"


class PackageJsonConfigSource:
    """Read the ``lint-changed`` keys from a node ``package.json`` manifest."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.name = str(path)

    def load(self) -> LintChangedConfig | None:
        if not self.path.is_file():
            return None
        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ConfigurationError(f"Unable to read {self.path}: {exc}") from exc
        if not isinstance(document, Mapping):
            raise ConfigurationError(f"{self.path} must contain a JSON object")
        rules = document.get(CONFIG_NAME)
        if rules is None:
            return None
        return LintChangedConfig.from_mapping(
            rules,
            base_branch=document.get(PACKAGE_JSON_BASE_BRANCH_KEY),
            release_branch=document.get(PACKAGE_JSON_RELEASE_BRANCH_KEY),
            source=self.describe(),
        )

    def describe(self) -> str:
        return f"package.json ({self.name})"


def default_sources(root: Path, config_path: Path | None = None) -> list[ConfigSource]:
    """Return configuration sources in precedence order.

    Args:
        root: Project root holding the manifests.
        config_path: Explicit TOML file supplied on the command line.

    Returns:
        list[ConfigSource]: Sources consulted until one declares rules.
    """

    if config_path is not None:
        resolved = config_path if config_path.is_absolute() else root / config_path
        return [TomlConfigSource(resolved)]
    return [
        PyProjectConfigSource(root / PYPROJECT_FILENAME),
        PackageJsonConfigSource(root / PACKAGE_JSON_FILENAME),
    ]


def load_config(sources: Sequence[ConfigSource]) -> LintChangedConfig:
    """Return the configuration from the first source that declares rules.

    Args:
        sources: Sources in precedence order.

    Returns:
        LintChangedConfig: Validated configuration.

    Raises:
        ConfigurationError: If no source declares a rule mapping.
    """

    for source in sources:
        config = source.load()
        if config is not None:
            return config
    searched = ", ".join(source.describe() for source in sources) or "no sources"
    raise ConfigurationError(f"No `{CONFIG_NAME}` rules found (searched {searched})")


__all__ = [
    "CONFIG_NAME",
    "ConfigSource",
    "PackageJsonConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "default_sources",
    "load_config",
]
