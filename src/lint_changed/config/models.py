# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for lint-changed."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import ConfigurationError

DEFAULT_BRANCH: Final[str] = "master"


class LintRule(BaseModel):
    """A glob pattern and the commands run, in order, for matching files."""

    model_config = ConfigDict(frozen=True)

    pattern: str
    commands: tuple[str, ...]

    @field_validator("pattern", mode="before")
    @classmethod
    def _validate_pattern(cls, value: object) -> str:
        """Return the stripped pattern, rejecting empty values.

        Args:
            value: Raw pattern key from the configuration mapping.

        Returns:
            str: Pattern with surrounding whitespace removed.

        Raises:
            ValueError: If the pattern is not a non-empty string.
        """

        if not isinstance(value, str) or not value.strip():
            raise ValueError("rule pattern must be a non-empty string")
        return value.strip()

    @field_validator("commands", mode="before")
    @classmethod
    def _coerce_commands(cls, value: object) -> tuple[str, ...]:
        """Return ``value`` coerced into an ordered tuple of commands.

        Args:
            value: A single command string or a sequence of command strings.

        Returns:
            tuple[str, ...]: Commands in declared order.

        Raises:
            ValueError: If no command is given or a command is blank.
            TypeError: If *value* is neither a string nor a sequence of strings.
        """

        if isinstance(value, str):
            entries: Sequence[object] = (value,)
        elif isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
            entries = value
        else:
            raise TypeError("rule commands must be a string or a list of strings")
        if not entries:
            raise ValueError("rule must declare at least one command")
        commands: list[str] = []
        for entry in entries:
            if not isinstance(entry, str) or not entry.strip():
                raise ValueError("rule commands must be non-empty strings")
            commands.append(entry.strip())
        return tuple(commands)


class LintChangedConfig(BaseModel):
    """Resolved configuration: rules plus optional branch defaults."""

    model_config = ConfigDict(frozen=True)

    rules: tuple[LintRule, ...] = Field(default_factory=tuple)
    base_branch: str | None = None
    release_branch: str | None = None
    source: str | None = None

    @classmethod
    def from_mapping(
        cls,
        rules: Mapping[str, Any],
        *,
        base_branch: str | None = None,
        release_branch: str | None = None,
        source: str | None = None,
    ) -> LintChangedConfig:
        """Build a configuration from a raw ``pattern -> command(s)`` mapping.

        Args:
            rules: Mapping of glob patterns to a command or list of commands.
            base_branch: Default base branch declared by the manifest.
            release_branch: Default release branch declared by the manifest.
            source: Description of where the configuration came from.

        Returns:
            LintChangedConfig: Validated configuration preserving rule order.

        Raises:
            ConfigurationError: If the mapping or any rule is invalid.
        """

        if not isinstance(rules, Mapping):
            raise ConfigurationError(f"lint-changed rules in {source or 'configuration'} must be a table of patterns")
        try:
            return cls(
                rules=tuple(LintRule(pattern=pattern, commands=commands) for pattern, commands in rules.items()),
                base_branch=_optional_branch(base_branch, "base-branch"),
                release_branch=_optional_branch(release_branch, "release-branch"),
                source=source,
            )
        except (ValidationError, TypeError, ValueError) as exc:
            raise ConfigurationError(f"Invalid lint-changed configuration in {source or 'configuration'}: {exc}") from exc


def _optional_branch(value: object, key: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{key} must be a non-empty string")
    return value.strip()


__all__ = ["DEFAULT_BRANCH", "LintChangedConfig", "LintRule"]
