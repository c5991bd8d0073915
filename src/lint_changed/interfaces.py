# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Logging interface shared by the CLI layer and the run engine."""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class RunLogger(Protocol):
    """Protocol describing logging helpers supplied by the CLI layer."""

    __slots__ = ()

    @abstractmethod
    def info(self, message: str) -> None:
        """Render an informational ``message``.

        Args:
            message: Message string describing progress.
        """

    @abstractmethod
    def warn(self, message: str) -> None:
        """Render a warning ``message``.

        Args:
            message: Message string describing the warning condition.
        """

    @abstractmethod
    def fail(self, message: str) -> None:
        """Render a failure ``message``.

        Args:
            message: Message string describing the failure condition.
        """

    @abstractmethod
    def output(self, message: str) -> None:
        """Echo captured command output.

        Args:
            message: Output produced by a successful command.
        """

    @abstractmethod
    def debug(self, message: str) -> None:
        """Emit a debug ``message`` when debug logging is enabled.

        Args:
            message: Message string describing the debug condition.
        """


__all__ = ["RunLogger"]
