# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Asynchronous shell command execution."""

from __future__ import annotations

import asyncio
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from .errors import CommandFailure


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured result of a finished shell command."""

    command: str
    stdout: str
    stderr: str
    returncode: int

    @property
    def succeeded(self) -> bool:
        """Return whether the command counts as successful.

        Any error-stream output is a failure even when the exit status is zero.

        Returns:
            bool: ``True`` for a zero exit status with an empty error stream.
        """

        return self.returncode == 0 and not self.stderr

    def to_failure(self) -> CommandFailure:
        """Build the failure record for this result.

        Returns:
            CommandFailure: Failure carrying the captured standard output.
        """

        return CommandFailure(
            self.command,
            self.stdout,
            stderr=self.stderr,
            returncode=self.returncode,
        )


@runtime_checkable
class CommandExecutor(Protocol):
    """Run one shell command to completion."""

    async def run(self, command: str) -> CommandResult:
        """Execute ``command`` and capture its output.

        Args:
            command: Shell command line to execute.

        Returns:
            CommandResult: Captured output and exit status.
        """
        ...


def _decode(payload: bytes | None) -> str:
    if not payload:
        return ""
    return payload.decode(errors="replace")


class ShellCommandExecutor:
    """Execute commands through the system shell on the running event loop."""

    def __init__(self, *, cwd: Path | None = None, env: Mapping[str, str] | None = None) -> None:
        """Create an executor bound to a working directory.

        Args:
            cwd: Directory commands run in; the current directory when omitted.
            env: Extra environment variables layered over ``os.environ``.
        """

        self._cwd = cwd
        self._env: dict[str, str] | None = None
        if env:
            self._env = dict(os.environ)
            self._env.update(env)

    async def run(self, command: str) -> CommandResult:
        """Execute ``command`` via the shell and wait for it to exit.

        Args:
            command: Shell command line to execute.

        Returns:
            CommandResult: Captured stdout, stderr and exit status.
        """

        # Bandit: rule commands come from the project's own configuration and
        # are shell command lines by contract.
        process = await asyncio.create_subprocess_shell(  # nosec B602
            command,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=str(self._cwd) if self._cwd is not None else None,
            env=self._env,
        )
        stdout, stderr = await process.communicate()
        return CommandResult(
            command=command,
            stdout=_decode(stdout),
            stderr=_decode(stderr),
            returncode=process.returncode if process.returncode is not None else -1,
        )


async def run_checked(executor: CommandExecutor, command: str) -> str:
    """Run ``command`` and return its stripped stdout, raising on failure.

    Args:
        executor: Executor used to launch the command.
        command: Shell command line to execute.

    Returns:
        str: Standard output with surrounding whitespace removed.

    Raises:
        CommandFailure: If the command exits non-zero or writes to stderr.
    """

    result = await executor.run(command)
    if not result.succeeded:
        raise result.to_failure()
    return result.stdout.strip()


__all__ = ["CommandExecutor", "CommandResult", "ShellCommandExecutor", "run_checked"]
