# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""In-memory stand-ins for the git gateway, command executor and logger."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass, field

from lint_changed.errors import GitCommandError
from lint_changed.process import CommandResult
from lint_changed.vcs import DiffRange


@dataclass
class FakeGateway:
    branch: str = "feature/x"
    tag: str | None = "v1.2.0"
    merge_base_commit: str | None = "abc123"
    files: list[str] = field(default_factory=list)
    diff_error: str | None = None
    branch_error: str | None = None
    calls: list[tuple[str, ...]] = field(default_factory=list)

    async def current_branch(self) -> str:
        self.calls.append(("current_branch",))
        if self.branch_error is not None:
            raise GitCommandError("git rev-parse --abbrev-ref HEAD", self.branch_error)
        return self.branch

    async def last_tag(self) -> str:
        self.calls.append(("last_tag",))
        if self.tag is None:
            raise GitCommandError("git describe --tags --abbrev=0 HEAD^", "fatal: No names found")
        return self.tag

    async def merge_base(self, branch: str) -> str:
        self.calls.append(("merge_base", branch))
        if self.merge_base_commit is None:
            raise GitCommandError(f"git merge-base HEAD {branch}", "no merge base")
        return self.merge_base_commit

    async def changed_files(self, diff_range: DiffRange) -> list[str]:
        self.calls.append(("changed_files", str(diff_range)))
        if self.diff_error is not None:
            raise GitCommandError("git diff --name-only", self.diff_error)
        return list(self.files)

    @property
    def operations(self) -> list[str]:
        return [call[0] for call in self.calls]


@dataclass
class ScriptedExecutor:
    """Return canned results per command line; unknown commands succeed silently."""

    responses: Mapping[str, tuple[str, str, int]] = field(default_factory=dict)
    yields: int = 3
    calls: list[str] = field(default_factory=list)
    in_flight: int = 0
    max_in_flight: int = 0

    async def run(self, command: str) -> CommandResult:
        self.calls.append(command)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            for _ in range(self.yields):
                await asyncio.sleep(0)
        finally:
            self.in_flight -= 1
        stdout, stderr, returncode = self.responses.get(command, ("", "", 0))
        return CommandResult(command=command, stdout=stdout, stderr=stderr, returncode=returncode)


@dataclass
class RecordingLogger:
    records: list[tuple[str, str]] = field(default_factory=list)

    def info(self, message: str) -> None:
        self.records.append(("info", message))

    def warn(self, message: str) -> None:
        self.records.append(("warn", message))

    def fail(self, message: str) -> None:
        self.records.append(("fail", message))

    def output(self, message: str) -> None:
        self.records.append(("output", message))

    def debug(self, message: str) -> None:
        self.records.append(("debug", message))

    def messages(self, level: str) -> list[str]:
        return [message for kind, message in self.records if kind == level]
