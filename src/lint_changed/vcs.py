# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Git gateway used to resolve branches, tags and changed paths."""

from __future__ import annotations

import shlex
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from .errors import CommandFailure, GitCommandError
from .process import CommandExecutor, ShellCommandExecutor, run_checked


@dataclass(frozen=True, slots=True)
class DiffRange:
    """Two endpoints handed to ``git diff --name-only``.

    ``end`` of ``None`` means ``HEAD``; with ``symmetric`` set the range is
    rendered as ``start...`` so that everything reachable from ``HEAD`` but
    not from ``start`` is listed.
    """

    start: str
    end: str | None = None
    symmetric: bool = False

    @classmethod
    def since_tag(cls, tag: str) -> DiffRange:
        """Return the range covering every change since ``tag``.

        Args:
            tag: Tag anchoring the comparison.

        Returns:
            DiffRange: Range rendered as ``<tag>...``.
        """

        return cls(start=tag, symmetric=True)

    @classmethod
    def between(cls, branch: str, merge_base: str) -> DiffRange:
        """Return the range comparing ``branch`` with ``merge_base``.

        Args:
            branch: Current branch name.
            merge_base: Commit shared with the base branch.

        Returns:
            DiffRange: Two-endpoint range.
        """

        return cls(start=branch, end=merge_base)

    def arguments(self) -> tuple[str, ...]:
        """Return the git arguments describing this range.

        Returns:
            tuple[str, ...]: One or two revision arguments.
        """

        if self.symmetric:
            return (f"{self.start}...",)
        if self.end is None:
            return (self.start,)
        return (self.start, self.end)

    def __str__(self) -> str:
        return " ".join(self.arguments())


@runtime_checkable
class VersionControlGateway(Protocol):
    """Queries the change-set resolver needs from version control."""

    async def current_branch(self) -> str:
        """Return the abbreviated name of the checked-out branch."""
        ...

    async def last_tag(self) -> str:
        """Return the most recent tag reachable from the parent of ``HEAD``."""
        ...

    async def merge_base(self, branch: str) -> str:
        """Return the merge-base commit between ``HEAD`` and ``branch``."""
        ...

    async def changed_files(self, diff_range: DiffRange) -> list[str]:
        """Return the paths reported by ``git diff --name-only`` for ``diff_range``."""
        ...


class GitGateway:
    """Run git queries through a :class:`CommandExecutor`."""

    def __init__(self, executor: CommandExecutor | None = None, *, root: Path | None = None) -> None:
        """Create a gateway.

        Args:
            executor: Command executor used for git invocations. A shell
                executor bound to ``root`` is used when omitted.
            root: Repository working directory.
        """

        self._executor = executor or ShellCommandExecutor(cwd=root)

    async def current_branch(self) -> str:
        """Return the abbreviated name of the checked-out branch.

        Returns:
            str: Branch name, ``HEAD`` when detached.
        """

        return await self._git(("rev-parse", "--abbrev-ref", "HEAD"))

    async def last_tag(self) -> str:
        """Return the newest tag reachable from ``HEAD^``.

        A tag pointing at ``HEAD`` itself is skipped so that a release commit
        is compared with the previous release.

        Returns:
            str: Tag name.
        """

        return await self._git(("describe", "--tags", "--abbrev=0", "HEAD^"))

    async def merge_base(self, branch: str) -> str:
        """Return the merge-base commit between ``HEAD`` and ``branch``.

        Args:
            branch: Branch to compare ``HEAD`` with.

        Returns:
            str: Commit hash of the common ancestor.
        """

        return await self._git(("merge-base", "HEAD", branch))

    async def changed_files(self, diff_range: DiffRange) -> list[str]:
        """Return the changed paths for ``diff_range`` in git's order.

        ``core.quotePath`` is disabled so non-ASCII paths come back verbatim
        instead of as quoted octal escapes.

        Args:
            diff_range: Range passed to ``git diff --name-only``.

        Returns:
            list[str]: Non-empty relative paths.
        """

        output = await self._git(("-c", "core.quotePath=false", "diff", "--name-only", *diff_range.arguments()))
        return [line for line in output.splitlines() if line.strip()]

    async def _git(self, args: Sequence[str]) -> str:
        """Run git with ``args`` returning stripped stdout.

        Args:
            args: Arguments following the ``git`` executable.

        Returns:
            str: Standard output with surrounding whitespace removed.

        Raises:
            GitCommandError: If git exits non-zero or writes to stderr.
        """

        command = shlex.join(("git", *args))
        try:
            return await run_checked(self._executor, command)
        except CommandFailure as exc:
            raise GitCommandError(command, exc.output.strip() or exc.stderr.strip()) from exc
        except OSError as exc:
            raise GitCommandError(command, str(exc)) from exc


__all__ = ["DiffRange", "GitGateway", "VersionControlGateway"]
