# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the files changed on the current branch."""

from __future__ import annotations

import contextlib
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from ..errors import (
    BranchResolutionError,
    DiffQueryError,
    GitCommandError,
    MergeBaseError,
    TagResolutionError,
)
from ..interfaces import RunLogger
from ..vcs import DiffRange, VersionControlGateway


@dataclass(frozen=True, slots=True)
class ChangeSet:
    """Changed files that still exist in the working tree."""

    basis: str
    diff_range: DiffRange
    files: tuple[str, ...]

    def __bool__(self) -> bool:
        return bool(self.files)

    def __len__(self) -> int:
        return len(self.files)


def filter_existing(files: Iterable[str], root: Path) -> list[str]:
    """Return the entries of ``files`` that exist relative to ``root``.

    Files deleted by the change are dropped; order is preserved.

    Args:
        files: Relative paths reported by version control.
        root: Working tree root the paths are relative to.

    Returns:
        list[str]: Paths present on disk.
    """

    return [name for name in files if (root / name).exists()]


class ChangeSetResolver:
    """Choose the comparison strategy by branch role and list changed files.

    On the release branch every change since the previous release tag matters,
    so the diff runs from the last tag before ``HEAD``. Any other branch is
    compared with its merge-base against the base branch, which keeps changes
    that only happened on the base branch out of the result.
    """

    def __init__(self, gateway: VersionControlGateway, *, root: Path, logger: RunLogger) -> None:
        """Create a resolver.

        Args:
            gateway: Version-control queries.
            root: Working tree root used for existence checks.
            logger: Destination for progress messages.
        """

        self._gateway = gateway
        self._root = root
        self._logger = logger

    async def resolve_branch(self) -> str:
        """Return the current branch name.

        Returns:
            str: Abbreviated branch name.

        Raises:
            BranchResolutionError: If git cannot report the branch.
        """

        try:
            return await self._gateway.current_branch()
        except GitCommandError as exc:
            raise BranchResolutionError(exc.output) from exc

    async def resolve(self, branch: str, *, base_branch: str, release_branch: str) -> ChangeSet:
        """Return the change set for ``branch``.

        Args:
            branch: Current branch name.
            base_branch: Branch feature branches are compared with.
            release_branch: Branch whose changes are anchored to the last tag.

        Returns:
            ChangeSet: Existing changed files, possibly empty.

        Raises:
            TagResolutionError: If no tag precedes ``HEAD`` on the release branch.
            MergeBaseError: If ``HEAD`` shares no ancestor with ``base_branch``.
            DiffQueryError: If the changed-file listing fails.
        """

        if branch == release_branch:
            return await self._since_last_tag()
        return await self._since_merge_base(branch, base_branch)

    async def _since_last_tag(self) -> ChangeSet:
        self._log("Checking for files that have changed since last tag on release branch")
        try:
            tag = await self._gateway.last_tag()
        except GitCommandError as exc:
            raise TagResolutionError(exc.output) from exc
        return await self._collect(DiffRange.since_tag(tag), basis=tag)

    async def _since_merge_base(self, branch: str, base_branch: str) -> ChangeSet:
        self._log(f"Checking for files that have changed on {branch} since {base_branch}")
        try:
            merge_base = await self._gateway.merge_base(base_branch)
        except GitCommandError as exc:
            raise MergeBaseError(exc.output) from exc
        return await self._collect(DiffRange.between(branch, merge_base), basis=base_branch)

    async def _collect(self, diff_range: DiffRange, *, basis: str) -> ChangeSet:
        try:
            reported = await self._gateway.changed_files(diff_range)
        except GitCommandError as exc:
            raise DiffQueryError(exc.output, basis=basis) from exc
        files = tuple(filter_existing(reported, self._root))
        with contextlib.suppress(OSError):
            self._logger.debug(f"diff range={diff_range} reported={len(reported)} existing={len(files)}")
            if files:
                self._logger.info(f"Files changed since {basis}:")
                self._logger.output("\n".join(files) + "\n")
        return ChangeSet(basis=basis, diff_range=diff_range, files=files)

    def _log(self, message: str) -> None:
        # Progress output never changes the resolved change set.
        with contextlib.suppress(OSError):
            self._logger.info(message)


__all__ = ["ChangeSet", "ChangeSetResolver", "filter_existing"]
