# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Drive a lint-changed run from change detection to the final verdict."""

from __future__ import annotations

import asyncio
from functools import partial
from pathlib import Path

from .config.models import DEFAULT_BRANCH, LintChangedConfig
from .discovery.changes import ChangeSet, ChangeSetResolver
from .discovery.rules import WorkItem, match_rules
from .execution.pool import DEFAULT_CONCURRENCY, WorkerPool
from .execution.results import FileOutcome, RunResult, aggregate
from .execution.runner import FileLintRunner
from .interfaces import RunLogger
from .process import CommandExecutor
from .vcs import VersionControlGateway


class LintChangedEngine:
    """Resolve changed files, dispatch matching rules and aggregate results.

    Resolution errors propagate to the caller before any command runs;
    command failures are recorded per work item and only surface in the
    returned :class:`RunResult`.
    """

    def __init__(
        self,
        config: LintChangedConfig,
        *,
        gateway: VersionControlGateway,
        executor: CommandExecutor,
        logger: RunLogger,
        root: Path,
        concurrency: int = DEFAULT_CONCURRENCY,
    ) -> None:
        """Create an engine.

        Args:
            config: Validated rules and branch defaults.
            gateway: Version-control queries.
            executor: Executor used for lint commands.
            logger: Destination for progress and command output.
            root: Working tree root.
            concurrency: Maximum number of work items running at once.
        """

        self._config = config
        self._logger = logger
        self._resolver = ChangeSetResolver(gateway, root=root, logger=logger)
        self._runner = FileLintRunner(executor, logger=logger)
        self._concurrency = concurrency

    async def run(self, *, base_branch: str | None = None, release_branch: str | None = None) -> RunResult:
        """Execute a complete run.

        Args:
            base_branch: Command-line override for the base branch.
            release_branch: Command-line override for the release branch.

        Returns:
            RunResult: Aggregate verdict; successful and empty when nothing changed.

        Raises:
            ResolutionError: If the branch, tag, merge-base or diff cannot be resolved.
        """

        base = self._effective_branch(base_branch, self._config.base_branch, "base")
        release = self._effective_branch(release_branch, self._config.release_branch, "release")
        branch = await self._resolver.resolve_branch()
        change_set = await self._resolver.resolve(branch, base_branch=base, release_branch=release)
        if not change_set:
            self._logger.info("No files changed, skipping linting")
            return aggregate(())
        return await self.execute(self.plan(change_set))

    def plan(self, change_set: ChangeSet) -> list[WorkItem]:
        """Return the work items for ``change_set``.

        Args:
            change_set: Resolved changed files.

        Returns:
            list[WorkItem]: One item per (rule, matching file).
        """

        items = match_rules(change_set.files, self._config.rules)
        self._logger.debug(f"files={len(change_set)} work_items={len(items)}")
        return items

    async def execute(self, items: list[WorkItem]) -> RunResult:
        """Run ``items`` through the worker pool and aggregate their outcomes.

        Every item runs to completion regardless of sibling failures.

        Args:
            items: Work items to execute.

        Returns:
            RunResult: Aggregate verdict.
        """

        pool = WorkerPool(self._concurrency)
        futures = [pool.submit(partial(self._runner.run, item)) for item in items]
        outcomes: list[FileOutcome] = list(await asyncio.gather(*futures))
        result = aggregate(outcomes)
        self._logger.debug(
            f"work_items={len(outcomes)} failed={len(result.failures)} peak_concurrency={pool.peak}",
        )
        return result

    def _effective_branch(self, override: str | None, configured: str | None, role: str) -> str:
        if override:
            return override
        if configured:
            return configured
        self._logger.warn(f"No `{role}-branch` configured, falling back to '{DEFAULT_BRANCH}'")
        return DEFAULT_BRANCH


__all__ = ["LintChangedEngine"]
