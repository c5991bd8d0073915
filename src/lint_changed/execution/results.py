# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Per-file outcomes and the run-level verdict."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..discovery.rules import WorkItem
from ..errors import EXIT_FAILURE, EXIT_SUCCESS, CommandFailure


@dataclass(frozen=True, slots=True)
class FileOutcome:
    """Result of running one work item's command sequence."""

    item: WorkItem
    outputs: tuple[str, ...] = ()
    failure: CommandFailure | None = None

    @property
    def succeeded(self) -> bool:
        return self.failure is None

    @property
    def executed(self) -> tuple[str, ...]:
        """Return the commands that ran, including a failing one."""

        count = len(self.outputs) + (0 if self.failure is None else 1)
        return self.item.commands[:count]


@dataclass(frozen=True, slots=True)
class RunResult:
    """Aggregate of every file outcome in a run."""

    outcomes: tuple[FileOutcome, ...] = ()

    @property
    def succeeded(self) -> bool:
        """Return ``True`` when every outcome succeeded (or there were none)."""

        return all(outcome.succeeded for outcome in self.outcomes)

    @property
    def failures(self) -> tuple[FileOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if not outcome.succeeded)

    @property
    def exit_code(self) -> int:
        return EXIT_SUCCESS if self.succeeded else EXIT_FAILURE


def aggregate(outcomes: Iterable[FileOutcome]) -> RunResult:
    """Combine per-file outcomes into the run verdict.

    Args:
        outcomes: Outcomes of every scheduled work item.

    Returns:
        RunResult: Failed if any outcome failed, otherwise successful.
    """

    return RunResult(outcomes=tuple(outcomes))


__all__ = ["FileOutcome", "RunResult", "aggregate"]
