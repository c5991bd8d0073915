# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run one work item's commands with fail-fast semantics."""

from __future__ import annotations

import contextlib
import shlex

from ..discovery.rules import WorkItem
from ..errors import CommandFailure
from ..interfaces import RunLogger
from ..process import CommandExecutor, run_checked
from .results import FileOutcome


def build_command(command: str, file: str) -> str:
    """Return ``command`` with ``file`` appended as its final argument.

    Args:
        command: Command template from a rule.
        file: Relative path of the file to lint.

    Returns:
        str: Shell command line.
    """

    return f"{command} {shlex.quote(file)}"


class FileLintRunner:
    """Execute the commands of a work item in order, stopping at the first failure."""

    def __init__(self, executor: CommandExecutor, *, logger: RunLogger) -> None:
        self._executor = executor
        self._logger = logger

    async def run(self, item: WorkItem) -> FileOutcome:
        """Run every command for ``item`` until one fails.

        Output of successful commands is echoed as each completes. The first
        failure is logged and recorded; later commands are skipped.

        Args:
            item: Work item to execute.

        Returns:
            FileOutcome: Outputs of the commands that passed plus the failure,
            if any.
        """

        outputs: list[str] = []
        for command in item.commands:
            command_line = build_command(command, item.file)
            with contextlib.suppress(OSError):
                self._logger.debug(f"file={item.file} cmd={command_line!r}")
            try:
                output = await run_checked(self._executor, command_line)
            except CommandFailure as failure:
                self._report(failure)
                return FileOutcome(item=item, outputs=tuple(outputs), failure=failure)
            except OSError as exc:
                failure = CommandFailure(command_line, str(exc))
                self._report(failure)
                return FileOutcome(item=item, outputs=tuple(outputs), failure=failure)
            if output:
                with contextlib.suppress(OSError):
                    self._logger.output(output)
            outputs.append(output)
        return FileOutcome(item=item, outputs=tuple(outputs))

    def _report(self, failure: CommandFailure) -> None:
        # A closed stream (EPIPE) must not abort the work item or its siblings.
        with contextlib.suppress(OSError):
            self._logger.fail(failure.report)


__all__ = ["FileLintRunner", "build_command"]
