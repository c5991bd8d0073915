# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the shell command executor."""

from __future__ import annotations

from pathlib import Path

import pytest

from lint_changed.errors import CommandFailure
from lint_changed.process import CommandResult, ShellCommandExecutor, run_checked


@pytest.mark.parametrize(
    ("stderr", "returncode", "expected"),
    [
        ("", 0, True),
        ("", 2, False),
        ("warning", 0, False),
    ],
)
def test_command_result_success_rules(stderr: str, returncode: int, expected: bool) -> None:
    result = CommandResult(command="lint a.ts", stdout="out", stderr=stderr, returncode=returncode)

    assert result.succeeded is expected


@pytest.mark.asyncio
async def test_shell_executor_captures_output(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("hello\n", encoding="utf-8")
    executor = ShellCommandExecutor(cwd=tmp_path)

    result = await executor.run("cat a.txt")

    assert result.succeeded
    assert result.stdout == "hello\n"
    assert result.returncode == 0


@pytest.mark.asyncio
async def test_shell_executor_reports_exit_status_and_stderr(tmp_path: Path) -> None:
    executor = ShellCommandExecutor(cwd=tmp_path)

    result = await executor.run("echo partial; echo broken 1>&2; exit 3")

    assert not result.succeeded
    assert result.returncode == 3
    assert result.stdout == "partial\n"
    assert result.stderr == "broken\n"


@pytest.mark.asyncio
async def test_shell_executor_applies_environment(tmp_path: Path) -> None:
    executor = ShellCommandExecutor(cwd=tmp_path, env={"LINT_CHANGED_MARKER": "42"})

    assert await run_checked(executor, 'echo "$LINT_CHANGED_MARKER"') == "42"


@pytest.mark.asyncio
async def test_run_checked_raises_with_stdout_text(tmp_path: Path) -> None:
    executor = ShellCommandExecutor(cwd=tmp_path)

    with pytest.raises(CommandFailure) as excinfo:
        await run_checked(executor, "echo 'style issue'; echo noise 1>&2")

    assert excinfo.value.output == "style issue\n"
    assert excinfo.value.stderr == "noise\n"
    assert excinfo.value.returncode == 0
