# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the lint-changed command line boundary."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from helpers.fakes import FakeGateway, ScriptedExecutor
from typer.testing import CliRunner

from lint_changed.cli import app
from lint_changed.cli import _cli_services


@pytest.fixture
def fakes(monkeypatch: pytest.MonkeyPatch) -> tuple[FakeGateway, ScriptedExecutor]:
    gateway = FakeGateway()
    executor = ScriptedExecutor()
    monkeypatch.setattr(_cli_services, "GitGateway", lambda **_: gateway)
    monkeypatch.setattr(_cli_services, "ShellCommandExecutor", lambda **_: executor)
    return gateway, executor


def _write_package_json(root: Path, payload: dict[str, object]) -> None:
    (root / "package.json").write_text(json.dumps(payload), encoding="utf-8")


def test_missing_configuration_exits_without_git_queries(
    tmp_path: Path,
    fakes: tuple[FakeGateway, ScriptedExecutor],
) -> None:
    gateway, executor = fakes
    _write_package_json(tmp_path, {"name": "demo"})

    result = CliRunner().invoke(app, ["--root", str(tmp_path), "--no-color"])

    assert result.exit_code == 1
    assert "No `lint-changed` rules found" in result.output
    assert gateway.calls == []
    assert executor.calls == []


def test_successful_run_exits_zero(tmp_path: Path, fakes: tuple[FakeGateway, ScriptedExecutor]) -> None:
    gateway, executor = fakes
    gateway.files = ["a.ts", "b.md"]
    (tmp_path / "a.ts").write_text("", encoding="utf-8")
    (tmp_path / "b.md").write_text("", encoding="utf-8")
    _write_package_json(tmp_path, {"lint-changed": {"*.ts": "eslint"}})

    result = CliRunner().invoke(app, ["--root", str(tmp_path), "-B", "develop", "-R", "main", "--no-color"])

    assert result.exit_code == 0
    assert executor.calls == ["eslint a.ts"]
    assert ("merge_base", "develop") in gateway.calls


def test_lint_failure_exits_one(tmp_path: Path, fakes: tuple[FakeGateway, ScriptedExecutor]) -> None:
    gateway, executor = fakes
    gateway.files = ["a.ts"]
    executor.responses = {"eslint a.ts": ("a.ts: no-var", "", 1)}
    (tmp_path / "a.ts").write_text("", encoding="utf-8")
    _write_package_json(tmp_path, {"lint-changed": {"*.ts": ["eslint", "prettier --check"]}})

    result = CliRunner().invoke(app, ["--root", str(tmp_path), "--no-color"])

    assert result.exit_code == 1
    assert executor.calls == ["eslint a.ts"]
    assert "a.ts: no-var" in result.output


def test_resolution_error_exits_one_without_linting(
    tmp_path: Path,
    fakes: tuple[FakeGateway, ScriptedExecutor],
) -> None:
    gateway, executor = fakes
    gateway.branch = "master"
    gateway.tag = None
    _write_package_json(tmp_path, {"lint-changed": {"*": "lint"}})

    result = CliRunner().invoke(app, ["--root", str(tmp_path), "--no-color"])

    assert result.exit_code == 1
    assert "Unable to retrieve last tag" in result.output
    assert executor.calls == []


def test_nothing_changed_exits_zero(tmp_path: Path, fakes: tuple[FakeGateway, ScriptedExecutor]) -> None:
    _gateway, executor = fakes
    (tmp_path / "pyproject.toml").write_text('[tool.lint-changed.rules]\n"*.py" = "ruff check"\n', encoding="utf-8")

    result = CliRunner().invoke(app, ["--root", str(tmp_path), "--no-color"])

    assert result.exit_code == 0
    assert "No files changed, skipping linting" in result.output
    assert executor.calls == []


def test_jobs_must_be_positive(tmp_path: Path, fakes: tuple[FakeGateway, ScriptedExecutor]) -> None:
    result = CliRunner().invoke(app, ["--root", str(tmp_path), "--jobs", "0"])

    assert result.exit_code == 2
