# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for change-set resolution by branch role."""

from __future__ import annotations

from pathlib import Path

import pytest
from helpers.fakes import FakeGateway, RecordingLogger

from lint_changed.discovery.changes import ChangeSetResolver, filter_existing
from lint_changed.errors import (
    BranchResolutionError,
    DiffQueryError,
    MergeBaseError,
    ResolutionError,
    TagResolutionError,
)


def _touch(root: Path, *names: str) -> None:
    for name in names:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("", encoding="utf-8")


def _resolver(gateway: FakeGateway, root: Path, logger: RecordingLogger | None = None) -> ChangeSetResolver:
    return ChangeSetResolver(gateway, root=root, logger=logger or RecordingLogger())


def test_filter_existing_drops_deleted_files_and_is_idempotent(tmp_path: Path) -> None:
    _touch(tmp_path, "a.ts", "src/b.ts")
    reported = ["a.ts", "deleted.ts", "src/b.ts"]

    once = filter_existing(reported, tmp_path)

    assert once == ["a.ts", "src/b.ts"]
    assert filter_existing(once, tmp_path) == once


@pytest.mark.asyncio
async def test_release_branch_diffs_from_last_tag(tmp_path: Path) -> None:
    _touch(tmp_path, "a.ts", "b.ts")
    gateway = FakeGateway(branch="master", tag="v1.2.0", files=["a.ts", "b.ts", "deleted.ts"])

    change_set = await _resolver(gateway, tmp_path).resolve("master", base_branch="develop", release_branch="master")

    assert change_set.files == ("a.ts", "b.ts")
    assert change_set.basis == "v1.2.0"
    assert gateway.calls == [("last_tag",), ("changed_files", "v1.2.0...")]


@pytest.mark.asyncio
async def test_feature_branch_diffs_against_merge_base(tmp_path: Path) -> None:
    _touch(tmp_path, "src/app.py")
    gateway = FakeGateway(merge_base_commit="deadbeef", files=["src/app.py"])
    logger = RecordingLogger()

    change_set = await _resolver(gateway, tmp_path, logger).resolve(
        "feature/x",
        base_branch="develop",
        release_branch="master",
    )

    assert change_set.files == ("src/app.py",)
    assert gateway.calls == [("merge_base", "develop"), ("changed_files", "feature/x deadbeef")]
    assert "last_tag" not in gateway.operations
    assert logger.messages("info")[0] == "Checking for files that have changed on feature/x since develop"
    assert logger.messages("output") == ["src/app.py\n"]


@pytest.mark.asyncio
async def test_empty_change_set_is_not_an_error(tmp_path: Path) -> None:
    gateway = FakeGateway(files=["gone.ts"])
    logger = RecordingLogger()

    change_set = await _resolver(gateway, tmp_path, logger).resolve("x", base_branch="master", release_branch="master")

    assert not change_set
    assert len(change_set) == 0
    assert logger.messages("output") == []


@pytest.mark.asyncio
async def test_missing_tag_is_fatal(tmp_path: Path) -> None:
    gateway = FakeGateway(tag=None)

    with pytest.raises(TagResolutionError, match="Unable to retrieve last tag"):
        await _resolver(gateway, tmp_path).resolve("master", base_branch="master", release_branch="master")
    assert gateway.operations == ["last_tag"]


@pytest.mark.asyncio
async def test_missing_merge_base_is_fatal(tmp_path: Path) -> None:
    gateway = FakeGateway(merge_base_commit=None)

    with pytest.raises(MergeBaseError, match="no merge base"):
        await _resolver(gateway, tmp_path).resolve("topic", base_branch="master", release_branch="release")
    assert gateway.operations == ["merge_base"]


@pytest.mark.asyncio
async def test_diff_failure_is_fatal(tmp_path: Path) -> None:
    gateway = FakeGateway(diff_error="fatal: bad revision")

    with pytest.raises(DiffQueryError) as excinfo:
        await _resolver(gateway, tmp_path).resolve("topic", base_branch="develop", release_branch="master")
    assert isinstance(excinfo.value, ResolutionError)
    assert str(excinfo.value) == "Unable to get changed files since develop:\nfatal: bad revision"


@pytest.mark.asyncio
async def test_branch_lookup_failure_is_fatal(tmp_path: Path) -> None:
    gateway = FakeGateway(branch_error="fatal: not a git repository")

    with pytest.raises(BranchResolutionError, match="not a git repository"):
        await _resolver(gateway, tmp_path).resolve_branch()


@pytest.mark.asyncio
async def test_logging_errors_do_not_change_the_result(tmp_path: Path) -> None:
    class _BrokenLogger(RecordingLogger):
        def info(self, message: str) -> None:
            raise OSError("stdout closed")

        def output(self, message: str) -> None:
            raise OSError("stdout closed")

    _touch(tmp_path, "a.ts")
    gateway = FakeGateway(files=["a.ts"])

    change_set = await _resolver(gateway, tmp_path, _BrokenLogger()).resolve(
        "topic",
        base_branch="master",
        release_branch="master",
    )

    assert change_set.files == ("a.ts",)
