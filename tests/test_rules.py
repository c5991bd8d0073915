# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for glob matching and work-item expansion."""

from __future__ import annotations

import pytest

from lint_changed.config import LintChangedConfig
from lint_changed.discovery.rules import WorkItem, expand_braces, glob_matches, match_rules


@pytest.mark.parametrize(
    ("pattern", "path", "expected"),
    [
        ("*.ts", "a.ts", True),
        ("*.ts", "src/deep/foo.ts", True),
        ("*.ts", "b.md", False),
        ("*.rc", ".eslintrc", False),
        (".*rc", ".eslintrc", True),
        ("*", ".hidden", True),
        ("src/*.ts", "src/foo.ts", True),
        ("src/*.ts", "src/nested/foo.ts", False),
        ("src/*.ts", "lib/foo.ts", False),
        ("src/**/*.ts", "src/foo.ts", True),
        ("src/**/*.ts", "src/a/b/c.ts", True),
        ("**/*.md", "README.md", True),
        ("**/*.md", "docs/.github/guide.md", True),
        ("./src/*.py", "src/app.py", True),
        ("*.{ts,tsx}", "web/App.tsx", True),
        ("*.{ts,tsx}", "web/App.jsx", False),
        ("src/{app,lib}/*.py", "src/lib/util.py", True),
    ],
)
def test_glob_matches(pattern: str, path: str, expected: bool) -> None:
    assert glob_matches(pattern, path) is expected


def test_expand_braces_handles_nested_alternations() -> None:
    assert expand_braces("{a,b}/*.{js,ts}") == ("a/*.js", "a/*.ts", "b/*.js", "b/*.ts")
    assert expand_braces("plain/*.py") == ("plain/*.py",)


def test_unmatched_files_produce_no_work_items() -> None:
    config = LintChangedConfig.from_mapping({"*.ts": "eslint"})

    items = match_rules(["a.ts", "b.md"], config.rules)

    assert items == [WorkItem(file="a.ts", commands=("eslint",), pattern="*.ts")]


def test_file_matching_several_rules_yields_one_item_per_rule() -> None:
    config = LintChangedConfig.from_mapping(
        {
            "*.ts": ["eslint", "prettier --check"],
            "src/**": "cspell",
        },
    )

    items = match_rules(["src/a.ts", "README.md"], config.rules)

    assert [(item.pattern, item.file, item.commands) for item in items] == [
        ("*.ts", "src/a.ts", ("eslint", "prettier --check")),
        ("src/**", "src/a.ts", ("cspell",)),
    ]


def test_no_files_or_no_rules_yield_nothing() -> None:
    config = LintChangedConfig.from_mapping({"*.ts": "eslint"})

    assert match_rules([], config.rules) == []
    assert match_rules(["a.ts"], ()) == []
