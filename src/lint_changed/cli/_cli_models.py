# SPDX-License-Identifier: MIT
"""Data structures for the lint-changed command line."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ..execution.pool import DEFAULT_CONCURRENCY

BASE_BRANCH_OPTION = Annotated[
    str | None,
    typer.Option(
        "--base-branch",
        "-B",
        help="Branch feature branches are compared with (default: configuration, else master).",
    ),
]
RELEASE_BRANCH_OPTION = Annotated[
    str | None,
    typer.Option(
        "--release-branch",
        "-R",
        help="Branch whose changes are taken since the last tag (default: configuration, else master).",
    ),
]
ROOT_OPTION = Annotated[
    Path | None,
    typer.Option("--root", "-r", help="Repository root (default: current directory)."),
]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="TOML file declaring rules instead of pyproject.toml/package.json."),
]
JOBS_OPTION = Annotated[
    int,
    typer.Option("--jobs", "-j", min=1, help="Maximum number of files linted at once."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
NO_COLOR_OPTION = Annotated[
    bool,
    typer.Option("--no-color", help="Disable coloured output."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Print debug information."),
]


@dataclass(slots=True, frozen=True)
class LintChangedCLIOptions:
    """Normalised command-line options."""

    root: Path
    config_path: Path | None
    base_branch: str | None
    release_branch: str | None
    jobs: int = DEFAULT_CONCURRENCY
    emoji: bool = False
    no_color: bool = False
    debug: bool = False

    @classmethod
    def from_cli(
        cls,
        *,
        root: Path | None,
        config_path: Path | None,
        base_branch: str | None,
        release_branch: str | None,
        jobs: int,
        emoji: bool,
        no_color: bool,
        debug: bool,
    ) -> LintChangedCLIOptions:
        """Return options parsed from CLI arguments."""

        return cls(
            root=(root or Path.cwd()).resolve(),
            config_path=config_path,
            base_branch=base_branch or None,
            release_branch=release_branch or None,
            jobs=jobs,
            emoji=emoji,
            no_color=no_color,
            debug=debug,
        )


__all__ = ["LintChangedCLIOptions"]
