# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point."""

from __future__ import annotations

import typer

from ..execution.pool import DEFAULT_CONCURRENCY
from ._cli_models import (
    BASE_BRANCH_OPTION,
    CONFIG_OPTION,
    DEBUG_OPTION,
    EMOJI_OPTION,
    JOBS_OPTION,
    NO_COLOR_OPTION,
    RELEASE_BRANCH_OPTION,
    ROOT_OPTION,
    LintChangedCLIOptions,
)
from ._cli_services import run_lint_changed
from .shared import CLIError, build_cli_logger

app = typer.Typer(
    name="lint-changed",
    help="Run configured lint commands against files changed on the current branch.",
    add_completion=False,
)


@app.command()
def lint_changed(
    base_branch: BASE_BRANCH_OPTION = None,
    release_branch: RELEASE_BRANCH_OPTION = None,
    root: ROOT_OPTION = None,
    config: CONFIG_OPTION = None,
    jobs: JOBS_OPTION = DEFAULT_CONCURRENCY,
    emoji: EMOJI_OPTION = False,
    no_color: NO_COLOR_OPTION = False,
    debug: DEBUG_OPTION = False,
) -> None:
    """Lint the files changed since the base branch or the last release tag.

    Exits 0 when every command passed or nothing changed, 1 otherwise.
    """

    options = LintChangedCLIOptions.from_cli(
        root=root,
        config_path=config,
        base_branch=base_branch,
        release_branch=release_branch,
        jobs=jobs,
        emoji=emoji,
        no_color=no_color,
        debug=debug,
    )
    logger = build_cli_logger(emoji=options.emoji, debug=options.debug, no_color=options.no_color)
    try:
        result = run_lint_changed(options, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    raise typer.Exit(code=result.exit_code)


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "main"]
