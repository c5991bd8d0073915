# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Service helpers wiring CLI options into a lint-changed run."""

from __future__ import annotations

import asyncio

from ..config import LintChangedConfig, default_sources, load_config
from ..errors import ConfigurationError, ResolutionError
from ..execution.results import RunResult
from ..orchestrator import LintChangedEngine
from ..process import CommandExecutor, ShellCommandExecutor
from ..vcs import GitGateway, VersionControlGateway
from ._cli_models import LintChangedCLIOptions
from .shared import CLIError, CLILogger


def load_cli_config(options: LintChangedCLIOptions, *, logger: CLILogger) -> LintChangedConfig:
    """Load configuration for ``options`` or raise a :class:`CLIError`.

    Args:
        options: Normalised CLI options.
        logger: CLI logger used to report the problem.

    Returns:
        LintChangedConfig: Validated configuration.

    Raises:
        CLIError: If no rule mapping can be loaded.
    """

    try:
        config = load_config(default_sources(options.root, options.config_path))
    except ConfigurationError as exc:
        logger.warn(str(exc))
        raise CLIError(str(exc)) from exc
    logger.debug(f"config source={config.source!r} rules={len(config.rules)}")
    return config


def run_lint_changed(
    options: LintChangedCLIOptions,
    *,
    logger: CLILogger,
    gateway: VersionControlGateway | None = None,
    executor: CommandExecutor | None = None,
) -> RunResult:
    """Run lint-changed for ``options``.

    Configuration is loaded before any git query; resolution errors abort the
    run before any lint command starts.

    Args:
        options: Normalised CLI options.
        logger: CLI logger shared with the engine.
        gateway: Optional version-control gateway override.
        executor: Optional lint command executor override.

    Returns:
        RunResult: Aggregate verdict of the run.

    Raises:
        CLIError: On configuration or resolution failures.
    """

    config = load_cli_config(options, logger=logger)
    engine = LintChangedEngine(
        config,
        gateway=gateway or GitGateway(root=options.root),
        executor=executor or ShellCommandExecutor(cwd=options.root),
        logger=logger,
        root=options.root,
        concurrency=options.jobs,
    )
    try:
        return asyncio.run(engine.run(base_branch=options.base_branch, release_branch=options.release_branch))
    except ResolutionError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc


__all__ = ["load_cli_config", "run_lint_changed"]
