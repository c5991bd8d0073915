# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run lint commands against the files changed on the current branch."""

from __future__ import annotations

from .config import LintChangedConfig, LintRule, load_config
from .discovery import ChangeSet, ChangeSetResolver, WorkItem, match_rules
from .errors import (
    CommandFailure,
    ConfigurationError,
    DiffQueryError,
    LintChangedError,
    MergeBaseError,
    ResolutionError,
    TagResolutionError,
)
from .execution import FileLintRunner, FileOutcome, RunResult, WorkerPool, aggregate
from .orchestrator import LintChangedEngine

__version__ = "1.0.0"

__all__ = [
    "ChangeSet",
    "ChangeSetResolver",
    "CommandFailure",
    "ConfigurationError",
    "DiffQueryError",
    "FileLintRunner",
    "FileOutcome",
    "LintChangedConfig",
    "LintChangedEngine",
    "LintChangedError",
    "LintRule",
    "MergeBaseError",
    "ResolutionError",
    "RunResult",
    "TagResolutionError",
    "WorkItem",
    "WorkerPool",
    "__version__",
    "aggregate",
    "load_config",
    "match_rules",
]
