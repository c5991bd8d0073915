# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Bounded execution of lint commands and result aggregation."""

from __future__ import annotations

from .pool import DEFAULT_CONCURRENCY, WorkerPool
from .results import FileOutcome, RunResult, aggregate
from .runner import FileLintRunner, build_command

__all__ = [
    "DEFAULT_CONCURRENCY",
    "FileLintRunner",
    "FileOutcome",
    "RunResult",
    "WorkerPool",
    "aggregate",
    "build_command",
]
