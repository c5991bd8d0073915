# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Change-set resolution and rule matching."""

from __future__ import annotations

from .changes import ChangeSet, ChangeSetResolver, filter_existing
from .rules import WorkItem, glob_matches, match_rules

__all__ = [
    "ChangeSet",
    "ChangeSetResolver",
    "WorkItem",
    "filter_existing",
    "glob_matches",
    "match_rules",
]
