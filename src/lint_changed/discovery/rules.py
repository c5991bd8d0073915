# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Match changed files against configured glob rules."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from fnmatch import fnmatchcase
from functools import lru_cache
from posixpath import basename

from ..config.models import LintRule

_PATH_SEPARATOR = "/"
_GLOBSTAR = "**"
_BRACE_RE = re.compile(r"\{([^{}]*,[^{}]*)\}")


@dataclass(frozen=True, slots=True)
class WorkItem:
    """One file paired with the commands of one matching rule."""

    file: str
    commands: tuple[str, ...]
    pattern: str


@lru_cache(maxsize=512)
def expand_braces(pattern: str) -> tuple[str, ...]:
    """Expand ``{a,b}`` alternations into separate patterns.

    Args:
        pattern: Glob pattern possibly containing brace alternations.

    Returns:
        tuple[str, ...]: Patterns without brace alternations.
    """

    match = _BRACE_RE.search(pattern)
    if match is None:
        return (pattern,)
    head, tail = pattern[: match.start()], pattern[match.end() :]
    expanded: list[str] = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(f"{head}{option}{tail}"))
    return tuple(expanded)


def _split(value: str) -> tuple[str, ...]:
    cleaned = value.replace("\\", _PATH_SEPARATOR)
    while cleaned.startswith("./"):
        cleaned = cleaned[2:]
    return tuple(segment for segment in cleaned.split(_PATH_SEPARATOR) if segment)


def _match_segments(pattern: Sequence[str], parts: Sequence[str]) -> bool:
    """Match path ``parts`` against ``pattern`` segments; ``**`` spans whole segments."""

    if not pattern:
        return not parts
    head, rest = pattern[0], pattern[1:]
    if head == _GLOBSTAR:
        return any(_match_segments(rest, parts[index:]) for index in range(len(parts) + 1))
    if not parts:
        return False
    return fnmatchcase(parts[0], head) and _match_segments(rest, parts[1:])


def glob_matches(pattern: str, path: str) -> bool:
    """Return whether ``path`` matches the glob ``pattern``.

    Hidden files are matchable. A pattern without ``/`` is compared with the
    base name only, so ``*.ts`` matches ``src/foo.ts``; otherwise the pattern
    is compared with the whole relative path and wildcards do not cross
    directory separators except through ``**``.

    Args:
        pattern: Glob pattern from a rule.
        path: Relative file path.

    Returns:
        bool: ``True`` when the path matches.
    """

    for candidate in expand_braces(pattern):
        if _PATH_SEPARATOR not in candidate:
            if fnmatchcase(basename(path.replace("\\", _PATH_SEPARATOR)), candidate):
                return True
        elif _match_segments(_split(candidate), _split(path)):
            return True
    return False


def match_rules(files: Iterable[str], rules: Sequence[LintRule]) -> list[WorkItem]:
    """Expand ``rules`` against ``files`` into work items.

    Rules are independent: a file matching several rules yields one work item
    per rule. Files matching no rule yield nothing.

    Args:
        files: Changed files in change-set order.
        rules: Rules in declaration order.

    Returns:
        list[WorkItem]: Work items grouped by rule, then file order.
    """

    changed = tuple(files)
    return [
        WorkItem(file=path, commands=rule.commands, pattern=rule.pattern)
        for rule in rules
        for path in changed
        if glob_matches(rule.pattern, path)
    ]


__all__ = ["WorkItem", "expand_braces", "glob_matches", "match_rules"]
