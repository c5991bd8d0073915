# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by configuration, resolution and execution."""

from __future__ import annotations

from typing import Final


class LintChangedError(Exception):
    """Base class for all errors raised by lint-changed."""


class ConfigurationError(LintChangedError):
    """Raised when no usable rule mapping can be loaded."""


class ResolutionError(LintChangedError):
    """Raised when the set of changed files cannot be determined.

    Resolution errors are fatal: no lint command runs once one is raised.
    """

    summary: str = "Unable to resolve changed files"

    def __init__(self, cause: str) -> None:
        """Initialise the error with the underlying cause text.

        Args:
            cause: Text reported by the version-control query that failed.
        """

        self.cause = cause
        super().__init__(f"{self.summary}:\n{cause}")


class BranchResolutionError(ResolutionError):
    """Raised when the current branch name cannot be read."""

    summary = "Unable to determine current branch"


class TagResolutionError(ResolutionError):
    """Raised when no tag is reachable from the commit before ``HEAD``."""

    summary = "Unable to retrieve last tag"


class MergeBaseError(ResolutionError):
    """Raised when ``HEAD`` and the base branch share no common ancestor."""

    summary = "Unable to retrieve merge base"


class DiffQueryError(ResolutionError):
    """Raised when the changed-file listing fails."""

    summary = "Unable to get changed files"

    def __init__(self, cause: str, *, basis: str | None = None) -> None:
        """Initialise the error, naming the comparison basis when known.

        Args:
            cause: Text reported by the failed diff query.
            basis: Tag or branch the diff was computed against.
        """

        if basis is not None:
            self.summary = f"Unable to get changed files since {basis}"
        super().__init__(cause)


class GitCommandError(LintChangedError):
    """Raised by the git gateway when a git invocation fails."""

    def __init__(self, command: str, output: str) -> None:
        """Record the failing git command and its captured output.

        Args:
            command: Full git command line that was executed.
            output: Captured output reported for the failure.
        """

        super().__init__(output or f"'{command}' failed")
        self.command = command
        self.output = output


class CommandFailure(LintChangedError):
    """A lint command exited non-zero or wrote to its error stream.

    ``output`` holds the standard output captured for the command rather than
    its error stream; operators see whatever the tool printed to stdout.
    """

    def __init__(self, command: str, output: str, *, stderr: str = "", returncode: int | None = None) -> None:
        """Capture details of a failed command.

        Args:
            command: Command line that failed.
            output: Standard output captured up to the failure.
            stderr: Error stream content captured for the command.
            returncode: Exit status reported by the process when available.
        """

        super().__init__(output)
        self.command = command
        self.output = output
        self.stderr = stderr
        self.returncode = returncode

    @property
    def report(self) -> str:
        """Return the text shown to operators for this failure.

        Returns:
            str: Captured output with leading whitespace removed.
        """

        return self.output.lstrip()


EXIT_SUCCESS: Final[int] = 0
EXIT_FAILURE: Final[int] = 1

__all__ = [
    "BranchResolutionError",
    "CommandFailure",
    "ConfigurationError",
    "DiffQueryError",
    "EXIT_FAILURE",
    "EXIT_SUCCESS",
    "GitCommandError",
    "LintChangedError",
    "MergeBaseError",
    "ResolutionError",
    "TagResolutionError",
]
