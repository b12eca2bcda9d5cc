"""Errors raised by repository operations."""

from __future__ import annotations

from collections.abc import Sequence


class RepositoryError(Exception):
    """Base class of all repository errors."""


class GitError(RepositoryError):
    """A git operation failed."""

    def __init__(
        self,
        message: str,
        *,
        command: Sequence[str] = (),
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.command = tuple(command)
        self.returncode = returncode
        self.stderr = stderr

    def __str__(self) -> str:
        return self.message


class StatusError(RepositoryError):
    """A started process exited with a non-zero status."""

    def __init__(self, returncode: int) -> None:
        super().__init__(returncode)
        self.returncode = returncode

    def __str__(self) -> str:
        return f"process exited with status {self.returncode}"


class BoundError(RepositoryError):
    """A commit range was given with a bound that is not supported."""

    def __str__(self) -> str:
        return "invalid bound"


class VersionError(RepositoryError):
    """A version was requested that the repository does not know."""

    def __str__(self) -> str:
        return "invalid version"