"""Access to a git repository through the git command line."""

from __future__ import annotations

import subprocess
from collections.abc import Iterator
from pathlib import Path

from .commit import Commit
from .errors import BoundError, GitError, StatusError
from .ids import Id
from .versions import TAG_PATTERN, Versions, parse_tag

_DEFAULT_BRANCH = "master"


def _run(cwd: Path, args: tuple[str, ...]) -> str:
    """Run git with the given arguments in cwd and return its output."""
    command = ("git", *args)
    try:
        completed = subprocess.run(
            command,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise GitError(str(exc), command=command) from exc
    if completed.returncode != 0:
        stderr = completed.stderr
        message = stderr.strip() or f"{' '.join(command)} failed"
        raise GitError(
            message,
            command=command,
            returncode=completed.returncode,
            stderr=stderr,
        )
    return completed.stdout


def _coerce_bound(value: Id | str | None) -> Id | None:
    """Turn a range bound into an identifier, rejecting unsupported values."""
    if value is None or isinstance(value, Id):
        return value
    if isinstance(value, str):
        try:
            return Id(value)
        except ValueError as exc:
            raise BoundError() from exc
    raise BoundError()


class Repository:
    """A git repository with a working tree."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    @classmethod
    def open(cls, path: str | Path) -> Repository:
        """Find and open the repository containing the given path."""
        start = Path(path)
        if not start.exists():
            raise GitError(f"path does not exist: {start}")
        if not start.is_dir():
            start = start.parent
        toplevel = _run(start, ("rev-parse", "--show-toplevel")).strip()
        if not toplevel:
            raise GitError(f"no working tree found for {start}")
        return cls(Path(toplevel))

    def git(self, *args: str) -> str:
        """Run git inside the repository and return its standard output."""
        return _run(self.path, args)

    def add(self, spec: str) -> None:
        """Stage all files matching the given path specification."""
        self.git("add", "--", spec)

    def commit(self, message: str) -> None:
        """Commit the staged changes with the given message.

        The command line is used so that configured commit signing applies.
        """
        command = [
            "git",
            "commit",
            "--cleanup=verbatim",
            "--signoff",
            "--no-verify",
            "--message",
            message,
        ]
        returncode = subprocess.run(command, cwd=self.path, check=False).returncode
        if returncode != 0:
            raise StatusError(returncode)

    def branch(self, name: str) -> None:
        """Create a branch at HEAD and check it out."""
        head = self.git("rev-parse", "--verify", "HEAD^{commit}").strip()
        self.git("branch", name, head)
        self.git("checkout", "--force", name)

    def is_clean(self) -> bool:
        """Return whether there are no uncommitted or untracked changes."""
        status = self.git("status", "--porcelain", "--untracked-files=all")
        return not status.strip()

    def on_default_branch(self) -> bool:
        """Return whether HEAD is on the default branch."""
        self.git("rev-parse", "--verify", "HEAD")
        name = self.git("rev-parse", "--abbrev-ref", "HEAD").strip()
        return name == _DEFAULT_BRANCH

    def get(self, id: Id | str) -> Commit:
        """Return the commit with the given identifier."""
        oid = id if isinstance(id, Id) else Id(id)
        raw = self.git("cat-file", "commit", oid.hex)
        headers, _, message = raw.partition("\n\n")
        parents = tuple(
            Id(line.split(" ", 1)[1])
            for line in headers.split("\n")
            if line.startswith("parent ")
        )
        return Commit(self, oid, message, parents)

    def find(self, spec: str) -> Commit:
        """Return the commit a revision specification points to."""
        resolved = self.git("rev-parse", "--verify", f"{spec}^{{commit}}").strip()
        return self.get(Id(resolved))

    def commits(
        self, start: Id | str | None = None, end: Id | str | None = None
    ) -> Iterator[Commit]:
        """Iterate commits in topological order from start, or HEAD, back.

        The start is included; iteration stops at end, which is excluded.
        """
        first = _coerce_bound(start)
        stop = _coerce_bound(end)
        origin = "HEAD" if first is None else first.hex
        listed = self.git("rev-list", "--topo-order", origin).split()

        def walk() -> Iterator[Commit]:
            for line in listed:
                oid = Id(line)
                if oid == stop:
                    return
                yield self.get(oid)

        return walk()

    def versions(self) -> Versions:
        """Return the versions tagged in the repository."""
        names = self.git("tag", "--list", TAG_PATTERN).split()
        tags = {
            parse_tag(name): self.find(f"refs/tags/{name}").id for name in names
        }
        return Versions(self, tags)

    def __repr__(self) -> str:
        return f"Repository(path={str(self.path)!r})"