"""Versions tagged in a repository."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Protocol

from semver import Version

from .errors import VersionError
from .ids import Id

TAG_PATTERN = "v[0-9]*.[0-9]*.[0-9]**"


class _CommitSource(Protocol):
    def commits(self, start: Id | None, end: Id | None) -> Any: ...


def parse_tag(name: str) -> Version:
    """Parse a tag such as ``v1.2.3`` into a version."""
    try:
        return Version.parse(name.lstrip("v"))
    except (ValueError, TypeError) as exc:
        raise VersionError() from exc


def _coerce(version: Version | str) -> Version:
    if isinstance(version, Version):
        return version
    return parse_tag(version)


class Versions:
    """Versions of a repository, each mapped to the commit of its tag.

    Iteration runs from the newest version to the oldest.
    """

    def __init__(self, repository: _CommitSource, tags: Mapping[Version, Id]) -> None:
        self._repository = repository
        self._tags: dict[Version, Id] = dict(
            sorted(tags.items(), key=lambda item: item[0])
        )

    def get(self, version: Version | str) -> Id | None:
        """Return the commit id of the given version, if it is known."""
        return self._tags.get(_coerce(version))

    def contains(self, version: Version | str) -> bool:
        """Return whether the given version is known."""
        return _coerce(version) in self._tags

    def range(
        self, start: Version | str | None = None, stop: Version | str | None = None
    ) -> Iterator[tuple[Version, Id]]:
        """Yield versions from start (included) to stop (excluded), oldest first."""
        low = None if start is None else _coerce(start)
        high = None if stop is None else _coerce(stop)
        return (
            (version, id)
            for version, id in self._tags.items()
            if (low is None or version >= low) and (high is None or version < high)
        )

    def commits(self, version: Version | str) -> Any:
        """Return the commits released in the given version."""
        version = _coerce(version)
        if version not in self._tags:
            raise VersionError()
        older = [id for other, id in self._tags.items() if other < version]
        end = older[-1] if older else None
        return self._repository.commits(self._tags[version], end)

    def unreleased(self) -> Any:
        """Return the commits made after the latest version."""
        latest = self.latest()
        end = None if latest is None else self._tags[latest]
        return self._repository.commits(None, end)

    def latest(self) -> Version | None:
        """Return the newest version, or None when there is none."""
        return next(reversed(self._tags), None)

    def __iter__(self) -> Iterator[tuple[Version, Id]]:
        return iter(reversed(self._tags.items()))

    def __len__(self) -> int:
        return len(self._tags)

    def __contains__(self, version: object) -> bool:
        if not isinstance(version, (Version, str)):
            return False
        try:
            return self.contains(version)
        except VersionError:
            return False

    def __repr__(self) -> str:
        tags = {str(version): id.hex for version, id in self._tags.items()}
        return f"Versions(tags={tags!r})"