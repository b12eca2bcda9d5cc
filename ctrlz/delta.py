"""Changes made to paths by a commit."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import PurePosixPath


class DeltaKind(enum.Enum):
    """Kind of change made to a path."""

    CREATE = "create"
    MODIFY = "modify"
    RENAME = "rename"
    DELETE = "delete"


@dataclass(frozen=True)
class Delta:
    """A change to a path; renames also carry the path they came from."""

    kind: DeltaKind
    path: PurePosixPath
    from_path: PurePosixPath | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", PurePosixPath(self.path))
        if self.from_path is not None:
            object.__setattr__(self, "from_path", PurePosixPath(self.from_path))
        if self.kind is DeltaKind.RENAME and self.from_path is None:
            raise ValueError("a rename needs the path it came from")
        if self.kind is not DeltaKind.RENAME and self.from_path is not None:
            raise ValueError(f"a {self.kind.value} delta has no source path")


def _unquote(path: str) -> str:
    """Undo the C-style quoting git applies to unusual paths."""
    if len(path) >= 2 and path.startswith('"') and path.endswith('"'):
        raw = path[1:-1].encode("utf-8").decode("unicode_escape")
        return raw.encode("latin-1").decode("utf-8")
    return path


def _records(output: str) -> Iterator[tuple[str, list[str]]]:
    """Yield the status letter and paths of each record in the output."""
    if "\0" in output:
        tokens = [token for token in output.split("\0")]
        if tokens and tokens[-1] == "":
            tokens.pop()
        stream = iter(tokens)
        for status in stream:
            status = status.strip()
            if not status:
                continue
            count = 2 if status[0] in "RC" else 1
            paths = [next(stream, None) for _ in range(count)]
            if any(p is None or p == "" for p in paths):
                raise ValueError(f"truncated record for status {status!r}")
            yield status, [p for p in paths if p is not None]
        return
    for line in output.splitlines():
        if not line.strip():
            continue
        status, *paths = line.split("\t")
        status = status.strip()
        count = 2 if status[:1] in ("R", "C") else 1
        if not status or len(paths) != count or not all(paths):
            raise ValueError(f"malformed name-status line: {line!r}")
        yield status, [_unquote(p) for p in paths]


def parse_name_status(output: str) -> Iterator[Delta]:
    """Yield deltas from ``git diff --name-status`` output, plain or ``-z``.

    Copies and type changes count as modifications; statuses other than
    added, modified, copied, type-changed, renamed and deleted are skipped.
    """
    for status, paths in _records(output):
        letter = status[0]
        if letter == "A":
            yield Delta(DeltaKind.CREATE, PurePosixPath(paths[0]))
        elif letter in ("M", "T"):
            yield Delta(DeltaKind.MODIFY, PurePosixPath(paths[0]))
        elif letter == "C":
            yield Delta(DeltaKind.MODIFY, PurePosixPath(paths[1]))
        elif letter == "R":
            yield Delta(
                DeltaKind.RENAME,
                PurePosixPath(paths[1]),
                PurePosixPath(paths[0]),
            )
        elif letter == "D":
            yield Delta(DeltaKind.DELETE, PurePosixPath(paths[0]))