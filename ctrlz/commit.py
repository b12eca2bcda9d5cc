"""Commits and the changes they make."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Protocol

from .delta import Delta, parse_name_status
from .ids import Id

_TRAILER = re.compile(r"^([A-Za-z0-9][A-Za-z0-9-]*)[ \t]*:")
_RECOGNIZED_PREFIXES = ("Signed-off-by: ", "(cherry picked from commit ")


class _GitRunner(Protocol):
    def git(self, *args: str) -> str: ...


def _split_message(message: str) -> tuple[list[str], list[str]]:
    """Split a message into the lines of its first paragraph and the rest."""
    lines = message.lstrip().split("\n")
    for position, line in enumerate(lines):
        if not line.strip():
            return lines[:position], lines[position + 1 :]
    return lines, []


@dataclass(eq=False, repr=False)
class Commit:
    """A commit in a repository, equal to another when their ids match."""

    repository: _GitRunner = field(compare=False)
    id: Id
    message: str
    parents: tuple[Id, ...] = ()

    @property
    def summary(self) -> str:
        """First paragraph of the message, joined into one line."""
        head, _ = _split_message(self.message)
        return " ".join(head).rstrip()

    @property
    def body(self) -> str | None:
        """Message after the summary, or None when there is nothing."""
        _, rest = _split_message(self.message)
        text = "\n".join(rest).strip()
        return text or None

    def deltas(self) -> Iterator[Delta]:
        """Return the changes made by this commit against its first parent."""
        args = ["diff-tree", "-r", "-z", "--name-status", "--no-renames"]
        if self.parents:
            args += [self.parents[0].hex, self.id.hex]
        else:
            args += ["--root", "--no-commit-id", self.id.hex]
        output = self.repository.git(*args)
        return parse_name_status(output)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Commit):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return str(self.id)

    def __repr__(self) -> str:
        return (
            f"Commit(id={self.id.hex!r}, summary={self.summary!r}, "
            f"body={self.body!r})"
        )


def _first_trailer_key(message: str) -> str | None:
    """Return the key of the first trailer in the message, if it has any."""
    block: list[str] = []
    for line in reversed(message.rstrip().split("\n")):
        if not line.strip():
            break
        block.append(line)
    block.reverse()

    trailers = 0
    others = 0
    recognized = False
    first: str | None = None
    for position, line in enumerate(block):
        if line.startswith("#"):
            continue
        if position > 0 and line[:1] in (" ", "\t"):
            continue
        if line.startswith(_RECOGNIZED_PREFIXES):
            recognized = True
        match = _TRAILER.match(line)
        if match:
            trailers += 1
            if first is None:
                first = match.group(1)
        elif line.startswith(_RECOGNIZED_PREFIXES):
            trailers += 1
        else:
            others += 1

    if trailers and (not others or (recognized and trailers * 3 >= others)):
        return first
    return None


def trim_trailers(message: str) -> str:
    """Return the message with its trailing block of trailers removed."""
    key = _first_trailer_key(message)
    if key is None:
        return message
    return message.split(key, 1)[0]