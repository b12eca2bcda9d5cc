"""Command line interface for mono repository automation."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from .errors import RepositoryError
from .repository import Repository

PROG = "ctrl-z"
VERSION = "0.0.0"
DESCRIPTION = "Mono repository automation toolkit"

_Handler = Callable[[Repository, argparse.Namespace], list[str]]


def _existing_path(value: str) -> Path:
    """Accept a path only if it exists."""
    path = Path(value)
    try:
        path.stat()
    except OSError as exc:
        raise argparse.ArgumentTypeError(
            f"{value}: {exc.strerror or exc}"
        ) from exc
    return path


def list_versions(repository: Repository, latest: bool = False) -> list[str]:
    """Return the repository's versions as tags, newest first.

    With ``latest`` set, only the newest version is returned.
    """
    lines: list[str] = []
    for version, _ in repository.versions():
        lines.append(f"v{version}")
        if latest:
            break
    return lines


def _run_version_list(
    repository: Repository, args: argparse.Namespace
) -> list[str]:
    return list_versions(repository, args.latest)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all commands."""
    parser = argparse.ArgumentParser(prog=PROG, description=DESCRIPTION)
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {VERSION}"
    )
    parser.add_argument(
        "-d",
        "--directory",
        type=_existing_path,
        default=".",
        help="Working directory.",
    )
    commands = parser.add_subparsers(
        dest="command", required=True, metavar="COMMAND"
    )

    version = commands.add_parser(
        "version", help="Versioning and release automation."
    )
    version_commands = version.add_subparsers(
        dest="version_command", required=True, metavar="COMMAND"
    )
    version_list = version_commands.add_parser(
        "list", help="List versions in reverse chronological order."
    )
    version_list.add_argument(
        "-l",
        "--latest",
        action="store_true",
        help="Show only the latest version.",
    )
    version_list.set_defaults(handler=_run_version_list)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface and return the exit status."""
    args = build_parser().parse_args(argv)
    handler: _Handler = args.handler
    try:
        repository = Repository.open(args.directory)
        lines = handler(repository, args)
    except (RepositoryError, OSError, ValueError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())