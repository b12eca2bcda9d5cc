import pytest

from ctrlz.errors import (
    BoundError,
    GitError,
    RepositoryError,
    StatusError,
    VersionError,
)


def _git_error():
    return GitError(
        "object not found",
        command=["git", "cat-file", "commit", "nope"],
        returncode=128,
        stderr="fatal: not a valid object name",
    )


@pytest.mark.parametrize(
    ("factory", "expected"),
    [
        (_git_error, "object not found"),
        (lambda: StatusError(1), "process exited with status 1"),
        (BoundError, "invalid bound"),
        (VersionError, "invalid version"),
    ],
)
def test_all_errors_are_caught_as_repository_error(factory, expected):
    err = factory()
    assert isinstance(err, RepositoryError)
    assert str(err) == expected


def test_bound_error_message():
    assert str(BoundError()) == "invalid bound"


def test_version_error_message():
    assert str(VersionError()) == "invalid version"


def test_status_error_message_and_code():
    err = StatusError(3)
    assert err.returncode == 3
    assert str(err) == "process exited with status 3"


def test_git_error_keeps_details():
    err = GitError(
        "reference not found",
        command=["git", "rev-parse", "nope"],
        returncode=128,
        stderr="fatal: bad revision",
    )
    assert str(err) == "reference not found"
    assert err.command == ("git", "rev-parse", "nope")
    assert err.returncode == 128
    assert err.stderr == "fatal: bad revision"


def test_errors_can_be_caught_as_base():
    err = VersionError()
    try:
        raise err
    except RepositoryError as caught:
        result = caught
    assert result is err
    assert str(result) == "invalid version"