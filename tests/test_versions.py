import pytest
from semver import Version

from ctrlz.errors import VersionError
from ctrlz.ids import Id
from ctrlz.versions import Versions, parse_tag

OLD = Id("b" * 40)
MID = Id("a" * 40)
NEW = Id("c" * 40)


class FakeRepository:
    def __init__(self):
        self.calls = []
        self.result = object()

    def commits(self, start, end):
        self.calls.append((start, end))
        return self.result


@pytest.fixture
def repository():
    return FakeRepository()


@pytest.fixture
def versions(repository):
    return Versions(
        repository,
        {
            Version.parse("1.0.0"): MID,
            Version.parse("0.9.0"): OLD,
            Version.parse("1.1.0"): NEW,
        },
    )


def test_parse_tag():
    assert parse_tag("v1.2.3") == Version(1, 2, 3)


def test_parse_tag_prerelease():
    version = parse_tag("v1.0.0-rc.1")
    assert version.prerelease == "rc.1"
    assert version < Version(1, 0, 0)


@pytest.mark.parametrize("name", ["v1.2", "vx.y.z", "v01.0.0"])
def test_parse_tag_invalid(name):
    with pytest.raises(VersionError):
        parse_tag(name)


def test_iteration_newest_first(versions):
    assert [str(v) for v, _ in versions] == ["1.1.0", "1.0.0", "0.9.0"]


def test_len(versions):
    assert len(versions) == 3


def test_latest(versions):
    assert versions.latest() == Version(1, 1, 0)


def test_latest_empty(repository):
    assert Versions(repository, {}).latest() is None


def test_get(versions):
    assert versions.get("1.0.0") == MID
    assert versions.get(Version(0, 9, 0)) == OLD
    assert versions.get("2.0.0") is None


def test_contains(versions):
    assert versions.contains("v1.0.0")
    assert not versions.contains("3.0.0")
    assert "1.1.0" in versions
    assert "garbage" not in versions


def test_range(versions):
    assert list(versions.range("0.9.0", "1.1.0")) == [
        (Version(0, 9, 0), OLD),
        (Version(1, 0, 0), MID),
    ]


def test_range_unbounded(versions):
    assert [v for v, _ in versions.range()] == sorted(v for v, _ in versions)


def test_commits_between_versions(versions, repository):
    assert versions.commits("1.0.0") is repository.result
    assert repository.calls == [(MID, OLD)]


def test_commits_of_first_version(versions, repository):
    versions.commits("0.9.0")
    assert repository.calls == [(OLD, None)]


def test_commits_unknown_version(versions, repository):
    with pytest.raises(VersionError):
        versions.commits("2.0.0")
    assert repository.calls == []


def test_unreleased(versions, repository):
    assert versions.unreleased() is repository.result
    assert repository.calls == [(None, NEW)]


def test_unreleased_without_versions(repository):
    Versions(repository, {}).unreleased()
    assert repository.calls == [(None, None)]


def test_repr_lists_tags(versions):
    assert "'1.0.0': '" + MID.hex + "'" in repr(versions)