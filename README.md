# ctrlz

Tools for working with the releases of a repository kept in Git. ctrlz reads
the version tags of a repository, walks its commits in topological order, and
reports the paths each commit changed.

It drives the `git` executable, which must be on your `PATH`.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Command line

List every released version, newest first:

```
ctrl-z version list
```

Show only the latest version:

```
ctrl-z version list --latest
```

Run against another working directory (it must exist; the repository
containing it is used):

```
ctrl-z --directory path/to/repo version list
```

`ctrl-z --version` prints the program version. On failure the command prints
`Error: ...` to standard error and exits with status 1.

Only tags matching `v[0-9]*.[0-9]*.[0-9]*` count as versions, and each must
parse as a semantic version once the leading `v` is removed. Pre-release and
build suffixes are allowed, such as `v1.2.0-rc.1`.

## Library

```python
from ctrlz.repository import Repository

repo = Repository.open(".")

print(repo.is_clean())           # no uncommitted or untracked changes
print(repo.on_default_branch())  # HEAD is on "master"

versions = repo.versions()
print(versions.latest())

# Commits made after the latest version
for commit in versions.unreleased():
    print(commit.id.short(), commit.summary)
    for delta in commit.deltas():
        print("   ", delta.kind, delta.path)
```

### `ctrlz.repository.Repository`

- `Repository.open(path)` finds the repository containing `path`.
- `git(*args)` runs git in the repository and returns its standard output.
- `add(spec)` stages files matching a path specification.
- `commit(message)` commits staged changes with `git commit --signoff
  --no-verify --cleanup=verbatim`, so configured commit signing applies.
- `branch(name)` creates a branch at `HEAD` and checks it out.
- `get(id)` and `find(spec)` return a `Commit` by identifier or by any
  revision specification.
- `commits(start=None, end=None)` iterates commits in topological order from
  `start` (or `HEAD`), stopping before `end`.
- `versions()` returns the tagged versions as a `Versions` object.

### `ctrlz.versions.Versions`

Iterating yields `(version, id)` pairs from newest to oldest. `get`,
`contains` and `in` look up a version given as a `semver.Version` or a tag
string. `range(start, stop)` yields versions from `start` (included) to `stop`
(excluded), oldest first. `commits(version)` returns the commits of one
release: from its tag back to, but not including, the previous tag.
`unreleased()` returns the commits after the latest tag, and `latest()` the
newest version or `None`. `ctrlz.versions.parse_tag` turns a tag such as
`v1.2.3` into a version.

### Commits and deltas

`ctrlz.commit.Commit` has `id`, `message`, `parents`, `summary` (first
paragraph as one line) and `body` (the rest, or `None`). Commits compare equal
when their ids match. `deltas()` yields `ctrlz.delta.Delta` values against the
first parent; each has a `kind` (`DeltaKind.CREATE`, `MODIFY`, `RENAME` or
`DELETE`), a `path`, and for renames a `from_path`. Copies and type changes
count as modifications. `ctrlz.delta.parse_name_status` parses `git diff
--name-status` output, plain or `-z`.

`ctrlz.commit.trim_trailers(message)` removes the trailing block of trailers
such as `Signed-off-by:` from a message, so the body can go into release
notes.

`ctrlz.ids.Id` holds a 40- or 64-digit hexadecimal object identifier;
`short()` returns its first seven digits.

### Errors

Failures raise subclasses of `ctrlz.errors.RepositoryError`: `GitError` when
a git command fails, `StatusError` when `git commit` exits with a non-zero
status, `BoundError` for a commit range bound that is not an identifier, and
`VersionError` for a version that is unknown or cannot be parsed.

## What it does not do

ctrlz knows nothing of the packages inside a repository. It does not read
package manifests, list packages or their dependency order, work out which
packages changed, suggest or apply version increments, create releases,
generate changelogs, or validate commit messages. The only command is
`version list`.