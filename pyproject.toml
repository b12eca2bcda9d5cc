[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ctrlz"
version = "0.0.0"
description = "Mono repository automation toolkit: versions, commits and changes in Git repositories"
requires-python = ">=3.10"
keywords = ["git", "monorepo", "release", "versioning", "semver", "tags"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
]
dependencies = [
    "semver>=3.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
ctrl-z = "ctrlz.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ctrlz"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
