"""Versions, commits and changed paths of Git repositories, with a small command line."""

__version__ = "0.0.0"

__all__ = ["cli", "commit", "delta", "errors", "ids", "repository", "versions"]