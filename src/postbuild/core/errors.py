from __future__ import annotations

"""Exception hierarchy shared by the injector components.

Components raise these; only :mod:`postbuild.cli` turns them into a logged
message and a non-zero exit status.
"""


class PostBuildError(Exception):
    """Base class for every error raised by postbuild."""


class InputFileError(PostBuildError):
    """The HTML input is missing, is a directory or is not a regular file."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class AssetNotFoundError(PostBuildError, FileNotFoundError):
    """A css/js pattern could not be resolved or one of its files read."""

    def __init__(self, pattern: str) -> None:
        super().__init__(f"File or folder '{pattern}' not found")
        self.pattern = pattern


class RevisionError(PostBuildError, RuntimeError):
    """The version-control revision could not be obtained."""
