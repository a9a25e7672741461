"""Error types raised while resolving and scanning the target directory.

Each error formats its own user-facing message, so the CLI can print
``str(exc)`` verbatim.
"""

from __future__ import annotations

from pathlib import Path


class DirsByTimeError(Exception):
    """Base class for every error that ends a run with exit code 1."""


class UsageError(DirsByTimeError):
    """The command line did not match ``dirsbytime [directory]``."""


class PathResolutionError(DirsByTimeError):
    """The user-supplied path could not be canonicalized."""

    def __init__(self, raw_path: str) -> None:
        self.raw_path = raw_path
        super().__init__(f"Error: '{raw_path}' is invalid or does not exist.")


class NotADirectoryPathError(DirsByTimeError):
    """The path resolved, but to something other than a directory."""

    def __init__(self, resolved: Path) -> None:
        self.resolved = resolved
        super().__init__(f"Error: '{resolved}' exists but is not a directory.")


class ScanError(DirsByTimeError):
    """A validated directory could not be opened or read for listing."""

    def __init__(self, directory: Path, cause: OSError) -> None:
        self.directory = directory
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"Error: cannot read directory '{directory}': {reason}")


__all__ = [
    "DirsByTimeError",
    "UsageError",
    "PathResolutionError",
    "NotADirectoryPathError",
    "ScanError",
]
