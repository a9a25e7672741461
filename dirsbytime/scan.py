"""Filesystem scanning for the immediate subdirectories of one directory."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable
from pathlib import Path

from .errors import ScanError
from .types import DirEntry


def safe_dir_mtime(entry: os.DirEntry[str]) -> int | None:
    """Return whole-second mtime when ``entry`` is a directory, else ``None``.

    Symlinks are followed, so a link to a directory counts as one. Stat
    failures (entry removed mid-scan, dangling link, permissions) also yield
    ``None`` and the caller skips the entry.
    """
    try:
        st = entry.stat()
    except OSError:
        return None
    if not stat.S_ISDIR(st.st_mode):
        return None
    return st.st_mtime_ns // 1_000_000_000


def scan_directories(directory: Path) -> list[DirEntry]:
    """List subdirectories of ``directory`` in filesystem enumeration order.

    Raises ``ScanError`` when the directory itself cannot be opened or read.
    """
    found: list[DirEntry] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                mtime = safe_dir_mtime(child)
                if mtime is None:
                    continue
                found.append(DirEntry(path=Path(directory) / child.name, mtime=mtime))
    except OSError as exc:
        raise ScanError(Path(directory), exc) from exc
    return found


def sort_by_mtime(entries: Iterable[DirEntry]) -> list[DirEntry]:
    """Order entries oldest first; equal mtimes keep their scan order."""
    return sorted(entries, key=lambda item: item.mtime)


def list_directories(directory: Path) -> list[DirEntry]:
    """Scan ``directory`` and return its subdirectories oldest-modified first."""
    return sort_by_mtime(scan_directories(directory))


__all__ = [
    "safe_dir_mtime",
    "scan_directories",
    "sort_by_mtime",
    "list_directories",
]
