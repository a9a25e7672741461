"""Domain datatype for one scanned subdirectory."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DirEntry:
    """Subdirectory path plus the modification time observed when it was stat'd."""

    path: Path
    mtime: int

    @property
    def name(self) -> str:
        return self.path.name


__all__ = ["DirEntry"]
