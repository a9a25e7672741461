"""Resolve the CLI path argument into a validated absolute directory."""

from __future__ import annotations

from pathlib import Path

from .errors import NotADirectoryPathError, PathResolutionError

CURRENT_DIRECTORY = "."


def resolve_directory(raw_path: str | None, default_path: Path | None = None) -> Path:
    """Return the canonical absolute directory named by ``raw_path``.

    ``None`` selects ``default_path``, or the current working directory when
    that is omitted too. Symlinks and ``.``/``..`` components are resolved
    strictly, so a missing component (including a deleted working directory)
    raises ``PathResolutionError``. A path that resolves to a non-directory
    raises ``NotADirectoryPathError``.
    """
    if raw_path is None:
        raw_path = str(default_path) if default_path is not None else CURRENT_DIRECTORY
    if not raw_path:
        raise PathResolutionError(raw_path)

    try:
        resolved = Path(raw_path).resolve(strict=True)
    except (OSError, RuntimeError, ValueError) as exc:
        raise PathResolutionError(raw_path) from exc

    if not resolved.is_dir():
        raise NotADirectoryPathError(resolved)
    return resolved


__all__ = ["resolve_directory"]
