"""Render sorted directory entries as styled output lines.

Escape sequences are written unconditionally; there is no TTY detection, so
redirected output carries the same bytes as terminal output.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from .style import styled_quoted
from .types import DirEntry


def format_entry(entry: DirEntry) -> str:
    """Return the styled, quoted base name of ``entry``."""
    return styled_quoted(entry.name)


def empty_listing_message(directory: Path) -> str:
    return f"No subdirectories found in '{directory}'."


def render_listing(entries: Sequence[DirEntry], directory: Path) -> list[str]:
    """Build output lines for ``entries``, or the empty-listing notice."""
    if not entries:
        return [empty_listing_message(directory)]
    return [format_entry(entry) for entry in entries]


def write_line(out: TextIO, text: str) -> None:
    """Write ``text`` and a newline, keeping undecodable filename bytes intact.

    Names read from the filesystem may carry surrogate escapes. Streams backed
    by a binary buffer receive ``os.fsencode`` bytes so the original bytes come
    out unchanged; plain text streams get the string as-is.
    """
    buffer = getattr(out, "buffer", None)
    if buffer is None:
        out.write(text + "\n")
        return
    out.flush()
    buffer.write(os.fsencode(text + "\n"))
    buffer.flush()


def print_listing(entries: Sequence[DirEntry], directory: Path, stream: TextIO | None = None) -> None:
    """Write rendered lines to ``stream`` (``sys.stdout`` by default), one per line."""
    out = stream if stream is not None else sys.stdout
    for line in render_listing(entries, directory):
        write_line(out, line)


__all__ = ["format_entry", "empty_listing_message", "render_listing", "write_line", "print_listing"]
