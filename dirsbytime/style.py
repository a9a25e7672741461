"""ANSI styling constants for listing output."""

from __future__ import annotations

RESET = "\033[0m"
BOLD = "\033[1m"
BLUE = "\033[34m"

DIRECTORY_STYLE = BOLD + BLUE


def styled_quoted(name: str) -> str:
    """Wrap ``name`` in single quotes with directory styling and a trailing reset."""
    return f"{DIRECTORY_STYLE}'{name}'{RESET}"


__all__ = ["RESET", "BOLD", "BLUE", "DIRECTORY_STYLE", "styled_quoted"]
