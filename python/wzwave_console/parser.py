"""Command line tokenising for the console."""

from __future__ import annotations

from typing import List


def split_command(line: str) -> List[str]:
    """Collapse whitespace runs and split *line* into argv tokens."""
    if not line:
        return []
    return line.split()
