"""Quit command."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from .base import CommandDescriptor
from ..output import ConsoleOutput

if TYPE_CHECKING:  # pragma: no cover
    from ..context import ConsoleContext


def quit_command(ctx: "ConsoleContext", argv: List[str], out: ConsoleOutput) -> bool:
    ctx.termination.set()
    return True


QUIT = CommandDescriptor("quit", "Quits console.", "quit", quit_command)
