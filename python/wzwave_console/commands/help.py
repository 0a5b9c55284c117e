"""Help command."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from .base import CommandDescriptor
from ..output import ConsoleOutput

if TYPE_CHECKING:  # pragma: no cover
    from ..context import ConsoleContext


def help_command(ctx: "ConsoleContext", argv: List[str], out: ConsoleOutput) -> bool:
    if len(argv) == 1:
        command = ctx.commands.lookup(argv[0])
        if command is None:
            return False
        out.line(command.description)
        out.line("")
        out.line("Syntax: " + command.syntax)
        return True
    if argv:
        return False
    out.line("Commands:")
    for name, description in ctx.commands.list_sorted():
        out.line(f"{name} - {description}")
    return True


HELP = CommandDescriptor("help", "View command help.", "help [command]", help_command)
