"""Command descriptor for the console command table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List

from ..output import ConsoleOutput

if TYPE_CHECKING:  # pragma: no cover
    from ..context import ConsoleContext

# Returns False when the arguments do not match the command's syntax.
CommandHandler = Callable[["ConsoleContext", List[str], ConsoleOutput], bool]


@dataclass(frozen=True)
class CommandDescriptor:
    """Immutable description of one console command."""

    name: str
    description: str
    syntax: str
    handler: CommandHandler
