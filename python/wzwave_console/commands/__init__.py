"""Command table for the WZWave console."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .base import CommandDescriptor, CommandHandler
from .help import HELP
from .quit import QUIT
from .start import START

BUILTIN_COMMANDS = (QUIT, HELP, START)


class DuplicateCommandError(ValueError):
    """Raised when a command name is registered twice."""


class CommandTable:
    """Maps case-normalised command names to their descriptors."""

    def __init__(self, commands: Iterable[CommandDescriptor] = ()) -> None:
        self._commands: Dict[str, CommandDescriptor] = {}
        for command in commands:
            self.register(command)

    def register(self, command: CommandDescriptor) -> None:
        key = command.name.lower()
        if key in self._commands:
            raise DuplicateCommandError(f"command already registered: {key}")
        self._commands[key] = command

    def lookup(self, name: str) -> Optional[CommandDescriptor]:
        return self._commands.get(name.lower())

    def names(self) -> List[str]:
        return sorted(self._commands)

    def list_sorted(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(name, description)`` pairs in alphabetical order."""
        for name in self.names():
            yield name, self._commands[name].description

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._commands

    def __len__(self) -> int:
        return len(self._commands)


def build_table() -> CommandTable:
    return CommandTable(BUILTIN_COMMANDS)


__all__ = [
    "BUILTIN_COMMANDS",
    "CommandDescriptor",
    "CommandHandler",
    "CommandTable",
    "DuplicateCommandError",
    "build_table",
]
