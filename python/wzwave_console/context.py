"""Shared state handed to command handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from wzwave.controller import ZWaveController

from .shutdown import TerminationFlag

if TYPE_CHECKING:  # pragma: no cover
    from .commands import CommandTable


@dataclass
class ConsoleContext:
    """Holds what a command may touch: the controller, the table and the flag."""

    controller: ZWaveController
    commands: "CommandTable"
    termination: TerminationFlag
