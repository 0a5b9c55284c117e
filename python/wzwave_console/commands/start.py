"""Network start command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from .base import CommandDescriptor
from ..output import ConsoleOutput

if TYPE_CHECKING:  # pragma: no cover
    from ..context import ConsoleContext

LOGGER = logging.getLogger("wzwave_console.commands.start")


def start_command(ctx: "ConsoleContext", argv: List[str], out: ConsoleOutput) -> bool:
    LOGGER.debug("starting controller %r", ctx.controller)
    ctx.controller.start()
    return True


START = CommandDescriptor("start", "Start the network.", "start", start_command)
