"""Interactive WZWave console: read, parse and dispatch on one thread."""

from __future__ import annotations

import logging
import sys
import threading
from typing import List, Optional

from wzwave.controller import ZWaveController

from .commands import CommandTable, build_table
from .context import ConsoleContext
from .output import ConsoleOutput
from .parser import split_command
from .reader import PROMPT, LineReader, StreamLineReader
from .shutdown import TerminationFlag

LOGGER = logging.getLogger("wzwave_console.console")

UNKNOWN_COMMAND = "Unknown command. Use 'help' command to list available commands."


class ZWaveConsole:
    """Drives a controller from typed commands until quit or shutdown.

    :meth:`start` runs the loop on the calling thread and records that
    thread so a :class:`~wzwave_console.shutdown.ShutdownCoordinator` can
    unblock and join it from elsewhere.
    """

    def __init__(
        self,
        controller: ZWaveController,
        *,
        reader: Optional[LineReader] = None,
        output: Optional[ConsoleOutput] = None,
        commands: Optional[CommandTable] = None,
    ) -> None:
        self.controller = controller
        self.output = output or ConsoleOutput()
        self.reader = reader if reader is not None else StreamLineReader(sys.stdin, self.output)
        self.commands = commands if commands is not None else build_table()
        self.termination = TerminationFlag()
        self.ctx = ConsoleContext(controller, self.commands, self.termination)
        self._thread: Optional[threading.Thread] = None

    @property
    def thread(self) -> Optional[threading.Thread]:
        return self._thread

    def start(self) -> None:
        self._thread = threading.current_thread()
        self.output.write("WZWave console starting up...")
        self.output.line("WZWave console ready.")
        try:
            while not self.termination.is_set():
                try:
                    line = self.reader.read_line(PROMPT)
                except KeyboardInterrupt:
                    break
                if line is None:
                    break
                self.process_input_line(line)
        except KeyboardInterrupt:
            LOGGER.debug("console loop interrupted")
        finally:
            self.reader.close()
        LOGGER.debug("console loop finished")

    def process_input_line(self, line: str) -> None:
        if not line.strip():
            return
        self.process_args(split_command(line))

    def process_args(self, args: List[str]) -> None:
        try:
            self._execute(args)
        except Exception as exc:
            with self.output.batch():
                self.output.line("Exception in command execution: ")
                self.output.exception(exc)

    def _execute(self, args: List[str]) -> None:
        name, *argv = args
        command = self.commands.lookup(name)
        if command is None:
            self.output.line(UNKNOWN_COMMAND)
            return
        try:
            ok = command.handler(self.ctx, argv, self.output)
        except Exception as exc:
            LOGGER.debug("command %s failed", command.name, exc_info=True)
            with self.output.batch():
                self.output.line(f"Error executing command: {exc}")
                self.output.exception(exc)
            return
        if not ok:
            self.output.line(f"Invalid syntax. Syntax: {command.syntax}")


__all__ = ["UNKNOWN_COMMAND", "ZWaveConsole"]
