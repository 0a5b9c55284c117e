"""wzwave-console CLI entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from wzwave.controller import ControllerFactory

from .config import ConfigurationError, ConsoleSettings, load_controller_factory, parse_join_timeout
from .console import ZWaveConsole
from .events import EventSink
from .output import ConsoleOutput
from .reader import LineReader, PromptLineReader, StreamLineReader
from .shutdown import ShutdownCoordinator

LOG = logging.getLogger("wzwave_console.cli")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_arg_parser(defaults: ConsoleSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="WZWave interactive controller console")
    parser.add_argument("--device", default=defaults.device, help="Serial device of the Z-Wave controller")
    parser.add_argument("--storage", type=Path, default=defaults.storage, help="Controller storage directory")
    parser.add_argument(
        "--controller",
        default=defaults.controller,
        help="Controller factory as 'module:callable', called with (config, listener)",
    )
    parser.add_argument("--log-level", default=defaults.log_level, help="Logging level (default WARNING)")
    parser.add_argument(
        "--join-timeout",
        default=None,
        help="Seconds to wait for the console thread on shutdown (0 waits forever)",
    )
    parser.add_argument(
        "-c",
        "--command",
        help="Execute a single command non-interactively (quote the command string)",
    )
    return parser


def _build_reader(output: ConsoleOutput) -> LineReader:
    if sys.stdin.isatty() and sys.stdout.isatty():
        return PromptLineReader()
    return StreamLineReader(sys.stdin, output)


def main(argv: List[str] | None = None, *, controller_factory: Optional[ControllerFactory] = None) -> int:
    try:
        defaults = ConsoleSettings.from_env()
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    parser = build_arg_parser(defaults)
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    try:
        join_timeout = defaults.join_timeout if args.join_timeout is None else parse_join_timeout(args.join_timeout)
        settings = ConsoleSettings(
            device=args.device,
            storage=args.storage,
            controller=args.controller,
            log_level=args.log_level,
            join_timeout=join_timeout,
        )
        factory = controller_factory or load_controller_factory(settings.controller)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    output = ConsoleOutput()
    listener = EventSink(output)
    controller = factory(settings.controller_config(), listener)
    LOG.debug("controller %r built for %s", controller, settings.device)

    if args.command:
        console = ZWaveConsole(controller, output=output)
        console.process_input_line(args.command)
        return 0

    console = ZWaveConsole(controller, reader=_build_reader(output), output=output)
    ShutdownCoordinator(console, join_timeout=settings.join_timeout).install()
    try:
        console.start()
    except KeyboardInterrupt:
        print()
    print("Console closed.")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
