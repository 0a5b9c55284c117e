"""
wzwave-console package.

An interactive, line-oriented console that drives a Z-Wave controller while
rendering its asynchronous lifecycle events.  Use ``python -m wzwave_console``
or the ``wzwave-console`` script to launch it.
"""

from __future__ import annotations

from .cli import main
from .console import ZWaveConsole
from .shutdown import ShutdownCoordinator, TerminationFlag

__all__ = ["main", "ShutdownCoordinator", "TerminationFlag", "ZWaveConsole"]
__version__ = "0.1.0"
