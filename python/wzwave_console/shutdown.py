"""Termination flag and the shutdown sequence for the console loop thread."""

from __future__ import annotations

import atexit
import logging
import os
import signal
import threading
from typing import TYPE_CHECKING, Callable, Iterable, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .console import ZWaveConsole

LOGGER = logging.getLogger("wzwave_console.shutdown")

DEFAULT_JOIN_TIMEOUT = 5.0
INTERRUPT_GRACE = 0.5


class TerminationFlag:
    """One-way boolean shared between the loop thread and other threads."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def set(self) -> None:
        self._event.set()

    def is_set(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self._event.wait(timeout)

    def __bool__(self) -> bool:
        return self._event.is_set()


def interrupt_thread(thread: threading.Thread) -> None:
    """Raise KeyboardInterrupt in *thread* when it is the main thread.

    Python only runs signal handlers on the main thread, so other threads
    cannot be interrupted and are left to the reader close.
    """
    if thread is not threading.main_thread():
        LOGGER.debug("thread %s is not the main thread; not interrupting", thread.name)
        return
    if not hasattr(signal, "pthread_kill") or thread.ident is None:
        return
    try:
        signal.pthread_kill(thread.ident, signal.SIGINT)
    except (OSError, ValueError) as exc:
        LOGGER.debug("pthread_kill failed: %s", exc)


def _force_exit() -> None:
    os._exit(1)


class ShutdownCoordinator:
    """Stops a running :class:`ZWaveConsole` from another thread."""

    def __init__(
        self,
        console: "ZWaveConsole",
        *,
        join_timeout: Optional[float] = DEFAULT_JOIN_TIMEOUT,
        interrupt_grace: float = INTERRUPT_GRACE,
        interrupt: Callable[[threading.Thread], None] = interrupt_thread,
        force_exit: Callable[[], None] = _force_exit,
    ) -> None:
        self.console = console
        self.join_timeout = join_timeout
        self.interrupt_grace = interrupt_grace
        self._interrupt = interrupt
        self._force_exit = force_exit
        self._lock = threading.Lock()
        self._installed = False

    def shutdown(self) -> bool:
        """Run the shutdown sequence; returns False if the loop thread hung."""
        self.console.termination.set()
        try:
            self.console.reader.close()
        except Exception:
            LOGGER.exception("closing console input failed")
        thread = self.console.thread
        if thread is None or thread is threading.current_thread():
            return True
        with self._lock:
            thread.join(self._bounded(self.interrupt_grace))
            if thread.is_alive():
                LOGGER.debug("loop thread still blocked; interrupting %s", thread.name)
                self._interrupt(thread)
                thread.join(self._remaining())
            if thread.is_alive():
                LOGGER.error("console thread %s did not exit within %ss", thread.name, self.join_timeout)
                self._force_exit()
                return False
        return True

    def _bounded(self, wait: float) -> Optional[float]:
        if self.join_timeout is None:
            return wait
        return min(wait, self.join_timeout)

    def _remaining(self) -> Optional[float]:
        if self.join_timeout is None:
            return None
        return max(0.0, self.join_timeout - self.interrupt_grace)

    def install(self, signals: Optional[Iterable[int]] = None) -> None:
        """Register the sequence for process exit and termination signals."""
        if self._installed:
            return
        self._installed = True
        atexit.register(self.shutdown)
        if threading.current_thread() is not threading.main_thread():
            LOGGER.debug("not on the main thread; skipping signal handlers")
            return
        if signals is None:
            signals = [getattr(signal, name) for name in ("SIGTERM", "SIGHUP") if hasattr(signal, name)]
        for signum in signals:
            signal.signal(signum, self._on_signal)

    def _on_signal(self, signum: int, frame) -> None:
        LOGGER.info("received signal %s; shutting down console", signum)
        # Handlers run on the main thread, which is usually the loop thread.
        worker = threading.Thread(target=self.shutdown, name="console-shutdown", daemon=True)
        worker.start()


__all__ = [
    "DEFAULT_JOIN_TIMEOUT",
    "ShutdownCoordinator",
    "TerminationFlag",
    "interrupt_thread",
]
