"""Line-atomic console output shared by the loop and event threads."""

from __future__ import annotations

import sys
import threading
import traceback
from typing import Optional, TextIO

LINE_PREFIX = "\r"


class ConsoleOutput:
    """Writes ``"\\r" + text`` lines to stdout/stderr under a single lock.

    Streams default to whatever ``sys.stdout``/``sys.stderr`` are at write
    time so prompt_toolkit's ``patch_stdout`` proxy is honoured while a
    prompt is active.
    """

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> None:
        self._out = out
        self._err = err
        self._lock = threading.RLock()

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    def batch(self) -> threading.RLock:
        """Hold the output lock so several writes land together."""
        return self._lock

    def line(self, text: str = "", *, error: bool = False) -> None:
        self._write(LINE_PREFIX + text + "\n", error=error)

    def write(self, text: str, *, error: bool = False) -> None:
        """Write raw text without a trailing newline (banners, prompts)."""
        self._write(text, error=error)

    def exception(self, exc: BaseException, *, error: bool = False) -> None:
        """Write the diagnostic traceback of *exc* as one block."""
        detail = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        self._write(detail if detail.endswith("\n") else detail + "\n", error=error)

    def _write(self, payload: str, *, error: bool) -> None:
        with self._lock:
            stream = self.err if error else self.out
            stream.write(payload)
            stream.flush()


__all__ = ["ConsoleOutput", "LINE_PREFIX"]
