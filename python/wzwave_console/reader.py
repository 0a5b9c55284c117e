"""Closable line sources for the console loop.

A reader blocks in :meth:`read_line` until a full line is available and
returns ``None`` once the input is exhausted, fails or has been closed.
:meth:`close` may be called from any thread and wakes a pending read.
"""

from __future__ import annotations

import codecs
import io
import logging
import os
import select
import threading
from typing import List, Optional, Protocol, TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.patch_stdout import patch_stdout

from .output import ConsoleOutput

LOGGER = logging.getLogger("wzwave_console.reader")

PROMPT = "> "


class LineReader(Protocol):
    def read_line(self, prompt: str = PROMPT) -> Optional[str]:
        ...

    def close(self) -> None:
        ...


class StreamLineReader:
    """Reads lines from a text stream, waking on :meth:`close`.

    Streams backed by a file descriptor are read with ``os.read`` behind a
    ``select`` on the descriptor and a wake-up pipe, so closing the reader
    unblocks a read that is waiting for the operator.  Streams without a
    descriptor (``io.StringIO``) fall back to ``readline``.
    """

    def __init__(self, stream: TextIO, output: Optional[ConsoleOutput] = None, *, chunk_size: int = 4096) -> None:
        self._stream = stream
        self._output = output
        self._chunk_size = chunk_size
        self._closed = threading.Event()
        self._lock = threading.Lock()
        self._reading = False
        self._eof = False
        self._fd = self._fileno(stream)
        self._wake_r: Optional[int] = None
        self._wake_w: Optional[int] = None
        self._pending: List[str] = []
        self._partial = ""
        self._decoder = None
        if self._fd is not None:
            self._wake_r, self._wake_w = os.pipe()
            encoding = getattr(stream, "encoding", None) or "utf-8"
            self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")

    @staticmethod
    def _fileno(stream: TextIO) -> Optional[int]:
        try:
            return stream.fileno()
        except (AttributeError, OSError, ValueError, io.UnsupportedOperation):
            return None

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def read_line(self, prompt: str = PROMPT) -> Optional[str]:
        with self._lock:
            if self._closed.is_set():
                self._dispose()
                return None
            self._reading = True
        try:
            if self._output is not None and prompt:
                self._output.write("\r" + prompt)
            if self._fd is None:
                return self._read_stream()
            return self._read_fd()
        except (OSError, ValueError) as exc:
            LOGGER.debug("console read failed: %s", exc)
            return None
        finally:
            with self._lock:
                self._reading = False
                if self._closed.is_set() or self._eof:
                    self._dispose()

    def _read_stream(self) -> Optional[str]:
        line = self._stream.readline()
        if not line or self._closed.is_set():
            return None
        return line.rstrip("\r\n")

    def _read_fd(self) -> Optional[str]:
        while not self._pending:
            if self._eof:
                return None
            readable, _, _ = select.select([self._fd, self._wake_r], [], [])
            if self._closed.is_set() or self._wake_r in readable:
                return None
            chunk = os.read(self._fd, self._chunk_size)
            if not chunk:
                self._eof = True
                self._partial += self._decoder.decode(b"", final=True)
                if self._partial:
                    self._pending.append(self._partial)
                    self._partial = ""
                    break
                return None
            text = self._partial + self._decoder.decode(chunk)
            *lines, self._partial = text.split("\n")
            self._pending.extend(line.rstrip("\r") for line in lines)
        return self._pending.pop(0)

    def close(self) -> None:
        if self._closed.is_set():
            return
        self._closed.set()
        with self._lock:
            if not self._reading:
                self._dispose()
            elif self._wake_w is not None:
                os.write(self._wake_w, b"\0")

    def _dispose(self) -> None:
        # Caller holds self._lock.
        for fd in (self._wake_r, self._wake_w):
            if fd is not None:
                os.close(fd)
        self._wake_r = self._wake_w = None


class PromptLineReader:
    """prompt_toolkit reader; asynchronous output is drawn above the prompt."""

    def __init__(self, session: Optional[PromptSession] = None) -> None:
        self._session = session or PromptSession()
        self._closed = threading.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def read_line(self, prompt: str = PROMPT) -> Optional[str]:
        if self._closed.is_set():
            return None
        try:
            with patch_stdout():
                return self._session.prompt(prompt)
        except EOFError:
            return None

    def close(self) -> None:
        if self._closed.is_set():
            return
        self._closed.set()
        app = self._session.app
        loop = getattr(app, "loop", None)
        if app.is_running and loop is not None:
            loop.call_soon_threadsafe(self._exit_prompt)

    def _exit_prompt(self) -> None:
        app = self._session.app
        if app.is_running and not app.is_done:
            app.exit(exception=EOFError())


__all__ = ["LineReader", "PROMPT", "PromptLineReader", "StreamLineReader"]
