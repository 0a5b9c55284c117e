"""Tests for the closable console line readers."""

from __future__ import annotations

import io
import os
import threading
import time
from contextlib import nullcontext

import pytest

from prompt_toolkit import PromptSession
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from wzwave_console.console import ZWaveConsole
from wzwave_console.output import ConsoleOutput
from wzwave_console import reader as reader_module
from wzwave_console.reader import PromptLineReader, StreamLineReader
from wzwave_console.shutdown import ShutdownCoordinator


@pytest.fixture
def pipe():
    read_fd, write_fd = os.pipe()
    stream = os.fdopen(read_fd, "r", encoding="utf-8")
    yield stream, write_fd
    stream.close()
    os.close(write_fd)


def test_stream_reader_splits_chunked_lines(pipe):
    stream, write_fd = pipe
    reader = StreamLineReader(stream)
    os.write(write_fd, b"help\r\nquit\nsta")
    assert reader.read_line() == "help"
    assert reader.read_line() == "quit"
    os.write(write_fd, b"rt\n")
    assert reader.read_line() == "start"


def test_stream_reader_returns_partial_line_then_none_at_eof():
    read_fd, write_fd = os.pipe()
    stream = os.fdopen(read_fd, "r", encoding="utf-8")
    reader = StreamLineReader(stream)
    os.write(write_fd, "café".encode("utf-8"))
    os.close(write_fd)
    assert reader.read_line() == "café"
    assert reader.read_line() is None
    stream.close()


def test_stream_reader_replaces_truncated_utf8_tail_at_eof():
    read_fd, write_fd = os.pipe()
    stream = os.fdopen(read_fd, "r", encoding="utf-8")
    reader = StreamLineReader(stream)
    os.write(write_fd, b"abc\xe2\x82")
    os.close(write_fd)
    assert reader.read_line() == "abc\ufffd"
    assert reader.read_line() is None
    stream.close()


def _open_fds():
    return len(os.listdir("/proc/self/fd"))


def _run_session(console_output, controller, data):
    read_fd, write_fd = os.pipe()
    stream = os.fdopen(read_fd, "r", encoding="utf-8")
    try:
        if data:
            os.write(write_fd, data)
        else:
            os.close(write_fd)
            write_fd = None
        console = ZWaveConsole(controller, reader=StreamLineReader(stream), output=console_output)
        console.start()
    finally:
        stream.close()
        if write_fd is not None:
            os.close(write_fd)


@pytest.mark.skipif(not os.path.isdir("/proc/self/fd"), reason="needs /proc/self/fd")
@pytest.mark.parametrize("data", [b"quit\n", b""], ids=["quit", "eof"])
def test_finished_sessions_release_wake_pipe(console_output, stub_controller, data):
    _run_session(console_output, stub_controller, data)
    before = _open_fds()
    for _ in range(20):
        _run_session(console_output, stub_controller, data)
    assert _open_fds() == before


def test_close_wakes_blocked_read(pipe):
    stream, _ = pipe
    reader = StreamLineReader(stream)
    result = []
    worker = threading.Thread(target=lambda: result.append(reader.read_line()))
    worker.start()
    reader.close()
    worker.join(timeout=5)
    assert not worker.is_alive()
    assert result == [None]
    assert reader.closed
    assert reader.read_line() is None


def test_close_is_idempotent(pipe):
    stream, _ = pipe
    reader = StreamLineReader(stream)
    reader.close()
    reader.close()
    assert reader.read_line() is None


def test_stream_without_descriptor_uses_readline():
    out = io.StringIO()
    reader = StreamLineReader(io.StringIO("help\nquit\n"), ConsoleOutput(out, io.StringIO()))
    assert reader.read_line() == "help"
    assert reader.read_line() == "quit"
    assert reader.read_line() is None
    assert out.getvalue() == "\r> \r> \r> "


@pytest.fixture
def no_patch_stdout(monkeypatch):
    monkeypatch.setattr(reader_module, "patch_stdout", nullcontext)


class _StubApp:
    def __init__(self, running: bool = False) -> None:
        self.is_running = running
        self.is_done = False
        self.loop = None
        self.exit_calls = []

    def exit(self, exception=None):
        self.exit_calls.append(exception)


class _StubSession:
    def __init__(self, replies):
        self.replies = list(replies)
        self.prompts = []
        self.app = _StubApp()

    def prompt(self, message):
        self.prompts.append(message)
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        return reply


def test_prompt_reader_returns_lines_and_maps_eof(no_patch_stdout):
    session = _StubSession(["help", EOFError()])
    reader = PromptLineReader(session)  # type: ignore[arg-type]
    assert reader.read_line() == "help"
    assert reader.read_line() is None
    assert session.prompts == ["> ", "> "]


def test_prompt_reader_close_stops_further_prompts(no_patch_stdout):
    session = _StubSession(["help"])
    reader = PromptLineReader(session)  # type: ignore[arg-type]
    reader.close()
    assert reader.read_line() is None
    assert session.prompts == []


def test_prompt_reader_close_exits_running_prompt():
    class _Loop:
        def call_soon_threadsafe(self, callback):
            callback()

    session = _StubSession([])
    session.app.is_running = True
    session.app.loop = _Loop()
    reader = PromptLineReader(session)  # type: ignore[arg-type]
    reader.close()
    assert len(session.app.exit_calls) == 1
    assert isinstance(session.app.exit_calls[0], EOFError)


def _wait_for(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            return False
        time.sleep(0.01)
    return True


def test_shutdown_stops_loop_blocked_in_prompt_session(stub_controller, console_output):
    with create_pipe_input() as pipe_input:
        session = PromptSession(input=pipe_input, output=DummyOutput())
        console = ZWaveConsole(stub_controller, reader=PromptLineReader(session), output=console_output)
        loop_thread = threading.Thread(target=console.start, name="console-loop", daemon=True)
        loop_thread.start()
        pipe_input.send_text("start\r")
        assert _wait_for(lambda: stub_controller.calls == 1)
        assert _wait_for(lambda: session.app.is_running)

        forced = []
        coordinator = ShutdownCoordinator(
            console,
            join_timeout=5.0,
            interrupt=lambda thread: None,
            force_exit=lambda: forced.append(True),
        )
        assert coordinator.shutdown() is True
        loop_thread.join(timeout=5)

    assert not loop_thread.is_alive()
    assert forced == []
    assert console.termination.is_set()
    assert console.reader.closed
