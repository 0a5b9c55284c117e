"""
Pytest configuration and fixtures for WZWave console tests.
"""
import io
import sys
import threading
from pathlib import Path

import pytest

PYTHON_SRC = Path(__file__).resolve().parents[1]
if str(PYTHON_SRC) not in sys.path:
    sys.path.insert(0, str(PYTHON_SRC))

from wzwave.controller import ControllerError  # noqa: E402
from wzwave_console.output import ConsoleOutput  # noqa: E402


class StubController:
    """Records start() calls; optionally fails or blocks."""

    def __init__(self, error=None, block=False):
        self.error = error
        self.calls = 0
        self.entered = threading.Event()
        self.release = threading.Event()
        if not block:
            self.release.set()

    def start(self):
        self.calls += 1
        self.entered.set()
        self.release.wait()
        if self.error is not None:
            raise self.error


class ListReader:
    """Reader that replays a fixed list of lines and counts reads."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.reads = 0
        self.closed = False

    def read_line(self, prompt="> "):
        if self.closed or not self.lines:
            return None
        self.reads += 1
        return self.lines.pop(0)

    def close(self):
        self.closed = True


@pytest.fixture
def stub_controller():
    return StubController()


@pytest.fixture
def failing_controller():
    return StubController(error=ControllerError("serial port unavailable"))


@pytest.fixture
def streams():
    out = io.StringIO()
    err = io.StringIO()
    return out, err


@pytest.fixture
def console_output(streams):
    out, err = streams
    return ConsoleOutput(out, err)


@pytest.fixture
def make_reader():
    return ListReader


@pytest.fixture
def make_controller():
    return StubController
