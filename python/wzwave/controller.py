"""Controller protocol and listener callbacks consumed by the console."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional, Protocol

from .events import (
    ConnectionFailureEvent,
    ControllerEvent,
    ControllerInfoEvent,
    ExclusionEvent,
    ExclusionStartedEvent,
    ExclusionStoppedEvent,
    InclusionEvent,
    InclusionStartedEvent,
    InclusionStoppedEvent,
    NodeAddedEvent,
    NodeUpdatedEvent,
    TransactionEvent,
    TransactionStartedEvent,
)

DEFAULT_DEVICE = "/dev/tty.GoControl_zwave"
DEFAULT_STORAGE = Path("./storage")


class ControllerError(RuntimeError):
    """Raised by a controller when it cannot complete an operation."""


class ZWaveController(Protocol):
    """The slice of a Z-Wave controller the console drives."""

    def start(self) -> None:
        ...


@dataclass
class ControllerConfig:
    """Bootstrap settings handed to a controller factory."""

    device: str = DEFAULT_DEVICE
    storage: Path = field(default_factory=lambda: DEFAULT_STORAGE)


class ControllerListener:
    """Callback set a controller invokes as lifecycle events occur.

    Every callback wraps its arguments in the matching event dataclass and
    forwards it to :meth:`handle`, so subclasses may override either the
    individual callbacks or the single ``handle`` entry point.  Callbacks
    are fire-and-forget and may arrive on any controller thread.
    """

    def handle(self, event: ControllerEvent) -> None:
        """Receive a controller event.  The base implementation ignores it."""

    def on_node_added(self, endpoint: Any) -> None:
        self.handle(NodeAddedEvent(endpoint))

    def on_node_updated(self, endpoint: Any) -> None:
        self.handle(NodeUpdatedEvent(endpoint))

    def on_connection_failure(self, cause: BaseException) -> None:
        self.handle(ConnectionFailureEvent(cause))

    def on_controller_info(
        self,
        library_version: Optional[str],
        home_id: Optional[int],
        node_id: Optional[int],
    ) -> None:
        self.handle(ControllerInfoEvent(library_version, home_id, node_id))

    def on_inclusion_started(self) -> None:
        self.handle(InclusionStartedEvent())

    def on_inclusion(self, node_info: Any, success: bool) -> None:
        self.handle(InclusionEvent(node_info, bool(success)))

    def on_inclusion_stopped(self) -> None:
        self.handle(InclusionStoppedEvent())

    def on_exclusion_started(self) -> None:
        self.handle(ExclusionStartedEvent())

    def on_exclusion(self, node_info: Any, success: bool) -> None:
        self.handle(ExclusionEvent(node_info, bool(success)))

    def on_exclusion_stopped(self) -> None:
        self.handle(ExclusionStoppedEvent())

    def on_transaction_started(self, event: TransactionStartedEvent) -> None:
        self.handle(TransactionEvent(event))


ControllerFactory = Callable[[ControllerConfig, ControllerListener], ZWaveController]


__all__ = [
    "DEFAULT_DEVICE",
    "DEFAULT_STORAGE",
    "ControllerConfig",
    "ControllerError",
    "ControllerFactory",
    "ControllerListener",
    "ZWaveController",
]
