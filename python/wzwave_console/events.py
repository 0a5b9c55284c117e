"""Render asynchronous controller events on the console."""

from __future__ import annotations

from typing import Optional

from wzwave.controller import ControllerListener
from wzwave.events import (
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
)

from .output import ConsoleOutput


def format_event(event: ControllerEvent) -> str:
    """Return the console line for *event*."""
    if isinstance(event, NodeAddedEvent):
        return f"Node added: {event.endpoint}"
    if isinstance(event, NodeUpdatedEvent):
        return f"Node updated: {event.endpoint}"
    if isinstance(event, ConnectionFailureEvent):
        return f"Connection failure: {event.cause}"
    if isinstance(event, ControllerInfoEvent):
        return (
            f"Controller info - library version: {event.library_version}, "
            f"home ID: {event.home_id}, node ID: {event.node_id}"
        )
    if isinstance(event, InclusionStartedEvent):
        return "Inclusion started"
    if isinstance(event, InclusionEvent):
        return f"Inclusion - node info: {event.node_info}, success: {event.success}"
    if isinstance(event, InclusionStoppedEvent):
        return "Inclusion stopped"
    if isinstance(event, ExclusionStartedEvent):
        return "Exclusion started"
    if isinstance(event, ExclusionEvent):
        return f"Exclusion - node info: {event.node_info}, success: {event.success}"
    if isinstance(event, ExclusionStoppedEvent):
        return "Exclusion stopped"
    if isinstance(event, TransactionEvent):
        return f"Transaction started: {event.transaction.id}"
    return f"Controller event: {event}"


class EventSink(ControllerListener):
    """Controller listener that writes one line per event."""

    def __init__(self, output: Optional[ConsoleOutput] = None) -> None:
        self.output = output or ConsoleOutput()

    def handle(self, event: ControllerEvent) -> None:
        if isinstance(event, ConnectionFailureEvent):
            with self.output.batch():
                self.output.line(format_event(event), error=True)
                self.output.exception(event.cause, error=True)
            return
        self.output.line(format_event(event))


__all__ = ["EventSink", "format_event"]
