"""Typed controller events delivered to console listeners."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class TransactionStartedEvent:
    """Marks the start of a data frame transaction inside the controller."""

    id: str

    def __str__(self) -> str:
        return f"TransactionStartedEvent{{id={self.id}}}"


@dataclass(frozen=True)
class ControllerEvent:
    """Base class for one-shot controller notifications."""


@dataclass(frozen=True)
class NodeAddedEvent(ControllerEvent):
    endpoint: Any


@dataclass(frozen=True)
class NodeUpdatedEvent(ControllerEvent):
    endpoint: Any


@dataclass(frozen=True)
class ConnectionFailureEvent(ControllerEvent):
    cause: BaseException


@dataclass(frozen=True)
class ControllerInfoEvent(ControllerEvent):
    library_version: Optional[str]
    home_id: Optional[int]
    node_id: Optional[int]


@dataclass(frozen=True)
class InclusionStartedEvent(ControllerEvent):
    pass


@dataclass(frozen=True)
class InclusionEvent(ControllerEvent):
    node_info: Any
    success: bool


@dataclass(frozen=True)
class InclusionStoppedEvent(ControllerEvent):
    pass


@dataclass(frozen=True)
class ExclusionStartedEvent(ControllerEvent):
    pass


@dataclass(frozen=True)
class ExclusionEvent(ControllerEvent):
    node_info: Any
    success: bool


@dataclass(frozen=True)
class ExclusionStoppedEvent(ControllerEvent):
    pass


@dataclass(frozen=True)
class TransactionEvent(ControllerEvent):
    transaction: TransactionStartedEvent


__all__ = [
    "TransactionStartedEvent",
    "ControllerEvent",
    "NodeAddedEvent",
    "NodeUpdatedEvent",
    "ConnectionFailureEvent",
    "ControllerInfoEvent",
    "InclusionStartedEvent",
    "InclusionEvent",
    "InclusionStoppedEvent",
    "ExclusionStartedEvent",
    "ExclusionEvent",
    "ExclusionStoppedEvent",
    "TransactionEvent",
]
