"""
wzwave - Controller-facing types shared by WZWave front-ends.

The console only talks to a Z-Wave controller through the narrow surface
defined here:

    controller.py  → controller protocol, listener callbacks, ControllerError
    events.py      → typed controller events and TransactionStartedEvent

Connection management, frame transactions and the node model live in the
controller implementation, which is supplied at runtime.
"""

from .controller import (  # noqa: F401
    ControllerConfig,
    ControllerError,
    ControllerFactory,
    ControllerListener,
    ZWaveController,
)
from .events import (  # noqa: F401
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

__all__ = [
    "ControllerConfig",
    "ControllerError",
    "ControllerFactory",
    "ControllerListener",
    "ZWaveController",
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
    "TransactionStartedEvent",
]

__version__ = "0.1.0"
