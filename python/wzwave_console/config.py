"""Console settings collected from the command line and environment."""

from __future__ import annotations

import importlib
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from wzwave.controller import DEFAULT_DEVICE, DEFAULT_STORAGE, ControllerConfig, ControllerFactory

from .shutdown import DEFAULT_JOIN_TIMEOUT

ENV_DEVICE = "WZWAVE_DEVICE"
ENV_STORAGE = "WZWAVE_STORAGE"
ENV_CONTROLLER = "WZWAVE_CONTROLLER"
ENV_LOG_LEVEL = "WZWAVE_CONSOLE_LOG"
ENV_JOIN_TIMEOUT = "WZWAVE_JOIN_TIMEOUT"


class ConfigurationError(ValueError):
    """Raised when console settings cannot be used."""


@dataclass
class ConsoleSettings:
    device: str = DEFAULT_DEVICE
    storage: Path = field(default_factory=lambda: DEFAULT_STORAGE)
    controller: Optional[str] = None
    log_level: str = "WARNING"
    join_timeout: Optional[float] = DEFAULT_JOIN_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ConsoleSettings":
        env = os.environ if environ is None else environ
        return cls(
            device=env.get(ENV_DEVICE, DEFAULT_DEVICE),
            storage=Path(env.get(ENV_STORAGE, str(DEFAULT_STORAGE))),
            controller=env.get(ENV_CONTROLLER) or None,
            log_level=env.get(ENV_LOG_LEVEL, "WARNING"),
            join_timeout=parse_join_timeout(env.get(ENV_JOIN_TIMEOUT, str(DEFAULT_JOIN_TIMEOUT))),
        )

    def controller_config(self) -> ControllerConfig:
        return ControllerConfig(device=self.device, storage=Path(self.storage).expanduser())


def parse_join_timeout(value: Optional[str]) -> Optional[float]:
    """Parse a join timeout in seconds; ``0`` or empty means wait forever."""
    if value is None or not str(value).strip():
        return None
    try:
        seconds = float(value)
    except ValueError as exc:
        raise ConfigurationError(f"invalid join timeout: {value!r}") from exc
    if seconds < 0:
        raise ConfigurationError(f"join timeout must not be negative: {value!r}")
    return seconds or None


def load_controller_factory(spec: Optional[str]) -> ControllerFactory:
    """Resolve ``package.module:callable`` to a controller factory."""
    if not spec:
        raise ConfigurationError(f"no controller configured (use --controller or {ENV_CONTROLLER})")
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigurationError(f"controller must look like 'module:factory', got {spec!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(f"cannot import controller module {module_name!r}: {exc}") from exc
    factory = module
    for part in attr.split("."):
        factory = getattr(factory, part, None)
        if factory is None:
            raise ConfigurationError(f"{module_name!r} has no attribute {attr!r}")
    if not callable(factory):
        raise ConfigurationError(f"controller factory {spec!r} is not callable")
    return factory


__all__ = [
    "ConfigurationError",
    "ConsoleSettings",
    "load_controller_factory",
    "parse_join_timeout",
]
