"""
Logger facade: the entry point used by application code.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from .config import DEFAULT_MODULE, LoggerSettings, TransportConfig
from .handle import ModuleLogger
from .registry import LoggerRegistry, default_registry

LoggerConfig = Union[LoggerSettings, TransportConfig, Mapping[str, Any], None]


def _to_transport_config(config: LoggerConfig) -> TransportConfig:
    if config is None:
        return LoggerSettings().transport_config()
    if isinstance(config, TransportConfig):
        return config
    if isinstance(config, LoggerSettings):
        return config.transport_config()
    if isinstance(config, Mapping):
        return LoggerSettings(**config).transport_config()
    raise TypeError(f"unsupported logger config type: {type(config).__name__}")


class Logger:
    """Structured logger with one handle per module.

    Construction registers (or reuses) the handle for ``name`` and delegates
    the level methods to it. ``child`` returns the handle for another module,
    built from the same configuration on first use.

    Args:
        config: ``LoggerSettings``, ``TransportConfig``, a mapping with the
            keys ``filename``/``level``/``consoleLevel``, or None to read
            ``LISK_LOG_*`` from the environment.
        name: Module name of the default handle.
        registry: Handle registry; the process-wide one when omitted.

    Raises:
        UnknownLevel: A configured level is not a level name.
        SinkInitError: The log file cannot be opened.
    """

    def __init__(
        self,
        config: LoggerConfig = None,
        name: str = DEFAULT_MODULE,
        *,
        registry: LoggerRegistry | None = None,
    ) -> None:
        self.config = _to_transport_config(config)
        self.registry = registry if registry is not None else default_registry()
        self.default_logger = self.child(name)

    def child(self, module_name: str) -> ModuleLogger:
        return self.registry.get_or_create(module_name, self.config)

    def flush(self) -> None:
        """Wait until queued records have reached every sink's target."""
        self.registry.flush()

    def close(self) -> None:
        self.registry.close()

    def fatal(self, message: Any, **extra: Any) -> None:
        self.default_logger.fatal(message, **extra)

    def error(self, message: Any, **extra: Any) -> None:
        self.default_logger.error(message, **extra)

    def warn(self, message: Any, **extra: Any) -> None:
        self.default_logger.warn(message, **extra)

    def info(self, message: Any, **extra: Any) -> None:
        self.default_logger.info(message, **extra)

    def debug(self, message: Any, **extra: Any) -> None:
        self.default_logger.debug(message, **extra)

    def query(self, message: Any, **extra: Any) -> None:
        self.default_logger.query(message, **extra)

    def trace(self, message: Any, **extra: Any) -> None:
        self.default_logger.trace(message, **extra)

    def none(self, message: Any, **extra: Any) -> None:
        self.default_logger.none(message, **extra)
