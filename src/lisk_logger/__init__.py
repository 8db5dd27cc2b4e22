"""
Lisk Logger.

Structured logging with per-module handles and two sinks:
- file: append-only JSON lines (with hostname)
- console: ``[level] timestamp <module>: message`` on stdout

Design Pattern: Strategy Pattern for sinks, Registry for module handles.
Library: structlog processors + orjson serialization.

Usage:
    from lisk_logger import Logger

    logger = Logger({"filename": "logs/lisk.log", "level": "info", "consoleLevel": "debug"})
    logger.info("Blocks loaded", height=101)

    workers = logger.child("workers")
    workers.debug("Worker started", durationMs=12)
"""

from .config import LoggerSettings, TransportConfig
from .core import Logger
from .exceptions import LoggerError, SinkInitError, UnknownLevel
from .handle import ModuleLogger
from .levels import LEVELS, LevelSpec, color, rank
from .registry import LoggerRegistry, default_registry

__all__ = [
    "LEVELS",
    "LevelSpec",
    "Logger",
    "LoggerError",
    "LoggerRegistry",
    "LoggerSettings",
    "ModuleLogger",
    "SinkInitError",
    "TransportConfig",
    "UnknownLevel",
    "color",
    "default_registry",
    "rank",
]
