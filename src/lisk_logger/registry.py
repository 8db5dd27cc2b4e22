"""
Process-wide registry of module handles.
"""

from __future__ import annotations

import threading
from typing import Callable, Iterator

from .config import TransportConfig
from .handle import ModuleLogger, create_module_logger
from .sinks import BaseSink
from .transports import build_transports

TransportBuilder = Callable[[TransportConfig], list[BaseSink]]


class LoggerRegistry:
    """Append-only map of module name -> ``ModuleLogger``.

    The first request for a name builds its sinks and registers the handle;
    every later request returns that same handle and ignores the config it
    was given. Creation happens under a lock, so concurrent first requests
    build exactly one sink set.
    """

    def __init__(self, transport_builder: TransportBuilder = build_transports):
        self._build_transports = transport_builder
        self._handles: dict[str, ModuleLogger] = {}
        self._lock = threading.Lock()

    def get_or_create(self, module_name: str, config: TransportConfig) -> ModuleLogger:
        handle = self._handles.get(module_name)
        if handle is not None:
            return handle

        with self._lock:
            handle = self._handles.get(module_name)
            if handle is None:
                sinks = self._build_transports(config.with_module(module_name))
                handle = create_module_logger(module_name, sinks)
                self._handles[module_name] = handle
        return handle

    def get(self, module_name: str) -> ModuleLogger | None:
        return self._handles.get(module_name)

    def names(self) -> list[str]:
        with self._lock:
            return list(self._handles)

    def flush(self) -> None:
        """Wait until every registered sink has written its queued lines."""
        for handle in self._snapshot():
            for sink in handle.sinks:
                sink.flush()

    def close(self) -> None:
        """Close every registered sink. Handles stay registered."""
        for handle in self._snapshot():
            for sink in handle.sinks:
                sink.close()

    def _snapshot(self) -> list[ModuleLogger]:
        with self._lock:
            return list(self._handles.values())

    def __contains__(self, module_name: object) -> bool:
        return module_name in self._handles

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())


_default_registry = LoggerRegistry()


def default_registry() -> LoggerRegistry:
    """Return the registry shared by every ``Logger`` that is not given one."""
    return _default_registry
