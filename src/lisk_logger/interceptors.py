"""
Interceptors for capturing standard library logs.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .core import Logger


def stdlib_level_name(levelno: int) -> str:
    """Map a stdlib level number onto the closest level name."""
    if levelno >= logging.CRITICAL:
        return "fatal"
    if levelno >= logging.ERROR:
        return "error"
    if levelno >= logging.WARNING:
        return "warn"
    if levelno >= logging.INFO:
        return "info"
    if levelno >= logging.DEBUG:
        return "debug"
    return "trace"


class StdlibBridgeHandler(logging.Handler):
    """
    Redirect standard library logging records to module handles.

    Records are emitted on the module handle of the intercepted root they
    belong to (e.g. "thirdparty.http.pool" -> "thirdparty"), or on their
    top-level package name when the bridge sits on the root logger. The number
    of module handles, and so of open sinks, is bounded by those roots.
    """

    def __init__(self, logger: Logger, roots: Iterable[str] = (), level: int = logging.NOTSET):
        super().__init__(level)
        self.logger = logger
        self.roots = tuple(sorted((r for r in roots if r), key=len, reverse=True))

    def module_name(self, name: str) -> str:
        for root in self.roots:
            if name == root or name.startswith(root + "."):
                return root
        return name.split(".", 1)[0] or "stdlib"

    def emit(self, record: logging.LogRecord) -> None:
        try:
            handle = self.logger.child(self.module_name(record.name or ""))
            extra = {}
            if record.exc_info:
                extra["exception"] = logging.Formatter().formatException(record.exc_info)
            getattr(handle, stdlib_level_name(record.levelno))(record.getMessage(), **extra)
        except Exception:
            self.handleError(record)


def intercept_stdlib(logger: Logger, names: Iterable[str] = ()) -> StdlibBridgeHandler:
    """Attach a bridge handler to the named stdlib loggers (root when empty)."""
    targets = list(names) or [""]
    handler = StdlibBridgeHandler(logger, roots=targets)
    for name in targets:
        lg = logging.getLogger(name or None)
        lg.handlers = [h for h in lg.handlers if not isinstance(h, StdlibBridgeHandler)]
        lg.addHandler(handler)
        lg.propagate = not name
    return handler
