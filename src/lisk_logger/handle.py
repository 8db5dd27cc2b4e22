"""
Module-scoped logger handles.

A handle is a structlog bound logger whose wrapped logger is a ``SinkFanout``:
the handle's processors build the record, and the fanout hands it to every
sink whose threshold admits the record's level.
"""

from __future__ import annotations

from typing import Any

import structlog
from structlog.typing import EventDict, WrappedLogger

from .levels import LEVELS
from .sinks import BaseSink


class SinkFanout:
    """Wrapped logger that dispatches one record to a fixed set of sinks."""

    def __init__(self, module_name: str, sinks: list[BaseSink]):
        self.module_name = module_name
        self.sinks: tuple[BaseSink, ...] = tuple(sinks)

    def is_enabled_for(self, level: str) -> bool:
        level_rank = LEVELS.rank(level)
        return any(sink.accepts(level_rank) for sink in self.sinks)

    def msg(self, event_dict: EventDict) -> None:
        level_rank = LEVELS.rank(event_dict["level"])
        for sink in self.sinks:
            if sink.accepts(level_rank):
                sink.handle(event_dict)


def _to_fanout(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> tuple:
    """Pass the whole record to ``SinkFanout.msg`` as a single argument."""
    return (event_dict,), {}


HANDLE_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    _to_fanout,
]


class ModuleLogger(structlog.BoundLoggerBase):
    """Logger handle bound to one module name and its sinks.

    Exposes one emission method per level name. Emission never raises:
    records no sink would accept are skipped before any processing, and
    processing failures are dropped.
    """

    _logger: SinkFanout

    @property
    def module_name(self) -> str:
        return self._logger.module_name

    @property
    def sinks(self) -> tuple[BaseSink, ...]:
        return self._logger.sinks

    def _emit(self, level: str, message: Any, extra: dict[str, Any]) -> None:
        fanout = self._logger
        if not fanout.is_enabled_for(level):
            return

        event_kw = dict(extra)
        event_kw["message"] = message
        event_kw["level"] = level
        try:
            args, kw = self._process_event("msg", None, event_kw)
        except structlog.DropEvent:
            return
        except Exception:
            return
        fanout.msg(*args, **kw)

    def fatal(self, message: Any, **extra: Any) -> None:
        self._emit("fatal", message, extra)

    def error(self, message: Any, **extra: Any) -> None:
        self._emit("error", message, extra)

    def warn(self, message: Any, **extra: Any) -> None:
        self._emit("warn", message, extra)

    def info(self, message: Any, **extra: Any) -> None:
        self._emit("info", message, extra)

    def debug(self, message: Any, **extra: Any) -> None:
        self._emit("debug", message, extra)

    def query(self, message: Any, **extra: Any) -> None:
        self._emit("query", message, extra)

    def trace(self, message: Any, **extra: Any) -> None:
        self._emit("trace", message, extra)

    def none(self, message: Any, **extra: Any) -> None:
        # "none" sinks are never built, so this never reaches a sink.
        self._emit("none", message, extra)


def create_module_logger(module_name: str, sinks: list[BaseSink]) -> ModuleLogger:
    return ModuleLogger(SinkFanout(module_name, sinks), HANDLE_PROCESSORS, {})
