"""
Logger exception hierarchy.

Only initialisation faults are modelled here: a misconfigured logger must fail
at startup, while faults during emission are absorbed by the sinks.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class LoggerError(Exception):
    """Root of all logger exceptions.

    Carries a machine-readable ``code`` and a ``details`` mapping so callers
    can report configuration problems without parsing the message.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class UnknownLevel(LoggerError):
    """Raised when a level name is not part of the fixed level table."""

    def __init__(self, name: Any, *, known: tuple[str, ...] = ()) -> None:
        message = f"Unknown log level '{name}'"
        if known:
            message = f"{message}; expected one of: {', '.join(known)}"
        super().__init__(
            message,
            code="UNKNOWN_LEVEL",
            details={"level": name, "known": list(known)},
        )


class SinkInitError(LoggerError):
    """Raised when a sink cannot acquire its resource at build time."""

    def __init__(self, *, sink: str, target: str, reason: str) -> None:
        super().__init__(
            f"Cannot initialise {sink} sink for '{target}': {reason}",
            code="SINK_INIT_FAILED",
            details={"sink": sink, "target": target, "reason": reason},
        )
