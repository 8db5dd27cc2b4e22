"""
Structlog processors used by handles and sinks.

Every processor follows the structlog signature
``(logger, method_name, event_dict) -> event_dict`` so sink pipelines are
plain ordered lists of record transforms ending in a render step.
"""

from __future__ import annotations

import socket
from collections.abc import Mapping
from typing import Any

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

ROOT_KEYS = ("level", "timestamp", "module", "message", "action", "hostname")

# Display-only fields rendered by the console formatter; never bucketed.
DISPLAY_KEYS = ("durationMs",)

META_KEY = "meta"


# =============================================================================
# Field Classification
# =============================================================================


def classify_fields(event_dict: Mapping[str, Any]) -> dict[str, Any]:
    """Partition a record into its root keys and a ``meta`` bucket.

    Keys outside ``ROOT_KEYS``/``DISPLAY_KEYS`` are moved into ``meta``. An
    incoming ``meta`` mapping is merged into the bucket in field order, so a
    later field with the same key wins. No ``meta`` key is produced when the
    bucket is empty.
    """
    if not isinstance(event_dict, Mapping):
        raise TypeError(f"expected a mapping, got {type(event_dict).__name__}")

    classified: dict[str, Any] = {}
    meta: dict[str, Any] = {}
    for key, value in event_dict.items():
        if key in ROOT_KEYS or key in DISPLAY_KEYS:
            classified[key] = value
        elif key == META_KEY and isinstance(value, Mapping):
            meta.update(value)
        else:
            meta[key] = value

    if meta:
        classified[META_KEY] = meta
    return classified


def classify_processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Processor form of :func:`classify_fields`."""
    return classify_fields(event_dict)


# =============================================================================
# Enrichment
# =============================================================================


def inject_key(key: str, value: Any) -> Processor:
    """Build a processor that sets ``key`` to a fixed ``value``."""

    def _inject(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict[key] = value
        return event_dict

    _inject.__name__ = f"inject_{key}"
    return _inject


def inject_hostname(hostname: str | None = None) -> Processor:
    """Build a processor stamping the local host name."""
    return inject_key("hostname", hostname or socket.gethostname())


def timestamper() -> Processor:
    """ISO 8601 UTC timestamp under ``timestamp``."""
    return structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp")


def run_pipeline(
    processors: list[Processor],
    event_dict: EventDict,
    *,
    logger: WrappedLogger = None,
    method_name: str = "msg",
) -> Any:
    """Apply ``processors`` in order and return the final result."""
    result: Any = event_dict
    for processor in processors:
        result = processor(logger, method_name, result)
    return result

