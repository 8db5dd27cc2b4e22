"""
Record renderers and colour utilities.

Both formatters are structlog renderers: they take a classified event dict and
return the final line (without trailing newline).
"""

from __future__ import annotations

from typing import Any, Callable

import orjson
from structlog.typing import EventDict, WrappedLogger

from .levels import LEVELS
from .processors import META_KEY

# =============================================================================
# JSON Serialization
# =============================================================================

_JSON_OPTIONS = orjson.OPT_NON_STR_KEYS | orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC
_MAX_DEPTH = 64


def _safe_str(value: Any) -> str:
    """str(), then repr(), then a type placeholder; never raises."""
    try:
        return str(value)
    except Exception:
        pass
    try:
        return repr(value)
    except Exception:
        return f"<unrepresentable {type(value).__name__}>"


def _sanitize(value: Any, depth: int = 0) -> Any:
    if depth > _MAX_DEPTH:
        return _safe_str(value)
    if value is None or isinstance(value, (str, bool, float)):
        return value
    if isinstance(value, int):
        return value if -(2**63) <= value < 2**64 else _safe_str(value)
    if isinstance(value, dict):
        return {_safe_str(k): _sanitize(v, depth + 1) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_sanitize(v, depth + 1) for v in value]
    return _safe_str(value)


def orjson_dumps(v: Any) -> str:
    """Serialise ``v`` as compact JSON, stringifying anything orjson rejects."""
    try:
        return orjson.dumps(v, default=_safe_str, option=_JSON_OPTIONS).decode()
    except (orjson.JSONEncodeError, TypeError):
        return orjson.dumps(_sanitize(v), option=_JSON_OPTIONS).decode()


def decode_line(line: str | bytes) -> dict[str, Any]:
    """Parse one structured line back into a record."""
    return orjson.loads(line)


# =============================================================================
# ANSI Colours
# =============================================================================

COLORS = {
    "reset": "\033[0m",
    "black": "\033[30m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
    "gray": "\033[90m",
    "grey": "\033[90m",
}

Styler = Callable[[str], str]


def colorize(text: str, color: str) -> str:
    """Apply ANSI color to text; unknown colour names leave it unchanged."""
    code = COLORS.get(color)
    if code is None:
        return text
    return f"{code}{text}{COLORS['reset']}"


def ansi_styler(level: str) -> str:
    """Wrap a level name in the colour assigned to it by the level table."""
    if level not in LEVELS:
        return level
    return colorize(level, LEVELS.color(level))


# =============================================================================
# Renderers
# =============================================================================


class StructuredFormatter:
    """One JSON object per line, suitable for machine parsing."""

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
        return self.format(event_dict)

    @staticmethod
    def format(event_dict: EventDict) -> str:
        return orjson_dumps(event_dict)


class ConsoleFormatter:
    """Human-readable console line.

    Format::

        [level] timestamp <module>: message[ duration=Nms]
        \\t{"meta": "as json"}

    The level token is passed through ``styler`` when one is given.
    """

    def __init__(self, styler: Styler | None = None) -> None:
        self._styler = styler

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
        return self.format(event_dict)

    def format(self, event_dict: EventDict) -> str:
        level = str(event_dict.get("level", ""))
        if self._styler is not None:
            level = self._styler(level)

        line = (
            f"[{level}] {event_dict.get('timestamp', '')} "
            f"<{event_dict.get('module', '')}>: {_safe_str(event_dict.get('message', ''))}"
        )

        duration = event_dict.get("durationMs")
        if duration is not None:
            line += f" duration={_safe_str(duration)}ms"

        meta = event_dict.get(META_KEY)
        if meta:
            line += f"\n\t{orjson_dumps(meta)}"
        return line
