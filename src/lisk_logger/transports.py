"""
Sink construction from a ``TransportConfig``.
"""

from __future__ import annotations

import sys
from typing import Any

from .config import TransportConfig
from .formatters import ConsoleFormatter, StructuredFormatter, ansi_styler
from .levels import LEVELS, NONE_LEVEL
from .processors import classify_processor, inject_hostname, inject_key, timestamper
from .sinks import BaseSink, ConsoleSink, FileSink


def _supports_color(stream: Any) -> bool:
    return bool(getattr(stream, "isatty", lambda: False)())


def file_processors(module: str, hostname: str | None = None) -> list:
    return [
        timestamper(),
        inject_key("module", module),
        inject_hostname(hostname),
        classify_processor,
        StructuredFormatter(),
    ]


def console_processors(module: str, *, use_color: bool = False) -> list:
    return [
        timestamper(),
        inject_key("module", module),
        classify_processor,
        ConsoleFormatter(styler=ansi_styler if use_color else None),
    ]


def build_transports(config: TransportConfig, *, stream: Any = None) -> list[BaseSink]:
    """Build the active sinks for one module handle.

    Both level names are validated before any sink is created, so a bad
    configuration never leaves a half-opened file behind.

    Args:
        config: Transport configuration; ``module`` is stamped on every record.
        stream: Console stream override (defaults to ``sys.stdout``).

    Raises:
        UnknownLevel: ``file_level`` or ``console_level`` is not a level name.
        SinkInitError: The log file cannot be opened for appending.
    """
    file_rank = LEVELS.rank(config.file_level)
    console_rank = LEVELS.rank(config.console_level)

    sinks: list[BaseSink] = []
    if config.file_level != NONE_LEVEL:
        sinks.append(
            FileSink(
                config.file_path,
                file_rank,
                file_processors(config.module),
                level=config.file_level,
            )
        )

    if config.console_level != NONE_LEVEL:
        use_color = config.color
        if use_color is None:
            use_color = _supports_color(stream if stream is not None else sys.stdout)
        sinks.append(
            ConsoleSink(
                console_rank,
                console_processors(config.module, use_color=use_color),
                level=config.console_level,
                stream=stream,
            )
        )
    return sinks
