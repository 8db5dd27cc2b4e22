"""
Logger configuration.

Usage:
    from lisk_logger.config import LoggerSettings

    settings = LoggerSettings()                      # LISK_LOG_* env / .env
    settings = LoggerSettings(level="error", consoleLevel="none")
    settings.transport_config("workers")
"""

from .logging import DEFAULT_FILENAME, DEFAULT_MODULE, LoggerSettings, TransportConfig

__all__ = [
    "DEFAULT_FILENAME",
    "DEFAULT_MODULE",
    "LoggerSettings",
    "TransportConfig",
]
