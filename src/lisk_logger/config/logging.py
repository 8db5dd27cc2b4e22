"""
Logging Configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..levels import LEVELS

DEFAULT_FILENAME = "logs/lisk.log"
DEFAULT_MODULE = "default"


@dataclass(frozen=True)
class TransportConfig:
    """Sink configuration for exactly one module handle."""

    file_path: str = DEFAULT_FILENAME
    file_level: str = "none"
    console_level: str = "debug"
    module: str = DEFAULT_MODULE
    # None means "colour when stdout is a TTY"
    color: bool | None = None

    def __post_init__(self) -> None:
        LEVELS.rank(self.file_level)
        LEVELS.rank(self.console_level)

    def with_module(self, module: str) -> "TransportConfig":
        return replace(self, module=module)


class LoggerSettings(BaseSettings):
    """Logger configuration.

    Accepts the historical keys ``filename``, ``level`` and ``consoleLevel``
    as well as the snake_case ``console_level``. Environment variables use
    the ``LISK_LOG_`` prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="LISK_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    filename: str = Field(default=DEFAULT_FILENAME, description="Path for the file sink")
    level: str = Field(default="none", description="File sink level, or 'none' to disable it")
    console_level: str = Field(
        default="debug",
        validation_alias=AliasChoices("consoleLevel", "console_level", "LISK_LOG_CONSOLE_LEVEL"),
        description="Console sink level, or 'none' to disable it",
    )
    color: bool | None = Field(default=None, description="Force console colours on or off")

    @field_validator("level", "console_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip().lower()
        # UnknownLevel is not a ValueError, so pydantic lets it propagate as-is.
        LEVELS.rank(value)
        return value

    def transport_config(self, module: str = DEFAULT_MODULE) -> TransportConfig:
        return TransportConfig(
            file_path=self.filename,
            file_level=self.level,
            console_level=self.console_level,
            module=module,
            color=self.color,
        )
