import typing as t
from pathlib import Path

import pytest
import structlog

from lisk_logger.formatters import decode_line
from lisk_logger.registry import LoggerRegistry


@pytest.fixture(scope="function")
def registry():
    """
    Function-scoped handle registry.
    Keeps tests from sharing handles through the process-wide registry.
    """
    reg = LoggerRegistry()
    yield reg
    reg.close()


@pytest.fixture(scope="function")
def log_file(tmp_path: Path) -> Path:
    return tmp_path / "logs" / "lisk.log"


@pytest.fixture(scope="function")
def read_records(registry) -> t.Callable[[Path], list[dict]]:
    def _read(path: Path) -> list[dict]:
        registry.flush()
        if not path.exists():
            return []
        return [decode_line(line) for line in path.read_text(encoding="utf-8").splitlines() if line]

    return _read


@pytest.fixture(autouse=True)
def clear_contextvars():
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("LISK_LOG_FILENAME", "LISK_LOG_LEVEL", "LISK_LOG_CONSOLE_LEVEL", "LISK_LOG_COLOR"):
        monkeypatch.delenv(var, raising=False)
