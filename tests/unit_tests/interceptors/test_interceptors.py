"""
Standard library bridge unit tests.
"""

from __future__ import annotations

import logging

import pytest

from lisk_logger import Logger, LoggerSettings
from lisk_logger.interceptors import StdlibBridgeHandler, intercept_stdlib, stdlib_level_name


@pytest.fixture
def bridged(registry, log_file):
    logger = Logger(
        LoggerSettings(filename=str(log_file), level="trace", consoleLevel="none"),
        registry=registry,
    )
    stdlib_logger = logging.getLogger("thirdparty.http")
    stdlib_logger.setLevel(logging.DEBUG)
    handler = intercept_stdlib(logger, ["thirdparty"])
    yield stdlib_logger
    parent = logging.getLogger("thirdparty")
    parent.removeHandler(handler)
    parent.propagate = True


class TestLevelMapping:
    """stdlib level numbers"""

    @pytest.mark.parametrize(
        ("levelno", "expected"),
        [
            (logging.CRITICAL, "fatal"),
            (logging.ERROR, "error"),
            (logging.WARNING, "warn"),
            (logging.INFO, "info"),
            (logging.DEBUG, "debug"),
            (5, "trace"),
        ],
    )
    def test_mapping(self, levelno: int, expected: str) -> None:
        assert stdlib_level_name(levelno) == expected


class TestBridge:
    """Forwarding records"""

    def test_records_use_intercepted_root_as_module(self, bridged, log_file, read_records) -> None:
        bridged.warning("retrying %s", "GET /blocks")

        (record,) = read_records(log_file)
        assert record["level"] == "warn"
        assert record["module"] == "thirdparty"
        assert record["message"] == "retrying GET /blocks"

    def test_nested_loggers_share_one_module_handle(self, bridged, registry, log_file, read_records) -> None:
        before = set(registry.names())
        logging.getLogger("thirdparty.a").warning("one")
        logging.getLogger("thirdparty.b.c").warning("two")
        bridged.warning("three")

        records = read_records(log_file)
        assert [r["module"] for r in records] == ["thirdparty"] * 3
        assert set(registry.names()) - before <= {"thirdparty"}
        assert "thirdparty.b.c" not in registry

    def test_exception_text_goes_to_meta(self, bridged, log_file, read_records) -> None:
        try:
            raise ValueError("bad peer")
        except ValueError:
            bridged.exception("request failed")

        (record,) = read_records(log_file)
        assert record["level"] == "error"
        assert "ValueError: bad peer" in record["meta"]["exception"]

    def test_reattaching_replaces_previous_bridge(self, registry) -> None:
        logger = Logger(LoggerSettings(level="none", consoleLevel="none"), registry=registry)
        intercept_stdlib(logger, ["lisk.bridge"])
        handler = intercept_stdlib(logger, ["lisk.bridge"])

        target = logging.getLogger("lisk.bridge")
        bridges = [h for h in target.handlers if isinstance(h, StdlibBridgeHandler)]
        assert bridges == [handler]
        target.removeHandler(handler)


class TestModuleName:
    """stdlib logger name to module handle name"""

    @pytest.fixture
    def logger(self, registry):
        return Logger(LoggerSettings(level="none", consoleLevel="none"), registry=registry)

    def test_longest_root_wins(self, logger) -> None:
        handler = StdlibBridgeHandler(logger, roots=["thirdparty", "thirdparty.http"])
        assert handler.module_name("thirdparty.http.pool") == "thirdparty.http"
        assert handler.module_name("thirdparty.db") == "thirdparty"
        assert handler.module_name("thirdparty") == "thirdparty"

    def test_prefix_must_end_at_a_dot(self, logger) -> None:
        handler = StdlibBridgeHandler(logger, roots=["thirdparty"])
        assert handler.module_name("thirdpartyx.pool") == "thirdpartyx"

    def test_root_bridge_uses_top_level_package(self, logger) -> None:
        handler = StdlibBridgeHandler(logger, roots=[""])
        assert handler.module_name("urllib3.connectionpool") == "urllib3"
        assert handler.module_name("") == "stdlib"
