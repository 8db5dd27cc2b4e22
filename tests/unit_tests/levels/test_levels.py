"""
Level table unit tests.
"""

from __future__ import annotations

import dataclasses

import pytest

from lisk_logger import LEVELS, UnknownLevel, color, rank
from lisk_logger.exceptions import LoggerError


class TestRanks:
    """Fixed rank table"""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("fatal", 0),
            ("error", 1),
            ("warn", 2),
            ("info", 3),
            ("debug", 4),
            ("query", 5),
            ("trace", 10),
            ("none", 99),
        ],
    )
    def test_rank_values(self, name: str, expected: int) -> None:
        assert rank(name) == expected
        assert LEVELS.rank(name) == expected

    @pytest.mark.parametrize("name", ["warning", "INFO", "critical", "", None])
    def test_unknown_name_raises(self, name) -> None:
        with pytest.raises(UnknownLevel) as exc_info:
            rank(name)
        assert exc_info.value.code == "UNKNOWN_LEVEL"
        assert exc_info.value.details["level"] == name

    def test_unknown_level_is_logger_error(self) -> None:
        with pytest.raises(LoggerError):
            LEVELS.rank("verbose")

    def test_names_are_ordered_by_definition(self) -> None:
        assert LEVELS.names == ("fatal", "error", "warn", "info", "debug", "query", "trace", "none")

    def test_membership(self) -> None:
        assert "query" in LEVELS
        assert "warning" not in LEVELS


class TestColors:
    """Display colour table"""

    def test_known_colors(self) -> None:
        assert color("fatal") == "yellow"
        assert color("error") == "red"
        assert color("info") == "blue"
        assert color("trace") == "cyan"

    def test_warn_color_kept_verbatim(self) -> None:
        assert color("warn") == "meganta"

    def test_unknown_color_raises(self) -> None:
        with pytest.raises(UnknownLevel):
            color("warning")


class TestImmutability:
    """The shared table cannot be modified"""

    def test_rank_mapping_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            LEVELS.ranks["info"] = 7  # type: ignore[index]

    def test_color_mapping_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            LEVELS.colors["warn"] = "magenta"  # type: ignore[index]

    def test_spec_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            LEVELS.names = ()  # type: ignore[misc]
