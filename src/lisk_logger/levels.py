"""
Fixed severity table shared by every handle and sink.

Lower rank means higher severity. A sink configured at rank R admits records
whose rank is <= R. ``none`` is a sentinel: a sink configured at ``none`` is
never built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .exceptions import UnknownLevel

NONE_LEVEL = "none"


@dataclass(frozen=True)
class LevelSpec:
    """Immutable name -> rank and name -> colour table."""

    ranks: Mapping[str, int]
    colors: Mapping[str, str]
    names: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "ranks", MappingProxyType(dict(self.ranks)))
        object.__setattr__(self, "colors", MappingProxyType(dict(self.colors)))
        object.__setattr__(self, "names", tuple(self.ranks))

    def __contains__(self, name: object) -> bool:
        return name in self.ranks

    def rank(self, name: str) -> int:
        try:
            return self.ranks[name]
        except (KeyError, TypeError):
            raise UnknownLevel(name, known=self.names) from None

    def color(self, name: str) -> str:
        if name not in self.ranks:
            raise UnknownLevel(name, known=self.names)
        return self.colors[name]


LEVELS = LevelSpec(
    ranks={
        "fatal": 0,
        "error": 1,
        "warn": 2,
        "info": 3,
        "debug": 4,
        "query": 5,
        "trace": 10,
        "none": 99,
    },
    # "meganta" is kept verbatim; stylers that do not know it leave text plain.
    colors={
        "fatal": "yellow",
        "error": "red",
        "warn": "meganta",
        "info": "blue",
        "debug": "green",
        "query": "green",
        "trace": "cyan",
        "none": "black",
    },
)


def rank(name: str) -> int:
    """Return the numeric rank of ``name``."""
    return LEVELS.rank(name)


def color(name: str) -> str:
    """Return the display colour token of ``name``."""
    return LEVELS.color(name)
