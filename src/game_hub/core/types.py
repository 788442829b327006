"""
Core types shared by the game engines.

This module contains the small value types used throughout the hub:
- Position / Heading: grid coordinates and unit movement vectors
- Status / Outcome: lifecycle and terminal-state enums
- Mark: int8 cell encoding for the tic-tac-toe board
- Card: one card instance of a memory-match deck
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import NamedTuple


class Position(NamedTuple):
    """Integer grid coordinates, (0, 0) at the top-left."""

    x: int
    y: int

    def step(self, heading: "Heading") -> "Position":
        return Position(self.x + heading.dx, self.y + heading.dy)


class Heading(NamedTuple):
    """Unit movement vector."""

    dx: int
    dy: int

    def reverse(self) -> "Heading":
        return Heading(-self.dx, -self.dy)


UP = Heading(0, -1)
DOWN = Heading(0, 1)
LEFT = Heading(-1, 0)
RIGHT = Heading(1, 0)

HEADINGS = frozenset({UP, DOWN, LEFT, RIGHT})


class Status(Enum):
    IDLE = auto()
    RUNNING = auto()
    ENDED = auto()


class Outcome(Enum):
    UNDECIDED = auto()
    WON = auto()
    DRAWN = auto()


class Mark(IntEnum):
    """Board cell values (int8 encoding)."""

    EMPTY = 0
    X = 1
    O = 2

    def other(self) -> "Mark":
        if self is Mark.EMPTY:
            return Mark.EMPTY
        return Mark(3 - self.value)  # Toggle 1↔2


@dataclass(frozen=True)
class Card:
    """A single card of a memory-match deck. Ids are unique per deck."""

    id: int
    symbol: str
