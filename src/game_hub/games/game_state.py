"""
Immutable state snapshots.

Each engine hands the presentation layer one of these per render. They
hold tuples and plain values only, so mutating an engine afterwards
never changes a snapshot already taken.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

from game_hub.core.types import Card, Heading, Mark, Outcome, Position, Status


@dataclass(frozen=True)
class SnakeSnapshot:
    board_size: int
    body: Tuple[Position, ...]  # head first
    heading: Heading
    goal: Optional[Position]
    status: Status
    score: int

    @property
    def head(self) -> Position:
        return self.body[0]


@dataclass(frozen=True)
class TicTacToeSnapshot:
    cells: Tuple[Mark, ...]
    active_mark: Mark
    outcome: Outcome
    winner: Optional[Mark] = None
    winning_line: Optional[Tuple[int, int, int]] = None


@dataclass(frozen=True)
class MemorySnapshot:
    deck: Tuple[Card, ...]
    revealed: Tuple[int, ...]
    matched: FrozenSet[str]
    move_count: int
    locked: bool
    epoch: int
    complete: bool

    def is_face_up(self, card: Card) -> bool:
        """Face up = currently revealed, or already matched."""
        return card.id in self.revealed or card.symbol in self.matched
