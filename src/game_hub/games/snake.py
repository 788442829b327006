"""
Snake game engine.

The body is a deque of Positions, head first. Each tick moves the head
one cell along the current heading; reaching the goal grows the body
by one instead of trimming the tail.

Board encoding for rendering (int8, indexed [y, x]):
    0 = empty
    1 = body
    2 = head
    3 = goal
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Iterable, Optional, Set

import numpy as np

from game_hub.core.rng import make_rng
from game_hub.core.types import HEADINGS, RIGHT, Heading, Position, Status
from game_hub.games.game_base import GameBase
from game_hub.games.game_rules import free_cells, in_bounds
from game_hub.games.game_state import SnakeSnapshot

logger = logging.getLogger(__name__)

EMPTY = 0
BODY = 1
HEAD = 2
GOAL = 3

CELL_STRINGS = {EMPTY: ".", BODY: "o", HEAD: "@", GOAL: "*"}

DEFAULT_BOARD_SIZE = 20


def default_initial_body(board_size: int) -> tuple:
    """Single-segment body; (8, 10) on the standard 20x20 board."""
    return (Position(board_size * 2 // 5, board_size // 2),)


class SnakeGame(GameBase):
    """Single-player snake on a square board."""

    def __init__(
        self,
        board_size: int = DEFAULT_BOARD_SIZE,
        initial_body: Optional[Iterable] = None,
        initial_heading: Heading = RIGHT,
        *,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        if board_size < 2:
            raise ValueError(f"board_size must be at least 2, got {board_size}")

        if initial_body is None:
            initial_body = default_initial_body(board_size)
        body = tuple(Position(int(x), int(y)) for x, y in initial_body)

        if not body:
            raise ValueError("initial_body must contain at least one segment")
        if len(set(body)) != len(body):
            raise ValueError("initial_body segments must not overlap")
        if not all(in_bounds(board_size, p.x, p.y) for p in body):
            raise ValueError(f"initial_body {body} does not fit a {board_size}x{board_size} board")
        if Heading(*initial_heading) not in HEADINGS:
            raise ValueError(f"initial_heading must be a unit vector, got {initial_heading}")

        self.board_size = board_size
        self.initial_body = body
        self.initial_heading = Heading(*initial_heading)
        self.rng = make_rng(seed, rng)

        self.status = Status.IDLE
        self.body: Deque[Position] = deque()
        self._occupied: Set[Position] = set()
        self.heading = self.initial_heading
        self.goal: Optional[Position] = None
        self.score = 0
        self._init_round()

    def game_id(self) -> str:
        return "snake"

    def get_cell_strings(self) -> dict:
        return CELL_STRINGS

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _init_round(self) -> None:
        self.body = deque(self.initial_body)
        self._occupied = set(self.initial_body)
        self.heading = self.initial_heading
        self.score = 0
        self.goal = self._place_goal()

    def start(self) -> None:
        """Begin a fresh round. Ignored while a round is running."""
        if self.status is Status.RUNNING:
            return
        self._init_round()
        self.status = Status.RUNNING
        logger.debug("Snake started, goal at %s", self.goal)

    def reset(self) -> None:
        self.status = Status.IDLE
        self._init_round()

    def is_over(self) -> bool:
        return self.status is Status.ENDED

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def set_heading(self, candidate) -> None:
        """
        Queue a new heading for the next tick.

        Silently ignored unless running, and when ``candidate`` is not a
        unit vector or is the exact reverse of the current heading.
        """
        if self.status is not Status.RUNNING:
            return
        try:
            heading = Heading(*candidate)
        except TypeError:
            return
        if heading not in HEADINGS or heading == self.heading.reverse():
            logger.debug("Heading %s rejected (current %s)", tuple(candidate), self.heading)
            return
        self.heading = heading

    def tick(self) -> None:
        """Advance one step. No-op unless running."""
        if self.status is not Status.RUNNING:
            return

        nxt = self.body[0].step(self.heading)

        if not in_bounds(self.board_size, nxt.x, nxt.y) or nxt in self._occupied:
            self.status = Status.ENDED
            logger.info("Snake collided at %s, final score %d", nxt, self.score)
            return

        self.body.appendleft(nxt)
        self._occupied.add(nxt)

        if nxt == self.goal:
            self.score += 1
            self.goal = self._place_goal()
            logger.debug("Goal reached, score %d, next goal %s", self.score, self.goal)
        else:
            self._occupied.discard(self.body.pop())

    def _place_goal(self) -> Optional[Position]:
        """Uniformly random free cell, or None when the body fills the board."""
        free = free_cells(self.board_size, self.body)
        if not free:
            return None
        return free[int(self.rng.integers(len(free)))]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def board(self) -> np.ndarray:
        """int8 board indexed [y, x] (see module docstring for encoding)."""
        grid = np.full((self.board_size, self.board_size), EMPTY, dtype=np.int8)
        if self.goal is not None:
            grid[self.goal.y, self.goal.x] = GOAL
        for p in self.body:
            grid[p.y, p.x] = BODY
        head = self.body[0]
        grid[head.y, head.x] = HEAD
        return grid

    def snapshot(self) -> SnakeSnapshot:
        return SnakeSnapshot(
            board_size=self.board_size,
            body=tuple(self.body),
            heading=self.heading,
            goal=self.goal,
            status=self.status,
            score=self.score,
        )

    def state_string(self) -> str:
        rows = [" ".join(CELL_STRINGS[int(v)] for v in row) for row in self.board()]
        rows.append(f"Score: {self.score}  [{self.status.name.lower()}]")
        return "\n".join(rows)
