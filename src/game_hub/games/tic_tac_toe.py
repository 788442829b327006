"""
TicTacToe game engine.

Uses a flat int8 board of 9 cells:
    0 = empty
    1 = X (moves first)
    2 = O
"""

from __future__ import annotations

import logging
import operator
from typing import List, Optional, Tuple

import numpy as np

from game_hub.core.types import Mark, Outcome
from game_hub.games.game_base import GameBase
from game_hub.games.game_rules import board_full, winning_line
from game_hub.games.game_state import TicTacToeSnapshot

logger = logging.getLogger(__name__)

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {Mark.EMPTY: " ", Mark.X: "X", Mark.O: "O"}

STARTING_MARK = Mark.X
NUM_CELLS = 9


class TicTacToe(GameBase):
    """Two-player 3x3 tic-tac-toe with strict turn alternation."""

    __slots__ = ('cells', 'active_mark', 'outcome', 'winner', 'winning_line')

    def __init__(self):
        self.cells = np.zeros(NUM_CELLS, dtype=np.int8)
        self.active_mark = STARTING_MARK
        self.outcome = Outcome.UNDECIDED
        self.winner: Optional[Mark] = None
        self.winning_line: Optional[Tuple[int, int, int]] = None

    def game_id(self) -> str:
        return "tic_tac_toe"

    def get_cell_strings(self) -> dict:
        return CELL_STRINGS

    def reset(self) -> None:
        self.cells[:] = Mark.EMPTY
        self.active_mark = STARTING_MARK
        self.outcome = Outcome.UNDECIDED
        self.winner = None
        self.winning_line = None

    def valid_moves(self) -> List[int]:
        """Empty cell indices, or [] once the game is decided."""
        if self.outcome is not Outcome.UNDECIDED:
            return []
        return [int(i) for i in np.flatnonzero(self.cells == Mark.EMPTY)]

    def apply_move(self, cell_index) -> bool:
        """
        Place the active mark at ``cell_index``.

        Returns False (and changes nothing) when the game is decided,
        the index is not an integer in [0, 9), or the cell is taken.
        """
        if self.outcome is not Outcome.UNDECIDED:
            logger.debug("Move %r rejected: game already decided", cell_index)
            return False

        try:
            idx = operator.index(cell_index)
        except TypeError:
            logger.debug("Move %r rejected: not an index", cell_index)
            return False

        if not 0 <= idx < NUM_CELLS or self.cells[idx] != Mark.EMPTY:
            logger.debug("Move %d rejected: out of range or occupied", idx)
            return False

        mark = self.active_mark
        self.cells[idx] = mark

        # Only the mover can have completed a line
        line = winning_line(self.cells, mark)
        if line is not None:
            self.outcome = Outcome.WON
            self.winner = mark
            self.winning_line = line
            logger.info("%s wins on line %s", mark.name, line)
        elif board_full(self.cells):
            self.outcome = Outcome.DRAWN
            logger.info("Game drawn")
        else:
            self.active_mark = mark.other()

        return True

    def is_over(self) -> bool:
        return self.outcome is not Outcome.UNDECIDED

    def snapshot(self) -> TicTacToeSnapshot:
        return TicTacToeSnapshot(
            cells=tuple(Mark(int(v)) for v in self.cells),
            active_mark=self.active_mark,
            outcome=self.outcome,
            winner=self.winner,
            winning_line=self.winning_line,
        )

    def state_string(self) -> str:
        board = self.cells.reshape(3, 3)
        lines = ["╭───┬───┬───╮"]
        for i in range(3):
            row = "│ " + " │ ".join(CELL_STRINGS[Mark(int(board[i, j]))] for j in range(3)) + " │"
            lines.append(row)
            if i < 2:
                lines.append("├───┼───┼───┤")
        lines.append("╰───┴───┴───╯")
        return "\n".join(lines)
