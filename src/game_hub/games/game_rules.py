"""
NumPy utilities for grid games.

Small, allocation-light helpers shared by the engines: bounds checks,
free-cell enumeration and winning-line lookup.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

import numpy as np

from game_hub.core.types import Position

# Winning triples (indices into a flattened 3x3 board)
WIN_LINES = np.array([
    [0, 1, 2], [3, 4, 5], [6, 7, 8],  # rows
    [0, 3, 6], [1, 4, 7], [2, 5, 8],  # cols
    [0, 4, 8], [2, 4, 6],             # diagonals
], dtype=np.int8)
WIN_LINES.setflags(write=False)


def in_bounds(size: int, x: int, y: int) -> bool:
    """Return True if (x, y) is inside a size x size board."""
    return 0 <= x < size and 0 <= y < size


def occupancy(size: int, cells: Iterable[Position]) -> np.ndarray:
    """Boolean (size, size) grid indexed [y, x], True where occupied."""
    grid = np.zeros((size, size), dtype=bool)
    for x, y in cells:
        grid[y, x] = True
    return grid


def free_cells(size: int, occupied: Iterable[Position]) -> List[Position]:
    """All positions not in ``occupied``, in row-major order."""
    ys, xs = np.nonzero(~occupancy(size, occupied))
    return [Position(int(x), int(y)) for x, y in zip(xs, ys)]


def board_full(board: np.ndarray) -> bool:
    """Return True if the board has no empty (0) cells."""
    return not np.any(board == 0)


def winning_line(board: np.ndarray, mark: int) -> Optional[Tuple[int, int, int]]:
    """
    Return the first triple fully held by ``mark``, or None.

    ``board`` may be any shape with 9 cells; it is read flattened.
    """
    flat = board.ravel()
    for line in WIN_LINES:
        if flat[line[0]] == mark and flat[line[1]] == mark and flat[line[2]] == mark:
            return (int(line[0]), int(line[1]), int(line[2]))
    return None
