"""
Games module - the three hub game engines.
"""

from game_hub.games.game_base import GameBase
from game_hub.games.game_state import MemorySnapshot, SnakeSnapshot, TicTacToeSnapshot
from game_hub.games.game_rules import WIN_LINES, in_bounds, board_full, free_cells, winning_line
from game_hub.games.snake import SnakeGame
from game_hub.games.tic_tac_toe import TicTacToe
from game_hub.games.memory_match import MemoryMatch

__all__ = [
    "GameBase",
    "SnakeGame",
    "TicTacToe",
    "MemoryMatch",
    "SnakeSnapshot",
    "TicTacToeSnapshot",
    "MemorySnapshot",
    "WIN_LINES",
    "in_bounds",
    "board_full",
    "free_cells",
    "winning_line",
]
