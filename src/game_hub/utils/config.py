"""
Configuration and game registry.
"""

from typing import NamedTuple, Optional

from game_hub.core.types import RIGHT
from game_hub.games import MemoryMatch, SnakeGame, TicTacToe
from game_hub.games.memory_match import DEFAULT_MISMATCH_DELAY, DEFAULT_SYMBOLS
from game_hub.games.snake import DEFAULT_BOARD_SIZE


# ---------------------------------------------------------------------------
# Game Registry
# ---------------------------------------------------------------------------

GAMES = {
    "snake": SnakeGame,
    "tic_tac_toe": TicTacToe,
    "memory": MemoryMatch,
}


class GameEntry(NamedTuple):
    """One tile on the hub's selection page."""
    key: str
    title: str
    route: str


HUB_ENTRIES = (
    GameEntry("snake", "🐍 Snake Game", "/snake"),
    GameEntry("tic_tac_toe", "❌⭕ Tic Tac Toe", "/tic-tac-toe"),
    GameEntry("memory", "🧠 Memory Match", "/memory"),
)


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

BOARD_SIZE = DEFAULT_BOARD_SIZE
INITIAL_HEADING = RIGHT

# Snake tick interval per difficulty (seconds)
TICK_INTERVALS = {
    "slow": 0.150,
    "medium": 0.100,
    "fast": 0.060,
}
DEFAULT_DIFFICULTY = "medium"

CARD_SYMBOLS = DEFAULT_SYMBOLS
MISMATCH_DELAY = DEFAULT_MISMATCH_DELAY


class Config:
    """Session configuration with sensible defaults."""

    def __init__(
        self,
        game_name: str = "snake",
        difficulty: str = DEFAULT_DIFFICULTY,
        board_size: int = BOARD_SIZE,
        seed: Optional[int] = None,
        mismatch_delay: float = MISMATCH_DELAY,
    ):
        # Fail fast on unknown games
        GAMES[game_name]

        if difficulty not in TICK_INTERVALS:
            available = ", ".join(TICK_INTERVALS)
            raise ValueError(f"Unknown difficulty: {difficulty}. Available: {available}")

        self.game_name = game_name
        self.difficulty = difficulty
        self.board_size = board_size
        self.seed = seed
        self.mismatch_delay = mismatch_delay

        # Derive dependent values
        self.tick_interval = TICK_INTERVALS[difficulty]


# Default configuration
DEFAULT_CONFIG = Config()
