"""
Game Hub - pure game-state engines for three casual games.

This package provides deterministic engines for snake, tic-tac-toe and
memory match. A presentation layer renders their snapshots and forwards
player intents; timed behaviour runs on an injected Scheduler.

Quick Start:
    from game_hub import create_game

    game = create_game("tic_tac_toe")
    game.apply_move(4)
    print(game.state_string())

Modules:
    core       - Value types, random generators, the manual-clock Scheduler
    games      - SnakeGame, TicTacToe, MemoryMatch and shared board helpers
    simulation - SnakeSession (tick timer ownership)
    utils      - Game registry, configuration and factory
"""

from game_hub.core import Scheduler
from game_hub.games import GameBase, MemoryMatch, SnakeGame, TicTacToe
from game_hub.simulation import SnakeSession
from game_hub.utils.factory import create_game

__version__ = "1.0.0"

__all__ = [
    # Main API
    "create_game",
    "SnakeSession",
    "Scheduler",
    # Games
    "GameBase",
    "SnakeGame",
    "TicTacToe",
    "MemoryMatch",
]
