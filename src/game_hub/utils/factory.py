"""
Factory functions for creating configured game engines.
"""

from typing import Optional

from game_hub.core.scheduler import Scheduler
from game_hub.games.game_base import GameBase
from game_hub.utils.config import CARD_SYMBOLS, GAMES, INITIAL_HEADING, Config


def create_game(
    game_name: str,
    *,
    seed: Optional[int] = None,
    scheduler: Optional[Scheduler] = None,
    config: Optional[Config] = None,
) -> GameBase:
    """
    Create a game engine in its initial state.

    Args:
        game_name: Key from GAMES registry (e.g., "tic_tac_toe")
        seed: Seed for the engine's random generator (overrides config.seed)
        scheduler: Scheduler for timed behaviour (memory match only)
        config: Optional Config supplying board size and delays

    Returns:
        Configured game instance
    """
    if game_name not in GAMES:
        available = ", ".join(GAMES.keys())
        raise ValueError(f"Unknown game: {game_name}. Available: {available}")

    if config is None:
        config = Config(game_name=game_name)
    if seed is None:
        seed = config.seed

    if game_name == "snake":
        return GAMES[game_name](
            config.board_size, initial_heading=INITIAL_HEADING, seed=seed
        )
    if game_name == "memory":
        return GAMES[game_name](
            CARD_SYMBOLS,
            scheduler=scheduler,
            mismatch_delay=config.mismatch_delay,
            seed=seed,
        )
    return GAMES[game_name]()
