"""
Command-line interface for playing the hub games in a terminal.
"""

import argparse
import logging

from game_hub.api import play
from game_hub.utils.config import BOARD_SIZE, DEFAULT_DIFFICULTY, GAMES, HUB_ENTRIES, TICK_INTERVALS, Config
from game_hub.utils.factory import create_game

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play snake, tic-tac-toe or memory match in the terminal"
    )
    parser.add_argument(
        "--game", "-g",
        choices=list(GAMES.keys()),
        default="tic_tac_toe",
        help="Game to play (default: tic_tac_toe)",
    )
    parser.add_argument(
        "--difficulty", "-d",
        choices=list(TICK_INTERVALS.keys()),
        default=DEFAULT_DIFFICULTY,
        help=f"Snake speed (default: {DEFAULT_DIFFICULTY})",
    )
    parser.add_argument(
        "--board-size", "-b",
        type=int,
        default=BOARD_SIZE,
        help=f"Snake board side length (default: {BOARD_SIZE})",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for goal placement / deck shuffling",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the available games and exit",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def list_games() -> str:
    return "\n".join(f"{e.key:<12} {e.title}  ({e.route})" for e in HUB_ENTRIES)


def main(argv=None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        print(list_games())
        return

    config = Config(
        game_name=args.game,
        difficulty=args.difficulty,
        board_size=args.board_size,
        seed=args.seed,
    )

    try:
        game = create_game(config.game_name, config=config)
        play(game, interval=config.tick_interval)
    except Exception:
        logger.exception("Fatal error in game loop")
        raise


if __name__ == "__main__":
    main()
