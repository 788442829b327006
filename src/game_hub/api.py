"""
Terminal front-end: interactive text loops for every hub game.

Each loop reads one intent per line, forwards it to the engine and
prints the engine's state_string(). ``read`` / ``write`` default to
input() / print() and are injectable for tests.
"""

from __future__ import annotations

import logging
from typing import Callable

from game_hub.core.scheduler import Scheduler
from game_hub.core.types import DOWN, LEFT, RIGHT, UP, Outcome
from game_hub.games.game_base import GameBase
from game_hub.games.memory_match import MemoryMatch
from game_hub.games.snake import SnakeGame
from game_hub.games.tic_tac_toe import TicTacToe
from game_hub.simulation.session import SnakeSession

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]

QUIT = {"q", "quit", "exit"}

DEFAULT_TICK_INTERVAL = 0.1

KEY_HEADINGS = {
    "w": UP,
    "a": LEFT,
    "s": DOWN,
    "d": RIGHT,
}


def _prompt(read: Reader, text: str) -> str | None:
    """Read one stripped line; None on EOF or a quit command."""
    try:
        line = read(text).strip().lower()
    except EOFError:
        return None
    return None if line in QUIT else line


def play_tic_tac_toe(game: TicTacToe, read: Reader = input, write: Writer = print) -> None:
    write(game.state_string())
    while not game.is_over():
        line = _prompt(read, f"Cell 0-8 for {game.active_mark.name}: ")
        if line is None:
            return
        if not line.isdigit() or not game.apply_move(int(line)):
            write(f"Invalid move: {line!r}")
            continue
        write(game.state_string())

    if game.outcome is Outcome.WON:
        write(f"Winner: {game.winner.name}")
    else:
        write("Draw!")


def play_memory(game: MemoryMatch, read: Reader = input, write: Writer = print) -> None:
    write(game.state_string())
    while not game.is_complete():
        line = _prompt(read, "Card id: ")
        if line is None:
            return
        if not line.isdigit() or not game.select_card(int(line)):
            write(f"Invalid card: {line!r}")
            continue
        write(game.state_string())
        if game.locked:
            # No render loop here: show the pair, then let the delay elapse
            game.scheduler.advance(game.mismatch_delay)
            write("No match.")

    write(f"🎉 You Won! Moves: {game.move_count}")


def play_snake(
    game: SnakeGame,
    read: Reader = input,
    write: Writer = print,
    interval: float = DEFAULT_TICK_INTERVAL,
) -> None:
    """
    Step mode: each line may name a direction (w/a/s/d), then the
    session clock advances by one tick interval.
    """
    scheduler = Scheduler()
    session = SnakeSession(game, scheduler, interval)
    session.start()
    write(game.state_string())
    while session.active:
        line = _prompt(read, "Direction [w/a/s/d, enter = keep]: ")
        if line is None:
            session.stop()
            return
        if line in KEY_HEADINGS:
            game.set_heading(KEY_HEADINGS[line])
        scheduler.advance(interval)
        write(game.state_string())

    write(f"Game Over! Score: {game.score}")


def play(
    game: GameBase,
    read: Reader = input,
    write: Writer = print,
    interval: float = DEFAULT_TICK_INTERVAL,
) -> None:
    """Run the interactive loop matching ``game``'s type."""
    logger.debug("Starting terminal loop for %s", game.game_id())
    try:
        if isinstance(game, TicTacToe):
            play_tic_tac_toe(game, read, write)
        elif isinstance(game, MemoryMatch):
            play_memory(game, read, write)
        elif isinstance(game, SnakeGame):
            play_snake(game, read, write, interval)
        else:
            raise ValueError(f"No terminal front-end for {game.game_id()}")
    except KeyboardInterrupt:
        write("\nInterrupted.")


__all__ = [
    "play",
    "play_tic_tac_toe",
    "play_memory",
    "play_snake",
]
