"""
GameBase - abstract base class for all hub games.
"""

from abc import ABC, abstractmethod
from typing import Any


class GameBase(ABC):
    """
    Abstract base class for all hub games.

    IMPORTANT ARCHITECTURE NOTE:
    -----------------------------
    - Engines are pure state machines: no rendering, no timers, no I/O.
    - Invalid input is REJECTED (state unchanged), never raised.
    - The presentation layer reads snapshot() and forwards intents.

    Timed behaviour goes through an injected Scheduler; engines never
    read a wall clock.
    """

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'tic_tac_toe')."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Return the engine to its initial state."""
        pass

    @abstractmethod
    def snapshot(self) -> Any:
        """Return an immutable snapshot of the current state."""
        pass

    @abstractmethod
    def is_over(self) -> bool:
        """Return True if the game has reached a terminal state."""
        pass

    @abstractmethod
    def get_cell_strings(self) -> dict:
        """
        Return a dictionary mapping cell values to display strings
            (e.g. {0: " ", 1: "X", 2: "O"} for tic_tac_toe)
        """
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Pretty string representation of the state."""
        pass
