"""
Shared test fixtures for game_hub tests.

Design principles:
- Seeded generators everywhere, so every run is reproducible
- Fresh engine per test
- Minimal, focused fixtures
"""

from typing import Dict

import numpy as np
import pytest

from game_hub.core.scheduler import Scheduler
from game_hub.games.memory_match import MemoryMatch
from game_hub.games.snake import SnakeGame
from game_hub.games.tic_tac_toe import TicTacToe


# =============================================================================
# Infrastructure Fixtures
# =============================================================================

@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def scheduler() -> Scheduler:
    return Scheduler()


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def snake(rng: np.random.Generator) -> SnakeGame:
    """Standard 20x20 snake, not started."""
    return SnakeGame(rng=rng)


@pytest.fixture
def running_snake(snake: SnakeGame) -> SnakeGame:
    snake.start()
    return snake


@pytest.fixture
def tic_tac_toe() -> TicTacToe:
    return TicTacToe()


@pytest.fixture
def memory(scheduler: Scheduler, rng: np.random.Generator) -> MemoryMatch:
    """Default 8-symbol memory game on a test scheduler."""
    return MemoryMatch(scheduler=scheduler, rng=rng)


# =============================================================================
# Helpers
# =============================================================================

def pairs_by_symbol(game: MemoryMatch) -> Dict[str, list]:
    """Map each symbol to the ids of its two cards."""
    pairs: Dict[str, list] = {}
    for card in game.deck:
        pairs.setdefault(card.symbol, []).append(card.id)
    return pairs


@pytest.fixture
def pairs(memory: MemoryMatch) -> Dict[str, list]:
    return pairs_by_symbol(memory)
