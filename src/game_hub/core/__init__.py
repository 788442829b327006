"""
Core module - value types, randomness and scheduling.

This module provides the building blocks used by every game engine.
"""

from game_hub.core.types import (
    Card,
    Heading,
    HEADINGS,
    Mark,
    Outcome,
    Position,
    Status,
    UP,
    DOWN,
    LEFT,
    RIGHT,
)
from game_hub.core.rng import make_rng
from game_hub.core.scheduler import Job, Scheduler

__all__ = [
    # Types
    "Card",
    "Heading",
    "Mark",
    "Outcome",
    "Position",
    "Status",
    # Constants
    "HEADINGS",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    # Functions / classes
    "make_rng",
    "Job",
    "Scheduler",
]
