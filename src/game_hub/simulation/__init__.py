"""
Simulation module - timer-driven sessions for real-time games.
"""

from game_hub.simulation.session import SnakeSession

__all__ = ["SnakeSession"]
