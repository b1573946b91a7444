"""
Blink Pong: a CPU-vs-player Pong simulation.

The simulation core (``Game`` and everything it owns) runs without a
window; ``blink_pong.scenes`` plugs it into mini-arcade-core for display.
"""

from __future__ import annotations

from .commands import RestartGame, SetPlayerTarget
from .game import Game, GameSnapshot, Goal

__all__ = [
    "Game",
    "GameSnapshot",
    "Goal",
    "RestartGame",
    "SetPlayerTarget",
]
