"""
Entities package for Blink Pong.
This package contains the ball and paddle models driven by the game.
"""

from __future__ import annotations

from .ball import Ball
from .paddle import Paddle

__all__ = [
    "Ball",
    "Paddle",
]
