"""
Paddle controllers: who (or what) moves each paddle.
"""

from __future__ import annotations

from typing import Protocol

from .cpu import CpuConfig, CpuPaddleController
from .player import PlayerPaddleController


class PaddleController(Protocol):
    """Drives one paddle for one frame."""

    def update(self, dt: float):
        """Advance the controlled paddle by ``dt`` seconds."""


__all__ = [
    "CpuConfig",
    "CpuPaddleController",
    "PaddleController",
    "PlayerPaddleController",
]
