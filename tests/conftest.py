"""
Shared fixtures for Blink Pong tests.
"""

from __future__ import annotations

import random

import pytest

from blink_pong.constants import BALL_BLINK_DURATION
from blink_pong.game import Game


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def game(rng: random.Random) -> Game:
    """Fresh game with a seeded serve."""
    return Game(rng=rng)


@pytest.fixture
def live_game(game: Game) -> Game:
    """Game whose ball has finished blinking and is in play."""
    game.ball.blink_timer = BALL_BLINK_DURATION
    return game
