"""
Paddle entity for Blink Pong.
"""

from __future__ import annotations

import colorsys
from dataclasses import dataclass, field

from mini_arcade_core.spaces.d2.geometry2d import Size2D

from blink_pong.constants import (
    HIGHLIGHT_HUE,
    PADDLE_HIGHLIGHT_DURATION,
    WHITE,
)
from blink_pong.physics.easing import clamp, lerp, unlerp
from blink_pong.physics.vector import Vector

Color = tuple[int, int, int]


@dataclass
class Paddle:
    """
    Paddle entity shared by the computer and the player.

    Behavior specific to who drives the paddle lives in the controllers;
    this class only integrates motion and keeps the score/highlight state.

    :ivar position (Vector): Top-left corner of the paddle.
    :ivar size (Size2D): Size of the paddle.
    :ivar velocity (Vector): Velocity in px/s (only y is ever used).
    :ivar score (int): Points won in the current game.
    :ivar highlight_timer (float): Seconds since the last point,
        saturating at ``PADDLE_HIGHLIGHT_DURATION``.
    """

    position: Vector
    size: Size2D
    velocity: Vector = field(default_factory=Vector)
    score: int = 0
    highlight_timer: float = PADDLE_HIGHLIGHT_DURATION

    @property
    def width(self) -> float:
        """Paddle width."""
        return self.size.width

    @property
    def height(self) -> float:
        """Paddle height."""
        return self.size.height

    @property
    def center_y(self) -> float:
        """Vertical center of the paddle."""
        return self.position.y + self.height / 2

    @property
    def highlighted(self) -> bool:
        """Whether the paddle is still flashing after a point."""
        return self.highlight_timer < PADDLE_HIGHLIGHT_DURATION

    @property
    def highlight(self) -> float:
        """Flash progress: 0.0 right after a point, 1.0 fully recovered."""
        return unlerp(self.highlight_timer, 0.0, PADDLE_HIGHLIGHT_DURATION)

    @property
    def color(self) -> Color:
        """
        Render color: white at rest, an orange that fades to white while
        highlighted.

        :return: RGB tuple.
        :rtype: tuple[int, int, int]
        """
        if not self.highlighted:
            return WHITE
        lightness = lerp(0.5, 1.0, self.highlight)
        r, g, b = colorsys.hls_to_rgb(HIGHLIGHT_HUE / 360.0, lightness, 1.0)
        return (round(r * 255), round(g * 255), round(b * 255))

    def update(self, dt: float):
        """
        Integrate velocity and let the highlight recover.

        :param dt: Delta time in seconds.
        :type dt: float
        """
        self.position.add(self.velocity, dt)
        self.highlight_timer = min(
            self.highlight_timer + dt, PADDLE_HIGHLIGHT_DURATION
        )

    def constrain(self, top: float, bottom: float):
        """
        Clamp the paddle so it stays between ``top`` and ``bottom``.

        :param top: Smallest allowed y of the paddle's top edge.
        :type top: float

        :param bottom: Largest allowed y coordinate of the court.
        :type bottom: float
        """
        self.position.y = clamp(self.position.y, top, bottom - self.height)

    def flash(self):
        """Restart the highlight after winning a point."""
        self.highlight_timer = 0.0

    def reset(self, y: float):
        """Back to a fresh game at height ``y``."""
        self.score = 0
        self.velocity.y = 0.0
        self.position.y = y
        self.highlight_timer = PADDLE_HIGHLIGHT_DURATION
