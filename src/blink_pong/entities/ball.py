"""
Ball entity for Blink Pong.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from blink_pong.constants import BALL_BLINK_DURATION, BALL_RADIUS
from blink_pong.physics.vector import Vector


@dataclass
class Ball:
    """
    Ball entity.

    After every point the ball blinks in place for ``BALL_BLINK_DURATION``
    seconds before it starts moving again.

    :ivar position (Vector): Center of the ball.
    :ivar velocity (Vector): Velocity in px/s.
    :ivar radius (float): Radius of the ball.
    :ivar blink_timer (float): Seconds since the last reset, saturating at
        ``BALL_BLINK_DURATION``.
    """

    position: Vector
    velocity: Vector = field(default_factory=Vector)
    radius: float = BALL_RADIUS
    blink_timer: float = 0.0

    @property
    def blinking(self) -> bool:
        """Whether the post-point freeze is still running."""
        return self.blink_timer < BALL_BLINK_DURATION

    def update(self, dt: float):
        """
        Advance the blink timer and, once it has run out, move the ball.

        :param dt: Delta time in seconds.
        :type dt: float
        """
        self.blink_timer = min(self.blink_timer + dt, BALL_BLINK_DURATION)
        if not self.blinking:
            self.position.add(self.velocity, dt)

    def reset(self, x: float, y: float, velocity: Vector):
        """Re-serve from (x, y) in place."""
        self.position.x = x
        self.position.y = y
        self.velocity = velocity
        self.blink_timer = 0.0
