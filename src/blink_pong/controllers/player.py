"""
Pointer-driven paddle controller for Blink Pong.
"""

from __future__ import annotations

from blink_pong.constants import HEIGHT, OFFSET, PLAYER_DAMPING
from blink_pong.entities import Paddle
from blink_pong.physics.easing import clamp, damp


class PlayerPaddleController:
    """
    Eases the paddle toward the last pointer position.

    The target is the paddle's top edge, clamped into the court whenever
    it is set.
    """

    def __init__(self, paddle: Paddle, *, damping: float = PLAYER_DAMPING):
        """
        :param paddle: The paddle to control.
        :type paddle: Paddle

        :param damping: Rate at which the paddle catches up with the target.
        :type damping: float
        """
        self.paddle = paddle
        self.damping = damping
        self.target = paddle.position.y

    @property
    def top(self) -> float:
        """Highest allowed target."""
        return OFFSET

    @property
    def bottom(self) -> float:
        """Lowest allowed target."""
        return HEIGHT - OFFSET - self.paddle.height

    def aim(self, pointer_y: float):
        """
        Center the paddle target on the pointer.

        :param pointer_y: Pointer y in court coordinates.
        :type pointer_y: float
        """
        self.target = clamp(
            pointer_y - self.paddle.height / 2, self.top, self.bottom
        )

    def reset(self):
        """Drop the target back to the middle of the court."""
        self.target = (self.top + self.bottom) / 2

    def update(self, dt: float):
        """
        Move the paddle, then ease it toward the target.

        :param dt: Delta time in seconds.
        :type dt: float
        """
        self.paddle.update(dt)
        self.paddle.position.y = damp(
            self.paddle.position.y, self.target, self.damping, dt
        )
