"""
CPU paddle controller for Blink Pong.
"""

from __future__ import annotations

from dataclasses import dataclass

from blink_pong.constants import (
    CPU_RESPONSIVENESS_MAX,
    CPU_RESPONSIVENESS_MIN,
    CPU_TRYHARD_MAX,
    CPU_TRYHARD_MIN,
    PADDLE_SPEED,
)
from blink_pong.entities import Ball, Paddle
from blink_pong.physics.easing import damp, remap, saturate


@dataclass
class CpuConfig:
    """
    CPU difficulty curve.

    The CPU reacts with ``responsiveness_min`` while its score is at or
    below ``tryhard_min`` and ramps linearly up to ``responsiveness_max``
    once it reaches ``tryhard_max``.

    - speed: paddle speed the CPU steers toward (px/s)
    - responsiveness_*: damping rate applied to the paddle velocity
    """

    tryhard_min: float = CPU_TRYHARD_MIN
    tryhard_max: float = CPU_TRYHARD_MAX
    responsiveness_min: float = CPU_RESPONSIVENESS_MIN
    responsiveness_max: float = CPU_RESPONSIVENESS_MAX
    speed: float = PADDLE_SPEED


class CpuPaddleController:
    """
    Very simple CPU:
    - Looks at the top of the ball.
    - Eases the paddle velocity toward full speed in that direction,
      faster as its own score grows.
    """

    def __init__(
        self,
        paddle: Paddle,
        ball: Ball,
        *,
        config: CpuConfig | None = None,
    ):
        """
        :param paddle: The paddle to control.
        :type paddle: Paddle

        :param ball: The ball to track.
        :type ball: Ball

        :param config: The CPU configuration settings.
        :type config: CpuConfig, optional
        """
        self.paddle = paddle
        self.ball = ball
        self.config = config or CpuConfig()

    def responsiveness(self) -> float:
        """Damping rate for the current score."""
        cfg = self.config
        return remap(
            self.paddle.score,
            cfg.tryhard_min,
            cfg.tryhard_max,
            cfg.responsiveness_min,
            cfg.responsiveness_max,
            saturate,
        )

    def target_speed(self) -> float:
        """
        Decide paddle velocity to steer toward:
            +speed = down
            0.0 = aligned
            -speed = up
        """
        ball_y = self.ball.position.y - self.ball.radius
        paddle_y = self.paddle.center_y

        if paddle_y < ball_y:
            return self.config.speed
        if paddle_y > ball_y:
            return -self.config.speed
        return 0.0

    def update(self, dt: float):
        """
        Move the paddle, then ease its velocity toward the ball.

        :param dt: Delta time in seconds.
        :type dt: float
        """
        self.paddle.update(dt)
        self.paddle.velocity.y = damp(
            self.paddle.velocity.y,
            self.target_speed(),
            self.responsiveness(),
            dt,
        )
