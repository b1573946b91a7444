"""
Blink Pong game: owns the ball and both paddles and advances them each
frame.
"""

from __future__ import annotations

import math
import random
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Literal, Optional

from mini_arcade_core.spaces.d2.geometry2d import Size2D
from mini_arcade_core.utils import logger

from blink_pong.commands import GameCommand
from blink_pong.constants import (
    BALL_RADIUS,
    BALL_SPEED,
    BLINK_FLICKER_RATE,
    END_GAME_SCORE,
    HEIGHT,
    OFFSET,
    PADDLE_HEIGHT,
    PADDLE_WIDTH,
    WIDTH,
)
from blink_pong.controllers import (
    CpuConfig,
    CpuPaddleController,
    PaddleController,
    PlayerPaddleController,
)
from blink_pong.entities import Ball, Paddle
from blink_pong.physics.collision import intersects
from blink_pong.physics.vector import Vector

Side = Literal["LEFT", "RIGHT"]

PADDLE_START_Y = (HEIGHT - 2 * OFFSET - PADDLE_HEIGHT) / 2 + OFFSET


class Goal(Enum):
    """
    Outcome of keeping the ball inside the court.

    :cvar NONE: Ball still in play.
    :cvar LEFT: Ball crossed the left edge, the right paddle scores.
    :cvar RIGHT: Ball crossed the right edge, the left paddle scores.
    """

    NONE = 0
    LEFT = -1
    RIGHT = 1


def collide_ball_with_paddle(ball: Ball, paddle: Paddle, side: int) -> bool:
    """
    Bounce the ball off a paddle it overlaps.

    The horizontal direction is forced to ``side`` instead of being negated,
    so a ball still inside the paddle on the next frame cannot bounce back
    through it. The vertical slope depends on where the ball hit, measured
    from the paddle's top edge.

    :param ball: The ball.
    :type ball: Ball

    :param paddle: The paddle to test.
    :type paddle: Paddle

    :param side: +1 to send the ball right, -1 to send it left.
    :type side: int

    :return: True if the ball hit the paddle.
    :rtype: bool
    """
    if not intersects(paddle, ball):
        return False

    ball.velocity.x = side * abs(ball.velocity.x)

    dy = ball.position.y - paddle.position.y
    ry = (dy / paddle.height) * 2 - 1
    ball.velocity.y = ry * abs(ball.velocity.x)

    ball.velocity.normalize(BALL_SPEED)
    return True


def constrain_ball_to_game_area(ball: Ball) -> Goal:
    """
    Detect goals and bounce the ball off the top and bottom walls.

    :param ball: The ball.
    :type ball: Ball

    :return: Which goal line was crossed, if any.
    :rtype: Goal
    """
    offset = OFFSET / 2

    if ball.position.x - ball.radius < offset:
        return Goal.LEFT
    if ball.position.x + ball.radius > WIDTH - offset:
        return Goal.RIGHT

    if ball.position.y - ball.radius < offset:
        ball.position.y = offset + ball.radius
        ball.velocity.y *= -1
    elif ball.position.y + ball.radius > HEIGHT - offset:
        ball.position.y = HEIGHT - offset - ball.radius
        ball.velocity.y *= -1

    return Goal.NONE


@dataclass(frozen=True)
class BallView:
    """
    Read-only ball state for rendering.

    :ivar x (float): Center x.
    :ivar y (float): Center y.
    :ivar radius (float): Radius.
    :ivar visible (bool): False during the "off" phase of the blink.
    """

    x: float
    y: float
    radius: float
    visible: bool


@dataclass(frozen=True)
class PaddleView:
    """
    Read-only paddle state for rendering.

    :ivar side (Side): Which side of the court the paddle defends.
    :ivar x (float): Left edge.
    :ivar y (float): Top edge.
    :ivar width (float): Width.
    :ivar height (float): Height.
    :ivar score (int): Current score.
    :ivar highlight (float): 0.0 right after a point, 1.0 at rest.
    :ivar color (tuple[int, int, int]): Render color.
    """

    side: Side
    x: float
    y: float
    width: float
    height: float
    score: int
    highlight: float
    color: tuple[int, int, int]


@dataclass(frozen=True)
class GameSnapshot:
    """
    Everything a renderer needs for one frame.

    :ivar ball (BallView): Ball state.
    :ivar left (PaddleView): Computer paddle.
    :ivar right (PaddleView): Player paddle.
    :ivar is_over (bool): Whether the game has ended.
    :ivar winner (Side | None): Winning side once the game is over.
    :ivar time (float): Seconds simulated since the game was created.
    """

    ball: BallView
    left: PaddleView
    right: PaddleView
    is_over: bool
    winner: Optional[Side]
    time: float


# Justification: the game is the single owner of all simulation state
# pylint: disable=too-many-instance-attributes
class Game:
    """
    Pong between a CPU paddle on the left and the player on the right.

    Call :meth:`tick` once per frame; read :meth:`snapshot` to draw.
    """

    def __init__(
        self,
        *,
        cpu_config: CpuConfig | None = None,
        rng: random.Random | None = None,
    ):
        """
        :param cpu_config: Difficulty curve for the CPU paddle.
        :type cpu_config: CpuConfig, optional

        :param rng: Random source for serves; seed it for reproducible games.
        :type rng: random.Random, optional
        """
        self.rng = rng or random.Random()
        self.ball = Ball(
            position=Vector(WIDTH / 2, HEIGHT / 2),
            velocity=Vector.random_ball_velocity(self.rng),
            radius=BALL_RADIUS,
        )
        self.left_paddle = Paddle(
            position=Vector(OFFSET, PADDLE_START_Y),
            size=Size2D(PADDLE_WIDTH, PADDLE_HEIGHT),
        )
        self.right_paddle = Paddle(
            position=Vector(WIDTH - OFFSET - PADDLE_WIDTH, PADDLE_START_Y),
            size=Size2D(PADDLE_WIDTH, PADDLE_HEIGHT),
        )
        self.cpu = CpuPaddleController(
            self.left_paddle, self.ball, config=cpu_config
        )
        self.player = PlayerPaddleController(self.right_paddle)
        self.is_over = False
        self.time = 0.0
        self._pending: Deque[GameCommand] = deque()

    @property
    def paddles(self) -> tuple[Paddle, Paddle]:
        """Paddles in update order: (computer, player)."""
        return (self.left_paddle, self.right_paddle)

    @property
    def controllers(self) -> tuple[PaddleController, PaddleController]:
        """Controllers in update order: (computer, player)."""
        return (self.cpu, self.player)

    @property
    def ball_blinking(self) -> bool:
        """Ball is frozen after a point (never while the game is over)."""
        return not self.is_over and self.ball.blinking

    @property
    def winner(self) -> Optional[Side]:
        """Side with the higher score once the game is over."""
        if not self.is_over:
            return None
        if self.left_paddle.score > self.right_paddle.score:
            return "LEFT"
        return "RIGHT"

    def push(self, command: GameCommand):
        """
        Queue a command for the next tick.

        :param command: Command to apply.
        :type command: GameCommand
        """
        self._pending.append(command)

    def set_player_target(self, y: float):
        """
        Point the player's paddle at ``y``. Ignored once the game is over.

        :param y: Pointer y in court coordinates.
        :type y: float
        """
        if self.is_over:
            return
        self.player.aim(y)

    def restart(self):
        """Start a new game, keeping the same ball and paddle objects."""
        self.ball.reset(
            WIDTH / 2, HEIGHT / 2, Vector.random_ball_velocity(self.rng)
        )
        for paddle in self.paddles:
            paddle.reset(PADDLE_START_Y)
        self.player.reset()
        self.is_over = False
        logger.info("Game restarted")

    def tick(self, dt: float):
        """
        Apply queued commands, then advance the simulation.

        :param dt: Delta time in seconds.
        :type dt: float
        """
        while self._pending:
            self._pending.popleft().execute(self)
        self.update(dt)

    def update(self, dt: float):
        """
        Advance the simulation by ``dt`` seconds. Does nothing once the game
        is over.

        :param dt: Delta time in seconds.
        :type dt: float
        """
        if self.is_over:
            return

        dt = self._sanitize_dt(dt)
        self.time += dt

        self.ball.update(dt)

        for controller, paddle in zip(self.controllers, self.paddles):
            controller.update(dt)
            paddle.constrain(OFFSET, HEIGHT - OFFSET)

        for paddle in self.paddles:
            side = 1 if paddle.position.x < WIDTH / 2 else -1
            collide_ball_with_paddle(self.ball, paddle, side)
            self._check_game_over()

        goal = constrain_ball_to_game_area(self.ball)
        if goal is Goal.NONE:
            return

        scorer = self.right_paddle if goal is Goal.LEFT else self.left_paddle
        scorer.score += 1
        scorer.flash()
        logger.debug(
            f"Goal {goal.name}: {self.left_paddle.score}"
            f" - {self.right_paddle.score}"
        )
        self._check_game_over()

        if not self.is_over:
            self.ball.reset(
                WIDTH / 2, HEIGHT / 2, Vector.random_ball_velocity(self.rng)
            )

    def snapshot(self) -> GameSnapshot:
        """
        Capture the current state for rendering.

        :return: Immutable view of the game.
        :rtype: GameSnapshot
        """
        ball = self.ball
        flicker = self.ball_blinking and (
            math.sin(self.time * BLINK_FLICKER_RATE) > 0
        )
        return GameSnapshot(
            ball=BallView(
                x=ball.position.x,
                y=ball.position.y,
                radius=ball.radius,
                visible=not flicker,
            ),
            left=self._paddle_view("LEFT", self.left_paddle),
            right=self._paddle_view("RIGHT", self.right_paddle),
            is_over=self.is_over,
            winner=self.winner,
            time=self.time,
        )

    def _check_game_over(self):
        if self.is_over:
            return
        if any(p.score >= END_GAME_SCORE for p in self.paddles):
            self.is_over = True
            logger.info(
                f"Game over, {self.winner} wins "
                f"{self.left_paddle.score} - {self.right_paddle.score}"
            )

    @staticmethod
    def _sanitize_dt(dt: float) -> float:
        if math.isfinite(dt) and dt >= 0:
            return dt
        logger.warning(f"Ignoring invalid frame delta {dt!r}")
        return 0.0

    @staticmethod
    def _paddle_view(side: Side, paddle: Paddle) -> PaddleView:
        return PaddleView(
            side=side,
            x=paddle.position.x,
            y=paddle.position.y,
            width=paddle.width,
            height=paddle.height,
            score=paddle.score,
            highlight=paddle.highlight,
            color=paddle.color,
        )


# pylint: enable=too-many-instance-attributes
