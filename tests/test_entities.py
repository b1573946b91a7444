from __future__ import annotations

import pytest
from mini_arcade_core.spaces.d2.geometry2d import Size2D

from blink_pong.constants import (
    BALL_BLINK_DURATION,
    HEIGHT,
    OFFSET,
    PADDLE_HIGHLIGHT_DURATION,
    WHITE,
)
from blink_pong.entities import Ball, Paddle
from blink_pong.physics.vector import Vector


def make_paddle(y: float = 150) -> Paddle:
    return Paddle(position=Vector(580, y), size=Size2D(10, 100))


class TestBall:
    def test_blinking_ball_does_not_move(self):
        ball = Ball(position=Vector(300, 200), velocity=Vector(5, 0))
        ball.update(0.1)
        assert ball.blinking
        assert ball.position == Vector(300, 200)
        assert ball.blink_timer == pytest.approx(0.1)

    def test_moves_with_velocity_times_dt_once_blink_is_over(self):
        ball = Ball(
            position=Vector(300, 200),
            velocity=Vector(5, 0),
            blink_timer=BALL_BLINK_DURATION,
        )
        ball.update(1.0)
        assert ball.position == Vector(305, 200)

    @pytest.mark.parametrize("dt", [1 / 144, 1 / 60, 1 / 30, 0.25])
    def test_euler_step(self, dt):
        ball = Ball(
            position=Vector(100, 100),
            velocity=Vector(-120, 80),
            blink_timer=BALL_BLINK_DURATION,
        )
        ball.update(dt)
        assert ball.position.x == pytest.approx(100 - 120 * dt)
        assert ball.position.y == pytest.approx(100 + 80 * dt)

    def test_blink_timer_saturates(self):
        ball = Ball(position=Vector(0, 0))
        for _ in range(10):
            ball.update(0.3)
        assert ball.blink_timer == BALL_BLINK_DURATION
        assert not ball.blinking

    def test_frame_that_ends_the_blink_moves(self):
        ball = Ball(position=Vector(0, 0), velocity=Vector(10, 0))
        ball.update(BALL_BLINK_DURATION)
        assert ball.position == Vector(BALL_BLINK_DURATION * 10, 0)

    def test_reset_reuses_position(self):
        ball = Ball(
            position=Vector(5, 5),
            velocity=Vector(1, 1),
            blink_timer=BALL_BLINK_DURATION,
        )
        position = ball.position
        ball.reset(300, 200, Vector(-3, 0))
        assert ball.position is position
        assert position == Vector(300, 200)
        assert ball.velocity == Vector(-3, 0)
        assert ball.blink_timer == 0.0


class TestPaddle:
    def test_update_integrates_velocity(self):
        paddle = make_paddle()
        paddle.velocity.y = 100
        paddle.update(0.5)
        assert paddle.position.y == pytest.approx(200)

    @pytest.mark.parametrize("y", [-1e6, -50, 0, 9.99, 10, 150, 290, 291, 1e6])
    def test_constrain_keeps_paddle_in_court(self, y):
        paddle = make_paddle(y)
        paddle.constrain(OFFSET, HEIGHT - OFFSET)
        assert OFFSET <= paddle.position.y <= HEIGHT - OFFSET - paddle.height

    def test_not_highlighted_at_rest(self):
        paddle = make_paddle()
        assert not paddle.highlighted
        assert paddle.highlight == 1.0
        assert paddle.color == WHITE

    def test_flash_and_recover(self):
        paddle = make_paddle()
        paddle.flash()
        assert paddle.highlighted
        assert paddle.highlight == 0.0

        r, g, b = paddle.color
        assert (r, b) == (255, 0)
        assert 120 <= g <= 135

        paddle.update(PADDLE_HIGHLIGHT_DURATION / 2)
        assert paddle.highlight == pytest.approx(0.5)
        assert paddle.color[2] > 0

        paddle.update(PADDLE_HIGHLIGHT_DURATION)
        assert paddle.highlight_timer == PADDLE_HIGHLIGHT_DURATION
        assert paddle.color == WHITE

    def test_reset(self):
        paddle = make_paddle(42)
        paddle.score = 7
        paddle.velocity.y = -30
        paddle.flash()
        paddle.reset(150)
        assert paddle.score == 0
        assert paddle.velocity == Vector(0, 0)
        assert paddle.position == Vector(580, 150)
        assert not paddle.highlighted
