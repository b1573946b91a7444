from __future__ import annotations

import pytest
from mini_arcade_core.spaces.d2.geometry2d import Size2D

from blink_pong.constants import HEIGHT, OFFSET, PADDLE_SPEED
from blink_pong.controllers import (
    CpuConfig,
    CpuPaddleController,
    PlayerPaddleController,
)
from blink_pong.entities import Ball, Paddle
from blink_pong.physics.easing import damp
from blink_pong.physics.vector import Vector


def make_paddle(x: float = 10, y: float = 100) -> Paddle:
    return Paddle(position=Vector(x, y), size=Size2D(10, 100))


def make_cpu(ball_y: float, score: int = 0) -> CpuPaddleController:
    paddle = make_paddle()
    paddle.score = score
    ball = Ball(position=Vector(300, ball_y), radius=10)
    return CpuPaddleController(paddle, ball)


class TestCpuPaddleController:
    @pytest.mark.parametrize(
        "score, expected",
        [(0, 0.5), (4, 0.5), (6, 2.75), (8, 5.0), (10, 5.0)],
    )
    def test_responsiveness_follows_score(self, score, expected):
        assert make_cpu(200, score).responsiveness() == pytest.approx(
            expected
        )

    def test_target_speed_tracks_top_of_ball(self):
        # paddle center is 150; the CPU aims at ball.y - radius
        assert make_cpu(ball_y=300).target_speed() == PADDLE_SPEED
        assert make_cpu(ball_y=50).target_speed() == -PADDLE_SPEED
        assert make_cpu(ball_y=160).target_speed() == 0.0

    def test_update_eases_velocity(self):
        cpu = make_cpu(ball_y=300)
        cpu.update(0.1)
        expected = damp(0.0, PADDLE_SPEED, 0.5, 0.1)
        assert cpu.paddle.velocity.y == pytest.approx(expected)
        # velocity is applied before being eased
        assert cpu.paddle.position.y == 100

        cpu.update(0.1)
        assert cpu.paddle.position.y == pytest.approx(100 + expected * 0.1)

    def test_higher_score_reacts_faster(self):
        relaxed = make_cpu(ball_y=300, score=0)
        tryhard = make_cpu(ball_y=300, score=8)
        relaxed.update(0.1)
        tryhard.update(0.1)
        assert tryhard.paddle.velocity.y > relaxed.paddle.velocity.y > 0

    def test_custom_config(self):
        paddle = make_paddle()
        ball = Ball(position=Vector(300, 400))
        cpu = CpuPaddleController(
            paddle, ball, config=CpuConfig(speed=10.0, responsiveness_min=1)
        )
        assert cpu.target_speed() == 10.0
        assert cpu.responsiveness() == 1


class TestPlayerPaddleController:
    def test_target_starts_at_paddle(self):
        player = PlayerPaddleController(make_paddle(580, 150))
        assert player.target == 150

    @pytest.mark.parametrize(
        "pointer_y, expected",
        [
            (-100, OFFSET),
            (0, OFFSET),
            (200, 150),
            (HEIGHT, HEIGHT - OFFSET - 100),
            (1e6, HEIGHT - OFFSET - 100),
        ],
    )
    def test_aim_centers_and_clamps(self, pointer_y, expected):
        player = PlayerPaddleController(make_paddle(580, 150))
        player.aim(pointer_y)
        assert player.target == expected

    def test_update_damps_toward_target(self):
        player = PlayerPaddleController(make_paddle(580, 150))
        player.aim(HEIGHT)
        player.update(0.1)
        expected = damp(150, HEIGHT - OFFSET - 100, 5.0, 0.1)
        assert player.paddle.position.y == pytest.approx(expected)

    def test_motion_is_frame_rate_independent(self):
        coarse = PlayerPaddleController(make_paddle(580, 150))
        fine = PlayerPaddleController(make_paddle(580, 150))
        for player in (coarse, fine):
            player.aim(0)

        coarse.update(1 / 30)
        for _ in range(4):
            fine.update(1 / 120)

        assert fine.paddle.position.y == pytest.approx(
            coarse.paddle.position.y
        )

    def test_reset_recenters_target(self):
        player = PlayerPaddleController(make_paddle(580, 150))
        player.aim(0)
        player.reset()
        assert player.target == (OFFSET + HEIGHT - OFFSET - 100) / 2
