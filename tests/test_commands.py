from __future__ import annotations

from blink_pong.commands import RestartGame, SetPlayerTarget
from blink_pong.constants import END_GAME_SCORE, HEIGHT, OFFSET
from blink_pong.game import Game


def test_commands_apply_on_tick(game: Game):
    game.push(SetPlayerTarget(0))
    assert game.player.target != OFFSET

    game.tick(0.0)
    assert game.player.target == OFFSET


def test_commands_apply_in_order(game: Game):
    game.push(SetPlayerTarget(0))
    game.push(SetPlayerTarget(HEIGHT))
    game.tick(0.0)
    assert game.player.target == HEIGHT - OFFSET - game.right_paddle.height


def test_commands_are_consumed_once(game: Game):
    game.push(SetPlayerTarget(0))
    game.tick(0.0)
    game.set_player_target(HEIGHT)
    game.tick(0.0)
    assert game.player.target == HEIGHT - OFFSET - game.right_paddle.height


def test_restart_ignored_while_playing(game: Game):
    game.right_paddle.score = 3
    game.push(RestartGame())
    game.tick(0.0)
    assert game.right_paddle.score == 3


def test_restart_after_game_over(game: Game):
    game.left_paddle.score = END_GAME_SCORE
    game.tick(1 / 60)
    assert game.is_over

    game.push(RestartGame())
    game.tick(0.0)
    assert not game.is_over
    assert game.left_paddle.score == 0


def test_restart_runs_before_the_frame(game: Game):
    game.left_paddle.score = END_GAME_SCORE
    game.tick(1 / 60)
    time_at_end = game.time

    game.push(RestartGame())
    game.tick(0.1)
    # restarted and simulated in the same tick
    assert not game.is_over
    assert game.time == time_at_end + 0.1
    assert game.ball.blink_timer == 0.1


def test_target_ignored_after_game_over(game: Game):
    game.left_paddle.score = END_GAME_SCORE
    game.tick(1 / 60)
    before = game.player.target

    game.push(SetPlayerTarget(0))
    game.tick(1 / 60)
    assert game.player.target == before
