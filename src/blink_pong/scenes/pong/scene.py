"""
Pong scene: drives the Blink Pong game with mini-arcade-core.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from mini_arcade_core.backend import Backend
from mini_arcade_core.backend.keys import Key
from mini_arcade_core.engine.commands import QuitCommand
from mini_arcade_core.runtime.context import RuntimeContext
from mini_arcade_core.runtime.input_frame import InputFrame
from mini_arcade_core.scenes.autoreg import (  # pyright: ignore[reportMissingImports]
    register_scene,
)
from mini_arcade_core.scenes.sim_scene import (  # pyright: ignore[reportMissingImports]
    Drawable,
    DrawCall,
    SimScene,
)
from mini_arcade_core.scenes.systems.builtins import (
    BaseInputSystem,
    BaseRenderSystem,
)
from mini_arcade_core.scenes.systems.system_pipeline import SystemPipeline

from blink_pong.commands import RestartGame, SetPlayerTarget
from blink_pong.constants import (
    CPU_WINS,
    DIM,
    HEIGHT,
    OFFSET,
    OVERLAY,
    PLAYER_WINS,
    POINTER_SPEED,
    WHITE,
    WIDTH,
)
from blink_pong.game import Game, GameSnapshot
from blink_pong.physics.easing import clamp
from blink_pong.scenes.pong.models import (
    PongIntent,
    PongTickContext,
    PongWorld,
)

SCORE_FONT_SIZE = 48
WINNER_FONT_SIZE = 16


@dataclass
class PongInputSystem(BaseInputSystem):
    """
    Process input and update intent.
    """

    name: str = "pong_input"

    def step(self, ctx: PongTickContext):
        """Process input and update intent."""
        down = ctx.input_frame.keys_down
        pressed = ctx.input_frame.keys_pressed

        # pointer: UP/DOWN
        move = (1.0 if Key.DOWN in down else 0.0) - (
            1.0 if Key.UP in down else 0.0
        )

        ctx.intent = PongIntent(
            move_pointer=move,
            restart=Key.ENTER in pressed or Key.SPACE in pressed,
            quit=Key.ESCAPE in pressed or ctx.input_frame.quit,
        )


@dataclass
class PongCommandSystem:
    """
    Turn intent into game commands.
    """

    name: str = "pong_commands"
    order: int = 20

    def step(self, ctx: PongTickContext):
        """Queue game commands for this tick."""
        if ctx.intent is None:
            return

        if ctx.intent.quit:
            ctx.commands.push(QuitCommand())
            return

        world = ctx.world
        if ctx.intent.move_pointer:
            step = ctx.intent.move_pointer * POINTER_SPEED * ctx.dt
            world.pointer_y = clamp(world.pointer_y + step, 0.0, HEIGHT)
            world.game.push(SetPlayerTarget(world.pointer_y))

        if ctx.intent.restart:
            world.game.push(RestartGame())


@dataclass
class PongSimulationSystem:
    """
    Advance the game by one frame.
    """

    name: str = "pong_simulation"
    order: int = 30

    def step(self, ctx: PongTickContext):
        """Advance the game."""
        ctx.world.game.tick(ctx.dt)


class DrawCourt(Drawable[PongTickContext]):
    """
    Drawable to render the center line and the court border.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        backend.render.draw_line(WIDTH // 2, 0, WIDTH // 2, HEIGHT, color=DIM)

        left = OFFSET // 2
        top = OFFSET // 2
        right = WIDTH - OFFSET // 2
        bottom = HEIGHT - OFFSET // 2
        backend.render.draw_line(left, top, right, top, color=WHITE)
        backend.render.draw_line(left, bottom, right, bottom, color=WHITE)
        backend.render.draw_line(left, top, left, bottom, color=WHITE)
        backend.render.draw_line(right, top, right, bottom, color=WHITE)


class DrawScore(Drawable[PongTickContext]):
    """
    Drawable to render the score, tinted with each paddle's color.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        snap = ctx.world.game.snapshot()

        left_text = str(snap.left.score)
        right_text = str(snap.right.score)

        left_w, _ = backend.text.measure(left_text, font_size=SCORE_FONT_SIZE)

        center_x = WIDTH // 2
        gap = 3 * OFFSET  # distance from center line to each score

        # left score: right-aligned to the left side of center
        backend.text.draw(
            center_x - gap - left_w,
            3 * OFFSET,
            left_text,
            color=snap.left.color,
            font_size=SCORE_FONT_SIZE,
        )
        # right score: left-aligned to the right side of center
        backend.text.draw(
            center_x + gap,
            3 * OFFSET,
            right_text,
            color=snap.right.color,
            font_size=SCORE_FONT_SIZE,
        )


class DrawBall(Drawable[PongTickContext]):
    """
    Drawable to render the ball (skipped while it blinks off).
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        ball = ctx.world.game.snapshot().ball
        if not ball.visible:
            return
        size = int(ball.radius * 2)
        backend.render.draw_rect(
            int(ball.x - ball.radius),
            int(ball.y - ball.radius),
            size,
            size,
            color=WHITE,
        )


class DrawPaddles(Drawable[PongTickContext]):
    """
    Drawable to render both paddles.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        snap = ctx.world.game.snapshot()
        for paddle in (snap.left, snap.right):
            backend.render.draw_rect(
                int(paddle.x),
                int(paddle.y),
                int(paddle.width),
                int(paddle.height),
                color=paddle.color,
            )


class DrawGameOver(Drawable[PongTickContext]):
    """
    Drawable to render the game over overlay and the winner.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        snap: GameSnapshot = ctx.world.game.snapshot()
        if not snap.is_over:
            return

        backend.render.draw_rect(0, 0, WIDTH, HEIGHT, color=OVERLAY)

        title = "GAME OVER"
        w, h = backend.text.measure(title, font_size=SCORE_FONT_SIZE)
        backend.text.draw(
            (WIDTH - w) // 2,
            (HEIGHT - h) // 2,
            title,
            color=WHITE,
            font_size=SCORE_FONT_SIZE,
        )

        winner = "CPU" if snap.winner == "LEFT" else "PLAYER"
        label = f"{winner} WINS"
        color = WHITE
        if math.sin(snap.time * 20) <= 0:
            color = CPU_WINS if winner == "CPU" else PLAYER_WINS
        w, h = backend.text.measure(label, font_size=WINNER_FONT_SIZE)
        backend.text.draw(
            (WIDTH - w) // 2,
            HEIGHT // 2 + SCORE_FONT_SIZE - h // 2,
            label,
            color=color,
            font_size=WINNER_FONT_SIZE,
        )


@dataclass
class PongRenderSystem(BaseRenderSystem):
    """
    Render the Pong world.
    """

    name: str = "pong_render"
    order: int = 100

    def step(self, ctx: PongTickContext):
        """Render the Pong world."""

        ctx.draw_ops = [
            DrawCall(drawable=DrawCourt(), ctx=ctx),
            DrawCall(drawable=DrawScore(), ctx=ctx),
            DrawCall(drawable=DrawBall(), ctx=ctx),
            DrawCall(drawable=DrawPaddles(), ctx=ctx),
            DrawCall(drawable=DrawGameOver(), ctx=ctx),
        ]
        super().step(ctx)


@register_scene("pong")
class PongScene(SimScene[PongTickContext]):
    """
    CPU on the left, keyboard-driven pointer on the right.
    """

    def __init__(self, ctx: RuntimeContext):
        super().__init__(ctx)
        self.systems = SystemPipeline[PongTickContext]()
        self.world = PongWorld(game=Game())

    def on_enter(self):
        self.world.game.restart()
        self.systems.extend(
            [
                PongInputSystem(),
                PongCommandSystem(),
                PongSimulationSystem(),
                PongRenderSystem(),
            ]
        )

    def _get_tick_context(
        self, input_frame: InputFrame, dt: float
    ) -> PongTickContext:
        return PongTickContext(
            input_frame=input_frame,
            dt=dt,
            world=self.world,
            commands=self.context.command_queue,
        )
