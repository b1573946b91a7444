"""
Pong scene Model
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.scenes.sim_scene import (  # pyright: ignore[reportMissingImports]
    BaseIntent,
    BaseTickContext,
    BaseWorld,
)

from blink_pong.constants import HEIGHT
from blink_pong.game import Game


@dataclass
class PongWorld(BaseWorld):
    """
    Pong world state.

    :ivar game (Game): The simulation being displayed.
    :ivar pointer_y (float): Virtual pointer driven by the keyboard.
    """

    game: Game
    pointer_y: float = HEIGHT / 2


@dataclass(frozen=True)
class PongIntent(BaseIntent):
    """
    Player intent for the Pong scene.

    :ivar move_pointer (float): Pointer movement intent (-1.0 up to +1.0 down).
    :ivar restart (bool): Whether to start a new game.
    :ivar quit (bool): Whether to leave the game.
    """

    move_pointer: float  # -1.0 (up) to +1.0 (down)
    restart: bool = False
    quit: bool = False


@dataclass
class PongTickContext(BaseTickContext[PongWorld, PongIntent]):
    """
    Context for a Pong scene tick.

    :ivar input_frame (InputFrame): Current input frame.
    :ivar dt (float): Delta time since last tick.

    :ivar world (PongWorld): Current Pong world state.
    :ivar commands (CommandQueue): Command queue.

    :ivar intent (Optional[PongIntent]): Player intent for this tick.
    :ivar packet (Optional[RenderPacket]): Render packet for this tick.
    """
