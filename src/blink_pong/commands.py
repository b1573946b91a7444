"""
Inbound commands for the Blink Pong game.

Input handlers never touch the game state directly; they queue a command
with :meth:`Game.push` and the game applies the queue at the start of the
next :meth:`Game.tick`, before the simulation step.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from blink_pong.game import Game


class GameCommand(Protocol):
    """A single write into the game from the outside."""

    def execute(self, game: Game):
        """
        Apply the command.

        :param game: The game to mutate.
        :type game: Game
        """


@dataclass(frozen=True)
class SetPlayerTarget(GameCommand):
    """
    Command to move the player's paddle target.

    :ivar y (float): Pointer y in court coordinates.
    """

    y: float

    def execute(self, game: Game):
        game.set_player_target(self.y)


@dataclass(frozen=True)
class RestartGame(GameCommand):
    """Command to start a new game once the current one is over."""

    def execute(self, game: Game):
        if not game.is_over:
            return
        game.restart()
