"""
Minimal main application for Blink Pong.
"""

from __future__ import annotations

from mini_arcade_core import (  # pyright: ignore[reportMissingImports]
    GameConfig,
    SceneRegistry,
    run_game,
)
from mini_arcade_core.utils import logger

# Justification: in editable installs, this module is provided by the package.
# pylint: disable=no-name-in-module
from mini_arcade_native_backend import (  # pyright: ignore[reportMissingImports]
    BackendSettings,
    NativeBackend,
    RendererSettings,
    WindowSettings,
)

from blink_pong.constants import BACKGROUND, FPS, WINDOW_SIZE

# pylint: enable=no-name-in-module


def run():
    """
    Main entry point for Blink Pong.

    - Auto-discovers scenes from the `blink_pong.scenes` package.
    - Sets up the game window with the court dimensions and background color.
    - Runs the game with the initial scene set to "pong".
    """
    scene_registry = SceneRegistry(_factories={}).discover("blink_pong.scenes")

    w_width, w_height = WINDOW_SIZE
    backend_settings = BackendSettings(
        window=WindowSettings(
            width=w_width,
            height=w_height,
            title="Blink Pong (Native SDL2 + mini-arcade-core)",
            high_dpi=False,
        ),
        renderer=RendererSettings(background_color=BACKGROUND),
    )
    backend = NativeBackend(settings=backend_settings)

    game_config = GameConfig(
        initial_scene="pong",
        fps=FPS,
        backend=backend,
    )
    logger.info("Starting Blink Pong...")
    run_game(game_config=game_config, scene_registry=scene_registry)


if __name__ == "__main__":
    run()
