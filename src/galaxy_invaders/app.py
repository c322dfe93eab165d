"""
Main application for Galaxy Invaders using the pygame backend.
"""

from __future__ import annotations

import logging
from typing import Optional

import pygame

from galaxy_invaders.constants import SPRITES_ROOT
from galaxy_invaders.scenes import (
    GalaxyInvadersIntent,
    GalaxyInvadersTickContext,
    GameState,
    Renderer,
    load_initial_game_state,
    update,
)
from galaxy_invaders.settings import GameSettings
from galaxy_invaders.utils import (
    AssetLibrary,
    configure_logging,
    logger,
    set_screen,
)


class GalaxyInvaders:
    """
    pygame window: input polling, frame timing and presentation.
    """

    def __init__(self, settings: Optional[GameSettings] = None):
        """
        :param settings: Window and renderer settings
        :type settings: GameSettings | None
        """
        self._settings = settings or GameSettings()
        logger.debug(f"Initializing {self._settings.window.title}")
        pygame.init()

        self._screen = self._set_screen(
            self._settings.window.width, self._settings.window.height
        )
        self._clock = pygame.time.Clock()
        self._renderer = Renderer(self._screen, self._settings)
        self.assets = AssetLibrary(SPRITES_ROOT)

    def _set_screen(self, width: int, height: int) -> pygame.Surface:
        logger.debug("Setting screen")
        return set_screen(self._settings.window.title, width, height)

    @property
    def viewport(self) -> tuple[int, int]:
        return self._screen.get_size()

    def setup(self) -> GameState:
        return load_initial_game_state(self.assets, self.viewport)

    def window_should_close(self) -> bool:
        """
        Drain the event queue and report whether the user asked to quit.
        """
        close = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                close = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                close = True
        return close

    def read_intent(self) -> GalaxyInvadersIntent:
        return GalaxyInvadersIntent.from_keys(pygame.key.get_pressed())

    def frame_time(self) -> float:
        """
        Wait for the frame-rate governor and return seconds since last frame.
        """
        return self._clock.tick(self._settings.fps) / 1000.0

    def draw(self, game_state: GameState) -> GameState:
        game_state = self._renderer.draw(game_state)
        pygame.display.flip()
        return game_state

    def close(self) -> None:
        logger.info("Quitting the game")
        self._renderer.clear()
        self.assets.clear()
        pygame.quit()


def loop(game_state: GameState, window) -> GameState:
    """
    Update and draw until the window asks to close.

    :param game_state: Initial snapshot
    :type game_state: GameState

    :param window: Backend offering input, timing, assets and drawing
    :type window: GalaxyInvaders

    :return: The last snapshot drawn
    :rtype: GameState
    """
    while not window.window_should_close():
        ctx = GalaxyInvadersTickContext(
            intent=window.read_intent(),
            dt=window.frame_time(),
            assets=window.assets,
        )
        game_state = window.draw(update(game_state, ctx))

    window.close()
    return game_state


def run():
    """
    Main entry point for Galaxy Invaders.

    - Opens an 800x600 window capped at 60 FPS.
    - Builds the initial state: player at the bottom, 21 enemies in a grid.
    - Runs the update/draw loop until the window is closed.
    """
    configure_logging(logging.DEBUG)

    settings_data = {
        "window": {"width": 800, "height": 600, "title": "Galaxy Invaders"},
        "fps": 60,
        "renderer": {"background_color": (0, 0, 0)},
        "score": {"position": (20, 20), "font_size": 50},
    }
    settings = GameSettings.from_dict(settings_data)
    logger.info("Starting Galaxy Invaders...")
    logger.info(settings.to_dict())

    window = GalaxyInvaders(settings)
    final_state = loop(window.setup(), window)
    logger.info(f"Final score: {final_state.score}")


if __name__ == "__main__":
    run()
