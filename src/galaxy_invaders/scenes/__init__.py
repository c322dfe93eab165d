"""
Scenes for Galaxy Invaders.
"""

from galaxy_invaders.scenes.galaxy_invaders import (
    GalaxyInvadersIntent,
    GalaxyInvadersTickContext,
    GameState,
    Renderer,
    load_initial_game_state,
    update,
)

__all__ = [
    "GalaxyInvadersIntent",
    "GalaxyInvadersTickContext",
    "GameState",
    "Renderer",
    "load_initial_game_state",
    "update",
]
