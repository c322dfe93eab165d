import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from galaxy_invaders.scenes.galaxy_invaders import (  # noqa: E402
    GalaxyInvadersIntent,
    GalaxyInvadersTickContext,
)
from galaxy_invaders.utils import AssetLibrary  # noqa: E402

PLAYER_COLOR = (0, 255, 0)
ENEMY_COLOR = (255, 0, 0)
BULLET_COLOR = (255, 255, 0)


def _surface(size, color):
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


@pytest.fixture
def visuals():
    """Native sizes: player 13x8, enemy 11x8, bullet 2x4 (x3 when drawn)."""
    return {
        "player.png": _surface((13, 8), PLAYER_COLOR),
        "enemy.png": _surface((11, 8), ENEMY_COLOR),
        "bullet.png": _surface((2, 4), BULLET_COLOR),
    }


@pytest.fixture
def loaded_paths():
    return []


@pytest.fixture
def assets(visuals, loaded_paths):
    def loader(path):
        loaded_paths.append(path)
        return visuals[path.name]

    return AssetLibrary("sprites", loader=loader)


@pytest.fixture
def make_ctx(assets):
    def _make_ctx(move_left=False, move_right=False, fire=False, dt=0.0):
        return GalaxyInvadersTickContext(
            intent=GalaxyInvadersIntent(
                move_left=move_left, move_right=move_right, fire=fire
            ),
            dt=dt,
            assets=assets,
        )

    return _make_ctx
