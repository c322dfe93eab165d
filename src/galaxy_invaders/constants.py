"""
Constants for the game.
"""

from __future__ import annotations

from galaxy_invaders.utils import find_assets_root

ASSETS_ROOT = find_assets_root()
SPRITES_ROOT = ASSETS_ROOT / "sprites"
ROOT = ASSETS_ROOT.parent

FPS = 60
WINDOW_SIZE = (800, 600)
TITLE = "Galaxy Invaders"

GAME_SCALE = 3.0

PLAYER_SPEED = 7.5

BULLET_SPEED = -10.0
BULLET_SPAWN_OFFSET_Y = -20.0

PADDING = 10.0

# swarm
SWARM_DELAY = 0.75
ENEMY_X_MAX = 6
ENEMY_MOVE_AMOUNT = 35.0
ENEMIES_PER_ROW = 7
ENEMY_COUNT = 21

SCORE_PER_ENEMY = 100

PLAYER_SPRITE = "player.png"
ENEMY_SPRITE = "enemy.png"
BULLET_SPRITE = "bullet.png"
