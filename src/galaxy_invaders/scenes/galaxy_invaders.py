"""
Galaxy Invaders Scene
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Sequence

import pygame

from galaxy_invaders.constants import (
    BULLET_SPAWN_OFFSET_Y,
    BULLET_SPEED,
    BULLET_SPRITE,
    ENEMIES_PER_ROW,
    ENEMY_COUNT,
    ENEMY_MOVE_AMOUNT,
    ENEMY_SPRITE,
    ENEMY_X_MAX,
    GAME_SCALE,
    PADDING,
    PLAYER_SPEED,
    PLAYER_SPRITE,
    SCORE_PER_ENEMY,
    SWARM_DELAY,
    WINDOW_SIZE,
)
from galaxy_invaders.entities import GameObject, Vec2, apply_velocity
from galaxy_invaders.settings import GameSettings
from galaxy_invaders.utils import AssetLibrary, logger

MOVE_LEFT_KEYS = (pygame.K_a, pygame.K_LEFT)
MOVE_RIGHT_KEYS = (pygame.K_d, pygame.K_RIGHT)
FIRE_KEYS = (pygame.K_SPACE,)


@dataclass(frozen=True)
class GameState:
    """
    Snapshot of the whole game for one frame.

    Never mutated; every update returns a new snapshot.
    """

    player: GameObject
    enemies: tuple[GameObject, ...] = ()
    swarm_position: int = 0
    enemy_movement_clock: float = SWARM_DELAY
    bullet: Optional[GameObject] = None
    score: int = 0


@dataclass(frozen=True)
class GalaxyInvadersIntent:
    """
    Held inputs for one frame.
    """

    move_left: bool = False
    move_right: bool = False
    fire: bool = False

    @classmethod
    def from_keys(cls, keys: Sequence[bool]) -> GalaxyInvadersIntent:
        """
        Build an intent from a `pygame.key.get_pressed()` result.

        :param keys: Pressed state indexed by key code
        :type keys: Sequence[bool]

        :return: GalaxyInvadersIntent
        """
        return cls(
            move_left=any(keys[k] for k in MOVE_LEFT_KEYS),
            move_right=any(keys[k] for k in MOVE_RIGHT_KEYS),
            fire=any(keys[k] for k in FIRE_KEYS),
        )


@dataclass(frozen=True)
class GalaxyInvadersTickContext:
    """
    Everything an update stage reads besides the game state.
    """

    intent: GalaxyInvadersIntent
    dt: float
    assets: AssetLibrary


# ----- Helpers -----


def enemy_position_of_int(i: int) -> Vec2:
    """
    Offset applied to every enemy on swarm step `i`.

    Every ENEMY_X_MAX-th step drops the swarm; the others sweep it right or
    left, alternating direction each run of steps.

    :param i: Swarm step index
    :type i: int

    :return: Vec2
    """
    m = i % ENEMY_X_MAX
    if m == 0:
        return Vec2(0.0, ENEMY_MOVE_AMOUNT)
    direction = 1.0 if (i // ENEMY_X_MAX) % 2 == 0 else -1.0
    return Vec2(ENEMY_MOVE_AMOUNT * direction, 0.0)


def move_enemies(game_state: GameState) -> tuple[GameObject, ...]:
    offset = enemy_position_of_int(game_state.swarm_position)
    return tuple(
        replace(enemy, position=enemy.position + offset)
        for enemy in game_state.enemies
    )


def instantiate_bullet(position: Vec2, assets: AssetLibrary) -> GameObject:
    return GameObject(
        visual=assets.get(BULLET_SPRITE),
        scale=GAME_SCALE,
        position=position,
        velocity=Vec2(0.0, BULLET_SPEED),
    )


# ----- Update pipeline -----


def update_player(
    game_state: GameState, ctx: GalaxyInvadersTickContext
) -> GameState:
    """
    Read movement input into the player's velocity.

    The position advances by the velocity from the previous frame, so input
    takes effect one frame late.
    """
    vx = 0.0
    if ctx.intent.move_left:
        vx -= PLAYER_SPEED
    if ctx.intent.move_right:
        vx += PLAYER_SPEED

    player = game_state.player
    return replace(
        game_state,
        player=replace(
            player,
            velocity=Vec2(vx, 0.0),
            position=apply_velocity(player.position, player.velocity),
        ),
    )


def update_enemies(
    game_state: GameState, ctx: GalaxyInvadersTickContext
) -> GameState:
    """
    Count down the swarm clock, or step the whole swarm once it runs out.
    """
    if game_state.enemy_movement_clock <= 0:
        stepped = replace(
            game_state,
            swarm_position=game_state.swarm_position + 1,
            enemy_movement_clock=SWARM_DELAY,
        )
        logger.debug(f"Swarm step {stepped.swarm_position}")
        return replace(stepped, enemies=move_enemies(stepped))

    return replace(
        game_state,
        enemy_movement_clock=game_state.enemy_movement_clock - ctx.dt,
    )


def update_bullet(
    game_state: GameState, ctx: GalaxyInvadersTickContext
) -> GameState:
    """
    Spawn, move or despawn the single bullet.
    """
    bullet = game_state.bullet
    if bullet is None:
        if not ctx.intent.fire:
            return game_state
        player = game_state.player
        spawn = player.position + Vec2(
            player.size.width / 2, BULLET_SPAWN_OFFSET_Y
        )
        logger.debug(f"Shooting bullet at {spawn.to_tuple()}")
        return replace(
            game_state, bullet=instantiate_bullet(spawn, ctx.assets)
        )

    new_position = apply_velocity(bullet.position, bullet.velocity)
    if new_position.y < 0:
        return replace(game_state, bullet=None)
    return replace(game_state, bullet=replace(bullet, position=new_position))


def handle_collision(
    game_state: GameState,
    ctx: GalaxyInvadersTickContext,  # pylint: disable=unused-argument
) -> GameState:
    """
    Destroy the first enemy the bullet overlaps.
    """
    bullet = game_state.bullet
    if bullet is None:
        return game_state

    collider = bullet.collider
    for idx, enemy in enumerate(game_state.enemies):
        if enemy.collider.intersects(collider):
            enemies = game_state.enemies[:idx] + game_state.enemies[idx + 1 :]
            score = game_state.score + SCORE_PER_ENEMY
            logger.debug(f"Hit! Score: {score}")
            if not enemies:
                logger.info(f"All enemies destroyed. Final score: {score}")
            return replace(
                game_state, bullet=None, enemies=enemies, score=score
            )

    return game_state


def update(game_state: GameState, ctx: GalaxyInvadersTickContext) -> GameState:
    """
    Run one frame of the update pipeline.

    :param game_state: Current snapshot
    :type game_state: GameState

    :param ctx: Input, frame delta and assets for this frame
    :type ctx: GalaxyInvadersTickContext

    :return: The next snapshot
    :rtype: GameState
    """
    game_state = update_player(game_state, ctx)
    game_state = update_enemies(game_state, ctx)
    game_state = update_bullet(game_state, ctx)
    return handle_collision(game_state, ctx)


# ----- Setup -----


def generate_enemies(
    assets: AssetLibrary, n: int = ENEMY_COUNT
) -> tuple[GameObject, ...]:
    """
    Lay out `n` enemies in rows of ENEMIES_PER_ROW from the top-left corner.
    """
    visual = assets.get(ENEMY_SPRITE)
    enemy_w = visual.get_width() * GAME_SCALE
    enemy_h = visual.get_height() * GAME_SCALE

    enemies = []
    for i in range(n):
        x = (i % ENEMIES_PER_ROW) * (enemy_w + PADDING * 5)
        y = (i // ENEMIES_PER_ROW) * (enemy_h + PADDING)
        enemies.append(
            GameObject(visual=visual, scale=GAME_SCALE, position=Vec2(x, y))
        )
    return tuple(enemies)


def load_initial_game_state(
    assets: AssetLibrary, viewport: tuple[int, int] = WINDOW_SIZE
) -> GameState:
    """
    Build the first snapshot: player centred at the bottom, enemies in a grid.

    :param assets: Sprite source
    :type assets: AssetLibrary

    :param viewport: Screen width and height
    :type viewport: tuple[int, int]

    :return: GameState
    """
    vw, vh = viewport
    visual = assets.get(PLAYER_SPRITE)
    player_w = visual.get_width() * GAME_SCALE
    player_h = visual.get_height() * GAME_SCALE

    player = GameObject(
        visual=visual,
        scale=GAME_SCALE,
        position=Vec2(vw / 2.0 - player_w / 2.0, vh - (player_h + PADDING)),
    )
    enemies = generate_enemies(assets)
    logger.debug(f"Aliens count: {len(enemies)}")

    return GameState(
        player=player,
        enemies=enemies,
        swarm_position=0,
        enemy_movement_clock=SWARM_DELAY,
        bullet=None,
        score=0,
    )


# ----- Drawing -----


class Renderer:
    """
    Draws game states onto a pygame surface.
    """

    def __init__(self, screen: pygame.Surface, settings: GameSettings):
        self._screen = screen
        self._settings = settings
        self._font = pygame.font.Font(None, settings.score.font_size)
        self._scaled: dict[int, tuple[pygame.Surface, pygame.Surface]] = {}

    def _scaled_visual(self, game_object: GameObject) -> pygame.Surface:
        # keyed by id; the source surface is kept alive alongside its copy
        key = id(game_object.visual)
        cached = self._scaled.get(key)
        if cached is None or cached[1].get_size() != _int_size(game_object):
            scaled = pygame.transform.scale(
                game_object.visual, _int_size(game_object)
            )
            cached = (game_object.visual, scaled)
            self._scaled[key] = cached
        return cached[1]

    def draw_game_object(self, game_object: GameObject) -> None:
        self._screen.blit(
            self._scaled_visual(game_object), game_object.position.to_tuple()
        )

    def __len__(self) -> int:
        return len(self._scaled)

    def clear(self) -> None:
        """Drop the scaled copies and the source surfaces they pin."""
        self._scaled.clear()

    def draw_score(self, score: int) -> None:
        text = self._font.render(str(score), True, self._settings.score.color)
        self._screen.blit(text, self._settings.score.position)

    def draw(self, game_state: GameState) -> GameState:
        """
        Draw a frame and hand the state back unchanged.

        :param game_state: Snapshot to draw
        :type game_state: GameState

        :return: The same snapshot
        :rtype: GameState
        """
        self._screen.fill(self._settings.background_color)
        self.draw_game_object(game_state.player)
        for enemy in game_state.enemies:
            self.draw_game_object(enemy)
        self.draw_score(game_state.score)
        if game_state.bullet is not None:
            self.draw_game_object(game_state.bullet)
        return game_state


def _int_size(game_object: GameObject) -> tuple[int, int]:
    w, h = game_object.size.to_tuple()
    return (int(w), int(h))
