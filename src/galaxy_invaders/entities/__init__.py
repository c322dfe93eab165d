"""
Entities and 2D geometry for Galaxy Invaders.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame


@dataclass(frozen=True)
class Vec2:
    """
    Immutable 2D vector.
    """

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    @classmethod
    def zero(cls) -> Vec2:
        return cls(0.0, 0.0)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


def apply_velocity(position: Vec2, velocity: Vec2) -> Vec2:
    """Return `position` displaced by one frame of `velocity`."""
    return position + velocity


@dataclass(frozen=True)
class Size2D:
    width: float
    height: float

    def to_tuple(self) -> tuple[float, float]:
        return (self.width, self.height)


@dataclass(frozen=True)
class RectCollider:
    """
    Axis-aligned bounding box anchored at its top-left corner.
    """

    position: Vec2
    size: Size2D

    def intersects(self, other: RectCollider) -> bool:
        """
        Check whether two boxes overlap.

        Boxes that only touch along an edge do not overlap.

        :param other: The other box
        :type other: RectCollider

        :return: True if the boxes overlap
        :rtype: bool
        """
        ax, ay = self.position.to_tuple()
        aw, ah = self.size.to_tuple()
        bx, by = other.position.to_tuple()
        bw, bh = other.size.to_tuple()
        return not (
            ax >= bx + bw or ax + aw <= bx or ay >= by + bh or ay + ah <= by
        )


@dataclass(frozen=True)
class GameObject:
    """
    A positioned, moving sprite.

    The visual is shared with the asset library, never copied.
    """

    visual: pygame.Surface = field(compare=False)
    scale: float
    position: Vec2
    velocity: Vec2 = field(default_factory=Vec2.zero)

    def __post_init__(self):
        if self.scale <= 0:
            raise ValueError(f"scale must be positive, got {self.scale}")

    @property
    def size(self) -> Size2D:
        """Scaled dimensions of the visual."""
        return Size2D(
            self.visual.get_width() * self.scale,
            self.visual.get_height() * self.scale,
        )

    @property
    def collider(self) -> RectCollider:
        return RectCollider(self.position, self.size)
