"""
Window and presentation settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from galaxy_invaders.constants import FPS, TITLE, WINDOW_SIZE

Color = tuple[int, int, int]


@dataclass(frozen=True)
class WindowSettings:
    width: int = WINDOW_SIZE[0]
    height: int = WINDOW_SIZE[1]
    title: str = TITLE


@dataclass(frozen=True)
class ScoreSettings:
    position: tuple[int, int] = (20, 20)
    font_size: int = 50
    color: Color = (255, 255, 255)


@dataclass(frozen=True)
class GameSettings:
    """
    Settings for the window, frame rate and renderer.

    Built from a nested dictionary so a file or CLI layer can feed it later.
    """

    window: WindowSettings = field(default_factory=WindowSettings)
    fps: int = FPS
    background_color: Color = (0, 0, 0)
    score: ScoreSettings = field(default_factory=ScoreSettings)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameSettings:
        """
        Build settings from a nested dictionary.

        Missing keys keep their defaults; unknown sections are ignored.

        :param data: Settings dictionary
        :type data: dict[str, Any]

        :return: GameSettings
        :rtype: GameSettings
        """
        window = data.get("window", {})
        renderer = data.get("renderer", {})
        score = data.get("score", {})

        defaults = cls()
        return cls(
            window=WindowSettings(
                width=int(window.get("width", defaults.window.width)),
                height=int(window.get("height", defaults.window.height)),
                title=str(window.get("title", defaults.window.title)),
            ),
            fps=int(data.get("fps", defaults.fps)),
            background_color=tuple(
                renderer.get("background_color", defaults.background_color)
            ),
            score=ScoreSettings(
                position=tuple(score.get("position", defaults.score.position)),
                font_size=int(
                    score.get("font_size", defaults.score.font_size)
                ),
                color=tuple(score.get("color", defaults.score.color)),
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "window": {
                "width": self.window.width,
                "height": self.window.height,
                "title": self.window.title,
            },
            "fps": self.fps,
            "renderer": {"background_color": self.background_color},
            "score": {
                "position": self.score.position,
                "font_size": self.score.font_size,
                "color": self.score.color,
            },
        }
