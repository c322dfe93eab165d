"""
Galaxy Invaders utils
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Dict, Union

import pygame

logger = logging.getLogger("galaxy_invaders")


def configure_logging(level: int = logging.INFO) -> None:
    """
    Install a basic stream handler for the game logger.

    :param level: Logging level
    :type level: int
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.setLevel(level)


def find_assets_root() -> Path:
    """Return the path to the `assets` directory.

    Works in:
    - dev / pip install: galaxy_invaders/assets (shipped as package data)
    - PyInstaller onefile: _MEIPASS/assets (if bundled with --add-data)

    :raises FileNotFoundError: If the assets directory cannot be found.
    """
    # 1) PyInstaller onefile support
    # pylint: disable=protected-access
    if hasattr(sys, "_MEIPASS"):
        base = Path(sys._MEIPASS)
        candidate = base / "assets"
        if candidate.is_dir():
            return candidate
    # pylint: enable=protected-access

    # 2) Dev / pip-installed: walk upwards and look for an `assets` folder
    here = Path(__file__).resolve()
    for parent in here.parents:
        candidate = parent / "assets"
        if candidate.is_dir():
            return candidate

    raise FileNotFoundError("Could not locate 'assets' directory.")


def load_image(filename: Union[str, Path]) -> pygame.Surface:
    """
    Load an image

    :param filename: Name of the file
    :type filename: str | Path

    :return: pygame.Surface

    :raise SystemExit: If the image cannot be loaded
    """
    try:
        image = pygame.image.load(str(filename))
    except (pygame.error, OSError) as message:
        logger.error(f"Failed to load image {filename}: {message}")
        raise SystemExit(
            f"Cannot load image {filename}: {message}"
        ) from message

    # convert_alpha needs a display mode; headless loads keep the raw format
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        image = image.convert_alpha()

    return image


def set_screen(caption: str, width: int, height: int) -> pygame.Surface:
    """
    Set the screen

    :param caption: Caption of the screen
    :type caption: str

    :param width: Width of the screen
    :type width: int

    :param height: Height of the screen
    :type height: int

    :return: pygame.Surface
    """
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(caption)

    return screen


class AssetLibrary:
    """
    Loads each sprite once and hands out the same handle afterwards.
    """

    def __init__(
        self,
        root: Union[str, Path],
        loader: Callable[[Path], pygame.Surface] = load_image,
    ) -> None:
        """
        :param root: Directory the sprite names are relative to
        :type root: str | Path

        :param loader: Callable turning a path into a surface
        :type loader: Callable[[Path], pygame.Surface]
        """
        self._root = Path(root)
        self._loader = loader
        self._cache: Dict[str, pygame.Surface] = {}

    def get(self, name: str) -> pygame.Surface:
        """
        Return the surface for `name`, loading it on first use.

        :param name: File name under the library root
        :type name: str

        :return: pygame.Surface
        """
        if name not in self._cache:
            path = self._root / name
            logger.debug(f"Loading image {path}")
            self._cache[name] = self._loader(path)
        return self._cache[name]

    def __len__(self) -> int:
        return len(self._cache)

    def clear(self) -> None:
        """Drop every cached handle."""
        self._cache.clear()
