from pathlib import Path

import pygame
import pytest

import galaxy_invaders
from galaxy_invaders.constants import ASSETS_ROOT, SPRITES_ROOT
from galaxy_invaders.utils import AssetLibrary, find_assets_root, load_image


def test_find_assets_root():
    root = find_assets_root()
    assert root == ASSETS_ROOT
    assert root.name == "assets"
    assert root.is_dir()


@pytest.mark.parametrize(
    "name, size",
    [("player.png", (13, 8)), ("enemy.png", (11, 8)), ("bullet.png", (2, 4))],
)
def test_shipped_sprites_load(name, size):
    image = load_image(SPRITES_ROOT / name)
    assert isinstance(image, pygame.Surface)
    assert image.get_size() == size


def test_missing_image_is_fatal(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        load_image(tmp_path / "missing.png")
    assert "missing.png" in str(excinfo.value)


def test_corrupt_image_is_fatal(tmp_path):
    path = tmp_path / "corrupt.png"
    path.write_bytes(b"not an image")
    with pytest.raises(SystemExit):
        load_image(path)


def test_asset_library_caches(tmp_path):
    calls = []

    def loader(path):
        calls.append(path)
        return pygame.Surface((1, 1))

    library = AssetLibrary(tmp_path, loader=loader)
    first = library.get("a.png")
    assert library.get("a.png") is first
    assert calls == [tmp_path / "a.png"]
    assert len(library) == 1

    library.clear()
    assert len(library) == 0
    assert library.get("a.png") is not first


def test_assets_ship_inside_package():
    package_dir = Path(galaxy_invaders.__file__).resolve().parent
    assert ASSETS_ROOT == package_dir / "assets"
    for name in ("player.png", "enemy.png", "bullet.png"):
        assert (package_dir / "assets" / "sprites" / name).is_file()
