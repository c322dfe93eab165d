from galaxy_invaders.settings import GameSettings


def test_defaults():
    settings = GameSettings()
    assert (settings.window.width, settings.window.height) == (800, 600)
    assert settings.window.title == "Galaxy Invaders"
    assert settings.fps == 60
    assert settings.background_color == (0, 0, 0)
    assert settings.score.position == (20, 20)
    assert settings.score.font_size == 50
    assert settings.score.color == (255, 255, 255)


def test_from_dict_overrides_and_falls_back():
    settings = GameSettings.from_dict(
        {
            "window": {"title": "Test"},
            "fps": 30,
            "renderer": {"background_color": [10, 20, 30]},
            "audio": {"enable": False},
        }
    )
    assert settings.window.title == "Test"
    assert settings.window.width == 800
    assert settings.fps == 30
    assert settings.background_color == (10, 20, 30)
    assert settings.score.font_size == 50


def test_empty_dict_gives_defaults():
    assert GameSettings.from_dict({}) == GameSettings()


def test_to_dict_round_trips():
    settings = GameSettings.from_dict({"score": {"font_size": 32}})
    assert GameSettings.from_dict(settings.to_dict()) == settings
