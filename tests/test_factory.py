import pytest

from tilearcade.factory import GameFactory, GameId
from tilearcade.menu import MenuScene
from tilearcade.placeholder import EscapeGame, PlaceholderGame


def test_menu_id_value(tmp_path):
    assert GameId(100) is GameId.MENU
    assert GameId(15) is GameId.GAME15
    scene = GameFactory(object(), tmp_path).create(100)
    assert isinstance(scene, MenuScene)


def test_creates_menu(tmp_path):
    app = object()
    scene = GameFactory(app, tmp_path).create(GameId.MENU)
    assert isinstance(scene, MenuScene)
    assert scene.app is app
    assert scene.assets_dir == tmp_path


def test_creates_placeholder_from_int():
    scene = GameFactory(object()).create(4)
    assert isinstance(scene, PlaceholderGame)
    assert scene.name == "GAME04"


def test_creates_escape_game():
    app = object()
    scene = GameFactory(app).create(15)
    assert isinstance(scene, EscapeGame)
    assert scene.app is app


@pytest.mark.parametrize("game", [g for g in GameId if g not in (GameId.MENU, GameId.GAME15)])
def test_every_game_gets_its_name(game):
    scene = GameFactory(object()).create(game)
    assert scene.name == game.name


def test_unknown_id():
    with pytest.raises(ValueError):
        GameFactory(object()).create(42)