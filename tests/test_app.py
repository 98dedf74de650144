import pytest

from tilearcade.app import App
from tilearcade.factory import GameId
from tilearcade.frame import Frame
from tilearcade.menu import MenuScene
from tilearcade.placeholder import PlaceholderGame
from tilearcade.transition import TransitionState


def _switch(app):
    frame = Frame(delta=1.0)
    for _ in range(3):
        app.step(frame)
        if app.current_game == app.next_game:
            break
    return frame


def test_starts_on_menu(tmp_path):
    app = App(tmp_path)
    assert app.current_game is GameId.MENU
    assert isinstance(app.scene, MenuScene)
    assert app.transition.state is TransitionState.IN_START


def test_set_next_game(tmp_path):
    app = App(tmp_path)
    app.set_next_game(3)
    assert app.next_game is GameId.GAME03
    app.back_to_menu()
    assert app.next_game is GameId.MENU


def test_set_next_game_rejects_unknown(tmp_path):
    app = App(tmp_path)
    with pytest.raises(ValueError):
        app.set_next_game(50)


def test_switch_waits_for_fade(tmp_path):
    app = App(tmp_path)
    frame = Frame(delta=1.0)
    app.step(frame)
    assert app.transition.state is TransitionState.IN_END
    app.set_next_game(GameId.GAME03)
    app.step(frame)
    assert app.current_game is GameId.MENU
    assert app.transition.state is TransitionState.OUT_START
    app.step(frame)
    assert app.current_game is GameId.GAME03
    assert isinstance(app.scene, PlaceholderGame)
    assert app.transition.state is TransitionState.IN_START
    assert (tmp_path / "menu" / "indices.bin").exists()


def test_escape_game_toggles_escape(tmp_path):
    app = App(tmp_path)
    app.step(Frame(delta=1.0))
    app.set_next_game(GameId.GAME15)
    _switch(app)
    assert app.current_game is GameId.GAME15
    assert app.escape_quits is False
    app.step(Frame(delta=1.0))
    app.back_to_menu()
    _switch(app)
    assert app.current_game is GameId.MENU
    assert app.escape_quits is True


def test_close_saves_menu_order(tmp_path):
    app = App(tmp_path)
    app.close()
    data = (tmp_path / "menu" / "indices.bin").read_bytes()
    assert list(data) == list(range(16))