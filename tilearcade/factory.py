"""Creates the scene that belongs to a game id."""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Any

from tilearcade.frame import Scene
from tilearcade.menu import DEFAULT_ASSETS_DIR, MenuScene
from tilearcade.placeholder import EscapeGame, PlaceholderGame


class GameId(enum.IntEnum):
    GAME00 = 0
    GAME01 = 1
    GAME02 = 2
    GAME03 = 3
    GAME04 = 4
    GAME05 = 5
    GAME06 = 6
    GAME07 = 7
    GAME08 = 8
    GAME09 = 9
    GAME10 = 10
    GAME11 = 11
    GAME12 = 12
    GAME13 = 13
    GAME14 = 14
    GAME15 = 15
    MENU = 100


class GameFactory:
    """Builds scenes for an application."""

    def __init__(self, app: Any, assets_dir: Path | str = DEFAULT_ASSETS_DIR) -> None:
        self.app = app
        self.assets_dir = Path(assets_dir)

    def create(self, game_id: GameId | int) -> Scene:
        """Return a new scene; an unknown id raises ValueError."""
        game = GameId(game_id)
        if game is GameId.MENU:
            return MenuScene(self.app, self.assets_dir)
        if game is GameId.GAME15:
            return EscapeGame(self.app)
        return PlaceholderGame(self.app, game.name)