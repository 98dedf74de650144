"""Runs the active scene and switches scenes behind a fade."""

from __future__ import annotations

from pathlib import Path

from tilearcade.factory import GameFactory, GameId
from tilearcade.frame import Frame
from tilearcade.menu import DEFAULT_ASSETS_DIR
from tilearcade.transition import TransitionEffect


class App:
    """Holds the current scene and the one to switch to."""

    def __init__(
        self, assets_dir: Path | str = DEFAULT_ASSETS_DIR, transition_time: float = 1.0
    ) -> None:
        self.escape_quits = True
        self.factory = GameFactory(self, assets_dir)
        self.current_game = GameId.MENU
        self.next_game = GameId.MENU
        self.scene = self.factory.create(self.current_game)
        self.scene.create()
        self.transition = TransitionEffect(transition_time)

    def set_next_game(self, game_id: GameId | int) -> None:
        self.next_game = GameId(game_id)

    def back_to_menu(self) -> None:
        self.next_game = GameId.MENU

    def step(self, frame: Frame) -> None:
        """Run one frame; once the fade-out ends, swap in the requested scene."""
        self.scene.proc(frame)
        self.transition.proc(frame)
        if self.current_game == self.next_game:
            return
        self.transition.out_start()
        if self.transition.out_end():
            self.scene.destroy()
            self.current_game = self.next_game
            self.scene = self.factory.create(self.current_game)
            self.scene.create()
            self.transition.in_start()

    def close(self) -> None:
        self.scene.destroy()