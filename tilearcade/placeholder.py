"""Simple scenes that show their name and return to the menu."""

from __future__ import annotations

from typing import Any

from tilearcade.frame import Frame, Key, Scene


class PlaceholderGame(Scene):
    """Shows a title; ENTER returns to the menu."""

    def __init__(self, app: Any, name: str) -> None:
        super().__init__(app)
        self.name = name

    def proc(self, frame: Frame) -> None:
        canvas = frame.canvas
        canvas.clear(0, 0, 64)
        canvas.text_size(50)
        canvas.fill(255, 255, 0)
        canvas.text(self.name, 0, 100)
        canvas.fill(255)
        canvas.text("Press ENTER to return to the menu", 0, 1080)
        if frame.inputs.is_triggered(Key.ENTER):
            self.app.back_to_menu()


class EscapeGame(Scene):
    """Shows the frame time; ESC returns to the menu instead of quitting."""

    def create(self) -> None:
        self.app.escape_quits = False

    def proc(self, frame: Frame) -> None:
        canvas = frame.canvas
        canvas.clear(0, 0, 64)
        canvas.fill(255)
        canvas.text(str(frame.delta), 0, 50)
        canvas.text("Press ESC to return to the menu", 0, 1080)
        if frame.inputs.is_triggered(Key.ESCAPE):
            self.app.back_to_menu()

    def destroy(self) -> None:
        self.app.escape_quits = True