"""Tile menu: pick a game with the left button, reorder tiles by right-dragging."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from tilearcade.frame import SCREEN_HEIGHT, SCREEN_WIDTH, Frame, Key, Scene

DEFAULT_ASSETS_DIR = Path("assets")


def move_tile(indices: list[int], source: int, target: int) -> list[int]:
    """Return a copy of ``indices`` with the entry at ``source`` moved to ``target``.

    The entries in between shift by one place to make room.
    """
    moved = list(indices)
    item = moved.pop(source)
    moved.insert(target, item)
    return moved


def load_game_indices(path: Path | str, count: int) -> list[int]:
    """Read the saved tile order; fall back to ``0 .. count-1`` when there is none.

    A short file leaves the remaining entries at zero.
    """
    try:
        data = Path(path).read_bytes()
    except OSError:
        return list(range(count))
    indices = list(data[:count])
    return indices + [0] * (count - len(indices))


def save_game_indices(path: Path | str, indices: list[int]) -> None:
    """Write the tile order, one byte per tile."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(bytes(indices))


def load_titles(assets_dir: Path | str, count: int) -> list[str]:
    """Read the first line of ``gameNN/title.txt`` for each game; missing files give ''."""
    titles = []
    for number in range(count):
        path = Path(assets_dir) / f"game{number:02d}" / "title.txt"
        try:
            with path.open(encoding="utf-8", errors="replace") as handle:
                titles.append(handle.readline().rstrip("\r\n"))
        except OSError:
            titles.append("")
    return titles


class MenuScene(Scene):
    """A grid of game tiles."""

    def __init__(self, app: Any, assets_dir: Path | str = DEFAULT_ASSETS_DIR) -> None:
        super().__init__(app)
        self.assets_dir = Path(assets_dir)
        self.rows = 4
        self.cols = 4
        self.tile_w = 160 * 2
        self.tile_h = 90 * 2
        self.offset_x = (SCREEN_WIDTH - self.tile_w * self.cols) / 2
        self.offset_y = (SCREEN_HEIGHT - self.tile_h * self.rows) / 2
        self.div_hue = 360.0 / (self.cols * self.rows)
        self.size_text = 40
        self.tile_holding: int | None = None
        self.tile_over: int | None = None
        self.indices: list[int] = list(range(self.rows * self.cols))
        self.titles: list[str] = [""] * (self.rows * self.cols)

    @property
    def indices_path(self) -> Path:
        return self.assets_dir / "menu" / "indices.bin"

    def create(self) -> None:
        count = self.rows * self.cols
        self.tile_holding = None
        self.tile_over = None
        self.indices = load_game_indices(self.indices_path, count)
        self.titles = load_titles(self.assets_dir, count)

    def destroy(self) -> None:
        save_game_indices(self.indices_path, self.indices)

    def tile_at(self, x: float, y: float) -> int | None:
        """Index of the tile under (x, y), or None outside the grid."""
        right = self.offset_x + self.tile_w * self.cols
        bottom = self.offset_y + self.tile_h * self.rows
        if x < self.offset_x or x > right or y < self.offset_y or y > bottom:
            return None
        col = min(int((x - self.offset_x) / self.tile_w), self.cols - 1)
        row = min(int((y - self.offset_y) / self.tile_h), self.rows - 1)
        return self.cols * row + col

    def proc(self, frame: Frame) -> None:
        self._change_order(frame)
        self._draw(frame)
        if frame.inputs.is_triggered(Key.MOUSE_LBUTTON) and self.tile_over is not None:
            self.app.set_next_game(self.indices[self.tile_over])

    def _change_order(self, frame: Frame) -> None:
        self.tile_over = self.tile_at(frame.mouse_x, frame.mouse_y)
        if self.tile_over is None:
            self.tile_holding = None
            return
        inputs = frame.inputs
        if inputs.is_triggered(Key.MOUSE_RBUTTON):
            self.tile_holding = self.tile_over
        if inputs.is_released(Key.MOUSE_RBUTTON) and self.tile_holding is not None:
            self.indices = move_tile(self.indices, self.tile_holding, self.tile_over)
            self.tile_holding = None

    def _title(self, tile: int) -> str:
        game = self.indices[tile]
        return self.titles[game] if 0 <= game < len(self.titles) else ""

    def _draw(self, frame: Frame) -> None:
        canvas = frame.canvas
        canvas.color_mode = "hsv"
        canvas.stroke_color = (0, 0, 0, 255)
        canvas.stroke_weight = 5
        canvas.clear(0, 0, 0)
        canvas.text_mode = "bottom"
        canvas.text_size(self.size_text)
        canvas.fill(0, 0, 255)
        canvas.text("Menu", self.offset_x, self.offset_y)
        for row in range(self.rows):
            for col in range(self.cols):
                tile = self.cols * row + col
                saturation, value = (128, 255) if tile == self.tile_over else (255, 160)
                canvas.fill(self.div_hue * tile, saturation, value)
                px = self.tile_w * col + self.offset_x
                py = self.tile_h * row + self.offset_y
                canvas.rect(px, py, self.tile_w, self.tile_h)
                canvas.text_size(self.size_text)
                canvas.fill(0)
                canvas.text_mode = "bottom"
                canvas.text(self._title(tile), px + 10, py + 10 + self.size_text)
        if self.tile_holding is not None:
            canvas.fill(128)
            canvas.text_mode = "bcenter"
            canvas.text(self._title(self.tile_holding), frame.mouse_x, frame.mouse_y)