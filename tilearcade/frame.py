"""Per-frame input, a recording canvas, and the base class for scenes."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field
from typing import Any

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080


class Key(enum.Enum):
    """Keys and mouse buttons the scenes react to."""

    ENTER = "enter"
    SPACE = "space"
    ESCAPE = "escape"
    Z = "z"
    W = "w"
    A = "a"
    S = "s"
    D = "d"
    MOUSE_LBUTTON = "mouse_left"
    MOUSE_RBUTTON = "mouse_right"


class InputState:
    """Tracks which keys are held now and which were held last frame."""

    def __init__(self) -> None:
        self._held: set[Key] = set()
        self._previous: set[Key] = set()

    def press(self, key: Key) -> None:
        self._held.add(key)

    def release(self, key: Key) -> None:
        self._held.discard(key)

    def is_pressed(self, key: Key) -> bool:
        """True while the key is held."""
        return key in self._held

    def is_triggered(self, key: Key) -> bool:
        """True only on the frame the key went down."""
        return key in self._held and key not in self._previous

    def is_released(self, key: Key) -> bool:
        """True only on the frame the key came up."""
        return key in self._previous and key not in self._held

    def end_frame(self) -> None:
        """Remember the current keys as the previous frame's keys."""
        self._previous = set(self._held)


def _color(args: tuple[float, ...]) -> tuple[float, float, float, float]:
    if len(args) == 1:
        return (args[0], args[0], args[0], 255)
    if len(args) == 3:
        return (args[0], args[1], args[2], 255)
    if len(args) == 4:
        return (args[0], args[1], args[2], args[3])
    raise ValueError(f"a colour takes 1, 3 or 4 components, not {len(args)}")


class Canvas:
    """Records drawing commands with the style in force when each was issued.

    Each command is a tuple ``(kind, params, style)`` where ``kind`` is one of
    ``"clear"``, ``"text"``, ``"circle"`` or ``"rect"``.
    """

    def __init__(self) -> None:
        self.commands: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []
        self.fill_color: tuple[float, float, float, float] = (255, 255, 255, 255)
        self.stroke_color: tuple[float, float, float, float] | None = (0, 0, 0, 255)
        self.stroke_weight: float = 1
        self.color_mode: str = "rgb"
        self.font_size: float = 20
        self.text_mode: str = "bottom"

    def _style(self) -> dict[str, Any]:
        return {
            "fill": self.fill_color,
            "stroke": self.stroke_color,
            "stroke_weight": self.stroke_weight,
            "color_mode": self.color_mode,
            "text_size": self.font_size,
            "text_mode": self.text_mode,
        }

    def _record(self, kind: str, *params: Any) -> None:
        self.commands.append((kind, params, self._style()))

    def clear(self, *args: float) -> None:
        """Discard everything drawn so far and paint the background."""
        color = _color(args)
        self.commands.clear()
        self._record("clear", color)

    def fill(self, *args: float) -> None:
        self.fill_color = _color(args)

    def text_size(self, size: float) -> None:
        self.font_size = size

    def text(self, message: str, x: float, y: float) -> None:
        self._record("text", str(message), x, y)

    def circle(self, x: float, y: float, diameter: float) -> None:
        self._record("circle", x, y, diameter)

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        self._record("rect", x, y, w, h)

    def reset(self) -> None:
        """Drop the recorded commands; the drawing style is kept."""
        self.commands.clear()


@dataclass
class Frame:
    """Everything a scene sees during one step of the main loop."""

    canvas: Canvas = field(default_factory=Canvas)
    inputs: InputState = field(default_factory=InputState)
    delta: float = 1 / 60
    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT
    mouse_x: float = 0.0
    mouse_y: float = 0.0


class Scene(abc.ABC):
    """A game or menu run by the application, one frame at a time."""

    def __init__(self, app: Any) -> None:
        self.app = app

    def create(self) -> None:
        """Called once when the scene becomes active."""

    @abc.abstractmethod
    def proc(self, frame: Frame) -> None:
        """Update and draw one frame."""

    def destroy(self) -> None:
        """Called once when the scene is left."""