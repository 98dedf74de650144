"""Fade-out / fade-in effect played when switching scenes."""

from __future__ import annotations

import enum

from tilearcade.frame import Frame


class TransitionState(enum.Enum):
    IN_START = enum.auto()
    IN_END = enum.auto()
    OUT_START = enum.auto()
    OUT_END = enum.auto()


class TransitionEffect:
    """A full-screen colour overlay that fades out and back in."""

    def __init__(self, time: float = 1.0) -> None:
        self.color: tuple[float, float, float] = (0, 0, 0)
        self.alpha: float = 255
        self.speed: float = 0
        self.set_time(time)
        self.state = TransitionState.IN_START

    def set_time(self, time: float) -> None:
        """Set the seconds from the start of a fade-out to the end of the fade-in."""
        self.speed = 255 / (time * 0.5)

    def in_start(self) -> None:
        """Start fading in, if a fade-out has finished."""
        if self.state is TransitionState.OUT_END:
            self.state = TransitionState.IN_START

    def in_end(self) -> bool:
        """True while the effect is in the fade-in start state."""
        return self.state is TransitionState.IN_START

    def out_start(self) -> None:
        """Start fading out, if a fade-in has finished."""
        if self.state is TransitionState.IN_END:
            self.state = TransitionState.OUT_START

    def out_end(self) -> bool:
        """True once the fade-out has covered the screen."""
        return self.state is TransitionState.OUT_END

    def proc(self, frame: Frame) -> None:
        """Advance the fade by the frame's delta and draw the overlay."""
        if self.state in (TransitionState.IN_END, TransitionState.OUT_END):
            return
        canvas = frame.canvas
        canvas.stroke_color = None
        canvas.color_mode = "rgb"
        canvas.fill(*self.color, self.alpha)
        canvas.rect(0, 0, frame.width, frame.height)
        if self.state is TransitionState.IN_START:
            self.alpha -= self.speed * frame.delta
            if self.alpha <= 0:
                self.alpha = 0
                self.state = TransitionState.IN_END
        else:
            self.alpha += self.speed * frame.delta
            if self.alpha >= 255:
                self.alpha = 255
                self.state = TransitionState.OUT_END