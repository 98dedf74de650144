"""Player, enemy and enemy bullets of the shooting game."""

from __future__ import annotations

from dataclasses import dataclass

from tilearcade.frame import SCREEN_HEIGHT, SCREEN_WIDTH, Canvas, InputState, Key


@dataclass
class Player:
    px: float = SCREEN_WIDTH / 2
    py: float = SCREEN_HEIGHT - 150
    pr: float = 25 * 2
    w: float = 100
    h: float = 200
    vx: float = 15
    ofs_y: float = -100
    hp: int = 10

    def move(self, inputs: InputState) -> None:
        """Move with WASD; cannot climb into the upper half; stays on screen."""
        if inputs.is_pressed(Key.A):
            self.px -= self.vx
        if inputs.is_pressed(Key.D):
            self.px += self.vx
        if inputs.is_pressed(Key.S):
            self.py += self.vx
        if inputs.is_pressed(Key.W):
            self.py -= self.vx
        if self.py < SCREEN_HEIGHT / 2 and inputs.is_pressed(Key.W):
            self.py += self.vx
        self.py = min(max(self.py, 0), SCREEN_HEIGHT)
        self.px = min(max(self.px, 0), SCREEN_WIDTH)

    def draw(self, canvas: Canvas) -> None:
        canvas.circle(self.px, self.py, self.pr)


@dataclass
class Enemy:
    px: float = SCREEN_WIDTH / 2
    py: float = SCREEN_HEIGHT - 930
    pr: float = 75 * 2
    w: float = 200
    h: float = 200
    vx: float = 10
    ofs_y: float = 100
    hp: int = 20

    def move(self) -> None:
        """Slide sideways, turning round past either screen edge."""
        self.px += self.vx
        if self.px > SCREEN_WIDTH or self.px < 0:
            self.vx = -self.vx

    def draw(self, canvas: Canvas) -> None:
        canvas.circle(self.px, self.py, self.pr)


@dataclass
class EnemyBullet:
    hp: int = 0
    px: float = 0
    py: float = 0
    vx: float = 0
    vy: float = 20.0
    pr: float = 20.0
    h: float = 20.0

    @property
    def active(self) -> bool:
        return self.hp > 0

    def move(self) -> None:
        """Fly, bounce off the side walls, and vanish past top or bottom."""
        if not self.active:
            return
        self.px += self.vx
        self.py += self.vy
        radius = self.pr / 2
        if self.px < radius or self.px > SCREEN_WIDTH - radius:
            self.vx = -self.vx
            self.px = radius if self.px < radius else SCREEN_WIDTH - radius
        if self.py > SCREEN_HEIGHT or self.py < -self.h:
            self.hp = 0

    def draw(self, canvas: Canvas) -> None:
        if self.active:
            canvas.circle(self.px, self.py, self.pr)

    def shoot(self, x: float, y: float, vx: float, vy: float) -> None:
        """Fire from (x, y) with the given velocity, if not already in flight."""
        if self.hp == 0:
            self.hp = 1
            self.px = x
            self.py = y
            self.vx = vx
            self.vy = vy