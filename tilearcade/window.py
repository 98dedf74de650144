"""Pygame window: feeds input to the application and draws its canvas."""

from __future__ import annotations

import argparse
import colorsys
import functools
import time
from typing import Any

import pygame

from tilearcade.app import App
from tilearcade.frame import SCREEN_HEIGHT, SCREEN_WIDTH, Canvas, Frame, InputState, Key
from tilearcade.menu import DEFAULT_ASSETS_DIR

_KEYS = {
    pygame.K_RETURN: Key.ENTER,
    pygame.K_KP_ENTER: Key.ENTER,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_z: Key.Z,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
}

_MOUSE_BUTTONS = {1: Key.MOUSE_LBUTTON, 3: Key.MOUSE_RBUTTON}


def key_for_pygame(code: int) -> Key | None:
    """The Key for a pygame key code, or None if it is not used."""
    return _KEYS.get(code)


def _clamp(value: float) -> int:
    return max(0, min(255, int(round(value))))


def _rgba(color: tuple[float, ...], mode: str) -> tuple[int, int, int, int]:
    first, second, third, alpha = color
    if mode == "hsv":
        r, g, b = colorsys.hsv_to_rgb((first % 360) / 360, second / 255, third / 255)
        first, second, third = r * 255, g * 255, b * 255
    return (_clamp(first), _clamp(second), _clamp(third), _clamp(alpha))


@functools.lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    return pygame.font.Font(None, size)


def _draw_rect(surface: pygame.Surface, rgba, rect: pygame.Rect, width: int = 0) -> None:
    if rgba[3] >= 255:
        pygame.draw.rect(surface, rgba[:3], rect, width)
        return
    layer = pygame.Surface(rect.size, pygame.SRCALPHA)
    pygame.draw.rect(layer, rgba, layer.get_rect(), width)
    surface.blit(layer, rect.topleft)


def _draw_circle(surface: pygame.Surface, rgba, center, radius: float, width: int = 0) -> None:
    if rgba[3] >= 255:
        pygame.draw.circle(surface, rgba[:3], center, radius, width)
        return
    size = int(radius * 2) + 2
    layer = pygame.Surface((size, size), pygame.SRCALPHA)
    pygame.draw.circle(layer, rgba, (size / 2, size / 2), radius, width)
    surface.blit(layer, (center[0] - size / 2, center[1] - size / 2))


def _stroke(style: dict[str, Any]) -> tuple[tuple[int, int, int, int], int] | None:
    color = style["stroke"]
    weight = int(style["stroke_weight"])
    if color is None or weight <= 0:
        return None
    return _rgba(color, style["color_mode"]), weight


def render(surface: pygame.Surface, canvas: Canvas) -> None:
    """Draw the canvas's recorded commands onto a pygame surface."""
    for kind, params, style in canvas.commands:
        mode = style["color_mode"]
        if kind == "clear":
            surface.fill(_rgba(params[0], mode)[:3])
        elif kind == "rect":
            x, y, w, h = params
            rect = pygame.Rect(int(x), int(y), int(w), int(h))
            _draw_rect(surface, _rgba(style["fill"], mode), rect)
            stroke = _stroke(style)
            if stroke:
                _draw_rect(surface, stroke[0], rect, stroke[1])
        elif kind == "circle":
            x, y, diameter = params
            _draw_circle(surface, _rgba(style["fill"], mode), (x, y), diameter / 2)
            stroke = _stroke(style)
            if stroke:
                _draw_circle(surface, stroke[0], (x, y), diameter / 2, stroke[1])
        elif kind == "text":
            message, x, y = params
            if not message:
                continue
            if not pygame.font.get_init():
                pygame.font.init()
            rgba = _rgba(style["fill"], mode)
            image = _font(max(1, int(style["text_size"]))).render(message, True, rgba[:3])
            if rgba[3] < 255:
                image.set_alpha(rgba[3])
            left = x - image.get_width() / 2 if style["text_mode"] == "bcenter" else x
            surface.blit(image, (left, y - image.get_height()))


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tilearcade", description="Tile menu of small games.")
    parser.add_argument("--assets", default=str(DEFAULT_ASSETS_DIR), help="assets directory")
    parser.add_argument("--windowed", action="store_true", help="run in a window")
    return parser.parse_args(argv)


def _handle_events(inputs: InputState) -> bool:
    """Apply pending events to the input state; False once the window is closed."""
    running = True
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            running = False
        elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
            key = key_for_pygame(event.key)
            if key is not None:
                (inputs.press if event.type == pygame.KEYDOWN else inputs.release)(key)
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            key = _MOUSE_BUTTONS.get(event.button)
            if key is not None:
                (inputs.press if event.type == pygame.MOUSEBUTTONDOWN else inputs.release)(key)
    return running


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    pygame.init()
    if args.windowed:
        window = pygame.display.set_mode((SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2))
    else:
        window = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    pygame.display.set_caption("tilearcade")
    screen = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    clock = pygame.time.Clock()
    frame = Frame()
    app = App(args.assets)
    last = time.perf_counter()
    try:
        while _handle_events(frame.inputs):
            if app.escape_quits and frame.inputs.is_triggered(Key.ESCAPE):
                break
            now = time.perf_counter()
            frame.delta = now - last
            last = now
            win_w, win_h = window.get_size()
            mouse_x, mouse_y = pygame.mouse.get_pos()
            frame.mouse_x = mouse_x * SCREEN_WIDTH / win_w
            frame.mouse_y = mouse_y * SCREEN_HEIGHT / win_h
            frame.canvas.reset()
            app.step(frame)
            render(screen, frame.canvas)
            window.blit(pygame.transform.smoothscale(screen, (win_w, win_h)), (0, 0))
            pygame.display.flip()
            frame.inputs.end_frame()
            clock.tick(60)
    finally:
        app.close()
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())