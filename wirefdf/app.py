"""Command-line viewer: loads a height map and shows its wireframe."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Sequence

from .mapfile import Grid, MapError, read_map
from .render import WINDOW_HEIGHT, WINDOW_WIDTH, Canvas, View, draw_wireframe

WINDOW_TITLE = "FdF"
ZOOM_STEP = 1
HEIGHT_STEP = 1
PAN_STEP = 10
ANGLE_STEP = 0.1

BUTTON_MIDDLE = 2
BUTTON_WHEEL_UP = 4
BUTTON_WHEEL_DOWN = 5


class Key(IntEnum):
    """Keys the viewer reacts to, by their X11 keysym values."""

    ESCAPE = 0xFF1B
    PLUS = 0x002B
    MINUS = 0x002D
    KP_ADD = 0xFFAB
    KP_SUBTRACT = 0xFFAD
    LEFT = 0xFF51
    UP = 0xFF52
    RIGHT = 0xFF53
    DOWN = 0xFF54


def _as_key(key: Key | int) -> Key | None:
    try:
        return Key(key)
    except ValueError:
        return None


def apply_key(view: View, key: Key | int) -> bool:
    """Update *view* for a key press.

    Returns False when the key closes the viewer, True otherwise.
    Keys without a binding leave the view unchanged.
    """
    match _as_key(key):
        case Key.ESCAPE:
            return False
        case Key.PLUS:
            view.zoom += ZOOM_STEP
        case Key.MINUS:
            view.zoom -= ZOOM_STEP
        case Key.KP_ADD:
            view.height += HEIGHT_STEP
        case Key.KP_SUBTRACT:
            view.height -= HEIGHT_STEP
        case Key.DOWN:
            view.offset_y += PAN_STEP
        case Key.UP:
            view.offset_y -= PAN_STEP
        case Key.RIGHT:
            view.offset_x += PAN_STEP
        case Key.LEFT:
            view.offset_x -= PAN_STEP
    return True


def apply_button(view: View, button: int) -> None:
    """Update the rotation of *view* for a mouse button press."""
    if button == BUTTON_WHEEL_UP:
        view.angle -= ANGLE_STEP
    elif button == BUTTON_WHEEL_DOWN:
        view.angle += ANGLE_STEP
    elif button == BUTTON_MIDDLE:
        view.angle = 0.0


def render(grid: Grid, view: View) -> Canvas:
    """Draw *grid* as seen through *view* on a fresh window-sized canvas."""
    canvas = Canvas(WINDOW_WIDTH, WINDOW_HEIGHT)
    draw_wireframe(canvas, grid, view)
    return canvas


def _to_rgb(canvas: Canvas) -> bytes:
    data = canvas.to_bytes()
    rgb = bytearray(canvas.width * canvas.height * 3)
    rgb[0::3] = data[2::4]
    rgb[1::3] = data[1::4]
    rgb[2::3] = data[0::4]
    return bytes(rgb)


def run(grid: Grid, interactive: bool = False) -> int:
    """Open a window showing *grid* and process events until it is closed.

    Escape or closing the window ends the loop. With *interactive*, the
    zoom, height, pan and rotation controls are enabled as well.
    """
    import pygame

    key_map = {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_PLUS: Key.PLUS,
        pygame.K_MINUS: Key.MINUS,
        pygame.K_KP_PLUS: Key.KP_ADD,
        pygame.K_KP_MINUS: Key.KP_SUBTRACT,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_UP: Key.UP,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_DOWN: Key.DOWN,
    }
    view = View()
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)

        def show() -> None:
            surface = pygame.image.frombuffer(
                _to_rgb(render(grid, view)), (WINDOW_WIDTH, WINDOW_HEIGHT), "RGB"
            )
            screen.blit(surface, (0, 0))
            pygame.display.flip()

        show()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.KEYDOWN:
                key = key_map.get(event.key)
                if key is Key.ESCAPE:
                    return 0
                if interactive:
                    if key is not None:
                        apply_key(view, key)
                    show()
            elif event.type == pygame.MOUSEBUTTONDOWN and interactive:
                apply_button(view, event.button)
                show()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: ``wirefdf [--interactive] MAP``."""
    args = list(sys.argv[1:] if argv is None else argv)
    interactive = "--interactive" in args
    paths = [arg for arg in args if arg != "--interactive"]
    if len(paths) != 1:
        sys.stderr.write("Invalid input\n")
        return 0
    try:
        grid = read_map(paths[0])
    except MapError as exc:
        sys.stderr.write(f"{exc}\n")
        return 0
    return run(grid, interactive)


if __name__ == "__main__":
    sys.exit(main())