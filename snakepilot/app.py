"""Window, input handling and the main loop of the self-playing snake."""

from __future__ import annotations

import argparse
import time
from typing import Optional, Sequence

import pygame

from snakepilot.ai import find_path
from snakepilot.game import DEFAULT_CELL_SIZE, DEFAULT_SPEED, GameState
from snakepilot.graphics import BACKGROUND_COLOR, draw_game

WINDOW_SIZE = (800, 600)
WINDOW_TITLE = "Snake AI"
BASE_FRAME_MS = 200
FPS = 60


def _speed(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("speed must be at least 1")
    return value


def _cell_size(text: str) -> float:
    value = float(text)
    if int(value) < 1:
        raise argparse.ArgumentTypeError("cell size must be at least 1 pixel")
    return value


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse the command line: the initial speed and the cell size."""
    parser = argparse.ArgumentParser(
        prog="snakepilot", description="A snake game that plays itself."
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument(
        "-s",
        "--speed",
        type=_speed,
        default=DEFAULT_SPEED,
        help="the initial speed of the game",
    )
    parser.add_argument(
        "--cell-size",
        type=_cell_size,
        default=DEFAULT_CELL_SIZE,
        help="the size of each cell in pixels",
    )
    return parser.parse_args(argv)


def frame_interval(speed: int) -> float:
    """Seconds between game ticks at ``speed``, in whole milliseconds."""
    if speed < 1:
        raise ValueError("speed must be at least 1")
    return (BASE_FRAME_MS // speed) / 1000


def new_game(
    width_px: float, height_px: float, speed: int, cell_size: float
) -> GameState:
    """A fresh game filling a window of the given size."""
    cell = int(cell_size)
    if cell < 1:
        raise ValueError("cell size must be at least 1 pixel")
    state = GameState(int(width_px) // cell, int(height_px) // cell)
    state.speed = speed
    state.cell_size = cell_size
    return state


def _run(screen: pygame.Surface, speed: int, cell_size: float) -> None:
    clock = pygame.time.Clock()
    width, height = screen.get_size()
    state = new_game(width, height, speed, cell_size)
    last_update = time.monotonic()

    while True:
        quit_requested = restart_requested = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_q:
                    quit_requested = True
                elif event.key == pygame.K_SPACE:
                    restart_requested = True
        if quit_requested:
            return

        if state.game_over:
            if restart_requested:
                state = new_game(width, height, speed, cell_size)
        else:
            keys = pygame.key.get_pressed()
            if keys[pygame.K_PAGEUP]:
                state.increase_speed()
            if keys[pygame.K_PAGEDOWN]:
                state.decrease_speed()

            if time.monotonic() - last_update >= frame_interval(state.speed):
                state.change_direction(find_path(state))
                state.update()
                last_update = time.monotonic()

        screen.fill(BACKGROUND_COLOR)
        draw_game(screen, state)
        pygame.display.flip()
        clock.tick(FPS)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and let the autopilot play until Q is pressed."""
    args = parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        _run(screen, args.speed, args.cell_size)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())