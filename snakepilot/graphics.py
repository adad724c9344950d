"""Rendering of the board, the snake and the autopilot's diagnostics."""

from __future__ import annotations

import pygame

from snakepilot.game import Coordinates, GameState

Color = tuple[int, int, int]

BACKGROUND_COLOR: Color = (0, 0, 0)
BORDER_COLOR: Color = (130, 130, 130)
FOOD_COLOR: Color = (230, 41, 55)
HEAD_COLOR: Color = (0, 228, 48)
BODY_COLOR: Color = (0, 158, 47)
TEXT_COLOR: Color = (255, 255, 255)
DEBUG_TEXT_COLOR: Color = (0, 255, 255)
GOOD_COLOR: Color = HEAD_COLOR
BAD_COLOR: Color = FOOD_COLOR

BORDER_WIDTH = 5
GAME_OVER_TEXT = "Game Over! Press 'Q' to quit or Space to continue."


def debug_flags(state: GameState) -> list[tuple[str, bool]]:
    """The autopilot's diagnostic lines, each paired with whether it reads as good."""
    flags = [
        ("Path to Food", state.path_to_food_found, state.path_to_food_found),
        ("Path to Tail", state.path_to_tail_found, state.path_to_tail_found),
        (
            "Path to Tail After Eat",
            state.path_to_tail_after_eat_found,
            state.path_to_tail_after_eat_found,
        ),
        # Being trapped is bad, so the line is good when the flag is false.
        ("Is Trapped", state.is_trapped, not state.is_trapped),
    ]
    return [(f"{label}: {str(value).lower()}", good) for label, value, good in flags]


def status_line(state: GameState) -> str:
    """The one-line summary of strategy, food position and snake length."""
    food = state.food.position
    return (
        f"AI: {state.ai_strategy} | Food: ({food.x},{food.y}) "
        f"| Len: {len(state.snake.body)}"
    )


def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _draw_text(
    surface: pygame.Surface,
    text: str,
    x: float,
    baseline: float,
    size: int,
    color: Color,
) -> None:
    font = _font(size)
    rendered = font.render(text, True, color)
    surface.blit(rendered, (round(x), round(baseline - font.get_ascent())))


def draw_game(surface: pygame.Surface, state: GameState) -> None:
    """Draw one frame of ``state`` onto ``surface``."""
    width, height = surface.get_size()
    pygame.draw.rect(surface, BORDER_COLOR, pygame.Rect(0, 0, width, height), BORDER_WIDTH)

    cell = state.cell_size

    def cell_rect(pos: Coordinates) -> pygame.Rect:
        return pygame.Rect(round(pos.x * cell), round(pos.y * cell), round(cell), round(cell))

    surface.fill(FOOD_COLOR, cell_rect(state.food.position))
    for index, segment in enumerate(state.snake.body):
        surface.fill(HEAD_COLOR if index == 0 else BODY_COLOR, cell_rect(segment))

    _draw_text(surface, f"Score: {state.score}", 10, height - 30, 30, TEXT_COLOR)
    _draw_text(surface, f"Speed: {state.speed}", 150, height - 30, 30, TEXT_COLOR)
    _draw_text(surface, status_line(state), 10, 30, 20, DEBUG_TEXT_COLOR)

    y_offset = 80
    for text, good in debug_flags(state):
        _draw_text(surface, text, 10, y_offset, 20, GOOD_COLOR if good else BAD_COLOR)
        y_offset += 25

    if state.game_over:
        font = _font(40)
        text_width, text_height = font.size(GAME_OVER_TEXT)
        _draw_text(
            surface,
            GAME_OVER_TEXT,
            width / 2 - text_width / 2,
            height / 2 - text_height / 2,
            40,
            BAD_COLOR,
        )