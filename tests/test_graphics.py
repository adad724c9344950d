import random
from collections import deque

import pygame
import pytest

from snakepilot.game import Coordinates, Food, GameState
from snakepilot.graphics import (
    BACKGROUND_COLOR,
    BAD_COLOR,
    BODY_COLOR,
    BORDER_COLOR,
    FOOD_COLOR,
    GOOD_COLOR,
    HEAD_COLOR,
    debug_flags,
    draw_game,
    status_line,
)


@pytest.fixture
def state():
    game = GameState(20, 20, random.Random(7))
    game.food = Food(Coordinates(15, 15))
    return game


def _pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def _render(state):
    surface = pygame.Surface((400, 400))
    surface.fill(BACKGROUND_COLOR)
    draw_game(surface, state)
    return surface


def _count_colour(surface, colour, rows):
    width = surface.get_width()
    return sum(
        1 for y in rows for x in range(width) if _pixel(surface, x, y) == colour
    )


def test_status_line_reports_strategy_food_and_length(state):
    state.ai_strategy = "Food"
    state.food = Food(Coordinates(5, 7))
    assert status_line(state) == "AI: Food | Food: (5,7) | Len: 3"


def test_status_line_tracks_snake_length(state):
    state.snake.body.append(Coordinates(0, 0))
    assert status_line(state).endswith(f"Len: {len(state.snake.body)}")


def test_debug_flags_default_state(state):
    flags = debug_flags(state)
    assert [text for text, _ in flags] == [
        "Path to Food: false",
        "Path to Tail: false",
        "Path to Tail After Eat: false",
        "Is Trapped: false",
    ]
    assert [good for _, good in flags] == [False, False, False, True]


def test_debug_flags_trapped_is_bad(state):
    state.path_to_food_found = True
    state.is_trapped = True
    flags = debug_flags(state)
    assert flags[0] == ("Path to Food: true", True)
    assert flags[3] == ("Is Trapped: true", False)


def test_draw_game_paints_food_and_snake(state):
    surface = _render(state)
    assert _pixel(surface, 310, 310) == FOOD_COLOR
    head = state.snake.head
    assert _pixel(surface, head.x * 20 + 10, head.y * 20 + 10) == HEAD_COLOR
    for segment in list(state.snake.body)[1:]:
        assert _pixel(surface, segment.x * 20 + 10, segment.y * 20 + 10) == BODY_COLOR


def test_draw_game_draws_border(state):
    surface = _render(state)
    assert _pixel(surface, 1, 200) == BORDER_COLOR
    assert _pixel(surface, 398, 200) == BORDER_COLOR
    assert _pixel(surface, 200, 1) == BORDER_COLOR


def test_draw_game_colours_flags(state):
    state.path_to_food_found = True
    surface = _render(state)
    flag_rows = range(60, 165)
    assert _count_colour(surface, GOOD_COLOR, flag_rows) > 0
    assert _count_colour(surface, BAD_COLOR, flag_rows) > 0


def test_game_over_message_only_when_over(state):
    state.snake.body = deque(Coordinates(x, 16) for x in (12, 11, 10))
    state.food = Food(Coordinates(15, 3))
    band = range(185, 216)
    assert _count_colour(_render(state), BAD_COLOR, band) == 0
    state.game_over = True
    assert _count_colour(_render(state), BAD_COLOR, band) > 0