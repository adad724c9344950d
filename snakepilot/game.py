"""Snake game state: board, snake, food and the rules that move them."""

from __future__ import annotations

import random
import time
from collections import deque
from dataclasses import dataclass
from enum import Enum
from itertools import islice
from typing import Iterable, Optional

MIN_SPEED = 1
MAX_SPEED = 1000
DEFAULT_SPEED = 5
DEFAULT_CELL_SIZE = 20.0
INITIAL_LENGTH = 3
SPEED_CHANGE_INTERVAL = 0.05  # seconds between speed steps while a key is held


class Direction(Enum):
    """A direction of travel, valued by its (dx, dy) step on the grid."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def is_opposite(self, other: Direction) -> bool:
        """True when ``other`` points exactly the other way."""
        return self.dx == -other.dx and self.dy == -other.dy


@dataclass(frozen=True)
class Coordinates:
    """A cell on the board; y grows downwards."""

    x: int
    y: int

    def moved(self, direction: Direction) -> Coordinates:
        """The neighbouring cell one step in ``direction``."""
        return Coordinates(self.x + direction.dx, self.y + direction.dy)


class Snake:
    """The snake's body (head first), its heading and whether it is growing."""

    def __init__(
        self, start: Coordinates, length: int, direction: Direction
    ) -> None:
        self.body: deque[Coordinates] = deque(
            Coordinates(start.x - i, start.y) for i in range(length)
        )
        self.direction = direction
        self.digesting = False

    @property
    def head(self) -> Coordinates:
        return self.body[0]

    @property
    def tail(self) -> Coordinates:
        return self.body[-1]

    def move_forward(self) -> None:
        """Advance one cell; the tail stays put once after eating."""
        self.body.appendleft(self.head.moved(self.direction))
        if self.digesting:
            self.digesting = False
        else:
            self.body.pop()

    def check_collision(self, width: int, height: int) -> bool:
        """True when the head is off the board or on another segment."""
        head = self.head
        if not (0 <= head.x < width and 0 <= head.y < height):
            return True
        return head in islice(self.body, 1, None)

    def clone(self) -> Snake:
        copy = Snake.__new__(Snake)
        copy.body = deque(self.body)
        copy.direction = self.direction
        copy.digesting = self.digesting
        return copy


@dataclass(frozen=True)
class Food:
    """A piece of food at a fixed cell."""

    position: Coordinates

    @classmethod
    def random(
        cls,
        width: int,
        height: int,
        snake_body: Iterable[Coordinates],
        rng: random.Random,
    ) -> Food:
        """Place food at random, two cells clear of the border and off the snake.

        Raises ValueError when the board leaves no room inside that margin.
        """
        occupied = set(snake_body)
        while True:
            position = Coordinates(
                rng.randrange(2, width - 2), rng.randrange(2, height - 2)
            )
            if position not in occupied:
                return cls(position)


class GameState:
    """Everything about one game, including the autopilot's diagnostics."""

    def __init__(
        self, width: int, height: int, rng: Optional[random.Random] = None
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.width = width
        self.height = height
        self.snake = Snake(
            Coordinates(width // 2, height // 2), INITIAL_LENGTH, Direction.RIGHT
        )
        self.food = Food.random(width, height, self.snake.body, self.rng)
        self.score = 0
        self.game_over = False
        self.last_direction: Optional[Direction] = None
        self.speed = DEFAULT_SPEED
        self.cell_size = DEFAULT_CELL_SIZE
        self.path_to_food_found = False
        self.path_to_tail_found = False
        self.path_to_tail_after_eat_found = False
        self.is_trapped = False
        self.ai_strategy = "None"
        self.speed_change_timer = time.monotonic()

    def is_collision(self, pos: Coordinates, ignore_tail: bool) -> bool:
        """True when ``pos`` is off the board or on the snake.

        With ``ignore_tail`` the last segment does not count, since it
        moves away on the next step.
        """
        if not (0 <= pos.x < self.width and 0 <= pos.y < self.height):
            return True
        body = self.snake.body
        segments = islice(body, max(len(body) - 1, 0)) if ignore_tail else body
        return pos in segments

    def _speed_change_due(self) -> bool:
        return time.monotonic() - self.speed_change_timer >= SPEED_CHANGE_INTERVAL

    def increase_speed(self) -> None:
        if self._speed_change_due():
            self.speed = min(self.speed + 1, MAX_SPEED)
            self.speed_change_timer = time.monotonic()

    def decrease_speed(self) -> None:
        if self._speed_change_due():
            self.speed = max(self.speed - 1, MIN_SPEED)
            self.speed_change_timer = time.monotonic()

    def update(self) -> None:
        """Play one tick: turn, move, detect a crash, eat food."""
        if self.game_over:
            return

        if self.last_direction is not None:
            self.snake.direction = self.last_direction
            self.last_direction = None

        self.snake.move_forward()

        if self.snake.check_collision(self.width, self.height):
            self.game_over = True
            return

        if self.snake.head == self.food.position:
            self.score += 1
            self.snake.digesting = True
            self.food = Food.random(self.width, self.height, self.snake.body, self.rng)

    def change_direction(self, direction: Direction) -> bool:
        """Queue a turn for the next tick unless it reverses the snake."""
        allowed = not self.snake.direction.is_opposite(direction)
        if allowed:
            self.last_direction = direction
        return allowed

    def clone(self) -> GameState:
        """An independent copy whose snake can be changed freely."""
        copy = GameState.__new__(GameState)
        copy.__dict__.update(self.__dict__)
        copy.snake = self.snake.clone()
        return copy