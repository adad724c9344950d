"""Autopilot: chooses the snake's next direction."""

from __future__ import annotations

import heapq
from collections import deque
from itertools import count
from typing import Callable, Hashable, Iterable, Optional, TypeVar

from snakepilot.game import Coordinates, Direction, GameState

Node = TypeVar("Node", bound=Hashable)

_SEARCH_ORDER = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)
_FALLBACK_ORDER = (Direction.RIGHT, Direction.LEFT, Direction.UP, Direction.DOWN)


def astar(
    start: Node,
    successors: Callable[[Node], Iterable[tuple[Node, int]]],
    heuristic: Callable[[Node], int],
    is_goal: Callable[[Node], bool],
) -> Optional[tuple[list[Node], int]]:
    """Shortest path by A*; returns (path including start, total cost) or None."""
    tie = count()
    best_cost = {start: 0}
    parents: dict = {start: None}
    # Lowest estimate first; among equal estimates, the deeper node first.
    frontier = [(heuristic(start), 0, next(tie), start)]

    while frontier:
        _, neg_cost, _, node = heapq.heappop(frontier)
        cost = -neg_cost
        if is_goal(node):
            path = [node]
            while (parent := parents[path[-1]]) is not None:
                path.append(parent)
            path.reverse()
            return path, cost
        if cost > best_cost[node]:
            continue
        for neighbour, step in successors(node):
            new_cost = cost + step
            if neighbour not in best_cost or new_cost < best_cost[neighbour]:
                best_cost[neighbour] = new_cost
                parents[neighbour] = node
                heapq.heappush(
                    frontier,
                    (new_cost + heuristic(neighbour), -new_cost, next(tie), neighbour),
                )
    return None


def _distance(a: Coordinates, b: Coordinates) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def _open_neighbours(
    pos: Coordinates, state: GameState, ignore_tail: bool
) -> list[tuple[Coordinates, int]]:
    return [
        (nxt, 1)
        for nxt in (pos.moved(d) for d in _SEARCH_ORDER)
        if not state.is_collision(nxt, ignore_tail)
    ]


def _search(
    start: Coordinates, goal: Coordinates, state: GameState, ignore_tail: bool
) -> Optional[list[Coordinates]]:
    result = astar(
        start,
        lambda p: _open_neighbours(p, state, ignore_tail),
        lambda p: _distance(p, goal),
        lambda p: p == goal,
    )
    return result[0] if result is not None else None


def direction_between(
    origin: Coordinates, target: Coordinates
) -> Optional[Direction]:
    """The direction from ``origin`` towards ``target``; x is decided first."""
    if target.x < origin.x:
        return Direction.LEFT
    if target.x > origin.x:
        return Direction.RIGHT
    if target.y < origin.y:
        return Direction.UP
    if target.y > origin.y:
        return Direction.DOWN
    return None


def count_reachable_space(start: Coordinates, state: GameState) -> int:
    """Number of free cells reachable from ``start``, the tail counting as free."""
    if state.is_collision(start, True):
        return 0
    seen = {start}
    queue = deque([start])
    while queue:
        pos = queue.popleft()
        for nxt in (pos.moved(d) for d in _SEARCH_ORDER):
            if nxt not in seen and not state.is_collision(nxt, True):
                seen.add(nxt)
                queue.append(nxt)
    return len(seen)


def _first_step(path: Optional[list[Coordinates]], head: Coordinates) -> Optional[Direction]:
    if path is not None and len(path) > 1:
        return direction_between(head, path[1])
    return None


def find_path(state: GameState) -> Direction:
    """Pick the next direction and record the reasoning on ``state``.

    Strategies, in order: a path to the food that still leaves a way to the
    tail afterwards; a path to the tail; the safe move with the most room;
    otherwise the current direction.
    """
    head = state.snake.head
    state.path_to_food_found = False
    state.path_to_tail_found = False
    state.path_to_tail_after_eat_found = False
    state.is_trapped = False
    state.ai_strategy = "Fallback"

    food_path = _search(head, state.food.position, state, False)
    if food_path is not None:
        state.path_to_food_found = True
        future = state.clone()
        future.snake.body.appendleft(state.food.position)
        escape = _search(future.snake.head, future.snake.tail, future, True)
        if escape is not None:
            state.path_to_tail_after_eat_found = True
            direction = _first_step(food_path, head)
            if direction is not None:
                state.ai_strategy = "Food"
                return direction

    tail_path = _search(head, state.snake.tail, state, True)
    if tail_path is not None:
        state.path_to_tail_found = True
        direction = _first_step(tail_path, head)
        if direction is not None:
            state.ai_strategy = "Tail"
            return direction

    def room_after(direction: Direction) -> int:
        nxt = head.moved(direction)
        trial = state.clone()
        trial.snake.body.appendleft(nxt)
        if not trial.snake.digesting:
            trial.snake.body.pop()
        return count_reachable_space(nxt, trial)

    safe = [d for d in _FALLBACK_ORDER if not state.is_collision(head.moved(d), False)]
    if safe:
        # Among equally roomy moves the last candidate wins.
        state.ai_strategy = "Space-Fill"
        return max(reversed(safe), key=room_after)

    state.is_trapped = True
    state.ai_strategy = "Trapped Fallback"
    return state.snake.direction