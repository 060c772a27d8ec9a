"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling.
Every rule is a pure function that takes a GameState and returns the next
one; scheduling and drawing live elsewhere.

Types:
    Direction   — immutable (x, y) unit vector
    GameState   — immutable snapshot: snake, directions, food, score, phase

Transitions:
    new_game / reset   — canonical starting state with fresh food
    tick               — advance the snake one cell
    apply_input        — steer (and start from idle) from a key name
    start              — leave idle without steering
    toggle_pause       — playing <-> paused
"""

import random
from typing import NamedTuple

from .config import (
    GRID_SIZE, FOOD_REWARD, INITIAL_SNAKE, INITIAL_DIR, MOVE_KEYS,
    PHASE_IDLE, PHASE_PLAYING, PHASE_PAUSED, PHASE_OVER,
)

Cell = tuple[int, int]


# ─────────────────────────── Direction ───────────────────────────
class Direction(NamedTuple):
    """Immutable 2-D unit direction."""
    x: int
    y: int

    def is_opposite(self, other: "Direction") -> bool:
        return self.x == -other[0] and self.y == -other[1]

    def __repr__(self):
        return f"Direction({self.x}, {self.y})"


# ─────────────────────────── GameState ───────────────────────────
class GameState(NamedTuple):
    """
    A snapshot of the game.

    snake is head first. direction is the one the last tick moved in;
    pending is what the next tick will use.
    """
    snake: tuple[Cell, ...]
    direction: Direction
    pending: Direction
    food: Cell
    score: int
    phase: str

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

    def occupies(self, cell: Cell) -> bool:
        return cell in self.snake


# ─────────────────────────── Rules ───────────────────────────────
def in_bounds(cell: Cell) -> bool:
    x, y = cell
    return 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE


def spawn_food(rng: random.Random = random) -> Cell:
    """Uniform cell anywhere on the board; the snake is not avoided."""
    return (rng.randrange(GRID_SIZE), rng.randrange(GRID_SIZE))


def new_game(rng: random.Random = random) -> GameState:
    return GameState(
        snake=tuple(INITIAL_SNAKE),
        direction=Direction(*INITIAL_DIR),
        pending=Direction(*INITIAL_DIR),
        food=spawn_food(rng),
        score=0,
        phase=PHASE_IDLE,
    )


def reset(rng: random.Random = random) -> GameState:
    """Back to the idle starting state, whatever phase we were in."""
    return new_game(rng)


def key_to_direction(key: str) -> Direction | None:
    """Map a key name such as "w" or "ArrowUp" to a Direction."""
    if not isinstance(key, str):
        return None
    vec = MOVE_KEYS.get(key.lower())
    return Direction(*vec) if vec else None


def collides(state: GameState, cell: Cell) -> str | None:
    """Return "wall" or "self" if moving the head to cell would be fatal."""
    if not in_bounds(cell):
        return "wall"
    if state.occupies(cell):
        return "self"
    return None


def tick(state: GameState, rng: random.Random = random) -> GameState:
    """Advance one cell. A no-op unless the game is playing."""
    if state.phase != PHASE_PLAYING:
        return state

    direction = state.pending
    hx, hy = state.head
    new_head = (hx + direction.x, hy + direction.y)

    if collides(state, new_head):
        return state._replace(phase=PHASE_OVER)

    if new_head == state.food:
        return state._replace(
            snake=(new_head,) + state.snake,
            direction=direction,
            score=state.score + FOOD_REWARD,
            food=spawn_food(rng),
        )

    return state._replace(
        snake=(new_head,) + state.snake[:-1],
        direction=direction,
    )


def apply_input(state: GameState, key: str) -> GameState:
    """
    Steer from a key name.

    The first movement key in idle starts the game and steers on the same
    event. Reversals are dropped, as is everything while paused or over.
    """
    new_dir = key_to_direction(key)
    if new_dir is None or state.phase in (PHASE_OVER, PHASE_PAUSED):
        return state

    if state.phase == PHASE_IDLE:
        if new_dir.is_opposite(state.direction):
            return state._replace(phase=PHASE_PLAYING)
        return state._replace(
            phase=PHASE_PLAYING, direction=new_dir, pending=new_dir,
        )

    if new_dir.is_opposite(state.direction):
        return state
    return state._replace(pending=new_dir)


def start(state: GameState) -> GameState:
    if state.phase == PHASE_IDLE:
        return state._replace(phase=PHASE_PLAYING)
    return state


def toggle_pause(state: GameState) -> GameState:
    if state.phase == PHASE_PLAYING:
        return state._replace(phase=PHASE_PAUSED)
    if state.phase == PHASE_PAUSED:
        return state._replace(phase=PHASE_PLAYING)
    return state
