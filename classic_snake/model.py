"""
model.py — Entity layer.

Pure grid data and rules for one snake and one piece of food.
Zero rendering, zero input handling, zero timing.

Classes:
    Direction   — immutable (dx, dy) value object
    Snake       — body, committed direction, one-slot pending direction
    Food        — single position, regenerated off the snake body
"""

import random
from collections import deque
from itertools import islice

from .config import DEFAULT_GRID_SIZE, INITIAL_LENGTH


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction."""
    LEFT  = None  # filled below after class definition
    RIGHT = None
    UP    = None
    DOWN  = None

    __slots__ = ("x", "y")

    def __init__(self, x: int, y: int):
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    def __setattr__(self, name, value):
        raise AttributeError("Direction is immutable")

    def is_opposite(self, other: "Direction") -> bool:
        return self.x == -other.x and self.y == -other.y

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction({self.x}, {self.y})"


Direction.LEFT  = Direction(-1,  0)
Direction.RIGHT = Direction( 1,  0)
Direction.UP    = Direction( 0, -1)
Direction.DOWN  = Direction( 0,  1)


# ──────────────────────────── Snake ──────────────────────────────
class Snake:
    """
    Pure game data for the player's snake.
    No rendering. No input handling.

    ``direction`` is what the last move used; ``next_direction`` buffers a
    single pending turn until the next move commits it.
    """

    def __init__(self, grid_width: int = DEFAULT_GRID_SIZE, grid_height: int = DEFAULT_GRID_SIZE):
        self.grid_width = grid_width
        self.grid_height = grid_height
        self.body: deque[tuple[int, int]] = deque()
        self.direction: Direction = Direction.RIGHT
        self.next_direction: Direction = Direction.RIGHT
        self.reset()

    # ── Accessors ────────────────────────────────────────────────
    @property
    def head(self) -> tuple[int, int]:
        return self.body[0]

    @property
    def tail(self) -> tuple[int, int]:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    # ── Commands ─────────────────────────────────────────────────
    def reset(self, grid_width: int = None, grid_height: int = None) -> None:
        """Re-centre a fresh snake heading right, optionally on a new grid."""
        if grid_width is not None:
            self.grid_width = grid_width
        if grid_height is not None:
            self.grid_height = grid_height

        cx, cy = self.grid_width // 2, self.grid_height // 2
        self.body = deque((cx - i, cy) for i in range(INITIAL_LENGTH))
        self.direction = Direction.RIGHT
        self.next_direction = Direction.RIGHT

    def move(self) -> tuple[int, int]:
        """
        Commit the pending direction and advance one cell.
        Returns the tail position that was dropped.

        The new head may lie outside the grid; check_collision() reports it.
        """
        self.direction = self.next_direction
        hx, hy = self.head
        self.body.appendleft((hx + self.direction.x, hy + self.direction.y))
        return self.body.pop()

    def grow(self) -> None:
        """Duplicate the tail so the last move keeps its old tail cell."""
        self.body.append(self.tail)

    def change_direction(self, new_direction: Direction) -> None:
        """Queue a direction change (ignored if it would reverse the snake)."""
        # Guarded against the committed direction only, so two quick turns
        # inside one tick can still line up a reversal.
        if new_direction.is_opposite(self.direction):
            return
        self.next_direction = new_direction

    # ── Queries ──────────────────────────────────────────────────
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.grid_width and 0 <= y < self.grid_height

    def check_collision(self) -> bool:
        """True if the head left the grid or overlaps another segment."""
        hx, hy = self.head
        if not self.in_bounds(hx, hy):
            return True
        return any(segment == self.head for segment in islice(self.body, 1, None))

    def check_food_collision(self, food: "Food") -> bool:
        return self.head == food.position


# ──────────────────────────── Food ───────────────────────────────
class Food:
    """A single food cell that respawns somewhere off the snake."""

    def __init__(
        self,
        grid_width: int = DEFAULT_GRID_SIZE,
        grid_height: int = DEFAULT_GRID_SIZE,
        rng: random.Random = None,
    ):
        self.grid_width = grid_width
        self.grid_height = grid_height
        self.position: tuple[int, int] = (0, 0)
        self._rng = rng if rng is not None else random.Random()

    def generate(self, snake_body) -> None:
        # Rejection sampling; never returns on a grid the snake fills completely.
        while True:
            pos = (
                self._rng.randrange(self.grid_width),
                self._rng.randrange(self.grid_height),
            )
            if not self.is_on_snake(pos, snake_body):
                self.position = pos
                return

    @staticmethod
    def is_on_snake(position: tuple[int, int], snake_body) -> bool:
        return any(segment == position for segment in snake_body)
