"""
game.py — Game state machine.

Owns score, high score, difficulty and the READY / PLAYING / PAUSED /
GAME_OVER lifecycle, and orchestrates Snake + Food once per tick.
No pygame in here: rendering, persistence and frame timing are injected.

Collaborators (all optional):
    renderer   — object with render(game); called after each tick and reset
    store      — object with load() -> int and save(int)
    scheduler  — object with request_frame(callback) -> handle and cancel(handle)
"""

import logging

from .config import (
    DEFAULT_GRID_SIZE, DEFAULT_DIFFICULTY, DIFFICULTIES, SCORE_PER_FOOD,
    STATE_READY, STATE_PLAYING, STATE_PAUSED, STATE_OVER, STATUS_TEXT,
)
from .model import Direction, Food, Snake
from .storage import MemoryHighScoreStore

logger = logging.getLogger(__name__)


class GameController:
    """
    Top-level game logic for one play session.
    The frame source calls update() with a millisecond clock; the controller
    decides on its own whether it wants another frame.
    """

    def __init__(
        self,
        grid_width: int = DEFAULT_GRID_SIZE,
        grid_height: int = DEFAULT_GRID_SIZE,
        difficulty: str = DEFAULT_DIFFICULTY,
        *,
        renderer=None,
        store=None,
        scheduler=None,
        rng=None,
    ):
        if grid_width < 1 or grid_height < 1:
            raise ValueError(f"grid must be at least 1x1, got {grid_width}x{grid_height}")
        if difficulty not in DIFFICULTIES:
            raise ValueError(f"unknown difficulty {difficulty!r}")

        self.grid_width = grid_width
        self.grid_height = grid_height
        self.difficulty: str = difficulty
        self.renderer = renderer
        self.store = store if store is not None else MemoryHighScoreStore()
        self.scheduler = scheduler
        self._rng = rng

        self.snake: Snake = Snake(grid_width, grid_height)
        self.food: Food = Food(grid_width, grid_height, rng=rng)
        self.score: int = 0
        self.high_score: int = self.store.load()
        self.new_high_score: bool = False
        self.state: str = STATE_READY
        self.last_update_time: int = 0
        self._frame = None

    # ── Read-only views ──────────────────────────────────────────
    @property
    def tick_interval(self) -> int:
        """Milliseconds between simulation steps for the current difficulty."""
        return DIFFICULTIES[self.difficulty]["interval"]

    @property
    def status_text(self) -> str:
        return STATUS_TEXT.get(self.state, "UNKNOWN")

    @property
    def diff_config(self) -> dict:
        return DIFFICULTIES[self.difficulty]

    # ── Input ────────────────────────────────────────────────────
    def change_direction(self, direction: Direction) -> None:
        if self.state == STATE_PLAYING:
            self.snake.change_direction(direction)

    # ── State transitions ────────────────────────────────────────
    def start_game(self) -> None:
        if self.state in (STATE_READY, STATE_OVER):
            self.reset_game()
        self._set_state(STATE_PLAYING)
        self._arm()

    def toggle_pause(self) -> None:
        if self.state == STATE_PLAYING:
            self._set_state(STATE_PAUSED)
            self._disarm()
        elif self.state == STATE_PAUSED:
            self._set_state(STATE_PLAYING)
            self._arm()

    def restart_game(self) -> None:
        self.reset_game()
        self.start_game()

    def reset_game(self) -> None:
        self._disarm()
        self.score = 0
        self.new_high_score = False
        self.snake.reset()
        self.food.generate(self.snake.body)
        self._set_state(STATE_READY)
        self.last_update_time = 0
        self._render()

    def game_over(self) -> None:
        self._disarm()
        self._set_state(STATE_OVER)
        if self.score > self.high_score:
            logger.info("New high score %d (was %d)", self.score, self.high_score)
            self.high_score = self.score
            self.new_high_score = True
            self.store.save(self.high_score)

    # ── Settings ─────────────────────────────────────────────────
    def set_difficulty(self, difficulty: str) -> None:
        """Switch tick speed; applies from the next frame without a reset."""
        if difficulty not in DIFFICULTIES:
            logger.warning("Ignoring unknown difficulty %r", difficulty)
            return
        self.difficulty = difficulty

    def resize(self, grid_width: int, grid_height: int) -> None:
        """Rebuild snake and food for a new grid and go back to READY."""
        if grid_width < 1 or grid_height < 1:
            logger.warning("Ignoring grid size %sx%s", grid_width, grid_height)
            return
        self.grid_width = grid_width
        self.grid_height = grid_height
        self.snake = Snake(grid_width, grid_height)
        self.food = Food(grid_width, grid_height, rng=self._rng)
        self.reset_game()

    # ── Tick loop ────────────────────────────────────────────────
    def update(self, now_ms: int) -> None:
        """Frame callback: step once if a tick interval has elapsed."""
        self._frame = None
        if self.state != STATE_PLAYING:
            return

        if now_ms - self.last_update_time >= self.tick_interval:
            self.last_update_time = now_ms
            if not self.step():
                return

        if self.state == STATE_PLAYING:
            self._arm()

    def step(self) -> bool:
        """
        One simulation step.
        Returns False if the move ended the game.
        """
        self.snake.move()

        if self.snake.check_collision():
            self.game_over()
            return False

        if self.snake.check_food_collision(self.food):
            self.snake.grow()
            self.food.generate(self.snake.body)
            self.score += SCORE_PER_FOOD

        self._render()
        return True

    # ── Private helpers ──────────────────────────────────────────
    def _set_state(self, state: str) -> None:
        if state != self.state:
            logger.debug("State %s -> %s", self.state, state)
        self.state = state

    def _arm(self) -> None:
        if self.scheduler is None:
            return
        # at most one pending frame
        self._disarm()
        self._frame = self.scheduler.request_frame(self.update)

    def _disarm(self) -> None:
        if self._frame is not None and self.scheduler is not None:
            self.scheduler.cancel(self._frame)
        self._frame = None

    def _render(self) -> None:
        if self.renderer is not None:
            self.renderer.render(self)
