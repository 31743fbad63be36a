"""
app.py — Application layer.

Responsibilities:
  - Own the pygame window, clock and event loop.
  - Translate raw keyboard events into GameController commands.
  - Pump the frame scheduler with pygame's millisecond clock.
  - Rebuild the window and view when the grid size changes.
  - Know nothing about game rules (that's the GameController's job).
  - Know nothing about drawing details (that's the View's job).

This is the only module besides view.py that imports pygame.
"""

import logging
import sys

import pygame

from .config import (
    FPS, DEFAULT_DIFFICULTY, DEFAULT_GRID_SIZE, GRID_PRESETS,
    STATE_READY, STATE_PLAYING, STATE_PAUSED, STATE_OVER,
    valid_grid_size_or,
)
from .game import GameController
from .model import Direction
from .scheduler import FrameScheduler
from .view import GameView, window_size

logger = logging.getLogger(__name__)

DIRECTION_KEYS = {
    pygame.K_UP:    Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w:     Direction.UP,
    pygame.K_s:     Direction.DOWN,
    pygame.K_a:     Direction.LEFT,
    pygame.K_d:     Direction.RIGHT,
}

DIFFICULTY_KEYS = {
    pygame.K_1: "easy",
    pygame.K_2: "medium",
    pygame.K_3: "hard",
}


class SnakeApp:
    """
    Owns the main loop.
    Glues GameController <-> GameView without them knowing about each other.
    """

    def __init__(
        self,
        grid_width: int = DEFAULT_GRID_SIZE,
        grid_height: int = DEFAULT_GRID_SIZE,
        difficulty: str = DEFAULT_DIFFICULTY,
        store=None,
        rng=None,
    ):
        pygame.init()
        pygame.display.set_caption("Snake")
        self.clock     = pygame.time.Clock()
        self.scheduler = FrameScheduler()
        self.screen    = pygame.display.set_mode(window_size(grid_width, grid_height))
        self.view      = GameView(self.screen, grid_width, grid_height)
        self.game      = GameController(
            grid_width, grid_height, difficulty,
            renderer=self.view,
            store=store,
            scheduler=self.scheduler,
            rng=rng,
        )
        self.game.reset_game()

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the player quits."""
        logger.info(
            "Starting %dx%d game on %s",
            self.game.grid_width, self.game.grid_height, self.game.difficulty,
        )
        while True:
            self.clock.tick(FPS)
            self._handle_events()
            self.scheduler.pump(pygame.time.get_ticks())
            self.view.present(self.game)

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)

    def _handle_keydown(self, key: int) -> None:
        # Q / ESC quit from any state
        if key in (pygame.K_q, pygame.K_ESCAPE):
            self._quit()

        state = self.game.state

        if key in DIRECTION_KEYS:
            self.game.change_direction(DIRECTION_KEYS[key])
        elif key == pygame.K_SPACE:
            if state in (STATE_READY, STATE_OVER):
                self.game.start_game()
            elif state in (STATE_PLAYING, STATE_PAUSED):
                self.game.toggle_pause()
        elif key == pygame.K_p:
            self.game.toggle_pause()
        elif key == pygame.K_RETURN:
            self.game.start_game()
        elif key == pygame.K_r:
            self.game.restart_game()
        elif key in DIFFICULTY_KEYS:
            self.game.set_difficulty(DIFFICULTY_KEYS[key])
        elif key == pygame.K_g and state in (STATE_READY, STATE_OVER):
            self._cycle_grid()

    # ── Settings ──────────────────────────────────────────────────
    def _cycle_grid(self) -> None:
        """Switch to the next square preset after the current width."""
        larger = [size for size in GRID_PRESETS if size > self.game.grid_width]
        size = larger[0] if larger else GRID_PRESETS[0]
        self.set_grid(size, size)

    def set_grid(self, grid_width: int, grid_height: int) -> None:
        """Apply a new grid size; out-of-range edges keep their current value."""
        grid_width = valid_grid_size_or(grid_width, self.game.grid_width)
        grid_height = valid_grid_size_or(grid_height, self.game.grid_height)
        logger.info("Grid size -> %dx%d", grid_width, grid_height)
        self.screen = pygame.display.set_mode(window_size(grid_width, grid_height))
        self.view = GameView(self.screen, grid_width, grid_height)
        self.game.renderer = self.view
        self.game.resize(grid_width, grid_height)

    # ── Utilities ─────────────────────────────────────────────────
    @staticmethod
    def _quit() -> None:
        pygame.quit()
        sys.exit()
