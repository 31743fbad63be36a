import os
import random
from collections import deque

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from classic_snake.app import SnakeApp
from classic_snake.config import (
    STATE_READY, STATE_PLAYING, STATE_PAUSED, STATE_OVER,
)
from classic_snake.model import Direction
from classic_snake.storage import MemoryHighScoreStore
from classic_snake.view import GameView, window_size


@pytest.fixture
def app():
    snake_app = SnakeApp(20, 20, "medium", store=MemoryHighScoreStore(), rng=random.Random(5))
    yield snake_app
    pygame.quit()


def press(app, *keys):
    for key in keys:
        app._handle_keydown(key)


def crash(app, score=30):
    """Drive a running game into the right wall."""
    game = app.game
    if game.state != STATE_PLAYING:
        game.start_game()
    game.snake.body = deque([(19, 0), (18, 0)])
    game.food.position = (0, 19)
    game.score = score
    assert not game.step()
    assert game.state == STATE_OVER


# ── window_size ───────────────────────────────────────────────────
@pytest.mark.parametrize("grid,expected", [
    ((20, 20), (420, 480)),
    ((50, 10), (620, 200)),
    ((10, 10), (340, 280)),
])
def test_window_size(grid, expected):
    assert window_size(*grid) == expected


# ── Construction ──────────────────────────────────────────────────
def test_app_opens_window_for_grid(app):
    assert app.screen.get_size() == window_size(20, 20)
    assert app.game.state == STATE_READY
    assert app.game.renderer is app.view


# ── Space / P / Enter ─────────────────────────────────────────────
def test_space_starts_then_toggles_pause(app):
    press(app, pygame.K_SPACE)
    assert app.game.state == STATE_PLAYING
    press(app, pygame.K_SPACE)
    assert app.game.state == STATE_PAUSED
    press(app, pygame.K_SPACE)
    assert app.game.state == STATE_PLAYING


def test_space_after_game_over_starts_fresh_game(app):
    crash(app, score=40)
    press(app, pygame.K_SPACE)
    assert app.game.state == STATE_PLAYING
    assert app.game.score == 0
    assert app.game.high_score == 40
    assert list(app.game.snake.body) == [(10, 10), (9, 10), (8, 10)]


def test_p_toggles_pause(app):
    press(app, pygame.K_SPACE, pygame.K_p)
    assert app.game.state == STATE_PAUSED
    press(app, pygame.K_p)
    assert app.game.state == STATE_PLAYING


def test_p_does_nothing_when_ready(app):
    press(app, pygame.K_p)
    assert app.game.state == STATE_READY


def test_return_starts(app):
    press(app, pygame.K_RETURN)
    assert app.game.state == STATE_PLAYING


# ── Restart ───────────────────────────────────────────────────────
def test_r_restarts_from_pause(app):
    press(app, pygame.K_SPACE)
    app.game.step()
    app.game.score = 20
    press(app, pygame.K_p, pygame.K_r)
    assert app.game.state == STATE_PLAYING
    assert app.game.score == 0
    assert list(app.game.snake.body) == [(10, 10), (9, 10), (8, 10)]


def test_r_restarts_after_game_over(app):
    crash(app)
    press(app, pygame.K_r)
    assert app.game.state == STATE_PLAYING
    assert app.game.score == 0


# ── Direction keys ────────────────────────────────────────────────
def test_direction_keys_ignored_until_playing(app):
    press(app, pygame.K_UP)
    assert app.game.snake.next_direction == Direction.RIGHT


@pytest.mark.parametrize("key,direction", [
    (pygame.K_UP, Direction.UP),
    (pygame.K_DOWN, Direction.DOWN),
    (pygame.K_w, Direction.UP),
    (pygame.K_s, Direction.DOWN),
])
def test_direction_keys_steer_while_playing(app, key, direction):
    press(app, pygame.K_SPACE, key)
    assert app.game.snake.next_direction == direction


def test_reverse_key_is_ignored(app):
    press(app, pygame.K_SPACE, pygame.K_LEFT)
    assert app.game.snake.next_direction == Direction.RIGHT
    press(app, pygame.K_a)
    assert app.game.snake.next_direction == Direction.RIGHT


# ── Difficulty ────────────────────────────────────────────────────
@pytest.mark.parametrize("key,difficulty,interval", [
    (pygame.K_1, "easy", 200),
    (pygame.K_2, "medium", 150),
    (pygame.K_3, "hard", 100),
])
def test_number_keys_set_difficulty(app, key, difficulty, interval):
    press(app, key)
    assert app.game.difficulty == difficulty
    assert app.game.tick_interval == interval


# ── Grid size ─────────────────────────────────────────────────────
def test_g_cycles_grid_when_ready(app):
    press(app, pygame.K_g)
    assert (app.game.grid_width, app.game.grid_height) == (25, 25)
    assert app.screen.get_size() == window_size(25, 25)
    assert isinstance(app.view, GameView)
    assert app.game.renderer is app.view
    assert app.game.state == STATE_READY


def test_g_cycles_grid_after_game_over(app):
    crash(app)
    press(app, pygame.K_g)
    assert app.game.grid_width == 25
    assert app.game.state == STATE_READY


@pytest.mark.parametrize("keys", [
    (pygame.K_SPACE,),
    (pygame.K_SPACE, pygame.K_p),
])
def test_g_ignored_mid_game(app, keys):
    press(app, *keys)
    state = app.game.state
    press(app, pygame.K_g)
    assert app.game.grid_width == 20
    assert app.game.state == state


def test_grid_cycle_wraps_to_smallest_preset(app):
    app.set_grid(30, 30)
    press(app, pygame.K_g)
    assert (app.game.grid_width, app.game.grid_height) == (10, 10)
    assert app.screen.get_size() == window_size(10, 10)


def test_grid_cycle_from_rectangular_grid_uses_width(app):
    app.set_grid(12, 40)
    press(app, pygame.K_g)
    assert (app.game.grid_width, app.game.grid_height) == (15, 15)


def test_set_grid_keeps_current_edge_when_out_of_range(app):
    app.set_grid(5, 60)
    assert (app.game.grid_width, app.game.grid_height) == (20, 20)
    app.set_grid(40, 60)
    assert (app.game.grid_width, app.game.grid_height) == (40, 20)


# ── Quit ──────────────────────────────────────────────────────────
@pytest.mark.parametrize("key", [pygame.K_q, pygame.K_ESCAPE])
def test_quit_keys_exit(app, key):
    with pytest.raises(SystemExit):
        press(app, key)


# ── GameView ──────────────────────────────────────────────────────
def test_present_draws_every_state(app):
    game = app.game
    app.view.present(game)

    press(app, pygame.K_SPACE)
    app.view.present(game)

    press(app, pygame.K_p)
    app.view.present(game)

    press(app, pygame.K_p)
    crash(app, score=50)
    assert game.new_high_score
    app.view.present(game)


def test_render_paints_snake_head(app):
    game = app.game
    view = app.view
    view.render(game)
    hx, hy = game.snake.head
    centre = (hx * view.cell + view.cell // 2, hy * view.cell + view.cell // 2)
    board = view._board.get_at(centre)
    assert tuple(board)[:3] == (46, 125, 50)


def test_view_centres_small_board(app):
    app.set_grid(10, 10)
    view = app.view
    assert view.cell == 20
    assert view.offset_x == (340 - 200) // 2
