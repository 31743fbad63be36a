"""
view.py — View layer.

Two entry points with different cadences:
    render(game)   — redraw the board surface; the game calls this after
                     every tick and every reset
    present(game)  — compose board + HUD + state overlay and flip;
                     the app calls this once per display frame

Board size follows the grid: cells shrink so the longer edge fits
BOARD_MAX pixels, capped at MAX_CELL.
"""

import math
import pygame

from .config import (
    PANEL_H, BOARD_MAX, MAX_CELL, MARGIN,
    BG, GRID_COL, HEAD_COL, HEAD_EDGE, BODY_COL, BODY_EDGE,
    FOOD_COL, FOOD_EDGE, FOOD_SHINE,
    UI_COL, TEXT_COL, PANEL_BG, BORDER_COL, OVERLAY_BG, WHITE,
    STATE_READY, STATE_PAUSED, STATE_OVER,
)


def cell_size_for(grid_width: int, grid_height: int) -> int:
    return max(1, min(MAX_CELL, BOARD_MAX // max(grid_width, grid_height)))


def window_size(grid_width: int, grid_height: int) -> tuple[int, int]:
    """Pixel size of the whole window for a grid."""
    cell = cell_size_for(grid_width, grid_height)
    board_w, board_h = cell * grid_width, cell * grid_height
    return max(board_w, 320) + 2 * MARGIN, board_h + PANEL_H + 2 * MARGIN


# ─────────────────────── colour helpers ──────────────────────────
def _lerp_color(c1: tuple, c2: tuple, t: float) -> tuple:
    t = max(0.0, min(1.0, t))
    return tuple(int(c1[i] + (c2[i] - c1[i]) * t) for i in range(3))


def _with_alpha(color: tuple, alpha: int) -> tuple:
    return (*color[:3], max(0, min(255, alpha)))


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the game from a GameController snapshot."""

    # ── Construction ─────────────────────────────────────────────
    def __init__(self, screen: pygame.Surface, grid_width: int, grid_height: int):
        self.screen = screen
        self.grid_width = grid_width
        self.grid_height = grid_height
        self.cell = cell_size_for(grid_width, grid_height)
        self.board_w = self.cell * grid_width
        self.board_h = self.cell * grid_height
        self.offset_x = (screen.get_width() - self.board_w) // 2
        self.offset_y = PANEL_H + MARGIN

        self._init_fonts()
        self._grid_surf = self._build_grid_surface()
        self._board = pygame.Surface((self.board_w, self.board_h))
        self._board.blit(self._grid_surf, (0, 0))
        self._anim_tick: int = 0

    # ── Main entries ─────────────────────────────────────────────
    def render(self, game) -> None:
        self._board.blit(self._grid_surf, (0, 0))
        self._draw_snake(game.snake.body)
        self._draw_food(game.food.position)

    def present(self, game) -> None:
        self._anim_tick += 1
        self.screen.fill(PANEL_BG)
        self.screen.blit(self._board, (self.offset_x, self.offset_y))
        pygame.draw.rect(self.screen, BORDER_COL,
                         (self.offset_x - 1, self.offset_y - 1,
                          self.board_w + 2, self.board_h + 2), 1)
        self._draw_panel(game)

        if game.state == STATE_READY:
            self._draw_overlay("SNAKE", HEAD_COL,
                               ["PRESS SPACE TO START",
                                "ARROWS MOVE   P PAUSE   R RESTART",
                                "1-3 DIFFICULTY   G GRID SIZE"])
        elif game.state == STATE_PAUSED:
            self._draw_overlay("PAUSED", FOOD_COL, ["PRESS SPACE TO CONTINUE"])
        elif game.state == STATE_OVER:
            lines = [f"FINAL SCORE: {game.score}"]
            if game.new_high_score:
                lines.append("NEW HIGH SCORE")
            lines.append("PRESS R TO PLAY AGAIN")
            self._draw_overlay("GAME OVER", FOOD_EDGE, lines)

        pygame.display.flip()

    # ── Static surface pre-builds ─────────────────────────────────
    def _build_grid_surface(self) -> pygame.Surface:
        surf = pygame.Surface((self.board_w, self.board_h))
        surf.fill(BG)
        for x in range(self.grid_width + 1):
            pygame.draw.line(surf, GRID_COL, (x * self.cell, 0), (x * self.cell, self.board_h))
        for y in range(self.grid_height + 1):
            pygame.draw.line(surf, GRID_COL, (0, y * self.cell), (self.board_w, y * self.cell))
        return surf

    # ── Board contents ───────────────────────────────────────────
    def _draw_snake(self, body) -> None:
        c = self.cell
        for i, (sx, sy) in enumerate(body):
            rect = pygame.Rect(sx * c + 1, sy * c + 1, c - 2, c - 2)
            if rect.width <= 0:
                continue
            if i == 0:
                pygame.draw.rect(self._board, HEAD_COL, rect)
                pygame.draw.rect(self._board, HEAD_EDGE, rect, 2)
            else:
                pygame.draw.rect(self._board, BODY_COL, rect)
                pygame.draw.rect(self._board, BODY_EDGE, rect, 1)

    def _draw_food(self, food: tuple[int, int]) -> None:
        c = self.cell
        x, y = food[0] * c, food[1] * c
        rect = pygame.Rect(x + 2, y + 2, max(1, c - 4), max(1, c - 4))
        pygame.draw.rect(self._board, FOOD_COL, rect)
        pygame.draw.rect(self._board, FOOD_EDGE, rect, 2)
        # highlight
        pygame.draw.rect(self._board, FOOD_SHINE, (x + 4, y + 4, 3, 3))

    # ── HUD Panel ─────────────────────────────────────────────────
    def _draw_panel(self, game) -> None:
        width = self.screen.get_width()
        pygame.draw.line(self.screen, BORDER_COL, (0, PANEL_H - 1), (width, PANEL_H - 1), 1)

        self.screen.blit(self.font_small.render("SCORE", True, UI_COL), (16, 6))
        self.screen.blit(self.font_big.render(str(game.score), True, TEXT_COL), (16, 24))

        best = self.font_small.render("BEST", True, UI_COL)
        self.screen.blit(best, (width - 16 - best.get_width(), 6))
        hs = self.font_big.render(str(game.high_score), True, TEXT_COL)
        self.screen.blit(hs, (width - 16 - hs.get_width(), 24))

        diff = self.font_small.render(game.diff_config["label"], True, FOOD_EDGE)
        self.screen.blit(diff, diff.get_rect(center=(width // 2, 16)))
        status = self.font_tiny.render(
            f"{game.status_text}   {game.grid_width}x{game.grid_height}", True, UI_COL,
        )
        self.screen.blit(status, status.get_rect(center=(width // 2, 38)))

    # ── Overlays ──────────────────────────────────────────────────
    def _draw_overlay(self, title: str, color: tuple, lines: list[str]) -> None:
        surf = pygame.Surface((self.board_w, self.board_h), pygame.SRCALPHA)
        surf.fill(_with_alpha(OVERLAY_BG, 170))
        self.screen.blit(surf, (self.offset_x, self.offset_y))

        cx = self.offset_x + self.board_w // 2
        cy = self.offset_y + self.board_h // 2 - 20 * len(lines)

        pulse = 0.85 + 0.15 * math.sin(self._anim_tick * 0.05)
        title_surf = self.font_title.render(title, True, _lerp_color(color, WHITE, 1 - pulse))
        self.screen.blit(title_surf, title_surf.get_rect(center=(cx, cy)))
        cy += title_surf.get_height()

        for text in lines:
            line = self.font_small.render(text, True, WHITE)
            self.screen.blit(line, line.get_rect(center=(cx, cy)))
            cy += line.get_height() + 8

    # ── Font init ─────────────────────────────────────────────────
    def _init_fonts(self) -> None:
        specs = [
            ("font_title", "courier", 36, True),
            ("font_big",   "courier", 24, True),
            ("font_small", "courier", 13, True),
            ("font_tiny",  "courier", 11, False),
        ]
        for attr, name, size, bold in specs:
            try:
                setattr(self, attr, pygame.font.SysFont(name, size, bold=bold))
            except Exception:
                setattr(self, attr, pygame.font.SysFont(None, size))
