"""
config.py — Shared constants for the entire application.
No logic beyond input validation, no imports from internal modules.
"""

import os

# ── Window & Grid ─────────────────────────────────────────────────
PANEL_H          = 60
BOARD_MAX        = 600     # largest board edge in pixels
MAX_CELL         = 20
MARGIN           = 10
FPS              = 60

MIN_GRID_SIZE     = 10
MAX_GRID_SIZE     = 50
DEFAULT_GRID_SIZE = 20
GRID_PRESETS      = (10, 15, 20, 25, 30)

# ── Colors ────────────────────────────────────────────────────────
BG          = (245, 245, 245)
GRID_COL    = (224, 224, 224)
HEAD_COL    = (46,  125, 50)
HEAD_EDGE   = (27,  94,  32)
BODY_COL    = (76,  175, 80)
BODY_EDGE   = (56,  142, 60)
FOOD_COL    = (244, 67,  54)
FOOD_EDGE   = (211, 47,  47)
FOOD_SHINE  = (255, 205, 210)
UI_COL      = (90,  90,  110)
TEXT_COL    = (33,  33,  33)
PANEL_BG    = (250, 250, 252)
BORDER_COL  = (200, 200, 210)
OVERLAY_BG  = (20,  20,  28)
WHITE       = (255, 255, 255)

# ── Gameplay ──────────────────────────────────────────────────────
INITIAL_LENGTH = 3
SCORE_PER_FOOD = 10

# Tick interval in milliseconds per difficulty
DIFFICULTIES = {
    "easy":   {"label": "EASY",   "interval": 200},
    "medium": {"label": "MEDIUM", "interval": 150},
    "hard":   {"label": "HARD",   "interval": 100},
}
DEFAULT_DIFFICULTY = "medium"

# ── Game States ───────────────────────────────────────────────────
STATE_READY   = "ready"
STATE_PLAYING = "playing"
STATE_PAUSED  = "paused"
STATE_OVER    = "game-over"

STATUS_TEXT = {
    STATE_READY:   "READY",
    STATE_PLAYING: "PLAYING",
    STATE_PAUSED:  "PAUSED",
    STATE_OVER:    "GAME OVER",
}

# ── Persistence ───────────────────────────────────────────────────
HIGHSCORE_FILE = os.path.join(os.path.expanduser("~"), ".classic_snake", "highscore.json")
HIGHSCORE_KEY  = "high_score"


def valid_grid_size_or(value, fallback: int) -> int:
    """Return ``value`` if it is a usable grid edge, otherwise ``fallback``.

    Out-of-range input is ignored rather than forced to the nearest bound.
    """
    try:
        size = int(value)
    except (TypeError, ValueError):
        return fallback
    if MIN_GRID_SIZE <= size <= MAX_GRID_SIZE:
        return size
    return fallback
