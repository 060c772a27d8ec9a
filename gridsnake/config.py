"""
config.py — Shared constants for the entire application.
No logic, no imports from internal modules.
"""

# ── Board ─────────────────────────────────────────────────────────
GRID_SIZE       = 20
CELL            = 20
BOARD_W         = GRID_SIZE * CELL
BOARD_H         = GRID_SIZE * CELL

# ── Window ────────────────────────────────────────────────────────
PANEL_H         = 60
MARGIN          = 12
OFFSET_X        = MARGIN
OFFSET_Y        = PANEL_H + MARGIN
WIDTH           = BOARD_W + 2 * MARGIN
HEIGHT          = OFFSET_Y + BOARD_H + MARGIN
FPS             = 60
CAPTION         = "SNAKE"

# ── Colors ────────────────────────────────────────────────────────
BG          = (8,   12,  20)
GRID_COL    = (22,  34,  52)
SNAKE_HEAD  = (0,   255, 136)
SNAKE_BODY  = (0,   170, 110)
FOOD_COL    = (255, 64,  129)
UI_COL      = (120, 130, 170)
TEXT_COL    = (225, 230, 245)
DANGER_COL  = (255, 82,  82)
BLACK       = (0,   0,   0)
PANEL_BG    = (12,  14,  24)
BORDER_COL  = (40,  90,  120)

# ── Gameplay ──────────────────────────────────────────────────────
TICK_MS         = 150
TICK_SECONDS    = TICK_MS / 1000.0
FOOD_REWARD     = 10
INITIAL_SNAKE   = ((10, 10),)
INITIAL_DIR     = (0, -1)

# Key names are matched lower-cased.
MOVE_KEYS = {
    "w":          (0, -1),
    "arrowup":    (0, -1),
    "s":          (0,  1),
    "arrowdown":  (0,  1),
    "a":          (-1, 0),
    "arrowleft":  (-1, 0),
    "d":          (1,  0),
    "arrowright": (1,  0),
}

# ── Game Phases ───────────────────────────────────────────────────
PHASE_IDLE    = "idle"
PHASE_PLAYING = "playing"
PHASE_PAUSED  = "paused"
PHASE_OVER    = "over"
