from __future__ import annotations
from dataclasses import dataclass

# ----- Grid -----
GRID_SIZE = 20
CELL_SIZE = 20
BOARD_PX = GRID_SIZE * CELL_SIZE

# ----- Window layout (board sits between the score panel and the buttons) -----
MARGIN = 20
PANEL_H = 60
FOOTER_H = 110
WIDTH = BOARD_PX + 2 * MARGIN
HEIGHT = PANEL_H + BOARD_PX + FOOTER_H
BOARD_TOP = PANEL_H

BUTTON_W, BUTTON_H = 120, 36

# ----- Colors -----
BG         = (17, 24, 39)
BOARD_BG   = (31, 41, 55)
BOARD_EDGE = (55, 65, 81)
HEAD       = (34, 197, 94)
BODY       = (74, 222, 128)
RED        = (239, 68, 68)
TEXT       = (243, 244, 246)
MUTED      = (156, 163, 175)
BLUE       = (59, 130, 246)
GRAY       = (107, 114, 128)
OVERLAY    = (0, 0, 0, 190)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)
DIRECTION_NAMES = {UP: "UP", DOWN: "DOWN", LEFT: "LEFT", RIGHT: "RIGHT"}

# ----- Initial run -----
START_DIRECTION = RIGHT

# ----- Tunables -----
@dataclass
class Config:
    seed: int | None = None
    tick_ms: int = 150
    food_points: int = 10
    grid_size: int = GRID_SIZE
    fps: int = 60

    def __post_init__(self):
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if not 1 <= self.grid_size <= BOARD_PX:
            raise ValueError(f"grid_size must be between 1 and {BOARD_PX}, got {self.grid_size}")

CFG = Config()
