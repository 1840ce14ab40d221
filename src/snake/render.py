# render.py
from typing import Optional, Tuple

import pygame  # type: ignore

from .config import (
    WIDTH, HEIGHT, GRID_SIZE, BOARD_PX, BOARD_TOP, MARGIN, PANEL_H,
    BUTTON_W, BUTTON_H,
    BG, BOARD_BG, BOARD_EDGE, HEAD, BODY, RED, TEXT, MUTED, BLUE, GRAY, OVERLAY,
)
from .game import Snapshot

# ---------- Layout ----------
BOARD_RECT = pygame.Rect(MARGIN, BOARD_TOP, BOARD_PX, BOARD_PX)

def pause_button_rect() -> pygame.Rect:
    top = BOARD_RECT.bottom + 16
    return pygame.Rect(WIDTH // 2 - BUTTON_W - 8, top, BUTTON_W, BUTTON_H)

def reset_button_rect() -> pygame.Rect:
    top = BOARD_RECT.bottom + 16
    return pygame.Rect(WIDTH // 2 + 8, top, BUTTON_W, BUTTON_H)

def play_again_rect() -> pygame.Rect:
    rect = pygame.Rect(0, 0, BUTTON_W + 20, BUTTON_H)
    rect.center = (BOARD_RECT.centerx, BOARD_RECT.centery + 30)
    return rect

def pause_label(snapshot: Snapshot) -> str:
    return "Resume" if snapshot.paused else "Pause"

def cell_px(grid_size: int = GRID_SIZE) -> int:
    """Cell edge in pixels so that grid_size cells fit the fixed board."""
    return BOARD_PX // grid_size

def cell_rect(gx: int, gy: int, grid_size: int = GRID_SIZE) -> pygame.Rect:
    # 1px gap on each side so neighbouring segments stay distinguishable
    size = cell_px(grid_size)
    gap = 1 if size > 2 else 0
    return pygame.Rect(
        BOARD_RECT.x + gx * size + gap,
        BOARD_RECT.y + gy * size + gap,
        size - 2 * gap,
        size - 2 * gap,
    )

# ---------- Draw ----------
def draw_board(screen: pygame.Surface, snapshot: Snapshot) -> None:
    """Board, food and snake. Needs no fonts."""
    pygame.draw.rect(screen, BOARD_BG, BOARD_RECT)
    pygame.draw.rect(screen, BOARD_EDGE, BOARD_RECT.inflate(4, 4), width=2, border_radius=6)

    if snapshot.food is not None:
        food = cell_rect(*snapshot.food, snapshot.grid_size)
        pygame.draw.circle(screen, RED, food.center, food.width // 2)

    # head is index 0
    for idx, (x, y) in enumerate(snapshot.snake):
        color = HEAD if idx == 0 else BODY
        pygame.draw.rect(screen, color, cell_rect(x, y, snapshot.grid_size), border_radius=3)

def draw_button(
    screen: pygame.Surface,
    font: pygame.font.Font,
    rect: pygame.Rect,
    label: str,
    color: Tuple[int, int, int],
) -> None:
    pygame.draw.rect(screen, color, rect, border_radius=8)
    txt = font.render(label, True, TEXT)
    screen.blit(txt, txt.get_rect(center=rect.center))

def draw_scores(screen: pygame.Surface, font: pygame.font.Font, snapshot: Snapshot) -> None:
    for label, value, cx in (
        ("Score", snapshot.score, WIDTH // 3),
        ("High Score", snapshot.high_score, 2 * WIDTH // 3),
    ):
        cap = font.render(label, True, MUTED)
        val = font.render(str(value), True, TEXT)
        screen.blit(cap, cap.get_rect(center=(cx, PANEL_H // 2 - 10)))
        screen.blit(val, val.get_rect(center=(cx, PANEL_H // 2 + 12)))

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font) -> None:
    overlay = pygame.Surface(BOARD_RECT.size, pygame.SRCALPHA)
    overlay.fill(OVERLAY)
    screen.blit(overlay, BOARD_RECT.topleft)

    title = font.render("Game Over!", True, TEXT)
    screen.blit(title, title.get_rect(center=(BOARD_RECT.centerx, BOARD_RECT.centery - 16)))
    draw_button(screen, font, play_again_rect(), "Play Again", HEAD)

def draw_game(screen: pygame.Surface, font: pygame.font.Font, snapshot: Snapshot, small: Optional[pygame.font.Font] = None) -> None:
    small = small or font
    screen.fill(BG)
    draw_scores(screen, font, snapshot)
    draw_board(screen, snapshot)
    if snapshot.game_over:
        draw_game_over(screen, font)

    draw_button(screen, font, pause_button_rect(), pause_label(snapshot), BLUE)
    draw_button(screen, font, reset_button_rect(), "Reset", GRAY)

    for i, line in enumerate(("Use arrow keys to move", "Press space to pause/resume")):
        txt = small.render(line, True, MUTED)
        screen.blit(txt, txt.get_rect(center=(WIDTH // 2, HEIGHT - 40 + i * 18)))
