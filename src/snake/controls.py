# controls.py
from typing import Iterable, Tuple

import pygame  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT
from .game import GameEngine
from .render import pause_button_rect, reset_button_rect, play_again_rect

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}
QUIT_KEYS = (pygame.K_ESCAPE,)


def handle_key(engine: GameEngine, key: int) -> None:
    """Arrows turn, space pauses. Everything is dropped once the game is over."""
    if engine.snapshot().game_over:
        return
    if key in KEY_DIRECTIONS:
        engine.set_direction(KEY_DIRECTIONS[key])
    elif key == pygame.K_SPACE:
        engine.toggle_pause()

def handle_click(engine: GameEngine, pos: Tuple[int, int]) -> None:
    snap = engine.snapshot()
    if pause_button_rect().collidepoint(pos):
        engine.toggle_pause()
    elif reset_button_rect().collidepoint(pos):
        engine.reset()
    elif snap.game_over and play_again_rect().collidepoint(pos):
        engine.reset()

def handle_input(engine: GameEngine, events: Iterable[pygame.event.Event]) -> bool:
    """Forward input events to the engine. Return False to quit."""
    for event in events:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key in QUIT_KEYS:
                return False
            handle_key(engine, event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            handle_click(engine, event.pos)
    return True
