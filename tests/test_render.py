import pygame

from snake.config import WIDTH, HEIGHT, BOARD_BG, HEAD, BODY, RED, Config, RIGHT
from snake.game import GameEngine, Snapshot
from snake.render import (
    BOARD_RECT,
    cell_rect,
    draw_board,
    pause_button_rect,
    pause_label,
    play_again_rect,
    reset_button_rect,
)


def snap(**kw):
    base = dict(
        snake=((5, 5), (4, 5)),
        food=(10, 2),
        direction=RIGHT,
        score=0,
        high_score=0,
        game_over=False,
        paused=False,
    )
    base.update(kw)
    return Snapshot(**base)


def color_at(surface, cell):
    return tuple(surface.get_at(cell_rect(*cell).center))[:3]


def test_pause_label_mirrors_state():
    assert pause_label(snap()) == "Pause"
    assert pause_label(snap(paused=True)) == "Resume"


def test_buttons_do_not_overlap_board_or_each_other():
    window = pygame.Rect(0, 0, WIDTH, HEIGHT)
    pause, reset = pause_button_rect(), reset_button_rect()
    assert window.contains(pause) and window.contains(reset)
    assert not pause.colliderect(reset)
    assert not pause.colliderect(BOARD_RECT)
    assert BOARD_RECT.contains(play_again_rect())


def test_board_draws_head_body_and_food():
    surface = pygame.Surface((WIDTH, HEIGHT))
    draw_board(surface, snap())
    assert color_at(surface, (5, 5)) == HEAD
    assert color_at(surface, (4, 5)) == BODY
    assert color_at(surface, (10, 2)) == RED
    assert color_at(surface, (0, 0)) == BOARD_BG


def test_board_without_food():
    surface = pygame.Surface((WIDTH, HEIGHT))
    draw_board(surface, snap(food=None))
    assert color_at(surface, (10, 2)) == BOARD_BG


def test_larger_grid_stays_on_the_board():
    assert cell_rect(29, 29, 30).right <= BOARD_RECT.right
    assert cell_rect(29, 29, 30).bottom <= BOARD_RECT.bottom
    assert not cell_rect(29, 29, 30).colliderect(pause_button_rect())


def test_board_follows_snapshot_grid_size():
    surface = pygame.Surface((WIDTH, HEIGHT))
    draw_board(surface, snap(snake=((29, 29), (28, 29)), food=(0, 0), grid_size=30))
    assert tuple(surface.get_at(cell_rect(29, 29, 30).center))[:3] == HEAD
    assert tuple(surface.get_at(cell_rect(0, 0, 30).center))[:3] == RED


def test_engine_snapshot_carries_grid_size():
    assert GameEngine(Config(seed=0, grid_size=30)).snapshot().grid_size == 30
