import pygame
import pytest

import snake.main as game_main
from snake.config import Config, UP
from snake.driver import TICK_EVENT
from snake.game import GameEngine
from snake.main import main, parse_args


def test_defaults():
    args = parse_args([])
    assert args.tick_ms == 150
    assert args.seed is None
    assert args.log_level == "INFO"


def test_overrides():
    args = parse_args(["--seed", "4", "--tick-ms", "90", "--log-level", "DEBUG"])
    assert (args.seed, args.tick_ms, args.log_level) == (4, 90, "DEBUG")


@pytest.mark.parametrize("value", ["0", "-5", "fast"])
def test_bad_tick_is_a_usage_error(value, capsys):
    with pytest.raises(SystemExit) as exc:
        parse_args(["--tick-ms", value])
    assert exc.value.code == 2
    assert "--tick-ms" in capsys.readouterr().err


@pytest.mark.parametrize("kwargs", [{"tick_ms": 0}, {"tick_ms": -5}, {"grid_size": 0}, {"grid_size": 401}])
def test_config_rejects_bad_values(kwargs):
    with pytest.raises(ValueError):
        Config(**kwargs)


def test_game_loop_serializes_events_and_tears_down(monkeypatch):
    engines = []

    def make_engine(cfg):
        engine = GameEngine(cfg)
        engines.append(engine)
        return engine

    batches = [
        [pygame.event.Event(TICK_EVENT), pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP)],
        [pygame.event.Event(pygame.QUIT)],
    ]
    timer_calls = []
    quit_calls = []
    real_quit = pygame.quit

    monkeypatch.setattr(game_main, "GameEngine", make_engine)
    monkeypatch.setattr(pygame.event, "get", lambda: batches.pop(0) if batches else [])
    monkeypatch.setattr(pygame.time, "set_timer", lambda event, ms: timer_calls.append((event, ms)))
    monkeypatch.setattr(pygame, "quit", lambda: (quit_calls.append(True), real_quit()))

    main(["--seed", "1", "--tick-ms", "120"])

    (engine,) = engines
    snap = engine.snapshot()
    assert snap.head == (11, 10)
    assert engine.state.pending == UP
    assert snap.direction != UP  # the turn waits for the next tick
    assert timer_calls == [(TICK_EVENT, 120), (TICK_EVENT, 0)]
    assert quit_calls == [True]
