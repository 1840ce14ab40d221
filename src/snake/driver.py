# driver.py
from __future__ import annotations

import logging
from typing import Optional

import pygame  # type: ignore

from .game import GameEngine

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class TickDriver:
    """
    Fires TICK_EVENT every tick_ms through pygame's timer and turns each one
    into engine.advance(). The driver holds the engine itself, so a re-armed
    timer always advances the live state.
    """

    def __init__(self, engine: GameEngine, tick_ms: Optional[int] = None):
        self.engine = engine
        self.tick_ms = tick_ms if tick_ms is not None else engine.cfg.tick_ms
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        self.running = False

    def start(self) -> None:
        pygame.time.set_timer(TICK_EVENT, self.tick_ms)
        self.running = True
        logger.debug("Tick timer armed every %d ms", self.tick_ms)

    def stop(self) -> None:
        # A zero interval cancels the timer.
        pygame.time.set_timer(TICK_EVENT, 0)
        self.running = False
        logger.debug("Tick timer cancelled")

    def restart(self, tick_ms: Optional[int] = None) -> None:
        self.stop()
        if tick_ms is not None:
            if tick_ms <= 0:
                raise ValueError(f"tick_ms must be positive, got {tick_ms}")
            self.tick_ms = tick_ms
        self.start()

    def handle(self, event: pygame.event.Event) -> bool:
        """Advance on our own tick events. Returns True if the event was consumed."""
        if event.type != TICK_EVENT:
            return False
        if self.running:
            self.engine.advance()
        return True

    def __enter__(self) -> "TickDriver":
        self.start()
        return self

    def __exit__(self, *exc) -> None:
        self.stop()
