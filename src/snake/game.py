# game.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Tuple
import logging
import threading

import numpy as np  # type: ignore

from .config import CFG, Config, GRID_SIZE, DIRECTIONS, DIRECTION_NAMES, START_DIRECTION

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]
Direction = Tuple[int, int]


class Phase(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


# ---------- Rules (pure) ----------
def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def next_head(head: Cell, direction: Direction) -> Cell:
    return (head[0] + direction[0], head[1] + direction[1])

def hits_wall(cell: Cell, grid_size: int) -> bool:
    return not (0 <= cell[0] < grid_size and 0 <= cell[1] < grid_size)

def hits_self(cell: Cell, snake: List[Cell]) -> bool:
    """Compare against every segment of the pre-move snake, tail included."""
    return cell in snake

def check_collision(cell: Cell, snake: List[Cell], grid_size: int) -> Optional[str]:
    """Return "wall", "self" or None."""
    if hits_wall(cell, grid_size):
        return "wall"
    if hits_self(cell, snake):
        return "self"
    return None

def occupancy_grid(snake: List[Cell], grid_size: int) -> np.ndarray:
    """Boolean [y, x] mask of cells covered by the snake."""
    grid = np.zeros((grid_size, grid_size), dtype=bool)
    if snake:
        xs, ys = zip(*snake)
        grid[list(ys), list(xs)] = True
    return grid

def spawn_food(snake: List[Cell], rng: np.random.Generator, grid_size: int = CFG.grid_size) -> Optional[Cell]:
    """
    Pick a uniformly random free cell.
    Samples the complement of the snake, so it always terminates; returns None
    only when the snake covers the whole grid.
    """
    free = np.flatnonzero(~occupancy_grid(snake, grid_size))
    if free.size == 0:
        return None
    y, x = divmod(int(rng.choice(free)), grid_size)
    return (x, y)


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    direction: Direction
    pending: Direction             # applied on the next advance
    food: Optional[Cell]
    score: int = 0
    high_score: int = 0
    game_over: bool = False
    paused: bool = False

@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the renderer."""
    snake: Tuple[Cell, ...]
    food: Optional[Cell]
    direction: Direction
    score: int
    high_score: int
    game_over: bool
    paused: bool
    grid_size: int = GRID_SIZE

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def phase(self) -> Phase:
        if self.game_over:
            return Phase.GAME_OVER
        if self.paused:
            return Phase.PAUSED
        return Phase.RUNNING

def new_game_state(rng: np.random.Generator, grid_size: int = CFG.grid_size, high_score: int = 0) -> GameState:
    snake = [(grid_size // 2, grid_size // 2)]
    return GameState(
        snake=snake,
        direction=START_DIRECTION,
        pending=START_DIRECTION,
        food=spawn_food(snake, rng, grid_size),
        high_score=high_score,
    )


# ---------- Engine ----------
@dataclass
class GameEngine:
    """
    Owns the GameState and applies one rule set per advance().

    Every public method takes the same lock, so ticks and input commands never
    interleave even when they come from different threads.
    """
    cfg: Config = field(default_factory=Config)
    rng: Optional[np.random.Generator] = None

    def __post_init__(self):
        if self.rng is None:
            self.rng = np.random.default_rng(self.cfg.seed)
        self._lock = threading.Lock()
        self.state = new_game_state(self.rng, self.cfg.grid_size)

    # ----- Input commands -----
    def set_direction(self, direction: Direction) -> None:
        """Queue a turn for the next advance; reversals and game-over input are ignored."""
        with self._lock:
            s = self.state
            if s.game_over or direction not in DIRECTIONS:
                return
            if is_opposite(direction, s.direction):
                return
            if direction != s.pending:
                logger.debug("Direction queued: %s", DIRECTION_NAMES[direction])
            s.pending = direction

    def toggle_pause(self) -> None:
        # Flipping while over is harmless: advance() checks game_over first and reset() clears it.
        with self._lock:
            self.state.paused = not self.state.paused
            logger.debug("Paused" if self.state.paused else "Resumed")

    def reset(self) -> None:
        with self._lock:
            self.state = new_game_state(self.rng, self.cfg.grid_size, high_score=self.state.high_score)
            logger.info("New run started (high score %d)", self.state.high_score)

    # ----- Tick -----
    def advance(self) -> None:
        with self._lock:
            s = self.state
            if s.paused or s.game_over:
                return

            s.direction = s.pending
            new_head = next_head(s.snake[0], s.direction)

            cause = check_collision(new_head, s.snake, self.cfg.grid_size)
            if cause is not None:
                s.game_over = True
                if s.score > s.high_score:
                    s.high_score = s.score
                    logger.info("New high score: %d", s.high_score)
                logger.info("Game over (%s collision at %s), score %d", cause, new_head, s.score)
                return

            s.snake.insert(0, new_head)
            if new_head == s.food:
                s.score += self.cfg.food_points
                s.food = spawn_food(s.snake, self.rng, self.cfg.grid_size)
                logger.debug("Food eaten, score %d, next food at %s", s.score, s.food)
                if s.food is None:
                    logger.info("Board is full, no cell left for food")
            else:
                s.snake.pop()

            assert not hits_wall(s.snake[0], self.cfg.grid_size), "head left the board"

    # ----- Output -----
    def snapshot(self) -> Snapshot:
        with self._lock:
            s = self.state
            return Snapshot(
                snake=tuple(s.snake),
                food=s.food,
                direction=s.direction,
                score=s.score,
                high_score=s.high_score,
                game_over=s.game_over,
                paused=s.paused,
                grid_size=self.cfg.grid_size,
            )

    def load(self, state: GameState) -> None:
        """Replace the current state wholesale (scripted setups, replays)."""
        with self._lock:
            self.state = replace(state, snake=list(state.snake))
