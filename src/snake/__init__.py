# src/snake/__init__.py
"""Single-player grid snake: rules engine plus a pygame front end."""

from .game import GameEngine, GameState, Snapshot, Phase, spawn_food

__all__ = ["GameEngine", "GameState", "Snapshot", "Phase", "spawn_food"]
