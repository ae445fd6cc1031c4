"""
Domain entities for the Snake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (storage, rendering, input handling).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, DIRECTIONS, OPPOSITE_DIRECTIONS,
    BOARD_SIZE, FPS, HIGH_SCORE_KEY,
)
from .snake import Snake
from .food import Food
from .scoreboard import Scoreboard
from .game_state import GameSnapshot
from .store import KeyValueStore, InMemoryKeyValueStore
from .game import Game

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'DIRECTIONS', 'OPPOSITE_DIRECTIONS',
    'BOARD_SIZE', 'FPS', 'HIGH_SCORE_KEY',
    'Snake',
    'Food',
    'Scoreboard',
    'GameSnapshot',
    'KeyValueStore',
    'InMemoryKeyValueStore',
    'Game',
]
