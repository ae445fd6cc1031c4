"""
Game constants for the Snake engine.
"""

from typing import Dict, Tuple

# A board cell as (x, y); origin top-left, y grows downward
Coordinate = Tuple[int, int]

# Movement directions
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Ordering matters: the engine picks a start direction by index
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

DIRECTION_OFFSETS: Dict[str, Coordinate] = {
    RIGHT: (1, 0),
    LEFT:  (-1, 0),
    UP:    (0, -1),  # Up => y - 1
    DOWN:  (0, 1),   # Down => y + 1
}

OPPOSITE_DIRECTIONS = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Game settings
BOARD_SIZE = 40
MIN_BOARD_SIZE = 5
FPS = 15
FOOD_START_LOCATION: Coordinate = (10, 10)

# Persistent storage
HIGH_SCORE_KEY = "highScore"
