"""
Game engine for single-player Snake.

Owns the snake, the food and the scoreboard, and advances them one tick
at a time. The engine never raises for gameplay; the end of a session is
reported through the game_over / game_won flags.
"""

import logging
import random
from typing import List, Optional

from .constants import Coordinate, DIRECTIONS, MIN_BOARD_SIZE
from .food import Food
from .game_state import GameSnapshot
from .scoreboard import Scoreboard
from .snake import Snake
from .store import InMemoryKeyValueStore
from utils.rand_int import rand_int

logger = logging.getLogger(__name__)


class Game:
    """
    Manages:
      - Board (board_size x board_size)
      - Snake
      - Food
      - Score and high score
      - Win / loss flags
    """

    def __init__(self, board_size: int, store=None, rng: Optional[random.Random] = None):
        if board_size < MIN_BOARD_SIZE:
            raise ValueError(
                f"Board size must be at least {MIN_BOARD_SIZE}, got {board_size}."
            )

        if store is None:
            store = InMemoryKeyValueStore()

        self.board_size = board_size
        self.store = store
        self.rng = rng
        self.game_over = False
        self.game_won = False
        self.scoreboard = Scoreboard(self.store)

        self._initialize_snake_and_food()

    def _initialize_snake_and_food(self) -> None:
        """Place a fresh snake away from the walls and spawn food."""
        start_location = (
            rand_int(2, self.board_size - 3, self.rng),
            rand_int(2, self.board_size - 3, self.rng),
        )
        start_direction = DIRECTIONS[rand_int(0, len(DIRECTIONS) - 1, self.rng)]

        self.snake = Snake(start_location, start_direction)
        self.food = Food()
        self.respawn_food()

        logger.debug(f"Snake spawned at {start_location} heading {start_direction}")

    def advance_tick(self) -> None:
        """
        Execute one tick:
          1) Move the snake
          2) End the game on self-collision
          3) End the game if the head left the board
          4) On food: score, grow, then either win or respawn the food
        """
        if self.game_over:
            logger.debug("Game is already over. Ignoring tick.")
            return

        self.snake.move()

        if self.snake.is_self_collision():
            self.game_over = True
            logger.info(f"Game over: self collision (score {self.scoreboard.get_score()})")
            return

        head_x, head_y = self.snake.get_head()
        if head_x < 0 or head_x >= self.board_size or head_y < 0 or head_y >= self.board_size:
            self.game_over = True
            logger.info(f"Game over: hit wall at {(head_x, head_y)} (score {self.scoreboard.get_score()})")
            return

        if (head_x, head_y) == self.food.get_location():
            self.scoreboard.increment_score()
            self.snake.grow()

            # Must run before respawning: a full board has no free cell left
            if self.snake.get_body_length() == self.board_size * self.board_size:
                self.game_won = True
                self.game_over = True
                logger.info(f"Game won with score {self.scoreboard.get_score()}")
                return

            self.respawn_food()

    def respawn_food(self) -> None:
        """Move the food to a random cell not occupied by the snake."""
        while True:
            location = (
                rand_int(0, self.board_size - 1, self.rng),
                rand_int(0, self.board_size - 1, self.rng),
            )
            if not self.snake.occupies(location):
                break
        self.food.set_location(location)

    def get_food_location(self) -> Coordinate:
        return self.food.get_location()

    def set_snake_direction(self, direction: str) -> None:
        self.snake.set_direction(direction)

    def get_snake_direction(self) -> str:
        return self.snake.get_direction()

    def get_snake_body(self) -> List[Coordinate]:
        """Get a copy of the snake's body, head first."""
        return self.snake.get_body()

    def is_game_won(self) -> bool:
        return self.game_won

    def is_game_over(self) -> bool:
        """True once the game has ended, whether lost or won."""
        return self.game_over

    def get_current_score(self) -> int:
        return self.scoreboard.get_score()

    def get_high_score(self) -> int:
        return self.scoreboard.get_high_score()

    def snapshot(self) -> GameSnapshot:
        """
        Return a snapshot of the current board as a GameSnapshot.
        """
        return GameSnapshot(
            board_size=self.board_size,
            snake_body=self.get_snake_body(),
            food=self.get_food_location(),
            direction=self.get_snake_direction(),
            score=self.get_current_score(),
            high_score=self.get_high_score(),
            game_over=self.game_over,
            game_won=self.game_won
        )

    def reset_game(self) -> None:
        """
        Start a new session on this same instance.

        Only the stored high score carries over.
        """
        self._initialize_snake_and_food()
        self.scoreboard = Scoreboard(self.store)
        self.game_over = False
        self.game_won = False
        logger.info(f"Game reset (high score {self.scoreboard.get_high_score()})")

    def __repr__(self):
        return (
            f"<Game board_size={self.board_size}, score={self.get_current_score()}, "
            f"game_over={self.game_over}, game_won={self.game_won}>"
        )
