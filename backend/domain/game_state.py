"""
GameSnapshot entity - one renderable frame of the game.
"""

from typing import List

from .constants import Coordinate


class GameSnapshot:
    """
    A snapshot of the game at a specific tick.

    Attributes:
        board_size: width and height of the square board
        snake_body: list of (x, y) from head to tail
        food: (x, y) position of the food
        direction: the snake's direction of travel
        score: current session score
        high_score: best score recorded so far
        game_over: True once the session has ended (won or lost)
        game_won: True if the snake filled the board
    """

    def __init__(
        self,
        board_size: int,
        snake_body: List[Coordinate],
        food: Coordinate,
        direction: str,
        score: int,
        high_score: int,
        game_over: bool = False,
        game_won: bool = False
    ):
        self.board_size = board_size
        self.snake_body = snake_body
        self.food = food
        self.direction = direction
        self.score = score
        self.high_score = high_score
        self.game_over = game_over
        self.game_won = game_won

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        S = snake body
        Row 0 is printed first, matching the board's top-left origin.
        """
        size = self.board_size
        board = [['.' for _ in range(size)] for _ in range(size)]

        fx, fy = self.food
        if 0 <= fx < size and 0 <= fy < size:
            board[fy][fx] = 'F'

        # Paint tail to head so the head always wins its cell
        for pos_idx in range(len(self.snake_body) - 1, -1, -1):
            x, y = self.snake_body[pos_idx]
            if not (0 <= x < size and 0 <= y < size):
                continue
            board[y][x] = 'H' if pos_idx == 0 else 'S'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(size)]
        result.append("   " + " ".join(str(i % 10) for i in range(size)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameSnapshot head={self.snake_body[0] if self.snake_body else None}, "
            f"length={len(self.snake_body)}, food={self.food}, score={self.score}>"
        )
