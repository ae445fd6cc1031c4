"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Set

from .constants import Coordinate, DIRECTION_OFFSETS


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        occupied: set mirroring positions for O(1) collision checks
        direction: current direction of travel
    """

    def __init__(self, start_location: Coordinate, start_direction: str):
        self.positions = deque([tuple(start_location)])
        self.occupied: Set[Coordinate] = {tuple(start_location)}
        self.direction = start_direction
        self._self_collision = False

    def occupies(self, cell: Coordinate) -> bool:
        """Return True if any body segment sits on the given cell."""
        return tuple(cell) in self.occupied

    def move(self) -> None:
        """
        Move the snake one step in its current direction.

        The tail is vacated before the collision test, so stepping into the
        cell the tail is leaving is legal. On a self-collision the flag is set
        and the head is not added; the body is left one segment short.
        """
        head_x, head_y = self.positions[0]
        dx, dy = DIRECTION_OFFSETS.get(self.direction, (0, 0))
        new_head = (head_x + dx, head_y + dy)

        tail = self.positions.pop()
        # grow() leaves a duplicated tail; keep the cell while its copy remains
        if not self.positions or self.positions[-1] != tail:
            self.occupied.discard(tail)

        if self.occupies(new_head):
            self._self_collision = True
            return

        self.positions.appendleft(new_head)
        self.occupied.add(new_head)

    def grow(self) -> None:
        """
        Grow by duplicating the last segment.

        Only correct when called right after a move() that landed on food.
        """
        self.positions.append(self.positions[-1])
        self.occupied.add(self.positions[-1])

    def set_direction(self, direction: str) -> None:
        self.direction = direction

    def get_direction(self) -> str:
        return self.direction

    def get_head(self) -> Coordinate:
        return self.positions[0]

    def get_body(self) -> List[Coordinate]:
        """Return a copy of the body segments, head first."""
        return list(self.positions)

    def get_body_length(self) -> int:
        return len(self.positions)

    def is_self_collision(self) -> bool:
        return self._self_collision

    def __repr__(self):
        return (
            f"<Snake head={self.get_head()}, length={self.get_body_length()}, "
            f"direction={self.direction}>"
        )
