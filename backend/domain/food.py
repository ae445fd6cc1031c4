"""
Food entity for the game engine.
"""

from .constants import Coordinate, FOOD_START_LOCATION


class Food:
    """
    A single piece of food on the board.

    Placement is decided by the game, not by the food itself; the food
    only remembers where it was put.
    """

    def __init__(self, location: Coordinate = FOOD_START_LOCATION):
        self.location: Coordinate = tuple(location)

    def get_location(self) -> Coordinate:
        return self.location

    def set_location(self, location: Coordinate) -> None:
        self.location = tuple(location)

    def __repr__(self):
        return f"<Food location={self.location}>"
