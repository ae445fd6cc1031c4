"""
Headless session controller sitting between a front end and the engine.

Tracks which screen the player is on (start, playing, won, lost), filters
direction input, and drives the fixed-interval tick loop. Nothing here
draws; run() hands each frame to a callback.
"""

import logging
import os
import time
from enum import Enum
from typing import Callable, Optional

from dotenv import load_dotenv

from data_access.key_value_store import get_default_store
from domain.constants import BOARD_SIZE, FPS, OPPOSITE_DIRECTIONS, VALID_MOVES
from domain.game import Game
from domain.game_state import GameSnapshot

load_dotenv()
logger = logging.getLogger(__name__)


class GameMode(Enum):
    START = "start"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


def get_board_size() -> int:
    return int(os.getenv('SNAKE_BOARD_SIZE', BOARD_SIZE))


def get_tick_interval() -> float:
    """Seconds between ticks, from SNAKE_FPS (default 15 frames per second)."""
    fps = float(os.getenv('SNAKE_FPS', FPS))
    if fps <= 0:
        raise ValueError(f"SNAKE_FPS must be positive, got {fps}")
    return 1.0 / fps


class GameSession:
    """
    Owns the explicit start/playing/won/lost mode for one Game.

    The engine only knows about its game_over / game_won flags; this class
    turns them into modes and decides when ticks may happen.
    """

    def __init__(self, game: Game, tick_interval: Optional[float] = None):
        self.game = game
        self.tick_interval = get_tick_interval() if tick_interval is None else tick_interval
        self.mode = GameMode.START
        self._stop_requested = False

    def start(self) -> None:
        if self.mode != GameMode.START:
            raise ValueError(f"Cannot start a session in mode {self.mode.value}")
        self._set_mode(GameMode.PLAYING)

    def restart(self) -> None:
        """Reset the engine after a win or loss and resume playing."""
        if self.mode not in (GameMode.WON, GameMode.LOST):
            raise ValueError(f"Cannot restart a session in mode {self.mode.value}")
        self.game.reset_game()
        self._set_mode(GameMode.PLAYING)

    def activate(self) -> None:
        """Overlay button action: start from the title screen, restart after the game ends."""
        if self.mode == GameMode.START:
            self.start()
        elif self.mode in (GameMode.WON, GameMode.LOST):
            self.restart()

    def handle_direction(self, direction: str) -> bool:
        """
        Apply a direction change from the player.

        Ignored outside of PLAYING, for unknown directions, and when it
        would reverse the snake straight into its own neck.

        Returns:
            True if the direction was applied.
        """
        if self.mode != GameMode.PLAYING or direction not in VALID_MOVES:
            return False
        if OPPOSITE_DIRECTIONS[direction] == self.game.get_snake_direction():
            return False

        self.game.set_snake_direction(direction)
        return True

    def step(self) -> Optional[GameSnapshot]:
        """
        Advance one tick.

        Returns:
            The frame to render, or None if no tick ran or the game just ended.
        """
        if self.mode != GameMode.PLAYING:
            return None

        self.game.advance_tick()

        if self.game.is_game_won():
            self._set_mode(GameMode.WON)
            return None
        if self.game.is_game_over():
            self._set_mode(GameMode.LOST)
            return None

        return self.game.snapshot()

    def run(self, on_frame: Optional[Callable[[GameSnapshot], None]] = None) -> GameMode:
        """
        Tick at a fixed interval until the game ends or stop() is called.

        Args:
            on_frame: Called with each frame produced by a tick

        Returns:
            The mode the session is in when the loop exits.
        """
        self._stop_requested = False
        while self.mode == GameMode.PLAYING and not self._stop_requested:
            frame = self.step()
            if frame is not None:
                if on_frame is not None:
                    on_frame(frame)
                time.sleep(self.tick_interval)

        logger.info(
            f"Loop exited in mode {self.mode.value} "
            f"(score {self.game.get_current_score()}, high score {self.game.get_high_score()})"
        )
        return self.mode

    def stop(self) -> None:
        """Ask run() to exit before its next tick."""
        self._stop_requested = True

    def _set_mode(self, mode: GameMode) -> None:
        logger.info(f"Session mode {self.mode.value} -> {mode.value}")
        self.mode = mode


def create_session(store=None) -> GameSession:
    """
    Build a session from the environment configuration.

    Args:
        store: Key-value store for the high score; defaults to get_default_store()
    """
    if store is None:
        store = get_default_store()
    return GameSession(Game(get_board_size(), store=store))
