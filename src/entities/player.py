"""
player.py
---------
Grid-stepping player character driven by arrow keys.
"""

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Board
from src.entities.base_entity import SpriteEntity


class Player(SpriteEntity):
    """
    Moves one tile per arrow-key press, clamped to the board.

    Key presses are only honoured while the session is in the Playing scene.
    """

    SPRITE = "images/char-boy.png"
    SPRITE_WITH_GEM = "images/gem-boy.png"

    START_COL = 3
    START_ROW = Board.ROWS - 1

    MOVES = {
        pygame.K_LEFT: (-1, 0),
        pygame.K_RIGHT: (1, 0),
        pygame.K_UP: (0, -1),
        pygame.K_DOWN: (0, 1),
    }

    def __init__(self, canvas, resources, session):
        super().__init__(canvas, resources, self.SPRITE)
        self.session = session
        self.col = self.START_COL
        self.row_index = self.START_ROW
        self.has_gem = False
        self._sync_position()

    # ===========================================================
    # Input
    # ===========================================================

    def handle_input(self, event):
        """KEYDOWN listener."""
        if not self.session.is_playing:
            return
        move = self.MOVES.get(event.key)
        if move is None:
            return
        self.move(*move)

    def move(self, d_col: int, d_row: int):
        self.col = min(max(self.col + d_col, 0), Board.COLS - 1)
        self.row_index = min(max(self.row_index + d_row, 0), Board.ROWS - 1)
        DebugLogger.trace(f"Player -> ({self.col}, {self.row_index})", category="entity")

    # ===========================================================
    # Frame
    # ===========================================================

    def update(self, dt: float):
        self._sync_position()
        self.sprite = self.SPRITE_WITH_GEM if self.has_gem else self.SPRITE

    def reset(self):
        """Back to the start tile, empty-handed."""
        self.col = self.START_COL
        self.row_index = self.START_ROW
        self.has_gem = False
        self._sync_position()

    def _sync_position(self):
        self.x, self.y = self.cell_to_pixels(self.col, self.row_index)
