"""
princess.py
-----------
Goal character standing on the pedestal tile.
"""

from src.core.runtime.game_settings import Board
from src.entities.base_entity import SpriteEntity


class Princess(SpriteEntity):
    """Stationary; the player delivers gems to her."""

    SPRITE = "images/char-princess-girl.png"

    def __init__(self, canvas, resources):
        col = Board.PEDESTAL_POS[0] // Board.TILE_WIDTH
        x, y = self.cell_to_pixels(col, 0)
        super().__init__(canvas, resources, self.SPRITE, x, y)
        self.col = col
        self.row_index = 0

    def update(self, dt: float = None):
        pass
