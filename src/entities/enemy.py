"""
enemy.py
--------
Bug enemy crossing a stone row left to right.
"""

from src.core.runtime.game_settings import Board, Display
from src.entities.base_entity import SpriteEntity


class Enemy(SpriteEntity):
    """Moves right at a constant speed and wraps back to the left edge."""

    SPRITE = "images/enemy-bug.png"

    def __init__(self, canvas, resources, row: int, x: float = -Board.TILE_WIDTH,
                 speed: float = 150):
        """
        Args:
            row: Board row the bug runs along
            x: Starting pixel x (negative values start off-screen)
            speed: Pixels per second
        """
        _, y = self.cell_to_pixels(0, row)
        super().__init__(canvas, resources, self.SPRITE, x, y)
        self.row_index = row
        self.start_x = x
        self.speed = speed

    def update(self, dt: float):
        self.x += self.speed * dt
        if self.x > Display.WIDTH:
            self.x = -Board.TILE_WIDTH

    def reset(self):
        self.x = self.start_x
