"""
gem.py
------
Collectible gem that cycles colour on its own frame counter.
"""

import random

from src.core.runtime.game_settings import Board, Rules
from src.entities.base_entity import SpriteEntity


class Gem(SpriteEntity):
    """Sits on a stone tile until collected, then moves somewhere new."""

    SPRITES = (
        "images/Gem Orange.png",
        "images/Gem Green.png",
        "images/Gem Blue.png",
    )
    STONE_ROWS = (1, 2, 3, 4)

    def __init__(self, canvas, resources, col: int = 0, row: int = 2,
                 blink_frames: int = Rules.GEM_BLINK_FRAMES, rng=None):
        x, y = self.cell_to_pixels(col, row)
        super().__init__(canvas, resources, self.SPRITES[0], x, y)
        self.col = col
        self.row_index = row
        self.blink_frames = max(int(blink_frames), 1)
        self.frame = 0
        self.rng = rng or random.Random()

    def update(self, dt: float = None):
        """Advance the colour cycle. Ignores `dt`; one step per frame."""
        self.frame += 1
        index = (self.frame // self.blink_frames) % len(self.SPRITES)
        self.sprite = self.SPRITES[index]

    def place(self, col: int, row: int):
        self.col = col
        self.row_index = row
        self.x, self.y = self.cell_to_pixels(col, row)

    def relocate(self):
        """Move to a random stone tile."""
        self.place(
            self.rng.randrange(Board.COLS),
            self.rng.choice(self.STONE_ROWS),
        )
