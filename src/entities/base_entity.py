"""
base_entity.py
--------------
Interface every entity handed to the engine implements, plus a sprite-backed
base class for the bundled game.

Coordinate System
-----------------
Sprite entities use top-left pixel coordinates on the canvas, matching the
tile grid: column c starts at c * TILE_WIDTH, row r at r * TILE_HEIGHT.
"""

from abc import ABC, abstractmethod

from src.core.runtime.game_settings import Board


class Entity(ABC):
    """Anything the engine updates and renders each playing frame."""

    @abstractmethod
    def update(self, dt: float):
        """Advance state by `dt` seconds."""

    @abstractmethod
    def render(self):
        """Draw the current state."""


class SpriteEntity(Entity):
    """
    Entity drawn as a single cached image.

    The canvas and resource cache are injected rather than looked up, so
    entities can be built before assets finish loading.
    """

    __slots__ = ("canvas", "resources", "sprite", "x", "y")

    # Sprites are taller than a tile; lift them so feet sit on the row
    Y_OFFSET = -10

    def __init__(self, canvas, resources, sprite: str, x: float = 0, y: float = 0):
        self.canvas = canvas
        self.resources = resources
        self.sprite = sprite
        self.x = x
        self.y = y

    def update(self, dt: float):
        pass

    def render(self):
        self.canvas.draw_image(self.resources.get(self.sprite), self.x, self.y)

    # ===========================================================
    # Grid Helpers
    # ===========================================================

    @staticmethod
    def cell_to_pixels(col: int, row: int):
        return col * Board.TILE_WIDTH, row * Board.TILE_HEIGHT + SpriteEntity.Y_OFFSET
