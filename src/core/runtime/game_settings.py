"""
game_settings.py
----------------
Centralized constants for all engine systems.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Canvas and window configuration."""
    WIDTH: int = 707
    HEIGHT: int = 706
    FPS: int = 60
    CAPTION: str = "Gem Quest"


# ===========================================================
# Board Layout
# ===========================================================

class Board:
    """Tile grid drawn behind every playing frame."""
    TILE_WIDTH: int = 101
    TILE_HEIGHT: int = 83
    ROWS: int = 7
    COLS: int = 7

    # One image per row, plus the pedestal tile at index 7
    ROW_IMAGES = (
        "images/water-block.png",   # Top row is water
        "images/stone-block.png",
        "images/stone-block.png",
        "images/stone-block.png",
        "images/stone-block.png",
        "images/grass-block.png",
        "images/grass-block.png",
        "images/small-stone.png",
    )
    PEDESTAL_INDEX: int = 7
    PEDESTAL_POS = (303, 0)

    HUD_Y: int = 655


# ===========================================================
# Session Defaults
# ===========================================================

class Session:
    """Values restored on every session reset."""
    DEFAULT_LIVES: int = 3
    DEFAULT_SCORE: int = 0


# ===========================================================
# Font Configuration
# ===========================================================

class Fonts:
    DIR: str = "assets/fonts"
    DEFAULT: str = None  # None -> pygame's bundled default font
    HUD_SIZE: int = 28
    OVERLAY_SIZE: int = 26


# ===========================================================
# Colors
# ===========================================================

class Colors:
    """Overlay and text colors (RGB)."""
    OVERLAY_BACKGROUND = (204, 0, 0)
    OVERLAY_TEXT = (255, 255, 255)
    HUD_TEXT = (255, 255, 255)
    CLEAR = (0, 0, 0)


# ===========================================================
# Assets
# ===========================================================

class Assets:
    """Image loading behaviour."""
    ROOT: str = "."
    MANIFEST: str = "assets.json"
    STRICT: bool = False
    PLACEHOLDER_SIZE = (101, 171)


# ===========================================================
# Reference Game Rules
# ===========================================================

class Rules:
    """Tuning for the bundled collaborator game (overridable via rules.json)."""
    GEM_POINTS: int = 10
    DELIVERY_POINTS: int = 100
    WIN_SCORE: int = 330
    ENEMY_HIT_RANGE: int = 60
    GEM_BLINK_FRAMES: int = 30


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Diagnostic toggles -- not related to logging."""
    FRAME_TIME_WARNING: float = 50.0
