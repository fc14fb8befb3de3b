"""
scene_state.py
--------------
Defines the mutually exclusive top-level scenes of a game session.
"""

from enum import Enum


class Scene(Enum):
    """Which per-frame behaviour the engine runs."""
    INTRO = "intro"            # Instructions overlay, waiting for a key
    PLAYING = "playing"        # Update + render every frame
    GAME_OVER = "game_over"    # Win/lose overlay, waiting for a key
