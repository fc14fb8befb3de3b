"""
session_state.py
----------------
Shared session flags and statistics.

The single channel between the engine loop and collaborator game logic:
collaborators write the flags (game over, win, gem visibility) and stats,
the engine reads them to pick a scene and to draw the HUD.
"""

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Session
from src.core.runtime.scene_state import Scene


# ===========================================================
# Session State
# ===========================================================

class SessionState:
    """Container for the flags and stats of the running session."""

    def __init__(self, lives: int = Session.DEFAULT_LIVES,
                 score: int = Session.DEFAULT_SCORE, intro: bool = True):
        if lives < 0 or score < 0:
            raise ValueError("lives and score must be non-negative")

        # Stats
        self.lives = lives
        self.score = score

        # Scene flags
        self.intro = intro
        self.game_over = False
        self.won_game = False

        # Collaborator-owned render flag
        self.display_gem = True

    # ===========================================================
    # Scene Resolution
    # ===========================================================

    @property
    def scene(self) -> Scene:
        """Active scene. GameOver wins over Intro if both flags are set."""
        if self.game_over:
            return Scene.GAME_OVER
        if self.intro:
            return Scene.INTRO
        return Scene.PLAYING

    @property
    def is_playing(self) -> bool:
        return self.scene is Scene.PLAYING

    # ===========================================================
    # Stats
    # ===========================================================

    def add_score(self, amount: int):
        """Add points. Score never drops below zero."""
        self.score = max(self.score + amount, 0)

    def lose_life(self) -> int:
        """
        Remove one life.

        Returns:
            int: Lives remaining (never below zero)
        """
        self.lives = max(self.lives - 1, 0)
        DebugLogger.state(f"Life lost, {self.lives} remaining", category="game_state")
        return self.lives

    def end_game(self, won: bool):
        """Raise the game-over flag with the given outcome."""
        self.won_game = won
        self.game_over = True
        DebugLogger.state(f"Game over ({'won' if won else 'lost'})", category="game_state")

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset(self):
        """Restore default stats for a new session. Scene flags are left to the engine."""
        self.lives = Session.DEFAULT_LIVES
        self.score = Session.DEFAULT_SCORE
        self.won_game = False
