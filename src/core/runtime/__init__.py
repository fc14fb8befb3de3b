"""
Runtime exports.

Game-wide constants plus the frame loop building blocks.
"""

from src.core.runtime.game_settings import (
    Display,
    Board,
    Session,
    Fonts,
    Colors,
    Assets,
    Rules,
    Debug,
)
from src.core.runtime.scene_state import Scene
from src.core.runtime.session_state import SessionState
from src.core.runtime.frame_clock import FrameClock

__all__ = [
    # Configuration
    'Display',
    'Board',
    'Session',
    'Fonts',
    'Colors',
    'Assets',
    'Rules',
    'Debug',
    # State
    'Scene',
    'SessionState',
    # Timing
    'FrameClock',
]
