"""
overlay_screens.py
------------------
Loads the text copy for full-screen overlays from YAML.

Each screen is a list of lines; a line's `row` is its baseline offset in
tile heights from the top of the canvas.
"""

import yaml
from pathlib import Path
from typing import Dict, List, Tuple

from src.core.debug.debug_logger import DebugLogger


CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "screens.yaml"

DEFAULT_SCREENS = {
    "intro": [
        {"text": "Instructions for the game!", "row": 2},
        {"text": "The object of the game is to grab gems and take", "row": 3},
        {"text": "them to the princess.  Beware of the enemy bugs.", "row": 3.5},
        {"text": "Don't even think of getting to the princess without her gems.", "row": 4},
        {"text": "left/right/up/down keys to move player", "row": 5},
        {"text": "Press any key to Start", "row": 6},
    ],
    "game_over_won": [
        {"text": "You Win", "row": 3},
        {"text": "Press any key to restart", "row": 5},
    ],
    "game_over_lost": [
        {"text": "Game Over", "row": 2},
        {"text": "You Lost", "row": 3},
        {"text": "Press any key to restart", "row": 5},
    ],
}


class OverlayScreens:
    """Screen name -> [(text, row), ...] lookup backed by a YAML file."""

    def __init__(self, path=CONFIG_PATH):
        self.path = Path(path)
        self.screens: Dict[str, List[Tuple[str, float]]] = {}
        self._load()

    def _load(self):
        config = {}
        if self.path.exists():
            with open(self.path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
            DebugLogger.system(f"Loaded overlay copy from {self.path.name}", category="loading")
        else:
            DebugLogger.warn(f"Overlay config not found: {self.path}, using defaults")

        for name, lines in DEFAULT_SCREENS.items():
            lines = config.get(name, lines)
            self.screens[name] = [(str(line["text"]), float(line["row"])) for line in lines]

    def lines(self, name: str) -> List[Tuple[str, float]]:
        """
        Raises:
            KeyError: Unknown screen name
        """
        return self.screens[name]
