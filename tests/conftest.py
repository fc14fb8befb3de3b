"""
conftest.py
-----------
Shared pytest configuration and fixtures for Gem Quest tests.

Contains:
- Headless pygame setup (dummy video/audio drivers)
- Mock collaborators: canvas, resources, entities
- A controllable millisecond time source for the scheduler
"""

import os
import sys

# Must be set before pygame initializes its video subsystem
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest
from unittest.mock import MagicMock

# Make the project root importable as the `src` package parent
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.core.debug.debug_logger import LoggerConfig
from src.core.runtime.engine import Engine
from src.core.runtime.frame_scheduler import FrameScheduler
from src.core.runtime.session_state import SessionState
from src.core.services.input_bridge import InputBridge
from src.entities.entity_set import EntitySet


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    """Initialize pygame once without opening a real window."""
    LoggerConfig.ENABLE_LOGGING = False
    pygame.init()
    pygame.font.init()
    yield
    pygame.quit()


# ===========================================================
# Helpers
# ===========================================================

class FakeTime:
    """Manually advanced millisecond clock."""

    def __init__(self, start=1000.0):
        self.now = start

    def advance(self, ms):
        self.now += ms

    def __call__(self):
        return self.now


def make_keyup(key=pygame.K_SPACE):
    return pygame.event.Event(pygame.KEYUP, key=key)


def make_keydown(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def fake_time():
    return FakeTime()


@pytest.fixture
def mock_canvas():
    canvas = MagicMock()
    canvas.width = 707
    canvas.height = 706
    return canvas


@pytest.fixture
def mock_resources():
    resources = MagicMock()
    resources.get.side_effect = lambda key: f"<{key}>"
    return resources


@pytest.fixture
def mock_entities():
    """EntitySet of MagicMock entities: two enemies plus the singletons."""
    return EntitySet(
        player=MagicMock(name="player"),
        princess=MagicMock(name="princess"),
        gem=MagicMock(name="gem"),
        enemies=[MagicMock(name="enemy_0"), MagicMock(name="enemy_1")],
    )


@pytest.fixture
def input_bridge():
    return InputBridge()


@pytest.fixture
def scheduler(input_bridge, fake_time):
    return FrameScheduler(input_bridge, time_source=fake_time)


@pytest.fixture
def session():
    return SessionState(intro=False)


@pytest.fixture
def engine(mock_canvas, mock_resources, session, mock_entities, input_bridge, scheduler):
    """Engine wired to mocks; the collision hook is a MagicMock."""
    return Engine(
        mock_canvas, mock_resources, session, mock_entities,
        input_bridge, scheduler, collision_check=MagicMock(),
    )
