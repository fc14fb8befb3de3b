"""
test_bootstrap.py
-----------------
Integration test: real wiring from src.main on a headless surface.

Assets are absent, so the lenient resource cache serves placeholders.
"""

import pygame
import pytest

from src.core.runtime.game_settings import Assets, Display
from src.core.runtime.scene_state import Scene
from src.core.services.config_manager import load_config
from src.core.services.resource_cache import ResourceError
from src.main import build_engine, parse_args

from conftest import make_keydown, make_keyup


@pytest.fixture
def booted(tmp_path):
    args = parse_args(["--asset-root", str(tmp_path)])
    engine = build_engine(pygame.Surface((Display.WIDTH, Display.HEIGHT)), args)
    manifest = load_config(Assets.MANIFEST, {"images": []})
    handle = engine.resources.load(manifest["images"])
    engine.start()
    engine.resources.await_ready(handle)
    return engine


def test_parse_args_defaults():
    args = parse_args([])
    assert args.fps == Display.FPS
    assert not args.skip_intro
    assert not args.strict_assets


def test_starts_on_intro_overlay(booted):
    assert booted.scene is Scene.INTRO
    assert booted.intro_displayed
    assert booted.scheduler.has_pending(booted.main)


def test_key_up_then_play_frames(booted):
    booted.input_bridge.dispatch(make_keyup())
    assert booted.scene is Scene.PLAYING

    booted.input_bridge.dispatch(make_keydown(pygame.K_UP))
    for _ in range(3):
        booted.scheduler.run_frame()

    player = booted.entities.player
    assert player.row_index == player.START_ROW - 1
    assert len(booted.entities.enemies) == 5


def test_strict_assets_refuse_missing_images(tmp_path):
    args = parse_args(["--asset-root", str(tmp_path), "--strict-assets"])
    engine = build_engine(pygame.Surface((Display.WIDTH, Display.HEIGHT)), args)
    handle = engine.resources.load(["images/water-block.png"])
    with pytest.raises(ResourceError):
        engine.resources.await_ready(handle)
