"""
main.py
-------
Entry point: builds the window, services, entities and engine, then hands
control to the frame scheduler.

Usage:
    python -m src.main                   # Start with the instructions screen
    python -m src.main --skip-intro      # Jump straight into play
    python -m src.main --strict-assets   # Abort if any image is missing
"""

import argparse
import sys

import pygame

from src.core.debug.debug_logger import DebugLogger, LoggerConfig
from src.core.runtime.engine import Engine
from src.core.runtime.frame_scheduler import FrameScheduler
from src.core.runtime.game_settings import Assets, Display, Rules
from src.core.runtime.session_state import SessionState
from src.core.services.config_manager import load_config
from src.core.services.input_bridge import InputBridge
from src.core.services.resource_cache import ResourceCache
from src.entities.enemy import Enemy
from src.entities.entity_set import EntitySet
from src.entities.gem import Gem
from src.entities.player import Player
from src.entities.princess import Princess
from src.graphics.canvas import Canvas
from src.systems.collision_rules import CollisionRules


# ===========================================================
# Wiring
# ===========================================================

def build_entities(canvas, resources, session, rules_config):
    """Create the bundled game's entities from rules.json."""
    player = Player(canvas, resources, session)
    princess = Princess(canvas, resources)
    gem = Gem(canvas, resources,
              blink_frames=rules_config.get("gem_blink_frames", Rules.GEM_BLINK_FRAMES))
    gem.relocate()

    entities = EntitySet(player, princess, gem)
    for entry in rules_config.get("enemies", []):
        entities.add_enemy(Enemy(canvas, resources, row=entry["row"],
                                 x=entry.get("x", 0), speed=entry.get("speed", 150)))
    return entities


def build_engine(window, args):
    """Assemble services, entities and the engine around a window surface."""
    canvas = Canvas(window)
    input_bridge = InputBridge()
    scheduler = FrameScheduler(input_bridge, fps=args.fps, present=pygame.display.flip)
    resources = ResourceCache(root=args.asset_root, strict=args.strict_assets)
    session = SessionState(intro=not args.skip_intro)

    rules_config = load_config("rules.json", {"enemies": []})
    entities = build_entities(canvas, resources, session, rules_config)
    rules = CollisionRules(session, entities, rules_config)

    input_bridge.add_listener(pygame.KEYDOWN, entities.player.handle_input)

    engine = Engine(canvas, resources, session, entities, input_bridge, scheduler,
                    collision_check=rules.check)
    engine.on_reset(rules.reset_round)
    return engine


# ===========================================================
# Entry Point
# ===========================================================

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Gem Quest arcade engine")
    parser.add_argument("--skip-intro", action="store_true",
                        help="Start in the playing scene")
    parser.add_argument("--fps", type=int, default=Display.FPS,
                        help="Target frames per second")
    parser.add_argument("--asset-root", default=Assets.ROOT,
                        help="Directory image paths are resolved against")
    parser.add_argument("--strict-assets", action="store_true",
                        help="Fail instead of using placeholders for missing images")
    parser.add_argument("--log-level", default=None,
                        choices=["NONE", "ERROR", "WARN", "INFO", "VERBOSE"],
                        help="Console log verbosity")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if args.log_level:
        LoggerConfig.configure(level=args.log_level)

    DebugLogger.section("Initializing Gem Quest")
    pygame.init()
    pygame.font.init()
    pygame.display.set_caption(Display.CAPTION)
    window = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))
    DebugLogger.init_entry("Pygame")
    DebugLogger.init_sub(f"Window {Display.WIDTH}x{Display.HEIGHT}")

    engine = build_engine(window, args)

    manifest = load_config(Assets.MANIFEST, {"images": []})
    handle = engine.resources.load(manifest["images"])
    engine.start()

    try:
        engine.resources.await_ready(handle)
        engine.scheduler.run()
    except Exception as e:
        DebugLogger.fail(f"Engine halted: {e}")
        raise
    finally:
        pygame.quit()
        DebugLogger.system("Pygame terminated")

    return 0


if __name__ == "__main__":
    sys.exit(main())
