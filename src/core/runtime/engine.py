"""
engine.py
---------
Frame loop and scene state machine.

Responsibilities
----------------
- Tick the frame clock once per refresh
- Pick the active scene (GameOver > Intro > Playing) from the session flags
- Run one-shot scene enter-actions (overlay + key-up listener)
- Update then render entities while playing
- Reset the session and resume the loop after a game over

Scene flow
----------
    Intro --key up--> Playing --collaborator sets game_over--> GameOver
    GameOver --key up--> reset --> Playing
"""

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.frame_clock import FrameClock
from src.core.runtime.scene_state import Scene
from src.core.runtime.update_dispatcher import UpdateDispatcher
from src.graphics.render_pipeline import RenderPipeline


class Engine:
    """Drives the per-frame update/render cycle and scene transitions."""

    def __init__(self, canvas, resources, session, entities, input_bridge,
                 scheduler, clock=None, collision_check=None, screens=None):
        """
        Args:
            canvas: Canvas drawing context shared with entities
            resources: ResourceCache the board art comes from
            session: SessionState shared with collaborator logic
            entities: EntitySet to update and render
            input_bridge: InputBridge for scene key-up listeners
            scheduler: FrameScheduler re-invoking `main` each refresh
            clock: FrameClock (a fresh one if omitted)
            collision_check: Optional collaborator collision hook
            screens: Optional OverlayScreens copy
        """
        DebugLogger.init_entry("Engine")

        self.canvas = canvas
        self.resources = resources
        self.session = session
        self.entities = entities
        self.input_bridge = input_bridge
        self.scheduler = scheduler
        self.clock = clock or FrameClock()

        self.dispatcher = UpdateDispatcher(entities, collision_check)
        self.renderer = RenderPipeline(canvas, resources, session, entities, screens)

        # Enter-action guards, one per overlay scene
        self.intro_displayed = False
        self.game_over_displayed = False

        self._reset_hooks = []

        DebugLogger.init_sub(f"Entities: {len(entities)} ({len(entities.enemies)} enemies)", level=1)

    # ===========================================================
    # Startup
    # ===========================================================

    def start(self):
        """Begin the loop once every queued image is resident."""
        DebugLogger.system("Waiting for resources")
        self.resources.on_ready(self.init)

    def init(self):
        """(Re)start the loop with a freshly seeded clock."""
        self.clock.seed(self.scheduler.now())
        self.session.game_over = False
        self.game_over_displayed = False
        DebugLogger.state(f"Loop started in {self.scene.name}")
        self.main()

    def on_reset(self, callback):
        """Register a zero-argument callback run on every session reset."""
        self._reset_hooks.append(callback)

    @property
    def scene(self) -> Scene:
        return self.session.scene

    # ===========================================================
    # Frame
    # ===========================================================

    def main(self):
        """One frame: tick, run the active scene, schedule the next frame."""
        now = self.scheduler.now()
        dt = self.clock.tick(now)

        scene = self.scene
        if scene is Scene.GAME_OVER:
            if not self.game_over_displayed:
                self._enter_game_over()
        elif scene is Scene.INTRO:
            if not self.intro_displayed:
                self._enter_intro()
        else:
            self.update(dt)
            self.render()

        self.scheduler.request_frame(self.main)

    def update(self, dt: float):
        self.dispatcher.update(dt)

    def render(self):
        self.renderer.render()

    # ===========================================================
    # Scene Enter-Actions
    # ===========================================================

    def _enter_intro(self):
        self.renderer.display_intro_screen()
        self.intro_displayed = True
        self.input_bridge.add_listener(pygame.KEYUP, self.intro_keyup_listener)
        DebugLogger.state("Entered INTRO")

    def _enter_game_over(self):
        won = self.session.won_game
        self.renderer.display_game_over_screen(won)
        self.game_over_displayed = True
        self.input_bridge.add_listener(pygame.KEYUP, self.game_over_keyup_listener)
        DebugLogger.state(f"Entered GAME_OVER ({'won' if won else 'lost'})")

    # ===========================================================
    # Key-Up Listeners
    # ===========================================================

    def intro_keyup_listener(self, event=None):
        """Leave the intro and resume the loop."""
        self.input_bridge.remove_listener(pygame.KEYUP, self.intro_keyup_listener)
        self.session.intro = False
        self.intro_displayed = False
        self.canvas.clear()
        self.clock.seed(self.scheduler.now())
        DebugLogger.state("INTRO -> PLAYING")
        self.scheduler.request_frame(self.main)

    def game_over_keyup_listener(self, event=None):
        """Leave the game-over screen and start a fresh session."""
        self.input_bridge.remove_listener(pygame.KEYUP, self.game_over_keyup_listener)
        self.session.game_over = False
        DebugLogger.state("GAME_OVER -> PLAYING")
        self.reset()

    # ===========================================================
    # Reset
    # ===========================================================

    def reset(self):
        """Clear the canvas, restore default stats, and restart the loop."""
        self.canvas.clear()
        self.session.reset()
        for callback in self._reset_hooks:
            callback()
        DebugLogger.state(f"Session reset (lives={self.session.lives}, score={self.session.score})",
                          category="game_state")
        self.init()
